"""chatmarkup — universal message element tree for chat platforms.

Parse message markup into a forest of elements, query it with type
selectors, rewrite it with transform rules, and serialize it back:

    >>> from chatmarkup import h, parse, select
    >>> forest = parse('<p>hi <at id="42"/></p>')
    >>> select(forest, 'p > at')[0].attrs
    {'id': '42'}
    >>> str(h('a', {'disabled': True}))
    '<a disabled/>'
"""

__version__ = "1.0.0"

from .element import Content, Element, h, is_element, text, to_element, to_elements, to_string
from .errors import MarkupError, ParseError
from .escape import escape, unescape
from .factories import at, audio, create_asset_factory, create_factory, file, image, quote, sharp, video
from .parser import parse
from .render import (
    MessageEncoder,
    PlainTextEncoder,
    TelegramHTMLEncoder,
    collect_media,
    find_quote_id,
    to_plain_text,
    to_telegram_html,
)
from .selector import Selector, iter_select, parse_selector, select
from .transform import transform, transform_async

__all__ = [
    # Model
    "Content",
    "Element",
    "h",
    "is_element",
    "text",
    "to_element",
    "to_elements",
    "to_string",
    # Escaping
    "escape",
    "unescape",
    # Factories
    "at",
    "sharp",
    "quote",
    "image",
    "video",
    "audio",
    "file",
    "create_factory",
    "create_asset_factory",
    # Parsing / querying / transforming
    "parse",
    "Selector",
    "parse_selector",
    "select",
    "iter_select",
    "transform",
    "transform_async",
    # Rendering
    "MessageEncoder",
    "PlainTextEncoder",
    "TelegramHTMLEncoder",
    "to_plain_text",
    "to_telegram_html",
    "collect_media",
    "find_quote_id",
    # Errors
    "MarkupError",
    "ParseError",
]
