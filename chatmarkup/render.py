"""Outbound renderers — universal element tree → platform text.

Platform channels subclass MessageEncoder and implement visit() per element
type. Two encoders ship with the package:

  PlainTextEncoder     plain text for channels without rich formatting
  TelegramHTMLEncoder  Telegram's HTML subset:
                         <b>, <i>, <u>, <s>, <code>, <pre>, <a href>,
                         <tg-spoiler>, <blockquote>

Media elements (image/video/audio/file) and quotes are not part of the text
body. Channels send them separately: see collect_media() and find_quote_id().
"""

import logging
from typing import Optional, Union

from .element import Element, to_elements
from .escape import escape
from .parser import parse
from .selector import iter_select, select

logger = logging.getLogger("chatmarkup.render")

MEDIA_TYPES = ("image", "video", "audio", "file")

# Universal tag → Telegram HTML tag
_TELEGRAM_TAGS = {
    "b": "b",
    "strong": "b",
    "i": "i",
    "em": "i",
    "u": "u",
    "ins": "u",
    "s": "s",
    "del": "s",
    "strike": "s",
    "code": "code",
    "pre": "pre",
    "spl": "tg-spoiler",
    "blockquote": "blockquote",
}


class MessageEncoder:
    """Base visitor that accumulates rendered text in ``self.content``."""

    def __init__(self):
        self.content = ""

    def encode(self, source: Union[str, list[Element]]) -> str:
        self.content = ""
        self.render(parse(source) if isinstance(source, str) else to_elements(source))
        return self.content.strip("\n")

    def render(self, elements: list[Element]):
        for element in elements:
            self.visit(element)

    def visit(self, element: Element):
        raise NotImplementedError

    def newline(self):
        if self.content and not self.content.endswith("\n"):
            self.content += "\n"

    def block(self, element: Element):
        """Render children on their own line(s)."""
        self.newline()
        self.render(element.children)
        self.newline()


class PlainTextEncoder(MessageEncoder):

    def __init__(self, include_media: bool = True):
        super().__init__()
        self.include_media = include_media

    def visit(self, element: Element):
        type, attrs = element.type, element.attrs
        if type == "text":
            self.content += attrs.get("content", "")
        elif type == "at":
            if attrs.get("type") == "all":
                self.content += "@everyone"
            else:
                self.content += "@" + (attrs.get("name") or attrs.get("id", ""))
        elif type == "sharp":
            self.content += "#" + (attrs.get("name") or attrs.get("id", ""))
        elif type == "br":
            self.content += "\n"
        elif type in ("p", "message"):
            self.block(element)
        elif type in MEDIA_TYPES:
            if self.include_media:
                self.content += f"[{type}]"
        elif type == "quote":
            pass
        else:
            self.render(element.children)


class TelegramHTMLEncoder(MessageEncoder):

    def visit(self, element: Element):
        type, attrs = element.type, element.attrs
        if type == "text":
            self.content += escape(attrs.get("content", ""))
        elif type in _TELEGRAM_TAGS:
            if not element.children:
                return
            tag = _TELEGRAM_TAGS[type]
            self.content += f"<{tag}>"
            self.render(element.children)
            self.content += f"</{tag}>"
        elif type == "a":
            href = attrs.get("href")
            if href:
                self.content += f'<a href="{escape(href, True)}">'
                self.render(element.children)
                self.content += "</a>"
            else:
                self.render(element.children)
        elif type == "at":
            if attrs.get("type") == "all":
                self.content += "@everyone"
            elif attrs.get("id"):
                label = escape("@" + (attrs.get("name") or attrs["id"]))
                self.content += f'<a href="tg://user?id={escape(attrs["id"], True)}">{label}</a>'
            elif attrs.get("name"):
                self.content += escape("@" + attrs["name"])
        elif type == "sharp":
            self.content += escape("#" + (attrs.get("name") or attrs.get("id", "")))
        elif type == "br":
            self.content += "\n"
        elif type in ("p", "message"):
            self.block(element)
        elif type in MEDIA_TYPES or type == "quote":
            logger.debug("Skipping <%s> in Telegram text body", type)
        else:
            self.render(element.children)


def to_plain_text(source: Union[str, list[Element]], include_media: bool = True) -> str:
    return PlainTextEncoder(include_media=include_media).encode(source)


def to_telegram_html(source: Union[str, list[Element]]) -> str:
    return TelegramHTMLEncoder().encode(source)


def collect_media(source: Union[str, list[Element]]) -> list[Element]:
    """All media elements in document order."""
    return select(source, ", ".join(MEDIA_TYPES))


def find_quote_id(source: Union[str, list[Element]]) -> Optional[str]:
    """Id of the first <quote> element, if any."""
    quote = next(iter_select(source, "quote"), None)
    return quote.attrs.get("id") if quote is not None else None
