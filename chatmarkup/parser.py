"""Markup parser — wire text to a forest of elements.

The parser is deliberately forgiving. Closing tags pop whatever element is
open without comparing names, a closing tag with nothing open is dropped,
and tags still open at the end of the input keep their content nested
inside them. Payloads already seen in the wild depend on this; strict mode
(``strict=True`` or ``CHATMARKUP_STRICT_PARSE=true``) turns each of those
recoveries into a ParseError instead.
"""

import logging
import re
from typing import Iterator, NamedTuple, Optional, Union

from .config import get_settings
from .element import Element, h, text
from .errors import ParseError
from .escape import camelize, unescape

logger = logging.getLogger("chatmarkup.parser")

_TAG_RE = re.compile(r'<(/?)\s*([^\s>/]+)([^>]*?)\s*(/?)>')
_ATTR_RE = re.compile(r'([^\s=]+)(?:="([^"]*)")?')


class Tag(NamedTuple):
    name: str
    close: bool
    empty: bool
    attrs: dict[str, str]
    position: int


def parse_attrs(source: str) -> dict[str, str]:
    """``at-all id="1"`` → ``{"atAll": "", "id": "1"}``"""
    attrs = {}
    for m in _ATTR_RE.finditer(source):
        key, value = m.group(1), m.group(2) or ""
        attrs[camelize(key)] = unescape(value)
    return attrs


def tokenize(source: str) -> Iterator[Union[str, Tag]]:
    """Split markup into unescaped text runs and tags."""
    cursor = 0
    for m in _TAG_RE.finditer(source):
        if m.start() > cursor:
            yield unescape(source[cursor:m.start()])
        close, name, attrs, empty = m.groups()
        yield Tag(name, bool(close), bool(empty), parse_attrs(attrs), m.start())
        cursor = m.end()
    if cursor < len(source):
        yield unescape(source[cursor:])


def parse(source: str, strict: Optional[bool] = None) -> list[Element]:
    """Parse markup into a forest (the list of top-level elements)."""
    if strict is None:
        strict = get_settings().strict_parse

    root = Element()
    stack = [root]
    for token in tokenize(source):
        if isinstance(token, str):
            stack[-1].children.append(text(token))
        elif token.close:
            if len(stack) == 1:
                if strict:
                    raise ParseError(f"Unexpected closing tag </{token.name}>", token.position, token.name)
                logger.debug("Dropping unmatched </%s> at offset %d", token.name, token.position)
                continue
            if strict and stack[-1].type != token.name:
                raise ParseError(
                    f"Closing tag </{token.name}> does not match <{stack[-1].type}>",
                    token.position, token.name,
                )
            stack.pop()
        else:
            element = h(token.name, token.attrs)
            stack[-1].children.append(element)
            if not token.empty:
                stack.append(element)

    if len(stack) > 1:
        unclosed = [element.type for element in stack[1:]]
        if strict:
            raise ParseError(f"Unclosed tag <{unclosed[-1]}>", len(source), unclosed[-1])
        logger.debug("Unclosed tags at end of input: %s", ", ".join(unclosed))
    return root.children
