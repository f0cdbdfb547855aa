"""Selector queries over element forests.

Supported syntax is a small subset of CSS selectors, by element type only:
  a, b       either a or b
  a b        b anywhere below a
  a > b      b directly inside a
  a + b      b immediately after a
  a ~ b      b somewhere after a

Matches are produced lazily in document order. Empty steps (``"a >"``,
``","``) match nothing rather than raising.
"""

import logging
import re
from typing import Iterator, NamedTuple, Union

from .element import Element
from .parser import parse

logger = logging.getLogger("chatmarkup.selector")

_COMBINATOR_RE = re.compile(r' *([ >+~]) *')


class Selector(NamedTuple):
    type: str
    combinator: str


def parse_selector(query: str) -> list[list[Selector]]:
    """``"a > b, c"`` → ``[[("a", " "), ("b", ">")], [("c", " ")]]``"""
    groups = []
    for part in query.split(','):
        rest = part.strip()
        selectors = []
        combinator = ' '
        while True:
            m = _COMBINATOR_RE.search(rest)
            if not m:
                break
            selectors.append(Selector(rest[:m.start()], combinator))
            combinator = m.group(1)
            rest = rest[m.end():]
        selectors.append(Selector(rest, combinator))
        groups.append(selectors)
    return groups


def _select(elements: list[Element], query: list[list[Selector]]) -> Iterator[Element]:
    # ``query`` is owned by this level: "~" steps are appended to it so that
    # later siblings get offered the rest of the group.
    if not query:
        return
    adjacent: list[list[Selector]] = []
    for element in elements:
        inner: list[list[Selector]] = []
        local = [*query, *adjacent]
        adjacent = []
        for group in local:
            selector = group[0]
            if selector.type and element.type == selector.type:
                if len(group) == 1:
                    yield element
                elif group[1].combinator in (' ', '>'):
                    inner.append(group[1:])
                elif group[1].combinator == '+':
                    adjacent.append(group[1:])
                else:
                    query.append(group[1:])
            if selector.combinator == ' ':
                inner.append(group)
        yield from _select(element.children, inner)


def iter_select(source: Union[str, list[Element]], query: str) -> Iterator[Element]:
    """Lazily yield matching elements. Single pass; stop consuming at any time."""
    if isinstance(source, str):
        source = parse(source)
    groups = parse_selector(query)
    logger.debug("Selecting %r as %d group(s)", query, len(groups))
    yield from _select(source, groups)


def select(source: Union[str, list[Element]], query: str) -> list[Element]:
    return list(iter_select(source, query))
