"""Exception hierarchy for chatmarkup.

Lenient parsing, selector parsing and the factories never raise. The only
structural error is ParseError, raised by strict parsing. Exceptions raised
by transform rule callables are propagated unchanged.
"""

from typing import Optional


class MarkupError(Exception):
    """Base class for all chatmarkup errors."""


class ParseError(MarkupError):
    """Strict parsing found a closing tag that does not fit, or an unclosed tag."""

    def __init__(self, message: str, position: Optional[int] = None, tag: Optional[str] = None):
        super().__init__(message)
        self.position = position
        self.tag = tag
