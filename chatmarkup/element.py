"""Element — the universal message tree node.

Every piece of message content is an Element:
  - ``type == "text"``: a literal text run, stored in ``attrs["content"]``
  - ``type == ""``: a fragment whose serialization is just its children
  - anything else: a tag with string attributes and child elements

Content accepted by constructors and transform rules is a string, an
Element, or a list of strings and Elements. Strings are always wrapped
into text elements.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .escape import capitalize, escape, hyphenate


@dataclass
class Element:
    type: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["Element"] = field(default_factory=list)

    def __post_init__(self):
        # Element(type, children) is accepted as well as Element(type, attrs, children)
        if not isinstance(self.attrs, Mapping):
            self.attrs, self.children = {}, self.attrs
        self.type = self.type or ""
        self.attrs = normalize_attrs(self.attrs)
        self.children = to_elements(self.children) if self.children else []

    @property
    def data(self) -> dict[str, str]:
        """Deprecated alias of ``attrs`` (the same dict, not a copy)."""
        return self.attrs

    def __str__(self) -> str:
        return to_string(self)


Content = Union[str, Element, list[Union[str, Element]]]


def is_element(value: Any) -> bool:
    return isinstance(value, Element)


def text(content: str) -> Element:
    return Element("text", {"content": content})


def to_element(content: Union[str, Element]) -> Element:
    if isinstance(content, Element):
        return content
    if isinstance(content, str):
        return text(content)
    raise TypeError(f"Expected str or Element, got {type(content).__name__}")


def to_elements(content: Content) -> list[Element]:
    """Normalize content into a flat list of elements (one level deep)."""
    if isinstance(content, (str, Element)):
        return [to_element(content)]
    if isinstance(content, (list, tuple)):
        return [to_element(item) for item in content]
    raise TypeError(f"Unsupported element content: {type(content).__name__}")


def normalize_attrs(attrs: Mapping[str, Any]) -> dict[str, str]:
    """Convert arbitrary attribute values into wire-ready strings.

    ``None`` is dropped, ``True`` becomes a flag (empty string) and
    ``False`` becomes a flag under the negated key (``noKey``).
    """
    result: dict[str, str] = {}
    for key, value in attrs.items():
        if value is None:
            continue
        if value is True:
            result[key] = ""
        elif value is False:
            result["no" + capitalize(key)] = ""
        else:
            result[key] = str(value)
    return result


def h(type: Optional[str], *args: Any) -> Element:
    """Build an element: ``h(type)``, ``h(type, children)``, ``h(type, attrs, children)``.

    The first optional argument is treated as attrs when it is a mapping.
    Same as calling Element directly; kept as the short spelling used by channels.
    """
    return Element(type or "", *args)


def _serialize_attr(key: str, value: Optional[str]) -> str:
    if value is None:
        return ""
    key = hyphenate(key)
    if value == "":
        return f" {key}"
    return f' {key}="{escape(value, True)}"'


def to_string(source: Union[Content, Element]) -> str:
    """Serialize an element, a forest, or mixed content to wire text."""
    if isinstance(source, (list, tuple)):
        return "".join(to_string(item) for item in source)
    if isinstance(source, str):
        return escape(source)
    if not source.type:
        return to_string(source.children)
    if source.type == "text":
        return escape(source.attrs.get("content") or "")
    attrs = "".join(_serialize_attr(key, value) for key, value in source.attrs.items())
    if not source.children:
        return f"<{source.type}{attrs}/>"
    return f"<{source.type}{attrs}>{to_string(source.children)}</{source.type}>"
