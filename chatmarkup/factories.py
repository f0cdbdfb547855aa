"""Typed element factories for common outbound content.

  at(id)            → <at id="..."/>       mention a user
  sharp(id)         → <sharp id="..."/>    mention a channel
  quote(id)         → <quote id="..."/>    reply to a message
  image(url|bytes)  → <image url="..."/>   also video, audio, file

Every factory accepts an optional trailing attrs mapping, e.g.
``at("123", {"name": "alice"})``. Binary asset payloads are inlined as
``base64://<data>`` URLs; string URLs (remote or ``data:``) are kept verbatim.
"""

import base64
from typing import Any, Callable, Mapping, Optional, Union

from .element import Element, h, normalize_attrs

Factory = Callable[..., Element]
AssetData = Union[str, bytes, bytearray, memoryview]


def create_factory(type: str, *keys: str) -> Factory:
    """Map positional arguments onto ``keys``, then merge a trailing attrs mapping."""
    def factory(*args: Any) -> Element:
        element = h(type)
        for index, key in enumerate(keys):
            if index < len(args) and args[index] is not None:
                element.attrs.update(normalize_attrs({key: args[index]}))
        if len(args) > len(keys) and args[len(keys)]:
            element.attrs.update(normalize_attrs(args[len(keys)]))
        return element

    factory.__name__ = type
    factory.__doc__ = f"Build a <{type}> element from {', '.join(keys) or 'attrs'}."
    return factory


def encode_asset(value: AssetData) -> str:
    if isinstance(value, str):
        return value
    return "base64://" + base64.b64encode(bytes(value)).decode("ascii")


def create_asset_factory(type: str) -> Factory:
    def factory(value: AssetData, attrs: Optional[Mapping[str, Any]] = None) -> Element:
        return h(type, {**(attrs or {}), "url": encode_asset(value)})

    factory.__name__ = type
    factory.__doc__ = f"Build a <{type}> element from a URL or a binary payload."
    return factory


at = create_factory("at", "id")
sharp = create_factory("sharp", "id")
quote = create_factory("quote", "id")
image = create_asset_factory("image")
video = create_asset_factory("video")
audio = create_asset_factory("audio")
file = create_asset_factory("file")
