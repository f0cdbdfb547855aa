"""Tests for typed element factories."""

import base64

from chatmarkup.factories import at, audio, create_factory, file, image, quote, sharp, video


class TestPositionalFactories:
    """Test at/sharp/quote."""

    def test_id_keyed(self):
        assert str(at("42")) == '<at id="42"/>'
        assert str(sharp("7")) == '<sharp id="7"/>'
        assert str(quote("m-1")) == '<quote id="m-1"/>'

    def test_values_stringified(self):
        assert at(42).attrs == {"id": "42"}

    def test_none_argument_skipped(self):
        assert at(None).attrs == {}

    def test_trailing_attrs_merged(self):
        el = at("42", {"name": "alice", "role": None})
        assert el.attrs == {"id": "42", "name": "alice"}

    def test_trailing_attrs_override_positional(self):
        assert at("1", {"id": "2"}).attrs == {"id": "2"}

    def test_trailing_attrs_flags(self):
        assert at(None, {"type": "all", "silent": True}).attrs == {"type": "all", "silent": ""}

    def test_multiple_keys(self):
        button = create_factory("button", "id", "text")
        assert button("b1", "OK").attrs == {"id": "b1", "text": "OK"}
        assert button("b1").attrs == {"id": "b1"}
        assert button.__name__ == "button"

    def test_fresh_element_each_call(self):
        assert at("1") is not at("1")
        assert at("1") == at("1")


class TestAssetFactories:
    """Test image/video/audio/file."""

    def test_binary_payload_is_base64(self):
        payload = b"\x89PNG\r\n\x1a\n"
        el = image(payload)
        assert el.attrs["url"].startswith("base64://")
        assert base64.b64decode(el.attrs["url"][len("base64://"):]) == payload

    def test_bytearray_and_memoryview(self):
        assert video(bytearray(b"abc")).attrs["url"] == "base64://YWJj"
        assert audio(memoryview(b"abc")).attrs["url"] == "base64://YWJj"

    def test_url_kept_verbatim(self):
        assert image("https://x/y.png").attrs["url"] == "https://x/y.png"

    def test_data_url_kept_verbatim(self):
        assert file("data:text/plain;base64,aGk=").attrs["url"] == "data:text/plain;base64,aGk="

    def test_attrs_merged(self):
        el = file("https://x/report.pdf", {"name": "report.pdf", "cache": False})
        assert el.type == "file"
        assert el.attrs == {"name": "report.pdf", "noCache": "", "url": "https://x/report.pdf"}

    def test_url_wins_over_attrs(self):
        assert image("https://a", {"url": "https://b"}).attrs["url"] == "https://a"
