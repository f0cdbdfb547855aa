"""Tests for outbound renderers."""

from chatmarkup.element import h
from chatmarkup.factories import at, image, quote, sharp
from chatmarkup.render import (
    MessageEncoder,
    collect_media,
    find_quote_id,
    to_plain_text,
    to_telegram_html,
)


class TestPlainText:
    """Test to_plain_text()."""

    def test_message(self, message_markup):
        assert to_plain_text(message_markup) == (
            "Hello @alice, see this & that\n"
            "[image]\n"
            "in #general"
        )

    def test_without_media(self, message_markup):
        assert "[image]" not in to_plain_text(message_markup, include_media=False)

    def test_mentions_fall_back_to_id(self):
        assert to_plain_text([at("42"), " ", sharp("7")]) == "@42 #7"

    def test_at_all(self):
        assert to_plain_text([at(None, {"type": "all"})]) == "@everyone"

    def test_br_and_paragraphs(self):
        forest = [h("p", "one"), h("p", ["two", h("br"), "three"])]
        assert to_plain_text(forest) == "one\ntwo\nthree"

    def test_unknown_tags_unwrapped(self):
        assert to_plain_text("<custom><b>x</b>y</custom>") == "xy"


class TestTelegramHTML:
    """Test to_telegram_html()."""

    def test_message(self, message_markup):
        assert to_telegram_html(message_markup) == (
            'Hello <a href="tg://user?id=42">@alice</a>, see <b>this</b> &amp; that\n'
            "in #general"
        )

    def test_tag_mapping(self):
        source = "<strong>a</strong><em>b</em><del>c</del><spl>d</spl>"
        assert to_telegram_html(source) == "<b>a</b><i>b</i><s>c</s><tg-spoiler>d</tg-spoiler>"

    def test_link(self):
        source = '<a href="https://x/?a=1&amp;b=&quot;2&quot;">go</a>'
        assert to_telegram_html(source) == '<a href="https://x/?a=1&amp;b=&quot;2&quot;">go</a>'

    def test_link_without_href_unwrapped(self):
        assert to_telegram_html("<a>go</a>") == "go"

    def test_empty_formatting_dropped(self):
        assert to_telegram_html("x<b/>y") == "xy"

    def test_text_escaped(self):
        assert to_telegram_html([h("code", "a < b")]) == "<code>a &lt; b</code>"

    def test_media_and_quote_skipped(self):
        assert to_telegram_html([quote("1"), image("https://x"), "hi"]) == "hi"


class TestMediaHelpers:
    """Test collect_media() and find_quote_id()."""

    def test_collect_media_document_order(self):
        source = '<file url="1"/><p><image url="2"/><b><audio url="3"/></b></p><video url="4"/>'
        assert [el.attrs["url"] for el in collect_media(source)] == ["1", "2", "3", "4"]

    def test_collect_media_none(self):
        assert collect_media("<p>just text</p>") == []

    def test_find_quote_id(self, message_markup):
        assert find_quote_id(message_markup) == "m-1"
        assert find_quote_id("<p/>") is None


class TestCustomEncoder:
    """Test subclassing MessageEncoder the way channels do."""

    def test_subclass(self):
        class UpperEncoder(MessageEncoder):
            def visit(self, element):
                if element.type == "text":
                    self.content += element.attrs["content"].upper()
                else:
                    self.render(element.children)

        encoder = UpperEncoder()
        assert encoder.encode("<p>ab<b>c</b></p>") == "ABC"
        assert encoder.encode("d") == "D"
