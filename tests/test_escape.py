"""Tests for wire-format escaping and key-case helpers."""

import pytest

from chatmarkup.escape import camelize, capitalize, escape, hyphenate, unescape


class TestEscape:
    """Test escape() and unescape()."""

    def test_escapes_markup_characters(self):
        assert escape("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"

    def test_quotes_only_escaped_inline(self):
        assert escape('say "hi"') == 'say "hi"'
        assert escape('say "hi"', inline=True) == "say &quot;hi&quot;"

    def test_ampersand_escaped_first(self):
        """Existing entities must not survive as entities."""
        assert escape("&lt;") == "&amp;lt;"

    def test_unescape_order(self):
        """&amp; is decoded last, so &amp;lt; becomes &lt; and not <."""
        assert unescape("&amp;lt;") == "&lt;"
        assert unescape("&lt;b&gt; &quot;x&quot; &amp;") == '<b> "x" &'

    @pytest.mark.parametrize("source", [
        "",
        "plain",
        "<tag attr=\"v\">",
        "&amp; &lt; &gt; &quot;",
        "&&&<<<>>>\"\"\"",
        "emoji 🎉 & <unicode>",
    ])
    @pytest.mark.parametrize("inline", [False, True])
    def test_unescape_reverses_escape(self, source, inline):
        assert unescape(escape(source, inline)) == source


class TestKeyCase:
    """Test camelize/hyphenate used for attribute keys."""

    def test_camelize(self):
        assert camelize("no-disabled") == "noDisabled"
        assert camelize("at_all") == "atAll"
        assert camelize("plain") == "plain"

    def test_hyphenate(self):
        assert hyphenate("noDisabled") == "no-disabled"
        assert hyphenate("plain") == "plain"
        assert hyphenate("at_all") == "at-all"

    def test_hyphenate_uppercase_run(self):
        assert hyphenate("fooBARBaz") == "foo-bar-baz"
        assert hyphenate("URL") == "url"
        assert hyphenate("Capital") == "capital"

    def test_hyphenate_keeps_digits(self):
        assert hyphenate("h2Title") == "h2-title"

    def test_keys_round_trip(self):
        for key in ("noDisabled", "replyTo", "messageId", "id"):
            assert camelize(hyphenate(key)) == key

    def test_capitalize(self):
        assert capitalize("disabled") == "Disabled"
        assert capitalize("") == ""
