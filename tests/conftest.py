"""Pytest configuration and shared fixtures."""

import pytest

from chatmarkup.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from CHATMARKUP_* variables and the settings cache."""
    for key in ("CHATMARKUP_STRICT_PARSE", "CHATMARKUP_LOG_LEVEL", "CHATMARKUP_RENDER_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def message_markup():
    """A typical inbound message mixing text, mentions, formatting and media."""
    return (
        '<quote id="m-1"/>'
        '<p>Hello <at id="42" name="alice"/>, see <b>this</b> &amp; that</p>'
        '<image url="https://example.com/a.png"/>'
        '<p>in <sharp id="7" name="general"/></p>'
    )
