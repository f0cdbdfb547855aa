"""chatmarkup configuration management."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import Field, ValidationError

logger = logging.getLogger("chatmarkup.config")

RENDER_FORMATS = ("text", "telegram")


class ChatMarkupSettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # Parsing
    strict_parse: bool = Field(
        default=False,
        description="Raise ParseError on unmatched or unclosed tags instead of recovering",
    )

    # CLI
    log_level: str = Field(default="WARNING", description="Log level used by the CLI")
    render_format: str = Field(default="text", description="Default output format of 'chatmarkup render'")

    model_config = {"env_prefix": "CHATMARKUP_", "env_file": ".env", "extra": "ignore"}


def load_settings() -> ChatMarkupSettings:
    """Load settings from environment."""
    try:
        settings = ChatMarkupSettings()
    except ValidationError as e:
        # Bad values must not break parsing; use the defaults for those fields only
        invalid = sorted({
            str(err["loc"][0]) for err in e.errors()
            if err["loc"] and err["loc"][0] in ChatMarkupSettings.model_fields
        })
        logger.warning("Invalid chatmarkup settings (%s), using defaults for them", ", ".join(invalid))
        defaults = {name: ChatMarkupSettings.model_fields[name].default for name in invalid}
        settings = ChatMarkupSettings(**defaults)

    if settings.render_format not in RENDER_FORMATS:
        logger.warning(
            "Unknown render format %r, falling back to 'text'. Supported: %s",
            settings.render_format, ", ".join(RENDER_FORMATS),
        )
        settings.render_format = "text"

    return settings


@lru_cache(maxsize=1)
def get_settings() -> ChatMarkupSettings:
    """Process-wide settings, loaded once. Tests call ``get_settings.cache_clear()``."""
    return load_settings()
