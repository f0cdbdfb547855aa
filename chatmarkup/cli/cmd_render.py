"""Render and escaping commands."""

import click

from . import cli
from .shared import _load_forest

from chatmarkup.config import RENDER_FORMATS, get_settings
from chatmarkup.escape import escape as escape_text, unescape as unescape_text
from chatmarkup.render import to_plain_text, to_telegram_html


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--format", "fmt", type=click.Choice(RENDER_FORMATS), default=None,
              help="Output format (default: CHATMARKUP_RENDER_FORMAT or 'text')")
@click.option("--no-media", is_flag=True, help="Omit media placeholders from plain text")
def render(source, fmt, no_media):
    """Render markup from SOURCE as platform text."""
    fmt = fmt or get_settings().render_format
    forest = _load_forest(source)
    if fmt == "telegram":
        click.echo(to_telegram_html(forest))
    else:
        click.echo(to_plain_text(forest, include_media=not no_media))


@cli.command()
@click.argument("text")
@click.option("--inline", is_flag=True, help="Also escape double quotes (attribute values)")
def escape(text, inline):
    """Escape TEXT for the wire format."""
    click.echo(escape_text(text, inline))


@cli.command()
@click.argument("text")
def unescape(text):
    """Decode wire-format escapes in TEXT."""
    click.echo(unescape_text(text))
