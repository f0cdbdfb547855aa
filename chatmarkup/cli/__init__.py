"""chatmarkup CLI — inspect, query and render message markup."""

import logging

import click
from chatmarkup import __version__
from chatmarkup.config import get_settings
from .shared import console

_log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="chatmarkup")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, debug):
    """chatmarkup — universal message element tree tools"""
    settings = get_settings()
    level = logging.DEBUG if debug else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.getLogger("chatmarkup").setLevel(level)

    if ctx.invoked_subcommand is None:
        _show_help()


def _show_help():
    """Show all available commands grouped by category."""
    console.print(f"[bold]chatmarkup v{__version__}[/bold] — universal message element tree tools\n")

    groups = {
        "Inspect": [
            ("parse", "Parse markup and show the element tree"),
            ("select", "Print elements matching a selector"),
        ],
        "Output": [
            ("render", "Render markup as plain text or Telegram HTML"),
            ("escape", "Escape text for the wire format"),
            ("unescape", "Decode wire-format escapes"),
        ],
    }

    for category, commands in groups.items():
        console.print(f"  [bold cyan]{category}[/bold cyan]")
        for name, desc in commands:
            console.print(f"    [bold]chatmarkup {name:10s}[/bold] {desc}")
        console.print()

    console.print("[dim]Run 'chatmarkup <command> --help' for details on a specific command.[/dim]")


# Import all command modules (registers commands onto cli group)
from . import cmd_parse  # noqa: E402, F401
from . import cmd_render  # noqa: E402, F401


@cli.command(name="help", hidden=True)
def help_cmd():
    """Show all available commands."""
    _show_help()


def main():
    """Console script entry point.

    Runs the group outside click's standalone mode so that usage mistakes point
    at 'chatmarkup help' and malformed markup exits with its own status (3).
    """
    import sys
    logging.basicConfig(level=logging.WARNING, format=_log_format)
    try:
        status = cli(standalone_mode=False)
    except click.UsageError as e:
        click.echo(f"chatmarkup: {e.format_message()}", err=True)
        click.echo("Run 'chatmarkup help' to list the available commands.", err=True)
        sys.exit(2)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Interrupted.", err=True)
        sys.exit(130)
    # --version and --help return their exit status instead of raising
    sys.exit(status if isinstance(status, int) else 0)
