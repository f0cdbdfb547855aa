"""Shared utilities for chatmarkup CLI commands."""

import click
from rich.console import Console
from rich.markup import escape as escape_markup
from rich.tree import Tree

from chatmarkup.element import Element
from chatmarkup.errors import ParseError
from chatmarkup.parser import parse

console = Console()


class MarkupUsageError(click.ClickException):
    """Strict parsing rejected the input markup."""

    exit_code = 3


def _load_forest(source, strict: bool | None = None) -> list[Element]:
    """Read markup from an open file and parse it, reporting strict-mode errors."""
    markup = source.read()
    try:
        return parse(markup, strict=strict)
    except ParseError as e:
        where = f" at offset {e.position}" if e.position is not None else ""
        raise MarkupUsageError(f"Malformed markup{where}: {e}")


def _to_dict(element: Element) -> dict:
    """JSON-ready representation of an element."""
    return {
        "type": element.type,
        "attrs": dict(element.attrs),
        "children": [_to_dict(child) for child in element.children],
    }


def _label(element: Element) -> str:
    if element.type == "text":
        return f"[green]{escape_markup(repr(element.attrs.get('content', '')))}[/green]"
    attrs = " ".join(
        f"{key}={value!r}" if value else key
        for key, value in element.attrs.items()
    )
    label = f"[bold]{escape_markup(element.type or '(fragment)')}[/bold]"
    if attrs:
        label += f" [dim]{escape_markup(attrs)}[/dim]"
    return label


def _build_tree(elements: list[Element], tree: Tree) -> Tree:
    for element in elements:
        _build_tree(element.children, tree.add(_label(element)))
    return tree
