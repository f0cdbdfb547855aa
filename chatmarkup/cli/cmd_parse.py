"""Parse and select commands."""

import json

import click

from . import cli
from .shared import console, _build_tree, _load_forest, _to_dict

from chatmarkup.element import to_string
from chatmarkup.selector import iter_select

from rich.tree import Tree


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--strict/--lenient", default=None, help="Fail on unmatched or unclosed tags")
@click.option("--json", "as_json", is_flag=True, help="Print the forest as JSON")
def parse(source, strict, as_json):
    """Parse markup from SOURCE (default: stdin) and show the element tree."""
    forest = _load_forest(source, strict=strict)

    if as_json:
        click.echo(json.dumps([_to_dict(element) for element in forest], ensure_ascii=False, indent=2))
        return

    if not forest:
        console.print("[dim](empty)[/dim]")
        return
    console.print(_build_tree(forest, Tree("[bold cyan]forest[/bold cyan]")))


@cli.command()
@click.argument("query")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--limit", type=int, default=None, help="Stop after this many matches")
def select(query, source, limit):
    """Print every element of SOURCE matching QUERY, one per line."""
    forest = _load_forest(source)
    count = 0
    for element in iter_select(forest, query):
        if limit is not None and count >= limit:
            break
        click.echo(to_string(element))
        count += 1
