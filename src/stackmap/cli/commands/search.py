"""
Search Command - Substring search over names, summaries and tags.
"""

import sys

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...core.search import SearchStatus
from ..presentation import TYPE_COLORS, highlighted_name, type_label
from ..utils import catalog_option, echo_warning, load_session

console = Console()


@click.command()
@click.argument("query")
@catalog_option
def search(query: str, catalog_path: str) -> None:
    """
    Search the catalog.

    Matches are case-insensitive and listed in catalog order.
    """
    session = load_session(catalog_path)
    if session is None:
        sys.exit(1)

    result = session.lookup(query)

    if result.status == SearchStatus.IDLE:
        min_length = session.search_engine.min_query_length
        echo_warning(f"Type at least {min_length} characters to search.")
        return

    if result.status == SearchStatus.NO_MATCHES:
        click.echo(f"No results for '{result.query}'.")
        return

    table = Table(title=f"🔍 {len(result.matches)} result(s) for '{result.query}'")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("Type")
    table.add_column("Summary")

    for node in result.matches:
        table.add_row(
            node.id,
            highlighted_name(node, result.query),
            f"[{TYPE_COLORS[node.type]}]{type_label(node.type)}[/]",
            Text(node.summary),
        )

    console.print(table)
