"""
Show Command - Node details card.
"""

import sys

import click
from rich.console import Console
from rich.text import Text

from ...core.types import Direction, NodeType
from ..presentation import node_card, playbook_panel, styled_name
from ..utils import catalog_option, load_session, require_node_id

console = Console()


@click.command()
@click.argument("node_id")
@catalog_option
def show(node_id: str, catalog_path: str) -> None:
    """
    Show a node: its path, summary, details, tags and connections.

    NODE_ID may also be a node name or a search term.
    """
    session = load_session(catalog_path)
    if session is None:
        sys.exit(1)

    resolved = require_node_id(session, node_id)
    node = session.require_node(resolved)

    console.print(node_card(node, session.ancestor_path(resolved)))

    connections = session.connections(resolved)
    if connections:
        console.print(f"\n[bold]🔗 Connections ({len(connections)})[/bold]")
        for conn in connections:
            arrow = "→" if conn.direction == Direction.OUTGOING else "←"
            console.print(Text.assemble(f"  {arrow} ", (conn.relation.value, "dim"), " ", styled_name(conn.node)))

    if node.type == NodeType.PLAYBOOK:
        playbook = session.get_playbook(resolved)
        if playbook is not None:
            click.echo()
            console.print(playbook_panel(playbook))
