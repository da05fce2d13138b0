"""
Explore Command - Progressive reveal of the catalog graph.

Each invocation starts a fresh session at the initial level, applies the
requested reveal operations and prints the resulting visible graph.
"""

import sys
from typing import Tuple

import click
from rich.console import Console

from ..presentation import expand_feedback, visible_tree
from ..utils import catalog_option, echo_info, echo_success, echo_warning, load_session, require_node_id

console = Console()


@click.command()
@click.option("-e", "--expand", "expand_ids", multiple=True, help="Reveal the children of a node (repeatable)")
@click.option("-t", "--expand-to", "expand_to_ids", multiple=True, help="Reveal a node and its ancestry (repeatable)")
@click.option("--all", "expand_all", is_flag=True, help="Reveal the whole catalog")
@catalog_option
def explore(expand_ids: Tuple[str, ...], expand_to_ids: Tuple[str, ...],
            expand_all: bool, catalog_path: str) -> None:
    """
    Show the visible graph after a sequence of reveals.

    \b
    Operations run in this order: every --expand-to, then every --expand
    in the order given, then --all.

    \b
    Examples:
      stackmap explore
      stackmap explore --expand L1_BACK --expand C_DB
      stackmap explore --expand-to T_POSTGRES
    """
    session = load_session(catalog_path)
    if session is None:
        sys.exit(1)

    for text in expand_to_ids:
        node_id = require_node_id(session, text)
        session.expand_to(node_id)
        path = session.ancestor_path(node_id)
        echo_info(f"Revealed path to {node_id} ({len(path)} nodes)")

    for text in expand_ids:
        node_id = require_node_id(session, text)
        result = session.expand(node_id)
        message = expand_feedback(session.require_node(node_id), result)
        if result.changed:
            echo_success(message)
        else:
            echo_warning(message)

    if expand_all:
        session.expand_all()
        echo_info("Revealed the whole catalog")

    click.echo()
    console.print(visible_tree(session.graph, session.get_visible_graph()))
