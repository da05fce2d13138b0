"""
Path Command - Breadcrumb from the root to a node.
"""

import sys

import click

from ...core.paths import format_breadcrumb
from ..utils import catalog_option, load_session, require_node_id


@click.command()
@click.argument("node_id")
@click.option("--ids", "show_ids", is_flag=True, help="Print node ids instead of names")
@catalog_option
def path(node_id: str, show_ids: bool, catalog_path: str) -> None:
    """
    Print the ancestry of a node, root first.

    \b
    Example:
      stackmap path T_POSTGRES
      Build Journey › Backend & Data › Databases › Postgres
    """
    session = load_session(catalog_path)
    if session is None:
        sys.exit(1)

    resolved = require_node_id(session, node_id)
    nodes = session.ancestor_path(resolved)
    if show_ids:
        click.echo(" › ".join(n.id for n in nodes))
    else:
        click.echo(format_breadcrumb(nodes))
