"""
Stats Command - Catalog counts and hierarchy health.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ..utils import catalog_option, echo_success, echo_warning, load_session

console = Console()


@click.command()
@catalog_option
def stats(catalog_path: str) -> None:
    """
    Show catalog statistics and hierarchy diagnostics.
    """
    session = load_session(catalog_path)
    if session is None:
        sys.exit(1)

    graph = session.graph
    data = graph.get_stats()
    visible = session.visibility.stats()

    click.echo()
    click.echo(f"📊 {click.style('Catalog Statistics', bold=True)}")
    click.echo("═" * 40)
    click.echo(f"Nodes:      {data['total_nodes']}")
    click.echo(f"Edges:      {data['total_edges']}")
    click.echo(f"Playbooks:  {data['total_playbooks']}")
    click.echo(f"Rules:      {data['total_rules']}")
    click.echo(f"Roots:      {data['roots']}")
    click.echo(f"Visible at start: {visible['visible_nodes']} nodes, {visible['visible_edges']} edges")

    table = Table(title="By type")
    table.add_column("Type")
    table.add_column("Count", justify="right")
    for node_type, count in sorted(data["nodes_by_type"].items()):
        table.add_row(node_type, str(count))
    console.print(table)

    table = Table(title="By relation")
    table.add_column("Relation")
    table.add_column("Count", justify="right")
    for relation, count in sorted(data["edges_by_relation"].items()):
        table.add_row(relation, str(count))
    console.print(table)

    click.echo()
    cycles = graph.hierarchy_cycles()
    multi_parent = graph.multi_parent_nodes
    dangling = graph.dangling_edges

    if not (cycles or multi_parent or dangling):
        echo_success("Hierarchy is healthy")
        return

    for cycle in cycles:
        echo_warning(f"BELONGS_TO cycle: {' → '.join(cycle)}")
    for node_id in multi_parent:
        echo_warning(f"Multiple parents (first one wins): {node_id}")
    for edge in dangling:
        echo_warning(f"Dangling edge: {edge.source_id} -[{edge.relation.value}]→ {edge.target_id}")
