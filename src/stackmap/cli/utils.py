"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, catalog/session loading and node resolution.
"""

from pathlib import Path
from typing import Optional

import click

from ..config import load_config
from ..core.catalog import Catalog
from ..core.exceptions import StackmapError
from ..session import ExplorerSession

catalog_option = click.option(
    "-c", "--catalog", "catalog_path", default=None,
    help="Path to the catalog JSON (defaults to catalog.path from .stackmap/config.yaml)",
)


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def load_session(catalog_path: Optional[str] = None) -> Optional[ExplorerSession]:
    """
    Build a fresh session from the configured catalog.

    Args:
        catalog_path (Optional[str]): Explicit catalog file; falls back to
            the ``catalog.path`` setting.

    Returns:
        Optional[ExplorerSession]: The session, or None if loading failed
        (the error has already been printed).
    """
    try:
        config = load_config()
    except StackmapError as e:
        echo_error(str(e))
        return None

    path = Path(catalog_path or config.catalog.path)
    if not path.exists():
        echo_error(f"Catalog file not found: {path}")
        click.echo("Run 'stackmap init --demo' to create a demo catalog.", err=True)
        return None

    try:
        catalog = Catalog.load(path)
    except StackmapError as e:
        echo_error(str(e))
        return None

    return ExplorerSession(catalog, config=config)


def resolve_node_id(session: ExplorerSession, text: str) -> Optional[str]:
    """
    Resolve user input to a node id.

    Tries, in order: exact id, case-insensitive id, case-insensitive name,
    then the first search hit.
    """
    if session.graph.has_node(text):
        return text

    lowered = text.lower()
    for node in session.graph.iter_nodes():
        if node.id.lower() == lowered:
            return node.id
    for node in session.graph.iter_nodes():
        if node.name.lower() == lowered:
            return node.id

    matches = session.search(text)
    if matches:
        return matches[0].id
    return None


def require_node_id(session: ExplorerSession, text: str) -> str:
    """resolve_node_id, exiting with status 1 when nothing matches."""
    node_id = resolve_node_id(session, text)
    if node_id is None:
        echo_error(f"Node not found: {text}")
        raise click.exceptions.Exit(1)
    return node_id
