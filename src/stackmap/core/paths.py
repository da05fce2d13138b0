"""
Ancestor path reconstruction for breadcrumb navigation.
"""

import logging
from typing import List, Optional, Set

from .graph import CatalogGraph
from .types import Node

logger = logging.getLogger(__name__)


def ancestor_path(graph: CatalogGraph, node_id: str) -> List[Node]:
    """
    Walk BELONGS_TO parents from node_id up to its root.

    Returns nodes ordered root-most ancestor first, node_id last. Parent ids
    that do not resolve to a node are skipped but the walk continues through
    them. A revisited id means the hierarchy is cyclic: the walk stops there
    and the partial path collected so far is returned.
    """
    if not graph.has_node(node_id):
        return []

    path: List[Node] = []
    visited: Set[str] = set()
    current: Optional[str] = node_id

    while current is not None:
        if current in visited:
            logger.warning(f"Cyclic BELONGS_TO chain at '{current}' while walking from '{node_id}'")
            break
        visited.add(current)

        node = graph.get_node(current)
        if node is not None:
            path.append(node)
        current = graph.parent_of(current)

    path.reverse()
    return path


def format_breadcrumb(path: List[Node], separator: str = " › ") -> str:
    """Render a path as ``Root › Category › Node``."""
    return separator.join(node.name for node in path)
