"""
Visibility Engine - progressive reveal of the catalog graph.

Tracks which nodes are currently exposed to the presentation layer and
materializes the edges between them. The engine holds the only mutable
state of a session; all of its operations are deterministic given that
state and the catalog.

Core invariant, maintained after every mutation:

    visible_edges == [e for e in catalog.edges
                      if e.source_id in visible and e.target_id in visible]
"""

import logging
from enum import StrEnum
from typing import Any, Dict, Iterable, List, Set

from pydantic import BaseModel, ConfigDict, Field

from .graph import CatalogGraph
from .paths import ancestor_path
from .types import Edge, Node

logger = logging.getLogger(__name__)


class ExpandReason(StrEnum):
    """Outcome of an expand call, used to drive user feedback."""
    NONE = "NONE"
    NO_CHILDREN = "NO_CHILDREN"
    ALREADY_VISIBLE = "ALREADY_VISIBLE"


class ExpandResult(BaseModel):
    added_count: int = 0
    reason: ExpandReason = ExpandReason.NONE

    model_config = ConfigDict(frozen=True)

    @property
    def changed(self) -> bool:
        return self.added_count > 0


class VisibleGraph(BaseModel):
    """Snapshot of the visible subgraph, in catalog order."""
    nodes: List[Node] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class VisibilityEngine:
    """
    Owner of a session's VisibilityState.

    Not safe for concurrent writers: callers sharing one engine across
    threads must serialize mutations.
    """

    def __init__(self, graph: CatalogGraph, initial_level: int = 1):
        self._graph = graph
        self._initial_level = initial_level
        self._visible: Set[str] = set()
        self._visible_edges: Set[int] = set()
        self._expanded: Set[str] = set()
        self.initial()

    # =========================================================================
    # Operations
    # =========================================================================

    def initial(self) -> None:
        """Seed visibility with every node at or above the initial level."""
        seeds = [n.id for n in self._graph.iter_nodes() if n.level <= self._initial_level]
        self._reveal(seeds)
        logger.debug(f"Seeded visibility with {len(seeds)} nodes (level <= {self._initial_level})")

    def expand(self, node_id: str) -> ExpandResult:
        """
        Reveal the direct children of node_id.

        Unknown ids and leaves report NO_CHILDREN; a node whose children are
        all visible already reports ALREADY_VISIBLE.
        """
        children = self._graph.children_of(node_id)
        if not children:
            return ExpandResult(added_count=0, reason=ExpandReason.NO_CHILDREN)

        self._expanded.add(node_id)
        added = self._reveal(child.id for child in children)
        logger.debug(f"Expanded '{node_id}': {added} new of {len(children)} children")

        if added == 0:
            return ExpandResult(added_count=0, reason=ExpandReason.ALREADY_VISIBLE)
        return ExpandResult(added_count=added, reason=ExpandReason.NONE)

    def expand_to(self, target_id: str) -> None:
        """Reveal target_id together with its full ancestry."""
        path = ancestor_path(self._graph, target_id)
        added = self._reveal(node.id for node in path)
        logger.debug(f"Expanded to '{target_id}': {added} nodes revealed along {len(path)}-node path")

    def expand_all(self) -> None:
        """Reveal the whole catalog."""
        self._reveal(node.id for node in self._graph.iter_nodes())

    def reset(self) -> None:
        """Drop all visibility and reseed."""
        self._visible.clear()
        self._visible_edges.clear()
        self._expanded.clear()
        self.initial()

    # =========================================================================
    # Queries
    # =========================================================================

    def is_visible(self, node_id: str) -> bool:
        return node_id in self._visible

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self._expanded

    @property
    def visible_node_ids(self) -> Set[str]:
        return set(self._visible)

    @property
    def visible_edges(self) -> List[Edge]:
        edges = self._graph.catalog.edges
        return [edges[i] for i in sorted(self._visible_edges)]

    def snapshot(self) -> VisibleGraph:
        nodes = [n for n in self._graph.iter_nodes() if n.id in self._visible]
        return VisibleGraph(nodes=nodes, edges=self.visible_edges)

    def hidden_children_count(self, node_id: str) -> int:
        return sum(1 for c in self._graph.children_of(node_id) if c.id not in self._visible)

    def stats(self) -> Dict[str, Any]:
        return {
            "visible_nodes": len(self._visible),
            "visible_edges": len(self._visible_edges),
            "expanded_nodes": len(self._expanded),
            "total_nodes": self._graph.node_count,
            "total_edges": self._graph.edge_count,
        }

    # =========================================================================
    # Internals
    # =========================================================================

    def _reveal(self, node_ids: Iterable[str]) -> int:
        """Add nodes and materialize their edges. Returns the count of new nodes."""
        added: List[str] = []
        for node_id in node_ids:
            if node_id in self._visible or not self._graph.has_node(node_id):
                continue
            self._visible.add(node_id)
            added.append(node_id)

        for node_id in added:
            for ref in self._graph.edges_touching(node_id):
                if ref.edge.source_id in self._visible and ref.edge.target_id in self._visible:
                    self._visible_edges.add(ref.index)
        return len(added)
