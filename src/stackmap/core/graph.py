"""
Catalog graph index backed by rustworkx.

Derived lookup structures over a Catalog, built once and read-only
afterwards:
- The bimap between string node ids and rustworkx integer indices.
- Ordered children per parent (BELONGS_TO, parent -> child).
- Every edge touching a node, annotated with its direction.
- A BELONGS_TO-only graph used for hierarchy diagnostics.

Every other component queries this index instead of rescanning the catalog
edge list.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Set

import rustworkx as rx

from .catalog import Catalog
from .types import Direction, Edge, EdgeRef, Node, NodeType

logger = logging.getLogger(__name__)


class CatalogGraph:
    """
    Read-only graph view of a Catalog.

    Features:
    - O(1) node lookup via ID-to-Index bimap
    - Children and incident edges in catalog order
    - Hierarchy health checks (cycles, multiple parents, dangling edges)
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._graph = rx.PyDiGraph(multigraph=True)
        self._hierarchy = rx.PyDiGraph(multigraph=False)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}
        self._nodes_by_type: Dict[NodeType, List[str]] = defaultdict(list)

        self._children: Dict[str, List[str]] = defaultdict(list)
        self._parent: Dict[str, str] = {}
        self._touching: Dict[str, List[EdgeRef]] = defaultdict(list)
        self._dangling: List[int] = []
        self._multi_parent: Set[str] = set()

        for node in catalog.nodes:
            self._add_node(node)
        for index, edge in enumerate(catalog.edges):
            self._add_edge(index, edge)

    # =========================================================================
    # Construction
    # =========================================================================

    def _add_node(self, node: Node) -> None:
        if node.id in self._id_to_idx:
            logger.warning(f"Duplicate node id in catalog, keeping first: {node.id}")
            return
        idx = self._graph.add_node(node)
        self._hierarchy.add_node(node.id)
        self._id_to_idx[node.id] = idx
        self._idx_to_id[idx] = node.id
        self._nodes_by_type[node.type].append(node.id)

    def _add_edge(self, index: int, edge: Edge) -> None:
        u_idx = self._id_to_idx.get(edge.source_id)
        v_idx = self._id_to_idx.get(edge.target_id)
        if u_idx is None or v_idx is None:
            logger.debug(f"Dangling edge #{index}: {edge.source_id} -> {edge.target_id}")
            self._dangling.append(index)

        self._touching[edge.source_id].append(
            EdgeRef(index=index, edge=edge, direction=Direction.OUTGOING)
        )
        self._touching[edge.target_id].append(
            EdgeRef(index=index, edge=edge, direction=Direction.INCOMING)
        )

        if edge.is_hierarchy():
            self._children[edge.source_id].append(edge.target_id)
            if edge.target_id in self._parent:
                self._multi_parent.add(edge.target_id)
            else:
                self._parent[edge.target_id] = edge.source_id

        if u_idx is None or v_idx is None:
            return

        self._graph.add_edge(u_idx, v_idx, edge)
        if edge.is_hierarchy():
            self._hierarchy.add_edge(u_idx, v_idx, index)

    # =========================================================================
    # Lookups
    # =========================================================================

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by ID."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def children_of(self, parent_id: str) -> List[Node]:
        """Direct children of a node, in catalog edge order."""
        children = []
        for child_id in self._children.get(parent_id, []):
            child = self.get_node(child_id)
            if child is not None:
                children.append(child)
        return children

    def parent_of(self, node_id: str) -> Optional[str]:
        """
        Parent id of a node, or None for roots.

        The first BELONGS_TO edge targeting the node wins. The returned id
        may not resolve to a node when the dataset is malformed.
        """
        return self._parent.get(node_id)

    def edges_touching(self, node_id: str) -> List[EdgeRef]:
        """All edges with node_id as source or target, in catalog order."""
        return list(self._touching.get(node_id, []))

    def get_nodes_by_type(self, node_type: NodeType) -> List[Node]:
        return [self._graph[self._id_to_idx[nid]] for nid in self._nodes_by_type.get(node_type, [])]

    def roots(self) -> List[Node]:
        """Nodes with no parent, in catalog order."""
        return [node for node in self.iter_nodes() if node.id not in self._parent]

    def iter_nodes(self) -> Iterator[Node]:
        for node_id in self._id_to_idx:
            yield self.get_node(node_id)

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._catalog.edges)

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return len(self._catalog.edges)

    # =========================================================================
    # Hierarchy diagnostics
    # =========================================================================

    def count_descendants(self, node_id: str) -> int:
        """Number of nodes below node_id in the BELONGS_TO hierarchy."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return 0
        return len(rx.descendants(self._hierarchy, idx))

    def hierarchy_is_acyclic(self) -> bool:
        return rx.is_directed_acyclic_graph(self._hierarchy)

    def hierarchy_cycles(self) -> List[List[str]]:
        """BELONGS_TO cycles as lists of node ids. Empty for a valid catalog."""
        if self.hierarchy_is_acyclic():
            return []
        return [
            [self._idx_to_id[idx] for idx in cycle]
            for cycle in rx.simple_cycles(self._hierarchy)
        ]

    @property
    def dangling_edges(self) -> List[Edge]:
        """Edges referencing at least one id missing from the catalog."""
        return [self._catalog.edges[i] for i in self._dangling]

    @property
    def multi_parent_nodes(self) -> List[str]:
        return sorted(self._multi_parent)

    def get_stats(self) -> Dict[str, Any]:
        node_counts = {
            node_type.value: len(ids)
            for node_type, ids in self._nodes_by_type.items()
        }
        edge_counts: Dict[str, int] = defaultdict(int)
        for edge in self.iter_edges():
            edge_counts[edge.relation.value] += 1

        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "total_playbooks": len(self._catalog.playbooks),
            "total_rules": len(self._catalog.decision_rules),
            "nodes_by_type": node_counts,
            "edges_by_relation": dict(edge_counts),
            "roots": len(self.roots()),
            "hierarchy_cycles": len(self.hierarchy_cycles()),
            "multi_parent_nodes": len(self._multi_parent),
            "dangling_edges": len(self._dangling),
            "backend": "rustworkx",
        }
