"""
Explorer Session - the function-call boundary between core and presentation.

A session holds a read-only reference to a Catalog plus the mutable state of
one user: which nodes are visible and which node is selected. Several
sessions can share one Catalog; each keeps its own visibility.

Usage:
    catalog = Catalog.load(".stackmap/seed.json")
    session = ExplorerSession(catalog)
    session.expand("L0")
    session.search("crm")
"""

import logging
from typing import List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .config import StackmapConfig
from .core.catalog import Catalog
from .core.exceptions import NodeNotFoundError, PlaybookNotFoundError
from .core.graph import CatalogGraph
from .core.paths import ancestor_path
from .core.search import SearchEngine, SearchResult
from .core.types import AnswerSet, Direction, Node, Playbook, RelationType
from .core.visibility import ExpandReason, ExpandResult, VisibilityEngine, VisibleGraph
from .rules.engine import Recommendation, RuleEngine
from .rules.prompts import find_playbook_for_answers, render_prompt

logger = logging.getLogger(__name__)


class Connection(BaseModel):
    """A neighbour of a node, resolved for display."""
    node: Node
    relation: RelationType
    direction: Direction

    model_config = ConfigDict(frozen=True)


class ExplorerSession:
    """One user's view over a shared, immutable Catalog."""

    def __init__(self, catalog: Catalog, config: Optional[StackmapConfig] = None,
                 graph: Optional[CatalogGraph] = None):
        self.catalog = catalog
        self.config = config or StackmapConfig()
        self.graph = graph or CatalogGraph(catalog)

        self.visibility = VisibilityEngine(self.graph, initial_level=self.config.graph.initial_level)
        self.search_engine = SearchEngine(
            catalog,
            cap=self.config.search.cap,
            min_query_length=self.config.search.min_query_length,
        )
        rules = self.config.rules
        self.rule_engine = RuleEngine(
            catalog.decision_rules,
            weights=rules.weights,
            default_rule_id=rules.default_rule_id,
            builder_keywords=rules.builder_keywords,
            builder_label=rules.builder_label,
        )
        self.current_node_id: Optional[str] = None

    # =========================================================================
    # Graph
    # =========================================================================

    def get_visible_graph(self) -> VisibleGraph:
        return self.visibility.snapshot()

    def expand(self, node_id: str) -> ExpandResult:
        return self.visibility.expand(node_id)

    def expand_to(self, node_id: str) -> None:
        self.visibility.expand_to(node_id)

    def expand_all(self) -> None:
        self.visibility.expand_all()

    def reset(self) -> None:
        self.visibility.reset()
        self.current_node_id = None

    def ancestor_path(self, node_id: str) -> List[Node]:
        return ancestor_path(self.graph, node_id)

    # =========================================================================
    # Selection
    # =========================================================================

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.graph.get_node(node_id)

    def require_node(self, node_id: str) -> Node:
        node = self.graph.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def select_node(self, node_id: str) -> Optional[Node]:
        """
        Make node_id the current node, revealing it first if needed.

        Unknown ids leave the selection unchanged and return None.
        """
        node = self.graph.get_node(node_id)
        if node is None:
            return None
        if not self.visibility.is_visible(node_id):
            self.visibility.expand_to(node_id)
        self.current_node_id = node_id
        return node

    def clear_selection(self) -> None:
        self.current_node_id = None

    def expand_selected(self) -> ExpandResult:
        if self.current_node_id is None:
            return ExpandResult(added_count=0, reason=ExpandReason.NO_CHILDREN)
        return self.expand(self.current_node_id)

    def connections(self, node_id: str) -> List[Connection]:
        """Resolved neighbours of node_id; edges to unknown ids are skipped."""
        result = []
        for ref in self.graph.edges_touching(node_id):
            neighbor = self.graph.get_node(ref.neighbor_id)
            if neighbor is None:
                continue
            result.append(Connection(node=neighbor, relation=ref.edge.relation, direction=ref.direction))
        return result

    # =========================================================================
    # Search
    # =========================================================================

    def search(self, query: str) -> List[Node]:
        return self.search_engine.search(query)

    def lookup(self, query: str) -> SearchResult:
        return self.search_engine.lookup(query)

    # =========================================================================
    # Recommendations
    # =========================================================================

    def select_rule(self, answers: AnswerSet) -> Recommendation:
        return self.rule_engine.select_rule(answers)

    def get_playbook(self, playbook_id: str) -> Optional[Playbook]:
        return self.catalog.get_playbook(playbook_id)

    def require_playbook(self, playbook_id: str) -> Playbook:
        playbook = self.catalog.get_playbook(playbook_id)
        if playbook is None:
            raise PlaybookNotFoundError(playbook_id)
        return playbook

    def suggested_playbook(self, answers: AnswerSet) -> Optional[Playbook]:
        return find_playbook_for_answers(self.catalog, answers)

    def render_prompt(self, playbook_id: str, input_values: Mapping[str, Optional[str]],
                      current_stack: Sequence[str] = ()) -> str:
        """Render a playbook prompt. Unknown playbooks render as ""."""
        playbook = self.catalog.get_playbook(playbook_id)
        if playbook is None:
            logger.debug(f"render_prompt: unknown playbook {playbook_id}")
        return render_prompt(
            playbook,
            input_values,
            current_stack,
            stack_placeholder=self.config.prompts.stack_placeholder,
        )
