"""
Core modules for stackmap.

This package contains the fundamental building blocks:
- types: Data structures (Node, Edge, Playbook, DecisionRule, ...)
- catalog: The load-once dataset
- graph: Read-only graph index over the catalog
- visibility: Progressive reveal of the graph
- paths: Ancestor paths for breadcrumbs
- search: Substring search
"""

from .catalog import Catalog
from .exceptions import (
    CatalogLoadError, ConfigError, EmptyRuleTableError, IncompleteAnswersError,
    InvalidAnswerError, NodeNotFoundError, PlaybookNotFoundError, StackmapError,
)
from .graph import CatalogGraph
from .paths import ancestor_path, format_breadcrumb
from .search import SearchEngine, SearchResult, SearchStatus, highlight_match
from .types import (
    AltStack, AnswerSet, DecisionRule, Direction, Edge, EdgeRef, Node, NodeType,
    Playbook, PromptGenerator, PromptInput, RelationType, RuleCondition, RuleOutcome,
)
from .visibility import ExpandReason, ExpandResult, VisibilityEngine, VisibleGraph

__all__ = [
    # Types
    "AltStack", "AnswerSet", "DecisionRule", "Direction", "Edge", "EdgeRef",
    "Node", "NodeType", "Playbook", "PromptGenerator", "PromptInput",
    "RelationType", "RuleCondition", "RuleOutcome",
    # Catalog & graph
    "Catalog", "CatalogGraph",
    # Visibility
    "ExpandReason", "ExpandResult", "VisibilityEngine", "VisibleGraph",
    # Paths & search
    "ancestor_path", "format_breadcrumb",
    "SearchEngine", "SearchResult", "SearchStatus", "highlight_match",
    # Errors
    "StackmapError", "CatalogLoadError", "ConfigError", "EmptyRuleTableError",
    "IncompleteAnswersError", "InvalidAnswerError", "NodeNotFoundError",
    "PlaybookNotFoundError",
]
