"""
stackmap - Technology taxonomy explorer and stack recommender.

Explore a fixed catalog of layers, categories, concepts, tools and
playbooks as a graph that reveals itself one level at a time, and get a
stack recommendation from a short questionnaire.

Key Components:
- core: Catalog, graph index, visibility, ancestor paths, search
- rules: Decision rule scoring, wizard, prompt generation
- session: One user's view over a shared catalog

Usage:
    from stackmap import Catalog, ExplorerSession

    session = ExplorerSession(Catalog.load(".stackmap/seed.json"))
    result = session.expand("L0")
"""

__version__ = "0.1.0"

from .core.catalog import Catalog
from .core.types import AnswerSet, DecisionRule, Edge, Node, NodeType, Playbook, RelationType
from .core.visibility import ExpandReason, ExpandResult
from .session import ExplorerSession

__all__ = [
    "__version__",
    "Catalog",
    "AnswerSet",
    "DecisionRule",
    "Edge",
    "Node",
    "NodeType",
    "Playbook",
    "RelationType",
    "ExpandReason",
    "ExpandResult",
    "ExplorerSession",
]
