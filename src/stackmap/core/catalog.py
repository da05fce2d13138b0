"""
Catalog - the static, load-once dataset.

The catalog is a single atomic document with four collections:

{
    "nodes": [{"id": "...", "name": "...", "type": "TOOL", "level": 3, ...}],
    "edges": [{"from": "...", "to": "...", "relation": "BELONGS_TO"}],
    "playbooks": [{"id": "...", "goal": "...", ...}],
    "decision_rules": [{"id": "R1", "if": {...}, "then": {...}, "explain": "..."}]
}

It is never mutated after load. Sessions receive it by reference and build
their own mutable state on top of it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from .exceptions import CatalogLoadError
from .types import DecisionRule, Edge, Node, Playbook

logger = logging.getLogger(__name__)


class Catalog(BaseModel):
    """Immutable in-memory representation of the full dataset."""
    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()
    playbooks: Tuple[Playbook, ...] = ()
    decision_rules: Tuple[DecisionRule, ...] = ()

    model_config = ConfigDict(frozen=True, extra="ignore")

    _playbooks_by_id: Dict[str, Playbook] = PrivateAttr(default_factory=dict)
    _rules_by_id: Dict[str, DecisionRule] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        # First occurrence wins, matching a linear scan over the lists
        for playbook in self.playbooks:
            self._playbooks_by_id.setdefault(playbook.id, playbook)
        for rule in self.decision_rules:
            self._rules_by_id.setdefault(rule.id, rule)

    # =========================================================================
    # Loading
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Catalog":
        """Validate a payload dictionary into a Catalog."""
        catalog = cls.model_validate(data)
        logger.debug(
            f"Catalog loaded: {len(catalog.nodes)} nodes, {len(catalog.edges)} edges, "
            f"{len(catalog.playbooks)} playbooks, {len(catalog.decision_rules)} rules"
        )
        return catalog

    @classmethod
    def from_json(cls, json_str: str) -> "Catalog":
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def load(cls, path: Path | str) -> "Catalog":
        """
        Load a catalog from a JSON file.

        Raises:
            CatalogLoadError: The file is missing, is not JSON, or does not
                match the catalog schema.
        """
        catalog_path = Path(path)
        if not catalog_path.exists():
            raise CatalogLoadError(str(catalog_path), "file not found")

        try:
            data = json.loads(catalog_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CatalogLoadError(str(catalog_path), str(e)) from e

        if not isinstance(data, dict):
            raise CatalogLoadError(str(catalog_path), "top-level JSON value must be an object")

        try:
            return cls.from_dict(data)
        except ValidationError as e:
            raise CatalogLoadError(
                str(catalog_path), f"{e.error_count()} validation error(s)"
            ) from e

    # =========================================================================
    # Lookups
    # =========================================================================

    def get_playbook(self, playbook_id: str) -> Optional[Playbook]:
        return self._playbooks_by_id.get(playbook_id)

    def get_rule(self, rule_id: str) -> Optional[DecisionRule]:
        return self._rules_by_id.get(rule_id)

    def to_dict(self) -> Dict[str, Any]:
        """Export using the payload's own key names (``from``, ``if`` ...)."""
        return {
            "nodes": [node.model_dump(mode="json") for node in self.nodes],
            "edges": [
                {"from": e.source_id, "to": e.target_id, "relation": e.relation.value}
                for e in self.edges
            ],
            "playbooks": [pb.model_dump(mode="json", exclude_none=True) for pb in self.playbooks],
            "decision_rules": [
                {
                    "id": rule.id,
                    "if": rule.condition.model_dump(mode="json", exclude_none=True),
                    "then": rule.outcome.model_dump(mode="json"),
                    "explain": rule.explain,
                }
                for rule in self.decision_rules
            ],
        }
