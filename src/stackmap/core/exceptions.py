"""
Exception hierarchy for stackmap.

Most engine operations degrade to a no-op or an empty result instead of
raising. The exceptions below are reserved for conditions a caller has to
handle explicitly.
"""

from typing import Dict, Optional


class StackmapError(Exception):
    """Base exception for all stackmap errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class CatalogLoadError(StackmapError):
    """The dataset file is missing, unreadable, or fails validation."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load catalog: {reason}", {"path": path})
        self.path = path


class NodeNotFoundError(StackmapError):
    def __init__(self, node_id: str):
        super().__init__(f"Node not found: {node_id}")
        self.node_id = node_id


class PlaybookNotFoundError(StackmapError):
    def __init__(self, playbook_id: str):
        super().__init__(f"Playbook not found: {playbook_id}")
        self.playbook_id = playbook_id


class EmptyRuleTableError(StackmapError):
    """No decision rules are available, so no recommendation can be produced."""

    def __init__(self):
        super().__init__("Decision rule table is empty")


class ConfigError(StackmapError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid configuration: {reason}", {"path": path})
        self.path = path


class InvalidAnswerError(StackmapError):
    """A wizard answer is not one of the question's options."""

    def __init__(self, question_id: str, value: object):
        super().__init__(f"Invalid answer for '{question_id}': {value!r}")
        self.question_id = question_id
        self.value = value


class IncompleteAnswersError(StackmapError):
    def __init__(self, missing: list):
        super().__init__(f"Unanswered questions: {', '.join(missing)}")
        self.missing = missing
