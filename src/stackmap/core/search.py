"""
Substring search over the catalog.

Matching is a case-insensitive substring test against a node's name,
summary and tags. Results keep catalog order; there is no relevance
ranking beyond presence.
"""

from enum import StrEnum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .catalog import Catalog
from .types import Node

DEFAULT_CAP = 12
MIN_QUERY_LENGTH = 2


class SearchStatus(StrEnum):
    IDLE = "idle"  # no query yet, or too short to run
    NO_MATCHES = "no_matches"
    MATCHES = "matches"


class SearchResult(BaseModel):
    query: str
    status: SearchStatus
    matches: List[Node] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class SearchEngine:
    """Capped substring search over catalog nodes."""

    def __init__(self, catalog: Catalog, cap: int = DEFAULT_CAP,
                 min_query_length: int = MIN_QUERY_LENGTH):
        self._nodes = list(catalog.nodes)
        self.cap = cap
        self.min_query_length = min_query_length

    @staticmethod
    def normalize(query: str) -> str:
        return (query or "").strip().lower()

    def search(self, query: str, cap: int | None = None) -> List[Node]:
        """
        Return up to ``cap`` nodes whose text contains the query.

        Queries shorter than the minimum length return an empty list.
        """
        needle = self.normalize(query)
        if len(needle) < self.min_query_length:
            return []

        limit = self.cap if cap is None else cap
        results = []
        for node in self._nodes:
            if len(results) >= limit:
                break
            if needle in node.searchable_text:
                results.append(node)
        return results

    def lookup(self, query: str) -> SearchResult:
        """Like search(), but tells "nothing to search yet" apart from "no matches"."""
        needle = self.normalize(query)
        if len(needle) < self.min_query_length:
            return SearchResult(query=needle, status=SearchStatus.IDLE)

        matches = self.search(needle)
        status = SearchStatus.MATCHES if matches else SearchStatus.NO_MATCHES
        return SearchResult(query=needle, status=status, matches=matches)


def highlight_match(text: str, query: str) -> Tuple[str, str, str]:
    """
    Split text around the first case-insensitive occurrence of query.

    Returns (before, match, after); match is empty when the query does not
    occur in the text.
    """
    needle = SearchEngine.normalize(query)
    idx = text.lower().find(needle) if needle else -1
    if idx == -1:
        return text, "", ""
    end = idx + len(needle)
    return text[:idx], text[idx:end], text[end:]
