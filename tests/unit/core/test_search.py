"""
Unit tests for catalog search.
"""

import pytest

from stackmap.core.catalog import Catalog
from stackmap.core.search import SearchEngine, SearchStatus, highlight_match


@pytest.fixture
def engine(demo_catalog):
    return SearchEngine(demo_catalog)


@pytest.fixture
def crowded_catalog():
    return Catalog.from_dict({
        "nodes": [
            {"id": f"T{i:02d}", "name": f"Tool {i}", "type": "TOOL", "level": 3}
            for i in range(20)
        ],
    })


class TestSearch:

    @pytest.mark.parametrize("query", ["", "a", "  ", " b "])
    def test_short_queries_return_nothing(self, engine, query):
        assert engine.search(query) == []

    def test_finds_by_name(self, engine):
        results = engine.search("crm")
        assert results[0].name == "CRM Simples"
        assert "P_CRM_SIMPLE" in [n.id for n in results]

    def test_case_and_whitespace_insensitive(self, engine):
        assert engine.search("  CRM ") == engine.search("crm")

    def test_matches_summary_and_tags(self, engine):
        assert [n.id for n in engine.search("embeddings")] == ["K_RAG", "T_OPENAI"]
        assert "T_SUPABASE" in [n.id for n in engine.search("storage built")]

    def test_no_matches(self, engine):
        assert engine.search("zzzz") == []

    def test_cap_and_order(self, crowded_catalog):
        results = SearchEngine(crowded_catalog).search("tool")
        assert len(results) == 12
        assert [n.id for n in results] == [f"T{i:02d}" for i in range(12)]

    def test_cap_override(self, crowded_catalog):
        engine = SearchEngine(crowded_catalog, cap=5)
        assert len(engine.search("tool")) == 5
        assert len(engine.search("tool", cap=3)) == 3


class TestLookup:

    def test_idle(self, engine):
        result = engine.lookup("a")
        assert result.status == SearchStatus.IDLE
        assert result.matches == []

    def test_no_matches(self, engine):
        result = engine.lookup("zzzz")
        assert result.status == SearchStatus.NO_MATCHES
        assert result.query == "zzzz"

    def test_matches(self, engine):
        result = engine.lookup(" RAG ")
        assert result.status == SearchStatus.MATCHES
        assert result.query == "rag"
        assert "K_RAG" in [n.id for n in result.matches]


class TestHighlight:

    def test_splits_first_occurrence(self):
        assert highlight_match("CRM Simples", "crm") == ("", "CRM", " Simples")
        assert highlight_match("Next.js", "xt") == ("Ne", "xt", ".js")

    def test_no_occurrence(self):
        assert highlight_match("Supabase", "crm") == ("Supabase", "", "")
