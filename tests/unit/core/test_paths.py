"""Unit tests for ancestor path reconstruction."""

from stackmap.core.graph import CatalogGraph
from stackmap.core.paths import ancestor_path, format_breadcrumb


class TestAncestorPath:

    def test_root_first(self, demo_graph):
        path = ancestor_path(demo_graph, "T_POSTGRES")
        assert [n.id for n in path] == ["L0", "L1_BACK", "C_DB", "T_POSTGRES"]

    def test_root_alone(self, demo_graph):
        assert [n.id for n in ancestor_path(demo_graph, "L0")] == ["L0"]

    def test_unknown_node(self, demo_graph):
        assert ancestor_path(demo_graph, "nope") == []

    def test_cycle_terminates(self, catalog_factory, caplog):
        catalog = catalog_factory(
            [("A", 0), ("B", 0)],
            [("A", "B", "BELONGS_TO"), ("B", "A", "BELONGS_TO")],
        )
        path = ancestor_path(CatalogGraph(catalog), "A")

        assert [n.id for n in path] == ["B", "A"]
        assert "Cyclic" in caplog.text

    def test_walks_through_missing_parent(self, catalog_factory):
        catalog = catalog_factory(
            [("R", 0), ("X", 2)],
            [("GHOST", "X", "BELONGS_TO"), ("R", "GHOST", "BELONGS_TO")],
        )
        path = ancestor_path(CatalogGraph(catalog), "X")
        assert [n.id for n in path] == ["R", "X"]


class TestBreadcrumb:

    def test_format(self, demo_graph):
        path = ancestor_path(demo_graph, "T_POSTGRES")
        assert format_breadcrumb(path) == "Build Journey › Backend & Data › Databases › Postgres"

    def test_custom_separator(self, demo_graph):
        path = ancestor_path(demo_graph, "C_DB")
        assert format_breadcrumb(path, " / ") == "Build Journey / Backend & Data / Databases"

    def test_empty(self):
        assert format_breadcrumb([]) == ""
