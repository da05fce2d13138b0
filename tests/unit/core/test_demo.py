"""
Unit tests for the Demo Manager.
"""

import json

from stackmap.core.catalog import Catalog
from stackmap.core.demo import DEMO_CATALOG, DemoManager, build_demo_catalog
from stackmap.core.graph import CatalogGraph
from stackmap.core.types import NodeType


class TestDemoManager:
    """Test the demo catalog provisioning."""

    def test_provision_writes_seed(self, tmp_path):
        manager = DemoManager(tmp_path)
        seed_path = manager.provision()

        assert seed_path == tmp_path / ".stackmap" / "seed.json"
        assert seed_path.exists()
        assert json.loads(seed_path.read_text(encoding="utf-8")) == DEMO_CATALOG

    def test_provision_custom_path(self, tmp_path):
        seed_path = DemoManager(tmp_path).provision("data/catalog.json")
        assert seed_path == tmp_path / "data" / "catalog.json"

        catalog = Catalog.load(seed_path)
        assert len(catalog.nodes) == len(DEMO_CATALOG["nodes"])


class TestDemoCatalog:
    """The demo dataset is internally consistent."""

    def test_hierarchy_is_sound(self):
        graph = CatalogGraph(build_demo_catalog())
        assert graph.hierarchy_is_acyclic()
        assert graph.dangling_edges == []
        assert [n.id for n in graph.roots()] == ["L0"]

    def test_every_type_present(self):
        graph = CatalogGraph(build_demo_catalog())
        for node_type in NodeType:
            assert graph.get_nodes_by_type(node_type)

    def test_playbook_nodes_have_playbooks(self):
        catalog = build_demo_catalog()
        graph = CatalogGraph(catalog)
        for node in graph.get_nodes_by_type(NodeType.PLAYBOOK):
            playbook = catalog.get_playbook(node.id)
            assert playbook is not None
            assert playbook.prompt_generator is not None

    def test_default_rule_present(self):
        assert build_demo_catalog().get_rule("R2") is not None
