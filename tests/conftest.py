"""Shared fixtures for the stackmap test suite."""

from typing import Iterable, Tuple

import pytest

from stackmap.core.catalog import Catalog
from stackmap.core.demo import build_demo_catalog
from stackmap.core.graph import CatalogGraph


def make_catalog(
    nodes: Iterable[Tuple[str, int]],
    edges: Iterable[Tuple[str, str, str]] = (),
    node_type: str = "CONCEPT",
) -> Catalog:
    """Build a minimal catalog from (id, level) pairs and (from, to, relation) triples."""
    return Catalog.from_dict({
        "nodes": [
            {"id": node_id, "name": node_id.title(), "type": node_type, "level": level}
            for node_id, level in nodes
        ],
        "edges": [{"from": src, "to": dst, "relation": rel} for src, dst, rel in edges],
    })


@pytest.fixture
def demo_catalog() -> Catalog:
    return build_demo_catalog()


@pytest.fixture
def demo_graph(demo_catalog) -> CatalogGraph:
    return CatalogGraph(demo_catalog)


@pytest.fixture
def catalog_factory():
    return make_catalog
