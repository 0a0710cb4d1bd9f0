# tests/conftest.py
"""
Pytest configuration and fixtures.

Graphs are built in memory per test. HTTP tests get their own
GraphRegistry so they never share state with each other.
"""

import pytest

from tgraph.graph import TemporalGraph


@pytest.fixture
def event_graph() -> TemporalGraph:
    """
    Discrete-event graph on A..E (E isolated).

    A -> B at [2, 5]
    B -> C at [4, 6]
    A -> C at [9]
    C -> D at [7]
    D -> A at [8]
    """
    graph = TemporalGraph()
    for node in ["A", "B", "C", "D", "E"]:
        graph.add_node(node)
    graph.add_event_edge("A", "B", [5, 2])
    graph.add_event_edge("B", "C", [4, 6])
    graph.add_event_edge("A", "C", [9])
    graph.add_event_edge("C", "D", [7])
    graph.add_event_edge("D", "A", [8])
    return graph


@pytest.fixture
def triangle_graph() -> TemporalGraph:
    """
    Nodes 1..5, undirected edges active over [0, 5]:
    1-2 (w=1), 2-3 (w=1), 1-3 (w=10). Nodes 4 and 5 isolated.
    """
    graph = TemporalGraph()
    graph.init(5)
    graph.add_undirected_edge(1, 2, 1, 0, 5)
    graph.add_undirected_edge(2, 3, 1, 0, 5)
    graph.add_undirected_edge(1, 3, 10, 0, 5)
    return graph


@pytest.fixture
def tree_graph() -> TemporalGraph:
    """Directed tree 1 -> {2, 3}, 2 -> 4, 3 -> 5, all active over [0, 5]."""
    graph = TemporalGraph()
    graph.init(5)
    for src, dst in [(1, 2), (1, 3), (2, 4), (3, 5)]:
        graph.add_interval_edge(src, dst, 1, 0, 5)
    return graph


@pytest.fixture
def client():
    """TestClient over the app with a fresh, empty graph registry."""
    from fastapi.testclient import TestClient

    from tgraph.api.registry import GraphRegistry, get_registry
    from tgraph.main import app

    registry = GraphRegistry()
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============================================================
# AUTO-MARKER FOR API TESTS
# ============================================================
# Tests that use the HTTP client are marked "api" so they can be
# deselected with: pytest -m "not api"

API_FIXTURES = {"client"}


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests that use the HTTP client."""
    api_marker = pytest.mark.api

    for item in items:
        if hasattr(item, "fixturenames"):
            if any(fixture in API_FIXTURES for fixture in item.fixturenames):
                if not any(mark.name == "api" for mark in item.iter_markers()):
                    item.add_marker(api_marker)
