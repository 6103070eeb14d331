"""
Tests for the edge collection in directed and undirected graphs.
"""

import pytest

from knotwork.core.exceptions import (
    EdgeNotFoundError,
    InvalidOperationError,
    NodeNotFoundError,
)
from knotwork.core.graph import Graph
from knotwork.core.models import Edge, Node


@pytest.fixture
def graph() -> Graph:
    graph = Graph()
    for name in ["a", "b", "c"]:
        graph.nodes.add(name)
    return graph


def test_add_by_names(graph):
    """Test adding an edge between existing nodes."""
    edge = graph.edges.add("a", "b")

    assert edge.source is graph.nodes["a"]
    assert edge.target is graph.nodes["b"]
    assert edge.graph is graph
    assert len(graph.edges) == 1


def test_add_by_nodes(graph):
    """Test adding an edge between node objects of the graph."""
    a, b = graph.nodes["a"], graph.nodes["b"]
    edge = graph.edges.add(a, b)
    assert graph.edges["a", "b"] is edge


def test_add_with_missing_endpoint_leaves_graph_unchanged(graph):
    """Test adding an edge to a nonexistent node."""
    with pytest.raises(NodeNotFoundError, match="Node 'missing' not found"):
        graph.edges.add("a", "missing")
    with pytest.raises(NodeNotFoundError):
        graph.edges.add("missing", "a")

    assert len(graph.edges) == 0
    assert graph.nodes.names() == ["a", "b", "c"]
    assert graph.nodes["a"].incident_edges == []


def test_add_with_foreign_node_fails(graph):
    """Endpoints must be nodes of the same graph."""
    foreign = Graph().nodes.add("a")

    with pytest.raises(NodeNotFoundError):
        graph.edges.add(foreign, "b")
    assert len(graph.edges) == 0


def test_add_without_target_fails(graph):
    with pytest.raises(TypeError):
        graph.edges.add("a")


def test_directed_readd_returns_existing(graph):
    """Re-adding a directed edge returns the stored edge."""
    first = graph.edges.add("a", "b")
    second = graph.edges.add("a", "b")

    assert first is second
    assert len(graph.edges) == 1


def test_directed_reverse_is_distinct(graph):
    """In directed graphs (a, b) and (b, a) are different edges."""
    forward = graph.edges.add("a", "b")
    backward = graph.edges.add("b", "a")

    assert forward is not backward
    assert len(graph.edges) == 2
    assert graph.edges["b", "a"] is backward


def test_undirected_identity_is_unordered():
    """In undirected graphs (a, b) and (b, a) are the same edge."""
    graph = Graph(directed=False)
    graph.nodes.add("a")
    graph.nodes.add("b")

    edge = graph.edges.add("a", "b")

    assert graph.edges.add("b", "a") is edge
    assert len(graph.edges) == 1
    assert graph.edges["b", "a"] is edge
    assert ("b", "a") in graph.edges
    assert graph.edges.remove("b", "a") is True
    assert len(graph.edges) == 0


def test_add_edge_object(graph):
    """Test adding a detached edge between nodes of the graph."""
    edge = Edge(graph.nodes["a"], graph.nodes["b"], user_data={"w": 1})

    assert graph.edges.add(edge) is edge
    assert edge.graph is graph


def test_add_edge_object_merges_into_existing(graph):
    """An edge object with a known identity merges its user data."""
    existing = graph.edges.add("a", "b")
    existing.user_data["w"] = 1
    duplicate = Edge(graph.nodes["a"], graph.nodes["b"], user_data={"label": "ab"})

    result = graph.edges.add(duplicate)

    assert result is existing
    assert existing.user_data == {"w": 1, "label": "ab"}
    assert duplicate.graph is None
    assert len(graph.edges) == 1


def test_add_edge_object_with_foreign_endpoints_fails(graph):
    """Edge objects must connect nodes of this graph."""
    with pytest.raises(NodeNotFoundError):
        graph.edges.add(Edge(Node("a"), Node("b")))


def test_add_edge_of_other_graph_fails(graph):
    other = Graph.from_edges([("a", "b")])
    with pytest.raises(InvalidOperationError):
        graph.edges.add(other.edges["a", "b"])


def test_lookup(graph):
    """Test indexed edge lookup."""
    edge = graph.edges.add("a", "b")

    assert graph.edges["a", "b"] is edge
    assert graph.edges.get("a", "b") is edge
    assert graph.edges.get("b", "a") is None
    assert graph.edges.get("a", "missing") is None

    with pytest.raises(EdgeNotFoundError, match="No edge exists from 'b' to 'a'"):
        graph.edges["b", "a"]
    with pytest.raises(NodeNotFoundError):
        graph.edges["a", "missing"]


def test_contains(graph):
    """Test membership by pair and by object."""
    edge = graph.edges.add("a", "b")

    assert ("a", "b") in graph.edges
    assert edge in graph.edges
    assert ("b", "a") not in graph.edges
    assert ("a", "missing") not in graph.edges
    assert Edge(graph.nodes["a"], graph.nodes["b"]) not in graph.edges
    assert "a" not in graph.edges


def test_remove(graph):
    """Test removing edges by endpoints and by object."""
    ab = graph.edges.add("a", "b")
    graph.edges.add("b", "c")

    assert graph.edges.remove("b", "c") is True
    assert graph.edges.remove(ab) is True
    assert graph.edges.remove("a", "b") is False
    assert graph.edges.remove(ab) is False
    assert len(graph.edges) == 0
    assert ab.graph is None
    # Removing edges never removes nodes
    assert len(graph.nodes) == 3


def test_remove_updates_incidence(graph):
    graph.edges.add("a", "b")
    graph.edges.remove("a", "b")

    assert graph.nodes["a"].outgoing_edges == []
    assert graph.nodes["b"].incoming_edges == []


def test_self_loop(graph):
    """Self-loops are regular edges."""
    loop = graph.edges.add("a", "a")

    assert loop.is_self_loop
    assert graph.edges.incident("a") == [loop]

    graph.nodes.remove("a")
    assert len(graph.edges) == 0


def test_incident(graph):
    ab = graph.edges.add("a", "b")
    ca = graph.edges.add("c", "a")
    graph.edges.add("b", "c")

    assert graph.edges.incident("a") == [ab, ca]
    with pytest.raises(NodeNotFoundError):
        graph.edges.incident("missing")


def test_iteration_and_endpoints(graph):
    graph.edges.add("b", "c")
    graph.edges.add("a", "b")

    assert [edge.endpoints for edge in graph.edges] == [("b", "c"), ("a", "b")]
    assert graph.edges.endpoints() == [("b", "c"), ("a", "b")]


def test_clear_keeps_nodes(graph):
    graph.edges.add("a", "b")
    graph.edges.add("b", "c")

    graph.edges.clear()

    assert len(graph.edges) == 0
    assert len(graph.nodes) == 3


def test_is_directed_matches_graph():
    assert Graph(directed=True).edges.is_directed
    assert not Graph(directed=False).edges.is_directed


def test_invalid_reference_type(graph):
    with pytest.raises(TypeError):
        graph.edges.resolve("a")
