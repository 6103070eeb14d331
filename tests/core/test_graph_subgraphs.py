"""
Tests for sub graph views and the sub graph collection.
"""

import pytest

from knotwork.core.exceptions import (
    DuplicateNameError,
    EdgeNotFoundError,
    InvalidOperationError,
    NodeNotFoundError,
    SubGraphNotFoundError,
    ValidationError,
)
from knotwork.core.graph import Graph
from knotwork.core.models import Node, SubGraph


@pytest.fixture
def sample_graph() -> Graph:
    """
    Fixture providing a test graph with the following structure:
    A -> B -> D
    |    |
    v    v
    C <- E
    """
    return Graph.from_edges([("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("E", "C")])


def test_add_subgraph(sample_graph):
    """Test creating an empty sub graph."""
    cluster = sample_graph.subgraphs.add("cluster")

    assert isinstance(cluster, SubGraph)
    assert cluster.graph is sample_graph
    assert len(cluster.nodes) == 0
    assert len(cluster.edges) == 0
    assert sample_graph.subgraphs["cluster"] is cluster
    assert "cluster" in sample_graph.subgraphs
    assert cluster in sample_graph.subgraphs


def test_duplicate_subgraph_name_fails(sample_graph):
    sample_graph.subgraphs.add("cluster")
    with pytest.raises(DuplicateNameError, match="Sub graph 'cluster' already exists"):
        sample_graph.subgraphs.add("cluster")


def test_invalid_subgraph_name_fails(sample_graph):
    with pytest.raises(ValidationError):
        sample_graph.subgraphs.add("")


def test_lookup_missing_subgraph(sample_graph):
    with pytest.raises(SubGraphNotFoundError):
        sample_graph.subgraphs["missing"]
    assert sample_graph.subgraphs.get("missing") is None
    assert "missing" not in sample_graph.subgraphs


def test_node_references(sample_graph):
    """Sub graphs reference the parent's own node objects."""
    cluster = sample_graph.subgraphs.add("cluster")

    a = cluster.nodes.add("A")
    cluster.nodes.add(sample_graph.nodes["B"])

    assert a is sample_graph.nodes["A"]
    assert cluster.nodes.names() == ["A", "B"]
    assert "A" in cluster.nodes
    assert a in cluster.nodes
    assert "C" not in cluster.nodes


def test_node_reference_must_exist_in_parent(sample_graph):
    """Test referencing a node the parent does not contain."""
    cluster = sample_graph.subgraphs.add("cluster")

    with pytest.raises(NodeNotFoundError):
        cluster.nodes.add("missing")
    with pytest.raises(NodeNotFoundError):
        cluster.nodes.add(Node("A"))
    assert len(cluster.nodes) == 0


def test_edge_references(sample_graph):
    """Test referencing edges by pair and by object."""
    cluster = sample_graph.subgraphs.add("cluster")

    ab = cluster.edges.add(("A", "B"))
    cluster.edges.add(sample_graph.edges["B", "D"])

    assert ab is sample_graph.edges["A", "B"]
    assert cluster.edges.endpoints() == [("A", "B"), ("B", "D")]
    assert ("A", "B") in cluster.edges
    assert ("A", "C") not in cluster.edges
    # Edge references do not pull in their endpoints
    assert len(cluster.nodes) == 0


def test_edge_reference_must_exist_in_parent(sample_graph):
    cluster = sample_graph.subgraphs.add("cluster")

    with pytest.raises(EdgeNotFoundError):
        cluster.edges.add(("B", "A"))
    with pytest.raises(NodeNotFoundError):
        cluster.edges.add(("A", "missing"))


def test_remove_references(sample_graph):
    cluster = sample_graph.subgraphs.add("cluster")
    cluster.nodes.add("A")
    cluster.edges.add(("A", "B"))

    assert cluster.nodes.remove("A") is True
    assert cluster.nodes.remove("A") is False
    assert cluster.nodes.remove("missing") is False
    assert cluster.edges.remove(("A", "B")) is True
    assert cluster.edges.remove(("A", "B")) is False

    # The parent graph is untouched
    assert "A" in sample_graph.nodes
    assert ("A", "B") in sample_graph.edges


def test_parent_node_removal_drops_references(sample_graph):
    """Removing a node from the parent cascades into every sub graph."""
    first = sample_graph.subgraphs.add("first")
    second = sample_graph.subgraphs.add("second")
    for subgraph in (first, second):
        subgraph.nodes.add("B")
        subgraph.nodes.add("A")
        subgraph.edges.add(("A", "B"))
        subgraph.edges.add(("A", "C"))

    sample_graph.nodes.remove("B")

    for subgraph in (first, second):
        assert subgraph.nodes.names() == ["A"]
        assert subgraph.edges.endpoints() == [("A", "C")]


def test_parent_edge_removal_drops_references(sample_graph):
    cluster = sample_graph.subgraphs.add("cluster")
    edge = cluster.edges.add(("E", "C"))

    sample_graph.edges.remove("E", "C")

    assert edge not in cluster.edges
    assert len(cluster.edges) == 0


def test_readding_node_does_not_restore_reference(sample_graph):
    """A new node with a removed node's name is a different node."""
    cluster = sample_graph.subgraphs.add("cluster")
    cluster.nodes.add("D")

    sample_graph.nodes.remove("D")
    sample_graph.nodes.add("D")

    assert "D" not in cluster.nodes


def test_remove_subgraph(sample_graph):
    """Removing a sub graph leaves the parent's nodes and edges in place."""
    cluster = sample_graph.subgraphs.add("cluster")
    cluster.nodes.add("A")

    assert sample_graph.subgraphs.remove("cluster") is True
    assert sample_graph.subgraphs.remove(cluster) is False
    assert cluster.graph is None
    assert len(cluster.nodes) == 0
    assert "A" in sample_graph.nodes

    with pytest.raises(InvalidOperationError):
        cluster.nodes.add("A")


def test_rename_subgraph(sample_graph):
    cluster = sample_graph.subgraphs.add("cluster")
    sample_graph.subgraphs.add("other")

    cluster.name = "renamed"
    assert sample_graph.subgraphs["renamed"] is cluster
    assert "cluster" not in sample_graph.subgraphs

    with pytest.raises(DuplicateNameError):
        cluster.name = "other"
    assert cluster.name == "renamed"


def test_clear_subgraphs(sample_graph):
    sample_graph.subgraphs.add("first")
    sample_graph.subgraphs.add("second")

    sample_graph.subgraphs.clear()

    assert len(sample_graph.subgraphs) == 0
    assert len(sample_graph.nodes) == 5


def test_subgraphs_iterate_in_insertion_order(sample_graph):
    for name in ["z", "a", "m"]:
        sample_graph.subgraphs.add(name)

    assert [subgraph.name for subgraph in sample_graph.subgraphs] == ["z", "a", "m"]
    assert sample_graph.subgraphs.names() == ["z", "a", "m"]


def test_contains_unhashable_value(sample_graph):
    cluster = sample_graph.subgraphs.add("cluster")
    cluster.nodes.add("A")

    assert ["cluster"] not in sample_graph.subgraphs
    assert ["A"] not in cluster.nodes
    assert [("A", "B")] not in cluster.edges
