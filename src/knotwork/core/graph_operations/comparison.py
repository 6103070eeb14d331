"""Structural graph comparison.

Two graphs are structurally equal when they have the same directedness, the
same set of node names and the same set of edge identities. Edge identities are
compared by endpoint names: ordered pairs for directed graphs, unordered pairs
for undirected graphs. Graph names and user data do not take part.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Hashable

if TYPE_CHECKING:
    from ..graph import Graph


@dataclass(frozen=True)
class GraphDifference:
    """
    Structural differences between two graphs.

    Attributes:
        directedness_differs (bool): One graph is directed and the other is not
        nodes_only_in_first (FrozenSet[str]): Node names missing from the second graph
        nodes_only_in_second (FrozenSet[str]): Node names missing from the first graph
        edges_only_in_first (FrozenSet[Hashable]): Edge identities missing from the second graph
        edges_only_in_second (FrozenSet[Hashable]): Edge identities missing from the first graph
    """

    directedness_differs: bool = False
    nodes_only_in_first: FrozenSet[str] = field(default_factory=frozenset)
    nodes_only_in_second: FrozenSet[str] = field(default_factory=frozenset)
    edges_only_in_first: FrozenSet[Hashable] = field(default_factory=frozenset)
    edges_only_in_second: FrozenSet[Hashable] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not (
            self.directedness_differs
            or self.nodes_only_in_first
            or self.nodes_only_in_second
            or self.edges_only_in_first
            or self.edges_only_in_second
        )


class GraphComparer:
    """Compares graphs by structure."""

    def equals(self, first: "Graph", second: "Graph") -> bool:
        """Check whether two graphs are structurally equal."""
        if first is second:
            return True
        if first.is_directed != second.is_directed:
            return False
        if len(first.nodes) != len(second.nodes) or len(first.edges) != len(second.edges):
            return False
        return self.compare(first, second).is_empty

    def compare(self, first: "Graph", second: "Graph") -> GraphDifference:
        """
        Compute the structural differences between two graphs.

        Returns:
            GraphDifference: Empty when the graphs are structurally equal
        """
        first_nodes = frozenset(first.nodes.names())
        second_nodes = frozenset(second.nodes.names())
        first_edges = self.edge_identities(first)
        second_edges = self.edge_identities(second)

        return GraphDifference(
            directedness_differs=first.is_directed != second.is_directed,
            nodes_only_in_first=first_nodes - second_nodes,
            nodes_only_in_second=second_nodes - first_nodes,
            edges_only_in_first=first_edges - second_edges,
            edges_only_in_second=second_edges - first_edges,
        )

    @staticmethod
    def edge_identities(graph: "Graph") -> FrozenSet[Hashable]:
        """Edge identities of a graph expressed with node names."""
        if graph.is_directed:
            return frozenset(graph.edges.endpoints())
        return frozenset(frozenset(pair) for pair in graph.edges.endpoints())
