"""Graph projection operations.

Both operations build a new graph from the node names and edge endpoints of an
existing one. Names, user data and sub graphs are not carried over; the source
graph's configuration is.
"""

import logging
from typing import TYPE_CHECKING

from ..exceptions import InvalidOperationError

if TYPE_CHECKING:
    from ..graph import Graph

logger = logging.getLogger(__name__)


class GraphProjection:
    """Derives transposed and undirected graphs."""

    @staticmethod
    def transpose(graph: "Graph") -> "Graph":
        """
        Build a directed graph with every edge of ``graph`` reversed.

        Args:
            graph: Directed graph to transpose

        Returns:
            Graph: New directed graph with the same node names

        Raises:
            InvalidOperationError: If ``graph`` is undirected
        """
        if not graph.is_directed:
            raise InvalidOperationError("Can only get the transpose of a directed graph")

        result = type(graph)(directed=True, config=graph.config)
        for node in graph.nodes:
            result.nodes.add(node.name)
        for edge in graph.edges:
            result.edges.add(edge.target.name, edge.source.name)

        logger.debug("Transposed graph %r (%d edge(s))", graph.name, len(result.edges))
        return result

    @staticmethod
    def to_undirected(graph: "Graph") -> "Graph":
        """
        Build an undirected graph with the same node names.

        Directed edges (s, t) and (t, s) collapse into a single undirected edge.

        Returns:
            Graph: New undirected graph
        """
        result = type(graph)(directed=False, config=graph.config)
        for node in graph.nodes:
            result.nodes.add(node.name)
        for edge in graph.edges:
            result.edges.add(edge.source.name, edge.target.name)

        logger.debug(
            "Projected graph %r to undirected: %d edge(s) became %d",
            graph.name,
            len(graph.edges),
            len(result.edges),
        )
        return result
