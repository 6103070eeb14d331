"""
Core graph data structure.

This module provides the Graph class, which composes a node collection, an edge
collection and a sub graph collection into one addressable unit. Whether the
graph is directed is fixed at construction and selects the identity strategy
of its edge collection.

The collections validate every cross reference at mutation time:
- edge endpoints must be nodes of the same graph
- sub graph references must point to nodes and edges of the parent graph
- removing a node removes its incident edges, and removing a node or an edge
  removes every sub graph reference to it

Whole-graph algorithms (union, disjoint union, transpose, undirected projection
and structural comparison) live in ``graph_operations`` and are exposed here as
methods. They read their inputs and write into a graph built from scratch or
into ``self``; they never re-link node objects of another graph.

Graphs are not thread-safe. Callers that share a graph between threads must
serialize access themselves.
"""

import logging
from typing import Iterable, Optional, Tuple

from .collections import (
    DirectedIdentity,
    EdgeCollection,
    NodeCollection,
    SubGraphCollection,
    UndirectedIdentity,
)
from .config import DEFAULT_CONFIG, GraphConfig
from .events import GraphEventListener, GraphEventManager
from .exceptions import UnsupportedOperationError
from .graph_operations.combination import GraphCombiner
from .graph_operations.comparison import GraphComparer
from .graph_operations.projection import GraphProjection
from .models.edge import Edge
from .models.node import Node
from .types import UserData

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed or undirected graph of named nodes, edges and sub graphs.

    Attributes:
        name (Optional[str]): Name of the graph, not required to be unique
        events (GraphEventManager): Change notifications for this graph
    """

    def __init__(
        self,
        directed: bool = True,
        name: Optional[str] = None,
        config: Optional[GraphConfig] = None,
    ):
        """
        Initialize an empty graph.

        Args:
            directed (bool): Whether edges are directed. Cannot be changed later.
            name (Optional[str]): Name of the graph
            config (Optional[GraphConfig]): Options; defaults to GraphConfig()
        """
        self._is_directed = bool(directed)
        self.name = name
        self._config = config if config is not None else DEFAULT_CONFIG
        self.events = GraphEventManager(enabled=self._config.emit_events)

        identity = DirectedIdentity() if self._is_directed else UndirectedIdentity()
        self._nodes = NodeCollection(self)
        self._edges = EdgeCollection(self, identity)
        self._subgraphs = SubGraphCollection(self)
        self._user_data: UserData = {}

    @property
    def is_directed(self) -> bool:
        return self._is_directed

    @property
    def config(self) -> GraphConfig:
        """Options fixed at construction; derived graphs share them."""
        return self._config

    @property
    def nodes(self) -> NodeCollection:
        return self._nodes

    @property
    def edges(self) -> EdgeCollection:
        return self._edges

    @property
    def subgraphs(self) -> SubGraphCollection:
        return self._subgraphs

    @property
    def user_data(self) -> UserData:
        return self._user_data

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for changes to this graph."""
        self.events.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a change listener."""
        self.events.remove_listener(listener)

    # Cascading removal. The collections resolve references and then hand the
    # actual removal to these methods, which touch every collection involved.

    def _remove_node(self, node: Node) -> None:
        # Incident edges are collected up front and detached before the node,
        # so no edge ever references a node outside the collection.
        incident = self._edges.incident(node)
        for edge in incident:
            self._remove_edge(edge)
        self._subgraphs._discard_node(node)
        self._nodes._detach(node)
        logger.debug("Node '%s' removed with %d incident edge(s)", node.name, len(incident))

    def _remove_edge(self, edge: Edge) -> None:
        self._subgraphs._discard_edge(edge)
        self._edges._detach(edge)

    # Whole-graph operations

    def is_disjoint_with(self, other: "Graph") -> bool:
        """
        Check whether two graphs share no node name.

        The smaller node collection is iterated and probed against the larger.

        Args:
            other (Graph): Graph to compare with

        Returns:
            bool: True if no node name occurs in both graphs
        """
        smaller, larger = (self, other) if len(self.nodes) <= len(other.nodes) else (other, self)
        return not any(node.name in larger.nodes for node in smaller.nodes)

    def union_with(self, other: "Graph", include_user_data: Optional[bool] = None) -> None:
        """
        Add all nodes and edges of another graph to this graph.

        Nodes whose names already exist are merged with the existing node.
        Edges are re-created between this graph's own nodes. User data is
        copied according to ``config.user_data_copy``; with the default
        shallow mode, mutable values end up shared by both graphs.

        Args:
            other (Graph): Graph to copy from; it is not modified
            include_user_data (Optional[bool]): Whether to copy user data of
                nodes and edges. None uses ``config.include_user_data``.
        """
        GraphCombiner.union(self, other, include_user_data=include_user_data)

    def disjoint_union_with(
        self, other: "Graph", prefix: str, include_user_data: Optional[bool] = None
    ) -> None:
        """
        Add all nodes and edges of another graph under prefixed names.

        Args:
            other (Graph): Graph to copy from; it is not modified
            prefix (str): Prefix prepended to every incoming node name
            include_user_data (Optional[bool]): Whether to copy user data of
                nodes and edges. None uses ``config.include_user_data``.

        Raises:
            DuplicateNameError: If a prefixed name already exists in this
                graph. Nothing is added in that case.
        """
        GraphCombiner.disjoint_union(self, other, prefix, include_user_data=include_user_data)

    def copy(self, include_user_data: Optional[bool] = None) -> "Graph":
        """Create an independent graph with the same structure and sub graphs."""
        return GraphCombiner.copy(self, include_user_data=include_user_data)

    def to_undirected(self) -> "Graph":
        """Create an undirected graph with the same nodes and one edge per connected pair."""
        return GraphProjection.to_undirected(self)

    def transpose(self) -> "Graph":
        """
        Create a directed graph with every edge reversed.

        Raises:
            InvalidOperationError: If this graph is undirected
        """
        return GraphProjection.transpose(self)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[str, str]],
        directed: bool = True,
        name: Optional[str] = None,
        config: Optional[GraphConfig] = None,
    ) -> "Graph":
        """Create a graph from (source, target) name pairs, adding nodes on first use."""
        graph = cls(directed=directed, name=name, config=config)
        for source, target in edges:
            for node_name in (source, target):
                if node_name not in graph.nodes:
                    graph.nodes.add(node_name)
            graph.edges.add(source, target)
        return graph

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return GraphComparer().equals(self, other)

    def __hash__(self) -> int:
        raise UnsupportedOperationError("Graphs are mutable and cannot be hashed")

    def __repr__(self) -> str:
        kind = "directed" if self._is_directed else "undirected"
        return (
            f"Graph(name={self.name!r}, {kind}, "
            f"nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"subgraphs={len(self._subgraphs)})"
        )
