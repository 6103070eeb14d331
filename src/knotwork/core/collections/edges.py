"""
Edge collection of a graph.

A single collection class serves directed and undirected graphs. The difference
between the two lies entirely in the identity strategy chosen when the graph is
built: directed graphs key edges by the ordered (source, target) pair,
undirected graphs by the unordered pair of endpoints. At most one edge exists per
identity; adding an edge again returns the edge already stored.

Besides the edges themselves, the collection maintains an incidence index from
every node to the edges attached to it. The index backs the adjacency views of
nodes and lets node removal find the edges to cascade to without a full scan.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from ..events import GraphEvent
from ..exceptions import EdgeNotFoundError, InvalidOperationError, ResourceNotFoundError
from ..models.edge import Edge
from ..models.node import Node
from ..types import EdgeIdentity, EdgeKey, EndpointNames, NodeRef

if TYPE_CHECKING:
    from ..graph import Graph

logger = logging.getLogger(__name__)


class DirectedIdentity:
    """Edges are identified by the ordered pair of their endpoints."""

    is_directed = True

    def key(self, source: Node, target: Node) -> Tuple[Node, Node]:
        return (source, target)


class UndirectedIdentity:
    """Edges are identified by the unordered pair of their endpoints."""

    is_directed = False

    def key(self, source: Node, target: Node) -> FrozenSet[Node]:
        return frozenset((source, target))


class EdgeCollection:
    """
    Collection of the edges of one graph.

    Attributes:
        _graph (Graph): Owning graph
        _identity (EdgeIdentity): Strategy deciding when two edges are the same
        _edges (Dict[EdgeKey, Edge]): Edges by identity key, in insertion order
        _incidence (Dict[Node, Dict[EdgeKey, Edge]]): Edges attached to each node
    """

    def __init__(self, graph: "Graph", identity: EdgeIdentity):
        self._graph = graph
        self._identity = identity
        self._edges: Dict[EdgeKey, Edge] = {}
        self._incidence: Dict[Node, Dict[EdgeKey, Edge]] = {}

    @property
    def is_directed(self) -> bool:
        return self._identity.is_directed

    def add(self, source: Any, target: Optional[NodeRef] = None) -> Edge:
        """
        Add an edge between two nodes of the graph.

        Either pass both endpoints (as names or node objects of this graph), or
        a single detached Edge whose endpoints belong to this graph.

        Args:
            source: Source endpoint, or an Edge instance
            target (Optional[NodeRef]): Target endpoint

        Returns:
            Edge: The new edge, or the existing edge with the same identity

        Raises:
            NodeNotFoundError: If an endpoint is not a node of this graph. The
                graph is left unchanged.
            InvalidOperationError: If the edge belongs to another graph
        """
        if isinstance(source, Edge) and target is None:
            return self._add_edge(source)
        if target is None:
            raise TypeError("add() requires a target unless an Edge is given")

        nodes = self._graph.nodes
        source_node = nodes.resolve(source)
        target_node = nodes.resolve(target)

        key = self._identity.key(source_node, target_node)
        existing = self._edges.get(key)
        if existing is not None:
            return existing

        edge = Edge(source_node, target_node)
        self._insert(key, edge)
        return edge

    def _add_edge(self, edge: Edge) -> Edge:
        if edge.graph is not None and edge.graph is not self._graph:
            raise InvalidOperationError(f"{edge!r} already belongs to another graph")

        nodes = self._graph.nodes
        key = self._identity.key(nodes.resolve(edge.source), nodes.resolve(edge.target))
        existing = self._edges.get(key)
        if existing is not None:
            if existing is not edge:
                existing.user_data.update(edge.user_data)
            return existing

        self._insert(key, edge)
        return edge

    def _insert(self, key: EdgeKey, edge: Edge) -> None:
        edge.graph = self._graph
        self._edges[key] = edge
        self._incidence.setdefault(edge.source, {})[key] = edge
        self._incidence.setdefault(edge.target, {})[key] = edge

        logger.debug("Added edge %s -> %s", edge.source.name, edge.target.name)
        self._graph.events.notify(GraphEvent.EDGE_ADDED, {"edge": edge})

    def resolve(self, edge: Any) -> Edge:
        """
        Get the edge of this graph a reference points to.

        Args:
            edge: Edge object or (source, target) pair of node references

        Returns:
            Edge: The referenced edge

        Raises:
            NodeNotFoundError: If an endpoint of a pair is not in the graph
            EdgeNotFoundError: If the endpoints are not connected, or the edge
                object is not a member of this graph
        """
        if isinstance(edge, Edge):
            if edge.graph is self._graph and self._edges.get(self._key_of(edge)) is edge:
                return edge
            raise EdgeNotFoundError(f"{edge!r} is not a member of the graph")

        if not isinstance(edge, tuple) or len(edge) != 2:
            raise TypeError("Edge references must be an Edge or a (source, target) pair")

        source, target = edge
        nodes = self._graph.nodes
        key = self._identity.key(nodes.resolve(source), nodes.resolve(target))
        found = self._edges.get(key)
        if found is None:
            raise EdgeNotFoundError(f"No edge exists from '{_name(source)}' to '{_name(target)}'")
        return found

    def get(self, source: NodeRef, target: NodeRef, default: Optional[Edge] = None) -> Optional[Edge]:
        """Get the edge between two nodes, or ``default`` if there is none."""
        try:
            return self.resolve((source, target))
        except ResourceNotFoundError:
            return default

    def remove(self, source: Any, target: Optional[NodeRef] = None) -> bool:
        """
        Remove an edge, given as an Edge or by its endpoints.

        Sub graphs referencing the edge drop their reference.

        Returns:
            bool: True if the edge was removed, False if it was not in the graph
        """
        reference = source if target is None else (source, target)
        try:
            edge = self.resolve(reference)
        except ResourceNotFoundError:
            return False

        self._graph._remove_edge(edge)
        return True

    def clear(self) -> None:
        """Remove every edge, keeping the nodes."""
        for edge in list(self._edges.values()):
            self._graph._remove_edge(edge)

    def incident(self, node: NodeRef) -> List[Edge]:
        """
        Get the edges attached to a node, in either direction.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        resolved = self._graph.nodes.resolve(node)
        return list(self._incidence.get(resolved, {}).values())

    def endpoints(self) -> List[EndpointNames]:
        """(source, target) names of every edge, in insertion order."""
        return [edge.endpoints for edge in self._edges.values()]

    def _key_of(self, edge: Edge) -> EdgeKey:
        return self._identity.key(edge.source, edge.target)

    def _detach(self, edge: Edge) -> None:
        key = self._key_of(edge)
        del self._edges[key]
        for node in (edge.source, edge.target):
            bucket = self._incidence.get(node)
            if bucket is not None:
                bucket.pop(key, None)
                if not bucket:
                    del self._incidence[node]
        edge.graph = None

        logger.debug("Removed edge %s -> %s", edge.source.name, edge.target.name)
        self._graph.events.notify(GraphEvent.EDGE_REMOVED, {"edge": edge})

    def __getitem__(self, endpoints: Tuple[NodeRef, NodeRef]) -> Edge:
        return self.resolve(endpoints)

    def __contains__(self, edge: object) -> bool:
        try:
            self.resolve(edge)
        except (ResourceNotFoundError, TypeError):
            return False
        return True

    def __iter__(self) -> Iterator[Edge]:
        return iter(list(self._edges.values()))

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        kind = "directed" if self.is_directed else "undirected"
        return f"EdgeCollection({kind}, {self.endpoints()!r})"


def _name(node: NodeRef) -> str:
    return node.name if isinstance(node, Node) else str(node)
