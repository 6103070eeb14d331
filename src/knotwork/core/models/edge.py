"""
Edge models for the graph library.

This module defines the model representing connections between nodes. An edge
only references its endpoint nodes; the node collection of the owning graph
remains their sole owner.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from ..exceptions import InvalidOperationError, NodeNotFoundError
from ..types import EndpointNames, UserData
from .node import Node

if TYPE_CHECKING:
    from ..graph import Graph


@dataclass(eq=False)
class Edge:
    """
    Connection between two nodes of the same graph.

    Whether the edge is directed is decided by the graph that owns it: in an
    undirected graph ``source`` and ``target`` are simply the two endpoints in
    the order the edge was created with.

    Attributes:
        source (Node): Source endpoint
        target (Node): Target endpoint
        user_data (Dict[Any, Any]): Open annotation mapping
        graph (Optional[Graph]): Owning graph, managed by the edge collection
    """

    source: Node
    target: Node
    user_data: UserData = field(default_factory=dict)
    graph: Optional["Graph"] = field(default=None, repr=False)

    def __post_init__(self):
        """Validate edge after initialization."""
        if not isinstance(self.source, Node):
            raise TypeError("source must be a Node")
        if not isinstance(self.target, Node):
            raise TypeError("target must be a Node")

    def __setattr__(self, key: str, value: Any) -> None:
        if key in ("source", "target") and getattr(self, "graph", None) is not None:
            raise InvalidOperationError("Cannot change the endpoints of an edge inside a graph")
        object.__setattr__(self, key, value)

    def __repr__(self) -> str:
        return f"Edge(source={self.source.name!r}, target={self.target.name!r})"

    @property
    def endpoints(self) -> EndpointNames:
        """Names of the endpoints in (source, target) order."""
        return (self.source.name, self.target.name)

    @property
    def is_self_loop(self) -> bool:
        return self.source is self.target

    def opposite(self, node: Node) -> Node:
        """
        Get the endpoint on the other side of the edge.

        Args:
            node (Node): One of the endpoints

        Returns:
            Node: The other endpoint, or ``node`` itself for a self-loop

        Raises:
            NodeNotFoundError: If ``node`` is not an endpoint of this edge
        """
        if node is self.source:
            return self.target
        if node is self.target:
            return self.source
        raise NodeNotFoundError(f"Node '{node.name}' is not an endpoint of {self!r}")
