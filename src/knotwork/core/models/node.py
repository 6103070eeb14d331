"""
Node models for the graph library.

This module defines the model representing vertices in a graph. A node is
identified by its name within the owning graph and exposes read-only views of
the edges attached to it.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional

from ..types import UserData
from .base import validate_name

if TYPE_CHECKING:
    from ..graph import Graph
    from .edge import Edge


@dataclass(eq=False)
class Node:
    """
    Vertex of a graph, identified by a name that is unique within its graph.

    Nodes compare and hash by identity: two nodes with the same name in two
    different graphs are different objects. A node is attached to at most one
    graph; ``graph`` is None while it is detached.

    Assigning ``name`` on an attached node re-keys it in the owning node
    collection and raises DuplicateNameError if the new name is taken.

    Attributes:
        name (str): Name of the node
        user_data (Dict[Any, Any]): Open annotation mapping
        graph (Optional[Graph]): Owning graph, managed by the node collection
    """

    name: str
    user_data: UserData = field(default_factory=dict)
    graph: Optional["Graph"] = field(default=None, repr=False)

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name":
            validate_name(value, "node name")
            graph = getattr(self, "graph", None)
            if graph is not None and value != self.name:
                graph.nodes._rename(self, value)
                return
        object.__setattr__(self, key, value)

    # Adjacency views. In undirected graphs incoming, outgoing and incident
    # edges are the same list.

    @property
    def incident_edges(self) -> List["Edge"]:
        """All edges attached to this node, in insertion order."""
        if self.graph is None:
            return []
        return self.graph.edges.incident(self)

    @property
    def outgoing_edges(self) -> List["Edge"]:
        """Edges leaving this node."""
        edges = self.incident_edges
        if self.graph is None or not self.graph.is_directed:
            return edges
        return [edge for edge in edges if edge.source is self]

    @property
    def incoming_edges(self) -> List["Edge"]:
        """Edges entering this node."""
        edges = self.incident_edges
        if self.graph is None or not self.graph.is_directed:
            return edges
        return [edge for edge in edges if edge.target is self]

    @property
    def in_degree(self) -> int:
        return len(self.incoming_edges)

    @property
    def out_degree(self) -> int:
        return len(self.outgoing_edges)

    @property
    def degree(self) -> int:
        """Number of distinct edges attached to this node; a self-loop counts once."""
        return len(self.incident_edges)

    def successors(self) -> List["Node"]:
        """Nodes reachable through one outgoing edge."""
        return [edge.opposite(self) for edge in self.outgoing_edges]

    def predecessors(self) -> List["Node"]:
        """Nodes with an edge into this node."""
        return [edge.opposite(self) for edge in self.incoming_edges]

    def neighbors(self) -> List["Node"]:
        """Predecessors and successors without duplicates, in first-seen order."""
        return list(dict.fromkeys(self.predecessors() + self.successors()))
