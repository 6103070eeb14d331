"""
Sub graph models for the graph library.

A sub graph is a named view over part of its parent graph. It never owns nodes
or edges: its reference sets hold the parent's own objects, and the parent's
collections drop those references when the referenced items are removed.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Generic, Iterator, List, Optional, TypeVar

from ..exceptions import InvalidOperationError, ResourceNotFoundError
from ..types import EndpointNames, UserData
from .base import validate_name
from .edge import Edge
from .node import Node

if TYPE_CHECKING:
    from ..graph import Graph

T = TypeVar("T", Node, Edge)


class _ReferenceSet(Generic[T]):
    """Insertion-ordered set of references into the parent graph."""

    def __init__(self, subgraph: "SubGraph"):
        self._subgraph = subgraph
        self._items: Dict[T, None] = {}

    def _parent(self) -> "Graph":
        graph = self._subgraph.graph
        if graph is None:
            raise InvalidOperationError(
                f"Sub graph '{self._subgraph.name}' is not attached to a graph"
            )
        return graph

    def _resolve(self, item: Any) -> T:
        raise NotImplementedError

    def add(self, item: Any) -> T:
        """
        Add a reference to an item of the parent graph.

        Returns:
            The parent's object that is now referenced

        Raises:
            ResourceNotFoundError: If the parent graph does not contain the item
        """
        resolved = self._resolve(item)
        self._items[resolved] = None
        return resolved

    def remove(self, item: Any) -> bool:
        """Drop a reference. Returns False if the item was not referenced."""
        try:
            resolved = self._resolve(item)
        except ResourceNotFoundError:
            return False
        return self._discard(resolved)

    def _discard(self, resolved: T) -> bool:
        if resolved in self._items:
            del self._items[resolved]
            return True
        return False

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, item: Any) -> bool:
        if self._subgraph.graph is None:
            return False
        try:
            return self._resolve(item) in self._items
        except (ResourceNotFoundError, TypeError):
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class NodeReferenceSet(_ReferenceSet[Node]):
    """Nodes referenced by a sub graph, given by name or node object."""

    def _resolve(self, item: Any) -> Node:
        return self._parent().nodes.resolve(item)

    def names(self) -> List[str]:
        return [node.name for node in self._items]


class EdgeReferenceSet(_ReferenceSet[Edge]):
    """Edges referenced by a sub graph, given as an edge object or a (source, target) pair."""

    def _resolve(self, item: Any) -> Edge:
        return self._parent().edges.resolve(item)

    def endpoints(self) -> List[EndpointNames]:
        return [edge.endpoints for edge in self._items]


@dataclass(eq=False)
class SubGraph:
    """
    Named, non-owning view over a subset of a graph's nodes and edges.

    Adding an edge reference does not add its endpoints to ``nodes``.

    Attributes:
        name (str): Name of the sub graph, unique within the parent graph
        user_data (Dict[Any, Any]): Open annotation mapping
        graph (Optional[Graph]): Parent graph, managed by the sub graph collection
        nodes (NodeReferenceSet): Referenced nodes of the parent graph
        edges (EdgeReferenceSet): Referenced edges of the parent graph
    """

    name: str
    user_data: UserData = field(default_factory=dict)
    graph: Optional["Graph"] = field(default=None, repr=False)
    nodes: NodeReferenceSet = field(init=False, repr=False)
    edges: EdgeReferenceSet = field(init=False, repr=False)

    def __post_init__(self):
        self.nodes = NodeReferenceSet(self)
        self.edges = EdgeReferenceSet(self)

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name":
            validate_name(value, "sub graph name")
            graph = getattr(self, "graph", None)
            if graph is not None and value != self.name:
                graph.subgraphs._rename(self, value)
                return
        object.__setattr__(self, key, value)
