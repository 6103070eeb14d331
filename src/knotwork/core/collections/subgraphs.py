"""
Sub graph collection of a graph.
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Union

from ..events import GraphEvent
from ..exceptions import DuplicateNameError, SubGraphNotFoundError
from ..models.base import validate_name
from ..models.edge import Edge
from ..models.node import Node
from ..models.subgraph import SubGraph

if TYPE_CHECKING:
    from ..graph import Graph

logger = logging.getLogger(__name__)

SubGraphRef = Union[str, SubGraph]


class SubGraphCollection:
    """
    Collection of the named sub graphs defined on one graph.

    Attributes:
        _graph (Graph): Owning graph
        _subgraphs (Dict[str, SubGraph]): Sub graphs by name, in insertion order
    """

    def __init__(self, graph: "Graph"):
        self._graph = graph
        self._subgraphs: Dict[str, SubGraph] = {}

    def add(self, name: str) -> SubGraph:
        """
        Create an empty sub graph.

        Args:
            name (str): Name of the new sub graph

        Returns:
            SubGraph: The new sub graph

        Raises:
            DuplicateNameError: If a sub graph with the same name already exists
            ValidationError: If the name is not a non-empty string
        """
        validate_name(name, "sub graph name")
        if name in self._subgraphs:
            raise DuplicateNameError(f"Sub graph '{name}' already exists in the graph")

        subgraph = SubGraph(name)
        subgraph.graph = self._graph
        self._subgraphs[name] = subgraph

        logger.debug("Added sub graph '%s'", name)
        self._graph.events.notify(GraphEvent.SUBGRAPH_ADDED, {"subgraph": subgraph})
        return subgraph

    def resolve(self, subgraph: SubGraphRef) -> SubGraph:
        """
        Get the sub graph a reference points to.

        Raises:
            SubGraphNotFoundError: If the name is unknown, or the sub graph
                object is not a member of this graph
        """
        if isinstance(subgraph, SubGraph):
            if subgraph.graph is self._graph and self._subgraphs.get(subgraph.name) is subgraph:
                return subgraph
            raise SubGraphNotFoundError(f"Sub graph '{subgraph.name}' is not a member of the graph")

        found = self._subgraphs.get(subgraph)
        if found is None:
            raise SubGraphNotFoundError(f"Sub graph '{subgraph}' not found in the graph")
        return found

    def get(self, name: str, default: Optional[SubGraph] = None) -> Optional[SubGraph]:
        return self._subgraphs.get(name, default)

    def remove(self, subgraph: SubGraphRef) -> bool:
        """
        Remove a sub graph. The nodes and edges it referenced are untouched.

        Returns:
            bool: True if the sub graph was removed, False if it was not in the graph
        """
        try:
            resolved = self.resolve(subgraph)
        except SubGraphNotFoundError:
            return False

        del self._subgraphs[resolved.name]
        resolved.nodes.clear()
        resolved.edges.clear()
        resolved.graph = None

        logger.debug("Removed sub graph '%s'", resolved.name)
        self._graph.events.notify(GraphEvent.SUBGRAPH_REMOVED, {"subgraph": resolved})
        return True

    def clear(self) -> None:
        for subgraph in list(self._subgraphs.values()):
            self.remove(subgraph)

    def names(self) -> List[str]:
        return list(self._subgraphs)

    def _discard_node(self, node: Node) -> None:
        for subgraph in self._subgraphs.values():
            subgraph.nodes._discard(node)

    def _discard_edge(self, edge: Edge) -> None:
        for subgraph in self._subgraphs.values():
            subgraph.edges._discard(edge)

    def _rename(self, subgraph: SubGraph, new_name: str) -> None:
        if new_name in self._subgraphs:
            raise DuplicateNameError(f"Sub graph '{new_name}' already exists in the graph")

        old_name = subgraph.name
        self._subgraphs = {
            (new_name if name == old_name else name): value
            for name, value in self._subgraphs.items()
        }
        object.__setattr__(subgraph, "name", new_name)
        logger.debug("Renamed sub graph '%s' to '%s'", old_name, new_name)
        self._graph.events.notify(
            GraphEvent.SUBGRAPH_RENAMED, {"subgraph": subgraph, "old_name": old_name}
        )

    def __getitem__(self, name: str) -> SubGraph:
        return self.resolve(name)

    def __contains__(self, subgraph: object) -> bool:
        try:
            self.resolve(subgraph)  # type: ignore[arg-type]
        except (SubGraphNotFoundError, TypeError):
            return False
        return True

    def __iter__(self) -> Iterator[SubGraph]:
        return iter(list(self._subgraphs.values()))

    def __len__(self) -> int:
        return len(self._subgraphs)

    def __repr__(self) -> str:
        return f"SubGraphCollection({self.names()!r})"
