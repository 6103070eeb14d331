"""
Node collection of a graph.

The node collection is the sole owner of a graph's nodes. Nodes are keyed by
their unique name and iterate in insertion order. Removing a node is delegated
to the owning graph so that incident edges and sub graph references are removed
in the same step.
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from ..events import GraphEvent
from ..exceptions import DuplicateNameError, InvalidOperationError, NodeNotFoundError
from ..models.base import validate_name
from ..models.node import Node
from ..types import NodeRef

if TYPE_CHECKING:
    from ..graph import Graph

logger = logging.getLogger(__name__)


class NodeCollection:
    """
    Collection of the nodes of one graph, keyed by name.

    Attributes:
        _graph (Graph): Owning graph
        _nodes (Dict[str, Node]): Nodes by name, in insertion order
    """

    def __init__(self, graph: "Graph"):
        self._graph = graph
        self._nodes: Dict[str, Node] = {}

    def add(self, node: NodeRef) -> Node:
        """
        Add a node to the graph.

        Args:
            node (NodeRef): Name of a new node, or a detached Node instance

        Returns:
            Node: The node now owned by this graph

        Raises:
            DuplicateNameError: If a node with the same name already exists
            InvalidOperationError: If the node belongs to another graph
            ValidationError: If the name is not a non-empty string
        """
        if isinstance(node, Node):
            if node.graph is not None and node.graph is not self._graph:
                raise InvalidOperationError(f"Node '{node.name}' already belongs to another graph")
            name = node.name
        else:
            name = validate_name(node, "node name")

        if name in self._nodes:
            raise DuplicateNameError(f"Node '{name}' already exists in the graph")

        if not isinstance(node, Node):
            node = Node(name)
        node.graph = self._graph
        self._nodes[name] = node

        logger.debug("Added node '%s'", name)
        self._graph.events.notify(GraphEvent.NODE_ADDED, {"node": node})
        return node

    def resolve(self, node: NodeRef) -> Node:
        """
        Get the node of this graph a reference points to.

        Args:
            node (NodeRef): Node name or node object

        Returns:
            Node: The referenced node

        Raises:
            NodeNotFoundError: If the name is unknown, or the node object is not
                a member of this graph
        """
        if isinstance(node, Node):
            if node.graph is self._graph and self._nodes.get(node.name) is node:
                return node
            raise NodeNotFoundError(f"Node '{node.name}' is not a member of the graph")

        found = self._nodes.get(node)
        if found is None:
            raise NodeNotFoundError(f"Node '{node}' not found in the graph")
        return found

    def get(self, name: str, default: Optional[Node] = None) -> Optional[Node]:
        """Get a node by name, or ``default`` if there is none."""
        return self._nodes.get(name, default)

    def remove(self, node: NodeRef) -> bool:
        """
        Remove a node together with its incident edges and sub graph references.

        Args:
            node (NodeRef): Node name or node object

        Returns:
            bool: True if the node was removed, False if it was not in the graph
        """
        try:
            resolved = self.resolve(node)
        except NodeNotFoundError:
            return False

        self._graph._remove_node(resolved)
        return True

    def clear(self) -> None:
        """Remove every node, and with them every edge and sub graph reference."""
        for node in list(self._nodes.values()):
            self._graph._remove_node(node)

    def names(self) -> List[str]:
        return list(self._nodes)

    def _detach(self, node: Node) -> None:
        # Final phase of a node removal, once no edge references the node.
        del self._nodes[node.name]
        node.graph = None
        logger.debug("Removed node '%s'", node.name)
        self._graph.events.notify(GraphEvent.NODE_REMOVED, {"node": node})

    def _rename(self, node: Node, new_name: str) -> None:
        if new_name in self._nodes:
            raise DuplicateNameError(f"Node '{new_name}' already exists in the graph")

        old_name = node.name
        self._nodes = {
            (new_name if name == old_name else name): value for name, value in self._nodes.items()
        }
        object.__setattr__(node, "name", new_name)

        logger.debug("Renamed node '%s' to '%s'", old_name, new_name)
        self._graph.events.notify(GraphEvent.NODE_RENAMED, {"node": node, "old_name": old_name})

    def __getitem__(self, name: str) -> Node:
        return self.resolve(name)

    def __contains__(self, node: object) -> bool:
        try:
            self.resolve(node)  # type: ignore[arg-type]
        except (NodeNotFoundError, TypeError):
            return False
        return True

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"NodeCollection({self.names()!r})"
