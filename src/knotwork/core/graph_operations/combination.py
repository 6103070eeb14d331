"""Graph combination operations.

This module provides the operations that merge the content of one graph into
another:
- Union, merging nodes that share a name
- Disjoint union, renaming incoming nodes with a prefix
- Copy, producing an independent graph including its sub graphs

Incoming edges are always re-created between nodes of the target graph, resolved
by name. Nodes and edges of the source graph are never attached to the target.
"""

import logging
from typing import TYPE_CHECKING, Optional

from ..exceptions import DuplicateNameError
from ..models.base import copy_user_data
from ..models.edge import Edge
from ..models.node import Node

if TYPE_CHECKING:
    from ..graph import Graph

logger = logging.getLogger(__name__)


class GraphCombiner:
    """Handles union, disjoint union and copy of graphs."""

    @staticmethod
    def union(target: "Graph", source: "Graph", include_user_data: Optional[bool] = None) -> None:
        """
        Merge every node and edge of ``source`` into ``target``.

        Args:
            target: Graph receiving the nodes and edges
            source: Graph to read from; it is not modified
            include_user_data: Whether to copy user data. None uses the
                target's configuration.
        """
        GraphCombiner._merge(target, source, "", include_user_data)

    @staticmethod
    def disjoint_union(
        target: "Graph", source: "Graph", prefix: str, include_user_data: Optional[bool] = None
    ) -> None:
        """
        Merge ``source`` into ``target`` with every incoming node name prefixed.

        All prefixed names are checked before anything is added, so a collision
        leaves ``target`` unchanged.

        Raises:
            TypeError: If ``prefix`` is not a string
            DuplicateNameError: If a prefixed name already exists in ``target``
        """
        if not isinstance(prefix, str):
            raise TypeError("prefix must be a string")

        collisions = [
            prefix + node.name for node in source.nodes if prefix + node.name in target.nodes
        ]
        if collisions:
            raise DuplicateNameError(
                f"Prefixed node names already exist in the graph: {', '.join(collisions)}"
            )

        GraphCombiner._merge(target, source, prefix, include_user_data)

    @staticmethod
    def copy(graph: "Graph", include_user_data: Optional[bool] = None) -> "Graph":
        """
        Create an independent copy of a graph.

        The copy has the same name, directedness, configuration, nodes, edges
        and sub graphs. Graph and sub graph user data follow the same rules as
        node and edge user data.

        Returns:
            Graph: The new graph
        """
        include = graph.config.include_user_data if include_user_data is None else include_user_data
        deep = graph.config.deep_copy_user_data

        result = type(graph)(directed=graph.is_directed, name=graph.name, config=graph.config)
        GraphCombiner._merge(result, graph, "", include)
        if include:
            copy_user_data(graph.user_data, result.user_data, deep)

        for subgraph in graph.subgraphs:
            copied = result.subgraphs.add(subgraph.name)
            if include:
                copy_user_data(subgraph.user_data, copied.user_data, deep)
            for node in subgraph.nodes:
                copied.nodes.add(node.name)
            for edge in subgraph.edges:
                copied.edges.add(edge.endpoints)

        return result

    @staticmethod
    def _merge(
        target: "Graph", source: "Graph", prefix: str, include_user_data: Optional[bool]
    ) -> None:
        include = target.config.include_user_data if include_user_data is None else include_user_data
        deep = target.config.deep_copy_user_data

        # Snapshots, so that merging a graph into itself terminates.
        source_nodes = list(source.nodes)
        source_edges = list(source.edges)

        for source_node in source_nodes:
            name = prefix + source_node.name
            node = target.nodes.get(name)
            if node is None:
                node = Node(name)
                if include:
                    copy_user_data(source_node.user_data, node.user_data, deep)
                target.nodes.add(node)
            elif include:
                copy_user_data(source_node.user_data, node.user_data, deep)

        for source_edge in source_edges:
            source_name, target_name = source_edge.endpoints
            endpoint_from = target.nodes[prefix + source_name]
            endpoint_to = target.nodes[prefix + target_name]

            edge = target.edges.get(endpoint_from, endpoint_to)
            if edge is None:
                edge = Edge(endpoint_from, endpoint_to)
                if include:
                    copy_user_data(source_edge.user_data, edge.user_data, deep)
                target.edges.add(edge)
            elif include:
                copy_user_data(source_edge.user_data, edge.user_data, deep)

        logger.debug(
            "Merged %d node(s) and %d edge(s) into graph %r (prefix=%r)",
            len(source_nodes),
            len(source_edges),
            target.name,
            prefix,
        )
