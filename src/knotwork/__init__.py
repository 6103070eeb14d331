"""
knotwork - In-memory graph data structures

This package provides directed and undirected graphs made of uniquely named
nodes, edges and named sub graph views. It includes:

- Node, edge and sub graph collections that keep cross references consistent
- Cascading removal of edges and sub graph references
- Whole-graph operations: union, disjoint union, transpose, undirected
  projection and structural comparison
- Change events and configuration of user data copying

Example:
    >>> from knotwork import Graph
    >>> graph = Graph(directed=True)
    >>> graph.nodes.add("a")
    Node(name='a', user_data={})
    >>> graph.nodes.add("b")
    Node(name='b', user_data={})
    >>> graph.edges.add("a", "b")
    Edge(source='a', target='b')
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("knotwork requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.exceptions import (
    DuplicateNameError,
    EdgeNotFoundError,
    InvalidOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    SubGraphNotFoundError,
    UnsupportedOperationError,
)
from .core.graph import Graph
from .core.models import Edge, Node, SubGraph

__all__ = [
    "Graph",
    "GraphConfig",
    "Node",
    "Edge",
    "SubGraph",
    "DuplicateNameError",
    "EdgeNotFoundError",
    "InvalidOperationError",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "SubGraphNotFoundError",
    "UnsupportedOperationError",
]
