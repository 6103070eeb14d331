"""Core graph functionality."""

from .collections import (
    DirectedIdentity,
    EdgeCollection,
    NodeCollection,
    SubGraphCollection,
    UndirectedIdentity,
)
from .config import GraphConfig
from .events import GraphEvent, GraphEventListener, GraphEventManager
from .exceptions import (
    ConfigurationError,
    DuplicateNameError,
    DuplicateResourceError,
    EdgeNotFoundError,
    InvalidOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    SubGraphNotFoundError,
    UnsupportedOperationError,
    ValidationError,
)
from .graph import Graph
from .graph_operations import GraphCombiner, GraphComparer, GraphDifference, GraphProjection
from .models import Edge, EdgeReferenceSet, Node, NodeReferenceSet, SubGraph
from .types import EdgeIdentity

__all__ = [
    "ConfigurationError",
    "DirectedIdentity",
    "DuplicateNameError",
    "DuplicateResourceError",
    "Edge",
    "EdgeCollection",
    "EdgeIdentity",
    "EdgeNotFoundError",
    "EdgeReferenceSet",
    "Graph",
    "GraphCombiner",
    "GraphComparer",
    "GraphConfig",
    "GraphDifference",
    "GraphEvent",
    "GraphEventListener",
    "GraphEventManager",
    "GraphProjection",
    "InvalidOperationError",
    "Node",
    "NodeCollection",
    "NodeNotFoundError",
    "NodeReferenceSet",
    "ResourceNotFoundError",
    "SubGraph",
    "SubGraphCollection",
    "SubGraphNotFoundError",
    "UndirectedIdentity",
    "UnsupportedOperationError",
    "ValidationError",
]
