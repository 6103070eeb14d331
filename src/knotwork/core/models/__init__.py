"""
Core domain models package.

This package provides the data structures that make up a graph: nodes, edges
and sub graphs, together with the helpers they share.
"""

from .base import copy_user_data, validate_name
from .edge import Edge
from .node import Node
from .subgraph import EdgeReferenceSet, NodeReferenceSet, SubGraph

__all__ = [
    # Base utilities
    "copy_user_data",
    "validate_name",
    # Models
    "Node",
    "Edge",
    "SubGraph",
    "NodeReferenceSet",
    "EdgeReferenceSet",
]
