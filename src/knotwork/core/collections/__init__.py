"""Collections owned by a graph: nodes, edges and sub graphs."""

from .edges import DirectedIdentity, EdgeCollection, UndirectedIdentity
from .nodes import NodeCollection
from .subgraphs import SubGraphCollection

__all__ = [
    "NodeCollection",
    "EdgeCollection",
    "DirectedIdentity",
    "UndirectedIdentity",
    "SubGraphCollection",
]
