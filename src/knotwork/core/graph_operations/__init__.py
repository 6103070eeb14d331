"""Whole-graph operations: combination, projection and comparison."""

from .combination import GraphCombiner
from .comparison import GraphComparer, GraphDifference
from .projection import GraphProjection

__all__ = [
    "GraphCombiner",
    "GraphComparer",
    "GraphDifference",
    "GraphProjection",
]
