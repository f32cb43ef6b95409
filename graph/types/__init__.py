"""Typed graph payload models."""

from graph.types.combination import Combination, CombinationStatus
from graph.types.graph import Edge, GraphExport
from graph.types.triple import Pair, Triple

__all__ = [
    "Combination",
    "CombinationStatus",
    "Edge",
    "GraphExport",
    "Pair",
    "Triple",
]
