"""
MatrixGraph Core Module

This module provides the adjacency-matrix graph, its operator algebra
and the graph algorithms that run over it.
"""

from matrixgraph.core.exceptions import (
    GraphMatrixError,
    InvalidShape,
    DimensionMismatch,
    DivisionByZero,
    VertexOutOfRange,
)
from matrixgraph.core.graph_snapshot import GraphSnapshot, GraphStatistics
from matrixgraph.core.graph_matrix import GraphMatrix
from matrixgraph.core.algorithms import (
    GraphAlgorithms,
    is_connected,
    shortest_path,
    is_contains_cycle,
    is_bipartite,
    negative_cycle,
)

__all__ = [
    "GraphMatrix",
    "GraphSnapshot",
    "GraphStatistics",
    "GraphAlgorithms",
    "is_connected",
    "shortest_path",
    "is_contains_cycle",
    "is_bipartite",
    "negative_cycle",
    "GraphMatrixError",
    "InvalidShape",
    "DimensionMismatch",
    "DivisionByZero",
    "VertexOutOfRange",
]
