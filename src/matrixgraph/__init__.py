# src/matrixgraph/__init__.py
r"""
MatrixGraph - Dense adjacency-matrix graphs for Python

MatrixGraph models a finite directed, weighted graph as an N x N matrix
of integers and provides:
- An operator algebra over graphs (+, -, *, scalar scaling, ++/-- style
  increments, equality and edge-count ordering)
- Connectivity, unweighted shortest path, cycle detection, bipartite
  two-coloring and Bellman-Ford negative-cycle detection
- Pydantic-backed JSON serialization

Example:
    ```python
    from matrixgraph import GraphMatrix, shortest_path, is_bipartite

    g = GraphMatrix([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
    g.print_graph()              # Graph with 3 vertices and 2 edges.
    print(shortest_path(g, 0, 2))  # 0->1->2

    doubled = g * 2
    combined = g + doubled
    g += 1                        # every cell, in place
    ```
"""
import logging

# Core graph functionality
from matrixgraph.core.graph_matrix import GraphMatrix
from matrixgraph.core.graph_snapshot import GraphSnapshot, GraphStatistics

# Algorithms
from matrixgraph.core.algorithms import (
    GraphAlgorithms,
    is_connected,
    shortest_path,
    is_contains_cycle,
    is_bipartite,
    negative_cycle,
)

# Errors
from matrixgraph.core.exceptions import (
    GraphMatrixError,
    InvalidShape,
    DimensionMismatch,
    DivisionByZero,
    VertexOutOfRange,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version info
__version__ = "0.1.0"

# Main exports
__all__ = [
    # Core classes
    "GraphMatrix",
    "GraphSnapshot",
    "GraphStatistics",

    # Algorithms
    "GraphAlgorithms",
    "is_connected",
    "shortest_path",
    "is_contains_cycle",
    "is_bipartite",
    "negative_cycle",

    # Errors
    "GraphMatrixError",
    "InvalidShape",
    "DimensionMismatch",
    "DivisionByZero",
    "VertexOutOfRange",

    # Version
    "__version__",
]
