"""
Error hierarchy for GraphMatrix and its algorithms.

Every error here signals a caller-side contract violation. Algorithm
"no result" outcomes are sentinels, not exceptions.
"""


class GraphMatrixError(ValueError):
    """Base class for all graph matrix errors."""


class InvalidShape(GraphMatrixError):
    """Raised when an adjacency matrix is not square."""


class DimensionMismatch(GraphMatrixError):
    """Raised when two graphs of different sizes are combined."""


class DivisionByZero(GraphMatrixError, ZeroDivisionError):
    """Raised when a graph is divided by a zero scalar."""


class VertexOutOfRange(GraphMatrixError, IndexError):
    """Raised when a vertex index is outside 0..N-1."""
