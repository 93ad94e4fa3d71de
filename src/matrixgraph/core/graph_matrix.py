"""
MatrixGraph Core Graph Implementation

This module contains the GraphMatrix class: a directed, weighted graph
stored as a dense N x N adjacency matrix, together with an arithmetic
and comparison algebra over graphs.

Cell (i, j) holds the weight of the edge i -> j and 0 means "no edge",
so a zero-weight edge cannot be represented.
"""
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
)
from datetime import datetime
import json
import logging
import uuid

from pydantic import TypeAdapter

from matrixgraph import config
from matrixgraph.core.exceptions import (
    DimensionMismatch,
    DivisionByZero,
    InvalidShape,
)
from matrixgraph.core.graph_snapshot import GraphSnapshot, GraphStatistics

logger = logging.getLogger(__name__)

Grid = List[List[int]]
Operand = Union["GraphMatrix", int]

_GRID_ADAPTER = TypeAdapter(Grid)


def _truncating_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


class GraphMatrix:
    """
    Dense adjacency-matrix graph with an operator algebra.

    Operators come in two flavors. Non-mutating ones (add, subtract, scale,
    multiply_matrices, identity, negate) return a fresh GraphMatrix that
    owns its own grid. Mutating ones (add_assign, subtract_assign,
    scale_assign, divide_assign, increment, decrement) change this graph
    in place and return it. The usual Python operators delegate to them.

    Ordering (<, >, <=, >=) compares edge counts only, so two graphs with
    the same number of edges are neither less nor greater than each other
    even when their shapes differ.
    """

    def __init__(
        self,
        matrix: Optional[Sequence[Sequence[int]]] = None,
        name: Optional[str] = None
    ):
        """Initialize from an adjacency matrix, or as an empty 0x0 graph."""
        self.name = name or f"{config.DEFAULT_NAME_PREFIX}{uuid.uuid4().hex[:8]}"
        self.created_at = datetime.now()

        self._matrix: Grid = []
        if matrix is not None:
            self.load_graph(matrix)

    # =============================================================================
    # LOADING AND INTROSPECTION
    # =============================================================================

    def load_graph(self, matrix: Sequence[Sequence[int]]) -> None:
        """
        Replace the whole grid with a copy of ``matrix``.

        Args:
            matrix: N x N grid of integers

        Raises:
            pydantic.ValidationError: If a cell cannot be read as an integer
            InvalidShape: If any row's length differs from the row count
        """
        grid = _GRID_ADAPTER.validate_python(matrix)

        size = len(grid)
        for index, row in enumerate(grid):
            if len(row) != size:
                raise InvalidShape(
                    f"Invalid graph: the matrix is not square "
                    f"(row {index} has {len(row)} cells, expected {size})"
                )

        self._matrix = [list(row) for row in grid]
        logger.debug("Loaded %s: %d vertices, %d edges", self.name, size, self.edge_count())

    @property
    def matrix(self) -> Grid:
        """Copy of the adjacency matrix; mutating it does not affect the graph."""
        return [row[:] for row in self._matrix]

    def size(self) -> int:
        """Number of vertices."""
        return len(self._matrix)

    def edge_count(self) -> int:
        """Number of non-zero cells (directed edges)."""
        return sum(1 for row in self._matrix for cell in row if cell != 0)

    def density(self) -> float:
        """Edge count over the N*(N-1) possible directed edges."""
        n = self.size()
        if n <= 1:
            return 0.0
        return self.edge_count() / (n * (n - 1))

    def statistics(self) -> GraphStatistics:
        return GraphStatistics(
            vertex_count=self.size(),
            edge_count=self.edge_count(),
            density=self.density(),
        )

    # =============================================================================
    # OUTPUT
    # =============================================================================

    def summary(self) -> str:
        """One-line description, e.g. 'Graph with 3 vertices and 2 edges.'"""
        return config.SUMMARY_TEMPLATE.format(vertices=self.size(), edges=self.edge_count())

    def print_graph(self) -> None:
        """Print the summary line to stdout."""
        print(self.summary())

    def render(self) -> str:
        """Row-major text form: '[a, b], [c, d]' followed by a newline."""
        rows = (
            "[" + config.CELL_SEPARATOR.join(str(cell) for cell in row) + "]"
            for row in self._matrix
        )
        return config.ROW_SEPARATOR.join(rows) + "\n"

    # =============================================================================
    # ADDITION
    # =============================================================================

    def identity(self) -> "GraphMatrix":
        """Unary plus: an equal, independent copy."""
        return self._derive(self.matrix)

    def add(self, other: "GraphMatrix") -> "GraphMatrix":
        """Cell-wise sum as a new graph."""
        self._require_graph(other, "add")
        self._check_same_size(other)
        result = [
            [a + b for a, b in zip(row, other_row)]
            for row, other_row in zip(self._matrix, other._matrix)
        ]
        return self._derive(result)

    def add_assign(self, other: Operand) -> "GraphMatrix":
        """Add a graph cell-wise, or a scalar to every cell, in place."""
        if isinstance(other, GraphMatrix):
            self._check_same_size(other)
            for row, other_row in zip(self._matrix, other._matrix):
                for j, value in enumerate(other_row):
                    row[j] += value
            return self

        self._require_scalar(other, "add_assign")
        return self._apply_in_place(lambda cell: cell + other)

    def increment(self) -> "GraphMatrix":
        """Prefix ++: add 1 to every cell and return this graph."""
        return self.add_assign(1)

    def post_increment(self) -> "GraphMatrix":
        """Postfix ++: add 1 to every cell and return the pre-increment copy."""
        previous = self.copy()
        self.increment()
        return previous

    # =============================================================================
    # SUBTRACTION
    # =============================================================================

    def negate(self) -> "GraphMatrix":
        """Unary minus, same as scale(-1)."""
        return self.scale(-1)

    def subtract(self, other: "GraphMatrix") -> "GraphMatrix":
        """Cell-wise difference as a new graph."""
        self._require_graph(other, "subtract")
        self._check_same_size(other)
        result = [
            [a - b for a, b in zip(row, other_row)]
            for row, other_row in zip(self._matrix, other._matrix)
        ]
        return self._derive(result)

    def subtract_assign(self, other: Operand) -> "GraphMatrix":
        """Subtract a graph cell-wise, or a scalar from every cell, in place."""
        if isinstance(other, GraphMatrix):
            self._check_same_size(other)
            for row, other_row in zip(self._matrix, other._matrix):
                for j, value in enumerate(other_row):
                    row[j] -= value
            return self

        self._require_scalar(other, "subtract_assign")
        return self._apply_in_place(lambda cell: cell - other)

    def decrement(self) -> "GraphMatrix":
        """Prefix --: subtract 1 from every cell and return this graph."""
        return self.subtract_assign(1)

    def post_decrement(self) -> "GraphMatrix":
        """Postfix --: subtract 1 from every cell and return the pre-decrement copy."""
        previous = self.copy()
        self.decrement()
        return previous

    # =============================================================================
    # MULTIPLICATION AND DIVISION
    # =============================================================================

    def multiply_matrices(self, other: "GraphMatrix") -> "GraphMatrix":
        """
        Standard matrix product of two same-size graphs.

        The diagonal of the result is forced to 0, dropping any self-loops
        the product induces.

        Raises:
            DimensionMismatch: If the graphs differ in size
        """
        self._require_graph(other, "multiply_matrices")
        self._check_same_size(other)

        size = self.size()
        columns = list(zip(*other._matrix))
        result = [
            [sum(a * b for a, b in zip(row, columns[j])) for j in range(size)]
            for row in self._matrix
        ]
        for i in range(size):
            result[i][i] = 0

        return self._derive(result)

    def scale(self, scalar: int) -> "GraphMatrix":
        """Every cell times ``scalar``, as a new graph."""
        self._require_scalar(scalar, "scale")
        return self._derive([[cell * scalar for cell in row] for row in self._matrix])

    def scale_assign(self, scalar: int) -> "GraphMatrix":
        """Multiply every cell by ``scalar`` in place."""
        self._require_scalar(scalar, "scale_assign")
        return self._apply_in_place(lambda cell: cell * scalar)

    def divide_assign(self, scalar: int) -> "GraphMatrix":
        """
        Divide every cell by ``scalar`` in place.

        Division truncates toward zero, so -3 / 2 gives -1. Scaling by k and
        then dividing by k only restores cells that were exact multiples.

        Raises:
            DivisionByZero: If ``scalar`` is 0
        """
        self._require_scalar(scalar, "divide_assign")
        if scalar == 0:
            raise DivisionByZero("Division by zero is not allowed.")
        return self._apply_in_place(lambda cell: _truncating_div(cell, scalar))

    # =============================================================================
    # COMPARISON
    # =============================================================================

    def equals(self, other: "GraphMatrix") -> bool:
        """Structural equality of the full grid. Names are ignored."""
        self._require_graph(other, "equals")
        return self._matrix == other._matrix

    def compare_by_edge_count(self, other: "GraphMatrix") -> int:
        """
        Order two graphs by edge count only.

        Returns:
            -1, 0 or 1 as this graph has fewer, as many or more edges
        """
        self._require_graph(other, "compare_by_edge_count")
        mine, theirs = self.edge_count(), other.edge_count()
        return (mine > theirs) - (mine < theirs)

    # =============================================================================
    # SERIALIZATION
    # =============================================================================

    def to_snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(
            name=self.name,
            matrix=self.matrix,
            created_at=self.created_at,
            statistics=self.statistics(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert graph to dictionary representation."""
        return self.to_snapshot().model_dump(mode="json")

    def to_json(self, indent: Optional[int] = None) -> str:
        """Convert graph to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphMatrix":
        """
        Create graph from dictionary representation.

        Raises:
            pydantic.ValidationError: If fields have the wrong types
            InvalidShape: If the matrix is not square
        """
        snapshot = GraphSnapshot.model_validate(data)
        graph = cls(snapshot.matrix, name=snapshot.name)
        graph.created_at = snapshot.created_at
        return graph

    @classmethod
    def from_json(cls, json_str: str) -> "GraphMatrix":
        """Create graph from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # =============================================================================
    # UTILITIES
    # =============================================================================

    def copy(self) -> "GraphMatrix":
        """Deep copy keeping name and creation time."""
        duplicate = GraphMatrix(name=self.name)
        duplicate.created_at = self.created_at
        duplicate._matrix = self.matrix
        return duplicate

    @staticmethod
    def _derive(grid: Grid) -> "GraphMatrix":
        """Wrap an already square, freshly built grid in a new graph."""
        result = GraphMatrix()
        result._matrix = grid
        return result

    def _apply_in_place(self, func) -> "GraphMatrix":
        for row in self._matrix:
            for j, cell in enumerate(row):
                row[j] = func(cell)
        return self

    def _check_same_size(self, other: "GraphMatrix") -> None:
        if self.size() != other.size():
            raise DimensionMismatch(
                f"Graphs must have the same dimensions ({self.size()} != {other.size()})"
            )

    @staticmethod
    def _require_graph(other: Any, operation: str) -> None:
        if not isinstance(other, GraphMatrix):
            raise TypeError(f"{operation} expects a GraphMatrix, got {type(other).__name__}")

    @staticmethod
    def _require_scalar(scalar: Any, operation: str) -> None:
        if not isinstance(scalar, int):
            raise TypeError(f"{operation} expects an int scalar, got {type(scalar).__name__}")

    # =============================================================================
    # PYTHON OPERATORS
    # =============================================================================

    def __pos__(self) -> "GraphMatrix":
        return self.identity()

    def __neg__(self) -> "GraphMatrix":
        return self.negate()

    def __add__(self, other: Any) -> "GraphMatrix":
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: Any) -> "GraphMatrix":
        if not isinstance(other, (GraphMatrix, int)):
            return NotImplemented
        return self.add_assign(other)

    def __sub__(self, other: Any) -> "GraphMatrix":
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return self.subtract(other)

    def __isub__(self, other: Any) -> "GraphMatrix":
        if not isinstance(other, (GraphMatrix, int)):
            return NotImplemented
        return self.subtract_assign(other)

    def __mul__(self, other: Any) -> "GraphMatrix":
        if isinstance(other, GraphMatrix):
            return self.multiply_matrices(other)
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "GraphMatrix":
        if not isinstance(other, int):
            return NotImplemented
        return self.scale(other)

    def __imul__(self, other: Any) -> "GraphMatrix":
        if not isinstance(other, int):
            return NotImplemented
        return self.scale_assign(other)

    def __ifloordiv__(self, other: Any) -> "GraphMatrix":
        if not isinstance(other, int):
            return NotImplemented
        return self.divide_assign(other)

    # Cells stay integers, so /= behaves like //=
    __itruediv__ = __ifloordiv__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return self.compare_by_edge_count(other) < 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return self.compare_by_edge_count(other) > 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return self.compare_by_edge_count(other) <= 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, GraphMatrix):
            return NotImplemented
        return self.compare_by_edge_count(other) >= 0

    __hash__ = None  # mutable

    def __len__(self) -> int:
        """Return number of vertices."""
        return self.size()

    def __iter__(self) -> Iterator[List[int]]:
        """Iterate over copies of the rows."""
        return iter(self.matrix)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        """String representation of graph."""
        return f"GraphMatrix(name='{self.name}', vertices={self.size()}, edges={self.edge_count()})"
