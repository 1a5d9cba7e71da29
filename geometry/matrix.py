"""Row-vector matrices with Laplace-expansion inversion.

A single ``Matrix`` type covers both rectangular and square matrices. The
square-only operations (``determinant``, ``submatrix``, ``cofactor``,
``adjugate``, ``inverse``) check ``is_square()`` first and raise
:class:`ShapeError` otherwise.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence, Union

import numpy as np

from .errors import DimensionError, ShapeError, SingularMatrixError
from .vector import Number, Vector

# Determinants at or below this magnitude are treated as zero by ``inverse``.
SINGULAR_EPSILON = 1e-12

Row = Union[Vector, Sequence[Number]]


class Matrix:
    """Ordered list of equal-width row vectors."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Row]) -> None:
        vectors = [row.copy() if isinstance(row, Vector) else Vector(row) for row in rows]
        if not vectors:
            raise ShapeError("A matrix needs at least one row")
        width = len(vectors[0])
        for index, vector in enumerate(vectors):
            if len(vector) != width:
                raise ShapeError(
                    f"Row {index} has {len(vector)} entries, expected {width}"
                )
        self._rows: List[Vector] = vectors

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        if n < 1:
            raise ShapeError(f"Identity size must be positive, got {n}")
        return cls([Vector.basis(i, n) for i in range(n)])

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def rows(self) -> List[Vector]:
        return list(self._rows)

    def width(self) -> int:
        return len(self._rows[0])

    def height(self) -> int:
        return len(self._rows)

    def is_square(self) -> bool:
        return self.width() == self.height()

    def entry(self, row: int, col: int) -> float:
        return self._rows[row][col]

    def to_array(self) -> np.ndarray:
        return np.array([row.to_array() for row in self._rows])

    # ------------------------------------------------------------------
    # General algebra
    # ------------------------------------------------------------------
    def scale(self, k: Number) -> "Matrix":
        return Matrix([row.scale(k) for row in self._rows])

    def vector_product(self, vector: Vector) -> Vector:
        if len(vector) != self.width():
            raise DimensionError(
                f"Cannot multiply a {self.height()}x{self.width()} matrix by a "
                f"vector of length {len(vector)}"
            )
        return Vector([row.dot(vector) for row in self._rows])

    def matrix_product(self, other: "Matrix") -> "Matrix":
        if self.width() != other.height():
            raise ShapeError(
                f"Cannot multiply {self.height()}x{self.width()} by "
                f"{other.height()}x{other.width()}"
            )
        columns = other.transpose().rows
        return Matrix([[row.dot(column) for column in columns] for row in self._rows])

    def transpose(self) -> "Matrix":
        return Matrix(
            [[row[i] for row in self._rows] for i in range(self.width())]
        )

    def isclose(self, other: "Matrix", atol: float = 1e-9) -> bool:
        if self.width() != other.width() or self.height() != other.height():
            return False
        return all(a.isclose(b, atol=atol) for a, b in zip(self._rows, other._rows))

    # ------------------------------------------------------------------
    # Square-only operations
    # ------------------------------------------------------------------
    def determinant(self) -> float:
        """Laplace expansion along the first row."""

        self._require_square("determinant")
        if self.height() == 1:
            return self._rows[0][0]
        first = self._rows[0]
        total = 0.0
        for i in range(self.width()):
            sign = -1.0 if i % 2 else 1.0
            total += first[i] * sign * self.submatrix(i, 0).determinant()
        return total

    def submatrix(self, i: int, j: int) -> "Matrix":
        """Return the minor with column ``i`` and row ``j`` removed."""

        self._require_square("submatrix")
        if self.height() == 1:
            raise ShapeError("A 1x1 matrix has no minors")
        return Matrix(
            [
                [value for col, value in enumerate(row) if col != i]
                for index, row in enumerate(self._rows)
                if index != j
            ]
        )

    def cofactor(self) -> "Matrix":
        """Matrix of signed minors: entry ``(j, i)`` is ``(-1)^(i+j) |M_ij|``."""

        self._require_square("cofactor")
        size = self.height()
        if size == 1:
            return Matrix([[1.0]])
        return Matrix(
            [
                [
                    (-1.0 if (i + j) % 2 else 1.0) * self.submatrix(i, j).determinant()
                    for i in range(size)
                ]
                for j in range(size)
            ]
        )

    def adjugate(self) -> "Matrix":
        return self.cofactor().transpose()

    def inverse(self) -> "Matrix":
        determinant = self.determinant()
        if abs(determinant) <= SINGULAR_EPSILON:
            raise SingularMatrixError(
                f"Matrix is singular (determinant {determinant!r})"
            )
        return self.adjugate().scale(1.0 / determinant)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self._rows)

    def _require_square(self, operation: str) -> None:
        if not self.is_square():
            raise ShapeError(
                f"{operation} needs a square matrix, got {self.height()}x{self.width()}"
            )
