"""Quaternions multiplied through their 4x4 real-matrix embedding."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .errors import DimensionError, ShapeError
from .matrix import Matrix
from .vector import Vector


@dataclass(frozen=True)
class Quaternion:
    """``a + bi + cj + dk``; operations return new instances."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_vector(cls, vector: Vector) -> "Quaternion":
        if len(vector) != 4:
            raise DimensionError(
                f"A quaternion needs 4 components, got {len(vector)}"
            )
        return cls(*vector)

    @classmethod
    def from_vector3d(cls, vector3d: Vector, theta: float = math.pi / 2) -> "Quaternion":
        """Return ``cos(theta) + sin(theta) * (x i + y j + z k)``.

        With a unit ``vector3d`` and ``theta`` equal to half a rotation angle
        this is the rotation quaternion about that axis.
        """

        sin_theta = math.sin(theta)
        return cls(
            math.cos(theta),
            vector3d.x * sin_theta,
            vector3d.y * sin_theta,
            vector3d.z * sin_theta,
        )

    @classmethod
    def pure(cls, vector3d: Vector) -> "Quaternion":
        """Embed a 3D point as a quaternion with an exact zero scalar part."""

        return cls(0.0, vector3d.x, vector3d.y, vector3d.z)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "Quaternion":
        """Recover ``q`` from its embedding by reading ``M(q) * e0``."""

        if matrix.width() != 4 or matrix.height() != 4:
            raise ShapeError(
                f"Expected a 4x4 quaternion embedding, got {matrix.height()}x{matrix.width()}"
            )
        return cls.from_vector(matrix.transpose().rows[0])

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_vector(self) -> Vector:
        return Vector((self.a, self.b, self.c, self.d))

    def to_vector3d(self) -> Vector:
        return Vector((self.b, self.c, self.d))

    def to_matrix(self) -> Matrix:
        """Left-multiplication matrix: ``to_matrix(p) @ to_matrix(q) == to_matrix(p * q)``."""

        a, b, c, d = self.a, self.b, self.c, self.d
        return Matrix(
            [
                (a, -b, -c, -d),
                (b, a, -d, c),
                (c, d, a, -b),
                (d, -c, b, a),
            ]
        )

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def add(self, other: "Quaternion") -> "Quaternion":
        return Quaternion.from_vector(self.to_vector().add(other.to_vector()))

    def mult(self, other: "Quaternion") -> "Quaternion":
        return Quaternion.from_matrix(self.to_matrix().matrix_product(other.to_matrix()))

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.a, -self.b, -self.c, -self.d)

    def norm(self) -> float:
        return self.to_vector().length()

    def isclose(self, other: "Quaternion", atol: float = 1e-9) -> bool:
        return self.to_vector().isclose(other.to_vector(), atol=atol)

    def __iter__(self) -> Iterator[float]:
        yield self.a
        yield self.b
        yield self.c
        yield self.d

    def __str__(self) -> str:
        parts = [str(self.a)]
        for value, unit in ((self.b, "i"), (self.c, "j"), (self.d, "k")):
            sign = "-" if value < 0 else "+"
            parts.append(f"{sign} {abs(value)}{unit}")
        return " ".join(parts)
