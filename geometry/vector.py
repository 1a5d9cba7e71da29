"""Variable-length vectors with in-place and pure algebra."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Union

import numpy as np

from .errors import DimensionError

if TYPE_CHECKING:  # pragma: no cover - circular import safe guard
    from .matrix import Matrix

Number = Union[int, float]


class Vector:
    """Ordered tuple of reals backed by a float64 array.

    Pure operations (``add``, ``scale``, ``rotation`` ...) return new vectors.
    ``assign`` and the verbs built on it (``translate``, ``rotate``,
    ``transform``) overwrite the receiver's components in place.
    """

    __slots__ = ("_values",)

    def __init__(self, components: Iterable[Number] = ()) -> None:
        if not isinstance(components, np.ndarray):
            components = list(components)
        values = np.array(components, dtype=np.float64)
        if values.ndim != 1 or values.size == 0:
            raise DimensionError("a vector needs at least one component")
        self._values = values

    @classmethod
    def zero(cls, size: int = 3) -> "Vector":
        return cls(np.zeros(size))

    @classmethod
    def basis(cls, index: int, size: int = 3) -> "Vector":
        """Return the standard basis vector ``e_index`` of length ``size``."""

        values = np.zeros(size)
        values[index] = 1.0
        return cls(values)

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._values[0])

    @x.setter
    def x(self, value: Number) -> None:
        self._values[0] = value

    @property
    def y(self) -> float:
        self._require_components(2, "y")
        return float(self._values[1])

    @y.setter
    def y(self, value: Number) -> None:
        self._require_components(2, "y")
        self._values[1] = value

    @property
    def z(self) -> float:
        self._require_components(3, "z")
        return float(self._values[2])

    @z.setter
    def z(self, value: Number) -> None:
        self._require_components(3, "z")
        self._values[2] = value

    def __len__(self) -> int:
        return int(self._values.size)

    def __iter__(self) -> Iterator[float]:
        for value in self._values:
            yield float(value)

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def to_array(self) -> np.ndarray:
        """Return a copy of the components as a numpy array."""

        return self._values.copy()

    # ------------------------------------------------------------------
    # In-place updates
    # ------------------------------------------------------------------
    def assign(self, other: "Vector") -> None:
        """Overwrite this vector's components with a copy of ``other``'s."""

        self._values = other._values.copy()

    def copy(self) -> "Vector":
        return Vector(self._values)

    def translate(self, other: "Vector") -> None:
        self.assign(self.add(other))

    def rotate(self, axis: "Vector", theta: float) -> None:
        self.assign(self.rotation(axis, theta))

    def rotate_x(self, theta: float) -> None:
        self.assign(self.rotation_x(theta))

    def rotate_y(self, theta: float) -> None:
        self.assign(self.rotation_y(theta))

    def rotate_z(self, theta: float) -> None:
        self.assign(self.rotation_z(theta))

    def transform(self, matrix: "Matrix") -> None:
        self.assign(self.transformation(matrix))

    # ------------------------------------------------------------------
    # Pure algebra
    # ------------------------------------------------------------------
    def scale(self, k: Number) -> "Vector":
        return Vector(self._values * k)

    def add(self, other: "Vector") -> "Vector":
        self._require_same_length(other, "add")
        return Vector(self._values + other._values)

    def sub(self, other: "Vector") -> "Vector":
        return self.add(other.scale(-1))

    def dot(self, other: "Vector") -> float:
        self._require_same_length(other, "dot")
        return float(np.dot(self._values, other._values))

    def length(self) -> float:
        """Euclidean norm."""

        return float(np.linalg.norm(self._values))

    def normalized(self) -> "Vector":
        """Return the unit vector pointing the same way.

        A zero vector has no direction and is returned as a zero copy.
        """

        magnitude = self.length()
        if magnitude == 0:
            return self.copy()
        return self.scale(1.0 / magnitude)

    def rotation(self, axis: "Vector", theta: float) -> "Vector":
        """Return this vector rotated by ``theta`` radians about ``axis``.

        Uses the quaternion sandwich product ``q * p * q'`` where ``q`` is the
        half-angle quaternion of the unit axis and ``q'`` the one built from the
        negated axis (its conjugate). Only the x/y/z components take part, so
        the result always has three components.
        """

        from .quaternion import Quaternion

        unit = axis.normalized()
        q1 = Quaternion.from_vector3d(unit, theta / 2)
        p = Quaternion.pure(self)
        q2 = Quaternion.from_vector3d(unit.scale(-1), theta / 2)
        return q1.mult(p).mult(q2).to_vector3d()

    def rotation_x(self, theta: float) -> "Vector":
        return self.rotation(Vector.basis(0), theta)

    def rotation_y(self, theta: float) -> "Vector":
        return self.rotation(Vector.basis(1), theta)

    def rotation_z(self, theta: float) -> "Vector":
        return self.rotation(Vector.basis(2), theta)

    def transformation(self, matrix: "Matrix") -> "Vector":
        return matrix.vector_product(self)

    def isclose(self, other: "Vector", atol: float = 1e-9) -> bool:
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._values, other._values, rtol=0.0, atol=atol))

    # ------------------------------------------------------------------
    # Operator sugar
    # ------------------------------------------------------------------
    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "Vector":
        return self.scale(-1)

    def __mul__(self, k: Number) -> "Vector":
        if not isinstance(k, (int, float)):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Vector([{', '.join(repr(value) for value in self)}])"

    def __str__(self) -> str:
        return "|" + " ".join(str(value) for value in self) + "|"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require_components(self, count: int, name: str) -> None:
        if len(self) < count:
            raise DimensionError(
                f"No {name} component, this vector only has {len(self)} entries"
            )

    def _require_same_length(self, other: "Vector", operation: str) -> None:
        if len(self) != len(other):
            raise DimensionError(
                f"Cannot {operation} vectors of length {len(self)} and {len(other)}"
            )
