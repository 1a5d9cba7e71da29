"""Exceptions raised by the linear-algebra layer."""
from __future__ import annotations


class GeometryError(ValueError):
    """Base class for invalid vector, quaternion and matrix operations."""


class DimensionError(GeometryError):
    """A vector has the wrong number of components for the operation."""


class ShapeError(GeometryError):
    """A matrix or polygon does not have the shape the operation needs."""


class SingularMatrixError(GeometryError):
    """The matrix has no inverse because its determinant is (near) zero."""
