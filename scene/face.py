"""Colored polygons positioned in world space."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from geometry.errors import ShapeError
from geometry.matrix import Matrix
from geometry.vector import Number, Vector

from .view import Vec2

if TYPE_CHECKING:  # pragma: no cover - import only needed for annotations
    from rendering.surface import DrawingSurface

    from .view import CameraView

DEFAULT_FILL = "red"
DEFAULT_STROKE = "#00000044"


class Face:
    """An ordered vertex loop with a fill/stroke color pair.

    ``center`` is the arithmetic mean of the vertices and is re-derived after
    every mutation. The face copies the vertices it is given, so two faces
    never share a ``Vector``.
    """

    def __init__(
        self,
        points: Sequence[Vector],
        fill: Optional[str] = None,
        stroke: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        if not points:
            raise ShapeError("A face needs at least one vertex")
        self.points: List[Vector] = [point.copy() for point in points]
        self.fill = fill if fill is not None else DEFAULT_FILL
        self.stroke = stroke if stroke is not None else DEFAULT_STROKE
        self.name = name
        self.center = Vector.zero(len(self.points[0]))
        self.find_center()

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<Face{label} {len(self.points)} points center={self.center}>"

    def find_center(self) -> None:
        total = self.points[0].copy()
        for point in self.points[1:]:
            total.translate(point)
        self.center = total.scale(1.0 / len(self.points))

    def copy(self) -> "Face":
        return Face(self.points, self.fill, self.stroke, self.name)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------
    def scale(self, k: Number) -> None:
        """Scale every vertex about the world origin."""

        for point in self.points:
            point.assign(point.scale(k))
        self.find_center()

    def translate(self, other: Vector) -> None:
        for point in self.points:
            point.translate(other)
        self.find_center()

    def rotate(self, axis: Vector, theta: float) -> None:
        """Spin the face by ``theta`` about ``axis`` through its own centroid."""

        original_center = self.center.copy()
        self.translate(original_center.scale(-1))
        for point in self.points:
            point.rotate(axis, theta)
        self.translate(original_center)

    def rotate_x(self, theta: float) -> None:
        self.rotate(Vector.basis(0), theta)

    def rotate_y(self, theta: float) -> None:
        self.rotate(Vector.basis(1), theta)

    def rotate_z(self, theta: float) -> None:
        self.rotate(Vector.basis(2), theta)

    def transform(self, matrix: Matrix) -> None:
        """Apply a linear map to the vertices relative to the centroid."""

        original_center = self.center.copy()
        self.translate(original_center.scale(-1))
        for point in self.points:
            point.transform(matrix)
        self.translate(original_center)
        self.find_center()

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def project(self, view: "CameraView", viewport_extent: float) -> List[Vec2]:
        return [view.project(point, viewport_extent) for point in self.points]

    def render(
        self, view: "CameraView", surface: "DrawingSurface", viewport_extent: float
    ) -> None:
        surface.begin_path()
        for x, y in self.project(view, viewport_extent):
            surface.line_to(x, y)
        surface.close_path()
        surface.fill(self.fill)
        surface.stroke(self.stroke)
