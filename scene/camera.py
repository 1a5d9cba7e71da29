"""Perspective camera that orders and draws the scene back to front."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterable, List, Optional

from geometry.matrix import Matrix
from geometry.vector import Vector

from .objects import Object, RenderableObject
from .view import CameraView, FrameStats

if TYPE_CHECKING:  # pragma: no cover - import only needed for annotations
    from rendering.surface import DrawingSurface

logger = logging.getLogger(__name__)

DEFAULT_VIEW_ANGLE = math.pi / 4


class Camera(Object):
    """An oriented viewpoint holding the top-level objects it renders.

    Depth is measured along ``forward``: a point is in front of the camera when
    its camera-space z is positive.
    """

    def __init__(
        self,
        view_angle: float = DEFAULT_VIEW_ANGLE,
        objects: Iterable[RenderableObject] = (),
        **frame: Vector,
    ) -> None:
        super().__init__(**frame)
        if not 0.0 < view_angle < math.pi / 2:
            raise ValueError(f"view_angle must be in (0, pi/2) radians, got {view_angle!r}")
        self.view_angle = view_angle
        self.objects: List[RenderableObject] = []
        for obj in objects:
            self.add(obj)

    def add(self, obj: RenderableObject) -> None:
        """Register a top-level object; nodes owned by another node are rejected."""

        if obj.parent is not None:
            raise ValueError("Only root nodes can be added to a camera")
        if any(existing is obj for existing in self.objects):
            raise ValueError("Object is already in this scene")
        self.objects.append(obj)

    # ------------------------------------------------------------------
    # Coordinate transform
    # ------------------------------------------------------------------
    def basis(self) -> Matrix:
        """Matrix whose columns are the right, up and forward vectors."""

        return Matrix([self.right, self.up, self.forward]).transpose()

    def view(self) -> CameraView:
        """Invert the basis once and capture the camera's local origin."""

        inverse = self.basis().inverse()
        return CameraView(
            inverse=inverse,
            origin=inverse.vector_product(self.center),
            view_angle=self.view_angle,
        )

    def delta(self, point: Vector) -> Vector:
        """Return ``point`` in camera-local coordinates relative to the camera."""

        return self.view().delta(point)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def sorted_objects(self, view: Optional[CameraView] = None) -> List[RenderableObject]:
        """Top-level objects ordered farthest first."""

        if view is None:
            view = self.view()
        return sorted(self.objects, key=lambda obj: view.distance(obj.center), reverse=True)

    def render(self, surface: "DrawingSurface", viewport_extent: float) -> FrameStats:
        """Draw every visible face onto ``surface`` using the painter's algorithm."""

        view = self.view()
        stats = FrameStats()
        for obj in self.sorted_objects(view):
            obj.render(view, surface, viewport_extent, stats)
        logger.debug("Rendered %d faces, culled %d", stats.drawn, stats.culled)
        return stats
