"""Per-frame camera snapshot used for depth ordering and projection."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from geometry.matrix import Matrix
from geometry.vector import Vector

Vec2 = Tuple[float, float]

# Vertex depths closer to zero than this are clamped before the perspective
# divide so projected coordinates stay finite.
MIN_PROJECTION_DEPTH = 1e-9


@dataclass
class FrameStats:
    """Counts of faces drawn and culled during one ``Camera.render`` call."""

    drawn: int = 0
    culled: int = 0


@dataclass(frozen=True)
class CameraView:
    """The camera's inverted basis and local origin, frozen for one frame.

    ``inverse`` maps world coordinates into the camera's right/up/forward
    frame; ``origin`` is the camera position already expressed in that frame.
    """

    inverse: Matrix
    origin: Vector
    view_angle: float

    def delta(self, point: Vector) -> Vector:
        """Return ``point`` relative to the camera's position and orientation."""

        return self.inverse.vector_product(point).sub(self.origin)

    def depth(self, point: Vector) -> float:
        return self.delta(point).z

    def distance(self, point: Vector) -> float:
        return self.delta(point).length()

    def project(self, point: Vector, viewport_extent: float) -> Vec2:
        """Perspective-project ``point`` onto the screen plane.

        The scale factor comes from the vertex's own depth:
        ``k = extent / (2 * tan(view_angle) * depth)`` and the camera-space
        x/y are multiplied by ``|k|``.
        """

        local = self.delta(point)
        depth = local.z
        if abs(depth) < MIN_PROJECTION_DEPTH:
            depth = MIN_PROJECTION_DEPTH if depth >= 0 else -MIN_PROJECTION_DEPTH
        k = viewport_extent / (2.0 * math.tan(self.view_angle) * depth)
        scale = abs(k)
        return (local.x * scale, local.y * scale)
