"""Shared fixtures: small faces, cube scenes and cameras."""
from __future__ import annotations

import math

import pytest

from geometry.vector import Vector
from scene.camera import Camera
from scene.face import Face
from scene.primitives import create_cube


@pytest.fixture()
def triangle() -> Face:
    return Face(
        [
            Vector((1.0, 0.0, 2.0)),
            Vector((3.0, 1.0, 2.0)),
            Vector((2.0, 4.0, -1.0)),
        ],
        fill="#336699",
    )


@pytest.fixture()
def cube():
    """Unit cube scaled by 2: faces at ±2 along each axis."""
    return create_cube(2.0)


@pytest.fixture()
def front_camera() -> Camera:
    """Camera at z=-10 looking down +z."""
    return Camera(
        view_angle=math.pi / 4,
        center=Vector((0.0, 0.0, -10.0)),
        right=Vector((1.0, 0.0, 0.0)),
        up=Vector((0.0, 1.0, 0.0)),
        forward=Vector((0.0, 0.0, 1.0)),
    )


@pytest.fixture()
def face_at():
    """Find the face whose centroid lies on the ``sign`` side of ``axis``."""

    def _find(obj, axis: int, sign: float) -> Face:
        for face in obj.faces:
            if face.center[axis] * sign > 1e-6 and all(
                abs(face.center[other]) < 1e-6 for other in range(3) if other != axis
            ):
                return face
        raise LookupError(f"no face on axis {axis} with sign {sign}")

    return _find
