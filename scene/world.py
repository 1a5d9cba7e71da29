"""Demo scene setup for the Facet viewer."""
from __future__ import annotations

import logging

from geometry.vector import Vector

from .camera import DEFAULT_VIEW_ANGLE, Camera
from .primitives import create_cube, create_cylinder, create_sphere

logger = logging.getLogger(__name__)


def create_initial_scene(view_angle: float = DEFAULT_VIEW_ANGLE, extras: bool = False) -> Camera:
    """Create a camera looking at a large cube with a small one beside it.

    ``extras`` adds a cylinder and a sphere further along the x axis.
    """

    camera = Camera(view_angle=view_angle)
    camera.translate(Vector((5.0, 0.0, 0.0)))
    camera.translate(camera.forward.scale(-10))

    cube = create_cube(2.0)
    small_cube = create_cube(0.2)
    small_cube.translate(Vector((5.0, 0.0, 0.0)))
    camera.add(cube)
    camera.add(small_cube)

    if extras:
        cylinder = create_cylinder(2.0, 5.0, 30)
        cylinder.translate(Vector((-8.0, 6.0, 0.0)))
        sphere = create_sphere(2.0, 20)
        sphere.translate(Vector((12.0, 6.0, 0.0)))
        camera.add(cylinder)
        camera.add(sphere)

    logger.debug(
        "Scene ready: %d objects, %d faces",
        len(camera.objects),
        sum(obj.face_count() for obj in camera.objects),
    )
    return camera
