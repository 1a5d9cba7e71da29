"""Procedural face and solid builders.

These are plain clients of :class:`Face` and :class:`RenderableObject`; each
returns freshly built geometry centered on the world origin.
"""
from __future__ import annotations

import math
from typing import List, Optional

from geometry.matrix import Matrix
from geometry.vector import Vector

from .face import Face
from .objects import RenderableObject

CUBE_COLORS = {
    "front": "#ff0000",
    "back": "#880000",
    "top": "#00ff00",
    "bottom": "#008800",
    "right": "#0000ff",
    "left": "#000088",
}


def create_rectangle(
    width: float = 1.0,
    length: float = 1.0,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
    name: Optional[str] = None,
) -> Face:
    """Rectangle in the xy plane spanning ``±width`` by ``±length``."""

    face = Face(
        [
            Vector((1.0, 1.0, 0.0)),
            Vector((-1.0, 1.0, 0.0)),
            Vector((-1.0, -1.0, 0.0)),
            Vector((1.0, -1.0, 0.0)),
        ],
        fill,
        stroke,
        name,
    )
    face.transform(
        Matrix(
            [
                (width, 0.0, 0.0),
                (0.0, length, 0.0),
                (0.0, 0.0, 1.0),
            ]
        )
    )
    return face


def create_square(size: float = 1.0, fill: Optional[str] = None, name: Optional[str] = None) -> Face:
    return create_rectangle(size, size, fill, name=name)


def create_circle(
    radius: float = 1.0,
    segments: int = 10,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
) -> Face:
    """Regular ``segments``-gon approximating a disc in the xy plane."""

    if segments < 3:
        raise ValueError(f"A circle needs at least 3 segments, got {segments}")
    points = []
    for i in range(segments):
        angle = (2.0 * math.pi * i) / segments
        points.append(Vector((math.cos(angle), math.sin(angle), 0.0)))
    face = Face(points, fill, stroke)
    face.scale(radius)
    return face


def create_prism(face: Face, height: float = 1.0) -> RenderableObject:
    """Extrude ``face`` to ``±height`` along z, closing the sides with quads."""

    top = face.copy()
    top.name = "top"
    top.translate(Vector((0.0, 0.0, height)))
    bottom = face.copy()
    bottom.name = "bottom"
    bottom.translate(Vector((0.0, 0.0, -height)))

    faces: List[Face] = [top, bottom]
    count = len(face.points)
    for i in range(count):
        j = (i + 1) % count
        faces.append(
            Face(
                [top.points[i], top.points[j], bottom.points[j], bottom.points[i]],
                face.fill,
                face.stroke,
            )
        )
    return RenderableObject(faces=faces)


def create_rectangular_prism(
    width: float = 1.0, length: float = 1.0, height: float = 1.0
) -> RenderableObject:
    return create_prism(create_rectangle(width, length), height)


def create_cylinder(radius: float = 1.0, height: float = 1.0, segments: int = 10) -> RenderableObject:
    return create_prism(create_circle(radius, segments), height)


def create_sphere(radius: float = 1.0, segments: int = 10) -> RenderableObject:
    """Latitude/longitude quad sphere with ``segments`` meridians."""

    if segments < 3:
        raise ValueError(f"A sphere needs at least 3 segments, got {segments}")
    pole = Vector((1.0, 0.0, 0.0))
    step = (2.0 * math.pi) / segments
    faces: List[Face] = []
    for i in range(segments):
        longitude = step * i
        next_longitude = step * (i + 1)
        for j in range(math.ceil(segments / 2)):
            latitude = -math.pi / 2 + step * j
            next_latitude = -math.pi / 2 + step * (j + 1)
            faces.append(
                Face(
                    [
                        pole.rotation_y(latitude).rotation_z(longitude),
                        pole.rotation_y(next_latitude).rotation_z(longitude),
                        pole.rotation_y(next_latitude).rotation_z(next_longitude),
                        pole.rotation_y(latitude).rotation_z(next_longitude),
                    ]
                )
            )
    sphere = RenderableObject(faces=faces)
    sphere.scale(radius)
    return sphere


def create_cube(size: float = 1.0) -> RenderableObject:
    """Six squares at ``±size`` along each axis, named by side.

    Uses the default z-up frame: front/back lie along ±y, top/bottom along ±z
    and right/left along ±x.
    """

    cube = RenderableObject()
    placements = (
        ("front", cube.forward, 0),
        ("top", cube.up, None),
        ("right", cube.right, 1),
        ("back", cube.forward.scale(-1), 0),
        ("bottom", cube.up.scale(-1), None),
        ("left", cube.right.scale(-1), 1),
    )
    for name, offset, tilt_axis in placements:
        square = create_square(1.0, CUBE_COLORS[name], name=name)
        square.translate(offset)
        if tilt_axis is not None:
            square.rotate(Vector.basis(tilt_axis), math.pi / 2)
        cube.add_face(square)
    cube.scale(size)
    return cube
