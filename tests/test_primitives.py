import math

import numpy as np
import pytest

from geometry.vector import Vector
from scene.primitives import (
    CUBE_COLORS,
    create_circle,
    create_cube,
    create_cylinder,
    create_prism,
    create_rectangle,
    create_rectangular_prism,
    create_sphere,
)
from scene.world import create_initial_scene
from rendering.surface import RecordingSurface


def test_rectangle_spans_width_and_length():
    face = create_rectangle(2.0, 3.0)
    coords = {tuple(round(value, 9) for value in point) for point in face.points}
    assert coords == {(2.0, 3.0, 0.0), (-2.0, 3.0, 0.0), (-2.0, -3.0, 0.0), (2.0, -3.0, 0.0)}
    assert face.center.isclose(Vector.zero())


def test_circle_vertices_lie_on_radius():
    face = create_circle(2.0, 8)
    assert len(face.points) == 8
    assert [point.length() for point in face.points] == pytest.approx([2.0] * 8)
    assert face.center.isclose(Vector.zero(), atol=1e-9)


def test_circle_needs_three_segments():
    with pytest.raises(ValueError):
        create_circle(1.0, 2)


def test_cube_has_named_faces_on_each_axis(cube, face_at):
    assert len(cube.faces) == 6
    assert {face.name for face in cube.faces} == set(CUBE_COLORS)
    assert face_at(cube, 1, 1.0).name == "front"
    assert face_at(cube, 1, -1.0).name == "back"
    assert face_at(cube, 2, 1.0).name == "top"
    assert face_at(cube, 2, -1.0).name == "bottom"
    assert face_at(cube, 0, 1.0).name == "right"
    assert face_at(cube, 0, -1.0).name == "left"
    for face in cube.faces:
        assert face.fill == CUBE_COLORS[face.name]
        assert np.allclose(np.abs([point.to_array() for point in face.points]), 2.0)
    assert cube.center.isclose(Vector.zero())


def test_prism_caps_and_sides():
    prism = create_rectangular_prism(1.0, 2.0, 0.5)
    assert len(prism.faces) == 6
    top, bottom = prism.faces[0], prism.faces[1]
    assert top.center.isclose(Vector((0.0, 0.0, 0.5)))
    assert bottom.center.isclose(Vector((0.0, 0.0, -0.5)))
    for side in prism.faces[2:]:
        assert len(side.points) == 4
        assert side.center.z == pytest.approx(0.0)


def test_prism_faces_do_not_share_vertices():
    prism = create_prism(create_rectangle(), 1.0)
    top = prism.faces[0]
    top.translate(Vector((0.0, 0.0, 5.0)))
    for side in prism.faces[2:]:
        assert max(point.z for point in side.points) == pytest.approx(1.0)


def test_cylinder_face_count():
    assert len(create_cylinder(1.0, 2.0, 10).faces) == 12


def test_sphere_vertices_on_radius():
    sphere = create_sphere(2.0, 8)
    assert len(sphere.faces) == 8 * 4
    lengths = [point.length() for face in sphere.faces for point in face.points]
    assert lengths == pytest.approx([2.0] * len(lengths))
    assert sphere.center.isclose(Vector.zero(), atol=1e-9)


def test_initial_scene_layout():
    camera = create_initial_scene()
    assert camera.center.isclose(Vector((5.0, -10.0, 0.0)))
    assert len(camera.objects) == 2
    big, small = camera.objects
    assert small.center.isclose(Vector((5.0, 0.0, 0.0)))
    assert camera.sorted_objects() == [big, small]
    stats = camera.render(RecordingSurface(), 800)
    assert (stats.drawn, stats.culled) == (12, 0)


def test_initial_scene_extras():
    camera = create_initial_scene(math.radians(60), extras=True)
    assert camera.view_angle == pytest.approx(math.radians(60))
    assert len(camera.objects) == 4
