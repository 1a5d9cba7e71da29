import pygame
import pytest

from rendering.colors import to_rgb255, to_rgba
from rendering.surface import RecordingSurface
from scene.view import FrameStats
from scene.world import create_initial_scene
from ui.hud import hud_lines
from ui.layout import UILayout


def test_minimap_sits_top_right():
    layout = UILayout((800, 600))
    assert layout.minimap_rect == pygame.Rect(690, 10, 100, 100)
    assert layout.to_gl_viewport(layout.minimap_rect) == (690, 490, 100, 100)


def test_minimap_shrinks_in_narrow_windows():
    layout = UILayout((60, 600))
    assert layout.minimap_rect.width == 40


def test_hud_sits_bottom_left():
    layout = UILayout((800, 600))
    assert layout.hud_rect == pygame.Rect(0, 538, 120, 62)
    assert layout.to_gl_viewport(layout.hud_rect) == (0, 0, 120, 62)


def test_layout_update_tracks_window():
    layout = UILayout((800, 600))
    layout.update((1024, 768))
    assert layout.viewport_extent == 1024
    assert layout.scene_rect == pygame.Rect(0, 0, 1024, 768)


def test_hud_lines_format_two_decimals():
    camera = create_initial_scene()
    lines = hud_lines(camera, FrameStats(drawn=12, culled=3))
    assert lines == ["5.00 -10.00 0.00", "0.00 1.00 0.00", "12 drawn / 3 culled"]


def test_color_parsing():
    assert to_rgba("red") == (1.0, 0.0, 0.0, 1.0)
    assert to_rgba("#00000044") == pytest.approx((0.0, 0.0, 0.0, 0x44 / 255))
    assert to_rgb255("#71c4f5") == (0x71, 0xC4, 0xF5)
    with pytest.raises(ValueError):
        to_rgba("not-a-color")


def test_recording_surface_tracks_paths():
    surface = RecordingSurface()
    surface.begin_path()
    surface.line_to(0, 0)
    surface.line_to(1, 2)
    surface.stroke("white")
    assert surface.commands[0].points == ((0.0, 0.0), (1.0, 2.0))
    assert surface.commands[0].closed is False
    surface.clear()
    assert surface.commands == []
    assert surface.path == ()
