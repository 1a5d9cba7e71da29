"""OpenGL frame renderer: scene polygons, minimap and HUD text."""
from __future__ import annotations

from typing import List, Tuple

from OpenGL import GL as gl

import pygame

from scene.camera import Camera
from scene.view import FrameStats
from ui.hud import hud_lines
from ui.layout import UILayout
from .colors import RGBA, to_rgba, to_rgb255
from .opengl_context import apply_centered_projection, apply_screen_projection
from .surface import PathBuilder

Vec2 = Tuple[float, float]

MINIMAP_BACKGROUND = "#00000022"
MINIMAP_AXIS_COLOR = "white"
MINIMAP_CAMERA_COLOR = "red"
MINIMAP_HEADING_COLOR = "blue"
MINIMAP_SCALE = 10.0
MINIMAP_MARKER_HALF_SIZE = 0.25
HUD_BACKGROUND = "black"
HUD_TEXT_COLOR = "white"


class GLSurface(PathBuilder):
    """Drawing surface that fills paths as ``GL_POLYGON`` and strokes them as loops."""

    def fill(self, color: str) -> None:
        path = self.path
        if len(path) < 3:
            return
        gl.glColor4f(*to_rgba(color))
        gl.glBegin(gl.GL_POLYGON)
        for x, y in path:
            gl.glVertex2f(x, y)
        gl.glEnd()

    def stroke(self, color: str) -> None:
        path = self.path
        if len(path) < 2:
            return
        gl.glColor4f(*to_rgba(color))
        gl.glBegin(gl.GL_LINE_LOOP if self.closed else gl.GL_LINE_STRIP)
        for x, y in path:
            gl.glVertex2f(x, y)
        gl.glEnd()


class SceneRenderer:
    """Draws one frame: background, scene, minimap overlay and HUD text."""

    def __init__(self, background_color: str, hud_font: str, hud_font_size: int) -> None:
        pygame.font.init()
        self._surface = GLSurface()
        self._background: RGBA = to_rgba(background_color)
        self._overlay_font = pygame.font.SysFont(hud_font, hud_font_size)

    def draw_frame(self, camera: Camera, layout: UILayout) -> FrameStats:
        gl.glClearColor(*self._background)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

        scene_rect = layout.scene_rect
        gl.glViewport(*layout.to_gl_viewport(scene_rect))
        apply_centered_projection(scene_rect.width, scene_rect.height)
        stats = camera.render(self._surface, layout.viewport_extent)

        self._draw_minimap(camera, layout)
        self._draw_hud(camera, layout, stats)

        # Leave the scene projection in place for the next frame.
        gl.glViewport(*layout.to_gl_viewport(scene_rect))
        apply_centered_projection(scene_rect.width, scene_rect.height)
        return stats

    # ------------------------------------------------------------------
    # Minimap
    # ------------------------------------------------------------------
    def _draw_minimap(self, camera: Camera, layout: UILayout) -> None:
        rect = layout.minimap_rect
        if rect.width <= 0 or rect.height <= 0:
            return
        gl.glViewport(*layout.to_gl_viewport(rect))
        apply_centered_projection(rect.width, rect.height)
        half_w = rect.width / 2.0
        half_h = rect.height / 2.0

        self._fill_quad(
            [(-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)],
            to_rgba(MINIMAP_BACKGROUND),
        )
        gl.glColor4f(*to_rgba(MINIMAP_AXIS_COLOR))
        gl.glBegin(gl.GL_LINES)
        gl.glVertex2f(-half_w, 0.0)
        gl.glVertex2f(half_w, 0.0)
        gl.glVertex2f(0.0, -half_h)
        gl.glVertex2f(0.0, half_h)
        gl.glEnd()

        position = (camera.center.x, camera.center.y)
        heading = (
            position[0] + camera.forward.x * MINIMAP_SCALE,
            position[1] + camera.forward.y * MINIMAP_SCALE,
        )
        self._fill_quad(self._marker(position), to_rgba(MINIMAP_CAMERA_COLOR))
        self._fill_quad(self._marker(heading), to_rgba(MINIMAP_HEADING_COLOR))

    @staticmethod
    def _marker(center: Vec2) -> List[Vec2]:
        size = MINIMAP_MARKER_HALF_SIZE * MINIMAP_SCALE
        x, y = center
        return [(x - size, y - size), (x + size, y - size), (x + size, y + size), (x - size, y + size)]

    @staticmethod
    def _fill_quad(points: List[Vec2], color: RGBA) -> None:
        gl.glColor4f(*color)
        gl.glBegin(gl.GL_QUADS)
        for x, y in points:
            gl.glVertex2f(x, y)
        gl.glEnd()

    # ------------------------------------------------------------------
    # HUD
    # ------------------------------------------------------------------
    def _draw_hud(self, camera: Camera, layout: UILayout, stats: FrameStats) -> None:
        width, height = layout.window_size
        if width <= 0 or height <= 0:
            return
        gl.glViewport(0, 0, width, height)
        apply_screen_projection(width, height)

        rect = layout.hud_rect
        self._fill_quad(
            [
                (rect.left, rect.top),
                (rect.right, rect.top),
                (rect.right, rect.bottom),
                (rect.left, rect.bottom),
            ],
            to_rgba(HUD_BACKGROUND),
        )
        for index, line in enumerate(hud_lines(camera, stats)):
            y = rect.top + 4 + layout.hud_line_height * (index + 1)
            self._draw_overlay_text(rect.left + 10, y, line, to_rgb255(HUD_TEXT_COLOR))

    def _draw_overlay_text(self, x: float, y: float, text: str, color: Tuple[int, int, int]) -> None:
        surface = self._overlay_font.render(text, True, color)
        data = pygame.image.tobytes(surface, "RGBA", True)
        gl.glRasterPos2f(x, y)
        gl.glDrawPixels(
            surface.get_width(),
            surface.get_height(),
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )

