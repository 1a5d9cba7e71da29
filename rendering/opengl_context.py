"""OpenGL context helpers for flat polygon rendering."""
from __future__ import annotations

from typing import Tuple

from OpenGL import GL as gl

from .colors import RGBA


def initialize_gl(surface_size: Tuple[int, int], background: RGBA) -> None:
    """Configure OpenGL state for 2D painter's-order drawing."""
    width, height = surface_size
    gl.glViewport(0, 0, width, height)
    gl.glClearColor(*background)

    apply_centered_projection(width, height)

    # Draw order alone decides visibility.
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    gl.glLineWidth(1.0)


def apply_centered_projection(width: int, height: int) -> None:
    """Origin at the viewport center, y pointing up."""
    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(-width / 2.0, width / 2.0, -height / 2.0, height / 2.0, -1, 1)

    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()


def apply_screen_projection(width: int, height: int) -> None:
    """Origin at the top-left corner, y pointing down, for HUD overlays."""
    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(0, width, height, 0, -1, 1)

    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()


def resize_viewport(surface_size: Tuple[int, int], background: RGBA) -> None:
    """Update viewport and projection when the window changes size."""
    initialize_gl(surface_size, background)
