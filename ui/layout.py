"""Layout helpers for the viewer window: scene viewport, minimap and HUD box."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame


Size = Tuple[int, int]
GLViewport = Tuple[int, int, int, int]


@dataclass
class UILayout:
    """Splits the window into the full-size scene view plus two overlays."""

    window_size: Size
    minimap_size: int = 100
    margin: int = 10
    hud_line_height: int = 18
    hud_lines: int = 3
    hud_width: int = 120

    def update(self, window_size: Size) -> None:
        self.window_size = window_size

    @property
    def scene_rect(self) -> pygame.Rect:
        width, height = self.window_size
        return pygame.Rect(0, 0, width, height)

    @property
    def viewport_extent(self) -> int:
        """Horizontal extent fed into the perspective scale factor."""

        return self.scene_rect.width

    @property
    def minimap_rect(self) -> pygame.Rect:
        """Square anchored to the top-right corner of the window."""

        width, _ = self.window_size
        size = max(0, min(self.minimap_size, width - 2 * self.margin))
        return pygame.Rect(width - size - self.margin, self.margin, size, size)

    @property
    def hud_rect(self) -> pygame.Rect:
        """Text box anchored to the bottom-left corner of the window."""

        _, height = self.window_size
        box_height = self.hud_line_height * self.hud_lines + 2 * 4
        return pygame.Rect(0, height - box_height, self.hud_width, box_height)

    def to_gl_viewport(self, rect: pygame.Rect) -> GLViewport:
        """Convert a top-left-origin rect to ``glViewport`` arguments."""

        _, height = self.window_size
        return (rect.left, height - rect.bottom, rect.width, rect.height)
