"""CSS-style color strings to normalized RGBA tuples."""
from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import pygame

RGBA = Tuple[float, float, float, float]


@lru_cache(maxsize=256)
def to_rgba(value: str) -> RGBA:
    """Parse ``"red"``, ``"#71c4f5"`` or ``"#00000044"`` into 0..1 floats.

    Raises ``ValueError`` for strings pygame does not recognise.
    """

    color = pygame.Color(value)
    return (color.r / 255.0, color.g / 255.0, color.b / 255.0, color.a / 255.0)


def to_rgb255(value: str) -> Tuple[int, int, int]:
    """Integer RGB triple, as expected by ``pygame.font.Font.render``."""

    color = pygame.Color(value)
    return (color.r, color.g, color.b)
