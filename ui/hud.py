"""Text shown in the viewer's heads-up box."""
from __future__ import annotations

from typing import List

from scene.camera import Camera
from scene.view import FrameStats


def hud_lines(camera: Camera, stats: FrameStats) -> List[str]:
    """Camera position, forward vector and face counts, two decimals each."""

    position = " ".join(f"{value:.2f}" for value in camera.center)
    forward = " ".join(f"{value:.2f}" for value in camera.forward)
    return [position, forward, f"{stats.drawn} drawn / {stats.culled} culled"]
