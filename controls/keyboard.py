"""Keyboard polling that steers the camera once per frame."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pygame

from geometry.vector import Vector
from scene.camera import Camera


@dataclass
class CameraController:
    """Maps held keys to camera translations and rotations.

    WASD moves in the camera's own right/forward plane, left shift/control
    rise and sink along the world z axis, the up/down arrows pitch about the
    camera's right vector and left/right yaw about world z.
    """

    move_speed: float = 10.0
    turn_speed: float = 5.0

    def poll(self, camera: Camera, dt: float, keys: Sequence[bool]) -> bool:
        """Apply this frame's input to ``camera``; return ``True`` if it moved."""

        if dt <= 0.0:
            return False
        step = self.move_speed * dt
        turn = self.turn_speed * dt
        moved = False

        world_up = Vector.basis(2)
        translations = (
            (pygame.K_LCTRL, world_up.scale(-step)),
            (pygame.K_LSHIFT, world_up.scale(step)),
            (pygame.K_a, camera.right.scale(-step)),
            (pygame.K_d, camera.right.scale(step)),
            (pygame.K_w, camera.forward.scale(step)),
            (pygame.K_s, camera.forward.scale(-step)),
        )
        for key, offset in translations:
            if keys[key]:
                camera.translate(offset)
                moved = True

        if keys[pygame.K_UP]:
            camera.rotate(camera.right, turn)
            moved = True
        if keys[pygame.K_DOWN]:
            camera.rotate(camera.right, -turn)
            moved = True
        if keys[pygame.K_RIGHT]:
            camera.rotate_z(-turn)
            moved = True
        if keys[pygame.K_LEFT]:
            camera.rotate_z(turn)
            moved = True
        return moved
