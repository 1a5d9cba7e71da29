"""Entry point for the Facet viewer."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame

from controls.keyboard import CameraController
from rendering.colors import to_rgba
from rendering.draw_system import SceneRenderer
from rendering.opengl_context import initialize_gl, resize_viewport
from runtime.log import setup_default_logging
from runtime.settings import load_settings
from scene.world import create_initial_scene
from ui.layout import UILayout

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Painter's-algorithm 3D scene viewer")
    parser.add_argument("--config", help="YAML file overriding configs/default.yaml")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument(
        "--extras", action="store_true", help="Add a cylinder and a sphere to the scene"
    )
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = load_settings(args.config)
    setup_default_logging(args.log_level or settings.log_level)

    pygame.init()
    pygame.display.set_caption("Facet")
    flags = pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE
    pygame.display.set_mode(settings.window_size, flags)
    window_size = pygame.display.get_surface().get_size()
    logger.info("Window opened at %dx%d", *window_size)
    layout = UILayout(window_size, minimap_size=settings.minimap_size)

    background = to_rgba(settings.background_color)
    initialize_gl(window_size, background)

    camera = create_initial_scene(settings.view_angle, extras=args.extras or settings.show_extras)
    controller = CameraController(move_speed=settings.move_speed, turn_speed=settings.turn_speed)
    renderer = SceneRenderer(settings.background_color, settings.hud_font, settings.hud_font_size)

    clock = pygame.time.Clock()
    running = True
    try:
        while running:
            dt = clock.tick(settings.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    pygame.display.set_mode(event.size, flags)
                    resize_viewport(event.size, background)
                    window_size = event.size
                    layout.update(window_size)
                    logger.info("Window resized to %dx%d", *window_size)

            # Input mutates the scene strictly before the frame is drawn.
            controller.poll(camera, dt, pygame.key.get_pressed())
            renderer.draw_frame(camera, layout)
            pygame.display.flip()
    except Exception:
        logger.exception("Frame failed; shutting down")
        raise
    finally:
        pygame.quit()


if __name__ == "__main__":
    run()
