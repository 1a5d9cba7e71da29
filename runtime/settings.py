"""Viewer settings with optional YAML overrides.

Defaults live on :class:`RenderSettings`. ``load_settings`` layers
``configs/default.yaml`` and then an optional user file on top, top-level
keys only. Missing files are skipped; unreadable or malformed ones are
logged and ignored so the viewer always starts.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "default.yaml"


@dataclass
class RenderSettings:
    window_size: Tuple[int, int] = (800, 600)
    fps: int = 60
    fov_degrees: float = 45.0
    move_speed: float = 10.0  # world units per second
    turn_speed: float = 5.0  # radians per second
    background_color: str = "#71c4f5"
    hud_font: str = "Consolas"
    hud_font_size: int = 14
    minimap_size: int = 100
    show_extras: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.window_size = (int(self.window_size[0]), int(self.window_size[1]))
        if not 0.0 < self.fov_degrees < 90.0:
            raise ValueError(f"fov_degrees must be in (0, 90), got {self.fov_degrees!r}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps!r}")

    @property
    def view_angle(self) -> float:
        """Field of view in radians, as the camera expects it."""

        return math.radians(self.fov_degrees)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping at the top level", path)
        return {}
    return data


def settings_from_mapping(data: Mapping[str, Any]) -> RenderSettings:
    """Build settings from a flat mapping, warning about unknown keys."""

    known = {field.name for field in fields(RenderSettings)}
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r", key)
            continue
        kwargs[key] = value
    return RenderSettings(**kwargs)


def load_settings(path: Optional[Union[str, Path]] = None) -> RenderSettings:
    merged: Dict[str, Any] = {}
    if DEFAULT_CONFIG_PATH.exists():
        merged.update(_safe_load_yaml(DEFAULT_CONFIG_PATH))
    if path is not None:
        override = Path(path)
        if override.exists():
            merged.update(_safe_load_yaml(override))
        else:
            logger.warning("Settings file %s does not exist, using defaults", override)
    return settings_from_mapping(merged)
