"""Logging bootstrap for the viewer entry point.

Modules obtain their logger with ``logging.getLogger(__name__)``; only the
entry point configures handlers, and only when nothing else has.
"""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal ``basicConfig`` once; no-op if the root logger has handlers."""

    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
