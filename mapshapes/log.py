"""Logging setup for applications embedding mapshapes."""

from __future__ import annotations

import logging

from mapshapes.config import get_settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Apply a basic root configuration. No-op if the root logger already has handlers."""
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
