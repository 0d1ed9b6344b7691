"""Logging setup for the board engine, level stores and CLI."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stderr handler on the root logger.

    Board construction logs cell counts and bounds at DEBUG. The service logs
    each served or verified level at INFO and authoring errors at ERROR, so
    WARNING keeps CLI output limited to the JSON payload.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def parse_log_level(name: str, default: int = logging.INFO) -> int:
    """Map ``"debug"``/``"INFO"``/``"20"`` to a logging level, else ``default``."""

    name = name.strip()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a ``crossboard`` logger, configuring defaults on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossboard")
