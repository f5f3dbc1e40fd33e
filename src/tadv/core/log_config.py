"""Logging setup for the console application."""
from __future__ import annotations

import logging
import os

_DEFAULT_LEVEL = "WARNING"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as ``debug`` to a logging level, defaulting to WARNING."""
    if not value:
        return logging.WARNING
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from TADV_LOG_LEVEL unless a level is given."""
    raw_level = level if level is not None else os.getenv("TADV_LOG_LEVEL", _DEFAULT_LEVEL)
    logging.basicConfig(level=resolve_log_level(raw_level), format=_FORMAT)
