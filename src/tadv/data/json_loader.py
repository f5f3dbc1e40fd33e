"""Read a definition file into plain JSON values."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import DataLoadError

logger = logging.getLogger(__name__)


def load_json(path: Path) -> object:
    """Return the parsed content of ``path``; every failure becomes a DataLoadError."""
    logger.debug("Loading definitions from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(path, "Definition file not found") from exc
    except OSError as exc:
        raise DataLoadError(path, f"Unable to read definition file ({exc.strerror})") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(path, f"Invalid JSON at line {exc.lineno} column {exc.colno}") from exc
