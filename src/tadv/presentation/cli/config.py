"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

_DEFAULT_LEVEL_ID = "default"
_DEFAULT_CLEAR_SCREEN = True

Config = Dict[str, object]


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "TextAdventure"
        return Path.home() / "TextAdventure"
    return Path.home() / ".config" / "tadv"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Config:
    return {"level_id": _DEFAULT_LEVEL_ID, "clear_screen": _DEFAULT_CLEAR_SCREEN}


def _normalize(raw: dict) -> Config:
    level_id = raw.get("level_id")
    if not isinstance(level_id, str) or not level_id.strip():
        level_id = _DEFAULT_LEVEL_ID
    clear_screen = raw.get("clear_screen")
    if not isinstance(clear_screen, bool):
        clear_screen = _DEFAULT_CLEAR_SCREEN
    return {"level_id": level_id.strip(), "clear_screen": clear_screen}


def load_config(path: Path | None = None) -> Config:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)
