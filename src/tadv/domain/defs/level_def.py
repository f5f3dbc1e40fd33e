"""Level definition structures."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PLAYER_HEALTH = 100
DEFAULT_PLAYER_DAMAGE = 20


@dataclass(frozen=True, slots=True)
class LevelDef:
    """Bootstrap settings for a playable level."""

    id: str
    name: str
    start_location: str
    weapon_item: str
    player_health: int = DEFAULT_PLAYER_HEALTH
    player_damage: int = DEFAULT_PLAYER_DAMAGE
    welcome_text: str = "Welcome to the Adventure Game!"
