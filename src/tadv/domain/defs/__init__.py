"""Domain definition exports."""

from .enemy_def import EnemyDef
from .level_def import DEFAULT_PLAYER_DAMAGE, DEFAULT_PLAYER_HEALTH, LevelDef
from .location_def import LocationDef

__all__ = [
    "DEFAULT_PLAYER_DAMAGE",
    "DEFAULT_PLAYER_HEALTH",
    "EnemyDef",
    "LevelDef",
    "LocationDef",
]
