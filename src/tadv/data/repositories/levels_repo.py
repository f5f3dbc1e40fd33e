"""Repository for level bootstrap settings."""
from __future__ import annotations

from typing import Dict

from tadv.data.errors import DataReferenceError, DataValidationError
from tadv.data.repositories.base import RepositoryBase
from tadv.data.repositories.locations_repo import LocationsRepository
from tadv.domain.defs import LevelDef

_LEVEL_FIELDS = {
    "name",
    "start_location",
    "weapon_item",
    "player_health",
    "player_damage",
    "welcome_text",
}


class LevelsRepository(RepositoryBase[LevelDef]):
    """Loads level settings and checks their start location exists."""

    def __init__(self, *, locations_repo: LocationsRepository, base_path=None) -> None:
        super().__init__("levels.json", base_path)
        self._locations_repo = locations_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, LevelDef]:
        levels: Dict[str, LevelDef] = {}
        for level_id, payload in raw.items():
            context = f"level '{level_id}'"
            mapping = self._require_mapping(payload, context)
            self._assert_exact_fields(mapping, _LEVEL_FIELDS, context)

            start_location = self._require_str(mapping["start_location"], f"{context} start_location")
            try:
                self._locations_repo.get(start_location)
            except KeyError as exc:
                raise DataReferenceError(f"{context} start_location", start_location) from exc

            weapon_item = self._require_str(mapping["weapon_item"], f"{context} weapon_item")
            if not weapon_item.strip():
                raise DataValidationError(f"{context} weapon_item", "must not be empty.")
            player_health = self._require_int(mapping["player_health"], f"{context} player_health")
            if player_health <= 0:
                raise DataValidationError(f"{context} player_health", "must be > 0.")
            player_damage = self._require_int(mapping["player_damage"], f"{context} player_damage")
            if player_damage < 0:
                raise DataValidationError(f"{context} player_damage", "must be >= 0.")

            levels[level_id] = LevelDef(
                id=level_id,
                name=self._require_str(mapping["name"], f"{context} name"),
                start_location=start_location,
                weapon_item=weapon_item,
                player_health=player_health,
                player_damage=player_damage,
                welcome_text=self._require_str(mapping["welcome_text"], f"{context} welcome_text"),
            )
        return levels
