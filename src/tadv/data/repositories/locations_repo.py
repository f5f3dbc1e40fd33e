"""Repository for location definitions."""
from __future__ import annotations

from typing import Dict

from tadv.data.errors import DataReferenceError, DataValidationError
from tadv.data.repositories.base import RepositoryBase
from tadv.domain.defs import EnemyDef, LocationDef

_LOCATION_FIELDS = {"name", "description", "is_ending", "items", "connections", "enemy"}
_ENEMY_FIELDS = {"name", "health", "damage"}


class LocationsRepository(RepositoryBase[LocationDef]):
    """Loads and validates location definitions and their edges."""

    def __init__(self, base_path=None) -> None:
        super().__init__("locations.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, LocationDef]:
        staged: Dict[str, dict[str, object]] = {}
        for location_id, payload in raw.items():
            if not isinstance(location_id, str) or not location_id.strip():
                raise DataValidationError(f"location {location_id!r}", "id must be a non-empty string.")
            staged[location_id] = self._require_mapping(payload, f"location '{location_id}'")

        definitions: Dict[str, LocationDef] = {}
        for location_id, mapping in staged.items():
            context = f"location '{location_id}'"
            self._assert_exact_fields(mapping, _LOCATION_FIELDS, context)

            name = self._require_str(mapping["name"], f"{context} name").strip()
            if not name:
                raise DataValidationError(f"{context} name", "must not be empty.")
            description = self._require_str(mapping["description"], f"{context} description")
            is_ending = self._require_bool(mapping["is_ending"], f"{context} is_ending")
            items = tuple(self._require_str_list(mapping["items"], f"{context} items"))

            connections = tuple(
                to_id.strip()
                for to_id in self._require_str_list(mapping["connections"], f"{context} connections")
            )
            for to_id in connections:
                if to_id not in staged:
                    raise DataReferenceError(f"{context} connections", to_id)

            enemy = self._parse_enemy(mapping["enemy"], context)
            if is_ending and enemy is not None:
                raise DataValidationError(context, "is an ending and must not define an enemy.")

            definitions[location_id] = LocationDef(
                id=location_id,
                name=name,
                description=description,
                connections=connections,
                items=items,
                is_ending=is_ending,
                enemy=enemy,
            )
        return definitions

    def _parse_enemy(self, value: object, context: str) -> EnemyDef | None:
        if value is None:
            return None
        enemy_context = f"{context} enemy"
        enemy_map = self._require_mapping(value, enemy_context)
        self._assert_exact_fields(enemy_map, _ENEMY_FIELDS, enemy_context)
        name = self._require_str(enemy_map["name"], f"{enemy_context} name")
        health = self._require_int(enemy_map["health"], f"{enemy_context} health")
        damage = self._require_int(enemy_map["damage"], f"{enemy_context} damage")
        if health <= 0:
            raise DataValidationError(f"{enemy_context} health", "must be > 0.")
        if damage < 0:
            raise DataValidationError(f"{enemy_context} damage", "must be >= 0.")
        return EnemyDef(name=name, health=health, damage=damage)
