"""Location graph: an arena of locations joined by id-based edges."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from tadv.domain.entities import Enemy


@dataclass(slots=True)
class Location:
    """Runtime location node.

    ``connections`` holds destination ids rather than node references, so a
    location never owns its neighbours and cycles need no special handling.
    """

    id: str
    name: str
    description: str
    connections: List[str] = field(default_factory=list)
    items: List[str] = field(default_factory=list)
    is_ending: bool = False
    enemy: Enemy | None = None

    def add_connection(self, location_id: str) -> None:
        self.connections.append(location_id)

    @property
    def has_living_enemy(self) -> bool:
        return self.enemy is not None and self.enemy.is_alive


class LocationGraph:
    """Directed graph of locations keyed by id."""

    def __init__(self) -> None:
        self._nodes: Dict[str, Location] = {}

    def add(self, location: Location) -> Location:
        if location.id in self._nodes:
            raise ValueError(f"Duplicate location id '{location.id}'.")
        self._nodes[location.id] = location
        return location

    def connect(self, from_id: str, to_id: str) -> None:
        """Add a one-way edge; call twice for a two-way path."""
        if to_id not in self._nodes:
            raise KeyError(to_id)
        self.get(from_id).add_connection(to_id)

    def get(self, location_id: str) -> Location:
        try:
            return self._nodes[location_id]
        except KeyError as exc:
            raise KeyError(location_id) from exc

    def connections(self, location_id: str) -> Tuple[Location, ...]:
        return tuple(self._nodes[to_id] for to_id in self.get(location_id).connections)

    def items(self, location_id: str) -> List[str]:
        """Return the live, mutable item list of a location."""
        return self.get(location_id).items

    def enemy(self, location_id: str) -> Enemy | None:
        return self.get(location_id).enemy

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._nodes
