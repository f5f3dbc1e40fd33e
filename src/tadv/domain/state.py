"""Domain-level session state."""
from __future__ import annotations

from dataclasses import dataclass

from tadv.domain.entities import Player
from tadv.domain.world import Location, LocationGraph


@dataclass
class GameSession:
    """The one mutable game state: where the player is and what they carry.

    Navigation reassigns ``current_location_id``; no travel history is kept.
    """

    level_id: str
    graph: LocationGraph
    player: Player
    current_location_id: str

    @property
    def current_location(self) -> Location:
        return self.graph.get(self.current_location_id)
