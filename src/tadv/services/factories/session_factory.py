"""Factory for creating players and game sessions from level definitions."""
from __future__ import annotations

from typing import Iterable

from tadv.domain.defs import LevelDef, LocationDef
from tadv.domain.entities import Player
from tadv.domain.state import GameSession
from tadv.services.errors import FactoryError

from .world_factory import create_location_graph


def create_player(level_def: LevelDef) -> Player:
    """Instantiate a player with an empty inventory."""
    return Player(
        weapon_item=level_def.weapon_item,
        health=level_def.player_health,
        base_damage=level_def.player_damage,
    )


def create_session(level_def: LevelDef, location_defs: Iterable[LocationDef]) -> GameSession:
    """Instantiate an independent session placed at the level's start location."""
    graph = create_location_graph(location_defs)
    if level_def.start_location not in graph:
        raise FactoryError(
            f"Level '{level_def.id}' starts at unknown location '{level_def.start_location}'."
        )
    return GameSession(
        level_id=level_def.id,
        graph=graph,
        player=create_player(level_def),
        current_location_id=level_def.start_location,
    )
