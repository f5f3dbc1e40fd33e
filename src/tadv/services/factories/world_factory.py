"""Factory for building the runtime location graph from definitions."""
from __future__ import annotations

from typing import Iterable

from tadv.domain.defs import LocationDef
from tadv.domain.entities import Enemy
from tadv.domain.world import Location, LocationGraph
from tadv.services.errors import FactoryError


def create_location(location_def: LocationDef) -> Location:
    """Instantiate a fresh location (own item list, own enemy) from its definition."""
    if location_def.is_ending and location_def.enemy is not None:
        raise FactoryError(f"Ending location '{location_def.id}' must not have an enemy.")
    enemy = None
    if location_def.enemy is not None:
        enemy = Enemy(
            name=location_def.enemy.name,
            health=location_def.enemy.health,
            damage=location_def.enemy.damage,
        )
    return Location(
        id=location_def.id,
        name=location_def.name,
        description=location_def.description,
        items=list(location_def.items),
        is_ending=location_def.is_ending,
        enemy=enemy,
    )


def create_location_graph(location_defs: Iterable[LocationDef]) -> LocationGraph:
    """Build a graph in two passes so edges may point at any node, including back-edges."""
    defs = list(location_defs)
    graph = LocationGraph()
    for location_def in defs:
        try:
            graph.add(create_location(location_def))
        except ValueError as exc:
            raise FactoryError(str(exc)) from exc
    for location_def in defs:
        for to_id in location_def.connections:
            if to_id not in graph:
                raise FactoryError(
                    f"Location '{location_def.id}' connects to unknown location '{to_id}'."
                )
            graph.connect(location_def.id, to_id)
    return graph
