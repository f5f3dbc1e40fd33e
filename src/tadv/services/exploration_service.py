"""Application service for exploring the location graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from tadv.core.types import CommandKind, SessionOutcome
from tadv.data.repositories import LevelsRepository, LocationsRepository
from tadv.domain.state import GameSession
from tadv.domain.world import Location
from tadv.services.errors import FactoryError
from tadv.services.factories import create_session

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_ID = "default"
QUIT_TOKENS = ("q", "Q")
INVENTORY_TOKENS = ("i", "I")


@dataclass(slots=True)
class ExitView:
    """Renderable connection to another location (1-based index)."""

    index: int
    destination_id: str
    label: str


@dataclass(slots=True)
class EnemyView:
    name: str
    health: int
    damage: int


@dataclass(slots=True)
class LocationView:
    """Presentation data for the player's current location."""

    id: str
    name: str
    description: str
    items: Tuple[str, ...]
    exits: Tuple[ExitView, ...]
    is_ending: bool
    enemy: EnemyView | None


@dataclass(slots=True)
class NavigationCommand:
    """A parsed navigation prompt answer; ``exit_index`` is 0-based."""

    kind: CommandKind
    exit_index: int | None = None


@dataclass(slots=True)
class ExplorationEvent:
    """Base class for exploration events."""


@dataclass(slots=True)
class ItemPickedUpEvent(ExplorationEvent):
    item_name: str
    location_id: str


@dataclass(slots=True)
class TravelPerformedEvent(ExplorationEvent):
    """Emitted when the player moves between locations."""

    from_location_id: str
    from_location_name: str
    to_location_id: str
    to_location_name: str


@dataclass(slots=True)
class SessionResult:
    """Terminal state of a session, handed back to the caller."""

    outcome: SessionOutcome
    location_id: str
    player_health: int


class ExplorationService:
    """Coordinates session start, location views, pickups and travel."""

    def __init__(
        self,
        locations_repo: LocationsRepository,
        levels_repo: LevelsRepository,
    ) -> None:
        self._locations_repo = locations_repo
        self._levels_repo = levels_repo

    def start_session(self, level_id: str = DEFAULT_LEVEL_ID) -> GameSession:
        """Build a fresh world and player for the given level."""
        try:
            level_def = self._levels_repo.get(level_id)
        except KeyError as exc:
            raise FactoryError(f"Level '{level_id}' not found.") from exc
        session = create_session(level_def, self._locations_repo.all())
        logger.info("Started level '%s' at '%s'", level_def.id, session.current_location_id)
        return session

    def get_welcome_text(self, level_id: str = DEFAULT_LEVEL_ID) -> str:
        try:
            return self._levels_repo.get(level_id).welcome_text
        except KeyError as exc:
            raise FactoryError(f"Level '{level_id}' not found.") from exc

    def get_location_view(self, session: GameSession) -> LocationView:
        """Return the view for the player's current location."""
        return self._build_location_view(session, session.current_location)

    def parse_command(self, raw: str, exit_count: int) -> NavigationCommand:
        """Interpret a navigation answer.

        A non-numeric answer and an out-of-range index are both ``invalid``.
        """
        choice = raw.strip()
        if choice in QUIT_TOKENS:
            return NavigationCommand(kind="quit")
        if choice in INVENTORY_TOKENS:
            return NavigationCommand(kind="inventory")
        try:
            index = int(choice) - 1
        except ValueError:
            return NavigationCommand(kind="invalid")
        if 0 <= index < exit_count:
            return NavigationCommand(kind="move", exit_index=index)
        return NavigationCommand(kind="invalid")

    def travel(self, session: GameSession, exit_index: int) -> TravelPerformedEvent:
        """Move the player along the 0-based exit of the current location."""
        origin = session.current_location
        if not 0 <= exit_index < len(origin.connections):
            raise ValueError(
                f"Exit {exit_index + 1} is not available from '{origin.id}'."
            )
        destination = session.graph.get(origin.connections[exit_index])
        session.current_location_id = destination.id
        logger.debug("Travelled from '%s' to '%s'", origin.id, destination.id)
        return TravelPerformedEvent(
            from_location_id=origin.id,
            from_location_name=origin.name,
            to_location_id=destination.id,
            to_location_name=destination.name,
        )

    @staticmethod
    def wants_pickup(raw: str) -> bool:
        """Only an answer starting with y/Y counts as yes."""
        choice = raw.strip()
        return bool(choice) and choice[0] in ("y", "Y")

    def pick_up_all_items(self, session: GameSession) -> List[ItemPickedUpEvent]:
        """Move every loose item at the current location into the inventory, in order."""
        location = session.current_location
        events: List[ItemPickedUpEvent] = []
        while location.items:
            item_name = location.items.pop(0)
            session.player.add_item(item_name)
            events.append(ItemPickedUpEvent(item_name=item_name, location_id=location.id))
            logger.debug("Picked up '%s' at '%s'", item_name, location.id)
        return events

    @staticmethod
    def inventory_items(session: GameSession) -> Tuple[str, ...]:
        return tuple(session.player.inventory)

    @staticmethod
    def finish(session: GameSession, outcome: SessionOutcome) -> SessionResult:
        """Close out a session with a terminal outcome."""
        result = SessionResult(
            outcome=outcome,
            location_id=session.current_location_id,
            player_health=max(session.player.health, 0),
        )
        logger.info("Session ended: %s at '%s'", outcome, result.location_id)
        return result

    @staticmethod
    def _build_location_view(session: GameSession, location: Location) -> LocationView:
        enemy = None
        if location.has_living_enemy:
            assert location.enemy is not None
            enemy = EnemyView(
                name=location.enemy.name,
                health=location.enemy.health,
                damage=location.enemy.damage,
            )
        return LocationView(
            id=location.id,
            name=location.name,
            description=location.description,
            items=tuple(location.items),
            exits=tuple(
                ExitView(index=idx, destination_id=neighbour.id, label=neighbour.name)
                for idx, neighbour in enumerate(session.graph.connections(location.id), start=1)
            ),
            is_ending=location.is_ending,
            enemy=enemy,
        )
