"""Console-driven UI loops for the text adventure."""
from __future__ import annotations

import logging
from typing import Dict, List

from tadv.core.log_config import configure_logging
from tadv.core.types import EncounterOutcome, SessionOutcome
from tadv.data.errors import DataError, DataLoadError, DataReferenceError, DataValidationError
from tadv.data.repositories import LevelsRepository, LocationsRepository
from tadv.domain.state import GameSession
from tadv.presentation.cli.config import load_config
from tadv.presentation.cli.render import (
    clear_screen,
    format_encounter_status,
    format_inventory,
    format_navigation_menu,
    render_lines,
    render_location,
    render_menu,
)
from tadv.services.combat_service import (
    AttackResolvedEvent,
    CombatEvent,
    CombatService,
    CombatantDefeatedEvent,
    DefenselessEvent,
    EncounterResolvedEvent,
    EncounterStartedEvent,
    FledEvent,
)
from tadv.services.errors import FactoryError
from tadv.services.exploration_service import (
    ExplorationService,
    ItemPickedUpEvent,
    LocationView,
    SessionResult,
)

logger = logging.getLogger(__name__)

_CONTINUE_PROMPT = "Press Enter to continue..."
_VICTORY_MESSAGE = "\nCongratulations! You've reached the end of your adventure!"
_FAREWELL_MESSAGE = "Thanks for playing!"

EXIT_LOAD_FAILED = 1
EXIT_STATUS_BY_OUTCOME: Dict[SessionOutcome, int] = {"victory": 0, "quit": 0, "defeat": 2}


def main() -> int:
    """Start the interactive CLI session and return a process exit status.

    0 for victory or quit, 2 for defeat, 1 when the level cannot be loaded.
    """
    configure_logging()
    config = load_config()
    level_id = str(config["level_id"])
    exploration_service = _build_exploration_service()
    combat_service = CombatService()
    try:
        welcome_text = exploration_service.get_welcome_text(level_id)
        session = exploration_service.start_session(level_id)
    except (DataError, FactoryError) as exc:
        message = _describe_load_failure(exc)
        logger.error("Unable to load level '%s': %s", level_id, message)
        print(f"Unable to start the game: {message}")
        return EXIT_LOAD_FAILED

    try:
        print(welcome_text)
        _pause("Press Enter to begin...")
        result = run_session(
            session,
            exploration_service,
            combat_service,
            clear=bool(config["clear_screen"]),
        )
    except (KeyboardInterrupt, EOFError):
        print(f"\n{_FAREWELL_MESSAGE}")
        result = exploration_service.finish(session, "quit")
    return EXIT_STATUS_BY_OUTCOME[result.outcome]


def _describe_load_failure(exc: Exception) -> str:
    if isinstance(exc, DataLoadError):
        return f"{exc.reason} ({exc.path})"
    if isinstance(exc, DataValidationError):
        return f"bad level data: {exc.context} {exc.problem}"
    if isinstance(exc, DataReferenceError):
        return f"bad level data: {exc.context} names unknown location '{exc.missing_id}'"
    return str(exc)


def _build_exploration_service() -> ExplorationService:
    """Construct the ExplorationService with concrete repositories."""
    locations_repo = LocationsRepository()
    levels_repo = LevelsRepository(locations_repo=locations_repo)
    return ExplorationService(locations_repo=locations_repo, levels_repo=levels_repo)


def run_session(
    session: GameSession,
    exploration_service: ExplorationService,
    combat_service: CombatService,
    *,
    clear: bool = False,
) -> SessionResult:
    """Drive the exploration loop until victory, quit or defeat.

    Each pass handles one location; moving along an exit simply updates the
    session and starts the next pass, so long or cyclic walks never deepen
    the call stack.
    """
    while True:
        view = exploration_service.get_location_view(session)
        if view.is_ending:
            _show_location(view, clear=clear)
            print(_VICTORY_MESSAGE)
            return exploration_service.finish(session, "victory")
        outcome = _explore_location(session, exploration_service, combat_service, clear=clear)
        if outcome is not None:
            return exploration_service.finish(session, outcome)


def _explore_location(
    session: GameSession,
    exploration_service: ExplorationService,
    combat_service: CombatService,
    *,
    clear: bool,
) -> SessionOutcome | None:
    """Run the per-location turn loop; None means the player moved on."""
    while True:
        _show_location(exploration_service.get_location_view(session), clear=clear)
        if _run_encounter(session, combat_service) == "defeat":
            return "defeat"
        _offer_items(session, exploration_service)

        exit_count = len(session.current_location.connections)
        render_lines(format_navigation_menu(exit_count))
        command = exploration_service.parse_command(input("\nEnter your choice: "), exit_count)
        if command.kind == "quit":
            print(_FAREWELL_MESSAGE)
            return "quit"
        if command.kind == "inventory":
            render_lines(format_inventory(exploration_service.inventory_items(session)))
            _pause(f"\n{_CONTINUE_PROMPT}")
            continue
        if command.kind == "move" and command.exit_index is not None:
            exploration_service.travel(session, command.exit_index)
            return None
        _pause(f"Invalid choice. {_CONTINUE_PROMPT}")


def _show_location(view: LocationView, *, clear: bool) -> None:
    if clear:
        clear_screen()
    render_location(view)


def _offer_items(session: GameSession, exploration_service: ExplorationService) -> None:
    """Offer every loose item as one batch; there is no partial pickup."""
    if not session.current_location.items:
        return
    answer = input("\nWould you like to pick up any items? (y/n): ")
    if not exploration_service.wants_pickup(answer):
        return
    for event in exploration_service.pick_up_all_items(session):
        _render_pickup_event(event)


def _render_pickup_event(event: ItemPickedUpEvent) -> None:
    print(f"You picked up: {event.item_name}")


def _run_encounter(session: GameSession, combat_service: CombatService) -> EncounterOutcome | None:
    """Fight the enemy at the current location, if one is still alive."""
    started = combat_service.start_encounter(session)
    if started is None:
        return None
    encounter, events = started
    _render_combat_events(events)

    if combat_service.is_defenseless(encounter):
        _render_combat_events(combat_service.resolve_defenseless(encounter))
        return encounter.outcome

    while not encounter.is_over:
        print(format_encounter_status(combat_service.get_encounter_view(encounter)))
        render_menu("What would you like to do?", ["Attack", "Run away"])
        action = combat_service.parse_action(input("Enter your choice: "))
        if action is None:
            continue
        _render_combat_events(combat_service.apply_action(encounter, action))

    if encounter.outcome == "victory":
        _pause(_CONTINUE_PROMPT)
    return encounter.outcome


def _render_combat_events(events: List[CombatEvent]) -> None:
    for event in events:
        if isinstance(event, EncounterStartedEvent):
            print(f"\nA {event.enemy_name} appears!")
        elif isinstance(event, DefenselessEvent):
            print("You have no weapon to defend yourself!")
            print(f"The {event.enemy_name} attacks you, and you're defenseless.")
        elif isinstance(event, AttackResolvedEvent):
            if event.by_player:
                print(f"You hit the {event.target_name} for {event.damage} damage!")
            else:
                print(f"The {event.attacker_name} hits you for {event.damage} damage!")
        elif isinstance(event, FledEvent):
            print(f"You run away from the {event.enemy_name}!")
        elif isinstance(event, CombatantDefeatedEvent):
            continue
        elif isinstance(event, EncounterResolvedEvent):
            if event.outcome == "victory":
                print(f"\nYou defeated the {event.enemy_name}!")
            elif event.outcome == "defeat":
                print(f"\nGame Over! You were defeated by the {event.enemy_name}.")
        else:
            print(f"- {event}")


def _pause(prompt: str) -> None:
    input(prompt)
