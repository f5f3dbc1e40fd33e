import pytest

from tadv.domain.defs import LocationDef
from tadv.services.errors import FactoryError
from tadv.services.exploration_service import ExplorationService, ItemPickedUpEvent


def test_start_session_places_player_at_start(session) -> None:
    assert session.current_location_id == "cave"
    assert session.player.inventory == []
    assert session.player.health == 100
    assert session.player.weapon_item == "Rusty Sword"


def test_unknown_level_raises_factory_error(exploration_service: ExplorationService) -> None:
    with pytest.raises(FactoryError):
        exploration_service.start_session("missing")


def test_sessions_are_independent(exploration_service: ExplorationService) -> None:
    first = exploration_service.start_session()
    second = exploration_service.start_session()
    exploration_service.pick_up_all_items(first)
    exploration_service.travel(first, 0)

    assert second.current_location_id == "cave"
    assert second.current_location.items == ["Rusty Sword"]
    assert second.player.inventory == []


def test_location_view_lists_items_and_exits(exploration_service, session) -> None:
    exploration_service.travel(session, 0)
    view = exploration_service.get_location_view(session)

    assert view.name == "Forest"
    assert view.items == ("Magic Stone",)
    assert [(exit_view.index, exit_view.label) for exit_view in view.exits] == [
        (1, "Cave"),
        (2, "Ancient Ruins"),
    ]
    assert view.enemy is not None and view.enemy.name == "Wild Wolf"
    assert not view.is_ending


def test_location_view_is_repeatable(exploration_service, session) -> None:
    assert exploration_service.get_location_view(session) == exploration_service.get_location_view(session)


@pytest.mark.parametrize(
    ("raw", "kind", "index"),
    [
        ("q", "quit", None),
        ("Q", "quit", None),
        ("i", "inventory", None),
        ("I", "inventory", None),
        ("1", "move", 0),
        (" 2 ", "move", 1),
        ("0", "invalid", None),
        ("3", "invalid", None),
        ("-1", "invalid", None),
        ("north", "invalid", None),
        ("", "invalid", None),
        ("quit", "invalid", None),
    ],
)
def test_parse_command(exploration_service, raw: str, kind: str, index) -> None:
    command = exploration_service.parse_command(raw, exit_count=2)
    assert command.kind == kind
    assert command.exit_index == index


def test_parse_command_with_no_exits(exploration_service) -> None:
    assert exploration_service.parse_command("1", exit_count=0).kind == "invalid"


def test_travel_follows_exit_order(exploration_service, session) -> None:
    event = exploration_service.travel(session, 0)
    assert (event.from_location_id, event.to_location_id) == ("cave", "forest")

    exploration_service.travel(session, 1)
    assert session.current_location_id == "ruins"

    # back along the reverse edge
    exploration_service.travel(session, 0)
    assert session.current_location_id == "forest"


def test_travel_rejects_out_of_range(exploration_service, session) -> None:
    with pytest.raises(ValueError):
        exploration_service.travel(session, 1)
    assert session.current_location_id == "cave"


def test_pick_up_all_items_moves_everything_in_order(exploration_service, session_factory) -> None:
    session = session_factory(
        [LocationDef(id="hall", name="Hall", description="", items=("Key", "Lamp", "Key"))],
        start="hall",
    )
    events = exploration_service.pick_up_all_items(session)

    assert [event.item_name for event in events] == ["Key", "Lamp", "Key"]
    assert all(isinstance(event, ItemPickedUpEvent) for event in events)
    assert session.player.inventory == ["Key", "Lamp", "Key"]
    assert session.current_location.items == []
    assert exploration_service.pick_up_all_items(session) == []


def test_items_do_not_come_back_after_revisit(exploration_service, session) -> None:
    exploration_service.pick_up_all_items(session)
    exploration_service.travel(session, 0)
    exploration_service.travel(session, 0)
    assert session.current_location_id == "cave"
    assert exploration_service.get_location_view(session).items == ()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("y", True), ("Y", True), (" yes", True), ("n", False), ("", False), ("maybe", False)],
)
def test_wants_pickup(raw: str, expected: bool) -> None:
    assert ExplorationService.wants_pickup(raw) is expected


def test_finish_clamps_health(session) -> None:
    session.player.health = -25
    result = ExplorationService.finish(session, "defeat")
    assert result.outcome == "defeat"
    assert result.player_health == 0
    assert result.location_id == "cave"


def test_session_factory_rejects_unknown_start(session_factory) -> None:
    with pytest.raises(FactoryError):
        session_factory([LocationDef(id="hall", name="Hall", description="")], start="attic")
