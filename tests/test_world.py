import pytest

from tadv.domain.defs import EnemyDef, LocationDef
from tadv.domain.world import Location, LocationGraph
from tadv.services.errors import FactoryError
from tadv.services.factories import create_location_graph


def _graph() -> LocationGraph:
    return create_location_graph(
        [
            LocationDef(id="a", name="A", description="", connections=("b", "c")),
            LocationDef(id="b", name="B", description="", connections=("a",), items=("Coin", "Coin")),
            LocationDef(id="c", name="C", description="", enemy=EnemyDef("Rat", 5, 1)),
        ]
    )


def test_connections_keep_definition_order() -> None:
    graph = _graph()
    assert [loc.id for loc in graph.connections("a")] == ["b", "c"]


def test_edges_are_directed() -> None:
    graph = _graph()
    assert [loc.id for loc in graph.connections("c")] == []
    assert [loc.id for loc in graph.connections("b")] == ["a"]


def test_shared_nodes_are_the_same_object() -> None:
    graph = _graph()
    via_a = graph.connections("a")[0]
    assert via_a is graph.get("b")
    assert graph.connections("b")[0] is graph.get("a")


def test_items_returns_live_list() -> None:
    graph = _graph()
    items = graph.items("b")
    items.pop(0)
    assert graph.get("b").items == ["Coin"]


def test_enemy_lookup() -> None:
    graph = _graph()
    assert graph.enemy("a") is None
    rat = graph.enemy("c")
    assert rat is not None and rat.name == "Rat" and rat.health == 5


def test_each_graph_gets_fresh_state() -> None:
    first = _graph()
    second = _graph()
    first.items("b").clear()
    first.enemy("c").take_damage(10)
    assert second.items("b") == ["Coin", "Coin"]
    assert second.enemy("c").health == 5


def test_unknown_connection_raises_factory_error() -> None:
    with pytest.raises(FactoryError):
        create_location_graph([LocationDef(id="a", name="A", description="", connections=("nowhere",))])


def test_duplicate_location_rejected() -> None:
    graph = LocationGraph()
    graph.add(Location(id="a", name="A", description=""))
    with pytest.raises(ValueError):
        graph.add(Location(id="a", name="Again", description=""))


def test_missing_location_raises_key_error() -> None:
    with pytest.raises(KeyError):
        _graph().get("zzz")


def test_ending_with_enemy_rejected_by_factory() -> None:
    with pytest.raises(FactoryError):
        create_location_graph(
            [LocationDef(id="end", name="End", description="", is_ending=True, enemy=EnemyDef("Boss", 9, 9))]
        )


def test_has_living_enemy_tracks_enemy_health() -> None:
    graph = _graph()
    assert not graph.get("a").has_living_enemy
    cellar = graph.get("c")
    assert cellar.has_living_enemy
    cellar.enemy.take_damage(5)
    assert not cellar.has_living_enemy
