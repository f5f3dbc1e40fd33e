from __future__ import annotations

from typing import Iterable, List

import pytest

from tadv.data.repositories import LevelsRepository, LocationsRepository
from tadv.domain.defs import EnemyDef, LevelDef, LocationDef
from tadv.domain.state import GameSession
from tadv.services.combat_service import CombatService
from tadv.services.exploration_service import ExplorationService
from tadv.services.factories import create_session


class ScriptedInput:
    """Feeds canned answers to ``input`` and remembers every prompt shown."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self._answers.pop(0)

    @property
    def remaining(self) -> List[str]:
        return list(self._answers)


@pytest.fixture(autouse=True)
def _no_debug(monkeypatch) -> None:
    monkeypatch.delenv("TADV_DEBUG", raising=False)
    monkeypatch.delenv("TADV_DEFINITIONS", raising=False)


@pytest.fixture
def scripted_input(monkeypatch):
    def _install(*answers: str) -> ScriptedInput:
        fake = ScriptedInput(answers)
        monkeypatch.setattr("builtins.input", fake)
        return fake

    return _install


@pytest.fixture
def exploration_service() -> ExplorationService:
    locations_repo = LocationsRepository()
    levels_repo = LevelsRepository(locations_repo=locations_repo)
    return ExplorationService(locations_repo=locations_repo, levels_repo=levels_repo)


@pytest.fixture
def combat_service() -> CombatService:
    return CombatService()


@pytest.fixture
def session(exploration_service: ExplorationService) -> GameSession:
    return exploration_service.start_session()


def make_session(
    locations: Iterable[LocationDef],
    *,
    start: str,
    weapon_item: str = "Sword",
    player_health: int = 100,
    player_damage: int = 20,
) -> GameSession:
    level_def = LevelDef(
        id="test",
        name="Test Level",
        start_location=start,
        weapon_item=weapon_item,
        player_health=player_health,
        player_damage=player_damage,
    )
    return create_session(level_def, locations)


def armory_and_lair(enemy: EnemyDef) -> List[LocationDef]:
    return [
        LocationDef(id="armory", name="Armory", description="Racks of blades.", connections=("lair",), items=("Sword",)),
        LocationDef(id="lair", name="Lair", description="It smells.", connections=("armory",), enemy=enemy),
    ]


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def lair_factory():
    return armory_and_lair
