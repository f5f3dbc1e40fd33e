"""Combat service resolving deterministic one-on-one encounters."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from tadv.core.types import CombatAction, EncounterOutcome
from tadv.domain.entities import Enemy, Player
from tadv.domain.state import GameSession
from tadv.services.errors import EncounterError

logger = logging.getLogger(__name__)

ATTACK_TOKEN = "1"
FLEE_TOKEN = "2"


@dataclass(slots=True)
class EncounterState:
    """Tracks an ongoing encounter between the player and a location's enemy."""

    location_id: str
    player: Player
    enemy: Enemy
    exchanges: int = 0
    outcome: EncounterOutcome | None = None

    @property
    def is_over(self) -> bool:
        return self.outcome is not None


@dataclass(slots=True)
class EncounterView:
    """Health snapshot shown before each turn; values never go below zero."""

    player_health: int
    enemy_name: str
    enemy_health: int


@dataclass(slots=True)
class CombatEvent:
    """Base combat event."""


@dataclass(slots=True)
class EncounterStartedEvent(CombatEvent):
    enemy_name: str


@dataclass(slots=True)
class DefenselessEvent(CombatEvent):
    """The player met an enemy without the weapon item."""

    enemy_name: str


@dataclass(slots=True)
class AttackResolvedEvent(CombatEvent):
    attacker_name: str
    target_name: str
    damage: int
    by_player: bool


@dataclass(slots=True)
class FledEvent(CombatEvent):
    enemy_name: str


@dataclass(slots=True)
class CombatantDefeatedEvent(CombatEvent):
    combatant_name: str
    is_player: bool


@dataclass(slots=True)
class EncounterResolvedEvent(CombatEvent):
    outcome: EncounterOutcome
    enemy_name: str


class CombatService:
    """Deterministic encounter orchestrator: attack, flee, or lose when unarmed.

    Turns alternate strictly. The player strikes for
    :meth:`Player.effective_damage`; a surviving enemy always answers with its
    full fixed damage. There is no randomness anywhere in the exchange.
    """

    # -----------------------
    # Encounter Lifecycle
    # -----------------------
    def start_encounter(self, session: GameSession) -> tuple[EncounterState, List[CombatEvent]] | None:
        """Open an encounter if the current location holds a living enemy."""
        location = session.current_location
        if not location.has_living_enemy:
            return None
        enemy = location.enemy
        assert enemy is not None
        encounter = EncounterState(location_id=location.id, player=session.player, enemy=enemy)
        logger.debug("Encounter with '%s' at '%s'", enemy.name, location.id)
        return encounter, [EncounterStartedEvent(enemy_name=enemy.name)]

    @staticmethod
    def is_defenseless(encounter: EncounterState) -> bool:
        return not encounter.player.has_weapon()

    def resolve_defenseless(self, encounter: EncounterState) -> List[CombatEvent]:
        """End the encounter in defeat without a single exchange."""
        self._ensure_active(encounter)
        if not self.is_defenseless(encounter):
            raise EncounterError("The player is armed; the encounter must be fought.")
        encounter.player.health = 0
        encounter.outcome = "defeat"
        logger.info("Defenseless against '%s'", encounter.enemy.name)
        return [
            DefenselessEvent(enemy_name=encounter.enemy.name),
            CombatantDefeatedEvent(combatant_name="You", is_player=True),
            EncounterResolvedEvent(outcome="defeat", enemy_name=encounter.enemy.name),
        ]

    def get_encounter_view(self, encounter: EncounterState) -> EncounterView:
        return EncounterView(
            player_health=max(encounter.player.health, 0),
            enemy_name=encounter.enemy.name,
            enemy_health=max(encounter.enemy.health, 0),
        )

    # -----------------------
    # Player Actions
    # -----------------------
    @staticmethod
    def parse_action(raw: str) -> CombatAction | None:
        """Map a menu answer to an action; anything unrecognised is None."""
        choice = raw.strip()
        if choice == ATTACK_TOKEN:
            return "attack"
        if choice == FLEE_TOKEN:
            return "flee"
        return None

    def apply_action(self, encounter: EncounterState, action: CombatAction) -> List[CombatEvent]:
        if action == "attack":
            return self.attack(encounter)
        if action == "flee":
            return self.flee(encounter)
        raise ValueError(f"Unknown combat action: {action}")

    def attack(self, encounter: EncounterState) -> List[CombatEvent]:
        """Resolve one exchange: the player hits, then a surviving enemy hits back."""
        self._ensure_active(encounter)
        player = encounter.player
        enemy = encounter.enemy

        damage = player.effective_damage()
        enemy.take_damage(damage)
        encounter.exchanges += 1
        events: List[CombatEvent] = [
            AttackResolvedEvent(attacker_name="You", target_name=enemy.name, damage=damage, by_player=True)
        ]
        if enemy.is_alive:
            player.take_damage(enemy.damage)
            events.append(
                AttackResolvedEvent(
                    attacker_name=enemy.name, target_name="You", damage=enemy.damage, by_player=False
                )
            )
        logger.debug(
            "Exchange %d vs '%s': player %d, enemy %d",
            encounter.exchanges,
            enemy.name,
            player.health,
            enemy.health,
        )

        if not player.is_alive:
            encounter.outcome = "defeat"
            events.append(CombatantDefeatedEvent(combatant_name="You", is_player=True))
            events.append(EncounterResolvedEvent(outcome="defeat", enemy_name=enemy.name))
        elif not enemy.is_alive:
            encounter.outcome = "victory"
            events.append(CombatantDefeatedEvent(combatant_name=enemy.name, is_player=False))
            events.append(EncounterResolvedEvent(outcome="victory", enemy_name=enemy.name))
        return events

    def flee(self, encounter: EncounterState) -> List[CombatEvent]:
        """Leave the encounter; the enemy keeps its health and will be met again."""
        self._ensure_active(encounter)
        encounter.outcome = "fled"
        return [
            FledEvent(enemy_name=encounter.enemy.name),
            EncounterResolvedEvent(outcome="fled", enemy_name=encounter.enemy.name),
        ]

    @staticmethod
    def _ensure_active(encounter: EncounterState) -> None:
        if encounter.is_over:
            raise EncounterError(f"Encounter already resolved ({encounter.outcome}).")
