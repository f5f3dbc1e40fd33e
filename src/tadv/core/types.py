"""Shared type aliases for the core and domain layers."""
from typing import Literal

SessionOutcome = Literal["victory", "quit", "defeat"]
EncounterOutcome = Literal["victory", "fled", "defeat"]
CombatAction = Literal["attack", "flee"]
CommandKind = Literal["move", "inventory", "quit", "invalid"]

__all__ = ["CombatAction", "CommandKind", "EncounterOutcome", "SessionOutcome"]
