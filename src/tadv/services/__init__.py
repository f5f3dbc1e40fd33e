"""Service layer exports."""

from .combat_service import CombatService, EncounterState
from .errors import EncounterError, FactoryError
from .exploration_service import ExplorationService, LocationView, SessionResult

__all__ = [
    "CombatService",
    "EncounterError",
    "EncounterState",
    "ExplorationService",
    "FactoryError",
    "LocationView",
    "SessionResult",
]
