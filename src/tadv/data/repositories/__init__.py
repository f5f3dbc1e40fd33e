"""Repository exports."""

from .levels_repo import LevelsRepository
from .locations_repo import LocationsRepository

__all__ = [
    "LevelsRepository",
    "LocationsRepository",
]
