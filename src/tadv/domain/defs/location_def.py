"""Location definition data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .enemy_def import EnemyDef


@dataclass(frozen=True, slots=True)
class LocationDef:
    """Describes a traversable location and its outgoing connections."""

    id: str
    name: str
    description: str
    connections: Tuple[str, ...] = ()  # destination ids, in exit order
    items: Tuple[str, ...] = ()
    is_ending: bool = False
    enemy: EnemyDef | None = None
