"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EnemyDef:
    """Fixed stats for the single enemy guarding a location."""

    name: str
    health: int
    damage: int
