"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Enemy:
    """An enemy attached to a location; health only ever decreases."""

    name: str
    health: int
    damage: int

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        self.health -= amount
