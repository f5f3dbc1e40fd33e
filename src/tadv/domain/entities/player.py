"""Player runtime model and the combat-capability rule."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from tadv.domain.defs import DEFAULT_PLAYER_DAMAGE, DEFAULT_PLAYER_HEALTH


@dataclass(slots=True)
class Player:
    """Holds the inventory and health of the adventurer.

    ``weapon_item`` names the single item that enables attacks: without it
    :meth:`effective_damage` is always zero.
    """

    weapon_item: str
    health: int = DEFAULT_PLAYER_HEALTH
    base_damage: int = DEFAULT_PLAYER_DAMAGE
    inventory: List[str] = field(default_factory=list)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def add_item(self, name: str) -> None:
        """Append an item; duplicates are kept and nothing is ever removed."""
        self.inventory.append(name)

    def has_item(self, name: str) -> bool:
        return name in self.inventory

    def has_weapon(self) -> bool:
        return self.has_item(self.weapon_item)

    def effective_damage(self) -> int:
        return self.base_damage if self.has_weapon() else 0

    def take_damage(self, amount: int) -> None:
        self.health -= amount
