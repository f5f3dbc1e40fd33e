"""Runtime entity exports."""

from .enemy import Enemy
from .player import Player

__all__ = [
    "Enemy",
    "Player",
]
