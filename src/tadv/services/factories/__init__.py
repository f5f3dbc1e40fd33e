"""Factory helpers for runtime entities."""

from .session_factory import create_player, create_session
from .world_factory import create_location, create_location_graph

__all__ = [
    "create_location",
    "create_location_graph",
    "create_player",
    "create_session",
]
