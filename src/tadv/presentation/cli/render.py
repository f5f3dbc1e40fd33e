"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, List, Sequence

from tadv.services.combat_service import EncounterView
from tadv.services.exploration_service import LocationView

_CLEAR_SEQUENCE = "\033[2J\033[H"


def debug_enabled() -> bool:
    """Return True only when TADV_DEBUG is explicitly set to '1'."""
    return os.getenv("TADV_DEBUG") == "1"


def clear_screen() -> None:
    """Clear the terminal before a fresh location render."""
    if os.name == "nt":
        os.system("cls")
    else:
        print(_CLEAR_SEQUENCE, end="", flush=True)


def format_heading(title: str) -> str:
    return f"\n=== {title} ==="


def format_location(view: LocationView) -> List[str]:
    """Return the lines describing a location, its loose items and its exits.

    The result depends only on ``view``, so rendering is repeatable.
    """
    title = f"{view.name} [{view.id}]" if debug_enabled() else view.name
    lines = [format_heading(title), view.description]
    if view.items:
        lines.append("\nYou see:")
        lines.extend(f"- {item}" for item in view.items)
    lines.append("\nPossible exits:")
    lines.extend(f"{exit_view.index}. Go to {exit_view.label}" for exit_view in view.exits)
    return lines


def render_location(view: LocationView) -> None:
    render_lines(format_location(view))


def format_inventory(items: Sequence[str]) -> List[str]:
    lines = ["\nInventory:"]
    if not items:
        lines.append("Empty")
        return lines
    lines.extend(f"- {item}" for item in items)
    return lines


def format_encounter_status(view: EncounterView) -> str:
    return f"\nYour health: {view.player_health} | {view.enemy_name}'s health: {view.enemy_health}"


def format_navigation_menu(exit_count: int) -> List[str]:
    lines = ["\nWhat would you like to do?"]
    if exit_count:
        lines.append(f"1-{exit_count}. Move to a new location")
    lines.append("i. Check inventory")
    lines.append("q. Quit game")
    return lines


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a prompt title with numbered options."""
    print(f"\n{title}")
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)
