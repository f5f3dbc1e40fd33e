"""Data-layer exceptions carrying the offending file or definition path."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """A definition file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class DataValidationError(DataError):
    """A definition has the wrong shape.

    ``context`` locates the value, e.g. ``location 'forest' enemy health``.
    """

    def __init__(self, context: str, problem: str) -> None:
        super().__init__(f"{context} {problem}")
        self.context = context
        self.problem = problem


class DataReferenceError(DataError):
    """A definition names a location that does not exist."""

    def __init__(self, context: str, missing_id: str) -> None:
        super().__init__(f"{context} references unknown location '{missing_id}'.")
        self.context = context
        self.missing_id = missing_id
