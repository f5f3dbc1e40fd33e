"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime world or player cannot be created."""


class EncounterError(Exception):
    """Raised when a combat action is applied to a finished or empty encounter."""
