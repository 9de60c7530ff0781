"""Exceptions raised by the game core."""


class ReflexGameError(Exception):
    """Base class for game errors."""


class RoundGenerationError(ReflexGameError):
    """Raised when a round cannot be built with distinct options."""
