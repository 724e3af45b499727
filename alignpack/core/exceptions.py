"""Core exceptions."""


class AlignError(Exception):
    """Base class for AlignKit errors."""


class DiffConfigError(AlignError, ValueError):
    """Invalid diff configuration value."""


class IllegalStateError(AlignError, RuntimeError):
    """Operation is not valid in the object's current state."""
