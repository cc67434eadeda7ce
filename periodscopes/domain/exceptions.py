"""
Domain-specific exception hierarchy for periodscopes.
"""


class PeriodScopeError(Exception):
    """Base class for all library-level errors."""


class InvalidUnit(PeriodScopeError, ValueError):
    """Raised when a period unit is not one of the recognised units."""


class UnknownShortcut(PeriodScopeError, KeyError):
    """Raised when a named shortcut does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class ConfigError(PeriodScopeError):
    """Raised when the configuration file cannot be parsed."""
