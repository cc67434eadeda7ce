"""
Named period shortcuts (this_year, tomorrow, last_hour, ...).

Every shortcut is a fixed (unit, periods, include_current) triple.
"""

from dataclasses import dataclass
from typing import Dict

from .exceptions import UnknownShortcut
from .models import Unit


@dataclass(frozen=True)
class Shortcut:
    """A named, fixed call of the period calculator."""
    name: str
    unit: Unit
    periods: int
    include_current: bool


# (prefix, periods, include_current) per shortcut family
_FAMILIES = (
    ("this", 0, True),
    ("next", 1, False),
    ("last", -1, False),
)

# Day shortcuts read better with their own names
_DAY_NAMES = {"this": "today", "next": "tomorrow", "last": "yesterday"}


def _build_shortcuts() -> Dict[str, Shortcut]:
    shortcuts: Dict[str, Shortcut] = {}

    for prefix, periods, include_current in _FAMILIES:
        for unit in reversed(list(Unit)):
            if unit is Unit.DAY:
                name = _DAY_NAMES[prefix]
            else:
                name = f"{prefix}_{unit.value}"
            shortcuts[name] = Shortcut(
                name=name,
                unit=unit,
                periods=periods,
                include_current=include_current,
            )

    return shortcuts


SHORTCUTS: Dict[str, Shortcut] = _build_shortcuts()


def get_shortcut(name: str) -> Shortcut:
    """
    Look up a shortcut by name.

    Raises:
        UnknownShortcut: If no shortcut has that name
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return SHORTCUTS[key]
    except KeyError:
        raise UnknownShortcut(
            f"Unknown shortcut {name!r}. Available: {', '.join(SHORTCUTS)}"
        ) from None
