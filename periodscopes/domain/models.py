"""
Domain models for period units and time ranges.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from pendulum import DateTime

from .exceptions import InvalidUnit


class Unit(str, Enum):
    """Calendar unit a period is measured in."""
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: Union["Unit", str]) -> "Unit":
        """
        Resolve a unit name (case-insensitive) or Unit member.

        Raises:
            InvalidUnit: If the value is not a recognised unit
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        accepted = ", ".join(unit.value for unit in cls)
        raise InvalidUnit(f"Invalid period unit {value!r}, expected one of: {accepted}")


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable, inclusive time range.

    Invariant: start must not be after end.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Start time {self.start} must not be after end time {self.end}")

    def as_tuple(self) -> Tuple[DateTime, DateTime]:
        """Return (start, end), the shape a BETWEEN filter binds."""
        return self.start, self.end

    def contains(self, instant: DateTime) -> bool:
        """Check if an instant falls inside the range, both ends included."""
        return self.start <= instant <= self.end

    def __str__(self) -> str:
        return (
            f"{self.start.format('YYYY-MM-DD HH:mm:ss')} - "
            f"{self.end.format('YYYY-MM-DD HH:mm:ss')} ({self.start.timezone_name})"
        )
