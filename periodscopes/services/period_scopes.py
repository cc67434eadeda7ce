"""
Query-facing period filters.

``PeriodScopes`` turns a period request into an inclusive range filter on a
query object. It never modifies the query class itself: callers hand the
query in and receive whatever the query's ``where_between`` returns. The
query dependency is described by a small protocol so any builder, or the
in-memory adapter, can be plugged in.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Union

from pendulum import DateTime

from ..domain.models import TimeRange, Unit
from ..domain.period_calculator import PeriodRangeCalculator
from ..domain.shortcuts import get_shortcut

DEFAULT_COLUMN = "created_at"


class RangeFilterable(Protocol):
    """Protocol describing the query behaviour needed by the scopes."""

    def where_between(self, column: str, values: Sequence[DateTime]) -> Any:
        """Return the query restricted to column BETWEEN values[0] AND values[1]."""


class PeriodScopes:
    """
    Applies period ranges to queries.

    ``periods`` is the single entry point; every named shortcut delegates to
    it with a fixed unit, period count and inclusion flag.
    """

    def __init__(
        self,
        calculator: Optional[PeriodRangeCalculator] = None,
        default_column: str = DEFAULT_COLUMN,
    ) -> None:
        self._calculator = calculator or PeriodRangeCalculator()
        self.default_column = default_column

    def range_for(
        self,
        unit: Union[Unit, str],
        periods: int,
        include_current: bool = False,
    ) -> TimeRange:
        """Compute a period range without touching a query."""
        return self._calculator.compute_range(unit, periods, include_current)

    def periods(
        self,
        query: RangeFilterable,
        unit: Union[Unit, str],
        periods: int,
        column: Union[str, bool, None] = None,
        include_current: bool = False,
    ) -> Any:
        """
        Filter a query to this, or the last/next N, periods.

        Args:
            query: Query object exposing ``where_between``
            unit: Period unit (minute, hour, day, week, month or year)
            periods: Number of periods; negative looks back
            column: Column to match against, defaults to ``default_column``.
                A bool passed here is taken as ``include_current``.
            include_current: Whether the current period is included as well

        Returns:
            The result of ``query.where_between``

        Raises:
            InvalidUnit: If the unit is not recognised
        """
        # periods(query, "year", -2, True) reads as "include current"
        if isinstance(column, bool):
            include_current = column
            column = None

        time_range = self.range_for(unit, periods, include_current)

        return query.where_between(column or self.default_column, list(time_range.as_tuple()))

    def shortcut_range(self, name: str) -> TimeRange:
        """Resolve a named shortcut (e.g. ``last_month``) to its range."""
        shortcut = get_shortcut(name)
        return self.range_for(shortcut.unit, shortcut.periods, shortcut.include_current)

    def apply_shortcut(self, query: RangeFilterable, name: str, column: Optional[str] = None) -> Any:
        """Filter a query with a named shortcut."""
        shortcut = get_shortcut(name)
        return self.periods(
            query,
            shortcut.unit,
            shortcut.periods,
            column=column,
            include_current=shortcut.include_current,
        )

    def this_period(self, query: RangeFilterable, unit: Union[Unit, str], column: Optional[str] = None) -> Any:
        return self.periods(query, unit, 0, column=column, include_current=True)

    def next_period(self, query: RangeFilterable, unit: Union[Unit, str], column: Optional[str] = None) -> Any:
        return self.periods(query, unit, 1, column=column, include_current=False)

    def last_period(self, query: RangeFilterable, unit: Union[Unit, str], column: Optional[str] = None) -> Any:
        return self.periods(query, unit, -1, column=column, include_current=False)

    def this_year(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.this_period(query, Unit.YEAR, column)

    def this_month(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.this_period(query, Unit.MONTH, column)

    def this_week(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.this_period(query, Unit.WEEK, column)

    def today(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.this_period(query, Unit.DAY, column)

    def this_hour(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.this_period(query, Unit.HOUR, column)

    def this_minute(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.this_period(query, Unit.MINUTE, column)

    def next_year(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.next_period(query, Unit.YEAR, column)

    def next_month(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.next_period(query, Unit.MONTH, column)

    def next_week(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.next_period(query, Unit.WEEK, column)

    def tomorrow(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.next_period(query, Unit.DAY, column)

    def next_hour(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.next_period(query, Unit.HOUR, column)

    def next_minute(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.next_period(query, Unit.MINUTE, column)

    def last_year(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.last_period(query, Unit.YEAR, column)

    def last_month(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.last_period(query, Unit.MONTH, column)

    def last_week(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.last_period(query, Unit.WEEK, column)

    def yesterday(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.last_period(query, Unit.DAY, column)

    def last_hour(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.last_period(query, Unit.HOUR, column)

    def last_minute(self, query: RangeFilterable, column: Optional[str] = None) -> Any:
        return self.last_period(query, Unit.MINUTE, column)
