"""
Core period range calculation.

Pure calendar arithmetic: the only outside input is the clock, which is
injected so callers and tests can control what "now" is.
"""

import logging
from typing import Callable, Dict, Optional, Union

import pendulum
from pendulum import DateTime, WeekDay

from .models import TimeRange, Unit

logger = logging.getLogger(__name__)

Clock = Callable[[], DateTime]

_SHIFTERS: Dict[Unit, Callable[[DateTime, int], DateTime]] = {
    Unit.MINUTE: lambda dt, amount: dt.add(minutes=amount),
    Unit.HOUR: lambda dt, amount: dt.add(hours=amount),
    Unit.DAY: lambda dt, amount: dt.add(days=amount),
    Unit.WEEK: lambda dt, amount: dt.add(weeks=amount),
    Unit.MONTH: lambda dt, amount: dt.add(months=amount),
    Unit.YEAR: lambda dt, amount: dt.add(years=amount),
}


class PeriodRangeCalculator:
    """
    Calculates the start/end pair bounding a span of calendar periods.

    Algorithm:
    1. Pick the boundary closer to now: now itself when the current period
       is included, otherwise now shifted one unit in the direction of travel
    2. Pick the further boundary: now shifted by the requested period count
    3. Snap the closer boundary away from now and the further boundary to
       the outer edge of its period
    4. Order both instants ascending
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        timezone: Optional[str] = None,
        week_starts_at: WeekDay = WeekDay.MONDAY,
    ):
        self.timezone = timezone
        self.week_starts_at = week_starts_at
        self._clock = clock or self._system_clock

    def _system_clock(self) -> DateTime:
        return pendulum.now(self.timezone)

    def compute_range(
        self,
        unit: Union[Unit, str],
        periods: int,
        include_current: bool = False,
    ) -> TimeRange:
        """
        Compute the range covering the requested periods.

        Args:
            unit: Period unit (minute, hour, day, week, month or year)
            periods: 0 for the current period, N > 0 for N periods ahead,
                N < 0 for N periods back
            include_current: Whether the current period is merged into the range

        Returns:
            TimeRange ordered by instant

        Raises:
            InvalidUnit: If the unit is not recognised
        """
        unit = Unit.parse(unit)
        future = periods >= 0

        if include_current:
            closer = self._clock()
        else:
            closer = self.shift(self._clock(), unit, 1 if future else -1)

        further = self.shift(self._clock(), unit, periods)

        boundaries = sorted(
            [
                self.adjust_timestamp(closer, unit, end_of=not future),
                self.adjust_timestamp(further, unit, end_of=future),
            ],
            key=lambda dt: dt.timestamp(),
        )

        time_range = TimeRange(start=boundaries[0], end=boundaries[1])
        logger.debug(
            "Period range unit=%s periods=%d include_current=%s -> %s",
            unit.value, periods, include_current, time_range,
        )
        return time_range

    @staticmethod
    def shift(timestamp: DateTime, unit: Unit, amount: int) -> DateTime:
        """Move a timestamp by a whole number of units."""
        return _SHIFTERS[unit](timestamp, amount)

    def adjust_timestamp(self, timestamp: DateTime, unit: Unit, end_of: bool = False) -> DateTime:
        """
        Snap a timestamp to the beginning or end of its period.

        Minutes and hours only clamp their sub-fields; the hour and the day
        of the timestamp are kept as they are.
        """
        ending = 59 if end_of else 0
        microsecond = 999999 if end_of else 0

        if unit is Unit.MINUTE:
            return timestamp.set(second=ending, microsecond=microsecond)

        if unit is Unit.HOUR:
            return timestamp.set(minute=ending, second=ending, microsecond=microsecond)

        if unit is Unit.WEEK:
            offset = (timestamp.day_of_week - self.week_starts_at) % 7
            week_start = timestamp.start_of("day").subtract(days=offset)
            if end_of:
                return week_start.add(days=6).end_of("day")
            return week_start

        if end_of:
            return timestamp.end_of(unit.value)
        return timestamp.start_of(unit.value)
