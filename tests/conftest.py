"""
Shared fixtures: a frozen clock on Wednesday, 27 November 2024, 14:35:42 in Berlin.
"""

import pendulum
import pytest

from periodscopes.domain.period_calculator import PeriodRangeCalculator

TZ = "Europe/Berlin"


@pytest.fixture
def now():
    return pendulum.datetime(2024, 11, 27, 14, 35, 42, 123456, tz=TZ)


@pytest.fixture
def calculator(now):
    return PeriodRangeCalculator(clock=lambda: now, timezone=TZ)


@pytest.fixture
def frozen_time(now):
    """Freeze pendulum.now() for code that reads the system clock."""
    pendulum.travel_to(now, freeze=True)
    yield now
    pendulum.travel_back()
