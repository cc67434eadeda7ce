"""
Domain layer - Pure period arithmetic without external dependencies.
"""

from .models import TimeRange, Unit
from .period_calculator import PeriodRangeCalculator
from .shortcuts import SHORTCUTS, Shortcut

__all__ = ["TimeRange", "Unit", "PeriodRangeCalculator", "SHORTCUTS", "Shortcut"]
