"""
periodscopes - relative calendar period ranges for query filtering.
"""

from .domain.exceptions import InvalidUnit, PeriodScopeError, UnknownShortcut
from .domain.models import TimeRange, Unit
from .domain.period_calculator import PeriodRangeCalculator
from .services.period_scopes import PeriodScopes

__version__ = "0.1.0"

__all__ = [
    "InvalidUnit",
    "PeriodRangeCalculator",
    "PeriodScopeError",
    "PeriodScopes",
    "TimeRange",
    "Unit",
    "UnknownShortcut",
    "__version__",
]
