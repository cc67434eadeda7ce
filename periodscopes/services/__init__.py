"""
Service layer helpers that apply period ranges to queries.
"""

from .period_scopes import DEFAULT_COLUMN, PeriodScopes, RangeFilterable

__all__ = ["DEFAULT_COLUMN", "PeriodScopes", "RangeFilterable"]
