"""
In-memory query adapter for filtering plain records by period.
"""

import logging
from typing import Any, Iterable, List, Mapping, Sequence

from pendulum import DateTime

logger = logging.getLogger(__name__)


class MemoryQuery:
    """
    Minimal query object over a list of mappings.

    Implements ``where_between`` so it can be passed to ``PeriodScopes``.
    Each filter returns a new query; the original rows are left untouched.
    Bound values accumulate in ``bindings`` in the order filters are applied.
    """

    def __init__(self, rows: Iterable[Mapping[str, Any]], bindings: Sequence[DateTime] = ()):
        self._rows: List[Mapping[str, Any]] = list(rows)
        self.bindings: List[DateTime] = list(bindings)

    def where_between(self, column: str, values: Sequence[DateTime]) -> "MemoryQuery":
        """
        Keep rows whose column lies within values, both ends included.

        Rows without the column, or with a None value, are dropped.
        """
        if len(values) != 2:
            raise ValueError(f"where_between expects exactly two values, got {len(values)}")

        start, end = values
        matching = [
            row for row in self._rows
            if row.get(column) is not None and start <= row[column] <= end
        ]

        logger.debug(
            "where_between %s [%s, %s]: kept %d of %d rows",
            column, start, end, len(matching), len(self._rows),
        )

        return MemoryQuery(matching, bindings=[*self.bindings, start, end])

    def all(self) -> List[Mapping[str, Any]]:
        """Return the matching rows."""
        return list(self._rows)

    def count(self) -> int:
        return len(self._rows)
