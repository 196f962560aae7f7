"""SortDirection and direction normalization."""

from __future__ import annotations

from enum import Enum
from typing import Any


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def sql(self) -> str:
        return self.value.upper()

    @property
    def nulls_directive(self) -> str:
        """Null placement used for related-column ordering.

        Rows without a related row go last when ascending and first when
        descending.
        """
        return "NULLS LAST" if self is SortDirection.ASC else "NULLS FIRST"


def normalize_direction(value: Any) -> SortDirection:
    """Return DESC only for the exact string ``"desc"``; everything else is ASC.

    Matching is case-sensitive: ``"DESC"`` or ``"Desc"`` fall back to ASC.
    """
    if isinstance(value, str) and value == SortDirection.DESC.value:
        return SortDirection.DESC
    return SortDirection.ASC
