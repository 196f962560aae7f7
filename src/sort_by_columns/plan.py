"""SortPlan: compiled ordering instructions handed to the QueryAssembler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import CustomScope
    from .direction import SortDirection

ORDER_FRAGMENT_SEPARATOR = ", "


@dataclass(frozen=True)
class OrderFragment:
    """One raw ORDER BY term and the relationship it needs joined, if any."""

    sql: str
    requires_join: str | None = None


@dataclass(frozen=True)
class CustomScopeCall:
    """A resolved custom scope and the direction it will be called with."""

    name: str
    scope: CustomScope
    direction: SortDirection

    def __call__(self, stmt: Any) -> Any:
        return self.scope(stmt, self.direction.value)


@dataclass(frozen=True)
class SortPlan:
    """Result of compiling a sort specification.

    ``joins`` are deduplicated relationship names in first-seen order;
    ``fragments`` keep the requested order. A plan with ``custom_scope`` set
    carries no fragments: the scope orders the statement on its own.
    """

    joins: tuple[str, ...] = ()
    fragments: tuple[OrderFragment, ...] = ()
    custom_scope: CustomScopeCall | None = None

    @property
    def is_empty(self) -> bool:
        return self.custom_scope is None and not self.fragments

    @property
    def order_by_clause(self) -> str:
        return ORDER_FRAGMENT_SEPARATOR.join(f.sql for f in self.fragments)
