"""QueryAssembler: apply a SortPlan to a SQLAlchemy ``Select``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect, text
from sqlalchemy.orm import aliased

if TYPE_CHECKING:
    from sqlalchemy import Select

    from .plan import SortPlan


class QueryAssembler:
    """Turn compiled joins and fragments into query modifications.

    Related tables are LEFT OUTER joined so rows without a related row stay
    in the result. Each join is aliased with the relationship name, matching
    the ``<relation>.<column>`` fragments.
    """

    def __init__(self, model: type[Any]) -> None:
        self._model = model
        self._mapper = inspect(model)

    def apply(self, stmt: Select[Any], plan: SortPlan) -> Select[Any]:
        if plan.custom_scope is not None:
            return plan.custom_scope(stmt)  # type: ignore[no-any-return]
        if plan.is_empty:
            return stmt
        for name in plan.joins:
            stmt = self._outer_join(stmt, name)
        return stmt.order_by(None).order_by(text(plan.order_by_clause))

    def _outer_join(self, stmt: Select[Any], name: str) -> Select[Any]:
        relationship = self._mapper.relationships[name]
        target = aliased(relationship.mapper.class_, name=name)
        return stmt.outerjoin(getattr(self._model, name).of_type(target))
