"""
Compile a sort specification string into ordering instructions for a model.

``SortCompiler`` wires the parser, classifier, policy gate, fragment builder
and custom scope dispatcher together:

- ``compile(raw)`` is pure and returns a :class:`SortPlan`. Compiling the same
  string twice against the same configuration yields equal plans.
- ``apply(raw, stmt)`` compiles and hands the plan to the
  :class:`QueryAssembler`.

Specifications starting with ``c_`` are custom scope specifications and must
consist of that single column. A ``c_`` column anywhere else in a
specification is a critical violation that discards the whole specification.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from .assembler import QueryAssembler
from .config import SortableFields, as_sortable_fields
from .fields import is_custom_scope_field, is_custom_scope_spec
from .fragments import OrderFragmentBuilder
from .parser import SortSpecParser, is_blank
from .plan import SortPlan
from .policy import PolicyGate, SortPolicy, WarningLogger
from .policy import logger as default_sink
from .scopes import CustomScopeDispatcher

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy import Select

logger = logging.getLogger(__name__)


def declared_sortable_fields(model: type[Any]) -> SortableFields:
    """Return the allow-list a model declares via ``__sortable__``."""
    return as_sortable_fields(getattr(model, "__sortable__", None))


class SortCompiler:
    """Sort specification compiler bound to one model and one allow-list.

    Args:
        model: SQLAlchemy declarative model class.
        sortable: Allow-list. Defaults to the model's ``__sortable__``.
        policy: ``SortPolicy.STRICT`` raises on violations,
            ``SortPolicy.LENIENT`` logs and skips them.
        logger: Receives lenient-mode warnings. ``None`` disables them.
    """

    def __init__(
        self,
        model: type[Any],
        sortable: SortableFields | Iterable[Any] | None = None,
        *,
        policy: SortPolicy | str | bool = SortPolicy.LENIENT,
        logger: WarningLogger | None = default_sink,
    ) -> None:
        self.model = model
        self.sortable = (
            declared_sortable_fields(model) if sortable is None else as_sortable_fields(sortable)
        )
        self.gate = PolicyGate(policy, logger)
        self._parser = SortSpecParser()
        self._fragments = OrderFragmentBuilder(model, self.sortable, self.gate)
        self._scopes = CustomScopeDispatcher(model, self.sortable, self.gate)
        self._assembler = QueryAssembler(model)

    @property
    def policy(self) -> SortPolicy:
        return self.gate.policy

    def compile(self, raw: Any) -> SortPlan:
        if is_blank(raw):
            return SortPlan()
        if is_custom_scope_spec(raw):
            return self._scopes.plan(raw)

        tokens = self._parser.parse(raw)
        if any(is_custom_scope_field(t.field) for t in tokens):
            self._scopes.reject_combined(raw.strip())
            return SortPlan()

        joins, fragments = self._fragments.build(tokens)
        plan = SortPlan(joins=joins, fragments=fragments)
        logger.debug(
            "Compiled sort %r for %s: order_by=%r joins=%r",
            raw,
            self.model.__name__,
            plan.order_by_clause,
            plan.joins,
        )
        return plan

    def apply(self, raw: Any, stmt: Select[Any] | None = None) -> Select[Any]:
        """Return ``stmt`` (default ``select(model)``) ordered by ``raw``."""
        base = select(self.model) if stmt is None else stmt
        return self._assembler.apply(base, self.compile(raw))


def sorted_by_columns(
    model: type[Any],
    raw: Any,
    *,
    stmt: Select[Any] | None = None,
    sortable: SortableFields | Iterable[Any] | None = None,
    policy: SortPolicy | str | bool = SortPolicy.LENIENT,
    logger: WarningLogger | None = default_sink,
) -> Select[Any]:
    """One-shot helper: build a compiler and apply ``raw`` to ``stmt``."""
    compiler = SortCompiler(model, sortable, policy=policy, logger=logger)
    return compiler.apply(raw, stmt)
