"""CustomScopeDispatcher: ``c_<name>`` specifications handled by a named ordering function."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .direction import normalize_direction
from .exceptions import (
    DisallowedFieldError,
    MissingCustomScopeError,
    MultipleCustomScopeColumnsError,
)
from .fields import CustomScopeField
from .parser import TOKEN_SEPARATOR, split_token
from .plan import CustomScopeCall, SortPlan

if TYPE_CHECKING:
    from .config import CustomScope, SortableFields
    from .policy import PolicyGate

logger = logging.getLogger(__name__)

MULTIPLE_COLUMNS_MESSAGE = (
    "custom scope columns must be the only sort column, got '%(field)s'. "
    "In lenient mode the whole sort specification is ignored and no ordering "
    "is applied."
)
DISALLOWED_SCOPE_MESSAGE = (
    "detected a disallowed sortable column: %(field)s. Ensure you add it to "
    "the allowed columns with column_sortable_by('%(field)s'). In lenient mode "
    "the invalid column is ignored."
)


class CustomScopeDispatcher:
    """Resolve and plan a custom scope sort.

    Scopes come from ``SortableFields.scopes`` first, then from a callable
    ``sorted_by_<name>`` attribute on the model (usually a classmethod).
    """

    def __init__(self, model: type[Any], sortable: SortableFields, gate: PolicyGate) -> None:
        self._model = model
        self._sortable = sortable
        self._gate = gate

    def resolve(self, field: CustomScopeField) -> CustomScope:
        scope = self._sortable.scopes.get(field.name)
        if scope is None:
            scope = getattr(self._model, field.method_name, None)
        if scope is None or not callable(scope):
            raise MissingCustomScopeError(self._model.__name__, field.name, field.method_name)
        return scope

    def plan(self, raw: str) -> SortPlan:
        spec = raw.strip()
        if TOKEN_SEPARATOR in spec:
            self.reject_combined(spec)
            return SortPlan()

        name, direction = split_token(spec)
        if not self._sortable.allows(name):
            self._gate.violation(DisallowedFieldError, DISALLOWED_SCOPE_MESSAGE, name)
            return SortPlan()

        field = CustomScopeField(name)
        call = CustomScopeCall(name, self.resolve(field), normalize_direction(direction))
        logger.debug("Dispatching %s to custom scope %s", spec, field.method_name)
        return SortPlan(custom_scope=call)

    def reject_combined(self, spec: str) -> None:
        """Critical violation: the whole specification is discarded."""
        self._gate.violation(
            MultipleCustomScopeColumnsError,
            MULTIPLE_COLUMNS_MESSAGE,
            spec,
            critical=True,
        )
