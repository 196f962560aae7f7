"""Column sorting for SQLAlchemy models driven by ``field:dir,...`` request strings."""

from __future__ import annotations

from .assembler import QueryAssembler
from .binding import SortParamBinder, apply_sort_param, extract_sort_param
from .compiler import SortCompiler, declared_sortable_fields, sorted_by_columns
from .config import CustomScope, SortableFields, sortable_by
from .direction import SortDirection, normalize_direction
from .exceptions import (
    DisallowedFieldError,
    MissingCustomScopeError,
    MultipleCustomScopeColumnsError,
    SortByColumnsError,
    SortConfigurationError,
    SortValidationError,
    UnknownRelationError,
)
from .fields import (
    CustomScopeField,
    LocalField,
    RelatedField,
    classify_column,
    classify_field,
)
from .fragments import OrderFragmentBuilder
from .mixins import SortableMixin
from .parser import SortSpecParser, SortToken, parse_sort_spec
from .plan import CustomScopeCall, OrderFragment, SortPlan
from .policy import PolicyGate, SortPolicy, WarningLogger
from .scopes import CustomScopeDispatcher

__all__ = [
    "CustomScope",
    "CustomScopeCall",
    "CustomScopeDispatcher",
    "CustomScopeField",
    "DisallowedFieldError",
    "LocalField",
    "MissingCustomScopeError",
    "MultipleCustomScopeColumnsError",
    "OrderFragment",
    "OrderFragmentBuilder",
    "PolicyGate",
    "QueryAssembler",
    "RelatedField",
    "SortByColumnsError",
    "SortCompiler",
    "SortConfigurationError",
    "SortDirection",
    "SortParamBinder",
    "SortPlan",
    "SortPolicy",
    "SortSpecParser",
    "SortToken",
    "SortValidationError",
    "SortableFields",
    "SortableMixin",
    "UnknownRelationError",
    "WarningLogger",
    "apply_sort_param",
    "classify_column",
    "classify_field",
    "declared_sortable_fields",
    "extract_sort_param",
    "normalize_direction",
    "parse_sort_spec",
    "sortable_by",
    "sorted_by_columns",
]
