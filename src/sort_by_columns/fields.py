"""FieldClassifier: local, related (``relation__column``) and custom (``c_name``) fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

CUSTOM_SCOPE_PREFIX = "c_"
CUSTOM_SCOPE_METHOD_PREFIX = "sorted_by_"
RELATION_SEPARATOR = "__"

# c_columns would dispatch to SortableMixin.sorted_by_columns itself
RESERVED_CUSTOM_SCOPE_FIELDS = frozenset({"c_columns"})


@dataclass(frozen=True)
class LocalField:
    """A column on the model's own table."""

    column: str


@dataclass(frozen=True)
class RelatedField:
    """A column on a related model, addressed as ``relation__column``."""

    relation: str
    column: str


@dataclass(frozen=True)
class CustomScopeField:
    """A named ordering function, addressed as ``c_<name>``."""

    name: str

    @property
    def suffix(self) -> str:
        return self.name[len(CUSTOM_SCOPE_PREFIX) :]

    @property
    def method_name(self) -> str:
        return f"{CUSTOM_SCOPE_METHOD_PREFIX}{self.suffix}"


ClassifiedField = Union[LocalField, RelatedField, CustomScopeField]


def is_custom_scope_field(field: str) -> bool:
    return field.startswith(CUSTOM_SCOPE_PREFIX)


def is_custom_scope_spec(raw: Any) -> bool:
    """True when the whole specification must be routed to a custom scope."""
    return isinstance(raw, str) and is_custom_scope_field(raw.strip())


def classify_field(field: str) -> ClassifiedField:
    """Classify one trimmed field name.

    Only the first ``__`` separates relation from column, so
    ``"owner__full__name"`` is relation ``owner`` and column ``full__name``.
    """
    if is_custom_scope_field(field):
        return CustomScopeField(field)
    return classify_column(field)


def classify_column(field: str) -> LocalField | RelatedField:
    """Classify a field already known not to be a custom scope column."""
    if RELATION_SEPARATOR in field:
        relation, _, column = field.partition(RELATION_SEPARATOR)
        return RelatedField(relation, column)
    return LocalField(field)
