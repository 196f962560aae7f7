"""SortableFields: the explicit, immutable per-model allow-list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .exceptions import SortConfigurationError
from .fields import RESERVED_CUSTOM_SCOPE_FIELDS, is_custom_scope_field

CustomScope = Callable[[Any, str], Any]
"""Ordering function called as ``scope(stmt, "asc" | "desc")``.

It receives the statement being sorted, with any filters the caller already
applied, and returns that statement ordered.
"""


def _field_name(value: Any) -> str:
    if isinstance(value, Enum) and isinstance(value.value, str):
        return value.value
    return str(value)


class SortableFields(BaseModel):
    """Fields a model allows in a sort specification.

    Values are immutable: reconfiguring produces a new instance through
    :meth:`replace` or :func:`sortable_by`, so a compiler holding an instance
    never observes a change mid-request.

    Attributes:
        fields: Allowed identifiers in declaration order. Plain columns
            (``"name"``), related columns (``"organization__name"``) and
            custom scope columns (``"c_full_name"``).
        scopes: Explicit custom scope implementations keyed by their ``c_``
            field. Fields without an entry fall back to a ``sorted_by_<name>``
            attribute on the model.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fields: tuple[str, ...] = ()
    scopes: Mapping[str, CustomScope] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("fields", mode="before")
    @classmethod
    def _coerce_fields(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = (value,)
        # dict.fromkeys keeps first occurrence order
        fields = tuple(dict.fromkeys(_field_name(v) for v in value))
        if reserved := RESERVED_CUSTOM_SCOPE_FIELDS.intersection(fields):
            raise SortConfigurationError(
                f"{sorted(reserved)} cannot be sortable: the name is reserved by SortableMixin"
            )
        return fields

    @field_validator("scopes", mode="before")
    @classmethod
    def _check_scopes_callable(cls, value: Any) -> dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise SortConfigurationError(
                f"scopes must be a mapping of field -> callable, got {type(value).__name__}"
            )
        for name, scope in value.items():
            if not callable(scope):
                raise SortConfigurationError(
                    f"custom scope for {name!r} is not callable: {scope!r}"
                )
        return {_field_name(k): v for k, v in value.items()}

    @field_validator("scopes", mode="after")
    @classmethod
    def _freeze_scopes(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_scopes_declared(self) -> SortableFields:
        for name in self.scopes:
            if not is_custom_scope_field(name):
                raise SortConfigurationError(
                    f"custom scope {name!r} must be registered under a 'c_' field"
                )
            if name not in self.fields:
                raise SortConfigurationError(
                    f"custom scope {name!r} is not in the sortable fields {list(self.fields)}"
                )
        return self

    def allows(self, field: str) -> bool:
        return field in self.fields

    def __contains__(self, field: object) -> bool:
        return field in self.fields

    def replace(
        self,
        *fields: Any,
        scopes: Mapping[str, CustomScope] | None = None,
    ) -> SortableFields:
        """Return a new allow-list. Nothing from this instance is merged in."""
        return sortable_by(*fields, scopes=scopes)


def sortable_by(
    *fields: Any,
    scopes: Mapping[str, CustomScope] | None = None,
) -> SortableFields:
    """Declare the sortable fields for a model.

    Example::

        sortable_by(
            "name",
            "created_at",
            "organization__name",
            "c_full_name",
            scopes={"c_full_name": sort_users_by_full_name},
        )
    """
    return SortableFields(fields=fields, scopes=dict(scopes or {}))


def as_sortable_fields(value: SortableFields | Iterable[Any] | None) -> SortableFields:
    """Accept a ready ``SortableFields`` or a plain iterable of field names."""
    if value is None:
        return SortableFields()
    if isinstance(value, SortableFields):
        return value
    return sortable_by(*value)
