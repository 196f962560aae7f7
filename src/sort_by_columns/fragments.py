"""OrderFragmentBuilder: accepted tokens -> raw ORDER BY fragments and joins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect

from .exceptions import DisallowedFieldError, UnknownRelationError
from .fields import RelatedField, classify_column
from .plan import OrderFragment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .config import SortableFields
    from .direction import SortDirection
    from .parser import SortToken
    from .policy import PolicyGate

DISALLOWED_COLUMN_MESSAGE = (
    "detected a disallowed sortable column: %(field)s. Ensure you add it to "
    "the allowed columns with column_sortable_by('%(field)s'). In lenient mode "
    "the invalid column is ignored and allowed columns are processed."
)
UNKNOWN_RELATION_MESSAGE = (
    "relationship '%(field)s' doesn't exist on model %(model)s. "
    "Check the relationship name in '%(column)s'."
)


class OrderFragmentBuilder:
    """Build ORDER BY fragments for a declarative model.

    Every token is checked against the allow-list before its shape is
    considered. Related columns are aliased with the relationship name, which
    is also the alias the assembler gives the joined table.
    """

    def __init__(self, model: type[Any], sortable: SortableFields, gate: PolicyGate) -> None:
        self._model = model
        self._sortable = sortable
        self._gate = gate
        self._mapper = inspect(model)

    @property
    def table_name(self) -> str:
        return str(self._mapper.local_table.name)

    def has_relation(self, name: str) -> bool:
        return name in self._mapper.relationships

    def build(
        self, tokens: Iterable[SortToken]
    ) -> tuple[tuple[str, ...], tuple[OrderFragment, ...]]:
        joins: list[str] = []
        fragments: list[OrderFragment] = []
        for token in tokens:
            fragment = self.fragment_for(token.field, token.direction)
            if fragment is None:
                continue
            if fragment.requires_join and fragment.requires_join not in joins:
                joins.append(fragment.requires_join)
            fragments.append(fragment)
        return tuple(joins), tuple(fragments)

    def fragment_for(self, field: str, direction: SortDirection) -> OrderFragment | None:
        """Return the fragment for one field, or None when the policy skips it."""
        if not self._sortable.allows(field):
            self._gate.violation(DisallowedFieldError, DISALLOWED_COLUMN_MESSAGE, field)
            return None

        classified = classify_column(field)
        if isinstance(classified, RelatedField):
            return self._related_fragment(classified, field, direction)
        return OrderFragment(f"{self.table_name}.{classified.column} {direction.sql}")

    def _related_fragment(
        self, classified: RelatedField, field: str, direction: SortDirection
    ) -> OrderFragment | None:
        if not self.has_relation(classified.relation):
            self._gate.violation(
                UnknownRelationError,
                UNKNOWN_RELATION_MESSAGE,
                classified.relation,
                model=self._model.__name__,
                column=field,
            )
            return None
        sql = (
            f"{classified.relation}.{classified.column} "
            f"{direction.sql} {direction.nulls_directive}"
        )
        return OrderFragment(sql, requires_join=classified.relation)
