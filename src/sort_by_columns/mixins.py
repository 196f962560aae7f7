"""SortableMixin: declare sortable columns on a declarative model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from .compiler import sorted_by_columns
from .config import SortableFields, sortable_by
from .policy import SortPolicy, WarningLogger
from .policy import logger as default_sink

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Select

    from .config import CustomScope


class SortableMixin:
    """Mixin for SQLAlchemy declarative models.

    Example::

        class User(SortableMixin, Base):
            __tablename__ = "users"
            __sortable__ = sortable_by("name", "organization__name", "c_full_name")

            @classmethod
            def sorted_by_full_name(cls, stmt: Select[Any], direction: str) -> Select[Any]:
                return stmt.order_by(...)

        stmt = User.sorted_by_columns("name:desc,organization__name")
    """

    __sortable__: ClassVar[SortableFields] = SortableFields()

    @classmethod
    def column_sortable_by(
        cls,
        *fields: Any,
        scopes: Mapping[str, CustomScope] | None = None,
    ) -> SortableFields:
        """Replace the model's allow-list wholesale and return the new value."""
        cls.__sortable__ = sortable_by(*fields, scopes=scopes)
        return cls.__sortable__

    @classmethod
    def column_sortable_allowed_fields(cls) -> tuple[str, ...]:
        return cls.__sortable__.fields

    @classmethod
    def sorted_by_columns(
        cls,
        raw: Any,
        *,
        stmt: Select[Any] | None = None,
        policy: SortPolicy | str | bool = SortPolicy.LENIENT,
        logger: WarningLogger | None = default_sink,
    ) -> Select[Any]:
        return sorted_by_columns(
            cls, raw, stmt=stmt, sortable=cls.__sortable__, policy=policy, logger=logger
        )
