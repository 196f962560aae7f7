"""PolicyGate: strict (raise) or lenient (warn and skip) handling of sort violations."""

from __future__ import annotations

import contextlib
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .exceptions import SortValidationError

logger = logging.getLogger("sort_by_columns")

_TRUTHY_FLAGS = frozenset({"1", "true", "yes", "on"})


class WarningLogger(Protocol):
    """Anything accepting a single warning string, e.g. a ``logging.Logger``."""

    def warning(self, msg: str, /) -> Any: ...


class SortPolicy(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def coerce(cls, value: Any) -> SortPolicy:
        """Accept a policy, its string value, or a boolean-like "strict" flag.

        ``True`` (a trusted/debug context) and truthy flag strings such as
        ``"1"``, ``"true"`` or ``"yes"`` map to STRICT. Any other falsy or
        unknown value maps to LENIENT.
        """
        if isinstance(value, SortPolicy):
            return value
        if isinstance(value, str):
            flag = value.strip().lower()
            if flag in _TRUTHY_FLAGS:
                return cls.STRICT
            try:
                return cls(flag)
            except ValueError:
                return cls.LENIENT
        return cls.STRICT if value else cls.LENIENT


class PolicyGate:
    """Apply the failure policy to one violation.

    Strict mode raises immediately so no further tokens are processed.
    Lenient mode writes one warning and returns, leaving the caller to skip the
    token (or the whole specification when ``critical``).
    """

    def __init__(
        self,
        policy: SortPolicy | str | bool = SortPolicy.LENIENT,
        sink: WarningLogger | None = logger,
    ) -> None:
        self.policy = SortPolicy.coerce(policy)
        self._sink = sink

    @property
    def strict(self) -> bool:
        return self.policy is SortPolicy.STRICT

    def violation(
        self,
        error_cls: type[SortValidationError],
        template: str,
        field: str,
        *,
        critical: bool = False,
        **context: Any,
    ) -> None:
        """Raise ``error_cls`` in strict mode, otherwise log a warning.

        ``template`` uses ``%(field)s`` plus any names given in ``context``.
        """
        if self.strict:
            message = template % {**context, "field": field}
            raise error_cls(message, field=field, critical=critical)
        prefix = "ignoring all columns due to" if critical else "ignoring disallowed column:"
        self._warn(f"{prefix} {field}")

    def _warn(self, message: str) -> None:
        if self._sink is None:
            return
        # a broken logging sink must never fail the query
        with contextlib.suppress(Exception):
            self._sink.warning(message)
