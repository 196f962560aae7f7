"""SortParamBinder: bind the ``sort`` request parameter to a model query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .compiler import SortCompiler
from .policy import SortPolicy, WarningLogger
from .policy import logger as default_sink

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Select

logger = logging.getLogger(__name__)


def extract_sort_param(query_params: Mapping[str, Any] | None, sort_key: str = "sort") -> str | None:
    """Return the raw sort string from request parameters, if any.

    Multi-value containers (``getlist``, e.g. starlette ``QueryParams``) and
    list values use their last value. Non-string values are ignored.
    """
    if not query_params:
        return None
    getlist = getattr(query_params, "getlist", None)
    value = getlist(sort_key) if callable(getlist) else query_params.get(sort_key)
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else None
    if value is None:
        return None
    if not isinstance(value, str):
        logger.debug("Ignoring non-string %s parameter: %r", sort_key, value)
        return None
    return value


class SortParamBinder:
    """Apply the ``sort`` query parameter to list endpoints."""

    def __init__(
        self,
        sort_key: str = "sort",
        *,
        policy: SortPolicy | str | bool = SortPolicy.LENIENT,
        logger: WarningLogger | None = default_sink,
    ) -> None:
        self.sort_key = sort_key
        self._policy = policy
        self._logger = logger

    def apply(
        self,
        model: type[Any],
        query_params: Mapping[str, Any] | None,
        stmt: Select[Any] | None = None,
    ) -> Select[Any]:
        raw = extract_sort_param(query_params, self.sort_key)
        compiler = SortCompiler(model, policy=self._policy, logger=self._logger)
        return compiler.apply(raw, stmt)


def apply_sort_param(
    model: type[Any],
    query_params: Mapping[str, Any] | None,
    stmt: Select[Any] | None = None,
    *,
    sort_key: str = "sort",
    policy: SortPolicy | str | bool = SortPolicy.LENIENT,
    logger: WarningLogger | None = default_sink,
) -> Select[Any]:
    return SortParamBinder(sort_key, policy=policy, logger=logger).apply(model, query_params, stmt)
