"""Sorting package exceptions."""

from __future__ import annotations


class SortByColumnsError(Exception):
    """Root exception for the sort-by-columns package."""


class SortValidationError(SortByColumnsError, ValueError):
    """Raised in strict mode when a sort specification violates the allow-list.

    Carries the offending identifier and whether the violation discarded the
    whole specification (``critical``) or a single column.
    """

    def __init__(self, message: str, *, field: str = "", critical: bool = False) -> None:
        self.field = field
        self.critical = critical
        super().__init__(message)


class DisallowedFieldError(SortValidationError):
    """Raised when a requested column is not declared sortable."""


class UnknownRelationError(SortValidationError):
    """Raised when a ``relation__column`` names a relationship the model lacks."""


class MultipleCustomScopeColumnsError(SortValidationError):
    """Raised when a custom scope column is combined with other columns."""


class MissingCustomScopeError(SortByColumnsError, LookupError):
    """Raised when an allowed custom scope column has no implementation.

    Never policy-gated: it signals a configuration mistake, not bad input.
    """

    def __init__(self, model_name: str, field: str, method_name: str) -> None:
        self.model_name = model_name
        self.field = field
        self.method_name = method_name
        super().__init__(
            f"custom sort column {field!r} has no implementation on model "
            f"{model_name}: define a {method_name}(stmt, direction) classmethod or "
            f"register a scope for {field!r} in SortableFields.scopes"
        )


class SortConfigurationError(SortByColumnsError, TypeError):
    """Raised when a sortable-fields configuration is invalid at registration."""
