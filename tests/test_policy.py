"""Tests for PolicyGate and SortPolicy."""

from __future__ import annotations

import logging

import pytest

from sort_by_columns.exceptions import DisallowedFieldError, MultipleCustomScopeColumnsError
from sort_by_columns.policy import PolicyGate, SortPolicy

TEMPLATE = "disallowed column %(field)s, add column_sortable_by('%(field)s')"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (SortPolicy.STRICT, SortPolicy.STRICT),
        ("strict", SortPolicy.STRICT),
        (" STRICT ", SortPolicy.STRICT),
        ("lenient", SortPolicy.LENIENT),
        ("whatever", SortPolicy.LENIENT),
        (True, SortPolicy.STRICT),
        (False, SortPolicy.LENIENT),
        (None, SortPolicy.LENIENT),
        (1, SortPolicy.STRICT),
        ("true", SortPolicy.STRICT),
        (" TRUE ", SortPolicy.STRICT),
        ("1", SortPolicy.STRICT),
        ("yes", SortPolicy.STRICT),
        ("on", SortPolicy.STRICT),
        ("false", SortPolicy.LENIENT),
        ("0", SortPolicy.LENIENT),
    ],
)
def test_policy_coerce(value: object, expected: SortPolicy) -> None:
    assert SortPolicy.coerce(value) is expected


def test_strict_raises_with_interpolated_message() -> None:
    gate = PolicyGate(SortPolicy.STRICT)
    with pytest.raises(DisallowedFieldError) as exc_info:
        gate.violation(DisallowedFieldError, TEMPLATE, "secret")
    assert str(exc_info.value) == "disallowed column secret, add column_sortable_by('secret')"
    assert exc_info.value.field == "secret"
    assert exc_info.value.critical is False


def test_strict_keeps_special_characters() -> None:
    gate = PolicyGate(SortPolicy.STRICT)
    with pytest.raises(DisallowedFieldError, match=r"column@#\$%"):
        gate.violation(DisallowedFieldError, TEMPLATE, "column@#$%")


def test_strict_interpolates_extra_context() -> None:
    gate = PolicyGate(SortPolicy.STRICT)
    with pytest.raises(DisallowedFieldError, match="on model UserRecord"):
        gate.violation(
            DisallowedFieldError, "%(field)s on model %(model)s", "x", model="UserRecord"
        )


def test_strict_critical_flag_is_carried() -> None:
    gate = PolicyGate(SortPolicy.STRICT)
    with pytest.raises(MultipleCustomScopeColumnsError) as exc_info:
        gate.violation(MultipleCustomScopeColumnsError, "%(field)s", "c_a,b", critical=True)
    assert exc_info.value.critical is True


def test_lenient_logs_disallowed_column(recorder) -> None:
    gate = PolicyGate(SortPolicy.LENIENT, recorder)
    assert gate.violation(DisallowedFieldError, TEMPLATE, "secret") is None
    assert recorder.warnings == ["ignoring disallowed column: secret"]


def test_lenient_logs_critical_violation(recorder) -> None:
    gate = PolicyGate(SortPolicy.LENIENT, recorder)
    gate.violation(MultipleCustomScopeColumnsError, TEMPLATE, "c_a,b", critical=True)
    assert recorder.warnings == ["ignoring all columns due to c_a,b"]


def test_lenient_swallows_logger_failures(broken_logger) -> None:
    gate = PolicyGate(SortPolicy.LENIENT, broken_logger)
    gate.violation(DisallowedFieldError, TEMPLATE, "secret")


def test_lenient_tolerates_missing_logger() -> None:
    gate = PolicyGate(SortPolicy.LENIENT, None)
    gate.violation(DisallowedFieldError, TEMPLATE, "secret")


def test_default_sink_is_package_logger(caplog: pytest.LogCaptureFixture) -> None:
    gate = PolicyGate()
    with caplog.at_level(logging.WARNING, logger="sort_by_columns"):
        gate.violation(DisallowedFieldError, TEMPLATE, "secret")
    assert [r.getMessage() for r in caplog.records] == ["ignoring disallowed column: secret"]
    assert caplog.records[0].name == "sort_by_columns"
