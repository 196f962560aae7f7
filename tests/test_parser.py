"""Tests for SortSpecParser and direction normalization."""

from __future__ import annotations

import pytest

from sort_by_columns.direction import SortDirection, normalize_direction
from sort_by_columns.parser import SortSpecParser, SortToken, parse_sort_spec, split_token

ASC = SortDirection.ASC
DESC = SortDirection.DESC


def test_parse_single_column() -> None:
    assert parse_sort_spec("name:desc") == [SortToken("name", DESC)]


def test_parse_defaults_to_asc_without_direction() -> None:
    assert parse_sort_spec("name") == [SortToken("name", ASC)]


def test_parse_preserves_request_order() -> None:
    tokens = parse_sort_spec("b:desc,a:asc")
    assert [t.field for t in tokens] == ["b", "a"]
    assert [t.direction for t in tokens] == [DESC, ASC]


def test_parse_trims_whitespace() -> None:
    assert parse_sort_spec("  name : desc ,  email  ") == [
        SortToken("name", DESC),
        SortToken("email", ASC),
    ]


@pytest.mark.parametrize("raw", [None, "", "   ", ",", " , ,, ", ":::", ":desc"])
def test_parse_blank_or_fieldless_input_yields_nothing(raw: str | None) -> None:
    assert SortSpecParser().parse(raw) == []


def test_parse_drops_empty_pieces_and_keeps_the_rest() -> None:
    tokens = parse_sort_spec("name:asc,::invalid::,,email:desc")
    assert tokens == [SortToken("name", ASC), SortToken("email", DESC)]


def test_extra_colons_are_direction_input() -> None:
    assert split_token("name:desc:extra") == ("name", "desc:extra")
    assert parse_sort_spec("name:desc:extra") == [SortToken("name", ASC)]


def test_split_token_without_colon_has_no_direction() -> None:
    assert split_token("name") == ("name", None)
    assert split_token("name:") == ("name", "")


def test_non_string_input_is_blank() -> None:
    assert parse_sort_spec(42) == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("asc", ASC),
        ("desc", DESC),
        (None, ASC),
        ("", ASC),
        ("bogus", ASC),
        ("DESC", ASC),
        ("Desc", ASC),
        (1, ASC),
    ],
)
def test_normalize_direction_is_exact_and_case_sensitive(value: object, expected: SortDirection) -> None:
    assert normalize_direction(value) is expected


def test_direction_sql_and_nulls() -> None:
    assert ASC.sql == "ASC"
    assert DESC.sql == "DESC"
    assert ASC.nulls_directive == "NULLS LAST"
    assert DESC.nulls_directive == "NULLS FIRST"
