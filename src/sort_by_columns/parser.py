"""SortSpecParser: raw ``field:dir,field:dir`` strings -> ordered tokens."""

from __future__ import annotations

from typing import Any, NamedTuple

from .direction import SortDirection, normalize_direction

TOKEN_SEPARATOR = ","
DIRECTION_SEPARATOR = ":"


class SortToken(NamedTuple):
    """One requested ordering column, in request order."""

    field: str
    direction: SortDirection


def is_blank(raw: Any) -> bool:
    """True for None, non-strings and strings that are empty after stripping."""
    return not isinstance(raw, str) or not raw.strip()


def split_token(piece: str) -> tuple[str, str | None]:
    """Split one token on its first colon into (field, raw direction).

    Everything after the first colon is direction input, so ``"a:asc:x"``
    yields the direction ``"asc:x"`` which later normalizes to ASC.
    """
    field, sep, direction = piece.partition(DIRECTION_SEPARATOR)
    return field.strip(), direction.strip() if sep else None


class SortSpecParser:
    """Parse a comma-separated sort specification.

    Pieces whose field is empty after trimming (``",,"``, ``":desc"``) are
    dropped without error. Order is preserved and becomes ORDER BY precedence.
    """

    def parse(self, raw: Any) -> list[SortToken]:
        if is_blank(raw):
            return []
        out: list[SortToken] = []
        for piece in raw.split(TOKEN_SEPARATOR):
            field, direction = split_token(piece.strip())
            if not field:
                continue
            out.append(SortToken(field, normalize_direction(direction)))
        return out


def parse_sort_spec(raw: Any) -> list[SortToken]:
    """Shortcut for ``SortSpecParser().parse(raw)``."""
    return SortSpecParser().parse(raw)
