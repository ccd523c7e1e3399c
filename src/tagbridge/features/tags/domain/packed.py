"""Tag value parsing helpers.

Where: src/tagbridge/features/tags/domain/packed.py
What: Pure routines for numeric text, years, and packed ``number/total`` slots.
Why: Every adapter stores numbers as text or pairs; the rules must agree across formats.
"""

from __future__ import annotations

import re

from .errors import MalformedFieldError
from .fields import NUMBER_MAX, NUMBER_MIN, YEAR_MAX, YEAR_MIN

PACKED_SEPARATOR = "/"

_YEAR_PATTERN = re.compile(r"^(\d{1,4})(?:-\d{1,2}(?:-\d{1,2})?(?:[T ].*)?)?$")

__all__ = [
    "PACKED_SEPARATOR",
    "split_packed",
    "join_packed",
    "packed_part",
    "parse_number",
    "parse_year",
    "parse_tuple_numbers",
]


def _to_number(text: str) -> int | None:
    text = text.strip()
    if not text.isdigit():
        return None
    value = int(text)
    return value if NUMBER_MIN <= value <= NUMBER_MAX else None


def split_packed(
    value: str | None, separator: str = PACKED_SEPARATOR
) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Never raises: an unparseable part is returned as ``None`` while the other
    part is kept, so ``"3/abc"`` gives ``(3, None)`` and ``"abc"`` gives
    ``(None, None)``.
    """
    if not value:
        return None, None
    number_text, _, total_text = value.partition(separator)
    return _to_number(number_text), _to_number(total_text)


def join_packed(
    number: int | None, total: int | None, separator: str = PACKED_SEPARATOR
) -> str | None:
    """Inverse of :func:`split_packed`; ``None`` when both parts are absent."""
    if number is None and total is None:
        return None
    if total is None:
        return str(number)
    return f"{'' if number is None else number}{separator}{total}"


def packed_part(
    value: str | None, index: int, field: str, separator: str = PACKED_SEPARATOR
) -> int | None:
    """Return one side of a packed value, raising if that side is present but malformed.

    Args:
        value: Native packed text such as ``"3/12"``.
        index: ``0`` for the number, ``1`` for the total.
        field: Logical field name reported in the error.
    """
    if not value:
        return None
    parts = value.partition(separator)
    text = parts[0] if index == 0 else parts[2]
    if not text.strip():
        return None
    parsed = split_packed(value, separator)[index]
    if parsed is None:
        raise MalformedFieldError(field, value, f"expected digits in 0..{NUMBER_MAX}")
    return parsed


def parse_number(value: str | None, field: str) -> int | None:
    """Parse a standalone numeric slot, raising on anything but plain digits."""
    if value is None or not value.strip():
        return None
    parsed = _to_number(value)
    if parsed is None:
        raise MalformedFieldError(field, value, f"expected digits in 0..{NUMBER_MAX}")
    return parsed


def parse_year(value: str | None, field: str = "year") -> int | None:
    """Parse ``YYYY`` or an ISO-style date beginning with the year."""
    if value is None or not value.strip():
        return None
    match = _YEAR_PATTERN.match(value.strip())
    if match is None:
        raise MalformedFieldError(field, value, "expected a year or ISO date")
    year = int(match.group(1))
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise MalformedFieldError(field, value, "year out of range")
    return year


def parse_tuple_numbers(data: list[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Return the first ``(number, total)`` pair with zeros converted to None."""
    if data:
        first = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if len(first) > 1 and first[1] != 0 else None
        return num, total
    return None, None
