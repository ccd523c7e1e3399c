"""Tests for numeric and packed value helpers.

Where: tests/features/tags/domain/test_packed.py
What: Validate parsing of "number/total" slots, plain numbers, and years.
Why: Every adapter relies on these helpers agreeing on the same rules.
"""

import pytest

from tagbridge.features.tags.domain.errors import MalformedFieldError
from tagbridge.features.tags.domain.packed import (
    join_packed,
    packed_part,
    parse_number,
    parse_tuple_numbers,
    parse_year,
    split_packed,
)


def test_split_packed_extracts_numbers() -> None:
    """Ensure basic slash-delimited numbers are parsed correctly."""
    assert split_packed("3/12") == (3, 12)
    assert split_packed("7") == (7, None)
    assert split_packed("/12") == (None, 12)


def test_split_packed_keeps_parseable_side() -> None:
    """A malformed side yields None without discarding the other side."""
    assert split_packed("3/abc") == (3, None)
    assert split_packed("abc") == (None, None)
    assert split_packed("") == (None, None)
    assert split_packed(None) == (None, None)


def test_join_packed_inverts_split() -> None:
    assert join_packed(3, 12) == "3/12"
    assert join_packed(3, None) == "3"
    assert join_packed(None, 12) == "/12"
    assert join_packed(None, None) is None
    assert split_packed(join_packed(3, 12)) == (3, 12)


def test_packed_part_raises_only_for_the_malformed_side() -> None:
    assert packed_part("x/12", 1, "total_tracks") == 12
    with pytest.raises(MalformedFieldError) as excinfo:
        _ = packed_part("x/12", 0, "track_number")
    assert excinfo.value.field == "track_number"
    assert excinfo.value.raw == "x/12"


def test_packed_part_treats_missing_side_as_absent() -> None:
    assert packed_part("3", 1, "total_tracks") is None
    assert packed_part("/12", 0, "track_number") is None
    assert packed_part(None, 0, "track_number") is None


def test_parse_number_accepts_only_digits_in_range() -> None:
    assert parse_number("7", "total_tracks") == 7
    assert parse_number(" ", "total_tracks") is None
    with pytest.raises(MalformedFieldError):
        _ = parse_number("7a", "total_tracks")
    with pytest.raises(MalformedFieldError):
        _ = parse_number("70000", "total_tracks")


def test_parse_tuple_numbers_converts_zeros_to_none() -> None:
    """Tuple values of zero should be normalised to None."""
    assert parse_tuple_numbers([(0, 10)]) == (None, 10)
    assert parse_tuple_numbers([(4, 0)]) == (4, None)
    assert parse_tuple_numbers(None) == (None, None)
    assert parse_tuple_numbers([]) == (None, None)


def test_parse_year_reads_year_and_iso_dates() -> None:
    """The helper should extract the leading year from dates and timestamps."""
    assert parse_year("1999") == 1999
    assert parse_year("2023-04-01") == 2023
    assert parse_year("2001-05-03T10:00:00") == 2001
    assert parse_year("") is None


def test_parse_year_rejects_free_text() -> None:
    with pytest.raises(MalformedFieldError) as excinfo:
        _ = parse_year("soon")
    assert excinfo.value.field == "year"
