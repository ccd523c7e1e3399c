"""
Summary: Logical metadata field names shared by records and adapters.
Why: Keep one authoritative list so conversions cover every field.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class TagField(StrEnum):
    """Logical metadata fields of the canonical record."""

    TITLE = "title"
    ARTISTS = "artists"
    ALBUM_TITLE = "album_title"
    ALBUM_ARTISTS = "album_artists"
    YEAR = "year"
    TRACK_NUMBER = "track_number"
    TOTAL_TRACKS = "total_tracks"
    DISC_NUMBER = "disc_number"
    TOTAL_DISCS = "total_discs"
    GENRE = "genre"
    COMPOSER = "composer"
    COMMENT = "comment"
    ALBUM_COVER = "album_cover"
    DURATION = "duration"


TEXT_FIELDS: Final[frozenset[TagField]] = frozenset(
    {
        TagField.TITLE,
        TagField.ALBUM_TITLE,
        TagField.GENRE,
        TagField.COMPOSER,
        TagField.COMMENT,
    }
)

MULTI_VALUE_FIELDS: Final[frozenset[TagField]] = frozenset(
    {TagField.ARTISTS, TagField.ALBUM_ARTISTS}
)

# Track and disc positions; stored as unsigned 16-bit values by MP4.
NUMBER_FIELDS: Final[frozenset[TagField]] = frozenset(
    {
        TagField.TRACK_NUMBER,
        TagField.TOTAL_TRACKS,
        TagField.DISC_NUMBER,
        TagField.TOTAL_DISCS,
    }
)

READ_ONLY_FIELDS: Final[frozenset[TagField]] = frozenset({TagField.DURATION})

WRITABLE_FIELDS: Final[tuple[TagField, ...]] = tuple(
    field for field in TagField if field not in READ_ONLY_FIELDS
)

NUMBER_MIN: Final[int] = 0
NUMBER_MAX: Final[int] = 65535
YEAR_MIN: Final[int] = 0
YEAR_MAX: Final[int] = 9999


__all__ = [
    "TagField",
    "TEXT_FIELDS",
    "MULTI_VALUE_FIELDS",
    "NUMBER_FIELDS",
    "READ_ONLY_FIELDS",
    "WRITABLE_FIELDS",
    "NUMBER_MIN",
    "NUMBER_MAX",
    "YEAR_MIN",
    "YEAR_MAX",
]
