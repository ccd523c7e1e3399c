# Where: tagbridge.features.tags.domain.record
# What: Canonical, format-neutral tag record and its multi-value policy.
# Why: Every cross-format conversion passes through this snapshot.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .fields import TagField
from .picture import Picture

DEFAULT_ARTIST_SEPARATOR = ";"


@dataclass(frozen=True)
class TagConfig:
    """Policy for collapsing and expanding multi-valued fields.

    Attributes:
        artist_separator: Delimiter used when several artists share one text slot.
        split_artists: Whether a single delimited string expands into several artists.
    """

    artist_separator: str = DEFAULT_ARTIST_SEPARATOR
    split_artists: bool = True

    def __post_init__(self) -> None:
        if not self.artist_separator:
            raise ValueError("artist_separator must not be empty")

    def join(self, values: Iterable[str]) -> str | None:
        """Collapse values into one string, or ``None`` when there are none."""
        items = list(values)
        return self.artist_separator.join(items) if items else None

    def split(self, value: str | None) -> tuple[str, ...] | None:
        """Expand a delimited string; parts are kept verbatim so join is exact."""
        if not value:
            return None
        if not self.split_artists:
            return (value,)
        return tuple(value.split(self.artist_separator))


@dataclass(frozen=True)
class Album:
    """Album-level view over title, album artists, and cover."""

    title: str | None = None
    artists: tuple[str, ...] | None = None
    cover: Picture | None = None


@dataclass
class TagRecord:
    """Metadata for a track, independent of any tag format.

    ``None`` means the value is absent. Whether a format can store a field is
    a property of the adapter, never of the record.
    """

    title: str | None = None
    artists: tuple[str, ...] | None = None
    album_title: str | None = None
    album_artists: tuple[str, ...] | None = None
    year: int | None = None
    track_number: int | None = None
    total_tracks: int | None = None
    disc_number: int | None = None
    total_discs: int | None = None
    genre: str | None = None
    composer: str | None = None
    comment: str | None = None
    album_cover: Picture | None = None
    duration: float | None = None
    config: TagConfig = field(default_factory=TagConfig)

    def get(self, name: TagField) -> object | None:
        """Return the value stored for a logical field."""
        return getattr(self, TagField(name).value)

    def present_fields(self) -> list[TagField]:
        """Fields holding a value, in declaration order."""
        return [f for f in TagField if self.get(f) is not None]

    @property
    def artist(self) -> str | None:
        """Artists joined with the configured separator."""
        return self.config.join(self.artists or ())

    @property
    def album_artist(self) -> str | None:
        return self.config.join(self.album_artists or ())

    @property
    def album(self) -> Album | None:
        if self.album_title is None and self.album_artists is None and self.album_cover is None:
            return None
        return Album(title=self.album_title, artists=self.album_artists, cover=self.album_cover)


__all__ = ["Album", "TagConfig", "TagRecord", "DEFAULT_ARTIST_SEPARATOR"]
