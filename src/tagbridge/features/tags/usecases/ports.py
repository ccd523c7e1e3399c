"""
Summary: Tag facade port implemented by every format adapter.
Why: Let callers edit tags without knowing which format backs them.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from ..domain.fields import TagField
from ..domain.picture import Picture
from ..domain.record import Album, TagConfig
from ..domain.tag_type import TagType


@runtime_checkable
class AudioTagPort(Protocol):
    """Capability set shared by all tag adapters.

    Field attributes read ``None`` when absent or unsupported; assigning
    ``None`` or using ``del`` removes the value.
    """

    title: str | None
    artists: tuple[str, ...] | None
    album_title: str | None
    album_artists: tuple[str, ...] | None
    year: int | None
    track_number: int | None
    total_tracks: int | None
    disc_number: int | None
    total_discs: int | None
    genre: str | None
    composer: str | None
    comment: str | None
    album_cover: Picture | None

    @property
    def tag_type(self) -> TagType:
        """Format backing this adapter."""
        ...

    @property
    def config(self) -> TagConfig:
        """Multi-value policy used by the adapter."""
        ...

    @property
    def duration(self) -> float | None:
        """Informational duration in seconds; never written."""
        ...

    @property
    def artist(self) -> str | None:
        """Artists joined with the configured separator."""
        ...

    @property
    def album(self) -> Album | None:
        """Album view over title, album artists, and cover."""
        ...

    def supports(self, field: TagField | str) -> bool:
        """Return True if the format can store ``field``."""
        ...

    def get(self, field: TagField | str) -> object | None:
        """Read a logical field."""
        ...

    def set(self, field: TagField | str, value: object) -> None:
        """Write a logical field through to the native structure."""
        ...

    def remove(self, field: TagField | str) -> None:
        """Delete a logical field from the native structure."""
        ...

    def write_to(self, handle: BinaryIO) -> None:
        """Serialize the tag into an open, writable file."""
        ...

    def write_to_path(self, path: Path | str) -> None:
        """Open ``path`` for update and serialize the tag into it."""
        ...


__all__ = ["AudioTagPort"]
