"""
Summary: Enumerated tag formats and their file extensions.
Why: Let the dispatcher compare formats by value instead of inspecting types.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class TagType(Enum):
    """Concrete tagging schemes handled by an adapter."""

    ID3 = "id3"
    MP4 = "mp4"
    FLAC = "flac"
    VORBIS = "vorbis"

    @classmethod
    def from_extension(cls, extension: str) -> "TagType | None":
        """Map a file extension (with or without the dot) to a tag type."""
        normalized = extension.lower().lstrip(".")
        value = _EXTENSION_MAP.get(normalized)
        return cls(value) if value is not None else None

    @classmethod
    def from_path(cls, path: Path | str) -> "TagType | None":
        return cls.from_extension(Path(path).suffix)


_EXTENSION_MAP: dict[str, str] = {
    "mp3": "id3",
    "m4a": "mp4",
    "m4b": "mp4",
    "m4p": "mp4",
    "m4v": "mp4",
    "mp4": "mp4",
    "isom": "mp4",
    "flac": "flac",
    "ogg": "vorbis",
    "oga": "vorbis",
}

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(f".{ext}" for ext in _EXTENSION_MAP)


__all__ = ["TagType", "SUPPORTED_EXTENSIONS"]
