"""Embedded cover art value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedMimeTypeError


class MimeType(Enum):
    """Image MIME types accepted for embedded cover art."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    TIFF = "image/tiff"
    BMP = "image/bmp"
    GIF = "image/gif"

    @classmethod
    def from_mime(cls, mime: str) -> "MimeType":
        """Resolve a MIME string, tolerating case and the legacy ``image/jpg``."""
        normalized = mime.strip().lower()
        if normalized == "image/jpg":
            return cls.JPEG
        for member in cls:
            if member.value == normalized:
                return member
        raise UnsupportedMimeTypeError(f"Unsupported picture MIME type: {mime!r}")


@dataclass(frozen=True)
class Picture:
    """Cover image payload with its MIME type."""

    data: bytes
    mime_type: MimeType

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise TypeError("Picture data must be bytes")

    @property
    def mime(self) -> str:
        return self.mime_type.value


__all__ = ["MimeType", "Picture"]
