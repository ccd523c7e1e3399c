"""
Summary: Exception hierarchy for tag reading, conversion, and writing.
Why: Give callers one base class to catch while keeping failure kinds distinct.
"""

from __future__ import annotations


class TagError(Exception):
    """Base exception for all tag facade errors."""


class TagIoError(TagError, OSError):
    """Raised when a file cannot be opened, read, or written."""


class TagParseError(TagError):
    """Raised when the format parser rejects the byte stream."""


class UnsupportedFormatError(TagError, ValueError):
    """Raised when no adapter matches a file's extension or header."""


class UnsupportedMimeTypeError(TagError, ValueError):
    """Raised for picture MIME types outside the supported set."""


class UnrepresentableValueError(TagError, ValueError):
    """Raised when a format cannot store a value exactly, so it would not read back."""


class MalformedFieldError(TagError, ValueError):
    """Raised when one field's native text does not parse as its expected type."""

    def __init__(self, field: str, raw: object, reason: str | None = None) -> None:
        self.field = field
        self.raw = raw
        detail = f": {reason}" if reason else ""
        super().__init__(f"Malformed {field} value {raw!r}{detail}")


__all__ = [
    "TagError",
    "TagIoError",
    "TagParseError",
    "UnsupportedFormatError",
    "UnsupportedMimeTypeError",
    "MalformedFieldError",
    "UnrepresentableValueError",
]
