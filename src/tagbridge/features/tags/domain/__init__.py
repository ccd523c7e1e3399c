"""
Summary: Domain types for the tag facade.
Why: Offer one import path for records, fields, pictures, formats, and errors.
"""

from .errors import (
    MalformedFieldError,
    TagError,
    TagIoError,
    TagParseError,
    UnrepresentableValueError,
    UnsupportedFormatError,
    UnsupportedMimeTypeError,
)
from .fields import TagField
from .picture import MimeType, Picture
from .record import Album, TagConfig, TagRecord
from .tag_type import SUPPORTED_EXTENSIONS, TagType

__all__ = [
    "Album",
    "MalformedFieldError",
    "MimeType",
    "Picture",
    "SUPPORTED_EXTENSIONS",
    "TagConfig",
    "TagError",
    "TagField",
    "TagIoError",
    "TagParseError",
    "TagRecord",
    "TagType",
    "UnrepresentableValueError",
    "UnsupportedFormatError",
    "UnsupportedMimeTypeError",
]
