"""Format-agnostic audio tag facade.

Read, edit, and convert ID3, MP4, FLAC, and Ogg Vorbis tags through one
interface, with conversions routed through a canonical :class:`TagRecord`.
"""

from tagbridge.config.settings import configure_logging
from tagbridge.features.tags import (
    Album,
    AudioTagPort,
    BaseTagAdapter,
    FlacAdapter,
    Id3Adapter,
    MalformedFieldError,
    MimeType,
    Mp4Adapter,
    OggVorbisAdapter,
    Picture,
    TagConfig,
    TagDispatcher,
    TagError,
    TagField,
    TagIoError,
    TagParseError,
    TagRecord,
    TagType,
    UnrepresentableValueError,
    UnsupportedFormatError,
    UnsupportedMimeTypeError,
    convert,
    detect_and_read,
    from_record,
    to_record,
)

__version__ = "0.1.0"

__all__ = [
    "Album",
    "AudioTagPort",
    "BaseTagAdapter",
    "FlacAdapter",
    "Id3Adapter",
    "MalformedFieldError",
    "MimeType",
    "Mp4Adapter",
    "OggVorbisAdapter",
    "Picture",
    "TagConfig",
    "TagDispatcher",
    "TagError",
    "TagField",
    "TagIoError",
    "TagParseError",
    "TagRecord",
    "TagType",
    "UnrepresentableValueError",
    "UnsupportedFormatError",
    "UnsupportedMimeTypeError",
    "convert",
    "configure_logging",
    "detect_and_read",
    "from_record",
    "to_record",
]
