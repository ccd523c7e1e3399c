# Where: tagbridge.features.tags.__init__
# What: Expose tag adapters, conversion, dispatch, and domain types.
# Why: Provide a cohesive import surface for callers and integration layers.

from .adapters import (
    ADAPTER_TYPES,
    BaseTagAdapter,
    FlacAdapter,
    Id3Adapter,
    Mp4Adapter,
    OggVorbisAdapter,
)
from .domain import (
    Album,
    MalformedFieldError,
    MimeType,
    Picture,
    TagConfig,
    TagError,
    TagField,
    TagIoError,
    TagParseError,
    TagRecord,
    TagType,
    UnrepresentableValueError,
    UnsupportedFormatError,
    UnsupportedMimeTypeError,
)
from .usecases import (
    AudioTagPort,
    TagDispatcher,
    apply_record,
    convert,
    detect_and_read,
    from_record,
    lost_fields,
    to_record,
)

__all__ = [
    "ADAPTER_TYPES",
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
    "apply_record",
    "convert",
    "detect_and_read",
    "from_record",
    "lost_fields",
    "to_record",
]
