"""
Summary: Concrete tag adapters and the tag-type registry.
Why: Give the dispatcher one table from TagType to adapter class.
"""

from __future__ import annotations

from typing import Any, Final

from ..domain.tag_type import TagType
from ._base import BaseTagAdapter, TagFieldProperty
from .id3_adapter import Id3Adapter
from .mp4_adapter import Mp4Adapter
from .vorbis_adapter import FlacAdapter, FlacNative, OggVorbisAdapter, VorbisCommentAdapter

ADAPTER_TYPES: Final[dict[TagType, type[BaseTagAdapter[Any]]]] = {
    TagType.ID3: Id3Adapter,
    TagType.MP4: Mp4Adapter,
    TagType.FLAC: FlacAdapter,
    TagType.VORBIS: OggVorbisAdapter,
}

__all__ = [
    "ADAPTER_TYPES",
    "BaseTagAdapter",
    "FlacAdapter",
    "FlacNative",
    "Id3Adapter",
    "Mp4Adapter",
    "OggVorbisAdapter",
    "TagFieldProperty",
    "VorbisCommentAdapter",
]
