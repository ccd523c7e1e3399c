"""Tag format detection and dispatch.

Where: src/tagbridge/features/tags/usecases/dispatcher.py
What: Select the adapter for a file and convert adapters between formats.
Why: Callers work with any supported file without knowing its tag format.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Final

from mutagen import FileType
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggvorbis import OggVorbis

from tagbridge.platform.logging import logger

from ..adapters import ADAPTER_TYPES, BaseTagAdapter
from ..domain.errors import TagIoError, UnsupportedFormatError
from ..domain.record import TagConfig
from ..domain.tag_type import TagType
from .conversion import from_record, lost_fields, to_record

__all__ = ["TagDispatcher", "convert", "detect_and_read"]

SNIFF_HEADER_SIZE: Final[int] = 128


class TagDispatcher:
    """Facade for reading tags from audio files of any supported format.

    Detection order: the forced ``tag_type``, then the file extension, then
    mutagen's header scoring for each supported container.
    """

    # Containers whose ``score`` hook recognises each tag format by header bytes.
    SNIFFERS: ClassVar[tuple[tuple[type[FileType], TagType], ...]] = (
        (MP3, TagType.ID3),
        (MP4, TagType.MP4),
        (FLAC, TagType.FLAC),
        (OggVorbis, TagType.VORBIS),
    )

    def __init__(
        self,
        *,
        tag_type: TagType | None = None,
        config: TagConfig | None = None,
        strict: bool | None = None,
    ) -> None:
        self._tag_type: TagType | None = tag_type
        self._config: TagConfig | None = config
        self._strict: bool | None = strict

    def detect(self, path: Path | str) -> TagType:
        """Determine the tag format of ``path``.

        Raises:
            UnsupportedFormatError: If neither extension nor header match.
            TagIoError: If the header has to be sniffed and the file cannot be read.
        """
        if self._tag_type is not None:
            return self._tag_type

        file_path = Path(path)
        by_extension = TagType.from_path(file_path)
        if by_extension is not None:
            return by_extension

        sniffed = self._sniff(file_path)
        if sniffed is None:
            logger.warning("No tag format matches %s", file_path)
            raise UnsupportedFormatError(f"Unsupported file format: {file_path}")
        logger.debug("Detected %s tag in %s from header bytes", sniffed.value, file_path)
        return sniffed

    def _sniff(self, file_path: Path) -> TagType | None:
        try:
            with open(file_path, "rb") as handle:
                header = handle.read(SNIFF_HEADER_SIZE)
                scores = [
                    (file_class.score(str(file_path), handle, header), tag_type)
                    for file_class, tag_type in self.SNIFFERS
                ]
        except OSError as exc:
            logger.error("Failed to read header of %s: %s", file_path, exc)
            raise TagIoError(f"Cannot read {file_path}: {exc}") from exc

        best_score, best_type = max(scores, key=lambda item: item[0])
        return best_type if best_score > 0 else None

    def read_from_path(self, path: Path | str) -> BaseTagAdapter[Any]:
        """Detect the format of ``path`` and parse its tag."""
        return self.detect_and_read(path)[0]

    def detect_and_read(self, path: Path | str) -> tuple[BaseTagAdapter[Any], TagType]:
        """Detect the format of ``path`` and return its adapter with the tag type."""
        tag_type = self.detect(path)
        adapter = ADAPTER_TYPES[tag_type].read_from_path(
            path, config=self._config, strict=self._strict
        )
        return adapter, tag_type

    def new_tag(self, tag_type: TagType) -> BaseTagAdapter[Any]:
        """Create an empty adapter of ``tag_type``."""
        return ADAPTER_TYPES[tag_type](config=self._config, strict=self._strict)

    def convert(self, adapter: BaseTagAdapter[Any], target: TagType) -> BaseTagAdapter[Any]:
        """Return ``adapter`` as ``target``; the same object when formats already match."""
        if adapter.tag_type is target:
            return adapter

        record = to_record(adapter)
        dropped = lost_fields(record, target)
        if dropped:
            logger.info(
                "Converting %s to %s drops %s",
                adapter.tag_type.value,
                target.value,
                ", ".join(field.value for field in dropped),
            )
        return from_record(record, target, strict=self._strict)


def detect_and_read(
    path: Path | str,
    *,
    config: TagConfig | None = None,
    strict: bool | None = None,
) -> tuple[BaseTagAdapter[Any], TagType]:
    """Module-level shortcut for :meth:`TagDispatcher.detect_and_read`."""
    return TagDispatcher(config=config, strict=strict).detect_and_read(path)


def convert(adapter: BaseTagAdapter[Any], target: TagType) -> BaseTagAdapter[Any]:
    """Module-level shortcut for :meth:`TagDispatcher.convert`."""
    return TagDispatcher(config=adapter.config, strict=adapter.strict).convert(adapter, target)
