"""
Summary: ID3v2 frame adapter backed by mutagen.id3.
Why: Map logical fields onto frame ids, including packed TRCK/TPOS frames.
"""

from __future__ import annotations

from typing import Any, BinaryIO, ClassVar
from typing_extensions import override

from mutagen.id3 import (
    APIC,
    COMM,
    ID3,
    ID3NoHeaderError,
    Encoding,
    Frames,
    PictureType,
    TextFrame,
)

from tagbridge.platform.logging import logger

from ..domain.errors import MalformedFieldError, UnsupportedMimeTypeError
from ..domain.fields import READ_ONLY_FIELDS, TagField
from ..domain.packed import join_packed, packed_part, parse_year
from ..domain.picture import MimeType, Picture
from ..domain.tag_type import TagType
from ._base import BaseTagAdapter

__all__ = ["Id3Adapter"]


class Id3Adapter(BaseTagAdapter[ID3]):
    """Adapter for ID3v2 tags as found in MP3 files."""

    TAG_TYPE: ClassVar[TagType] = TagType.ID3
    SUPPORTED_FIELDS: ClassVar[frozenset[TagField]] = frozenset(TagField) - READ_ONLY_FIELDS

    TEXT_FRAMES: ClassVar[dict[TagField, str]] = {
        TagField.TITLE: "TIT2",
        TagField.ALBUM_TITLE: "TALB",
        TagField.GENRE: "TCON",
        TagField.COMPOSER: "TCOM",
    }
    MULTI_FRAMES: ClassVar[dict[TagField, str]] = {
        TagField.ARTISTS: "TPE1",
        TagField.ALBUM_ARTISTS: "TPE2",
    }
    # field -> (frame id, index inside "number/total", partner field)
    PACKED_FRAMES: ClassVar[dict[TagField, tuple[str, int, TagField]]] = {
        TagField.TRACK_NUMBER: ("TRCK", 0, TagField.TOTAL_TRACKS),
        TagField.TOTAL_TRACKS: ("TRCK", 1, TagField.TRACK_NUMBER),
        TagField.DISC_NUMBER: ("TPOS", 0, TagField.TOTAL_DISCS),
        TagField.TOTAL_DISCS: ("TPOS", 1, TagField.DISC_NUMBER),
    }
    YEAR_FRAME: ClassVar[str] = "TDRC"

    @classmethod
    @override
    def _new_native(cls) -> ID3:
        return ID3()

    @classmethod
    @override
    def _parse(cls, handle: BinaryIO) -> tuple[ID3, float | None]:
        try:
            tags = ID3(handle)
        except ID3NoHeaderError:
            logger.debug(
                "No ID3 header in %s; starting from an empty tag", getattr(handle, "name", handle)
            )
            tags = ID3()
        return tags, cls._length_hint(tags)

    @staticmethod
    def _length_hint(tags: ID3) -> float | None:
        """TLEN carries the length in milliseconds; unparseable values are ignored."""
        for frame in tags.getall("TLEN"):
            for text in frame.text:
                try:
                    return int(str(text)) / 1000.0
                except ValueError:
                    logger.debug("Ignoring non-numeric TLEN %r", text)
        return None

    def _frame_text(self, frame_id: str) -> list[str]:
        return [str(text) for frame in self._native.getall(frame_id) for text in frame.text]

    def _first_text(self, frame_id: str) -> str | None:
        texts = self._frame_text(frame_id)
        return self._text(texts[0]) if texts else None

    def _comment_frames(self) -> list[COMM]:
        return [frame for frame in self._native.getall("COMM") if frame.desc == ""]

    @override
    def _read_field(self, field: TagField) -> object | None:
        if field in self.TEXT_FRAMES:
            return self._first_text(self.TEXT_FRAMES[field])
        if field in self.MULTI_FRAMES:
            values = tuple(text for text in self._frame_text(self.MULTI_FRAMES[field]) if text)
            return values or None
        if field in self.PACKED_FRAMES:
            frame_id, index, _ = self.PACKED_FRAMES[field]
            return packed_part(self._first_text(frame_id), index, field)
        if field is TagField.YEAR:
            return parse_year(self._first_text(self.YEAR_FRAME), field)
        if field is TagField.COMMENT:
            frames = self._comment_frames()
            return self._text(frames[0].text[0]) if frames and frames[0].text else None
        if field is TagField.ALBUM_COVER:
            return self._read_cover()
        return None

    def _read_cover(self) -> Picture | None:
        frames: list[APIC] = self._native.getall("APIC")
        if not frames:
            return None
        front = [frame for frame in frames if frame.type == PictureType.COVER_FRONT]
        frame = (front or frames)[0]
        try:
            mime_type = MimeType.from_mime(frame.mime)
        except UnsupportedMimeTypeError as exc:
            raise MalformedFieldError(TagField.ALBUM_COVER, frame.mime, str(exc)) from exc
        return Picture(data=bytes(frame.data), mime_type=mime_type)

    def _set_text_frame(self, frame_id: str, texts: list[str]) -> None:
        self._native.setall(frame_id, [Frames[frame_id](encoding=Encoding.UTF8, text=texts)])

    def _write_packed(self, field: TagField, number: int | None, total: int | None) -> None:
        frame_id = self.PACKED_FRAMES[field][0]
        text = join_packed(number, total)
        if text is None:
            self._native.delall(frame_id)
        else:
            self._set_text_frame(frame_id, [text])

    def _packed_pair(self, field: TagField, value: int | None) -> tuple[int | None, int | None]:
        _, index, partner = self.PACKED_FRAMES[field]
        other = self._cache.get(partner)
        return (value, other) if index == 0 else (other, value)  # type: ignore[return-value]

    @override
    def _write_field(self, field: TagField, value: Any) -> None:
        if field in self.TEXT_FRAMES:
            self._set_text_frame(self.TEXT_FRAMES[field], [value])
        elif field in self.MULTI_FRAMES:
            self._set_text_frame(self.MULTI_FRAMES[field], list(value))
        elif field in self.PACKED_FRAMES:
            self._write_packed(field, *self._packed_pair(field, value))
        elif field is TagField.YEAR:
            self._set_text_frame(self.YEAR_FRAME, [f"{value:04d}"])
        elif field is TagField.COMMENT:
            self._remove_field(TagField.COMMENT)
            self._native.add(COMM(encoding=Encoding.UTF8, lang="eng", desc="", text=[value]))
        elif field is TagField.ALBUM_COVER:
            for frame in self._native.getall("APIC"):
                if frame.type == PictureType.COVER_FRONT:
                    del self._native[frame.HashKey]
            self._native.add(
                APIC(
                    encoding=Encoding.UTF8,
                    mime=value.mime,
                    type=PictureType.COVER_FRONT,
                    desc="",
                    data=value.data,
                )
            )

    @override
    def _remove_field(self, field: TagField) -> None:
        if field in self.TEXT_FRAMES:
            self._native.delall(self.TEXT_FRAMES[field])
        elif field in self.MULTI_FRAMES:
            self._native.delall(self.MULTI_FRAMES[field])
        elif field in self.PACKED_FRAMES:
            self._write_packed(field, *self._packed_pair(field, None))
        elif field is TagField.YEAR:
            self._native.delall(self.YEAR_FRAME)
        elif field is TagField.COMMENT:
            for frame in self._comment_frames():
                del self._native[frame.HashKey]
        elif field is TagField.ALBUM_COVER:
            self._native.delall("APIC")

    @override
    def _serialize(self, handle: BinaryIO) -> None:
        self._native.save(handle)

    @override
    def _raw_get(self, key: str) -> list[Any]:
        values: list[Any] = []
        for frame in self._native.getall(key):
            if isinstance(frame, TextFrame):
                values.extend(str(text) for text in frame.text)
            else:
                values.append(frame)
        return values

    @override
    def _raw_set(self, key: str, values: list[Any]) -> None:
        frame_cls = Frames.get(key)
        if frame_cls is None or not issubclass(frame_cls, TextFrame):
            raise ValueError(f"Raw ID3 writes support text frames only, got {key!r}")
        self._set_text_frame(key, [str(value) for value in values])

    @override
    def _raw_remove(self, key: str) -> None:
        self._native.delall(key)
