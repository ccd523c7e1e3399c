"""
Summary: MP4/iTunes atom adapter backed by mutagen.mp4.
Why: Map logical fields onto atoms, splitting trkn/disk pairs into two fields.
"""

from __future__ import annotations

from typing import Any, BinaryIO, ClassVar
from typing_extensions import override

from mutagen.mp4 import MP4, MP4Cover, MP4Tags

from tagbridge.platform.logging import logger

from ..domain.errors import MalformedFieldError, UnrepresentableValueError
from ..domain.fields import READ_ONLY_FIELDS, TagField
from ..domain.packed import parse_tuple_numbers, parse_year
from ..domain.picture import MimeType, Picture
from ..domain.tag_type import TagType
from ._base import BaseTagAdapter

__all__ = ["Mp4Adapter"]

_COVER_FORMATS: dict[MimeType, int] = {
    MimeType.JPEG: MP4Cover.FORMAT_JPEG,
    MimeType.PNG: MP4Cover.FORMAT_PNG,
}


class Mp4Adapter(BaseTagAdapter[MP4Tags]):
    """Adapter for MP4 metadata atoms (M4A, M4B, MP4 files).

    ``trkn`` and ``disk`` hold ``(number, total)`` pairs where zero means
    absent, so a stored zero reads back as ``None`` and writing zero raises
    ``UnrepresentableValueError``. Cover art is limited to JPEG and PNG.
    """

    TAG_TYPE: ClassVar[TagType] = TagType.MP4
    SUPPORTED_FIELDS: ClassVar[frozenset[TagField]] = frozenset(TagField) - READ_ONLY_FIELDS

    TEXT_ATOMS: ClassVar[dict[TagField, str]] = {
        TagField.TITLE: "\xa9nam",
        TagField.ALBUM_TITLE: "\xa9alb",
        TagField.GENRE: "\xa9gen",
        TagField.COMPOSER: "\xa9wrt",
        TagField.COMMENT: "\xa9cmt",
    }
    MULTI_ATOMS: ClassVar[dict[TagField, str]] = {
        TagField.ARTISTS: "\xa9ART",
        TagField.ALBUM_ARTISTS: "aART",
    }
    PAIR_ATOMS: ClassVar[dict[TagField, tuple[str, int, TagField]]] = {
        TagField.TRACK_NUMBER: ("trkn", 0, TagField.TOTAL_TRACKS),
        TagField.TOTAL_TRACKS: ("trkn", 1, TagField.TRACK_NUMBER),
        TagField.DISC_NUMBER: ("disk", 0, TagField.TOTAL_DISCS),
        TagField.TOTAL_DISCS: ("disk", 1, TagField.DISC_NUMBER),
    }
    YEAR_ATOM: ClassVar[str] = "\xa9day"
    COVER_ATOM: ClassVar[str] = "covr"

    @classmethod
    @override
    def _new_native(cls) -> MP4Tags:
        return MP4Tags()

    @classmethod
    @override
    def _parse(cls, handle: BinaryIO) -> tuple[MP4Tags, float | None]:
        audio = MP4(handle)
        tags = audio.tags if audio.tags is not None else MP4Tags()
        length = getattr(audio.info, "length", None)
        return tags, length

    def _strings(self, atom: str) -> list[str]:
        return [str(value) for value in self._native.get(atom, [])]

    @override
    def _read_field(self, field: TagField) -> object | None:
        if field in self.TEXT_ATOMS:
            values = self._strings(self.TEXT_ATOMS[field])
            return self._text(values[0]) if values else None
        if field in self.MULTI_ATOMS:
            return tuple(value for value in self._strings(self.MULTI_ATOMS[field]) if value) or None
        if field in self.PAIR_ATOMS:
            atom, index, _ = self.PAIR_ATOMS[field]
            return parse_tuple_numbers(self._native.get(atom))[index]
        if field is TagField.YEAR:
            values = self._strings(self.YEAR_ATOM)
            return parse_year(values[0], field) if values else None
        if field is TagField.ALBUM_COVER:
            return self._read_cover()
        return None

    def _read_cover(self) -> Picture | None:
        covers: list[MP4Cover] = list(self._native.get(self.COVER_ATOM, []))
        if not covers:
            return None
        cover = covers[0]
        for mime_type, image_format in _COVER_FORMATS.items():
            if cover.imageformat == image_format:
                return Picture(data=bytes(cover), mime_type=mime_type)
        raise MalformedFieldError(TagField.ALBUM_COVER, cover.imageformat, "unknown cover format")

    def _write_pair(self, field: TagField, value: int | None) -> None:
        atom, index, partner = self.PAIR_ATOMS[field]
        other = self._cache.get(partner)
        number, total = (value, other) if index == 0 else (other, value)
        if number is None and total is None:
            self._drop(atom)
        else:
            self._native[atom] = [(number or 0, total or 0)]  # type: ignore[operator]

    def _drop(self, atom: str) -> None:
        if atom in self._native:
            del self._native[atom]

    @override
    def _write_field(self, field: TagField, value: Any) -> None:
        if field in self.TEXT_ATOMS:
            self._native[self.TEXT_ATOMS[field]] = [value]
        elif field in self.MULTI_ATOMS:
            self._native[self.MULTI_ATOMS[field]] = list(value)
        elif field in self.PAIR_ATOMS:
            if value == 0:
                raise UnrepresentableValueError(
                    f"MP4 {self.PAIR_ATOMS[field][0]} stores 0 as absent; cannot write {field}=0"
                )
            self._write_pair(field, value)
        elif field is TagField.YEAR:
            self._native[self.YEAR_ATOM] = [str(value)]
        elif field is TagField.ALBUM_COVER:
            image_format = _COVER_FORMATS.get(value.mime_type)
            if image_format is None:
                logger.warning(
                    "MP4 cover art must be JPEG or PNG; dropping %s image", value.mime
                )
                return
            self._native[self.COVER_ATOM] = [MP4Cover(value.data, imageformat=image_format)]

    @override
    def _remove_field(self, field: TagField) -> None:
        if field in self.TEXT_ATOMS:
            self._drop(self.TEXT_ATOMS[field])
        elif field in self.MULTI_ATOMS:
            self._drop(self.MULTI_ATOMS[field])
        elif field in self.PAIR_ATOMS:
            self._write_pair(field, None)
        elif field is TagField.YEAR:
            self._drop(self.YEAR_ATOM)
        elif field is TagField.ALBUM_COVER:
            self._drop(self.COVER_ATOM)

    @override
    def _serialize(self, handle: BinaryIO) -> None:
        self._native.save(handle)

    @override
    def _raw_get(self, key: str) -> list[Any]:
        return list(self._native.get(key, []))

    @override
    def _raw_set(self, key: str, values: list[Any]) -> None:
        self._native[key] = values

    @override
    def _raw_remove(self, key: str) -> None:
        self._drop(key)
