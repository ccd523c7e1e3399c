"""Vorbis comment adapters.

Where: src/tagbridge/features/tags/adapters/vorbis_adapter.py
What: Shared key/value comment mapping plus the FLAC and Ogg Vorbis adapters.
Why: Both formats store the same comment header; they differ in capability set and container.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field as dataclass_field
from typing import Any, BinaryIO, ClassVar, TypeVar
from typing_extensions import override

from mutagen._vorbis import VCommentDict
from mutagen.flac import FLAC, VCFLACDict
from mutagen.flac import Picture as FlacPicture
from mutagen.id3 import PictureType
from mutagen.oggvorbis import OggVorbis

from ..domain.errors import (
    MalformedFieldError,
    UnrepresentableValueError,
    UnsupportedMimeTypeError,
)
from ..domain.fields import READ_ONLY_FIELDS, TagField
from ..domain.packed import packed_part, parse_number, parse_year
from ..domain.picture import MimeType, Picture
from ..domain.tag_type import TagType
from ._base import BaseTagAdapter

__all__ = ["FlacAdapter", "FlacNative", "OggVorbisAdapter", "VorbisCommentAdapter"]

NativeT = TypeVar("NativeT")


class VorbisCommentAdapter(BaseTagAdapter[NativeT]):
    """Base class mapping logical fields onto Vorbis comment keys.

    Key tuples list the key written first, followed by aliases that are read
    as fallbacks and removed on write.
    """

    TEXT_KEYS: ClassVar[dict[TagField, tuple[str, ...]]] = {}
    # Repeated entries, one value each.
    MULTI_KEYS: ClassVar[dict[TagField, str]] = {}
    # Repeated entries, each of which may also hold separator-joined values.
    SPLIT_KEYS: ClassVar[dict[TagField, str]] = {}
    # Position keys that may hold a packed "number/total" value.
    POSITION_KEYS: ClassVar[dict[TagField, tuple[str, TagField]]] = {}
    # Standalone totals, with the position field whose packed text is the fallback.
    TOTAL_KEYS: ClassVar[dict[TagField, tuple[tuple[str, ...], TagField]]] = {}
    YEAR_KEY: ClassVar[str] = "DATE"

    @property
    @abc.abstractmethod
    def _comments(self) -> VCommentDict:
        raise NotImplementedError

    def _values(self, key: str) -> list[str]:
        comments = self._comments
        return [str(value) for value in comments[key]] if key in comments else []

    def _first(self, *keys: str) -> str | None:
        for key in keys:
            values = self._values(key)
            if values:
                return values[0]
        return None

    def _put(self, key: str, values: list[str]) -> None:
        self._comments[key] = values

    def _drop(self, *keys: str) -> None:
        comments = self._comments
        for key in keys:
            if key in comments:
                del comments[key]

    def _read_cover(self) -> Picture | None:
        return None

    def _write_cover(self, picture: Picture | None) -> None:
        return None

    def _position_key_for_total(self, field: TagField) -> str:
        position = self.TOTAL_KEYS[field][1]
        return self.POSITION_KEYS[position][0]

    @override
    def _read_field(self, field: TagField) -> object | None:
        if field in self.TEXT_KEYS:
            return self._text(self._first(*self.TEXT_KEYS[field]))
        if field in self.MULTI_KEYS:
            return tuple(value for value in self._values(self.MULTI_KEYS[field]) if value) or None
        if field in self.SPLIT_KEYS:
            parts = [
                part
                for value in self._values(self.SPLIT_KEYS[field])
                for part in (self._config.split(value) or ())
            ]
            return tuple(parts) or None
        if field in self.POSITION_KEYS:
            return packed_part(self._first(self.POSITION_KEYS[field][0]), 0, field)
        if field in self.TOTAL_KEYS:
            keys, _ = self.TOTAL_KEYS[field]
            explicit = self._first(*keys)
            if explicit is not None and explicit.strip():
                return parse_number(explicit, field)
            return packed_part(self._first(self._position_key_for_total(field)), 1, field)
        if field is TagField.YEAR:
            return parse_year(self._first(self.YEAR_KEY), field)
        if field is TagField.ALBUM_COVER:
            return self._read_cover()
        return None

    def _write_position(self, field: TagField, value: int | None) -> None:
        """Write a position key, moving any packed total into its own key first."""
        key, total_field = self.POSITION_KEYS[field]
        if total_field in self.SUPPORTED_FIELDS:
            total = self._cache.get(total_field)
            total_keys = self.TOTAL_KEYS[total_field][0]
            if total is not None and self._first(*total_keys) is None:
                self._put(total_keys[0], [str(total)])
        if value is None:
            self._drop(key)
        else:
            self._put(key, [str(value)])

    def _write_total(self, field: TagField, value: int | None) -> None:
        """Write a total key and strip the denominator from a packed position."""
        keys, position_field = self.TOTAL_KEYS[field]
        position_key = self.POSITION_KEYS[position_field][0]
        packed = self._first(position_key)
        if packed is not None and "/" in packed:
            number = self._cache.get(position_field)
            if number is None:
                self._drop(position_key)
            else:
                self._put(position_key, [str(number)])
        self._drop(*keys)
        if value is not None:
            self._put(keys[0], [str(value)])

    @override
    def _write_field(self, field: TagField, value: Any) -> None:
        if field in self.TEXT_KEYS:
            keys = self.TEXT_KEYS[field]
            self._drop(*keys[1:])
            self._put(keys[0], [value])
        elif field in self.MULTI_KEYS:
            self._put(self.MULTI_KEYS[field], list(value))
        elif field in self.SPLIT_KEYS:
            separator = self._config.artist_separator
            if self._config.split_artists and any(separator in item for item in value):
                raise UnrepresentableValueError(
                    f"{field} value {value!r} contains the separator {separator!r} "
                    "and would read back as more entries"
                )
            self._put(self.SPLIT_KEYS[field], list(value))
        elif field in self.POSITION_KEYS:
            self._write_position(field, value)
        elif field in self.TOTAL_KEYS:
            self._write_total(field, value)
        elif field is TagField.YEAR:
            self._put(self.YEAR_KEY, [str(value)])
        elif field is TagField.ALBUM_COVER:
            self._write_cover(value)

    @override
    def _remove_field(self, field: TagField) -> None:
        if field in self.TEXT_KEYS:
            self._drop(*self.TEXT_KEYS[field])
        elif field in self.MULTI_KEYS:
            self._drop(self.MULTI_KEYS[field])
        elif field in self.SPLIT_KEYS:
            self._drop(self.SPLIT_KEYS[field])
        elif field in self.POSITION_KEYS:
            self._write_position(field, None)
        elif field in self.TOTAL_KEYS:
            self._write_total(field, None)
        elif field is TagField.YEAR:
            self._drop(self.YEAR_KEY)
        elif field is TagField.ALBUM_COVER:
            self._write_cover(None)

    def _copy_comments_into(self, target: VCommentDict) -> None:
        """Replace every entry of ``target`` with this adapter's comments."""
        for key in list(target.keys()):
            del target[key]
        for key, value in list(self._comments):
            target.append((key, value))

    @override
    def _raw_get(self, key: str) -> list[Any]:
        return list(self._values(key))

    @override
    def _raw_set(self, key: str, values: list[Any]) -> None:
        self._put(key, [str(value) for value in values])

    @override
    def _raw_remove(self, key: str) -> None:
        self._drop(key)


@dataclass
class FlacNative:
    """FLAC metadata owned by the adapter: the comment block and picture blocks."""

    comments: VCFLACDict = dataclass_field(default_factory=VCFLACDict)
    pictures: list[FlacPicture] = dataclass_field(default_factory=list)


class FlacAdapter(VorbisCommentAdapter[FlacNative]):
    """Adapter for FLAC files: full Vorbis comment set plus PICTURE blocks."""

    TAG_TYPE: ClassVar[TagType] = TagType.FLAC
    SUPPORTED_FIELDS: ClassVar[frozenset[TagField]] = frozenset(TagField) - READ_ONLY_FIELDS

    TEXT_KEYS: ClassVar[dict[TagField, tuple[str, ...]]] = {
        TagField.TITLE: ("TITLE",),
        TagField.ALBUM_TITLE: ("ALBUM",),
        TagField.GENRE: ("GENRE",),
        TagField.COMPOSER: ("COMPOSER",),
        TagField.COMMENT: ("COMMENT", "DESCRIPTION"),
    }
    MULTI_KEYS: ClassVar[dict[TagField, str]] = {
        TagField.ARTISTS: "ARTIST",
        TagField.ALBUM_ARTISTS: "ALBUMARTIST",
    }
    POSITION_KEYS: ClassVar[dict[TagField, tuple[str, TagField]]] = {
        TagField.TRACK_NUMBER: ("TRACKNUMBER", TagField.TOTAL_TRACKS),
        TagField.DISC_NUMBER: ("DISCNUMBER", TagField.TOTAL_DISCS),
    }
    TOTAL_KEYS: ClassVar[dict[TagField, tuple[tuple[str, ...], TagField]]] = {
        TagField.TOTAL_TRACKS: (("TRACKTOTAL", "TOTALTRACKS"), TagField.TRACK_NUMBER),
        TagField.TOTAL_DISCS: (("DISCTOTAL", "TOTALDISCS"), TagField.DISC_NUMBER),
    }

    @classmethod
    @override
    def _new_native(cls) -> FlacNative:
        return FlacNative()

    @classmethod
    @override
    def _parse(cls, handle: BinaryIO) -> tuple[FlacNative, float | None]:
        audio = FLAC(handle)
        comments = audio.tags if audio.tags is not None else VCFLACDict()
        native = FlacNative(comments=comments, pictures=list(audio.pictures))
        return native, getattr(audio.info, "length", None)

    @property
    @override
    def _comments(self) -> VCommentDict:
        return self._native.comments

    @override
    def _read_cover(self) -> Picture | None:
        pictures = self._native.pictures
        if not pictures:
            return None
        front = [picture for picture in pictures if picture.type == PictureType.COVER_FRONT]
        picture = (front or pictures)[0]
        try:
            mime_type = MimeType.from_mime(picture.mime)
        except UnsupportedMimeTypeError as exc:
            raise MalformedFieldError(TagField.ALBUM_COVER, picture.mime, str(exc)) from exc
        return Picture(data=bytes(picture.data), mime_type=mime_type)

    @override
    def _write_cover(self, picture: Picture | None) -> None:
        if picture is None:
            self._native.pictures.clear()
            return
        block = FlacPicture()
        block.type = PictureType.COVER_FRONT
        block.mime = picture.mime
        block.desc = ""
        block.data = picture.data
        kept = [p for p in self._native.pictures if p.type != PictureType.COVER_FRONT]
        self._native.pictures[:] = [block, *kept]

    @override
    def _serialize(self, handle: BinaryIO) -> None:
        audio = FLAC(handle)
        if audio.tags is None:
            audio.add_tags()
        self._copy_comments_into(audio.tags)
        audio.clear_pictures()
        for picture in self._native.pictures:
            audio.add_picture(picture)
        _ = handle.seek(0)
        audio.save(handle)


class OggVorbisAdapter(VorbisCommentAdapter[VCommentDict]):
    """Adapter for Ogg Vorbis comment headers.

    Only a minimal key set is mapped: artists are repeated ARTIST entries
    and the comment lives in DESCRIPTION. A single ARTIST entry holding
    separator-joined names still reads as several artists. Album artist,
    composer, cover art, totals and disc numbers are not stored.
    """

    TAG_TYPE: ClassVar[TagType] = TagType.VORBIS
    SUPPORTED_FIELDS: ClassVar[frozenset[TagField]] = frozenset(
        {
            TagField.TITLE,
            TagField.ARTISTS,
            TagField.ALBUM_TITLE,
            TagField.YEAR,
            TagField.TRACK_NUMBER,
            TagField.GENRE,
            TagField.COMMENT,
        }
    )

    TEXT_KEYS: ClassVar[dict[TagField, tuple[str, ...]]] = {
        TagField.TITLE: ("TITLE",),
        TagField.ALBUM_TITLE: ("ALBUM",),
        TagField.GENRE: ("GENRE",),
        TagField.COMMENT: ("DESCRIPTION",),
    }
    SPLIT_KEYS: ClassVar[dict[TagField, str]] = {TagField.ARTISTS: "ARTIST"}
    POSITION_KEYS: ClassVar[dict[TagField, tuple[str, TagField]]] = {
        TagField.TRACK_NUMBER: ("TRACKNUMBER", TagField.TOTAL_TRACKS),
    }

    @classmethod
    @override
    def _new_native(cls) -> VCommentDict:
        return VCommentDict()

    @classmethod
    @override
    def _parse(cls, handle: BinaryIO) -> tuple[VCommentDict, float | None]:
        audio = OggVorbis(handle)
        comments = audio.tags if audio.tags is not None else VCommentDict()
        return comments, getattr(audio.info, "length", None)

    @property
    @override
    def _comments(self) -> VCommentDict:
        return self._native

    @override
    def _serialize(self, handle: BinaryIO) -> None:
        audio = OggVorbis(handle)
        if audio.tags is None:
            audio.add_tags()
        self._copy_comments_into(audio.tags)
        _ = handle.seek(0)
        audio.save(handle)
