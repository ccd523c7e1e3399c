"""Shared base class for format adapters.

Where: src/tagbridge/features/tags/adapters/_base.py
What: Field validation, cached projection, capability gaps, and file I/O plumbing.
Why: Each format only maps logical fields onto its native keys; the rest lives here.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable
from pathlib import Path
from typing import Any, BinaryIO, ClassVar, Generic, Self, TypeVar

from mutagen import MutagenError

from tagbridge.config.settings import ARTIST_SEPARATOR, SPLIT_ARTISTS, STRICT_FIELDS
from tagbridge.platform.logging import logger

from ..domain.errors import MalformedFieldError, TagIoError, TagParseError
from ..domain.fields import (
    MULTI_VALUE_FIELDS,
    NUMBER_FIELDS,
    NUMBER_MAX,
    NUMBER_MIN,
    READ_ONLY_FIELDS,
    TEXT_FIELDS,
    YEAR_MAX,
    YEAR_MIN,
    TagField,
)
from ..domain.picture import Picture
from ..domain.record import Album, TagConfig
from ..domain.tag_type import TagType

NativeT = TypeVar("NativeT")

__all__ = ["BaseTagAdapter", "TagFieldProperty", "coerce_field", "normalize_value"]


def coerce_field(field: TagField | str) -> TagField:
    """Resolve a field name, raising ``ValueError`` for unknown names."""
    try:
        return TagField(field)
    except ValueError:
        raise ValueError(f"Unknown tag field: {field!r}") from None


def _check_int(field: TagField, value: object, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{field} must be within {low}..{high}, got {value}")
    return value


def normalize_value(field: TagField, value: object) -> object | None:
    """Validate a value for ``field``; ``None`` means "remove the field"."""
    if value is None:
        return None
    if field in TEXT_FIELDS:
        if not isinstance(value, str):
            raise TypeError(f"{field} must be a str, got {type(value).__name__}")
        return value or None
    if field in MULTI_VALUE_FIELDS:
        if isinstance(value, str):
            items: Iterable[object] = (value,)
        elif isinstance(value, Iterable):
            items = value
        else:
            raise TypeError(f"{field} must be a str or an iterable of str")
        values: list[str] = []
        for item in items:
            if not isinstance(item, str):
                raise TypeError(f"{field} entries must be str, got {type(item).__name__}")
            if item:
                values.append(item)
        return tuple(values) or None
    if field in NUMBER_FIELDS:
        return _check_int(field, value, NUMBER_MIN, NUMBER_MAX)
    if field is TagField.YEAR:
        return _check_int(field, value, YEAR_MIN, YEAR_MAX)
    if field is TagField.ALBUM_COVER:
        if not isinstance(value, Picture):
            raise TypeError(f"{field} must be a Picture, got {type(value).__name__}")
        return value
    raise ValueError(f"{field} is read-only")


class TagFieldProperty:
    """Attribute access mapped onto ``get``/``set``/``remove`` of one field."""

    def __init__(self, field: TagField) -> None:
        self.field = field

    def __get__(self, obj: "BaseTagAdapter[Any] | None", objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.get(self.field)

    def __set__(self, obj: "BaseTagAdapter[Any]", value: object) -> None:
        obj.set(self.field, value)

    def __delete__(self, obj: "BaseTagAdapter[Any]") -> None:
        obj.remove(self.field)


class BaseTagAdapter(abc.ABC, Generic[NativeT]):
    """Base class for format adapters wrapping one native tag structure.

    The adapter keeps a projection of every supported field. All mutation goes
    through :meth:`set`, :meth:`remove`, or the ``*_raw`` methods, each of which
    writes the native structure first and then re-derives the projection, so
    the two never diverge.
    """

    TAG_TYPE: ClassVar[TagType]
    SUPPORTED_FIELDS: ClassVar[frozenset[TagField]]

    title = TagFieldProperty(TagField.TITLE)
    artists = TagFieldProperty(TagField.ARTISTS)
    album_title = TagFieldProperty(TagField.ALBUM_TITLE)
    album_artists = TagFieldProperty(TagField.ALBUM_ARTISTS)
    year = TagFieldProperty(TagField.YEAR)
    track_number = TagFieldProperty(TagField.TRACK_NUMBER)
    total_tracks = TagFieldProperty(TagField.TOTAL_TRACKS)
    disc_number = TagFieldProperty(TagField.DISC_NUMBER)
    total_discs = TagFieldProperty(TagField.TOTAL_DISCS)
    genre = TagFieldProperty(TagField.GENRE)
    composer = TagFieldProperty(TagField.COMPOSER)
    comment = TagFieldProperty(TagField.COMMENT)
    album_cover = TagFieldProperty(TagField.ALBUM_COVER)

    def __init__(
        self,
        native: NativeT | None = None,
        *,
        config: TagConfig | None = None,
        strict: bool | None = None,
        duration: float | None = None,
    ) -> None:
        self._native: NativeT = native if native is not None else self._new_native()
        self._config: TagConfig = config or TagConfig(
            artist_separator=ARTIST_SEPARATOR, split_artists=SPLIT_ARTISTS
        )
        self.strict: bool = STRICT_FIELDS if strict is None else strict
        self._duration: float | None = duration if duration and duration > 0 else None
        self._cache: dict[TagField, object] = {}
        self._malformed: dict[TagField, MalformedFieldError] = {}
        self._sync()

    # -- construction ---------------------------------------------------------

    @classmethod
    def read_from_path(
        cls,
        path: Path | str,
        *,
        config: TagConfig | None = None,
        strict: bool | None = None,
    ) -> Self:
        """Parse the tag stored in ``path``.

        Raises:
            TagIoError: If the file cannot be opened.
            TagParseError: If mutagen rejects the byte stream.
            MalformedFieldError: In strict mode, if any field is malformed.
        """
        file_path = Path(path)
        try:
            handle = open(file_path, "rb")
        except OSError as exc:
            logger.error("Failed to open %s: %s", file_path, exc)
            raise TagIoError(f"Cannot open {file_path}: {exc}") from exc

        with handle:
            try:
                native, duration = cls._parse(handle)
            except MutagenError as exc:
                logger.error(
                    "Failed to parse %s tag from %s: %s", cls.TAG_TYPE.value, file_path, exc
                )
                raise TagParseError(
                    f"Cannot parse {cls.TAG_TYPE.value} tag from {file_path}: {exc}"
                ) from exc

        adapter = cls(native, config=config, strict=strict, duration=duration)
        logger.debug(
            "read %d field(s)",
            len(adapter._cache),
            extra={
                "tag_event": "tag.read",
                "tag_type": cls.TAG_TYPE.value,
                "source_path": str(file_path),
            },
        )
        return adapter

    # -- introspection --------------------------------------------------------

    @property
    def tag_type(self) -> TagType:
        return self.TAG_TYPE

    @property
    def config(self) -> TagConfig:
        return self._config

    @property
    def duration(self) -> float | None:
        return self._duration

    @property
    def malformed_fields(self) -> dict[TagField, MalformedFieldError]:
        """Fields whose native value failed to parse and now read as absent."""
        return dict(self._malformed)

    def supports(self, field: TagField | str) -> bool:
        return coerce_field(field) in self.SUPPORTED_FIELDS

    # -- logical fields -------------------------------------------------------

    def get(self, field: TagField | str) -> object | None:
        name = coerce_field(field)
        if name is TagField.DURATION:
            return self._duration
        return self._cache.get(name)

    def set(self, field: TagField | str, value: object) -> None:
        name = self._writable(field)
        normalized = normalize_value(name, value)
        if normalized is None:
            self.remove(name)
            return
        if name not in self.SUPPORTED_FIELDS:
            logger.debug("%s tags cannot store %s; ignoring", self.TAG_TYPE.value, name)
            return
        self._write_field(name, normalized)
        self._sync()

    def remove(self, field: TagField | str) -> None:
        name = self._writable(field)
        if name not in self.SUPPORTED_FIELDS:
            return
        self._remove_field(name)
        self._sync()

    @property
    def artist(self) -> str | None:
        """Artists joined with the configured separator."""
        return self._config.join(self.get(TagField.ARTISTS) or ())  # type: ignore[arg-type]

    @property
    def album_artist(self) -> str | None:
        return self._config.join(self.get(TagField.ALBUM_ARTISTS) or ())  # type: ignore[arg-type]

    @property
    def album(self) -> Album | None:
        title = self.album_title
        artists = self.album_artists
        cover = self.album_cover
        if title is None and artists is None and cover is None:
            return None
        return Album(title=title, artists=artists, cover=cover)

    @album.setter
    def album(self, album: Album | None) -> None:
        if album is None:
            self.remove_album()
            return
        self.album_title = album.title
        self.album_artists = album.artists
        self.album_cover = album.cover

    @album.deleter
    def album(self) -> None:
        self.remove_album()

    def remove_album(self) -> None:
        for field in (TagField.ALBUM_TITLE, TagField.ALBUM_ARTISTS, TagField.ALBUM_COVER):
            self.remove(field)

    # -- native access --------------------------------------------------------

    def raw(self, key: str) -> list[Any]:
        """Return the native values stored under a format-specific key."""
        return self._raw_get(key)

    def set_raw(self, key: str, values: Iterable[Any]) -> None:
        """Replace the native values under ``key`` and refresh the projection."""
        self._raw_set(key, list(values))
        self._sync()

    def remove_raw(self, key: str) -> None:
        self._raw_remove(key)
        self._sync()

    # -- writing --------------------------------------------------------------

    def write_to(self, handle: BinaryIO) -> None:
        """Serialize the tag into ``handle``, which must be open for update."""
        target = getattr(handle, "name", "<stream>")
        try:
            _ = handle.seek(0)
            self._serialize(handle)
            handle.flush()
        except MutagenError as exc:
            logger.error("Failed to write %s tag to %s: %s", self.TAG_TYPE.value, target, exc)
            raise TagIoError(f"Cannot write {self.TAG_TYPE.value} tag to {target}: {exc}") from exc
        except OSError as exc:
            logger.error("Failed to write %s tag to %s: %s", self.TAG_TYPE.value, target, exc)
            raise TagIoError(f"Cannot write {self.TAG_TYPE.value} tag to {target}: {exc}") from exc
        logger.info(
            "saved",
            extra={
                "tag_event": "tag.write",
                "tag_type": self.TAG_TYPE.value,
                "source_path": str(target),
            },
        )

    def write_to_path(self, path: Path | str) -> None:
        file_path = Path(path)
        try:
            handle = open(file_path, "rb+")
        except OSError as exc:
            logger.error("Failed to open %s for writing: %s", file_path, exc)
            raise TagIoError(f"Cannot open {file_path} for writing: {exc}") from exc
        with handle:
            self.write_to(handle)

    # -- internals ------------------------------------------------------------

    def _writable(self, field: TagField | str) -> TagField:
        name = coerce_field(field)
        if name in READ_ONLY_FIELDS:
            raise ValueError(f"{name} is read-only")
        return name

    def _sync(self) -> None:
        """Re-derive the projection from the native structure."""
        cache: dict[TagField, object] = {}
        malformed: dict[TagField, MalformedFieldError] = {}
        for field in TagField:
            if field not in self.SUPPORTED_FIELDS:
                continue
            try:
                value = self._read_field(field)
            except MalformedFieldError as exc:
                malformed[field] = exc
                if field not in self._malformed:
                    logger.warning(
                        "treating malformed value %r as absent",
                        exc.raw,
                        extra={
                            "tag_event": "tag.malformed",
                            "tag_type": self.TAG_TYPE.value,
                            "field": str(field),
                        },
                    )
                continue
            if value is not None:
                cache[field] = value
        previous = self._malformed
        self._cache = cache
        self._malformed = malformed
        # Strict mode reports only fields this sync turned malformed.
        new = [field for field in malformed if field not in previous]
        if self.strict and new:
            raise malformed[new[0]]

    def _text(self, value: object) -> str | None:
        """Normalize a native text value; empty strings read as absent."""
        if value is None:
            return None
        text = str(value)
        return text or None

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._cache.items())
        return f"{type(self).__name__}({fields})"

    # -- format hooks ---------------------------------------------------------

    @classmethod
    @abc.abstractmethod
    def _new_native(cls) -> NativeT:
        """Create an empty native structure."""
        raise NotImplementedError

    @classmethod
    @abc.abstractmethod
    def _parse(cls, handle: BinaryIO) -> tuple[NativeT, float | None]:
        """Parse the native structure and duration hint from an open file."""
        raise NotImplementedError

    @abc.abstractmethod
    def _read_field(self, field: TagField) -> object | None:
        """Read one supported field from the native structure."""
        raise NotImplementedError

    @abc.abstractmethod
    def _write_field(self, field: TagField, value: Any) -> None:
        """Write one validated, supported field to the native structure."""
        raise NotImplementedError

    @abc.abstractmethod
    def _remove_field(self, field: TagField) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def _serialize(self, handle: BinaryIO) -> None:
        """Write the native structure into an open file using mutagen."""
        raise NotImplementedError

    @abc.abstractmethod
    def _raw_get(self, key: str) -> list[Any]:
        raise NotImplementedError

    @abc.abstractmethod
    def _raw_set(self, key: str, values: list[Any]) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def _raw_remove(self, key: str) -> None:
        raise NotImplementedError
