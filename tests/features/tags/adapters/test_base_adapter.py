"""Tests for behaviour shared by every tag adapter.

Where: tests/features/tags/adapters/test_base_adapter.py
What: Field validation, edge values, strict mode, capability gaps, and the album view.
Why: These rules live in the base class and must hold for every format.
"""

from __future__ import annotations

import pytest
from mutagen._vorbis import VCommentDict

from tagbridge.features.tags.adapters import (
    ADAPTER_TYPES,
    FlacAdapter,
    Id3Adapter,
    Mp4Adapter,
    OggVorbisAdapter,
)
from tagbridge.features.tags.domain import (
    Album,
    MalformedFieldError,
    Picture,
    TagConfig,
    TagField,
    TagType,
    UnrepresentableValueError,
)
from tagbridge.features.tags.domain.fields import (
    MULTI_VALUE_FIELDS,
    NUMBER_FIELDS,
    NUMBER_MAX,
    NUMBER_MIN,
    YEAR_MAX,
    YEAR_MIN,
)
from tagbridge.features.tags.usecases import AudioTagPort

_EDGE_VALUES: dict[TagField, tuple[object, ...]] = {
    **{field: (NUMBER_MIN, NUMBER_MAX) for field in sorted(NUMBER_FIELDS)},
    TagField.YEAR: (YEAR_MIN, YEAR_MAX),
    **{field: (("AC;DC",), ("A", "B")) for field in sorted(MULTI_VALUE_FIELDS)},
}

# Values a format cannot store exactly: MP4 pairs use 0 for "absent" and
# Ogg re-splits artist entries on the default separator.
_UNREPRESENTABLE: set[tuple[TagType, TagField, object]] = {
    *((TagType.MP4, field, 0) for field in NUMBER_FIELDS),
    (TagType.VORBIS, TagField.ARTISTS, ("AC;DC",)),
}


def _edge_cases(*, representable: bool) -> list[object]:
    cases: list[object] = []
    for tag_type, adapter_cls in ADAPTER_TYPES.items():
        for field, values in _EDGE_VALUES.items():
            if field not in adapter_cls.SUPPORTED_FIELDS:
                continue
            for value in values:
                if ((tag_type, field, value) not in _UNREPRESENTABLE) is representable:
                    case_id = f"{tag_type.value}-{field}-{value}"
                    cases.append(pytest.param(tag_type, field, value, id=case_id))
    return cases


@pytest.mark.parametrize("tag_type", list(TagType), ids=lambda t: t.value)
def test_registry_covers_every_tag_type(tag_type: TagType) -> None:
    adapter = ADAPTER_TYPES[tag_type]()

    assert adapter.tag_type is tag_type
    assert isinstance(adapter, AudioTagPort)
    assert adapter.title is None
    assert adapter.duration is None


def test_attribute_and_named_access_agree() -> None:
    adapter = FlacAdapter()

    adapter.title = "Song"
    adapter.set("genre", "Ambient")

    assert adapter.get(TagField.TITLE) == "Song"
    assert adapter.genre == "Ambient"


def test_none_empty_and_del_remove_fields() -> None:
    adapter = FlacAdapter()
    adapter.title = "Song"
    adapter.genre = "Ambient"
    adapter.artists = ["A"]

    adapter.title = None
    adapter.genre = ""
    del adapter.artists

    assert adapter.title is None
    assert adapter.genre is None
    assert adapter.artists is None
    assert adapter.raw("TITLE") == []


def test_single_string_is_accepted_for_multi_value_fields() -> None:
    adapter = FlacAdapter()

    adapter.artists = "Solo"

    assert adapter.artists == ("Solo",)
    assert adapter.artist == "Solo"


@pytest.mark.parametrize(
    ("field", "value", "error"),
    [
        ("title", 5, TypeError),
        ("artists", [1, 2], TypeError),
        ("track_number", "3", TypeError),
        ("track_number", True, TypeError),
        ("track_number", -1, ValueError),
        ("total_discs", 65536, ValueError),
        ("year", 10000, ValueError),
        ("album_cover", b"raw", TypeError),
        ("duration", 12.0, ValueError),
        ("bogus", "x", ValueError),
    ],
)
def test_invalid_values_are_rejected(field: str, value: object, error: type[Exception]) -> None:
    adapter = FlacAdapter()

    with pytest.raises(error):
        adapter.set(field, value)


def test_unknown_field_names_raise_on_read() -> None:
    with pytest.raises(ValueError):
        _ = FlacAdapter().get("bogus")


def test_capability_gaps_are_silent(jpeg_picture: Picture) -> None:
    adapter = OggVorbisAdapter()

    adapter.composer = "Someone"
    adapter.album_cover = jpeg_picture
    adapter.remove(TagField.TOTAL_TRACKS)
    del adapter.album_artists

    assert adapter.supports("composer") is False
    assert adapter.supports(TagField.TITLE) is True
    assert adapter.composer is None
    assert adapter.album_cover is None
    assert list(adapter._native) == []  # pyright: ignore[reportPrivateUsage]


def test_album_view_round_trips(png_picture: Picture) -> None:
    adapter = Mp4Adapter()

    adapter.album = Album(title="LP", artists=("Band",), cover=png_picture)

    assert adapter.album == Album(title="LP", artists=("Band",), cover=png_picture)
    assert adapter.album_artist == "Band"

    adapter.remove_album()

    assert adapter.album is None


def test_album_view_on_a_format_without_album_artists() -> None:
    adapter = OggVorbisAdapter()

    adapter.album = Album(title="LP", artists=("Band",))

    assert adapter.album == Album(title="LP")
    del adapter.album
    assert adapter.album_title is None


def test_artist_join_uses_adapter_config() -> None:
    adapter = Id3Adapter(config=TagConfig(artist_separator=" & "))

    adapter.artists = ("A", "B")

    assert adapter.artist == "A & B"
    assert adapter.config.artist_separator == " & "


def test_repr_lists_present_fields() -> None:
    adapter = FlacAdapter()
    adapter.title = "Song"

    assert repr(adapter) == "FlacAdapter(title='Song')"


@pytest.mark.parametrize(("tag_type", "field", "value"), _edge_cases(representable=True))
def test_edge_values_read_back_exactly(
    tag_type: TagType, field: TagField, value: object
) -> None:
    adapter = ADAPTER_TYPES[tag_type]()

    adapter.set(field, value)

    assert adapter.get(field) == value


@pytest.mark.parametrize(("tag_type", "field", "value"), _edge_cases(representable=False))
def test_unrepresentable_edge_values_raise(
    tag_type: TagType, field: TagField, value: object
) -> None:
    adapter = ADAPTER_TYPES[tag_type]()

    with pytest.raises(UnrepresentableValueError):
        adapter.set(field, value)

    assert adapter.get(field) is None


def test_strict_mode_raises_only_for_newly_malformed_fields() -> None:
    """A malformed field already present does not fail unrelated writes."""

    adapter = FlacAdapter()
    adapter.set_raw("DATE", ["soon"])
    adapter.strict = True

    adapter.title = "Song"
    del adapter.genre

    assert adapter.title == "Song"
    assert set(adapter.malformed_fields) == {TagField.YEAR}

    with pytest.raises(MalformedFieldError) as excinfo:
        adapter.set_raw("TRACKTOTAL", ["twelve"])

    assert excinfo.value.field == TagField.TOTAL_TRACKS


def test_strict_construction_raises_for_existing_malformed_fields() -> None:
    comments = VCommentDict()
    comments["DATE"] = ["soon"]

    with pytest.raises(MalformedFieldError):
        _ = OggVorbisAdapter(comments, strict=True)
