"""Conversion between format adapters and the canonical record.

Where: src/tagbridge/features/tags/usecases/conversion.py
What: Pure mapping functions adapter -> TagRecord and TagRecord -> adapter.
Why: Route every cross-format conversion through one neutral snapshot.
"""

from __future__ import annotations

from typing import Any

from tagbridge.platform.logging import logger

from ..adapters import ADAPTER_TYPES, BaseTagAdapter
from ..domain.errors import UnrepresentableValueError
from ..domain.fields import WRITABLE_FIELDS, TagField
from ..domain.record import TagRecord
from ..domain.tag_type import TagType

__all__ = ["apply_record", "from_record", "lost_fields", "to_record"]


def to_record(adapter: BaseTagAdapter[Any]) -> TagRecord:
    """Snapshot every field the adapter exposes into a new record.

    Fields the format cannot store come out as ``None``. Values are immutable,
    so the record never shares mutable state with the adapter.
    """
    values = {field.value: adapter.get(field) for field in TagField}
    return TagRecord(**values, config=adapter.config)  # type: ignore[arg-type]


def apply_record(record: TagRecord, adapter: BaseTagAdapter[Any]) -> BaseTagAdapter[Any]:
    """Write the record's present fields into ``adapter``.

    Absent fields are left untouched, so existing native data survives.
    Fields the target format cannot store are skipped, as are values it
    cannot store exactly.
    """
    skipped: list[str] = []
    for field in WRITABLE_FIELDS:
        value = record.get(field)
        if value is None:
            continue
        if not adapter.supports(field):
            skipped.append(field.value)
            continue
        try:
            adapter.set(field, value)
        except UnrepresentableValueError as exc:
            logger.warning(
                "dropping %s from %s tags: %s", field.value, adapter.tag_type.value, exc
            )
    if skipped:
        logger.debug(
            "%s tags cannot store %s; values dropped",
            adapter.tag_type.value,
            ", ".join(skipped),
        )
    return adapter


def from_record(
    record: TagRecord, tag_type: TagType, *, strict: bool | None = None
) -> BaseTagAdapter[Any]:
    """Build a fresh adapter of ``tag_type`` holding the record's fields."""
    adapter_cls = ADAPTER_TYPES[tag_type]
    adapter = adapter_cls(config=record.config, strict=strict, duration=record.duration)
    return apply_record(record, adapter)


def lost_fields(record: TagRecord, tag_type: TagType) -> list[TagField]:
    """Present, writable fields of ``record`` that ``tag_type`` cannot store."""
    supported = ADAPTER_TYPES[tag_type].SUPPORTED_FIELDS
    return [
        field
        for field in WRITABLE_FIELDS
        if record.get(field) is not None and field not in supported
    ]
