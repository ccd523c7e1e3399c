"""
Summary: Public surface for tag conversion and dispatch use cases.
Why: Provide a stable import path for callers and tests.
"""

from .conversion import apply_record, from_record, lost_fields, to_record
from .dispatcher import TagDispatcher, convert, detect_and_read
from .ports import AudioTagPort

__all__ = [
    "AudioTagPort",
    "TagDispatcher",
    "apply_record",
    "convert",
    "detect_and_read",
    "from_record",
    "lost_fields",
    "to_record",
]
