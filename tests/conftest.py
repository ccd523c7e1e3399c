"""Shared pytest fixtures for tag adapter tests.

Where: tests/conftest.py
What: Minimal on-disk audio files and sample cover pictures.
Why: Exercise real mutagen parsing and saving without shipping binary fixtures.
"""

from __future__ import annotations

import struct
from pathlib import Path

import pytest

from tagbridge.features.tags.domain import MimeType, Picture

SAMPLE_RATE = 44100


def _streaminfo_block() -> bytes:
    """Build a STREAMINFO metadata block flagged as the last block."""

    # 20-bit sample rate, 3-bit channels-1, 5-bit bits-per-sample-1, 36-bit total samples
    packed = (SAMPLE_RATE << 44) | (1 << 41) | (15 << 36)
    body = (
        struct.pack(">HH", 4096, 4096)
        + b"\x00" * 6
        + packed.to_bytes(8, "big")
        + b"\x00" * 16
    )
    header = bytes([0x80]) + len(body).to_bytes(3, "big")
    return header + body


@pytest.fixture
def flac_bytes() -> bytes:
    """Raw bytes of a FLAC stream holding only STREAMINFO."""

    return b"fLaC" + _streaminfo_block()


@pytest.fixture
def flac_file(tmp_path: Path, flac_bytes: bytes) -> Path:
    """An untagged FLAC file on disk."""

    path = tmp_path / "track.flac"
    _ = path.write_bytes(flac_bytes)
    return path


@pytest.fixture
def mp3_file(tmp_path: Path) -> Path:
    """An MP3-named file without any ID3 header."""

    path = tmp_path / "track.mp3"
    _ = path.write_bytes(b"\x00" * 256)
    return path


@pytest.fixture
def jpeg_picture() -> Picture:
    return Picture(data=b"\xff\xd8\xff\xe0fake-jpeg", mime_type=MimeType.JPEG)


@pytest.fixture
def png_picture() -> Picture:
    return Picture(data=b"\x89PNG\r\n\x1a\nfake-png", mime_type=MimeType.PNG)
