"""Where: src/tagbridge/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tagbridge.config.config import ARTIST_SEPARATOR_DEFAULT, config as app_config
from tagbridge.platform.logging import DEFAULT_LOG_FILE, setup_logger

# Multi-value policy ----------------------------------------------------------

# Separator used to join artists into a single text slot. An empty separator
# would make splitting ambiguous, so it falls back to the default.
_separator = getattr(app_config, "artist_separator", ARTIST_SEPARATOR_DEFAULT)
ARTIST_SEPARATOR: str = (
    _separator if isinstance(_separator, str) and _separator else ARTIST_SEPARATOR_DEFAULT
)

SPLIT_ARTISTS: bool = bool(getattr(app_config, "split_artists", True))


# Field parsing ---------------------------------------------------------------

STRICT_FIELDS: bool = bool(getattr(app_config, "strict_fields", False))


# Logging ---------------------------------------------------------------------

LOG_FILE: Path | None = getattr(app_config, "log_file", None)


def configure_logging(console_level: int = logging.INFO) -> logging.Logger:
    """Install console and file handlers, logging to the configured file."""

    return setup_logger(log_file=LOG_FILE or DEFAULT_LOG_FILE, console_level=console_level)


__all__ = [
    "ARTIST_SEPARATOR",
    "LOG_FILE",
    "SPLIT_ARTISTS",
    "STRICT_FIELDS",
    "configure_logging",
]
