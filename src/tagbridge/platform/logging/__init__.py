"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the library logger, setup helpers, and custom Rich handlers.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, reset_logger, setup_logger
from .handlers import TagEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "TagEventRichHandler",
    "logger",
    "reset_logger",
    "setup_logger",
]
