"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure logging defaults and expose the shared library logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from tagbridge.config.paths import default_log_file

from .handlers import TagEventRichHandler


DEFAULT_LOG_FILE: Final[Path] = default_log_file()


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def reset_logger() -> logging.Logger:
    """Return the library logger to its import-time state.

    Only a ``NullHandler`` is attached, so records propagate to whatever the
    host application configured and nothing is printed by default.
    """

    logger = logging.getLogger("tagbridge")
    _clear_handlers(logger)
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    return logger


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Install the rich console handler and an optional rotating file handler.

    Calling it again replaces the previously installed handlers, so
    applications can re-run it once they know where logs should go.
    """

    logger = logging.getLogger("tagbridge")
    logger.setLevel(logging.DEBUG)
    _clear_handlers(logger)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console = Console(stderr=True, soft_wrap=True)
    console_handler = TagEventRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = reset_logger()


__all__ = ["DEFAULT_LOG_FILE", "reset_logger", "setup_logger", "logger"]
