"""Rich console handler for structured tag events.

Where: platform/logging/handlers.py
What: Render records carrying ``tag_event`` extras as compact, highlighted lines.
Why: Keep per-file read/write logs legible when paths are long.
"""

from __future__ import annotations

import logging
from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

ELLIPSIS = "…"
MAX_PATH_PARTS = 4


class TagEventRichHandler(RichHandler):
    """RichHandler that formats ``tag_event`` records.

    Records logged with ``extra={"tag_event": ..., "source_path": ...}`` render as
    ``<event> [<tag_type>] <path> <message>`` where the path is shown relative
    to ``source_base_path`` when given, otherwise abbreviated to its last few
    components. Plain records fall through to the stock rendering.
    """

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "tag_event", None)
        if not event:
            return super().render_message(record, message)

        text = Text()
        _ = text.append(str(event), style="bold cyan")

        tag_type = getattr(record, "tag_type", None)
        if tag_type:
            _ = text.append(f" [{tag_type}]", style="magenta")

        source_path = getattr(record, "source_path", None)
        if source_path:
            display = self._display_path(
                str(source_path), getattr(record, "source_base_path", None)
            )
            _ = text.append(" ")
            _ = text.append(display, style="white")

        field = getattr(record, "field", None)
        if field:
            _ = text.append(f" {field}", style="yellow")

        if message:
            _ = text.append(" ")
            _ = text.append(message)
        return text

    @staticmethod
    def _display_path(path: str, base: object | None) -> str:
        """Relativize ``path`` to ``base`` or abbreviate long absolute paths."""

        separator = "\\" if "\\" in path and "/" not in path else "/"
        if isinstance(base, str) and base:
            prefix = base.rstrip("/\\") + separator
            if path.startswith(prefix):
                return path[len(prefix):]

        parts = [part for part in path.split(separator) if part]
        absolute = path.startswith(separator) or (len(path) > 1 and path[1] == ":")
        if absolute and len(parts) > MAX_PATH_PARTS:
            return ELLIPSIS + separator + separator.join(parts[-MAX_PATH_PARTS:])
        return path


__all__ = ["TagEventRichHandler"]
