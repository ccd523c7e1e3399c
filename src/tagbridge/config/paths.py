"""Shared path utilities for configuration and log locations.

This module centralizes how the library discovers locations for
config and log files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Logs: repository-root ``<repo_root>/logs/tagbridge.log``
"""

from __future__ import annotations

from pathlib import Path


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    # Fallback: use current working directory if detection fails
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the main TOML config file.

    Portable layout: ``<repo_root>/config/config.toml``.
    """
    repo_root = _detect_repo_root()
    return (repo_root / "config" / "config.toml").resolve()


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "tagbridge.log").resolve()


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
