"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def reloaded_settings(config_runtime_env: Path) -> Iterator[None]:
    """Restore settings constants after tests reload the module."""

    _ = config_runtime_env
    import tagbridge.config.config as config_module
    import tagbridge.config.settings as settings

    original_config = config_module.config
    try:
        yield None
    finally:
        config_module.config = original_config
        _ = importlib.reload(settings)


def test_settings_defaults(reloaded_settings: None) -> None:
    """Default configuration splits artists on semicolons, leniently."""
    _ = reloaded_settings

    import tagbridge.config.config as config_module
    import tagbridge.config.settings as settings

    config_module.config = config_module.Config.load()
    reloaded = importlib.reload(settings)

    assert reloaded.ARTIST_SEPARATOR == ";"
    assert reloaded.SPLIT_ARTISTS is True
    assert reloaded.STRICT_FIELDS is False


def test_settings_follow_config_values(reloaded_settings: None) -> None:
    """Multi-value and strictness settings derive from config values."""
    _ = reloaded_settings

    import tagbridge.config.config as config_module
    import tagbridge.config.settings as settings

    config_module.config = config_module.Config(
        artist_separator=" / ", split_artists=False, strict_fields=True
    )
    reloaded = importlib.reload(settings)

    assert reloaded.ARTIST_SEPARATOR == " / "
    assert reloaded.SPLIT_ARTISTS is False
    assert reloaded.STRICT_FIELDS is True


def test_empty_separator_falls_back_to_default(reloaded_settings: None) -> None:
    _ = reloaded_settings

    import tagbridge.config.config as config_module
    import tagbridge.config.settings as settings

    config_module.config = config_module.Config(artist_separator="")
    reloaded = importlib.reload(settings)

    assert reloaded.ARTIST_SEPARATOR == ";"


def test_configure_logging_uses_configured_log_file(
    reloaded_settings: None, config_runtime_env: Path
) -> None:
    """The configured log file receives records after configure_logging."""
    _ = reloaded_settings

    import tagbridge.config.config as config_module
    import tagbridge.config.settings as settings
    from tagbridge.platform.logging import reset_logger

    log_file = config_runtime_env / "custom" / "tagbridge.log"
    config_module.config = config_module.Config(log_file=log_file)
    reloaded = importlib.reload(settings)

    try:
        configured = reloaded.configure_logging()
        configured.debug("configured file logging")
        for handler in configured.handlers:
            handler.flush()

        assert "configured file logging" in log_file.read_text(encoding="utf-8")
    finally:
        _ = reset_logger()
