"""Tests for configuration path resolution helpers."""

from pathlib import Path

from tagbridge.config.paths import default_config_path, default_log_dir, default_log_file


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = (portable_repo_root / "logs").resolve()
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "tagbridge.log"


def test_default_config_path(portable_repo_root: Path) -> None:
    """The config file lives under the repository config/ folder."""

    expected = (portable_repo_root / "config" / "config.toml").resolve()
    assert default_config_path() == expected
