"""Configuration management for tagbridge."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tagbridge.config.file_ops import write_text_file
from tagbridge.config.paths import default_config_path
from tagbridge.platform.logging import logger

ARTIST_SEPARATOR_DEFAULT = ";"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Multi-value handling for formats with a single artist slot
    artist_separator: str = ARTIST_SEPARATOR_DEFAULT
    split_artists: bool = True

    # Raise on malformed numeric fields instead of treating them as absent
    strict_fields: bool = False

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# tagbridge Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/tagbridge.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Separator used when several artists share one text slot")
        lines.append(
            f"artist_separator = {self._format_toml_value(config['artist_separator'])}"
        )
        lines.append("# Split single artist strings on the separator when reading")
        lines.append(f"split_artists = {self._format_toml_value(config['split_artists'])}")
        lines.append("")

        lines.append("# Fail reads on malformed numeric fields (default false)")
        lines.append(f"strict_fields = {self._format_toml_value(config['strict_fields'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, falling back to defaults.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {k: v for k, v in config_dict.items() if k in known}

                _ = config_dict.setdefault("artist_separator", ARTIST_SEPARATOR_DEFAULT)
                _ = config_dict.setdefault("split_artists", True)
                _ = config_dict.setdefault("strict_fields", False)

                log_file = config_dict.get("log_file")
                if not isinstance(log_file, str) or not log_file.strip():
                    config_dict["log_file"] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                logger.debug("No configuration at %s; using defaults", config_file)
                instance = cls()

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
