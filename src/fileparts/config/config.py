"""Configuration management for fileparts."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from fileparts.config.file_ops import write_text_file
from fileparts.config.paths import default_config_path
from fileparts.platform.logging import logger


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
    """Application configuration."""

    # Directory separator; None means the running platform's separator
    separator: str | None = None

    # Whether a leading dot starts an extension ("extension") or not ("name")
    dotfile_policy: str = "extension"

    # Log file path used by the command line tool
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, config_file: Path | None = None) -> Path:
        """Save configuration to ``config_file`` (defaults to the portable path).

        Returns:
            Path: File the configuration was written to.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = config_file or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# fileparts Configuration File")
        lines.append("")

        lines.append("# Directory separator (optional): \"/\" or \"\\\\\"")
        lines.append("# Defaults to the separator of the running platform")
        if config["separator"] is not None:
            lines.append(f"separator = {self._format_toml_value(config['separator'])}")
        lines.append("")

        lines.append("# How a leading dot in a file name is treated")
        lines.append('# "extension": .bashrc has extension ".bashrc" (default)')
        lines.append('# "name": .bashrc is a base name without extension')
        lines.append(f"dotfile_policy = {self._format_toml_value(config['dotfile_policy'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/fileparts.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; loading never writes to disk.

        Args:
            config_file: Explicit file to read. When omitted the cached instance
                is reused, or the portable default path is read.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        if config_file is None and cls._instance is not None:
            return cls._instance

        target = config_file or default_config_path()
        if not target.exists():
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration from %s: %s", target, e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        return instance


config = Config.load()
