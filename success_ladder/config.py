"""Configuration utilities for the success ladder CLI."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

try:
    import tomllib as tomli  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli  # type: ignore[no-redef]
from pydantic import BaseModel, ValidationError, field_validator
from tomli_w import dump as toml_dump

CONFIG_DIR = Path.home() / ".config" / "success_ladder"
CONFIG_FILE = CONFIG_DIR / "config.toml"
CONFIG_VERSION = "1.0.0"


class DefaultsConfig(BaseModel):
    """Default values used by the CLI commands."""

    leaderboard_limit: int = 10

    @field_validator("leaderboard_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that the leaderboard limit is positive."""
        if v <= 0:
            raise ValueError(f"leaderboard_limit must be positive, got {v}")
        return v


class DisplayConfig(BaseModel):
    """Configuration for terminal rendering."""

    progress_bar_width: int = 30
    show_criteria: bool = True

    @field_validator("progress_bar_width")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:
        """Validate that widths are positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    version: str = CONFIG_VERSION
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load configuration data from disk.

        Args:
            path: Optional override for the configuration file path.

        Returns:
            Config: The loaded configuration object, or defaults when the
            file does not exist.

        Raises:
            ValueError: If configuration file is corrupted or invalid.
        """

        if not path.exists():
            return cls()

        try:
            with path.open("rb") as handle:
                raw: Dict[str, Any] = tomli.load(handle)
        except (OSError, tomli.TOMLDecodeError) as exc:
            raise ValueError(f"Failed to parse configuration file: {exc}") from exc

        version = raw.get("version", CONFIG_VERSION)

        try:
            defaults = DefaultsConfig(**raw.get("defaults", {}))
            display = DisplayConfig(**raw.get("display", {}))
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration: {exc}") from exc

        return cls(version=version, defaults=defaults, display=display)

    def dump(self, path: Path = CONFIG_FILE, backup: bool = True) -> None:
        """Persist the configuration to disk.

        Args:
            path: Path to save the configuration file.
            backup: If True and config file exists, create a backup before overwriting.
        """

        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            backup_path = path.parent / f"{path.stem}.{timestamp}.bak"
            shutil.copy2(path, backup_path)

        with path.open("wb") as handle:
            toml_dump(self._payload(), handle)

    def _payload(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "defaults": self.defaults.model_dump(),
            "display": self.display.model_dump(),
        }

    def _sections(self) -> Dict[str, BaseModel]:
        return {
            "defaults": self.defaults,
            "display": self.display,
        }

    def to_display_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation for display purposes."""

        return {name: section.model_dump() for name, section in self._sections().items()}

    def _resolve(self, key: str) -> tuple[BaseModel, str]:
        parts = key.split(".")
        if len(parts) != 2:
            raise ValueError(f"Invalid key format '{key}'. Expected format: section.field")

        section, field_name = parts
        sections = self._sections()

        if section not in sections:
            valid_sections = ", ".join(sections.keys())
            raise ValueError(f"Invalid section '{section}'. Valid sections: {valid_sections}")

        config_obj = sections[section]
        if field_name not in type(config_obj).model_fields:
            valid_fields = ", ".join(type(config_obj).model_fields.keys())
            raise ValueError(f"Invalid field '{field_name}' for section '{section}'. Valid fields: {valid_fields}")

        return config_obj, field_name

    def set_value(self, key: str, value: str) -> None:
        """Set a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., 'defaults.leaderboard_limit')
            value: Value to set (will be converted to appropriate type)

        Raises:
            ValueError: If key is invalid or value cannot be converted
        """
        config_obj, field_name = self._resolve(key)
        field_type = type(config_obj).model_fields[field_name].annotation

        try:
            if field_type is int:
                converted_value: Any = int(value)
            elif field_type is bool:
                converted_value = value.lower() in ("true", "1", "yes", "on")
            else:
                converted_value = value
        except (ValueError, TypeError) as exc:
            raise ValueError(f"Cannot convert '{value}' to {field_type} for {key}") from exc

        # Re-validate the whole section so field validators run
        current_data = config_obj.model_dump()
        current_data[field_name] = converted_value
        try:
            validated_model = type(config_obj).model_validate(current_data)
        except ValidationError as exc:
            error_msg = "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
            )
            raise ValueError(f"Validation error for {key}: {error_msg}") from exc

        for name in type(validated_model).model_fields:
            setattr(config_obj, name, getattr(validated_model, name))

    def get_value(self, key: str) -> Any:
        """Get a configuration value using dot notation.

        Raises:
            ValueError: If key is invalid
        """
        config_obj, field_name = self._resolve(key)
        return getattr(config_obj, field_name)
