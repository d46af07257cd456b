import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gutensettings.config.discovery import find_toml_config_file
from gutensettings.core.errors import ConfigurationError
from gutensettings.core.logging import get_logger

from .logging import LoggingSettings


__all__ = ["Settings", "ConfigurationError", "ENV_PREFIX"]


ENV_PREFIX = "GUTENSETTINGS_"

logger = get_logger(__name__)


class Settings(BaseSettings):
    """
    Configuration settings for the block editor settings adapter.

    Settings are loaded from environment variables, .env files, and TOML or
    JSON configuration files. Environment variables take precedence over
    file values. When no file is given, configuration files are searched in
    the following order:
    1. .gutensettings.toml in current directory
    2. gutensettings.toml in git repository root
    3. config.toml in XDG_CONFIG_HOME/gutensettings/
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    editor: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw block editor settings keyed by setting name",
    )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}",
                path=str(toml_path),
                cause=e,
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f"Invalid TOML syntax in {toml_path}: {e}",
                path=str(toml_path),
                cause=e,
            ) from e

    @classmethod
    def load_json_config(cls, json_path: Path) -> dict[str, Any]:
        """Load configuration from a JSON file.

        JSON is accepted alongside TOML because it can express ``null``
        values, which the editor settings treat as "not set".
        """
        try:
            with json_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read JSON config file {json_path}: {e}",
                path=str(json_path),
                cause=e,
            ) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON syntax in {json_path}: {e}",
                path=str(json_path),
                cause=e,
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"JSON config file {json_path} must contain an object",
                path=str(json_path),
            )
        return data

    @classmethod
    def load_config_file(cls, config_path: Path) -> dict[str, Any]:
        """Load configuration from a file based on its extension."""
        suffix = config_path.suffix.lower()

        if suffix == ".toml":
            return cls.load_toml_config(config_path)
        if suffix == ".json":
            return cls.load_json_config(config_path)
        raise ConfigurationError(
            f"Unsupported config file format: {suffix}. "
            "Only TOML (.toml) and JSON (.json) files are supported.",
            path=str(config_path),
        )

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        **kwargs: Any,
    ) -> "Settings":
        """Create Settings from a configuration file, the environment and overrides.

        Args:
            config_path: Explicit config file. Falls back to the ``CONFIG_FILE``
                environment variable, then to file discovery.
            **kwargs: Overrides applied last (``logging`` dicts are merged,
                ``editor`` replaces the mapping)

        Raises:
            ConfigurationError: If the file cannot be read or is malformed
        """
        if config_path is None:
            config_path_env = os.environ.get("CONFIG_FILE")
            if config_path_env:
                config_path = Path(config_path_env)

        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = find_toml_config_file()

        config_data: dict[str, Any] = {}
        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(
                    f"Config file {config_path} does not exist", path=str(config_path)
                )
            config_data = cls.load_config_file(config_path)
            logger.info("config_file_loaded", path=str(config_path), category="config")

        try:
            settings = cls()
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid environment settings: {e}", cause=e
            ) from e

        for key, value in config_data.items():
            if key == "logging":
                settings._merge_logging(value, respect_env=True)
            elif key == "editor":
                if os.getenv(f"{ENV_PREFIX}EDITOR") is None:
                    settings.editor = _editor_mapping(value, config_path)
            else:
                logger.debug("config_key_ignored", key=key, category="config")

        if "logging" in kwargs:
            settings._merge_logging(kwargs["logging"], respect_env=False)
        if "editor" in kwargs:
            settings.editor = _editor_mapping(kwargs["editor"], None)

        return settings

    def _merge_logging(self, values: Any, respect_env: bool) -> None:
        if not isinstance(values, Mapping):
            raise ConfigurationError("The 'logging' section must be a table")

        updates = {
            k: v
            for k, v in values.items()
            if not respect_env
            or os.getenv(f"{ENV_PREFIX}LOGGING__{k.upper()}") is None
        }
        try:
            self.logging = LoggingSettings.model_validate(
                {**self.logging.model_dump(), **updates}
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid logging settings: {e}", cause=e) from e


def _editor_mapping(value: Any, config_path: Path | None) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            "The 'editor' section must be a table of settings",
            path=str(config_path) if config_path else None,
        )
    return dict(value)
