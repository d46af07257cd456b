"""Configuration module for the block editor settings adapter."""

from .discovery import find_toml_config_file, get_config_search_paths
from .editor import EDITOR_OPTIONS, EditorOption, unknown_keys
from .logging import LoggingSettings
from .settings import ConfigurationError, Settings


__all__ = [
    "Settings",
    "ConfigurationError",
    "LoggingSettings",
    "EDITOR_OPTIONS",
    "EditorOption",
    "unknown_keys",
    "find_toml_config_file",
    "get_config_search_paths",
]
