"""Core building blocks: errors, logging, host port and services."""

from .errors import (
    ConfigurationError,
    EditorSettingsError,
    HostError,
    LifecycleError,
    PostTypeNotFoundError,
)
from .host import EditorHost, PostTypeDefinition, RegistrationCall
from .logging import get_logger, setup_logging


__all__ = [
    "ConfigurationError",
    "EditorSettingsError",
    "HostError",
    "LifecycleError",
    "PostTypeNotFoundError",
    "EditorHost",
    "PostTypeDefinition",
    "RegistrationCall",
    "get_logger",
    "setup_logging",
]
