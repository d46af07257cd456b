"""Core error types for the editor settings adapter."""


class EditorSettingsError(Exception):
    """Base exception for all editor settings errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize with a message and optional cause.

        Args:
            message: The error message
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.cause = cause
        if cause:
            # Use Python's exception chaining
            self.__cause__ = cause


class ConfigurationError(EditorSettingsError):
    """Raised when configuration loading or validation fails."""

    def __init__(
        self, message: str, path: str | None = None, cause: Exception | None = None
    ):
        """Initialize with a message, config path, and cause.

        Args:
            message: The error message
            path: The configuration file that failed to load
            cause: The underlying exception
        """
        super().__init__(message, cause)
        self.path = path


class HostError(EditorSettingsError):
    """Error raised by a host platform implementation."""


class PostTypeNotFoundError(HostError):
    """Raised when the host has no definition for a post type."""

    def __init__(self, type_name: str, cause: Exception | None = None):
        super().__init__(f"Post type '{type_name}' is not registered", cause)
        self.type_name = type_name


class LifecycleError(HostError):
    """Raised when a host lifecycle hook is fired out of order."""

    def __init__(
        self, message: str, hook_name: str | None = None, cause: Exception | None = None
    ):
        """Initialize with a message, hook name, and cause.

        Args:
            message: The error message
            hook_name: The lifecycle hook involved
            cause: The underlying exception
        """
        super().__init__(message, cause)
        self.hook_name = hook_name


__all__ = [
    "EditorSettingsError",
    "ConfigurationError",
    "HostError",
    "PostTypeNotFoundError",
    "LifecycleError",
]
