"""Core services container passed to host integrations."""

from typing import TYPE_CHECKING

import structlog

from gutensettings.config.settings import Settings
from gutensettings.core.host import EditorHost


if TYPE_CHECKING:
    from gutensettings.provider import EditorSettingsProvider


class CoreServices:
    """Container for the services an integration needs to boot the adapter."""

    def __init__(
        self,
        host: EditorHost,
        settings: Settings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        """Initialize core services.

        Args:
            host: Host platform implementing the editor host port
            settings: Application settings
            logger: Shared logger instance
        """
        self.host = host
        self.settings = settings
        self.logger = logger or structlog.get_logger(__name__)

    def create_provider(self) -> "EditorSettingsProvider":
        """Create a registered provider bound to this container's host and settings."""
        from gutensettings.provider import create_provider

        self.logger.debug("provider_created", host=type(self.host).__name__)
        return create_provider(self.host, self.settings)
