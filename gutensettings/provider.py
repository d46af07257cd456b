"""Host integration boundary.

The provider wires a host and the application settings to the feature
dispatcher. Hosts construct it explicitly; there is no global container.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from typing import Any

import structlog

from gutensettings.config.editor import unknown_keys
from gutensettings.config.settings import Settings
from gutensettings.core.host import EditorHost
from gutensettings.editor import FeatureDispatcher, ValidatedSettings, derive_settings
from gutensettings.hooks.events import HookEvent


logger = structlog.get_logger(__name__)


class EditorSettingsProvider:
    """Registers editor settings with a host during its boot sequence."""

    def __init__(self, host: EditorHost, settings: Settings) -> None:
        """Initialize the provider.

        Args:
            host: Host platform implementing the editor host port
            settings: Application settings holding the raw ``editor`` mapping
        """
        self.host = host
        self.settings = settings
        self.dispatcher: FeatureDispatcher | None = None

    def register(self) -> FeatureDispatcher:
        """Create the feature dispatcher for this host."""
        if self.dispatcher is None:
            self.dispatcher = FeatureDispatcher(self.host)
        return self.dispatcher

    def boot(self, config: Mapping[str, Any] | None = None) -> ValidatedSettings:
        """Apply immediate settings and schedule the deferred pass on ``init``.

        Args:
            config: Raw editor settings. Defaults to ``settings.editor``.

        Returns:
            The validated settings both passes operate on
        """
        dispatcher = self.register()
        raw = self.settings.editor if config is None else config

        validated = derive_settings(raw)
        ignored = unknown_keys(validated)
        if ignored:
            logger.warning("unknown_editor_settings", keys=ignored)

        dispatcher.apply_immediate(validated)
        self.host.add_action(
            HookEvent.INIT.value, partial(dispatcher.apply_deferred, validated)
        )

        logger.info(
            "editor_settings_booted",
            settings=list(validated),
            deferred_hook=HookEvent.INIT.value,
        )
        return validated


def create_provider(
    host: EditorHost, settings: Settings | None = None
) -> EditorSettingsProvider:
    """Build and register a provider, loading settings when none are given."""
    provider = EditorSettingsProvider(host, settings or Settings.from_config())
    provider.register()
    return provider
