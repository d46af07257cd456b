"""Shared test fixtures for gutensettings tests.

Fixtures build real components (in-memory host, dispatcher, settings) and
isolate every test from the developer's environment and config files.
"""

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from gutensettings.config.settings import ENV_PREFIX, Settings
from gutensettings.editor import FeatureDispatcher, ValidatedSettings, derive_settings
from gutensettings.host.memory import InMemoryHost


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run each test from an empty directory with no config-related env vars."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX) or key == "CONFIG_FILE":
            monkeypatch.delenv(key, raising=False)

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    app_logger = logging.getLogger("gutensettings")
    handlers = list(root_logger.handlers)
    level = root_logger.level
    app_level = app_logger.level
    yield tmp_path
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    app_logger.setLevel(app_level)


@pytest.fixture
def host() -> InMemoryHost:
    """Fresh in-memory host with the built-in reusable block type."""
    return InMemoryHost()


@pytest.fixture
def dispatcher(host: InMemoryHost) -> FeatureDispatcher:
    return FeatureDispatcher(host)


@pytest.fixture
def make_settings() -> Any:
    """Factory deriving validated settings from keyword arguments."""

    def _make(**values: Any) -> ValidatedSettings:
        return derive_settings(values)

    return _make


@pytest.fixture
def test_settings() -> Settings:
    """Settings with an editor section covering both dispatch passes."""
    return Settings(
        editor={
            "colorPalette": [{"name": "Red", "color": "#f00"}],
            "supportWideAlign": True,
            "unlockReusableBlocks": True,
            "reusableBlocksLabels": {"singular_name": "Snippet"},
        }
    )
