"""Tests for logging setup and the error hierarchy."""

import json
from collections.abc import Generator

import pytest
import structlog

from gutensettings.core.errors import (
    ConfigurationError,
    EditorSettingsError,
    HostError,
    LifecycleError,
    PostTypeNotFoundError,
)
from gutensettings.core.logging import get_logger, setup_logging
from gutensettings.editor import FeatureDispatcher, derive_settings
from gutensettings.host.memory import InMemoryHost


@pytest.fixture
def reset_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


@pytest.mark.unit
@pytest.mark.usefixtures("reset_structlog")
class TestSetupLogging:
    def test_json_logs_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(json_logs=True, log_level="INFO")

        logger = get_logger("gutensettings.test")
        logger.info("feature_registered", feature="align-wide")

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "feature_registered"
        assert record["feature"] == "align-wide"
        assert record["level"] == "info"

    def test_level_filters_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(json_logs=True, log_level="warning")

        get_logger("gutensettings.test").info("hidden_event")

        assert "hidden_event" not in capsys.readouterr().err

    def test_dispatcher_logs_follow_configuration(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(json_logs=True, log_level="INFO")
        dispatcher = FeatureDispatcher(InMemoryHost())

        dispatcher.apply_immediate(derive_settings({"supportWideAlign": True}))

        captured = capsys.readouterr()
        assert captured.out == ""
        records = [json.loads(line) for line in captured.err.strip().splitlines()]
        applied = [r for r in records if r["event"] == "immediate_settings_applied"]
        assert applied[0]["component"] == "feature_dispatcher"
        assert applied[0]["applied"] == ["supportWideAlign"]

    def test_dispatcher_info_hidden_at_warning(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(log_level="WARNING")
        dispatcher = FeatureDispatcher(InMemoryHost())

        dispatcher.apply_immediate(derive_settings({"supportWideAlign": True}))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "immediate_settings_applied" not in captured.err


@pytest.mark.unit
class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigurationError, EditorSettingsError)
        assert issubclass(PostTypeNotFoundError, HostError)
        assert issubclass(LifecycleError, HostError)
        assert issubclass(HostError, EditorSettingsError)

    def test_cause_is_chained(self) -> None:
        cause = KeyError("wp_block")

        error = PostTypeNotFoundError("wp_block", cause=cause)

        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.type_name == "wp_block"
        assert str(error) == "Post type 'wp_block' is not registered"

    def test_configuration_error_path(self) -> None:
        error = ConfigurationError("bad", path="/etc/editor.toml")

        assert error.path == "/etc/editor.toml"
        assert error.cause is None
