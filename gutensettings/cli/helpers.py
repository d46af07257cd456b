"""Shared helpers for CLI commands."""

from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from gutensettings.config.settings import Settings
from gutensettings.core.errors import EditorSettingsError
from gutensettings.core.logging import setup_logging


def get_console() -> Console:
    return Console()


def load_settings(ctx: typer.Context | None, config: Path | None) -> Settings:
    """Load settings and configure logging from them.

    Global ``--log-level``/``--json-logs`` options stored on the context
    override the configured logging section.

    Raises:
        typer.Exit: With code 1 when the configuration cannot be loaded
    """
    overrides: dict[str, Any] = {}
    if ctx is not None and ctx.obj:
        logging_overrides = {k: v for k, v in ctx.obj.items() if v is not None}
        if logging_overrides:
            overrides["logging"] = logging_overrides

    try:
        settings = Settings.from_config(config_path=config, **overrides)
    except EditorSettingsError as e:
        fail(str(e))

    setup_logging(
        json_logs=settings.logging.json_logs, log_level=settings.logging.level
    )
    return settings


def fail(message: str, code: int = 1) -> NoReturn:
    """Print an error message and exit."""
    Console(stderr=True).print(
        f"[red]Error:[/red] {escape(message)}", soft_wrap=True
    )
    raise typer.Exit(code)
