"""Main entry point for the gutensettings CLI."""

from typing import Annotated

import typer

from gutensettings.cli.helpers import get_console
from gutensettings.core._version import __version__
from gutensettings.core.logging import setup_logging

from .commands.config import app as config_app
from .commands.plan import plan, show_settings


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        get_console().print(f"gutensettings {__version__}")
        raise typer.Exit()


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)


@app.callback()
def app_main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override the configured log level"),
    ] = None,
    json_logs: Annotated[
        bool | None,
        typer.Option("--json-logs/--console-logs", help="Log format override"),
    ] = None,
) -> None:
    """Block editor settings adapter."""
    # Configured before settings load, reconfigured from them in each command
    setup_logging(json_logs=bool(json_logs), log_level=log_level or "WARNING")
    ctx.obj = {"level": log_level, "json_logs": json_logs}


app.command(name="plan")(plan)
app.command(name="settings")(show_settings)
app.add_typer(config_app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
