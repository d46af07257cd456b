"""Configuration file commands."""

from pathlib import Path
from typing import Annotated

import typer

from gutensettings.cli.helpers import fail, get_console
from gutensettings.config.toml_generator import generate_example_config


app = typer.Typer(
    name="config", help="Manage configuration files.", no_args_is_help=True
)


@app.command(name="init")
def init_config(
    path: Annotated[
        Path,
        typer.Argument(help="Where to write the example configuration"),
    ] = Path(".gutensettings.toml"),
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing file")
    ] = False,
) -> None:
    """Write an example configuration listing every editor option."""
    if path.exists() and not force:
        fail(f"{path} already exists, use --force to overwrite")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_example_config(), encoding="utf-8")
    get_console().print(f"Wrote example configuration to [bold]{path}[/bold]")


@app.command(name="example")
def print_example() -> None:
    """Print the example configuration to stdout."""
    typer.echo(generate_example_config(), nl=False)
