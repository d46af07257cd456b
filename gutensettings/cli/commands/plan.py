"""Dry-run commands: show what the adapter would register with a host."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.table import Table

from gutensettings.cli.helpers import fail, get_console, load_settings
from gutensettings.config.editor import unknown_keys
from gutensettings.config.settings import Settings
from gutensettings.core.errors import EditorSettingsError
from gutensettings.core.services import CoreServices
from gutensettings.editor import ValidatedSettings, derive_settings
from gutensettings.hooks.events import HookEvent
from gutensettings.host.memory import InMemoryHost


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to a TOML or JSON configuration file",
        dir_okay=False,
    ),
]


def run_plan(host: InMemoryHost, settings: Settings) -> ValidatedSettings:
    """Boot the adapter against an in-memory host and fire ``init``."""
    provider = CoreServices(host, settings).create_provider()
    validated = provider.boot()
    host.do_action(HookEvent.INIT.value)
    return validated


def _format_options(options: Any) -> str:
    if options is None:
        return "-"
    return json.dumps(options, default=str)


def _post_type_payload(host: InMemoryHost) -> dict[str, dict[str, Any]]:
    return {
        name: definition.model_dump(warnings=False)
        for name, definition in host.post_types.items()
    }


def plan(
    ctx: typer.Context,
    config: ConfigOption = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print the plan as JSON")
    ] = False,
) -> None:
    """Show every host registration the configured settings produce."""
    settings = load_settings(ctx, config)
    host = InMemoryHost()

    try:
        validated = run_plan(host, settings)
    except EditorSettingsError as e:
        fail(str(e))

    if json_output:
        payload = {
            "settings": validated.to_dict(),
            "calls": [call.to_dict() for call in host.calls],
            "features": host.features,
            "post_types": _post_type_payload(host),
        }
        typer.echo(json.dumps(payload, indent=2, default=str))
        return

    console = get_console()
    if not host.calls:
        console.print("No registrations.")
        return

    table = Table(title="Host registrations")
    table.add_column("#", justify="right")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("Options", overflow="fold")
    for index, call in enumerate(host.calls, start=1):
        table.add_row(str(index), call.kind, call.name, _format_options(call.options))
    console.print(table)

    for name, fields in _post_type_payload(host).items():
        post_type_table = Table(title=f"Post type {name}")
        post_type_table.add_column("Field", no_wrap=True)
        post_type_table.add_column("Value", overflow="fold")
        for field, value in fields.items():
            post_type_table.add_row(field, _format_options(value))
        console.print(post_type_table)


def show_settings(
    ctx: typer.Context,
    config: ConfigOption = None,
) -> None:
    """Show the validated editor settings."""
    settings = load_settings(ctx, config)
    validated = derive_settings(settings.editor)
    console = get_console()

    if not validated:
        console.print("No editor settings configured.")
        return

    table = Table(title="Editor settings")
    table.add_column("Key", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in validated.items():
        table.add_row(key, json.dumps(value, default=str))
    console.print(table)

    ignored = unknown_keys(validated)
    if ignored:
        console.print(
            f"[yellow]Unrecognized settings:[/yellow] {', '.join(ignored)}",
            soft_wrap=True,
        )
