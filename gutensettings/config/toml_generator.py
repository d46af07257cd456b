"""Example TOML configuration generation."""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from .editor import EDITOR_OPTIONS, EditorOption
from .logging import LoggingSettings


def format_value_for_toml(value: Any) -> str:
    """Render a Python value as an inline TOML value.

    Raises:
        TypeError: For None or unsupported types, which TOML cannot express
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return repr(value)
    if isinstance(value, str):
        # JSON string escapes are valid in TOML basic strings
        return json.dumps(value)
    if isinstance(value, Mapping):
        items = ", ".join(
            f"{_format_key(k)} = {format_value_for_toml(v)}" for k, v in value.items()
        )
        return f"{{ {items} }}" if items else "{}"
    if isinstance(value, list | tuple):
        return "[" + ", ".join(format_value_for_toml(v) for v in value) + "]"
    raise TypeError(f"Cannot represent {type(value).__name__} in TOML")


def _format_key(key: str) -> str:
    if key and all(c.isalnum() or c in "-_" for c in key):
        return key
    return json.dumps(key)


def generate_option_lines(
    options: Iterable[EditorOption], commented: bool = True
) -> list[str]:
    lines: list[str] = []
    for option in options:
        lines.append(f"# {option.description}")
        line = f"{_format_key(option.key)} = {format_value_for_toml(option.example)}"
        lines.append(f"# {line}" if commented else line)
    return lines


def generate_example_config(commented: bool = True) -> str:
    """Build an example configuration listing every recognized option."""
    logging_defaults = LoggingSettings()
    lines = [
        "# gutensettings configuration",
        "",
        "[logging]",
        f"level = {format_value_for_toml(logging_defaults.level)}",
        f"json_logs = {format_value_for_toml(logging_defaults.json_logs)}",
        "",
    ]

    immediate = [o for o in EDITOR_OPTIONS if not o.deferred]
    deferred = [o for o in EDITOR_OPTIONS if o.deferred]

    lines.append("[editor]")
    lines.extend(generate_option_lines(immediate, commented=commented))
    lines.append("")
    lines.append("# Reusable block options, applied after the host initializes")
    lines.extend(generate_option_lines(deferred, commented=commented))

    return "\n".join(lines) + "\n"
