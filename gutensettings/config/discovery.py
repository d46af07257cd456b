"""Configuration file discovery."""

import os
from pathlib import Path


CONFIG_DIR_NAME = "gutensettings"


def get_xdg_config_home() -> Path:
    """Return ``$XDG_CONFIG_HOME``, defaulting to ``~/.config``."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home)
    return Path.home() / ".config"


def find_git_root(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` looking for a directory containing ``.git``."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def get_config_search_paths(cwd: Path | None = None) -> list[Path]:
    """Candidate config files in priority order."""
    base = cwd or Path.cwd()
    paths = [base / f".{CONFIG_DIR_NAME}.toml"]

    git_root = find_git_root(base)
    if git_root is not None:
        paths.append(git_root / f"{CONFIG_DIR_NAME}.toml")

    paths.append(get_xdg_config_home() / CONFIG_DIR_NAME / "config.toml")
    return paths


def find_toml_config_file(cwd: Path | None = None) -> Path | None:
    """Find the first existing configuration file.

    Search order:
    1. .gutensettings.toml in the current directory
    2. gutensettings.toml in the git repository root
    3. config.toml in XDG_CONFIG_HOME/gutensettings/
    """
    for path in get_config_search_paths(cwd):
        if path.is_file():
            return path
    return None
