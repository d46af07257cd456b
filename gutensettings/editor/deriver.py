"""Derivation of validated editor settings from raw configuration."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from gutensettings.core.logging import get_logger


logger = get_logger(__name__)


def is_valid_setting(value: Any) -> bool:
    """Return True when a config value should be kept.

    Only ``None`` is rejected. ``False``, ``0`` and empty strings or
    collections are valid settings.
    """
    return value is not None


class ValidatedSettings(Mapping[str, Any]):
    """Read-only mapping of editor settings that never holds ``None``.

    Absence of a key is the only "off" state. Entries keep the order of
    the configuration they were derived from.
    """

    __slots__ = ("_data",)

    def __init__(
        self, entries: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()
    ) -> None:
        data = dict(entries)
        invalid = [key for key, value in data.items() if not is_valid_setting(value)]
        if invalid:
            raise ValueError(f"Settings must not contain null values: {invalid}")
        self._data = MappingProxyType(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ValidatedSettings({dict(self._data)!r})"

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


def derive_settings(config: Mapping[str, Any]) -> ValidatedSettings:
    """Collect the valid entries of a raw editor configuration.

    Args:
        config: Raw settings mapping, typically the ``editor`` config section

    Returns:
        ValidatedSettings holding every entry whose value is not None
    """
    kept: list[tuple[str, Any]] = []
    for key, value in config.items():
        if is_valid_setting(value):
            kept.append((key, value))
        else:
            logger.debug("setting_dropped", key=key, reason="null_value")

    return ValidatedSettings(kept)
