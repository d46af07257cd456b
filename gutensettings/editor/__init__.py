"""Editor settings derivation and dispatch."""

from .deriver import ValidatedSettings, derive_settings, is_valid_setting
from .dispatcher import FeatureDispatcher, FeatureRule


__all__ = [
    "FeatureDispatcher",
    "FeatureRule",
    "ValidatedSettings",
    "derive_settings",
    "is_valid_setting",
]
