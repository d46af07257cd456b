"""Priority-ordered hook registry used to model host actions and filters."""

from .base import CallbackHook, Hook, HookContext
from .events import HookEvent, event_name
from .registry import HookRegistry


__all__ = [
    "CallbackHook",
    "Hook",
    "HookContext",
    "HookEvent",
    "HookRegistry",
    "event_name",
]
