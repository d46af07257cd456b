"""Hook base types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from .events import HookEvent


@dataclass
class HookContext:
    """Context passed to hooks when the host fires an action or filter."""

    event: HookEvent | str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    data: dict[str, Any] = field(default_factory=dict)


class Hook(ABC):
    """Base class for hooks stored in a :class:`HookRegistry`.

    Subclasses set ``name`` and ``events`` and implement ``__call__``.
    Lower ``priority`` values run first.
    """

    name: str = "hook"
    events: Sequence[HookEvent | str] = ()
    priority: int = 500

    @abstractmethod
    def __call__(self, context: HookContext) -> Any:
        """Run the hook for ``context``."""


class CallbackHook(Hook):
    """Hook wrapping a plain callable that takes no arguments."""

    def __init__(
        self,
        name: str,
        events: Sequence[HookEvent | str],
        callback: Callable[[], Any],
        priority: int = 500,
    ) -> None:
        self.name = name
        self.events = tuple(events)
        self.callback = callback
        self.priority = priority

    def __call__(self, context: HookContext) -> Any:
        return self.callback()

    def __repr__(self) -> str:
        return f"CallbackHook(name={self.name!r}, priority={self.priority})"
