"""Central registry for host hooks"""

from collections import defaultdict
from typing import Any

import structlog
from sortedcontainers import SortedList

from .base import Hook
from .events import HookEvent, event_name


class HookRegistry:
    """Registry of hooks per host event with priority-based ordering."""

    def __init__(self) -> None:
        # Sorted by (priority, registration_order) so equal priorities keep
        # the order in which they were added
        self._hooks: dict[str, SortedList[Hook]] = defaultdict(
            lambda: SortedList(
                key=lambda h: (
                    getattr(h, "priority", 500),
                    self._registration_order.get(h, 0),
                )
            )
        )
        self._registration_order: dict[Hook, int] = {}
        self._next_order = 0
        self._logger = structlog.get_logger(__name__)

    def register(self, hook: Hook) -> None:
        """Register a hook for its events with priority ordering.

        Registering the same hook instance again is a no-op.
        """
        priority = getattr(hook, "priority", 500)

        if hook not in self._registration_order:
            self._registration_order[hook] = self._next_order
            self._next_order += 1

        for event in hook.events:
            name = event_name(event)
            hooks = self._hooks[name]
            if hook in hooks:
                continue
            hooks.add(hook)
            self._logger.debug(
                "hook_registered",
                name=hook.name,
                hook_event=name,
                priority=priority,
            )

    def get_hooks(self, event: HookEvent | str) -> list[Hook]:
        """Get all hooks for an event in priority order"""
        return list(self._hooks.get(event_name(event), []))

    def get_hooks_summary(self) -> dict[str, list[dict[str, Any]]]:
        """Get summary of all registered hooks organized by event.

        Returns:
            Dictionary mapping event names to lists of hook info
        """
        return {
            name: [
                {"name": hook.name, "priority": getattr(hook, "priority", 500)}
                for hook in hooks
            ]
            for name, hooks in self._hooks.items()
            if hooks
        }
