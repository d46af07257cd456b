"""In-memory host implementing the editor host port.

Models the parts of a block-editor CMS the adapter touches: a feature
support table, filters and actions backed by a :class:`HookRegistry`, and a
post type registry. Every call made through the port is recorded in
``calls`` so a dispatch can be inspected after the fact.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from gutensettings.core.errors import LifecycleError, PostTypeNotFoundError
from gutensettings.core.host import (
    REUSABLE_BLOCK_POST_TYPE,
    PostTypeDefinition,
    RegistrationCall,
)
from gutensettings.hooks import (
    CallbackHook,
    HookContext,
    HookEvent,
    HookRegistry,
    event_name,
)


logger = structlog.get_logger(__name__)

_FIRE_ONCE_ACTIONS = frozenset({HookEvent.INIT.value})


def default_reusable_block_type() -> PostTypeDefinition:
    """Definition of the built-in reusable block post type as shipped."""
    return PostTypeDefinition(
        name=REUSABLE_BLOCK_POST_TYPE,
        builtin=True,
        show_in_menu=False,
        labels={
            "name": "Reusable blocks",
            "singular_name": "Reusable block",
            "add_new": "Add New",
            "add_new_item": "Add new Reusable block",
            "edit_item": "Edit Reusable block",
            "all_items": "All Reusable blocks",
        },
        capability_type="block",
        capabilities={
            "read": "edit_posts",
            "create_posts": "publish_posts",
            "edit_posts": "edit_posts",
            "delete_posts": "delete_posts",
        },
    )


class _ConstantFilter(CallbackHook):
    """Filter hook that ignores its input and returns a fixed value."""

    def __init__(self, hook_name: str, result: bool, priority: int) -> None:
        super().__init__(
            name=f"constant_{str(result).lower()}",
            events=(hook_name,),
            callback=lambda: result,
            priority=priority,
        )
        self.result = result


class InMemoryHost:
    """Reference host backed by plain Python data structures."""

    def __init__(self, post_types: list[PostTypeDefinition] | None = None) -> None:
        self.calls: list[RegistrationCall] = []
        self._features: dict[str, Any] = {}
        self._post_types: dict[str, PostTypeDefinition] = {}
        self._filters = HookRegistry()
        self._actions = HookRegistry()
        self._filter_overrides: dict[tuple[str, bool, int], _ConstantFilter] = {}
        self._fired: set[str] = set()

        if post_types is None:
            post_types = [default_reusable_block_type()]
        for definition in post_types:
            self._post_types[definition.name] = definition

    # Port implementation

    def register_feature_flag(self, name: str, options: Any = None) -> None:
        self.calls.append(RegistrationCall("feature_flag", name, options))
        self._features[name] = True if options is None else options
        logger.info("feature_registered", feature=name, has_options=options is not None)

    def register_filter_override(
        self, hook_name: str, constant_result: bool, priority: int = 10
    ) -> None:
        self.calls.append(
            RegistrationCall(
                "filter_override",
                hook_name,
                {"result": constant_result, "priority": priority},
            )
        )
        key = (hook_name, constant_result, priority)
        if key not in self._filter_overrides:
            hook = _ConstantFilter(hook_name, constant_result, priority)
            self._filter_overrides[key] = hook
            self._filters.register(hook)
        logger.info(
            "filter_override_registered",
            hook_name=hook_name,
            result=constant_result,
            priority=priority,
        )

    def get_post_type_definition(self, type_name: str) -> PostTypeDefinition:
        self.calls.append(RegistrationCall("post_type", type_name))
        try:
            return self._post_types[type_name]
        except KeyError as e:
            raise PostTypeNotFoundError(type_name, cause=e) from e

    def add_action(
        self, hook_name: str, callback: Callable[[], Any], priority: int = 10
    ) -> None:
        name = event_name(hook_name)
        self.calls.append(
            RegistrationCall("action", name, {"priority": priority})
        )
        callback_name = getattr(callback, "__qualname__", None) or repr(callback)
        self._actions.register(
            CallbackHook(
                name=callback_name, events=(name,), callback=callback, priority=priority
            )
        )

    # Host side

    def register_post_type(self, definition: PostTypeDefinition) -> None:
        self._post_types[definition.name] = definition

    def supports(self, feature: str) -> bool:
        return feature in self._features

    def get_feature(self, feature: str) -> Any:
        return self._features.get(feature)

    @property
    def features(self) -> dict[str, Any]:
        return dict(self._features)

    @property
    def post_types(self) -> dict[str, PostTypeDefinition]:
        return dict(self._post_types)

    def apply_filters(self, hook_name: str, value: Any, **data: Any) -> Any:
        """Pass ``value`` through every filter registered on ``hook_name``."""
        name = event_name(hook_name)
        for hook in self._filters.get_hooks(name):
            context = HookContext(event=name, data={"value": value, **data})
            value = hook(context)
        return value

    def do_action(self, hook_name: str, **data: Any) -> None:
        """Fire an action, running its callbacks in priority order.

        An action only counts as fired once every callback has returned, so
        a fire-once action whose callback raised can be fired again.

        Raises:
            LifecycleError: If a fire-once action such as ``init`` already ran
        """
        name = event_name(hook_name)
        if name in _FIRE_ONCE_ACTIONS and name in self._fired:
            raise LifecycleError(f"Action '{name}' has already fired", hook_name=name)

        hooks = self._actions.get_hooks(name)
        logger.info("action_fired", hook_name=name, callbacks=len(hooks))
        for hook in hooks:
            hook(HookContext(event=name, data=dict(data)))
        self._fired.add(name)

    def has_fired(self, hook_name: str) -> bool:
        return event_name(hook_name) in self._fired

    def hooks_summary(self) -> dict[str, dict[str, list[dict[str, Any]]]]:
        return {
            "actions": self._actions.get_hooks_summary(),
            "filters": self._filters.get_hooks_summary(),
        }
