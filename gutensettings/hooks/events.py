"""Host hook names the adapter interacts with."""

from enum import Enum


class HookEvent(str, Enum):
    """Lifecycle actions and decision-point filters of the host."""

    # Lifecycle
    INIT = "init"

    # Block editor decision points
    USE_BLOCK_EDITOR_FOR_POST = "use_block_editor_for_post"
    USE_BLOCK_EDITOR_FOR_POST_TYPE = "use_block_editor_for_post_type"


def event_name(event: "HookEvent | str") -> str:
    """Return the plain hook name for an enum member or string."""
    return event.value if isinstance(event, HookEvent) else str(event)
