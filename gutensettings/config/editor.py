"""Catalogue of recognized editor settings.

Used to render an example configuration file and to point out keys the
dispatcher will ignore.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from gutensettings.editor import features as f


@dataclass(frozen=True)
class EditorOption:
    """Description of one recognized editor setting."""

    key: str
    description: str
    example: Any
    deferred: bool = False


EDITOR_OPTIONS: tuple[EditorOption, ...] = (
    EditorOption(f.DISABLED, "Disable the block editor entirely", True),
    EditorOption(
        f.COLOR_PALETTE,
        "Editor color palette, passed to the host verbatim",
        [{"name": "Red", "slug": "red", "color": "#f00"}],
    ),
    EditorOption(
        f.FONT_SIZES,
        "Editor font sizes, passed to the host verbatim",
        [{"name": "Small", "slug": "small", "size": 12}],
    ),
    EditorOption(f.USE_DEFAULT_STYLES, "Load the default block styles", True),
    EditorOption(
        f.SUPPORT_EDITOR_STYLES, "Enable custom editor styles (must be true)", True
    ),
    EditorOption(
        f.SUPPORT_DARK_EDITOR_STYLES, "Enable dark editor styling (must be true)", True
    ),
    EditorOption(
        f.SUPPORT_RESPONSIVE_EMBEDS, "Enable responsive embeds (must be true)", True
    ),
    EditorOption(f.SUPPORT_WIDE_ALIGN, "Enable wide and full alignments", True),
    EditorOption(
        f.DISABLE_CUSTOM_USER_FONT_SIZES, "Hide the custom font size picker", True
    ),
    EditorOption(f.DISABLE_CUSTOM_USER_COLORS, "Hide the custom color picker", True),
    EditorOption(
        f.UNLOCK_REUSABLE_BLOCKS,
        "Show reusable blocks as a regular post type in the admin menu",
        True,
        deferred=True,
    ),
    EditorOption(
        f.REUSABLE_BLOCKS_ICON,
        "Admin menu icon for reusable blocks",
        "dashicons-screenoptions",
        deferred=True,
    ),
    EditorOption(
        f.REUSABLE_BLOCKS_LABELS,
        "Labels merged over the reusable block defaults",
        {"name": "Snippets", "singular_name": "Snippet"},
        deferred=True,
    ),
    EditorOption(
        f.REUSABLE_BLOCKS_CAPABILITY_TYPE,
        "Capability type for reusable blocks",
        "block",
        deferred=True,
    ),
    EditorOption(
        f.REUSABLE_BLOCKS_CAPABILITIES,
        "Capability mapping for reusable blocks",
        {"edit_posts": "edit_posts"},
        deferred=True,
    ),
    EditorOption(
        f.REUSABLE_BLOCKS_USE_GRAPHQL,
        "Expose reusable blocks through GraphQL",
        True,
        deferred=True,
    ),
)


def unknown_keys(keys: Iterable[str]) -> list[str]:
    """Return the keys the dispatcher does not recognize, in input order."""
    return [key for key in keys if key not in f.KNOWN_KEYS]
