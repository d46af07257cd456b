"""Setting keys read from the editor config and the host features they map to."""

from enum import Enum


# Immediate settings
DISABLED = "disabled"
COLOR_PALETTE = "colorPalette"
FONT_SIZES = "fontSizes"
USE_DEFAULT_STYLES = "useDefaultStyles"
SUPPORT_EDITOR_STYLES = "supportEditorStyles"
SUPPORT_DARK_EDITOR_STYLES = "supportDarkEditorStyles"
SUPPORT_RESPONSIVE_EMBEDS = "supportResponsiveEmbeds"
SUPPORT_WIDE_ALIGN = "supportWideAlign"
DISABLE_CUSTOM_USER_FONT_SIZES = "disableCustomUserFontSizes"
DISABLE_CUSTOM_USER_COLORS = "disableCustomUserColors"

# Reusable block settings, applied once the host has initialized
UNLOCK_REUSABLE_BLOCKS = "unlockReusableBlocks"
REUSABLE_BLOCKS_ICON = "reusableBlocksIcon"
REUSABLE_BLOCKS_LABELS = "reusableBlocksLabels"
REUSABLE_BLOCKS_CAPABILITY_TYPE = "reusableBlocksCapabilityType"
REUSABLE_BLOCKS_CAPABILITIES = "reusableBlocksCapabilities"
REUSABLE_BLOCKS_USE_GRAPHQL = "reusableBlocksUseGraphQL"

IMMEDIATE_KEYS = (
    DISABLED,
    COLOR_PALETTE,
    FONT_SIZES,
    USE_DEFAULT_STYLES,
    SUPPORT_EDITOR_STYLES,
    SUPPORT_DARK_EDITOR_STYLES,
    SUPPORT_RESPONSIVE_EMBEDS,
    SUPPORT_WIDE_ALIGN,
    DISABLE_CUSTOM_USER_FONT_SIZES,
    DISABLE_CUSTOM_USER_COLORS,
)

DEFERRED_KEYS = (
    UNLOCK_REUSABLE_BLOCKS,
    REUSABLE_BLOCKS_ICON,
    REUSABLE_BLOCKS_LABELS,
    REUSABLE_BLOCKS_CAPABILITY_TYPE,
    REUSABLE_BLOCKS_CAPABILITIES,
    REUSABLE_BLOCKS_USE_GRAPHQL,
)

KNOWN_KEYS = frozenset(IMMEDIATE_KEYS + DEFERRED_KEYS)


class Feature(str, Enum):
    """Editor feature names understood by the host."""

    COLOR_PALETTE = "editor-color-palette"
    FONT_SIZES = "editor-font-sizes"
    DEFAULT_BLOCK_STYLES = "wp-block-styles"
    EDITOR_STYLES = "editor-styles"
    DARK_EDITOR_STYLE = "dark-editor-style"
    RESPONSIVE_EMBEDS = "responsive-embeds"
    ALIGN_WIDE = "align-wide"
    DISABLE_CUSTOM_FONT_SIZES = "disable-custom-font-sizes"
    DISABLE_CUSTOM_COLORS = "disable-custom-colors"


GRAPHQL_SINGLE_NAME = "reusableBlock"
GRAPHQL_PLURAL_NAME = "reusableBlocks"
