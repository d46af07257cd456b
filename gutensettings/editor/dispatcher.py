"""Translation of validated editor settings into host registrations."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from gutensettings.core.host import (
    REUSABLE_BLOCK_POST_TYPE,
    EditorHost,
    PostTypeDefinition,
)
from gutensettings.core.logging import get_logger
from gutensettings.hooks.events import HookEvent

from . import features as f
from .deriver import ValidatedSettings


logger = get_logger(__name__)


@dataclass(frozen=True)
class FeatureRule:
    """One row of the immediate dispatch table.

    Most rules fire on key presence alone. Rules with ``require_true`` also
    need the value to be exactly ``True``.
    """

    key: str
    handler: Callable[[Any], None]
    require_true: bool = False

    def matches(self, settings: Mapping[str, Any]) -> bool:
        if self.key not in settings:
            return False
        return not self.require_true or settings[self.key] is True


class FeatureDispatcher:
    """Apply editor settings to a host in two passes.

    ``apply_immediate`` runs while the host boots. ``apply_deferred`` must be
    registered as a callback on the host's ``init`` action so the post type
    registry is populated when it runs.
    """

    def __init__(self, host: EditorHost) -> None:
        self.host = host
        self._logger = logger.bind(component="feature_dispatcher")

    def _immediate_rules(self) -> tuple[FeatureRule, ...]:
        return (
            FeatureRule(f.DISABLED, self.disable),
            FeatureRule(f.COLOR_PALETTE, self.set_color_palette),
            FeatureRule(f.FONT_SIZES, self.set_font_sizes),
            FeatureRule(f.USE_DEFAULT_STYLES, self.use_default_styles),
            FeatureRule(
                f.SUPPORT_EDITOR_STYLES, self.support_editor_styles, require_true=True
            ),
            FeatureRule(
                f.SUPPORT_DARK_EDITOR_STYLES,
                self.support_dark_editor_styles,
                require_true=True,
            ),
            FeatureRule(
                f.SUPPORT_RESPONSIVE_EMBEDS,
                self.support_responsive_embeds,
                require_true=True,
            ),
            FeatureRule(f.SUPPORT_WIDE_ALIGN, self.support_wide_align),
            FeatureRule(
                f.DISABLE_CUSTOM_USER_FONT_SIZES, self.disable_custom_font_sizes
            ),
            FeatureRule(f.DISABLE_CUSTOM_USER_COLORS, self.disable_custom_colors),
        )

    def apply_immediate(self, settings: ValidatedSettings) -> list[str]:
        """Register every feature requested by ``settings``.

        Args:
            settings: Validated editor settings

        Returns:
            Setting keys that triggered a registration, in table order
        """
        applied: list[str] = []
        for rule in self._immediate_rules():
            if rule.matches(settings):
                rule.handler(settings[rule.key])
                applied.append(rule.key)

        self._logger.info("immediate_settings_applied", applied=applied)
        return applied

    def apply_deferred(self, settings: ValidatedSettings) -> PostTypeDefinition | None:
        """Apply reusable block options once the host has initialized.

        Args:
            settings: Validated editor settings

        Returns:
            The mutated reusable block post type, or None when reusable blocks
            were not unlocked
        """
        if settings.get(f.UNLOCK_REUSABLE_BLOCKS) is None:
            self._logger.debug("reusable_blocks_not_unlocked")
            return None

        post_type = self.unlock_post_type(REUSABLE_BLOCK_POST_TYPE)

        if f.REUSABLE_BLOCKS_ICON in settings:
            self.set_reusable_blocks_icon(post_type, settings[f.REUSABLE_BLOCKS_ICON])

        if f.REUSABLE_BLOCKS_LABELS in settings:
            self.set_reusable_blocks_labels(
                post_type, settings[f.REUSABLE_BLOCKS_LABELS]
            )

        if f.REUSABLE_BLOCKS_CAPABILITY_TYPE in settings:
            self.modify_reusable_blocks_capability_type(
                post_type, settings[f.REUSABLE_BLOCKS_CAPABILITY_TYPE]
            )

        if f.REUSABLE_BLOCKS_CAPABILITIES in settings:
            self.modify_reusable_blocks_capabilities(
                post_type, settings[f.REUSABLE_BLOCKS_CAPABILITIES]
            )

        if f.REUSABLE_BLOCKS_USE_GRAPHQL in settings:
            self.set_reusable_blocks_to_use_graphql(post_type)

        return post_type

    # Immediate handlers

    def disable(self, _value: Any = None) -> None:
        """Turn the block editor off for every post and post type."""
        self.host.register_filter_override(
            HookEvent.USE_BLOCK_EDITOR_FOR_POST.value, False, 10
        )
        self.host.register_filter_override(
            HookEvent.USE_BLOCK_EDITOR_FOR_POST_TYPE.value, False, 10
        )

    def set_color_palette(self, palette: Any) -> None:
        self.host.register_feature_flag(f.Feature.COLOR_PALETTE.value, palette)

    def set_font_sizes(self, font_sizes: Any) -> None:
        self.host.register_feature_flag(f.Feature.FONT_SIZES.value, font_sizes)

    def use_default_styles(self, _value: Any = None) -> None:
        self.host.register_feature_flag(f.Feature.DEFAULT_BLOCK_STYLES.value)

    def support_editor_styles(self, _value: Any = None) -> None:
        self.host.register_feature_flag(f.Feature.EDITOR_STYLES.value)

    def support_dark_editor_styles(self, _value: Any = None) -> None:
        self.host.register_feature_flag(f.Feature.DARK_EDITOR_STYLE.value)

    def support_responsive_embeds(self, _value: Any = None) -> None:
        self.host.register_feature_flag(f.Feature.RESPONSIVE_EMBEDS.value)

    def support_wide_align(self, _value: Any = None) -> None:
        self.host.register_feature_flag(f.Feature.ALIGN_WIDE.value)

    def disable_custom_font_sizes(self, _value: Any = None) -> None:
        self.host.register_feature_flag(f.Feature.DISABLE_CUSTOM_FONT_SIZES.value)

    def disable_custom_colors(self, _value: Any = None) -> None:
        self.host.register_feature_flag(f.Feature.DISABLE_CUSTOM_COLORS.value)

    # Reusable block handlers

    def unlock_post_type(self, type_name: str) -> PostTypeDefinition:
        """Make a built-in post type behave like a regular one.

        Returns:
            The host's post type definition, to be passed to later steps
        """
        post_type = self.host.get_post_type_definition(type_name)
        post_type.builtin = False
        post_type.show_in_menu = True
        self._logger.info("post_type_unlocked", post_type=type_name)
        return post_type

    def set_reusable_blocks_icon(
        self, post_type: PostTypeDefinition, icon: Any
    ) -> None:
        post_type.menu_icon = icon

    def set_reusable_blocks_labels(
        self, post_type: PostTypeDefinition, labels: Any
    ) -> None:
        """Merge ``labels`` over the existing ones; new values win.

        A value that is not a mapping replaces the labels as given.
        """
        if isinstance(labels, Mapping) and isinstance(post_type.labels, Mapping):
            post_type.labels = {**post_type.labels, **labels}
        else:
            post_type.labels = labels

    def modify_reusable_blocks_capability_type(
        self, post_type: PostTypeDefinition, capability_type: Any
    ) -> None:
        post_type.capability_type = capability_type

    def modify_reusable_blocks_capabilities(
        self, post_type: PostTypeDefinition, capabilities: Any
    ) -> None:
        post_type.capabilities = capabilities

    def set_reusable_blocks_to_use_graphql(self, post_type: PostTypeDefinition) -> None:
        post_type.show_in_graphql = True
        if not post_type.graphql_single_name:
            post_type.graphql_single_name = f.GRAPHQL_SINGLE_NAME
        if not post_type.graphql_plural_name:
            post_type.graphql_plural_name = f.GRAPHQL_PLURAL_NAME
