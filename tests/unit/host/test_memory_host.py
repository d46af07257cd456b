"""Tests for the in-memory reference host."""

import pytest

from gutensettings.core.errors import LifecycleError, PostTypeNotFoundError
from gutensettings.core.host import EditorHost, PostTypeDefinition, RegistrationCall
from gutensettings.host.memory import InMemoryHost


@pytest.mark.unit
class TestInMemoryHost:
    def test_implements_host_port(self, host: InMemoryHost) -> None:
        assert isinstance(host, EditorHost)

    def test_feature_flags(self, host: InMemoryHost) -> None:
        host.register_feature_flag("align-wide")
        host.register_feature_flag("editor-font-sizes", [{"size": 12}])

        assert host.supports("align-wide")
        assert host.get_feature("align-wide") is True
        assert host.get_feature("editor-font-sizes") == [{"size": 12}]
        assert not host.supports("editor-styles")

    def test_feature_reregistration_replaces_options(self, host: InMemoryHost) -> None:
        host.register_feature_flag("editor-color-palette", [{"color": "#000"}])
        host.register_feature_flag("editor-color-palette", [{"color": "#fff"}])

        assert host.get_feature("editor-color-palette") == [{"color": "#fff"}]
        assert len(host.calls) == 2

    def test_filters_without_overrides_pass_value_through(
        self, host: InMemoryHost
    ) -> None:
        assert host.apply_filters("use_block_editor_for_post", True) is True

    def test_filter_override_applies_constant(self, host: InMemoryHost) -> None:
        host.register_filter_override("use_block_editor_for_post", False, 10)

        assert host.apply_filters("use_block_editor_for_post", True) is False
        assert host.apply_filters("use_block_editor_for_post_type", True) is True

    def test_filter_overrides_run_in_priority_order(self, host: InMemoryHost) -> None:
        host.register_filter_override("use_block_editor_for_post", True, 20)
        host.register_filter_override("use_block_editor_for_post", False, 10)

        # priority 20 runs last and wins
        assert host.apply_filters("use_block_editor_for_post", False) is True

    def test_default_reusable_block_type(self, host: InMemoryHost) -> None:
        post_type = host.get_post_type_definition("wp_block")

        assert post_type.builtin is True
        assert post_type.show_in_menu is False
        assert post_type.labels["singular_name"] == "Reusable block"

    def test_post_type_is_live_reference(self, host: InMemoryHost) -> None:
        host.get_post_type_definition("wp_block").menu_icon = "icon"

        assert host.get_post_type_definition("wp_block").menu_icon == "icon"

    def test_unknown_post_type(self, host: InMemoryHost) -> None:
        with pytest.raises(PostTypeNotFoundError, match="'book'"):
            host.get_post_type_definition("book")

    def test_register_post_type(self, host: InMemoryHost) -> None:
        host.register_post_type(PostTypeDefinition(name="book"))

        assert host.get_post_type_definition("book").name == "book"

    def test_actions_run_in_priority_order(self, host: InMemoryHost) -> None:
        order: list[str] = []
        host.add_action("init", lambda: order.append("late"), priority=20)
        host.add_action("init", lambda: order.append("early"), priority=5)
        host.add_action("init", lambda: order.append("default"))

        host.do_action("init")

        assert order == ["early", "default", "late"]
        assert host.has_fired("init")

    def test_init_fires_once(self, host: InMemoryHost) -> None:
        host.do_action("init")

        with pytest.raises(LifecycleError) as exc_info:
            host.do_action("init")

        assert exc_info.value.hook_name == "init"

    def test_failed_init_can_be_retried(self) -> None:
        host = InMemoryHost(post_types=[])
        host.add_action("init", lambda: host.get_post_type_definition("wp_block"))

        with pytest.raises(PostTypeNotFoundError):
            host.do_action("init")

        assert not host.has_fired("init")
        host.register_post_type(PostTypeDefinition(name="wp_block"))
        host.do_action("init")
        assert host.has_fired("init")

    def test_post_types_snapshot(self, host: InMemoryHost) -> None:
        host.register_post_type(PostTypeDefinition(name="book"))

        assert list(host.post_types) == ["wp_block", "book"]
        assert host.post_types["wp_block"] is host.get_post_type_definition("wp_block")

    def test_other_actions_can_repeat(self, host: InMemoryHost) -> None:
        count: list[int] = []
        host.add_action("save_post", lambda: count.append(1))

        host.do_action("save_post")
        host.do_action("save_post")

        assert len(count) == 2

    def test_calls_recorded_in_order(self, host: InMemoryHost) -> None:
        host.register_feature_flag("align-wide")
        host.register_filter_override("use_block_editor_for_post", False)
        host.get_post_type_definition("wp_block")
        host.add_action("init", lambda: None, priority=15)

        assert host.calls == [
            RegistrationCall("feature_flag", "align-wide"),
            RegistrationCall(
                "filter_override",
                "use_block_editor_for_post",
                {"result": False, "priority": 10},
            ),
            RegistrationCall("post_type", "wp_block"),
            RegistrationCall("action", "init", {"priority": 15}),
        ]
