"""Tests for deriving validated settings from raw configuration."""

from collections import OrderedDict

import pytest

from gutensettings.editor import ValidatedSettings, derive_settings, is_valid_setting


@pytest.mark.unit
class TestIsValidSetting:
    @pytest.mark.parametrize("value", [True, False, 0, "", [], {}, "dashicons-admin"])
    def test_present_values_are_valid(self, value: object) -> None:
        assert is_valid_setting(value) is True

    def test_none_is_invalid(self) -> None:
        assert is_valid_setting(None) is False


@pytest.mark.unit
class TestDeriveSettings:
    def test_drops_only_null_entries(self) -> None:
        config = {
            "colorPalette": [{"name": "Red", "color": "#f00"}],
            "disabled": None,
            "supportWideAlign": True,
            "fontSizes": None,
        }

        settings = derive_settings(config)

        assert set(settings) == {"colorPalette", "supportWideAlign"}
        assert settings["colorPalette"] == [{"name": "Red", "color": "#f00"}]
        assert "disabled" not in settings

    def test_keeps_false_and_empty_values(self) -> None:
        settings = derive_settings(
            {"supportEditorStyles": False, "reusableBlocksIcon": "", "fontSizes": []}
        )

        assert settings.to_dict() == {
            "supportEditorStyles": False,
            "reusableBlocksIcon": "",
            "fontSizes": [],
        }

    def test_preserves_input_order(self) -> None:
        config = OrderedDict(
            [("fontSizes", []), ("disabled", None), ("colorPalette", []), ("a", 1)]
        )

        assert list(derive_settings(config)) == ["fontSizes", "colorPalette", "a"]

    def test_does_not_modify_input(self) -> None:
        config = {"disabled": None, "supportWideAlign": True}

        derive_settings(config)

        assert config == {"disabled": None, "supportWideAlign": True}

    def test_empty_config(self) -> None:
        settings = derive_settings({})

        assert len(settings) == 0
        assert not settings


@pytest.mark.unit
class TestValidatedSettings:
    def test_is_read_only(self) -> None:
        settings = ValidatedSettings({"supportWideAlign": True})

        with pytest.raises(TypeError):
            settings["disabled"] = True  # type: ignore[index]

    def test_rejects_null_values(self) -> None:
        with pytest.raises(ValueError, match="disabled"):
            ValidatedSettings({"disabled": None})

    def test_compares_equal_to_mapping(self) -> None:
        settings = ValidatedSettings([("supportWideAlign", True)])

        assert settings == {"supportWideAlign": True}
        assert settings.get("missing") is None
