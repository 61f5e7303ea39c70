"""
ConfigValidator のテスト
"""

from __future__ import annotations

import pytest

from htoprc_cli.config.defaults import get_default_config
from htoprc_cli.config.model import Meter, MeterMode, ScreenDefinition, SortDirection
from htoprc_cli.config.validator import ConfigValidator, ValidationError
from htoprc_cli.exceptions import InvalidConfigError


def _paths(errors: list[ValidationError]) -> list[str]:
    return [err.path for err in errors]


class TestScalarValidation:
    """スカラー値の型チェック"""

    def test_accepts_default_config(self):
        assert ConfigValidator.validate(get_default_config()) == []

    def test_rejects_non_config(self):
        errors = ConfigValidator.validate({"color_scheme": 0})
        assert _paths(errors) == ["<root>"]

    def test_out_of_range_values_are_allowed(self):
        """値の範囲はチェックしない"""
        config = get_default_config()
        config.color_scheme = 99
        config.delay = -5
        config.header_layout = "custom_layout"
        assert ConfigValidator.validate(config) == []

    def test_rejects_bool_for_int_field(self):
        config = get_default_config()
        config.color_scheme = True
        assert _paths(ConfigValidator.validate(config)) == ["color_scheme"]

    def test_rejects_int_for_bool_field(self):
        config = get_default_config()
        config.enable_mouse = 1
        assert _paths(ConfigValidator.validate(config)) == ["enable_mouse"]

    def test_rejects_raw_sort_direction(self):
        config = get_default_config()
        config.sort_direction = -1
        assert _paths(ConfigValidator.validate(config)) == ["sort_direction"]

    def test_rejects_version_with_newline(self):
        config = get_default_config()
        config.htop_version = "3.2.1\ncolor_scheme=6"
        assert _paths(ConfigValidator.validate(config)) == ["htop_version"]

    def test_rejects_non_int_min_version(self):
        config = get_default_config()
        config.config_reader_min_version = "3"
        assert _paths(ConfigValidator.validate(config)) == ["config_reader_min_version"]


class TestCollectionValidation:
    """columns / meters のチェック"""

    def test_rejects_non_int_column(self):
        config = get_default_config()
        config.columns = [0, "PID", 1]
        assert _paths(ConfigValidator.validate(config)) == ["columns[1]"]

    def test_rejects_non_meter_item(self):
        config = get_default_config()
        config.left_meters = [Meter("CPU"), "Memory"]
        assert _paths(ConfigValidator.validate(config)) == ["left_meters[1]"]

    def test_rejects_empty_meter_type(self):
        config = get_default_config()
        config.right_meters = [Meter("", MeterMode.TEXT)]
        assert _paths(ConfigValidator.validate(config)) == ["right_meters[0].type"]

    def test_unknown_meter_mode_is_allowed(self):
        """未知のモードは bar として出力されるのでエラーにしない"""
        config = get_default_config()
        config.left_meters = [Meter("CPU", "sparkline")]
        assert ConfigValidator.validate(config) == []


class TestScreenValidation:
    """screen 定義のチェック"""

    def test_accepts_valid_screen(self):
        config = get_default_config()
        config.screens = [
            ScreenDefinition(
                name="My View",
                columns=["PID", "Command"],
                sort_key="PID",
                sort_direction=SortDirection.ASCENDING,
                tree_view=True,
                unknown_options={"dynamic": ""},
            )
        ]
        assert ConfigValidator.validate(config) == []

    def test_rejects_screen_name_with_equals(self):
        config = get_default_config()
        config.screens = [ScreenDefinition(name="a=b")]
        assert _paths(ConfigValidator.validate(config)) == ["screens[0].name"]

    def test_rejects_column_with_whitespace(self):
        config = get_default_config()
        config.screens = [ScreenDefinition(name="Main", columns=["PID USER"])]
        assert _paths(ConfigValidator.validate(config)) == ["screens[0].columns[0]"]

    def test_rejects_wrong_tree_view_type(self):
        config = get_default_config()
        config.screens = [ScreenDefinition(name="Main", tree_view="yes")]
        assert _paths(ConfigValidator.validate(config)) == ["screens[0].tree_view"]

    def test_rejects_native_key_in_screen_unknown_options(self):
        config = get_default_config()
        config.screens = [ScreenDefinition(name="Main", unknown_options={"sort_key": "PID"})]
        assert _paths(ConfigValidator.validate(config)) == ["screens[0].unknown_options.sort_key"]


class TestUnknownOptionValidation:
    """unknown_options のチェック"""

    @pytest.mark.parametrize(
        "key",
        ["", "a=b", " padded", "color_scheme", "fields", "column_meters_0", "#comment", ".hidden", "screen:Main"],
    )
    def test_rejects_unreadable_keys(self, key: str):
        config = get_default_config()
        config.unknown_options = {key: "1"}
        assert ConfigValidator.validate(config)

    @pytest.mark.parametrize("value", ["a\nb", "a\rb"])
    def test_rejects_line_breaks_in_value(self, value: str):
        config = get_default_config()
        config.unknown_options = {"future": value}
        assert _paths(ConfigValidator.validate(config)) == ["unknown_options.future"]

    def test_rejects_non_string_value(self):
        config = get_default_config()
        config.unknown_options = {"future": 1}
        assert _paths(ConfigValidator.validate(config)) == ["unknown_options.future"]

    def test_accepts_deprecated_keys(self):
        config = get_default_config()
        config.unknown_options = {"left_meters": "AllCPUs Memory", "column_meters_2": "Clock"}
        assert ConfigValidator.validate(config) == []


class TestValidateOrRaise:
    """validate_or_raise のテスト"""

    def test_valid_config_does_not_raise(self):
        ConfigValidator.validate_or_raise(get_default_config())

    def test_invalid_config_raises_with_errors(self):
        config = get_default_config()
        config.delay = "fast"
        config.columns = ["x"]

        with pytest.raises(InvalidConfigError) as exc_info:
            ConfigValidator.validate_or_raise(config)

        assert _paths(exc_info.value.errors) == ["delay", "columns[0]"]
        assert "Configuration validation failed" in str(exc_info.value)
        assert "- delay: Expected int, got str" in str(exc_info.value)
