"""
OptionMetadata のテスト
"""

from __future__ import annotations

from htoprc_cli.config.fields import FIELDS_BY_KEY, NATIVE_KEYS
from htoprc_cli.config.model import HEADER_LAYOUTS
from htoprc_cli.config.options import OPTION_TYPES, OptionInfo, OptionMetadata


class TestOptionMetadata:
    """OptionMetadata のテスト"""

    def test_get_existing_option(self):
        """存在するオプションを取得"""
        info = OptionMetadata.get("color_scheme")
        assert info is not None
        assert info.name == "color_scheme"
        assert info.value_type == "number"
        assert info.values == ("0", "1", "2", "3", "4", "5", "6")

    def test_get_nonexistent_option(self):
        """存在しないオプションは None"""
        assert OptionMetadata.get("nonexistent") is None

    def test_every_native_key_is_documented(self):
        """全てのネイティブキーにメタデータがある"""
        assert set(OptionMetadata.list_option_names()) == set(NATIVE_KEYS)

    def test_get_all_returns_copy(self):
        options = OptionMetadata.get_all()
        options.pop("color_scheme")
        assert OptionMetadata.get("color_scheme") is not None

    def test_get_all_is_in_file_order(self):
        names = OptionMetadata.list_option_names()
        assert names[:3] == ["htop_version", "config_reader_min_version", "sort_key"]

    def test_get_options_by_type(self):
        """値型でフィルタ"""
        booleans = OptionMetadata.get_options_by_type("boolean")
        assert "tree_view" in booleans
        assert "color_scheme" not in booleans

        lists = OptionMetadata.get_options_by_type("list")
        assert set(lists) == {
            "fields",
            "column_meters_0",
            "column_meter_modes_0",
            "column_meters_1",
            "column_meter_modes_1",
        }

    def test_value_types_are_known(self):
        for info in OptionMetadata.get_all().values():
            assert info.value_type in OPTION_TYPES


class TestOptionInfo:
    """OptionInfo のテスト"""

    def test_boolean_option(self):
        info = OptionMetadata.get("tree_view")
        assert info.value_type == "boolean"
        assert info.values == ("0", "1")
        assert info.description

    def test_header_layout_is_enum(self):
        info = OptionMetadata.get("header_layout")
        assert info.value_type == "enum"
        assert info.values == HEADER_LAYOUTS
        assert info.example == "two_50_50"

    def test_sort_direction_values(self):
        assert OptionMetadata.get("tree_sort_direction").values == ("-1", "1")

    def test_htop_version_is_string(self):
        info = OptionMetadata.get("htop_version")
        assert info.value_type == "string"
        assert info.example == "3.2.1"

    def test_meter_modes_description(self):
        info = OptionMetadata.get("column_meter_modes_1")
        assert "right" in info.description
        assert "4=led" in info.description

    def test_scalar_fields_have_descriptions(self):
        for key in FIELDS_BY_KEY:
            assert OptionMetadata.get(key).description, key

    def test_option_info_defaults(self):
        info = OptionInfo("x", "desc", "string")
        assert info.values == ()
        assert info.example is None
