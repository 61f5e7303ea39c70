"""
htoprc オプションのメタデータ管理

エディタの補完・ドキュメント表示、および `htoprc-cli options` 用に
各ネイティブキーの説明と取り得る値を提供する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .fields import FIELDS_KEY, METER_KEYS, SCALAR_FIELDS, VERSION_FIELDS, FieldKind
from .model import HEADER_LAYOUTS

__all__ = ["OptionInfo", "OptionMetadata", "OPTION_TYPES"]

OPTION_TYPES = ("string", "number", "boolean", "list", "enum")


@dataclass(frozen=True)
class OptionInfo:
    """htoprc オプションのメタデータ"""

    name: str
    description: str
    value_type: str  # one of OPTION_TYPES
    values: Tuple[str, ...] = ()  # 取り得る値（列挙できる場合のみ）
    example: Optional[str] = None


_DESCRIPTIONS: Dict[str, str] = {
    "htop_version": "The htop version that created this config file",
    "config_reader_min_version": "Minimum htop version required to read this config",
    "color_scheme": (
        "Color scheme (0-6): 0=default, 1=monochrome, 2=black on white, "
        "3=light terminal, 4=MC, 5=black night, 6=broken gray"
    ),
    "header_layout": "Layout of header columns",
    "show_program_path": "Show full path in Command column",
    "highlight_base_name": "Highlight program basename in Command",
    "highlight_deleted_exe": "Highlight deleted/replaced executables",
    "highlight_megabytes": "Highlight large memory values",
    "highlight_threads": "Highlight threads in a different color",
    "highlight_changes": "Highlight changed values",
    "highlight_changes_delay_secs": "Seconds to highlight changed values",
    "shadow_other_users": "Shadow other users' processes",
    "show_thread_names": "Show thread names in Command column",
    "show_cpu_usage": "Show CPU usage percentage",
    "show_cpu_frequency": "Show CPU frequency in meters",
    "show_cpu_temperature": "Show CPU temperature in meters",
    "degree_fahrenheit": "Show temperature in Fahrenheit (0=Celsius)",
    "update_process_names": "Update process names on refresh",
    "account_guest_in_cpu_meter": "Account guest time in CPU meter",
    "hide_running_in_container": "Hide processes running in containers",
    "shadow_distribution_path_prefix": "Shadow distribution path prefix in command display",
    "show_cached_memory": "Show cached memory in memory meter",
    "topology_affinity": "Show CPU topology affinity",
    "enable_mouse": "Enable mouse support",
    "delay": "Update delay in tenths of seconds (default 15 = 1.5s)",
    "hide_function_bar": "Hide the function key bar at bottom (0=show, 1=hide, 2=auto)",
    "header_margin": "Show margin between header columns",
    "screen_tabs": "Show screen tabs",
    "detailed_cpu_time": "Show detailed CPU time breakdown",
    "cpu_count_from_one": "Number CPUs from 1 instead of 0",
    "sort_key": "Field ID to sort by",
    "sort_direction": "Sort direction (1=ascending, -1=descending)",
    "tree_view": "Enable tree view mode",
    "tree_sort_key": "Field ID for tree view sorting",
    "tree_sort_direction": "Tree view sort direction (1=ascending, -1=descending)",
    "tree_view_always_by_pid": "Always sort tree view by PID",
    "all_branches_collapsed": "Start with all tree branches collapsed",
    "hide_kernel_threads": "Hide kernel threads from process list",
    "hide_userland_threads": "Hide userland threads from process list",
    "find_comm_in_cmdline": "Show command name from cmdline if not found elsewhere",
    "strip_exe_from_cmdline": "Strip executable path from command line",
    "show_merged_command": "Show merged command and arguments",
}

_EXAMPLES: Dict[str, str] = {
    "htop_version": "3.2.1",
    "config_reader_min_version": "3",
    "highlight_changes_delay_secs": "5",
    "delay": "15",
    "sort_key": "46",
}

_ENUM_VALUES: Dict[str, Tuple[str, ...]] = {
    "color_scheme": ("0", "1", "2", "3", "4", "5", "6"),
    "header_layout": HEADER_LAYOUTS,
    "hide_function_bar": ("0", "1", "2"),
}


def _scalar_option(key: str, kind: FieldKind) -> OptionInfo:
    if kind is FieldKind.BOOL:
        return OptionInfo(key, _DESCRIPTIONS[key], "boolean", ("0", "1"))
    if kind is FieldKind.SORT_DIRECTION:
        return OptionInfo(key, _DESCRIPTIONS[key], "number", ("-1", "1"))
    if key == "header_layout":
        return OptionInfo(key, _DESCRIPTIONS[key], "enum", _ENUM_VALUES[key], "two_50_50")
    value_type = "number" if kind is FieldKind.INT else "string"
    return OptionInfo(key, _DESCRIPTIONS[key], value_type, _ENUM_VALUES.get(key, ()), _EXAMPLES.get(key))


def _build_options() -> Dict[str, OptionInfo]:
    options: Dict[str, OptionInfo] = {}
    for spec in VERSION_FIELDS + SCALAR_FIELDS:
        options[spec.key] = _scalar_option(spec.key, spec.kind)

    options[FIELDS_KEY] = OptionInfo(
        FIELDS_KEY,
        "Column fields to display (space-separated field IDs)",
        "list",
        example="0 48 17 18 38 39 40 2 46 47 49 1",
    )

    side_names = {0: "left", 1: "right"}
    meter_examples = {0: ("AllCPUs Memory Swap", "1 1 1"), 1: ("Tasks LoadAverage Uptime", "2 2 2")}
    for index, (names_key, modes_key, _attr) in METER_KEYS.items():
        side = side_names[index]
        names_example, modes_example = meter_examples[index]
        options[names_key] = OptionInfo(
            names_key,
            f"Meters in {side} header column (space-separated)",
            "list",
            example=names_example,
        )
        options[modes_key] = OptionInfo(
            modes_key,
            f"Display modes for {side} column meters (1=bar, 2=text, 3=graph, 4=led)",
            "list",
            example=modes_example,
        )
    return options


class OptionMetadata:
    """htoprc オプションのメタデータ管理"""

    _OPTIONS: Dict[str, OptionInfo] = _build_options()

    @classmethod
    def get(cls, name: str) -> Optional[OptionInfo]:
        """
        オプションのメタデータを取得

        Args:
            name: htoprc のキー名

        Returns:
            OptionInfo、見つからない場合は None
        """
        return cls._OPTIONS.get(name)

    @classmethod
    def get_all(cls) -> Dict[str, OptionInfo]:
        """全オプションのメタデータ（ファイル出力順）を取得"""
        return cls._OPTIONS.copy()

    @classmethod
    def get_options_by_type(cls, value_type: str) -> List[str]:
        """
        指定した値型のオプション名を取得

        Args:
            value_type: "string", "number", "boolean", "list", "enum" のいずれか

        Returns:
            オプション名のリスト
        """
        return [name for name, info in cls._OPTIONS.items() if info.value_type == value_type]

    @classmethod
    def list_option_names(cls) -> List[str]:
        """利用可能なオプション名のリストを取得"""
        return list(cls._OPTIONS.keys())
