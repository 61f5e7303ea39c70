"""Typed in-memory representation of an htoprc file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

__all__ = [
    "HEADER_LAYOUTS",
    "MeterMode",
    "SortDirection",
    "Meter",
    "ScreenDefinition",
    "HtopConfig",
]

# htop 3.x の header_layout 値（未知の値もそのまま保持する）
HEADER_LAYOUTS = (
    "two_50_50",
    "two_33_67",
    "two_67_33",
    "three_33_34_33",
    "three_25_25_50",
    "three_25_50_25",
    "three_50_25_25",
    "four_25_25_25_25",
)


class MeterMode(str, Enum):
    """Rendering mode of a header meter."""

    BAR = "bar"
    TEXT = "text"
    GRAPH = "graph"
    LED = "led"

    @property
    def code(self) -> int:
        """Numeric code used by column_meter_modes_N."""
        return _MODE_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> MeterMode:
        """Map an htoprc mode code to a mode, falling back to BAR."""
        for mode, mode_code in _MODE_CODES.items():
            if mode_code == code:
                return mode
        return cls.BAR


_MODE_CODES = {
    MeterMode.BAR: 1,
    MeterMode.TEXT: 2,
    MeterMode.GRAPH: 3,
    MeterMode.LED: 4,
}
_MODE_VALUES = frozenset(mode.value for mode in MeterMode)


def _mode_value(mode: Union[MeterMode, str]) -> str:
    return mode.value if isinstance(mode, MeterMode) else mode


class SortDirection(str, Enum):
    """Sort direction (1 = ascending, -1 = descending in the file)."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    def to_htoprc(self) -> str:
        return "1" if self is SortDirection.ASCENDING else "-1"


@dataclass(frozen=True)
class Meter:
    """A single header meter: its type name and display mode."""

    type: str
    mode: Union[MeterMode, str] = MeterMode.BAR

    @property
    def mode_code(self) -> int:
        """Numeric mode code; modes outside the four known variants encode as bar."""
        if _mode_value(self.mode) in _MODE_VALUES:
            return MeterMode(self.mode).code
        return MeterMode.BAR.code


@dataclass
class ScreenDefinition:
    """
    htop 3.x screen (named process-table view).

    sort_key / sort_direction / tree_view は tri-state:
    None は「ファイルに記述なし」を意味し、デフォルト値とは区別する。
    """

    name: str
    columns: List[str] = field(default_factory=list)
    sort_key: Optional[str] = None
    sort_direction: Optional[SortDirection] = None
    tree_view: Optional[bool] = None
    # 未対応の ".xxx=" 行（.tree_sort_key, .dynamic など）
    unknown_options: Dict[str, str] = field(default_factory=dict)


@dataclass
class HtopConfig:
    """Parsed htoprc configuration."""

    # Version
    htop_version: Optional[str] = None
    config_reader_min_version: Optional[int] = None

    # Display
    color_scheme: int = 0
    header_layout: str = "two_50_50"
    show_program_path: bool = True
    highlight_base_name: bool = False
    highlight_deleted_exe: bool = True
    highlight_megabytes: bool = True
    highlight_threads: bool = True
    highlight_changes: bool = False
    highlight_changes_delay_secs: int = 5
    shadow_other_users: bool = False
    show_thread_names: bool = False
    show_cpu_usage: bool = True
    show_cpu_frequency: bool = False
    show_cpu_temperature: bool = False
    degree_fahrenheit: bool = False
    update_process_names: bool = False
    account_guest_in_cpu_meter: bool = False
    hide_running_in_container: bool = False
    shadow_distribution_path_prefix: bool = False
    show_cached_memory: bool = True
    topology_affinity: bool = False
    enable_mouse: bool = True
    delay: int = 15
    hide_function_bar: int = 0
    header_margin: bool = True
    screen_tabs: bool = True
    detailed_cpu_time: bool = False
    cpu_count_from_one: bool = False

    # Header meters (column 0 = left, column 1 = right)
    left_meters: List[Meter] = field(default_factory=list)
    right_meters: List[Meter] = field(default_factory=list)

    # Process list
    columns: List[int] = field(default_factory=list)
    sort_key: int = 46
    sort_direction: SortDirection = SortDirection.DESCENDING
    tree_view: bool = False
    tree_sort_key: int = 0
    tree_sort_direction: SortDirection = SortDirection.ASCENDING
    tree_view_always_by_pid: bool = False
    all_branches_collapsed: bool = False

    # Threading
    hide_kernel_threads: bool = True
    hide_userland_threads: bool = False

    # Command display
    find_comm_in_cmdline: bool = True
    strip_exe_from_cmdline: bool = True
    show_merged_command: bool = False

    # Screen definitions (htop 3.x)
    screens: List[ScreenDefinition] = field(default_factory=list)

    # Unknown options (preserved for forward compatibility)
    unknown_options: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換（列挙型は値文字列に展開）"""
        data: dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            data[name] = _plain(getattr(self, name))
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HtopConfig:
        """to_dict() の出力から設定を復元"""
        values = dict(data)
        for key in ("sort_direction", "tree_sort_direction"):
            if key in values:
                values[key] = SortDirection(values[key])
        for key in ("left_meters", "right_meters"):
            if key in values:
                values[key] = [_meter_from_dict(item) for item in values[key]]
        if "screens" in values:
            values["screens"] = [_screen_from_dict(item) for item in values["screens"]]
        if "columns" in values:
            values["columns"] = list(values["columns"])
        if "unknown_options" in values:
            values["unknown_options"] = dict(values["unknown_options"])
        return cls(**values)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Meter):
        return {"type": value.type, "mode": _plain(value.mode)}
    if isinstance(value, ScreenDefinition):
        return {
            "name": value.name,
            "columns": list(value.columns),
            "sort_key": value.sort_key,
            "sort_direction": _plain(value.sort_direction),
            "tree_view": value.tree_view,
            "unknown_options": dict(value.unknown_options),
        }
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, Mapping):
        return dict(value)
    return value


def _meter_from_dict(data: dict[str, Any]) -> Meter:
    mode = data.get("mode", MeterMode.BAR.value)
    if _mode_value(mode) in _MODE_VALUES:
        mode = MeterMode(mode)
    return Meter(type=data["type"], mode=mode)


def _screen_from_dict(data: dict[str, Any]) -> ScreenDefinition:
    direction = data.get("sort_direction")
    return ScreenDefinition(
        name=data["name"],
        columns=list(data.get("columns", [])),
        sort_key=data.get("sort_key"),
        sort_direction=SortDirection(direction) if direction is not None else None,
        tree_view=data.get("tree_view"),
        unknown_options=dict(data.get("unknown_options", {})),
    )
