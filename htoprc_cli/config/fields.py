"""Field descriptor table shared by the htoprc parser and serializer.

Every native top-level key is listed here exactly once, together with the
HtopConfig attribute it maps to and the value codec used to read and write
it. ``SCALAR_FIELDS`` is in output order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Tuple

from .model import SortDirection

__all__ = [
    "FieldKind",
    "FieldSpec",
    "VERSION_FIELDS",
    "SCALAR_FIELDS",
    "SCREEN_FIELDS",
    "FIELDS_KEY",
    "METER_KEYS",
    "DEPRECATED_KEYS",
    "FIELDS_BY_KEY",
    "NATIVE_KEYS",
    "decode_bool",
    "decode_int",
    "decode_int_list",
    "decode_sort_direction",
    "encode_bool",
]

_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_LITERALS = frozenset({"true", "yes", "on"})
_FALSE_LITERALS = frozenset({"false", "no", "off"})


def decode_int(raw: str) -> int:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not a base-10 integer: {raw!r}")
    return int(text, 10)


def decode_bool(raw: str) -> bool:
    """htop の atoi() 互換: 0 以外の整数は真。true/false などのリテラルも受け付ける"""
    text = raw.strip().lower()
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    return decode_int(text) != 0


def decode_sort_direction(raw: str) -> SortDirection:
    value = decode_int(raw)
    if value == 1:
        return SortDirection.ASCENDING
    if value == -1:
        return SortDirection.DESCENDING
    raise ValueError(f"sort direction must be 1 or -1, got {raw!r}")


def decode_int_list(raw: str) -> list[int]:
    return [decode_int(token) for token in raw.split()]


def encode_bool(value: bool) -> str:
    return "1" if value else "0"


def _encode_int(value: int) -> str:
    return str(int(value))


def _encode_sort_direction(value: SortDirection) -> str:
    return SortDirection(value).to_htoprc()


def _identity(raw: str) -> str:
    return raw


class FieldKind(Enum):
    """Value type of a native field"""

    BOOL = "bool"
    INT = "int"
    SORT_DIRECTION = "sort_direction"
    STRING = "string"


_CODECS: Dict[FieldKind, Tuple[Callable[[str], Any], Callable[[Any], str]]] = {
    FieldKind.BOOL: (decode_bool, encode_bool),
    FieldKind.INT: (decode_int, _encode_int),
    FieldKind.SORT_DIRECTION: (decode_sort_direction, _encode_sort_direction),
    FieldKind.STRING: (str.strip, _identity),
}


@dataclass(frozen=True)
class FieldSpec:
    """One native key: file key, HtopConfig attribute and value kind."""

    key: str
    attr: str
    kind: FieldKind

    def decode(self, raw: str) -> Any:
        """Decode a raw value; raises ValueError when it cannot be read."""
        return _CODECS[self.kind][0](raw)

    def encode(self, value: Any) -> str:
        return _CODECS[self.kind][1](value)


def _bool(key: str) -> FieldSpec:
    return FieldSpec(key, key, FieldKind.BOOL)


def _int(key: str) -> FieldSpec:
    return FieldSpec(key, key, FieldKind.INT)


VERSION_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("htop_version", "htop_version", FieldKind.STRING),
    FieldSpec("config_reader_min_version", "config_reader_min_version", FieldKind.INT),
)

SCALAR_FIELDS: Tuple[FieldSpec, ...] = (
    # Sort options
    _int("sort_key"),
    FieldSpec("sort_direction", "sort_direction", FieldKind.SORT_DIRECTION),
    _int("tree_sort_key"),
    FieldSpec("tree_sort_direction", "tree_sort_direction", FieldKind.SORT_DIRECTION),
    # Threading
    _bool("hide_kernel_threads"),
    _bool("hide_userland_threads"),
    # Display
    _bool("shadow_other_users"),
    _bool("show_thread_names"),
    _bool("show_program_path"),
    _bool("highlight_base_name"),
    _bool("highlight_deleted_exe"),
    _bool("highlight_megabytes"),
    _bool("highlight_threads"),
    _bool("highlight_changes"),
    _int("highlight_changes_delay_secs"),
    # Color and layout
    _int("color_scheme"),
    _bool("enable_mouse"),
    _int("delay"),
    FieldSpec("header_layout", "header_layout", FieldKind.STRING),
    # Tree view
    _bool("tree_view"),
    _bool("tree_view_always_by_pid"),
    _bool("all_branches_collapsed"),
    # Command display
    _bool("find_comm_in_cmdline"),
    _bool("strip_exe_from_cmdline"),
    _bool("show_merged_command"),
    # Header
    _bool("header_margin"),
    _bool("screen_tabs"),
    _bool("detailed_cpu_time"),
    _bool("cpu_count_from_one"),
    # CPU
    _bool("show_cpu_usage"),
    _bool("show_cpu_frequency"),
    _bool("show_cpu_temperature"),
    _bool("degree_fahrenheit"),
    _bool("update_process_names"),
    _bool("account_guest_in_cpu_meter"),
    _bool("hide_running_in_container"),
    _bool("shadow_distribution_path_prefix"),
    _bool("show_cached_memory"),
    _bool("topology_affinity"),
    # Function bar
    _int("hide_function_bar"),
)

# Per-screen overrides, written as ".<key>=" lines after "screen:<name>="
SCREEN_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("sort_key", "sort_key", FieldKind.STRING),
    FieldSpec("sort_direction", "sort_direction", FieldKind.SORT_DIRECTION),
    FieldSpec("tree_view", "tree_view", FieldKind.BOOL),
)

FIELDS_KEY = "fields"

# index -> (names key, modes key, HtopConfig attribute)
METER_KEYS: Dict[int, Tuple[str, str, str]] = {
    0: ("column_meters_0", "column_meter_modes_0", "left_meters"),
    1: ("column_meters_1", "column_meter_modes_1", "right_meters"),
}

# htop 2.x header keys; still preserved verbatim as unknown options
DEPRECATED_KEYS = frozenset({
    "left_meters",
    "left_meter_modes",
    "right_meters",
    "right_meter_modes",
})

FIELDS_BY_KEY: Dict[str, FieldSpec] = {
    spec.key: spec for spec in VERSION_FIELDS + SCALAR_FIELDS
}

NATIVE_KEYS = frozenset(
    set(FIELDS_BY_KEY)
    | {FIELDS_KEY}
    | {key for names_key, modes_key, _ in METER_KEYS.values() for key in (names_key, modes_key)}
)
