"""HtopConfig -> htoprc text.

Output order is fixed (version lines, fields, scalar options in field-table
order, meters, screens, unknown options) so that files written by this module
diff cleanly against files written by htop itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, List, Optional

from htoprc_cli.config.defaults import is_default
from htoprc_cli.config.fields import (
    FIELDS_KEY,
    METER_KEYS,
    SCALAR_FIELDS,
    SCREEN_FIELDS,
    VERSION_FIELDS,
)
from htoprc_cli.config.model import HtopConfig, Meter, ScreenDefinition
from htoprc_cli.config.validator import ConfigValidator

__all__ = ["SerializeOptions", "serialize_htoprc", "serialize"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SerializeOptions:
    """
    シリアライズ動作の設定

    Usage:
        serialize_htoprc(config, SerializeOptions(only_non_defaults=True))
        serialize_htoprc(config, include_unknown=False)
    """

    # htop_version 行を出力する（config_reader_min_version には影響しない）
    include_version: bool = True
    # デフォルト値と異なるオプションのみ出力する
    only_non_defaults: bool = False
    # unknown_options を出力する（only_non_defaults の対象外）
    include_unknown: bool = True


def _line(key: str, value: Any) -> str:
    return f"{key}={value}"


def _serialize_meters(meters: List[Meter]) -> tuple[str, str]:
    names = " ".join(meter.type for meter in meters)
    modes = " ".join(str(meter.mode_code) for meter in meters)
    return names, modes


def _serialize_screens(screens: List[ScreenDefinition]) -> List[str]:
    lines: List[str] = []
    for screen in screens:
        lines.append(f"screen:{screen.name}={' '.join(screen.columns)}")
        for spec in SCREEN_FIELDS:
            value = getattr(screen, spec.attr)
            # 未指定（None）のフィールドはデフォルト値で補わずに省略する
            if value is not None:
                lines.append(_line(f".{spec.key}", spec.encode(value)))
        for key, value in screen.unknown_options.items():
            lines.append(_line(f".{key}", value))
    return lines


def serialize_htoprc(
    config: HtopConfig,
    options: Optional[SerializeOptions] = None,
    **overrides: bool,
) -> str:
    """
    HtopConfig を htoprc 形式の文字列に変換

    Args:
        config: 出力する設定
        options: 出力オプション（省略時はデフォルト）
        **overrides: options の個別フィールドを上書き（include_unknown=False など）

    Returns:
        改行区切りの htoprc テキスト（末尾改行なし）

    Raises:
        InvalidConfigError: config が構造的に不正な場合
    """
    opts = options or SerializeOptions()
    if overrides:
        opts = replace(opts, **overrides)

    ConfigValidator.validate_or_raise(config)

    def differs(attr: str) -> bool:
        return not opts.only_non_defaults or not is_default(attr, getattr(config, attr))

    lines: List[str] = []

    # Version info
    htop_version, min_version = VERSION_FIELDS
    if opts.include_version and config.htop_version is not None:
        lines.append(_line(htop_version.key, htop_version.encode(config.htop_version)))
    if config.config_reader_min_version is not None:
        lines.append(_line(min_version.key, min_version.encode(config.config_reader_min_version)))

    # Process list columns
    if config.columns and differs("columns"):
        lines.append(_line(FIELDS_KEY, " ".join(str(column) for column in config.columns)))

    # Scalar options
    for spec in SCALAR_FIELDS:
        if differs(spec.attr):
            lines.append(_line(spec.key, spec.encode(getattr(config, spec.attr))))

    # Meters (column 0 = left, column 1 = right)
    for names_key, modes_key, attr in METER_KEYS.values():
        meters = getattr(config, attr)
        if meters and differs(attr):
            names, modes = _serialize_meters(meters)
            lines.append(_line(names_key, names))
            lines.append(_line(modes_key, modes))

    # Screen definitions (htop 3.x)
    if config.screens and differs("screens"):
        lines.extend(_serialize_screens(config.screens))

    # Unknown options (preserved for forward compatibility)
    if opts.include_unknown:
        for key, value in config.unknown_options.items():
            lines.append(_line(key, value))

    logger.debug("Serialized htoprc: %d lines (options=%s)", len(lines), opts)
    return "\n".join(lines)


serialize = serialize_htoprc
