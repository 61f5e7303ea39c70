"""Canonical re-exports for the htoprc-cli public API surface.

Web/gallery backends and editors import the codec from `htoprc_cli` directly:

- parse / parse_htoprc: htoprc テキスト → HtopConfig（ParseResult）
- serialize / serialize_htoprc: HtopConfig → htoprc テキスト
- DEFAULT_CONFIG, get_default_config: デフォルト設定
- ConfigValidator: シリアライズ前の構造チェック
"""

from .codec import (
    HtoprcParser,
    ParseResult,
    ParseWarning,
    SerializeOptions,
    WarningType,
    compute_score,
    detect_version,
    parse,
    parse_htoprc,
    serialize,
    serialize_htoprc,
)
from .config import (
    DEFAULT_CONFIG,
    HEADER_LAYOUTS,
    ConfigValidator,
    HtopConfig,
    Meter,
    MeterMode,
    OptionInfo,
    OptionMetadata,
    ScreenDefinition,
    SortDirection,
    ValidationError,
    get_default_config,
)
from .exceptions import HtoprcError, InvalidConfigError

__all__ = [
    # Codec
    "HtoprcParser",
    "ParseResult",
    "ParseWarning",
    "SerializeOptions",
    "WarningType",
    "compute_score",
    "detect_version",
    "parse",
    "parse_htoprc",
    "serialize",
    "serialize_htoprc",
    # Config model
    "DEFAULT_CONFIG",
    "HEADER_LAYOUTS",
    "HtopConfig",
    "Meter",
    "MeterMode",
    "ScreenDefinition",
    "SortDirection",
    "get_default_config",
    "OptionInfo",
    "OptionMetadata",
    "ConfigValidator",
    "ValidationError",
    # Exceptions
    "HtoprcError",
    "InvalidConfigError",
]
