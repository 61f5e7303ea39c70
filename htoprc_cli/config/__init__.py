"""Configuration model, defaults and validation for htoprc files."""

from .defaults import DEFAULT_CONFIG, STOCK_LEFT_METERS, STOCK_RIGHT_METERS, get_default_config
from .model import HEADER_LAYOUTS, HtopConfig, Meter, MeterMode, ScreenDefinition, SortDirection
from .options import OptionInfo, OptionMetadata
from .validator import ConfigValidator, ValidationError

__all__ = [
    "DEFAULT_CONFIG",
    "STOCK_LEFT_METERS",
    "STOCK_RIGHT_METERS",
    "get_default_config",
    "HEADER_LAYOUTS",
    "HtopConfig",
    "Meter",
    "MeterMode",
    "ScreenDefinition",
    "SortDirection",
    "OptionInfo",
    "OptionMetadata",
    "ConfigValidator",
    "ValidationError",
]
