"""Default configuration values for htoprc files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import FrozenInstanceError
from types import MappingProxyType
from typing import Any

from .model import HtopConfig, Meter, MeterMode


class _ReadOnlyHtopConfig(HtopConfig):
    """HtopConfig that rejects writes. Only DEFAULT_CONFIG is built from it."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))
            elif isinstance(value, dict):
                object.__setattr__(self, name, MappingProxyType(dict(value)))
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if "_sealed" in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r} of DEFAULT_CONFIG")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r} of DEFAULT_CONFIG")

    def __eq__(self, other: object) -> bool:
        # tuples / mappingproxy compare by value against a plain HtopConfig
        if not isinstance(other, HtopConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __copy__(self) -> HtopConfig:
        return HtopConfig.from_dict(self.to_dict())

    def __deepcopy__(self, memo: dict) -> HtopConfig:
        return HtopConfig.from_dict(self.to_dict())


# NOTE:
# DEFAULT_CONFIG is shared by the parser (fallback values) and the serializer
# (baseline for only_non_defaults). It is read-only; use get_default_config()
# when a writable instance is needed.

DEFAULT_CONFIG: HtopConfig = _ReadOnlyHtopConfig()

# Header htop writes on a fresh install. Only used to decide whether the
# meters of a shared config count as customized.
STOCK_LEFT_METERS = (
    Meter("AllCPUs", MeterMode.BAR),
    Meter("Memory", MeterMode.BAR),
    Meter("Swap", MeterMode.BAR),
)
STOCK_RIGHT_METERS = (
    Meter("Tasks", MeterMode.TEXT),
    Meter("LoadAverage", MeterMode.TEXT),
    Meter("Uptime", MeterMode.TEXT),
)


def get_default_config() -> HtopConfig:
    """Return a new, writable configuration holding the default values."""
    return HtopConfig()


def is_default(attr: str, value: Any) -> bool:
    """True when ``value`` equals the default of HtopConfig attribute ``attr``."""
    default = getattr(DEFAULT_CONFIG, attr)
    if isinstance(default, tuple):
        return isinstance(value, (list, tuple)) and list(value) == list(default)
    if isinstance(default, Mapping):
        return isinstance(value, Mapping) and dict(value) == dict(default)
    return value == default
