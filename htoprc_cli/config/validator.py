"""Structural validation of HtopConfig instances before serialization."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any, List

from ..exceptions import InvalidConfigError
from .fields import (
    NATIVE_KEYS,
    SCALAR_FIELDS,
    SCREEN_FIELDS,
    VERSION_FIELDS,
    FieldKind,
    FieldSpec,
)
from .model import HtopConfig, Meter, ScreenDefinition, SortDirection

_LINE_BREAKS = ("\n", "\r")


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


class ConfigValidator:
    """Check the invariants the htoprc text format relies on.

    Values are not range-checked (a color scheme of 99 is fine); only things
    that would make the serialized text unreadable, or be read back as a
    different configuration, are reported.
    """

    @classmethod
    def validate(cls, config: HtopConfig) -> List[ValidationError]:
        """Validate a configuration and return a list of errors."""
        if not isinstance(config, HtopConfig):
            return [
                ValidationError(
                    path="<root>",
                    message=f"Expected HtopConfig, got {type(config).__name__}",
                )
            ]

        errors: List[ValidationError] = []
        for spec in VERSION_FIELDS:
            value = getattr(config, spec.attr)
            if value is not None:
                errors.extend(cls._validate_scalar(value, spec, spec.attr))
        for spec in SCALAR_FIELDS:
            errors.extend(cls._validate_scalar(getattr(config, spec.attr), spec, spec.attr))

        errors.extend(cls._validate_columns(config.columns))
        errors.extend(cls._validate_meters(config.left_meters, "left_meters"))
        errors.extend(cls._validate_meters(config.right_meters, "right_meters"))

        if not isinstance(config.screens, (list, tuple)):
            errors.append(ValidationError("screens", "Expected a list of ScreenDefinition"))
        else:
            for index, screen in enumerate(config.screens):
                errors.extend(cls._validate_screen(screen, f"screens[{index}]"))

        errors.extend(
            cls._validate_unknown_options(config.unknown_options, "unknown_options", top_level=True)
        )
        return errors

    @classmethod
    def validate_or_raise(cls, config: HtopConfig) -> None:
        """Validate the configuration and raise InvalidConfigError on failure."""
        errors = cls.validate(config)
        if errors:
            raise InvalidConfigError(errors)

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _validate_scalar(cls, value: Any, spec: FieldSpec, path: str) -> List[ValidationError]:
        kind = spec.kind
        if kind is FieldKind.BOOL:
            ok = isinstance(value, bool)
        elif kind is FieldKind.INT:
            ok = isinstance(value, int) and not isinstance(value, bool)
        elif kind is FieldKind.SORT_DIRECTION:
            ok = isinstance(value, SortDirection)
        else:
            ok = isinstance(value, str)
        if not ok:
            return [
                ValidationError(
                    path=path,
                    message=f"Expected {kind.value}, got {type(value).__name__}",
                )
            ]
        if kind is FieldKind.STRING:
            return cls._validate_text(value, path)
        return []

    @classmethod
    def _validate_columns(cls, columns: Any) -> List[ValidationError]:
        if not isinstance(columns, (list, tuple)):
            return [ValidationError("columns", "Expected a list of int")]
        return [
            ValidationError(f"columns[{index}]", f"Expected int, got {type(item).__name__}")
            for index, item in enumerate(columns)
            if not isinstance(item, int) or isinstance(item, bool)
        ]

    @classmethod
    def _validate_meters(cls, meters: Any, path: str) -> List[ValidationError]:
        if not isinstance(meters, (list, tuple)):
            return [ValidationError(path, "Expected a list of Meter")]
        errors: List[ValidationError] = []
        for index, meter in enumerate(meters):
            item_path = f"{path}[{index}]"
            if not isinstance(meter, Meter):
                errors.append(ValidationError(item_path, f"Expected Meter, got {type(meter).__name__}"))
            else:
                errors.extend(cls._validate_token(meter.type, f"{item_path}.type"))
        return errors

    @classmethod
    def _validate_screen(cls, screen: Any, path: str) -> List[ValidationError]:
        if not isinstance(screen, ScreenDefinition):
            return [ValidationError(path, f"Expected ScreenDefinition, got {type(screen).__name__}")]

        errors = cls._validate_text(screen.name, f"{path}.name")
        if isinstance(screen.name, str) and "=" in screen.name:
            errors.append(ValidationError(f"{path}.name", "Screen name must not contain '='"))

        if not isinstance(screen.columns, (list, tuple)):
            errors.append(ValidationError(f"{path}.columns", "Expected a list of str"))
        else:
            for index, column in enumerate(screen.columns):
                errors.extend(cls._validate_token(column, f"{path}.columns[{index}]"))

        for spec in SCREEN_FIELDS:
            value = getattr(screen, spec.attr)
            if value is not None:
                errors.extend(cls._validate_scalar(value, spec, f"{path}.{spec.attr}"))

        errors.extend(
            cls._validate_unknown_options(screen.unknown_options, f"{path}.unknown_options", top_level=False)
        )
        return errors

    @classmethod
    def _validate_unknown_options(cls, options: Any, path: str, *, top_level: bool) -> List[ValidationError]:
        if not isinstance(options, MappingABC):
            return [ValidationError(path, "Expected a mapping of str to str")]

        errors: List[ValidationError] = []
        for key, value in options.items():
            item_path = f"{path}.{key}"
            if not isinstance(key, str) or not key.strip():
                errors.append(ValidationError(item_path, "Option key must be a non-empty string"))
                continue
            errors.extend(cls._validate_text(key, item_path))
            if "=" in key:
                errors.append(ValidationError(item_path, "Option key must not contain '='"))
            if key.strip() != key:
                errors.append(ValidationError(item_path, "Option key must not have surrounding whitespace"))
            if top_level:
                if key in NATIVE_KEYS:
                    errors.append(ValidationError(item_path, "Key is a native field and cannot be an unknown option"))
                if key.startswith(("#", ".", "screen:")):
                    errors.append(ValidationError(item_path, "Key would be read back as a comment or screen line"))
            elif key in {spec.key for spec in SCREEN_FIELDS}:
                errors.append(ValidationError(item_path, "Key is a native screen field"))
            if not isinstance(value, str):
                errors.append(ValidationError(item_path, f"Expected str value, got {type(value).__name__}"))
            else:
                errors.extend(cls._validate_text(value, item_path))
        return errors

    @staticmethod
    def _validate_text(value: Any, path: str) -> List[ValidationError]:
        if not isinstance(value, str):
            return [ValidationError(path, f"Expected str, got {type(value).__name__}")]
        if any(char in value for char in _LINE_BREAKS):
            return [ValidationError(path, "Value must not contain line breaks")]
        return []

    @classmethod
    def _validate_token(cls, value: Any, path: str) -> List[ValidationError]:
        if not isinstance(value, str) or not value:
            return [ValidationError(path, "Expected a non-empty string")]
        if len(value.split()) != 1 or value.strip() != value:
            return [ValidationError(path, "Token must not contain whitespace")]
        return []

