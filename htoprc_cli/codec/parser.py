"""htoprc text -> HtopConfig.

The parser is total: anything it cannot interpret is either preserved in
``unknown_options`` or reported as a ParseWarning while the default value is
kept. It never raises for malformed input.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from htoprc_cli.config.defaults import get_default_config
from htoprc_cli.config.fields import (
    DEPRECATED_KEYS,
    FIELDS_BY_KEY,
    FIELDS_KEY,
    METER_KEYS,
    SCREEN_FIELDS,
    FieldSpec,
    decode_int,
)
from htoprc_cli.config.model import HEADER_LAYOUTS, HtopConfig, Meter, MeterMode, ScreenDefinition

from .result import ParseResult, ParseWarning, WarningType
from .scoring import compute_score, detect_version

__all__ = ["HtoprcParser", "parse_htoprc", "parse"]

logger = logging.getLogger(__name__)

SCREEN_PREFIX = "screen:"
SCREEN_OPTION_PREFIX = "."

_SCREEN_FIELDS_BY_KEY: Dict[str, FieldSpec] = {spec.key: spec for spec in SCREEN_FIELDS}
_METER_NAME_KEYS = {names_key: index for index, (names_key, _, _) in METER_KEYS.items()}
_METER_MODE_KEYS = {modes_key: index for index, (_, modes_key, _) in METER_KEYS.items()}


class HtoprcParser:
    """
    htoprc パーサー（行単位のステートマシン）

    状態遷移:
        TOP_LEVEL → "screen:<name>=..." → IN_SCREEN
        IN_SCREEN → "." で始まらない行 → TOP_LEVEL（その行はトップレベルとして再処理）

    Usage:
        result = HtoprcParser().parse(text)
        result.config.color_scheme
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._config: HtopConfig = get_default_config()
        self._warnings: List[ParseWarning] = []
        self._screen: Optional[ScreenDefinition] = None
        # column_meters_N / column_meter_modes_N are combined after all lines are read
        self._meter_names: Dict[int, Tuple[List[str], int]] = {}
        self._meter_modes: Dict[int, Tuple[List[str], int]] = {}

    def parse(self, text: str) -> ParseResult:
        """Parse htoprc text into a ParseResult."""
        self._reset()
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        for number, line in enumerate(lines, start=1):
            self._process_line(line, number)
        self._build_meters()

        config = self._config
        result = ParseResult(
            config=config,
            warnings=list(self._warnings),
            version=detect_version(config),
            score=compute_score(config),
        )
        logger.debug(
            "Parsed htoprc: %d lines, %d screens, %d unknown options, %d warnings",
            len(lines),
            len(config.screens),
            len(config.unknown_options),
            len(result.warnings),
        )
        return result

    # Line handling --------------------------------------------------------

    def _process_line(self, line: str, number: int) -> None:
        content = line.lstrip()
        if not content or content.startswith("#"):
            return

        if content.startswith(SCREEN_OPTION_PREFIX):
            if self._screen is None:
                self._warn(number, f"Screen option outside of a screen block: {content.strip()}", WarningType.INVALID_VALUE)
            else:
                self._process_screen_option(self._screen, content[len(SCREEN_OPTION_PREFIX):], number)
            return

        # Any other line ends the current screen block
        self._screen = None

        key, sep, value = content.partition("=")
        if not sep:
            return
        key = key.strip()

        if key.startswith(SCREEN_PREFIX):
            self._open_screen(key[len(SCREEN_PREFIX):], value)
        elif not key:
            self._warn(number, "Option without a key", WarningType.INVALID_VALUE)
        elif key in FIELDS_BY_KEY:
            self._set_field(FIELDS_BY_KEY[key], value, number)
        elif key == FIELDS_KEY:
            self._set_columns(value, number)
        elif key in _METER_NAME_KEYS:
            self._meter_names[_METER_NAME_KEYS[key]] = (value.split(), number)
        elif key in _METER_MODE_KEYS:
            self._meter_modes[_METER_MODE_KEYS[key]] = (value.split(), number)
        else:
            self._set_unknown(key, value, number)

    def _set_field(self, spec: FieldSpec, value: str, number: int) -> None:
        try:
            decoded = spec.decode(value)
        except ValueError:
            self._warn(
                number,
                f"Invalid value for {spec.key}: {value.strip()!r}, keeping previous value",
                WarningType.INVALID_VALUE,
            )
            return
        if spec.key == "header_layout" and decoded not in HEADER_LAYOUTS:
            self._warn(number, f"Unrecognized header_layout: {decoded!r}", WarningType.INVALID_VALUE)
        setattr(self._config, spec.attr, decoded)

    def _set_columns(self, value: str, number: int) -> None:
        columns: List[int] = []
        for token in value.split():
            try:
                columns.append(decode_int(token))
            except ValueError:
                self._warn(number, f"Ignoring non-numeric field id: {token!r}", WarningType.INVALID_VALUE)
        self._config.columns = columns

    def _set_unknown(self, key: str, value: str, number: int) -> None:
        if key in DEPRECATED_KEYS:
            self._warn(number, f"Deprecated htop 2.x option: {key}", WarningType.DEPRECATED)
        else:
            self._warn(number, f"Unknown option: {key}", WarningType.UNKNOWN_OPTION)
        self._config.unknown_options[key] = value

    # Screens --------------------------------------------------------------

    def _open_screen(self, name: str, value: str) -> None:
        screen = ScreenDefinition(name=name, columns=value.split())
        self._config.screens.append(screen)
        self._screen = screen

    def _process_screen_option(self, screen: ScreenDefinition, body: str, number: int) -> None:
        key, sep, value = body.partition("=")
        key = key.strip()
        if not sep or not key:
            self._warn(number, f"Malformed screen option: .{body.strip()}", WarningType.INVALID_VALUE)
            return

        spec = _SCREEN_FIELDS_BY_KEY.get(key)
        if spec is None:
            self._warn(number, f"Unknown screen option: .{key}", WarningType.UNKNOWN_OPTION)
            screen.unknown_options[key] = value
            return
        try:
            setattr(screen, spec.attr, spec.decode(value))
        except ValueError:
            self._warn(
                number,
                f"Invalid value for .{spec.key} in screen {screen.name!r}: {value.strip()!r}",
                WarningType.INVALID_VALUE,
            )

    # Meters ---------------------------------------------------------------

    def _build_meters(self) -> None:
        for index, (names_key, modes_key, attr) in METER_KEYS.items():
            if index not in self._meter_names:
                if index in self._meter_modes:
                    self._warn(self._meter_modes[index][1], f"{modes_key} without {names_key}", WarningType.INVALID_VALUE)
                continue

            names, _ = self._meter_names[index]
            codes, modes_line = self._meter_modes.get(index, ([], 0))
            if len(codes) > len(names):
                self._warn(modes_line, f"{modes_key} has more entries than {names_key}", WarningType.INVALID_VALUE)

            meters = []
            for position, name in enumerate(names):
                code = codes[position] if position < len(codes) else None
                meters.append(Meter(type=name, mode=self._decode_mode(code, modes_line)))
            setattr(self._config, attr, meters)

    def _decode_mode(self, code: Optional[str], number: int) -> MeterMode:
        if code is None:
            return MeterMode.BAR
        try:
            value = decode_int(code)
        except ValueError:
            value = 0
        mode = MeterMode.from_code(value)
        if mode.code != value:
            self._warn(number, f"Unknown meter mode {code!r}, using bar", WarningType.INVALID_VALUE)
        return mode

    def _warn(self, line: int, message: str, warning_type: WarningType) -> None:
        logger.debug("line %d: %s", line, message)
        self._warnings.append(ParseWarning(line=line, message=message, type=warning_type))


def parse_htoprc(text: str) -> ParseResult:
    """Parse an htoprc configuration string."""
    return HtoprcParser().parse(text)


def parse(text: str) -> HtopConfig:
    """Parse an htoprc configuration string and return only the config."""
    return parse_htoprc(text).config
