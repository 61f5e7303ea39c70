"""
htoprc コーデック

htoprc テキストと HtopConfig の相互変換を提供する。

Usage:
    from htoprc_cli.codec import parse_htoprc, serialize_htoprc

    result = parse_htoprc(text)
    result.config.color_scheme = 5
    text = serialize_htoprc(result.config, only_non_defaults=True)
"""

from .parser import HtoprcParser, parse, parse_htoprc
from .result import ParseResult, ParseWarning, WarningType
from .scoring import SCORE_WEIGHTS, compute_score, detect_version
from .serializer import SerializeOptions, serialize, serialize_htoprc

__all__ = [
    "HtoprcParser",
    "parse",
    "parse_htoprc",
    "ParseResult",
    "ParseWarning",
    "WarningType",
    "SCORE_WEIGHTS",
    "compute_score",
    "detect_version",
    "SerializeOptions",
    "serialize",
    "serialize_htoprc",
]
