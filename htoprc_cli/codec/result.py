"""
パース結果のデータクラス

パーサーは例外を送出せず、読み飛ばした行やデフォルトに戻した値を
ParseWarning として ParseResult に格納する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from htoprc_cli.config.model import HtopConfig


class WarningType(str, Enum):
    """警告の種類"""

    UNKNOWN_OPTION = "unknown_option"  # 未知のキー（unknown_options に保持）
    INVALID_VALUE = "invalid_value"  # 読めない値（デフォルト値を維持）
    DEPRECATED = "deprecated"  # htop 2.x 形式のキー


@dataclass(frozen=True)
class ParseWarning:
    """非致命的なパース警告"""

    line: int  # 1 始まりの行番号
    message: str
    type: WarningType


@dataclass
class ParseResult:
    """htoprc のパース結果"""

    config: HtopConfig
    warnings: List[ParseWarning] = field(default_factory=list)
    version: str = "unknown"  # "v2" / "v3" / "unknown"
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        """JSON 出力用の辞書に変換"""
        return {
            "version": self.version,
            "score": self.score,
            "warnings": [
                {"line": w.line, "message": w.message, "type": w.type.value}
                for w in self.warnings
            ],
            "config": self.config.to_dict(),
        }
