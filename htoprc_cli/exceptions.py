"""
htoprc コーデックの例外クラス階層

パーサーは例外を送出しない（警告として報告する）。
シリアライザーは不正な HtopConfig に対してのみ InvalidConfigError を送出する。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from htoprc_cli.config.validator import ValidationError


class HtoprcError(Exception):
    """htoprc コーデックエラーの基底クラス"""

    pass


class InvalidConfigError(HtoprcError, ValueError):
    """構造的に不正な設定（呼び出し側のプログラミングエラー）"""

    def __init__(self, errors: Sequence[ValidationError]):
        self.errors = list(errors)
        details = "\n".join(f"- {err.path}: {err.message}" for err in self.errors)
        super().__init__(f"Configuration validation failed:\n{details}")
