"""FEN 解析失败类型

解析函数不抛异常，而是返回 FenError；需要异常的调用方用
parse_fen_or_raise 得到 InvalidFenError。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FenErrorKind(Enum):
    """出错的 FEN 字段"""

    BOARD = "board"
    POCKETS = "pockets"
    CASTLING = "castling"
    EP_SQUARE = "ep_square"
    REMAINING_CHECKS = "remaining_checks"
    HALFMOVES = "halfmoves"
    FULLMOVES = "fullmoves"
    TRAILING = "trailing"


@dataclass(frozen=True)
class FenError:
    """结构性解析失败"""

    kind: FenErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class InvalidFenError(ValueError):
    """FEN 格式错误（异常形式）"""

    def __init__(self, fen: str, error: FenError):
        super().__init__(f"Invalid FEN ({error}): {fen!r}")
        self.fen = fen
        self.error = error
