"""FEN 验证和规范化"""

from __future__ import annotations

from notation.errors import FenError
from notation.generate import make_fen
from notation.parse import parse_fen
from notation.types import COLORS, Color, FenOptions, Setup


def validate_fen(fen: str) -> tuple[bool, str]:
    """验证 FEN 是否合法

    只检查语法和结构（字段、行列数、取值范围），不检查规则合法性。

    Args:
        fen: FEN 字符串

    Returns:
        (is_valid, error_message)
    """
    result = parse_fen(fen)
    if isinstance(result, FenError):
        return False, str(result)
    return True, "OK"


def normalize_fen(fen: str, options: FenOptions | None = None) -> str | None:
    """规范化 FEN：补全省略字段、合并空白、易位写法最简化

    Returns:
        规范化后的 FEN；不合法返回 None
    """
    result = parse_fen(fen)
    if isinstance(result, FenError):
        return None
    return make_fen(result, options)


def count_pieces(setup: Setup) -> dict[Color, int]:
    """双方棋盘上的棋子数（不含口袋）"""
    counts = {color: 0 for color in COLORS}
    for piece in setup.board.values():
        counts[piece.color] += 1
    return counts
