"""USI 走法字符串

- 普通走法：`7g7f`（从 7g 到 7f）
- 成驹：`7g7f+`
- 打入：`P*5e`（持驹字符 + `*` + 目标格）
"""

from __future__ import annotations

from notation.roles import is_pocket_role, shogi_char_to_role, shogi_role_to_char
from notation.squares import SHOGI
from notation.types import DropMove, Move, NormalMove

DROP_MARKER = "*"
PROMOTION_MARKER = "+"


def parse_usi(move_str: str) -> Move | None:
    """解析走法字符串

    Args:
        move_str: 走法字符串

    Returns:
        NormalMove / DropMove；不合法返回 None

    Examples:
        >>> parse_usi("7g7f+")
        NormalMove(from_square=20, to_square=29, promotion=True)
        >>> parse_usi("P*5e")
        DropMove(role=<ShogiRole.PAWN: 'pawn'>, to_square=40)
    """
    if len(move_str) == 4 and move_str[1] == DROP_MARKER:
        role = shogi_char_to_role(move_str[0])
        to_square = SHOGI.parse_square(move_str[2:])
        if role is None or not is_pocket_role(role) or to_square is None:
            return None
        return DropMove(role=role, to_square=to_square)

    if len(move_str) not in (4, 5):
        return None
    if len(move_str) == 5 and move_str[4] != PROMOTION_MARKER:
        return None

    from_square = SHOGI.parse_square(move_str[0:2])
    to_square = SHOGI.parse_square(move_str[2:4])
    if from_square is None or to_square is None:
        return None
    return NormalMove(from_square=from_square, to_square=to_square, promotion=len(move_str) == 5)


def parse_usi_or_raise(move_str: str) -> Move:
    """解析走法字符串

    Raises:
        ValueError: 格式错误
    """
    move = parse_usi(move_str)
    if move is None:
        raise ValueError(f"Invalid USI move: {move_str!r}")
    return move


def make_usi(move: Move) -> str:
    """走法转字符串"""
    if isinstance(move, DropMove):
        role_char = shogi_role_to_char(move.role).upper()
        return f"{role_char}{DROP_MARKER}{SHOGI.make_square(move.to_square)}"

    suffix = PROMOTION_MARKER if move.promotion else ""
    return f"{SHOGI.make_square(move.from_square)}{SHOGI.make_square(move.to_square)}{suffix}"
