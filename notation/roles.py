"""棋子类型 <-> 字符"""

from __future__ import annotations

from notation.types import ChessRole, Color, Piece, ShogiRole


# =============================================================================
# 国际象棋
# =============================================================================

# 棋子类型 -> 字符
CHESS_ROLE_TO_CHAR: dict[ChessRole, str] = {
    ChessRole.PAWN: "p",
    ChessRole.KNIGHT: "n",
    ChessRole.BISHOP: "b",
    ChessRole.ROOK: "r",
    ChessRole.QUEEN: "q",
    ChessRole.KING: "k",
}

# 字符 -> 棋子类型
CHESS_CHAR_TO_ROLE: dict[str, ChessRole] = {v: k for k, v in CHESS_ROLE_TO_CHAR.items()}

# 升变标记
PROMOTED_MARKER = "~"


def chess_role_to_char(role: ChessRole) -> str:
    return CHESS_ROLE_TO_CHAR[role]


def chess_char_to_role(ch: str) -> ChessRole | None:
    """大小写不敏感，未知字符返回 None"""
    return CHESS_CHAR_TO_ROLE.get(ch.lower())


def char_to_piece(ch: str) -> Piece | None:
    """FEN 字符 -> 棋子，大写白方、小写黑方"""
    role = chess_char_to_role(ch)
    if role is None:
        return None
    color = Color.BLACK if ch.islower() else Color.WHITE
    return Piece(role=role, color=color)


def piece_to_char(piece: Piece, promoted: bool = False) -> str:
    """棋子 -> FEN 字符

    Args:
        piece: 棋子
        promoted: 是否输出 `~` 升变标记
    """
    ch = chess_role_to_char(piece.role)
    if piece.color == Color.WHITE:
        ch = ch.upper()
    if promoted and piece.promoted:
        ch += PROMOTED_MARKER
    return ch


# =============================================================================
# 将棋
# =============================================================================

SHOGI_ROLE_TO_CHAR: dict[ShogiRole, str] = {
    ShogiRole.PAWN: "p",
    ShogiRole.LANCE: "l",
    ShogiRole.KNIGHT: "n",
    ShogiRole.SILVER: "s",
    ShogiRole.GOLD: "g",
    ShogiRole.BISHOP: "b",
    ShogiRole.ROOK: "r",
    ShogiRole.KING: "k",
    ShogiRole.TOKIN: "+p",
    ShogiRole.PROMOTED_LANCE: "+l",
    ShogiRole.PROMOTED_KNIGHT: "+n",
    ShogiRole.PROMOTED_SILVER: "+s",
    ShogiRole.HORSE: "+b",
    ShogiRole.DRAGON: "+r",
}

SHOGI_CHAR_TO_ROLE: dict[str, ShogiRole] = {v: k for k, v in SHOGI_ROLE_TO_CHAR.items()}

# 生驹 -> 成驹
PROMOTIONS: dict[ShogiRole, ShogiRole] = {
    ShogiRole.PAWN: ShogiRole.TOKIN,
    ShogiRole.LANCE: ShogiRole.PROMOTED_LANCE,
    ShogiRole.KNIGHT: ShogiRole.PROMOTED_KNIGHT,
    ShogiRole.SILVER: ShogiRole.PROMOTED_SILVER,
    ShogiRole.BISHOP: ShogiRole.HORSE,
    ShogiRole.ROOK: ShogiRole.DRAGON,
}

# 可以作为持驹打入的类型
POCKET_ROLES = (
    ShogiRole.PAWN,
    ShogiRole.LANCE,
    ShogiRole.KNIGHT,
    ShogiRole.SILVER,
    ShogiRole.GOLD,
    ShogiRole.BISHOP,
    ShogiRole.ROOK,
)


def shogi_role_to_char(role: ShogiRole) -> str:
    return SHOGI_ROLE_TO_CHAR[role]


def shogi_char_to_role(ch: str) -> ShogiRole | None:
    """`p` / `+p` 等（大小写不敏感），未知返回 None"""
    return SHOGI_CHAR_TO_ROLE.get(ch.lower())


def promote(role: ShogiRole) -> ShogiRole | None:
    """成驹；金、玉和已成的驹返回 None"""
    return PROMOTIONS.get(role)


def unpromote(role: ShogiRole) -> ShogiRole | None:
    """被吃后回到持驹的类型；玉返回 None"""
    if role in POCKET_ROLES:
        return role
    for base, promoted in PROMOTIONS.items():
        if promoted == role:
            return base
    return None


def is_pocket_role(role: ShogiRole) -> bool:
    return role in POCKET_ROLES
