"""局面显示函数（ASCII）"""

from __future__ import annotations

from notation.castling import make_castling_fen
from notation.generate import make_pockets, make_remaining_checks
from notation.roles import PROMOTED_MARKER, piece_to_char
from notation.squares import CHESS
from notation.types import Board, ChessRole, Color, Piece, Setup

# 符号映射（用于 markdown/终端显示）
PIECE_SYMBOLS: dict[tuple[Color, ChessRole], str] = {
    (Color.WHITE, ChessRole.KING): "♔",
    (Color.WHITE, ChessRole.QUEEN): "♕",
    (Color.WHITE, ChessRole.ROOK): "♖",
    (Color.WHITE, ChessRole.BISHOP): "♗",
    (Color.WHITE, ChessRole.KNIGHT): "♘",
    (Color.WHITE, ChessRole.PAWN): "♙",
    (Color.BLACK, ChessRole.KING): "♚",
    (Color.BLACK, ChessRole.QUEEN): "♛",
    (Color.BLACK, ChessRole.ROOK): "♜",
    (Color.BLACK, ChessRole.BISHOP): "♝",
    (Color.BLACK, ChessRole.KNIGHT): "♞",
    (Color.BLACK, ChessRole.PAWN): "♟",
}

EMPTY_SYMBOL = "·"


def piece_symbol(piece: Piece | None, unicode: bool = False) -> str:
    """单个格子的显示符号"""
    if piece is None:
        return EMPTY_SYMBOL
    if unicode:
        symbol = PIECE_SYMBOLS[(piece.color, piece.role)]
        return symbol + PROMOTED_MARKER if piece.promoted else symbol
    return piece_to_char(piece, promoted=True)


def board_rows(board: Board, unicode: bool = False) -> list[list[str]]:
    """按第 8 行到第 1 行返回每格符号"""
    return [
        [piece_symbol(board.get(CHESS.square(file, rank)), unicode) for file in range(CHESS.files)]
        for rank in range(CHESS.ranks - 1, -1, -1)
    ]


def board_to_ascii(board: Board, unicode: bool = False) -> str:
    """将棋盘转换为 ASCII 棋盘图

    Args:
        board: 棋盘
        unicode: 使用 ♔♛ 等符号

    Returns:
        ASCII 棋盘字符串
    """
    lines = []
    for idx, row in enumerate(board_rows(board, unicode)):
        rank_name = CHESS.rank_names[CHESS.ranks - 1 - idx]
        lines.append(f"{rank_name} " + " ".join(row))

    lines.append("  " + " ".join(CHESS.file_names))
    return "\n".join(lines)


def setup_summary(setup: Setup) -> list[str]:
    """回合、易位、口袋等附加信息"""
    lines = [
        f"Turn: {setup.turn.value}",
        f"Castling: {make_castling_fen(setup.board, setup.castling_rights)}",
        f"En passant: {CHESS.make_square(setup.ep_square) if setup.ep_square is not None else '-'}",
        f"Moves: halfmoves={setup.halfmoves} fullmoves={setup.fullmoves}",
    ]
    if setup.pockets is not None:
        lines.append(f"Pockets: {make_pockets(setup.pockets) or '-'}")
    if setup.remaining_checks is not None:
        lines.append(
            f"Remaining checks: white={setup.remaining_checks.white} "
            f"black={setup.remaining_checks.black} ({make_remaining_checks(setup.remaining_checks)})"
        )
    return lines


def setup_to_ascii(setup: Setup, unicode: bool = False) -> str:
    """棋盘图 + 附加信息"""
    return "\n".join([board_to_ascii(setup.board, unicode), "", *setup_summary(setup)])
