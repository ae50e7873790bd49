"""FEN 生成函数"""

from __future__ import annotations

from notation.castling import make_castling_fen
from notation.roles import chess_role_to_char, piece_to_char
from notation.squares import CHESS
from notation.types import Board, ChessRole, FenOptions, Material, Pockets, RemainingChecks, Setup


def make_fen(setup: Setup, options: FenOptions | None = None) -> str:
    """从 Setup 生成 FEN 字符串

    Args:
        setup: 局面
        options: 生成选项（是否输出 `~` 升变标记）

    Returns:
        FEN 字符串
    """
    options = options or FenOptions()

    board_str = make_board_fen(setup.board, options)
    if setup.pockets is not None:
        board_str += "/" + make_pockets(setup.pockets)

    parts = [
        board_str,
        setup.turn.char,
        make_castling_fen(setup.board, setup.castling_rights),
        CHESS.make_square(setup.ep_square) if setup.ep_square is not None else "-",
        str(setup.halfmoves),
        str(setup.fullmoves),
    ]
    if setup.remaining_checks is not None:
        parts.append(make_remaining_checks(setup.remaining_checks))

    return " ".join(parts)


def make_board_fen(board: Board, options: FenOptions | None = None) -> str:
    """棋盘转 FEN 字符串"""
    promoted = options.promoted if options else False
    rows: list[str] = []

    # 从第 8 行到第 1 行
    for rank in range(CHESS.ranks - 1, -1, -1):
        row_str = ""
        empty_count = 0

        for file in range(CHESS.files):
            piece = board.get(CHESS.square(file, rank))
            if piece is None:
                empty_count += 1
            else:
                if empty_count > 0:
                    row_str += str(empty_count)
                    empty_count = 0
                row_str += piece_to_char(piece, promoted=promoted)

        if empty_count > 0:
            row_str += str(empty_count)

        rows.append(row_str)

    return "/".join(rows)


def _make_material(material: Material) -> str:
    return "".join(chess_role_to_char(role) * material.get(role, 0) for role in ChessRole)


def make_pockets(pockets: Pockets) -> str:
    """口袋转字符串：白方大写在前，黑方小写在后"""
    return _make_material(pockets.white).upper() + _make_material(pockets.black)


def make_remaining_checks(remaining_checks: RemainingChecks) -> str:
    """输出 `+白方已将军数+黑方已将军数`"""
    white, black = remaining_checks.checks_given()
    return f"+{white}+{black}"
