"""FEN 解析

字段顺序（除棋盘外都可省略）：

    <棋盘>[/<口袋>] <回合> <易位> <过路兵> [<将军数>] <半回合> <回合数> [<将军数>]

所有 parse_* 函数在输入不合法时返回 FenError 而不是抛异常，
任何一个字段出错整个解析失败，不会返回残缺的局面。
"""

from __future__ import annotations

import re
from dataclasses import replace

from notation.castling import parse_castling_fen
from notation.errors import FenError, FenErrorKind, InvalidFenError
from notation.logging import logger
from notation.roles import PROMOTED_MARKER, char_to_piece
from notation.squares import CHESS
from notation.types import (
    MAX_REMAINING_CHECKS,
    Board,
    Color,
    Pockets,
    RemainingChecks,
    Setup,
    empty_material,
)

SMALL_UINT_PATTERN = re.compile(r"[0-9]{1,4}")


def parse_fen(fen: str) -> Setup | FenError:
    """解析 FEN 字符串

    Args:
        fen: FEN 字符串

    Returns:
        Setup；格式错误返回 FenError
    """
    result = _parse_fen(fen)
    if isinstance(result, FenError):
        logger.debug(f"FEN rejected ({result}): {fen!r}")
    return result


def parse_fen_or_raise(fen: str) -> Setup:
    """解析 FEN 字符串

    Raises:
        InvalidFenError: 格式错误
    """
    result = parse_fen(fen)
    if isinstance(result, FenError):
        raise InvalidFenError(fen, result)
    return result


def _parse_fen(fen: str) -> Setup | FenError:
    fields = iter(fen.strip().split())

    # 1. 棋盘和口袋
    board_part = next(fields, None)
    if board_part is None:
        return FenError(FenErrorKind.BOARD, "Empty FEN")

    split = _split_pockets(board_part)
    if isinstance(split, FenError):
        return split
    board_str, pocket_str = split

    board = parse_board_fen(board_str)
    if isinstance(board, FenError):
        return board

    pockets: Pockets | None = None
    if pocket_str is not None:
        parsed_pockets = parse_pockets(pocket_str)
        if isinstance(parsed_pockets, FenError):
            return parsed_pockets
        pockets = parsed_pockets

    # 2. 回合：缺省或 "w" 为白方，其他都视为黑方
    turn_part = next(fields, None)
    turn = Color.WHITE if turn_part is None or turn_part == "w" else Color.BLACK

    # 3. 易位
    castling_rights: frozenset[int] = frozenset()
    castling_part = next(fields, None)
    if castling_part is not None:
        parsed_rights = parse_castling_fen(board, castling_part)
        if isinstance(parsed_rights, FenError):
            return parsed_rights
        castling_rights = parsed_rights

    # 4. 过路兵
    ep_square: int | None = None
    ep_part = next(fields, None)
    if ep_part is not None and ep_part != "-":
        ep_square = CHESS.parse_square(ep_part)
        if ep_square is None:
            return FenError(FenErrorKind.EP_SQUARE, f"Invalid en passant square: {ep_part}")

    # 5. 将军数可能出现在半回合数之前
    remaining_checks: RemainingChecks | None = None
    halfmove_part = next(fields, None)
    if halfmove_part is not None and "+" in halfmove_part:
        parsed_checks = parse_remaining_checks(halfmove_part)
        if isinstance(parsed_checks, FenError):
            return parsed_checks
        remaining_checks = parsed_checks
        halfmove_part = next(fields, None)

    # 6. 半回合数和回合数
    halfmoves = 0
    if halfmove_part is not None:
        parsed_halfmoves = parse_small_uint(halfmove_part)
        if parsed_halfmoves is None:
            return FenError(FenErrorKind.HALFMOVES, f"Invalid halfmove clock: {halfmove_part}")
        halfmoves = parsed_halfmoves

    fullmoves = 1
    fullmove_part = next(fields, None)
    if fullmove_part is not None:
        parsed_fullmoves = parse_small_uint(fullmove_part)
        if parsed_fullmoves is None:
            return FenError(FenErrorKind.FULLMOVES, f"Invalid fullmove number: {fullmove_part}")
        fullmoves = parsed_fullmoves

    # 7. 也可能出现在最后
    checks_part = next(fields, None)
    if checks_part is not None:
        if remaining_checks is not None:
            return FenError(FenErrorKind.REMAINING_CHECKS, "Remaining checks given twice")
        parsed_checks = parse_remaining_checks(checks_part)
        if isinstance(parsed_checks, FenError):
            return parsed_checks
        remaining_checks = parsed_checks

    leftover = list(fields)
    if leftover:
        return FenError(FenErrorKind.TRAILING, f"Unexpected trailing fields: {' '.join(leftover)}")

    return Setup(
        board=board,
        turn=turn,
        castling_rights=castling_rights,
        pockets=pockets,
        ep_square=ep_square,
        remaining_checks=remaining_checks,
        halfmoves=halfmoves,
        fullmoves=max(1, fullmoves),
    )


def _split_pockets(board_part: str) -> tuple[str, str | None] | FenError:
    """拆出口袋部分

    两种写法：
    - `<棋盘>[<口袋>]`
    - `<棋盘>/<口袋>`（第 9 段）
    """
    if board_part.endswith("]"):
        start = board_part.find("[")
        if start == -1:
            return FenError(FenErrorKind.BOARD, "No matching '[' for ']'")
        return board_part[:start], board_part[start + 1 : -1]

    start = _nth_index(board_part, "/", 7)
    if start == -1:
        return board_part, None
    return board_part[:start], board_part[start + 1 :]


def _nth_index(text: str, ch: str, n: int) -> int:
    """第 n 个（从 0 开始）ch 的下标，没有返回 -1"""
    idx = -1
    for _ in range(n + 1):
        idx = text.find(ch, idx + 1)
        if idx == -1:
            return -1
    return idx


def parse_board_fen(board_part: str) -> Board | FenError:
    """解析棋盘部分

    从第 8 行到第 1 行，每行从 a 列到 h 列；数字表示连续空格，
    棋子后紧跟 `~` 表示升变得到的棋子。
    """
    board: Board = {}
    rank, file = CHESS.ranks - 1, 0
    idx = 0

    while idx < len(board_part):
        ch = board_part[idx]
        if ch == "/":
            if file != CHESS.files:
                return FenError(
                    FenErrorKind.BOARD,
                    f"Rank {rank + 1} has {file} files, expected {CHESS.files}",
                )
            file = 0
            rank -= 1
        elif ch in "123456789":
            file += int(ch)
        else:
            piece = char_to_piece(ch)
            if piece is None:
                return FenError(FenErrorKind.BOARD, f"Invalid piece char: {ch}")
            if file >= CHESS.files or rank < 0:
                return FenError(FenErrorKind.BOARD, f"Piece {ch} outside the board")
            if board_part[idx + 1 : idx + 2] == PROMOTED_MARKER:
                piece = replace(piece, promoted=True)
                idx += 1
            board[CHESS.square(file, rank)] = piece
            file += 1
        idx += 1

    if rank != 0 or file != CHESS.files:
        return FenError(FenErrorKind.BOARD, f"Invalid board geometry: {board_part}")
    return board


def parse_pockets(pocket_part: str) -> Pockets | FenError:
    """解析口袋部分，如 "QNnp"（大写白方、小写黑方）"""
    pockets = Pockets(white=empty_material(), black=empty_material())
    for ch in pocket_part:
        piece = char_to_piece(ch)
        if piece is None:
            return FenError(FenErrorKind.POCKETS, f"Invalid pocket piece: {ch}")
        pockets[piece.color][piece.role] += 1
    return pockets


def parse_small_uint(text: str) -> int | None:
    """1 到 4 位非负整数"""
    if not SMALL_UINT_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_remaining_checks(part: str) -> RemainingChecks | FenError:
    """解析将军数

    两种写法：
    - `+1+2`：双方已经给出的将军次数，存储为剩余次数 (3 - n)
    - `2+1`：剩余次数
    """
    segments = part.split("+")
    if len(segments) == 3 and segments[0] == "":
        inverted = True
        white_str, black_str = segments[1], segments[2]
    elif len(segments) == 2:
        inverted = False
        white_str, black_str = segments
    else:
        return FenError(FenErrorKind.REMAINING_CHECKS, f"Invalid remaining checks: {part}")

    white = parse_small_uint(white_str)
    black = parse_small_uint(black_str)
    if white is None or black is None:
        return FenError(FenErrorKind.REMAINING_CHECKS, f"Invalid remaining checks: {part}")
    if white > MAX_REMAINING_CHECKS or black > MAX_REMAINING_CHECKS:
        return FenError(FenErrorKind.REMAINING_CHECKS, f"Remaining checks out of range: {part}")

    if inverted:
        white, black = MAX_REMAINING_CHECKS - white, MAX_REMAINING_CHECKS - black
    return RemainingChecks(white=white, black=black)
