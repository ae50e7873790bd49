"""易位权推导

FEN 的易位字段并不直接给出格子：
- `K` / `k`：从 h 列向 a 列扫描己方底线，王之前的所有同色车
- `Q` / `q`：从 a 列向 h 列扫描，同上
- `A`-`H` / `a`-`h`：指定列上的车（Shredder/X-FEN 写法）

生成时按同样的扫描顺序反推写法，保证解析 -> 生成 -> 解析一致。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from notation.errors import FenError, FenErrorKind
from notation.squares import CHESS
from notation.types import COLORS, Board, ChessRole, Color

CASTLING_PATTERN = re.compile(r"^[KQABCDEFGH]{0,2}[kqabcdefgh]{0,2}$")


class CastlingSide(Enum):
    """易位方向，值即 FEN 字符"""

    KING = "k"
    QUEEN = "q"

    @property
    def files(self) -> str:
        """扫描顺序：王翼从 h 到 a，后翼从 a 到 h"""
        return "hgfedcba" if self == CastlingSide.KING else "abcdefgh"


class ScanState(Enum):
    """单侧扫描状态"""

    SCANNING = "scanning"
    KING_FOUND = "king_found"
    DONE = "done"


@dataclass(frozen=True)
class RookScan:
    """一次底线扫描的结果

    rooks 按扫描顺序排列，第一个就是最外侧的车。
    """

    rooks: tuple[int, ...]
    state: ScanState

    @property
    def king_found(self) -> bool:
        return self.state == ScanState.KING_FOUND


def back_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else CHESS.ranks - 1


def scan_back_rank(board: Board, color: Color, files: str) -> RookScan:
    """按 files 顺序扫描 color 的底线，收集王之前的同色车

    遇到同色王即进入 KING_FOUND 并停止；走完所有列进入 DONE。
    对方棋子和空格直接跳过。
    """
    rank = back_rank(color)
    rooks: list[int] = []
    state = ScanState.SCANNING
    remaining = iter(files)

    while state == ScanState.SCANNING:
        file = next(remaining, None)
        if file is None:
            state = ScanState.DONE
            continue

        square = CHESS.square(CHESS.file_names.index(file), rank)
        piece = board.get(square)
        if piece is None or piece.color != color:
            continue
        if piece.role == ChessRole.KING:
            state = ScanState.KING_FOUND
        elif piece.role == ChessRole.ROOK:
            rooks.append(square)

    return RookScan(rooks=tuple(rooks), state=state)


def parse_castling_fen(board: Board, castling_part: str) -> frozenset[int] | FenError:
    """解析易位字段

    Args:
        board: 已解析的棋盘
        castling_part: 如 "KQkq"、"Hb"、"-"

    Returns:
        仍有易位权的车所在格子集合；字段格式错误返回 FenError
    """
    if castling_part == "-":
        return frozenset()
    if not CASTLING_PATTERN.match(castling_part):
        return FenError(FenErrorKind.CASTLING, f"Invalid castling field: {castling_part}")

    rights: set[int] = set()
    for ch in castling_part:
        color = Color.BLACK if ch.islower() else Color.WHITE
        lower = ch.lower()
        if lower in (CastlingSide.KING.value, CastlingSide.QUEEN.value):
            files = CastlingSide(lower).files
        else:
            files = lower
        rights.update(scan_back_rank(board, color, files).rooks)

    return frozenset(rights)


def make_castling_fen(board: Board, castling_rights: frozenset[int]) -> str:
    """生成易位字段

    一侧王之前的车全部有易位权时写 k/q，否则每个有易位权的车写列字母。
    底线上没有王的一方不输出。不在底线或格子上不是车的易位权会被忽略。
    """
    result = ""
    for color in COLORS:
        side_str = ""
        king_found = False
        for side in CastlingSide:
            scan = scan_back_rank(board, color, side.files)
            king_found = king_found or scan.king_found
            held = [square for square in scan.rooks if square in castling_rights]
            if held and len(held) == len(scan.rooks):
                side_str += side.value
                continue
            for square in held:
                side_str += CHESS.file_names[CHESS.square_file(square)]

        if not king_found:
            side_str = ""
        result += side_str.upper() if color == Color.WHITE else side_str

    return result or "-"
