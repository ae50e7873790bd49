"""核心类型定义和常量"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# =============================================================================
# 常量定义
# =============================================================================

INITIAL_BOARD_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
INITIAL_FEN = INITIAL_BOARD_FEN + " w KQkq - 0 1"
EMPTY_BOARD_FEN = "8/8/8/8/8/8/8/8"
EMPTY_FEN = EMPTY_BOARD_FEN + " w - - 0 1"

# 三将棋每方的将军次数
MAX_REMAINING_CHECKS = 3


# =============================================================================
# 枚举
# =============================================================================


class Color(Enum):
    """棋子颜色"""

    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        """获取对方颜色"""
        return Color.BLACK if self == Color.WHITE else Color.WHITE

    @property
    def char(self) -> str:
        """FEN 回合字符：w / b"""
        return self.value[0]


COLORS = (Color.WHITE, Color.BLACK)


class ChessRole(Enum):
    """国际象棋棋子类型（8x8，可带口袋）

    枚举顺序即口袋序列化顺序。
    """

    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class ShogiRole(Enum):
    """将棋棋子类型（9x9，可打入）"""

    PAWN = "pawn"
    LANCE = "lance"
    KNIGHT = "knight"
    SILVER = "silver"
    GOLD = "gold"
    BISHOP = "bishop"
    ROOK = "rook"
    KING = "king"
    # 成驹
    TOKIN = "tokin"
    PROMOTED_LANCE = "promoted_lance"
    PROMOTED_KNIGHT = "promoted_knight"
    PROMOTED_SILVER = "promoted_silver"
    HORSE = "horse"
    DRAGON = "dragon"


# =============================================================================
# 局面数据结构
# =============================================================================


@dataclass(frozen=True)
class Piece:
    """棋盘上的棋子

    promoted 只对口袋变体有意义（FEN 中用 `~` 标记，如升变得到的后）。
    """

    role: ChessRole
    color: Color
    promoted: bool = False


# 稀疏棋盘：格子 -> 棋子，缺省即空格
Board = dict[int, Piece]

# 口袋：棋子类型 -> 数量
Material = dict[ChessRole, int]


def empty_material() -> Material:
    """所有类型数量为 0 的口袋"""
    return {role: 0 for role in ChessRole}


@dataclass(frozen=True)
class Pockets:
    """双方口袋（可打入的备用棋子）"""

    white: Material = field(default_factory=empty_material)
    black: Material = field(default_factory=empty_material)

    @classmethod
    def empty(cls) -> Pockets:
        return cls()

    def __getitem__(self, color: Color) -> Material:
        return self.white if color == Color.WHITE else self.black

    def count(self, color: Color) -> int:
        """某方口袋中的棋子总数"""
        return sum(self[color].values())


@dataclass(frozen=True)
class RemainingChecks:
    """双方距离判负还剩的将军次数（三将棋）"""

    white: int = MAX_REMAINING_CHECKS
    black: int = MAX_REMAINING_CHECKS

    def __getitem__(self, color: Color) -> int:
        return self.white if color == Color.WHITE else self.black

    def checks_given(self) -> tuple[int, int]:
        """FEN 中 `+白+黑` 的写法：已经给出的将军次数"""
        return MAX_REMAINING_CHECKS - self.white, MAX_REMAINING_CHECKS - self.black


@dataclass(frozen=True)
class Setup:
    """FEN 解析后的局面

    castling_rights 存放仍可参与易位的车的起始格。
    """

    board: Board
    turn: Color = Color.WHITE
    castling_rights: frozenset[int] = frozenset()
    pockets: Pockets | None = None
    ep_square: int | None = None
    remaining_checks: RemainingChecks | None = None
    halfmoves: int = 0
    fullmoves: int = 1

    @classmethod
    def empty(cls) -> Setup:
        return cls(board={})

    def piece_at(self, square: int) -> Piece | None:
        return self.board.get(square)


@dataclass(frozen=True)
class FenOptions:
    """FEN 生成选项"""

    # 是否输出升变标记 `~`
    promoted: bool = False


# =============================================================================
# 走法（USI）
# =============================================================================


@dataclass(frozen=True)
class NormalMove:
    """棋盘走法：from -> to，可带升变"""

    from_square: int
    to_square: int
    promotion: bool = False


@dataclass(frozen=True)
class DropMove:
    """打入走法：把持驹放到空格上"""

    role: ShogiRole
    to_square: int


Move = NormalMove | DropMove


def is_drop(move: Move) -> bool:
    return isinstance(move, DropMove)
