"""
变体棋记谱：FEN 局面字符串与 USI 走法字符串

设计目标：
1. 输入输出都用字符串，解析失败返回结构化错误，不抛异常
2. FEN 兼容口袋（crazyhouse）、升变标记、三将棋计数和 X-FEN 易位写法
3. 解析 -> 生成往返一致

## FEN 格式

    <棋盘>[/<口袋>] <回合> <易位> <过路兵> [<将军数>] <半回合> <回合数> [<将军数>]

### 棋盘部分

从第 8 行到第 1 行，每行用 `/` 分隔，每行从 a 列到 h 列。

符号约定：
- 白方：K Q R B N P
- 黑方：k q r b n p
- 空格：数字 (1-8)
- 升变得到的棋子后加 `~`，如 `Q~`

### 口袋部分

`[QNnp]` 或作为第 9 段 `/QNnp`，大写白方、小写黑方。

### 易位

- `KQkq`：按方向扫描底线，王之前的车
- `A`-`H` / `a`-`h`：指定列上的车
- `-`：无

### 将军数

- `+1+2`：白方已将军 1 次、黑方已将军 2 次（存储为剩余次数 2 和 1）
- `2+1`：直接给出剩余次数

## USI 走法格式（9x9）

- 普通走法：`7g7f`
- 成驹：`7g7f+`
- 打入：`P*5e`

## 示例

初始局面：
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1

Crazyhouse：
    r1bqk2r/pppp1ppp/2n5/4p3/4P3/8/PPPP1PPP/RNB1K1NR/NQbp b KQkq - 0 6
"""

# Types
from notation.types import (
    COLORS,
    EMPTY_BOARD_FEN,
    EMPTY_FEN,
    INITIAL_BOARD_FEN,
    INITIAL_FEN,
    MAX_REMAINING_CHECKS,
    Board,
    ChessRole,
    Color,
    DropMove,
    FenOptions,
    Material,
    Move,
    NormalMove,
    Piece,
    Pockets,
    RemainingChecks,
    Setup,
    ShogiRole,
    empty_material,
    is_drop,
)

# Squares
from notation.squares import CHESS, SHOGI, Geometry

# Roles
from notation.roles import (
    POCKET_ROLES,
    char_to_piece,
    chess_char_to_role,
    chess_role_to_char,
    is_pocket_role,
    piece_to_char,
    promote,
    shogi_char_to_role,
    shogi_role_to_char,
    unpromote,
)

# Errors
from notation.errors import FenError, FenErrorKind, InvalidFenError

# Castling
from notation.castling import make_castling_fen, parse_castling_fen

# Parse
from notation.parse import (
    parse_board_fen,
    parse_fen,
    parse_fen_or_raise,
    parse_pockets,
    parse_remaining_checks,
    parse_small_uint,
)

# Generate
from notation.generate import make_board_fen, make_fen, make_pockets, make_remaining_checks

# USI
from notation.usi import make_usi, parse_usi, parse_usi_or_raise

# Validate
from notation.validate import count_pieces, normalize_fen, validate_fen

# Display
from notation.display import board_to_ascii, setup_to_ascii

__all__ = [
    # Types
    "COLORS",
    "EMPTY_BOARD_FEN",
    "EMPTY_FEN",
    "INITIAL_BOARD_FEN",
    "INITIAL_FEN",
    "MAX_REMAINING_CHECKS",
    "Board",
    "ChessRole",
    "Color",
    "DropMove",
    "FenOptions",
    "Material",
    "Move",
    "NormalMove",
    "Piece",
    "Pockets",
    "RemainingChecks",
    "Setup",
    "ShogiRole",
    "empty_material",
    "is_drop",
    # Squares
    "CHESS",
    "SHOGI",
    "Geometry",
    # Roles
    "POCKET_ROLES",
    "char_to_piece",
    "chess_char_to_role",
    "chess_role_to_char",
    "is_pocket_role",
    "piece_to_char",
    "promote",
    "shogi_char_to_role",
    "shogi_role_to_char",
    "unpromote",
    # Errors
    "FenError",
    "FenErrorKind",
    "InvalidFenError",
    # Castling
    "make_castling_fen",
    "parse_castling_fen",
    # Parse
    "parse_board_fen",
    "parse_fen",
    "parse_fen_or_raise",
    "parse_pockets",
    "parse_remaining_checks",
    "parse_small_uint",
    # Generate
    "make_board_fen",
    "make_fen",
    "make_pockets",
    "make_remaining_checks",
    # USI
    "make_usi",
    "parse_usi",
    "parse_usi_or_raise",
    # Validate
    "count_pieces",
    "normalize_fen",
    "validate_fen",
    # Display
    "board_to_ascii",
    "setup_to_ascii",
]
