"""
FEN / USI 命令行工具

- fen: 解析并输出规范化的 FEN
- validate: 验证 FEN
- usi: 解析走法字符串
- show: 显示棋盘

## 使用示例

```bash
python -m notation.cli fen "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
python -m notation.cli fen "r3k2r/8/8/8/8/8/8/R3K2R/Qq w KQkq - 0 1 +1+2" --json
python -m notation.cli usi "P*5e"
python -m notation.cli --log-level DEBUG validate "8/8/8/8/8/8/8/X7 w - - 0 1"
```
"""

from __future__ import annotations

import json
import sys

import typer
from rich.console import Console
from rich.table import Table

from notation.display import board_rows, setup_summary
from notation.generate import make_fen
from notation.logging import DEFAULT_LEVEL, configure_logging, logger
from notation.parse import parse_fen_or_raise
from notation.squares import CHESS, SHOGI
from notation.types import DropMove, FenOptions, Move, Setup
from notation.usi import make_usi, parse_usi_or_raise
from notation.validate import count_pieces, validate_fen

app = typer.Typer(help="FEN / USI notation tools")


def setup_to_dict(setup: Setup) -> dict:
    """局面转 JSON 友好的字典"""
    data: dict = {
        "board": {
            CHESS.make_square(square): {
                "role": piece.role.value,
                "color": piece.color.value,
                "promoted": piece.promoted,
            }
            for square, piece in sorted(setup.board.items())
        },
        "turn": setup.turn.value,
        "castling_rights": [CHESS.make_square(sq) for sq in sorted(setup.castling_rights)],
        "ep_square": CHESS.make_square(setup.ep_square) if setup.ep_square is not None else None,
        "halfmoves": setup.halfmoves,
        "fullmoves": setup.fullmoves,
        "pockets": None,
        "remaining_checks": None,
    }
    if setup.pockets is not None:
        data["pockets"] = {
            "white": {role.value: n for role, n in setup.pockets.white.items() if n},
            "black": {role.value: n for role, n in setup.pockets.black.items() if n},
        }
    if setup.remaining_checks is not None:
        data["remaining_checks"] = {
            "white": setup.remaining_checks.white,
            "black": setup.remaining_checks.black,
        }
    return data


def move_to_dict(move: Move) -> dict:
    if isinstance(move, DropMove):
        return {"type": "drop", "role": move.role.value, "to": SHOGI.make_square(move.to_square)}
    return {
        "type": "move",
        "from": SHOGI.make_square(move.from_square),
        "to": SHOGI.make_square(move.to_square),
        "promotion": move.promotion,
    }


@app.callback()
def main(
    log_level: str = typer.Option(
        DEFAULT_LEVEL, "--log-level", envvar="NOTATION_LOG_LEVEL", help="日志级别"
    ),
    log_file: str | None = typer.Option(
        None, "--log-file", envvar="NOTATION_LOG_FILE", help="日志文件"
    ),
) -> None:
    """FEN / USI notation tools"""
    configure_logging(log_level, log_file)


@app.command()
def fen(
    fen_str: str = typer.Argument(..., metavar="FEN", help="FEN 字符串"),
    promoted: bool = typer.Option(False, "--promoted", help="输出 ~ 升变标记"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """解析 FEN 并输出规范化结果"""
    try:
        setup = parse_fen_or_raise(fen_str)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None

    normalized = make_fen(setup, FenOptions(promoted=promoted))
    logger.info(f"Normalized {fen_str!r} -> {normalized!r}")

    if output_json:
        print(json.dumps({"fen": normalized, "setup": setup_to_dict(setup)}, indent=2))
    else:
        print(normalized)


@app.command()
def validate(
    fen_str: str = typer.Argument(..., metavar="FEN", help="FEN 字符串"),
) -> None:
    """验证 FEN"""
    is_valid, message = validate_fen(fen_str)
    if not is_valid:
        print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(1)
    print(message)


@app.command()
def usi(
    move_str: str = typer.Argument(..., metavar="MOVE", help="走法字符串"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """解析 USI 走法"""
    try:
        move = parse_usi_or_raise(move_str)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None

    if output_json:
        print(json.dumps({"usi": make_usi(move), "move": move_to_dict(move)}, indent=2))
    else:
        print(make_usi(move))


@app.command()
def show(
    fen_str: str = typer.Argument(..., metavar="FEN", help="FEN 字符串"),
    unicode: bool = typer.Option(False, "--unicode", "-u", help="使用棋子符号"),
) -> None:
    """显示棋盘"""
    try:
        setup = parse_fen_or_raise(fen_str)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None

    table = Table(show_header=True, header_style="bold")
    table.add_column("")
    for file_name in CHESS.file_names:
        table.add_column(file_name, justify="center")

    for idx, row in enumerate(board_rows(setup.board, unicode)):
        table.add_row(CHESS.rank_names[CHESS.ranks - 1 - idx], *row)

    console = Console()
    console.print(table)

    counts = count_pieces(setup)
    for line in setup_summary(setup):
        console.print(line, highlight=False, markup=False)
    console.print(
        "Pieces: " + " ".join(f"{color.value}={n}" for color, n in counts.items()),
        highlight=False,
        markup=False,
    )


if __name__ == "__main__":
    app()
