"""棋盘显示测试"""

from notation.display import board_to_ascii, piece_symbol, setup_to_ascii
from notation.parse import parse_fen
from notation.types import INITIAL_FEN, ChessRole, Color, Piece


class TestPieceSymbol:
    def test_empty(self):
        assert piece_symbol(None) == "·"

    def test_promoted(self):
        queen = Piece(ChessRole.QUEEN, Color.BLACK, promoted=True)
        assert piece_symbol(queen) == "q~"
        assert piece_symbol(queen, unicode=True) == "♛~"


class TestBoardToAscii:
    def test_initial(self):
        lines = board_to_ascii(parse_fen(INITIAL_FEN).board).split("\n")
        assert len(lines) == 9
        assert lines[0] == "8 r n b q k b n r"
        assert lines[4] == "4 · · · · · · · ·"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"

    def test_unicode_symbols(self):
        text = board_to_ascii(parse_fen("4k3/8/8/8/8/8/8/4K2Q~").board, unicode=True)
        assert "♚" in text
        assert "♔" in text
        assert "♕~" in text


class TestSetupToAscii:
    def test_summary_lines(self):
        text = setup_to_ascii(parse_fen("4k3/8/8/8/8/8/8/4K3/Qp b - - 0 1 +1+2"))
        assert "Turn: black" in text
        assert "Castling: -" in text
        assert "Pockets: Qp" in text
        assert "Remaining checks: white=2 black=1 (+1+2)" in text
