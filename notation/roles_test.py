"""棋子类型 <-> 字符测试"""

import pytest

from notation.roles import (
    PROMOTIONS,
    char_to_piece,
    chess_char_to_role,
    is_pocket_role,
    piece_to_char,
    promote,
    shogi_char_to_role,
    shogi_role_to_char,
    unpromote,
)
from notation.types import ChessRole, Color, Piece, ShogiRole


class TestChessRoles:
    def test_case_encodes_color(self):
        assert char_to_piece("Q") == Piece(ChessRole.QUEEN, Color.WHITE)
        assert char_to_piece("n") == Piece(ChessRole.KNIGHT, Color.BLACK)

    @pytest.mark.parametrize("ch", ["x", "X", "~", "1", "+", "/"])
    def test_unknown_char(self, ch):
        assert chess_char_to_role(ch) is None
        assert char_to_piece(ch) is None

    def test_piece_to_char(self):
        assert piece_to_char(Piece(ChessRole.ROOK, Color.WHITE)) == "R"
        assert piece_to_char(Piece(ChessRole.PAWN, Color.BLACK)) == "p"

    def test_promoted_marker_only_when_requested(self):
        piece = Piece(ChessRole.QUEEN, Color.WHITE, promoted=True)
        assert piece_to_char(piece) == "Q"
        assert piece_to_char(piece, promoted=True) == "Q~"


class TestShogiRoles:
    def test_promoted_chars(self):
        assert shogi_char_to_role("+p") == ShogiRole.TOKIN
        assert shogi_char_to_role("+R") == ShogiRole.DRAGON
        assert shogi_role_to_char(ShogiRole.HORSE) == "+b"

    def test_unknown_char(self):
        assert shogi_char_to_role("q") is None
        assert shogi_char_to_role("+g") is None

    def test_promote_unpromote_inverse(self):
        """每个可成的驹：unpromote(promote(r)) == r"""
        for role in PROMOTIONS:
            promoted = promote(role)
            assert promoted is not None
            assert unpromote(promoted) == role

    def test_no_promotion(self):
        """金、玉不能成，已成的驹也不能再成"""
        assert promote(ShogiRole.GOLD) is None
        assert promote(ShogiRole.KING) is None
        assert promote(ShogiRole.DRAGON) is None

    def test_unpromote(self):
        assert unpromote(ShogiRole.GOLD) == ShogiRole.GOLD
        assert unpromote(ShogiRole.PROMOTED_SILVER) == ShogiRole.SILVER
        assert unpromote(ShogiRole.KING) is None

    def test_pocket_roles(self):
        assert is_pocket_role(ShogiRole.PAWN)
        assert is_pocket_role(ShogiRole.GOLD)
        assert not is_pocket_role(ShogiRole.KING)
        assert not is_pocket_role(ShogiRole.TOKIN)
