"""FEN 验证和规范化测试"""

import pytest

from notation.parse import parse_fen
from notation.types import EMPTY_FEN, INITIAL_FEN, Color
from notation.validate import count_pieces, normalize_fen, validate_fen


class TestValidateFen:
    def test_valid(self):
        assert validate_fen(INITIAL_FEN) == (True, "OK")

    @pytest.mark.parametrize(
        "fen,field",
        [
            ("8/8/8/8/8/8/8/X7 w - - 0 1", "board"),
            ("8/8/8/8/8/8/8/8 w Z - 0 1", "castling"),
            ("8/8/8/8/8/8/8/8 w - z9 0 1", "ep_square"),
            ("8/8/8/8/8/8/8/8 w - - 0 1 +4+0", "remaining_checks"),
            ("8/8/8/8/8/8/8/8 w - - a 1", "halfmoves"),
        ],
    )
    def test_invalid(self, fen, field):
        is_valid, message = validate_fen(fen)
        assert not is_valid
        assert message.startswith(field)


class TestNormalizeFen:
    def test_normalize(self):
        assert normalize_fen("8/8/8/8/8/8/8/8") == EMPTY_FEN

    def test_invalid(self):
        assert normalize_fen("not a fen") is None


class TestCountPieces:
    def test_initial(self):
        assert count_pieces(parse_fen(INITIAL_FEN)) == {Color.WHITE: 16, Color.BLACK: 16}

    def test_pockets_not_counted(self):
        setup = parse_fen("4k3/8/8/8/8/8/8/4K3[QQq] w - - 0 1")
        assert count_pieces(setup) == {Color.WHITE: 1, Color.BLACK: 1}
