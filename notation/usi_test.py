"""USI 走法字符串测试"""

import pytest

from notation.squares import SHOGI
from notation.types import DropMove, NormalMove, ShogiRole, is_drop
from notation.usi import make_usi, parse_usi, parse_usi_or_raise


class TestParseUsi:
    def test_drop(self):
        """P*5e：打入步兵"""
        move = parse_usi("P*5e")
        assert move == DropMove(role=ShogiRole.PAWN, to_square=SHOGI.parse_square("5e"))
        assert is_drop(move)
        assert make_usi(move) == "P*5e"

    def test_promotion(self):
        """7g7f+：成"""
        move = parse_usi("7g7f+")
        assert move == NormalMove(
            from_square=SHOGI.parse_square("7g"),
            to_square=SHOGI.parse_square("7f"),
            promotion=True,
        )
        assert not is_drop(move)

    def test_normal_move(self):
        move = parse_usi("7g7f")
        assert move.promotion is False
        assert make_usi(move) == "7g7f"

    def test_lowercase_drop_role(self):
        move = parse_usi("r*1a")
        assert move == DropMove(role=ShogiRole.ROOK, to_square=80)
        assert make_usi(move) == "R*1a"

    @pytest.mark.parametrize(
        "move_str",
        [
            "",
            "7g7",
            "7g7f++",
            "7g7f=",
            "7g7fx",
            "0a1b",
            "7g7j",
            "K*5e",  # 玉不能打入
            "X*5e",
            "P*5j",
            "+P*5e",  # 成驹不能打入
            "P*5e+",
            "P-5e",
        ],
    )
    def test_invalid(self, move_str):
        assert parse_usi(move_str) is None

    def test_drop_has_no_from_square(self):
        move = parse_usi("G*5b")
        assert not hasattr(move, "from_square")
        assert not hasattr(move, "promotion")

    def test_or_raise(self):
        assert parse_usi_or_raise("1a1b") == NormalMove(80, 71)
        with pytest.raises(ValueError, match="Invalid USI move"):
            parse_usi_or_raise("K*5e")


class TestMakeUsi:
    @pytest.mark.parametrize(
        "move",
        [
            NormalMove(0, 80),
            NormalMove(40, 31, promotion=True),
            DropMove(ShogiRole.GOLD, 4),
            DropMove(ShogiRole.LANCE, 72),
        ],
    )
    def test_inverse(self, move):
        assert parse_usi(make_usi(move)) == move

    def test_format(self):
        assert make_usi(NormalMove(0, 80)) == "9i1a"
        assert make_usi(DropMove(ShogiRole.SILVER, 40)) == "S*5e"
        assert make_usi(NormalMove(40, 31, promotion=True)) == "5e5f+"
