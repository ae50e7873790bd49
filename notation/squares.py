"""格子坐标

两套互不混用的坐标命名：
- 国际象棋 8x8：列 a-h（从左到右），行 1-8（从下到上），a1 = 0
- 将棋 9x9：列 9-1，段 i-a，9i = 0
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Geometry:
    """棋盘几何：尺寸和坐标命名"""

    files: int
    ranks: int
    file_names: str
    rank_names: str

    @property
    def size(self) -> int:
        return self.files * self.ranks

    @property
    def squares(self) -> range:
        """所有合法格子"""
        return range(self.size)

    def square_file(self, square: int) -> int:
        return square % self.files

    def square_rank(self, square: int) -> int:
        return square // self.files

    def square(self, file: int, rank: int) -> int:
        return file + rank * self.files

    def is_valid(self, square: int) -> bool:
        return 0 <= square < self.size

    def parse_square(self, name: str) -> int | None:
        """坐标名 -> 格子，格式不合法返回 None

        Examples:
            >>> CHESS.parse_square("e4")
            28
            >>> SHOGI.parse_square("5e")
            40
        """
        if len(name) != 2:
            return None
        file = self.file_names.find(name[0])
        rank = self.rank_names.find(name[1])
        if file < 0 or rank < 0:
            return None
        return self.square(file, rank)

    def make_square(self, square: int) -> str:
        return self.file_names[self.square_file(square)] + self.rank_names[self.square_rank(square)]


CHESS = Geometry(files=8, ranks=8, file_names="abcdefgh", rank_names="12345678")
SHOGI = Geometry(files=9, ranks=9, file_names="987654321", rank_names="ihgfedcba")
