from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True)
class Square:
    """A board cell addressed by 1-based ``row`` (rank) and ``col`` (file).

    Squares off the board can be built freely, move generation walks past
    the edges, but nothing treats them as a real cell.
    """

    row: int
    col: int

    def is_valid(self) -> bool:
        return 1 <= self.row <= 8 and 1 <= self.col <= 8

    def offset(self, drow: int, dcol: int) -> "Square":
        return Square(self.row + drow, self.col + dcol)

    # ── Algebraic helpers ───────────────────────────────────────────
    @staticmethod
    def from_algebraic(name: str) -> "Square":
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise ValueError(f"Invalid square: {name}")
        return Square(RANKS.index(name[1]) + 1, FILES.index(name[0]) + 1)

    def to_algebraic(self) -> str:
        if not self.is_valid():
            raise ValueError(f"Invalid square: {(self.row, self.col)}")
        return f"{FILES[self.col - 1]}{self.row}"

    def __str__(self) -> str:
        if self.is_valid():
            return self.to_algebraic()
        return f"({self.row}, {self.col})"
