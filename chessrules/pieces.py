from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


WHITE = Color.WHITE
BLACK = Color.BLACK


class ChessPieceType(Enum):
    PAWN = "Pawn"
    KNIGHT = "Knight"
    BISHOP = "Bishop"
    ROOK = "Rook"
    QUEEN = "Queen"
    KING = "King"


# Order in which promotion moves are emitted for a pawn reaching the last rank.
PROMOTION_TYPES: Tuple[ChessPieceType, ...] = (
    ChessPieceType.ROOK,
    ChessPieceType.BISHOP,
    ChessPieceType.QUEEN,
    ChessPieceType.KNIGHT,
)

LETTERS = {
    ChessPieceType.PAWN: "P",
    ChessPieceType.KNIGHT: "N",
    ChessPieceType.BISHOP: "B",
    ChessPieceType.ROOK: "R",
    ChessPieceType.QUEEN: "Q",
    ChessPieceType.KING: "K",
}


@dataclass(frozen=True)
class ChessPiece:
    color: Color
    type: ChessPieceType

    @property
    def symbol(self) -> str:
        """Single letter, upper case for white and lower case for black."""
        letter = LETTERS[self.type]
        return letter if self.color is WHITE else letter.lower()

    def __repr__(self) -> str:
        return f"{self.color.value} {self.type.value}"
