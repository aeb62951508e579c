"""ChessBoard: 8×8 grid of optional pieces with occupancy queries."""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from chessrules.pieces import BLACK, WHITE, ChessPiece, ChessPieceType, Color
from chessrules.square import FILES, Square

BACK_RANK = [
    ChessPieceType.ROOK,
    ChessPieceType.KNIGHT,
    ChessPieceType.BISHOP,
    ChessPieceType.QUEEN,
    ChessPieceType.KING,
    ChessPieceType.BISHOP,
    ChessPieceType.KNIGHT,
    ChessPieceType.ROOK,
]


class ChessBoard:
    def __init__(self) -> None:
        # 2-D array: board[row - 1][col - 1]
        self.board: List[List[Optional[ChessPiece]]] = [[None for _ in range(8)] for _ in range(8)]

    def clear(self) -> None:
        for y in range(8):
            for x in range(8):
                self.board[y][x] = None

    def reset_to_standard_start(self) -> None:
        """Place the pieces in the standard chess starting position."""
        self.clear()
        for col, piece_type in enumerate(BACK_RANK, start=1):
            self[Square(1, col)] = ChessPiece(WHITE, piece_type)
            self[Square(2, col)] = ChessPiece(WHITE, ChessPieceType.PAWN)
            self[Square(7, col)] = ChessPiece(BLACK, ChessPieceType.PAWN)
            self[Square(8, col)] = ChessPiece(BLACK, piece_type)

    # ── Basic square access ─────────────────────────────────────────
    @staticmethod
    def is_valid(square: Square) -> bool:
        return square.is_valid()

    def get(self, square: Square) -> Optional[ChessPiece]:
        if not square.is_valid():
            return None
        return self.board[square.row - 1][square.col - 1]

    def set(self, square: Square, piece: Optional[ChessPiece]) -> None:
        if not square.is_valid():
            raise ValueError(f"Invalid square: {square}")
        self.board[square.row - 1][square.col - 1] = piece

    def __getitem__(self, square: Square) -> Optional[ChessPiece]:
        return self.get(square)

    def __setitem__(self, square: Square, piece: Optional[ChessPiece]) -> None:
        self.set(square, piece)

    # ── Occupancy filters used by move generation ───────────────────
    def occupied_by_friendly(self, target: Square, reference: Square) -> bool:
        mine = self.get(reference)
        other = self.get(target)
        if mine is None or other is None:
            return False
        return mine.color == other.color

    def occupied_by_enemy(self, target: Square, reference: Square) -> bool:
        mine = self.get(reference)
        other = self.get(target)
        if mine is None or other is None:
            return False
        return mine.color != other.color

    def pieces(self, color: Color | None = None) -> Iterator[Tuple[Square, ChessPiece]]:
        """Yield ``(square, piece)`` pairs row by row, starting at a1."""
        for y in range(8):
            for x in range(8):
                p = self.board[y][x]
                if p is not None and (color is None or p.color == color):
                    yield Square(y + 1, x + 1), p

    def king_square(self, color: Color) -> Optional[Square]:
        for square, piece in self.pieces(color):
            if piece.type == ChessPieceType.KING:
                return square
        return None

    def clone(self) -> "ChessBoard":
        new = ChessBoard()
        # pieces are immutable, copying the rows is enough
        new.board = [list(row) for row in self.board]
        return new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChessBoard):
            return NotImplemented
        return self.board == other.board

    __hash__ = None  # type: ignore[assignment]

    # ── ASCII board ─────────────────────────────────────────────────
    def __repr__(self) -> str:
        rows = []
        for y in reversed(range(8)):
            line = []
            for x in range(8):
                p = self.board[y][x]
                line.append("." if p is None else p.symbol)
            rows.append(f"{y + 1} " + " ".join(line))
        return "\n".join(rows + ["  " + " ".join(FILES)])
