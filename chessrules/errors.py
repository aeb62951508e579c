"""Exceptions raised by the rules engine."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.moves import ChessMove
    from chessrules.pieces import Color


class ChessRulesError(Exception):
    """Base class for every error raised by the engine."""


class InvalidMoveKind(Enum):
    NO_PIECE_AT_SOURCE = "no_piece_at_source"
    WRONG_TURN = "wrong_turn"
    ILLEGAL_MOVE = "illegal_move"


_MESSAGES = {
    InvalidMoveKind.NO_PIECE_AT_SOURCE: "No piece on {start}",
    InvalidMoveKind.WRONG_TURN: "Piece on {start} does not belong to the side to move",
    InvalidMoveKind.ILLEGAL_MOVE: "Illegal move {start}-{end}",
}


class InvalidMoveError(ChessRulesError, ValueError):
    """A move rejected by :meth:`ChessGame.make_move`.

    ``kind`` tells the caller which check failed; the board and the turn
    are left exactly as they were.
    """

    def __init__(self, kind: InvalidMoveKind, move: "ChessMove") -> None:
        self.kind = kind
        self.move = move
        super().__init__(_MESSAGES[kind].format(start=move.start, end=move.end))


class MissingKingError(ChessRulesError, RuntimeError):
    """The board has no king for ``color``; the position is corrupt."""

    def __init__(self, color: "Color") -> None:
        self.color = color
        super().__init__(f"King not found for {color.value}")
