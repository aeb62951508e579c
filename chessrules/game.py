from __future__ import annotations

import logging
from typing import Dict, List, Optional

from chessrules.board import ChessBoard
from chessrules.errors import InvalidMoveError, InvalidMoveKind, MissingKingError
from chessrules.moves import ChessMove, piece_moves
from chessrules.pieces import WHITE, ChessPiece, Color
from chessrules.square import Square

logger = logging.getLogger(__name__)

DRAW = "draw"


class ChessGame:
    """One board plus the side to move.

    Check, checkmate and stalemate are recomputed on every call; nothing
    about the outcome is stored, so callers poll after each move.
    """

    def __init__(self, board: ChessBoard | None = None, current_turn: Color | str = WHITE):
        if board is None:
            board = ChessBoard()
            board.reset_to_standard_start()
        self._board = board
        self.current_turn = current_turn

    # ── Accessors ───────────────────────────────────────────────────
    @property
    def current_turn(self) -> Color:
        return self._turn

    @current_turn.setter
    def current_turn(self, color: Color | str) -> None:
        self._turn = Color(color)

    def get_turn(self) -> Color:
        return self.current_turn

    def set_turn(self, color: Color | str) -> None:
        self.current_turn = color

    @property
    def board(self) -> ChessBoard:
        return self._board

    @board.setter
    def board(self, board: ChessBoard) -> None:
        self._board = board

    def get_board(self) -> ChessBoard:
        return self._board

    def set_board(self, board: ChessBoard) -> None:
        self._board = board

    # ── Legality ────────────────────────────────────────────────────
    def valid_moves(self, start: Square) -> Optional[List[ChessMove]]:
        """Legal moves for the piece on ``start``.

        Returns ``None`` when the square holds no piece. An empty list means
        the piece exists but cannot move without exposing its king.
        """
        piece = self._board.get(start)
        if piece is None:
            return None
        legal: List[ChessMove] = []
        for move in piece_moves(self._board, start):
            probe = self._board.clone()
            self._apply(probe, move, piece)
            if not self._king_attacked(probe, piece.color):
                legal.append(move)
        return legal

    def all_valid_moves(self, color: Color | None = None) -> Dict[Square, List[ChessMove]]:
        """Map each square holding a ``color`` piece to its legal moves.

        Squares whose piece has no legal move are left out. ``color``
        defaults to the side to move.
        """
        color = self.current_turn if color is None else color
        res: Dict[Square, List[ChessMove]] = {}
        for square, _ in list(self._board.pieces(color)):
            moves = self.valid_moves(square)
            if moves:
                res[square] = moves
        return res

    def _has_no_moves(self, color: Color) -> bool:
        return all(not self.valid_moves(square) for square, _ in list(self._board.pieces(color)))

    # ── Check & game end ────────────────────────────────────────────
    @staticmethod
    def _king_attacked(board: ChessBoard, color: Color) -> bool:
        king = board.king_square(color)
        if king is None:
            logger.debug("No %s king on board:\n%r", color.value, board)
            raise MissingKingError(color)
        for square, _ in board.pieces(color.opposite()):
            if any(move.end == king for move in piece_moves(board, square)):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        return self._king_attacked(self._board, color)

    def is_in_checkmate(self, color: Color) -> bool:
        return self.is_in_check(color) and self._has_no_moves(color)

    def is_in_stalemate(self, color: Color) -> bool:
        return not self.is_in_check(color) and self._has_no_moves(color)

    def result(self) -> Color | str | None:
        """Winner if the side to move is mated, ``"draw"`` on stalemate, else ``None``."""
        if self.is_in_checkmate(self.current_turn):
            return self.current_turn.opposite()
        if self.is_in_stalemate(self.current_turn):
            return DRAW
        return None

    # ── Moves ───────────────────────────────────────────────────────
    @staticmethod
    def _apply(board: ChessBoard, move: ChessMove, piece: ChessPiece) -> None:
        if move.promotion is not None:
            board[move.end] = ChessPiece(piece.color, move.promotion)
        else:
            board[move.end] = piece
        board[move.start] = None

    def make_move(self, move: ChessMove) -> None:
        """Apply ``move`` for the side to move or raise :class:`InvalidMoveError`."""
        piece = self._board.get(move.start)
        if piece is None:
            kind = InvalidMoveKind.NO_PIECE_AT_SOURCE
        elif piece.color != self.current_turn:
            kind = InvalidMoveKind.WRONG_TURN
        elif move not in self.valid_moves(move.start):
            kind = InvalidMoveKind.ILLEGAL_MOVE
        else:
            kind = None
        if kind is not None:
            logger.debug("Rejected %s: %s", move, kind.value)
            raise InvalidMoveError(kind, move)

        self._apply(self._board, move, piece)
        self.current_turn = self.current_turn.opposite()
        logger.debug("Played %s, %s to move", move, self.current_turn.value)

    def __repr__(self) -> str:
        return str(self._board)
