"""Pseudo-legal move generation.

Moves produced here follow each piece's movement pattern and the board's
occupancy, but ignore whether the mover's own king is left attacked.
:class:`chessrules.game.ChessGame` filters them down to legal moves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from chessrules.board import ChessBoard
from chessrules.pieces import LETTERS, PROMOTION_TYPES, WHITE, ChessPiece, ChessPieceType
from chessrules.square import Square


@dataclass(frozen=True)
class ChessMove:
    start: Square
    end: Square
    promotion: Optional[ChessPieceType] = None

    def __str__(self) -> str:
        suffix = LETTERS[self.promotion].lower() if self.promotion else ""
        return f"{self.start}{self.end}{suffix}"


Direction = Tuple[int, int]

ROOK_DIRECTIONS: Sequence[Direction] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
BISHOP_DIRECTIONS: Sequence[Direction] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
QUEEN_DIRECTIONS: Sequence[Direction] = [*BISHOP_DIRECTIONS, *ROOK_DIRECTIONS]
KNIGHT_OFFSETS: Sequence[Direction] = [
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2),
]
KING_OFFSETS: Sequence[Direction] = QUEEN_DIRECTIONS


def _add_rays(board: ChessBoard, start: Square, directions: Sequence[Direction], acc: List[ChessMove]) -> None:
    for drow, dcol in directions:
        target = start.offset(drow, dcol)
        while target.is_valid() and not board.occupied_by_friendly(target, start):
            acc.append(ChessMove(start, target))
            if board.occupied_by_enemy(target, start):
                break
            target = target.offset(drow, dcol)


def _add_leaps(board: ChessBoard, start: Square, offsets: Sequence[Direction], acc: List[ChessMove]) -> None:
    for drow, dcol in offsets:
        target = start.offset(drow, dcol)
        if target.is_valid() and not board.occupied_by_friendly(target, start):
            acc.append(ChessMove(start, target))


def _rook_moves(board: ChessBoard, start: Square, piece: ChessPiece) -> List[ChessMove]:
    moves: List[ChessMove] = []
    _add_rays(board, start, ROOK_DIRECTIONS, moves)
    return moves


def _bishop_moves(board: ChessBoard, start: Square, piece: ChessPiece) -> List[ChessMove]:
    moves: List[ChessMove] = []
    _add_rays(board, start, BISHOP_DIRECTIONS, moves)
    return moves


def _queen_moves(board: ChessBoard, start: Square, piece: ChessPiece) -> List[ChessMove]:
    moves: List[ChessMove] = []
    _add_rays(board, start, QUEEN_DIRECTIONS, moves)
    return moves


def _knight_moves(board: ChessBoard, start: Square, piece: ChessPiece) -> List[ChessMove]:
    moves: List[ChessMove] = []
    _add_leaps(board, start, KNIGHT_OFFSETS, moves)
    return moves


def _king_moves(board: ChessBoard, start: Square, piece: ChessPiece) -> List[ChessMove]:
    moves: List[ChessMove] = []
    _add_leaps(board, start, KING_OFFSETS, moves)
    return moves


def _pawn_moves(board: ChessBoard, start: Square, piece: ChessPiece) -> List[ChessMove]:
    dir_row = 1 if piece.color == WHITE else -1
    start_rank = 2 if piece.color == WHITE else 7
    last_rank = 8 if piece.color == WHITE else 1
    targets: List[Square] = []

    # forward push
    one = start.offset(dir_row, 0)
    if one.is_valid() and board.get(one) is None:
        targets.append(one)
    # captures
    for dcol in (-1, 1):
        diag = start.offset(dir_row, dcol)
        if board.occupied_by_enemy(diag, start):
            targets.append(diag)
    # double push from the starting rank
    two = start.offset(2 * dir_row, 0)
    if start.row == start_rank and board.get(one) is None and board.get(two) is None:
        targets.append(two)

    moves: List[ChessMove] = []
    for target in targets:
        if target.row == last_rank:
            moves.extend(ChessMove(start, target, promo) for promo in PROMOTION_TYPES)
        else:
            moves.append(ChessMove(start, target))
    return moves


MoveFunction = Callable[[ChessBoard, Square, ChessPiece], List[ChessMove]]

MOVE_FUNCTIONS: Dict[ChessPieceType, MoveFunction] = {
    ChessPieceType.KING: _king_moves,
    ChessPieceType.QUEEN: _queen_moves,
    ChessPieceType.ROOK: _rook_moves,
    ChessPieceType.BISHOP: _bishop_moves,
    ChessPieceType.KNIGHT: _knight_moves,
    ChessPieceType.PAWN: _pawn_moves,
}


def piece_moves(board: ChessBoard, start: Square) -> List[ChessMove]:
    """Return the pseudo-legal moves of the piece on ``start``.

    An empty or invalid square yields an empty list.
    """
    piece = board.get(start)
    if piece is None:
        return []
    return MOVE_FUNCTIONS[piece.type](board, start, piece)
