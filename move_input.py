import re
from typing import Optional

from chessrules.moves import ChessMove
from chessrules.pieces import ChessPieceType
from chessrules.square import Square

COORD_REGEX = re.compile(r'^([a-h][1-8])-?([a-h][1-8])=?([nbrq])?$', re.I)

PROMO_MAP = {
    None: None,
    "N": ChessPieceType.KNIGHT,
    "B": ChessPieceType.BISHOP,
    "R": ChessPieceType.ROOK,
    "Q": ChessPieceType.QUEEN,
}


def is_coordinate(move: str) -> bool:
    """Return True if *move* looks like long algebraic (e2e4, e7e8q)."""
    return COORD_REGEX.match(move.strip()) is not None


def parse_coordinate_move(text: str) -> ChessMove:
    """Parse ``e2e4`` / ``e2-e4`` / ``e7e8=Q`` into a :class:`ChessMove`."""
    m = COORD_REGEX.match(text.strip())
    if not m:
        raise ValueError(f"cannot parse move: {text}")
    start, end, promo = m.groups()
    promotion: Optional[ChessPieceType] = PROMO_MAP[promo.upper() if promo else None]
    return ChessMove(
        Square.from_algebraic(start.lower()),
        Square.from_algebraic(end.lower()),
        promotion,
    )
