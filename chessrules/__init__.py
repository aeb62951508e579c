"""Standard chess rules: movement, legality, check, checkmate and stalemate.

Quick start::

    from chessrules import ChessGame, ChessMove, Square

    game = ChessGame()
    game.make_move(ChessMove(Square(2, 5), Square(4, 5)))
    game.valid_moves(Square.from_algebraic("e7"))
"""

from chessrules.board import ChessBoard
from chessrules.errors import ChessRulesError, InvalidMoveError, InvalidMoveKind, MissingKingError
from chessrules.game import DRAW, ChessGame
from chessrules.moves import ChessMove, piece_moves
from chessrules.pieces import BLACK, PROMOTION_TYPES, WHITE, ChessPiece, ChessPieceType, Color
from chessrules.square import Square

__all__ = [
    "BLACK",
    "DRAW",
    "PROMOTION_TYPES",
    "WHITE",
    "ChessBoard",
    "ChessGame",
    "ChessMove",
    "ChessPiece",
    "ChessPieceType",
    "ChessRulesError",
    "Color",
    "InvalidMoveError",
    "InvalidMoveKind",
    "MissingKingError",
    "Square",
    "piece_moves",
]
