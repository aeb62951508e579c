import os
import sys

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from chessrules.game import ChessGame
from chessrules.moves import ChessMove
from chessrules.pieces import ChessPieceType, BLACK
from chessrules.square import Square
from move_input import is_coordinate, parse_coordinate_move


def test_parse_basic_move():
    game = ChessGame()
    move = parse_coordinate_move("e2e4")
    assert move == ChessMove(Square(2, 5), Square(4, 5))
    game.make_move(move)
    assert game.current_turn == BLACK

    move = parse_coordinate_move(" e7-e5 ")
    assert move == ChessMove(Square(7, 5), Square(5, 5))
    game.make_move(move)


def test_parse_promotion():
    assert parse_coordinate_move("a7a8q").promotion == ChessPieceType.QUEEN
    assert parse_coordinate_move("A7A8=N").promotion == ChessPieceType.KNIGHT
    assert parse_coordinate_move("h2h1r") == ChessMove(
        Square(2, 8), Square(1, 8), ChessPieceType.ROOK
    )
    assert parse_coordinate_move("b2b1B").promotion == ChessPieceType.BISHOP


@pytest.mark.parametrize("text", ["", "e2", "e2e9", "i2i4", "e2e4k", "Nf3", "e2e4e5"])
def test_rejects_malformed_input(text):
    assert not is_coordinate(text)
    with pytest.raises(ValueError):
        parse_coordinate_move(text)


def test_is_coordinate():
    assert is_coordinate("g1f3")
    assert is_coordinate("g7g8=Q")
