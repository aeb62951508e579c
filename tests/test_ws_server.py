import asyncio
import json
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import websockets

from chessrules.board import ChessBoard
from chessrules.game import ChessGame
from chessrules.pieces import BLACK, PROMOTION_TYPES, WHITE, ChessPiece, ChessPieceType
from chessrules.square import Square
from ws_server import handle_client, handle_message


def test_state_reply_for_new_game():
    game, reply = handle_message(ChessGame(), {"type": "state"})
    assert reply["type"] == "state"
    assert reply["board"][0] == "rnbqkbnr"
    assert reply["board"][7] == "RNBQKBNR"
    assert reply["board"][4] == "........"
    assert reply["turn"] == "white"
    assert reply["check"] is False
    assert reply["result"] is None


def test_moves_query():
    game = ChessGame()
    _, reply = handle_message(game, {"type": "moves", "square": "e2"})
    assert reply == {"type": "moves", "square": "e2", "moves": ["e2e3", "e2e4"]}

    _, reply = handle_message(game, {"type": "moves", "square": "e4"})
    assert reply["moves"] is None

    _, reply = handle_message(game, {"type": "moves", "square": "a1"})
    assert reply["moves"] == []


def test_move_applies_and_flips_turn():
    game = ChessGame()
    same, reply = handle_message(game, {"type": "move", "move": "e2e4"})
    assert same is game
    assert reply["turn"] == "black"
    assert reply["board"][4] == "....P..."
    assert game.current_turn == BLACK


def test_rejected_moves_report_kind():
    game = ChessGame()
    _, reply = handle_message(game, {"type": "move", "move": "e7e5"})
    assert reply["type"] == "error"
    assert reply["error"] == "wrong_turn"

    _, reply = handle_message(game, {"type": "move", "move": "e3e4"})
    assert reply["error"] == "no_piece_at_source"

    _, reply = handle_message(game, {"type": "move", "move": "e2e5"})
    assert reply["error"] == "illegal_move"

    _, reply = handle_message(game, {"type": "move", "move": "castle"})
    assert reply["error"] == "bad_request"
    assert game.current_turn == WHITE


def test_bad_requests():
    game = ChessGame()
    _, reply = handle_message(game, {"type": "moves", "square": "z9"})
    assert reply["error"] == "bad_request"
    _, reply = handle_message(game, {"type": "resign"})
    assert reply["error"] == "bad_request"


def test_fools_mate_result_and_new_game():
    game = ChessGame()
    for move in ("f2f3", "e7e5", "g2g4"):
        game, reply = handle_message(game, {"type": "move", "move": move})
        assert reply["result"] is None
    game, reply = handle_message(game, {"type": "move", "move": "d8h4"})
    assert reply["check"] is True
    assert reply["result"] == "black"

    fresh, reply = handle_message(game, {"type": "new"})
    assert fresh is not game
    assert reply["turn"] == "white"
    assert reply["result"] is None


def promotion_game():
    board = ChessBoard()
    board[Square(7, 1)] = ChessPiece(WHITE, ChessPieceType.PAWN)
    board[Square(1, 8)] = ChessPiece(WHITE, ChessPieceType.KING)
    board[Square(8, 5)] = ChessPiece(BLACK, ChessPieceType.KING)
    return ChessGame(board)


def test_offered_promotions_can_be_played_back():
    _, reply = handle_message(promotion_game(), {"type": "moves", "square": "a7"})
    assert reply["moves"] == ["a7a8r", "a7a8b", "a7a8q", "a7a8n"]

    for text, expected in zip(reply["moves"], PROMOTION_TYPES):
        game = promotion_game()
        game, state = handle_message(game, {"type": "move", "move": text})
        assert state["type"] == "state", text
        assert game.board[Square(8, 1)] == ChessPiece(WHITE, expected)
        assert state["turn"] == "black"


def test_every_offered_move_is_accepted():
    game = ChessGame()
    _, reply = handle_message(game, {"type": "moves", "square": "g1"})
    for text in reply["moves"]:
        _, state = handle_message(ChessGame(), {"type": "move", "move": text})
        assert state["type"] == "state", text


class FakeSocket:
    def __init__(self, incoming):
        self.incoming = list(incoming)
        self.sent = []

    async def recv(self):
        if not self.incoming:
            raise websockets.ConnectionClosed(None, None)
        return self.incoming.pop(0)

    async def send(self, message):
        self.sent.append(json.loads(message))


def test_client_loop_rejects_non_json_and_non_objects():
    ws = FakeSocket(["e2e4", "[1, 2]", json.dumps({"type": "move", "move": "e2e4"})])
    asyncio.run(handle_client(ws))

    assert [r["type"] for r in ws.sent] == ["error", "error", "state"]
    assert ws.sent[0]["error"] == "bad_request"
    assert ws.sent[1]["error"] == "bad_request"
    assert ws.sent[2]["turn"] == "black"
