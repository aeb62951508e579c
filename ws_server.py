import asyncio
import json
import logging
import os
from typing import Any, Dict, Tuple

import websockets

from chessrules.errors import InvalidMoveError
from chessrules.game import ChessGame
from chessrules.pieces import Color
from chessrules.square import Square
from move_input import parse_coordinate_move

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8765

Reply = Dict[str, Any]


def _state(game: ChessGame) -> Reply:
    rows = []
    for row in range(8, 0, -1):
        pieces = (game.board[Square(row, col)] for col in range(1, 9))
        rows.append("".join(p.symbol if p else "." for p in pieces))
    outcome = game.result()
    return {
        "type": "state",
        "board": rows,
        "turn": game.current_turn.value,
        "check": game.is_in_check(game.current_turn),
        "result": outcome.value if isinstance(outcome, Color) else outcome,
    }


def _error(kind: str, message: str) -> Reply:
    return {"type": "error", "error": kind, "message": message}


def handle_message(game: ChessGame, data: Dict[str, Any]) -> Tuple[ChessGame, Reply]:
    """Apply one decoded client message and build the reply.

    Returns the game to keep using (a ``new`` message replaces it).
    """
    msg_type = data.get("type")
    if msg_type == "new":
        game = ChessGame()
        return game, _state(game)

    if msg_type == "state":
        return game, _state(game)

    if msg_type == "moves":
        try:
            square = Square.from_algebraic(str(data.get("square", "")))
        except ValueError as exc:
            return game, _error("bad_request", str(exc))
        moves = game.valid_moves(square)
        return game, {
            "type": "moves",
            "square": str(square),
            "moves": None if moves is None else [str(m) for m in moves],
        }

    if msg_type == "move":
        try:
            move = parse_coordinate_move(str(data.get("move", "")))
        except ValueError as exc:
            return game, _error("bad_request", str(exc))
        try:
            game.make_move(move)
        except InvalidMoveError as exc:
            logger.info("Rejected move %s: %s", move, exc.kind.value)
            return game, _error(exc.kind.value, str(exc))
        return game, _state(game)

    return game, _error("bad_request", f"Unknown message type: {msg_type}")


async def handle_client(ws) -> None:
    """Handle a single WebSocket connection; each client gets its own game."""
    game = ChessGame()
    logger.info("Client connected")

    while True:
        try:
            msg = await ws.recv()
            logger.info("Received message: %s", msg)
        except websockets.ConnectionClosed:
            break

        try:
            data = json.loads(msg)
        except json.JSONDecodeError:
            await ws.send(json.dumps(_error("bad_request", "messages must be JSON objects")))
            continue
        if not isinstance(data, dict):
            await ws.send(json.dumps(_error("bad_request", "messages must be JSON objects")))
            continue

        game, reply = handle_message(game, data)
        await ws.send(json.dumps(reply))

    logger.info("Client disconnected")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())


async def _main() -> None:
    host = os.environ.get("CHESSRULES_WS_HOST", DEFAULT_HOST)
    port = int(os.environ.get("CHESSRULES_WS_PORT", DEFAULT_PORT))
    async with websockets.serve(handle_client, host, port):
        logger.info("WebSocket server started on ws://%s:%d", host, port)
        await asyncio.Future()


if __name__ == "__main__":
    main()
