from __future__ import annotations

from chessrules.errors import InvalidMoveError
from chessrules.game import DRAW, ChessGame
from move_input import parse_coordinate_move


def print_board(game: ChessGame) -> None:
    print(game.board)


def announce(game: ChessGame) -> bool:
    """Print the state of the side to move; return True once the game is over."""
    outcome = game.result()
    if outcome == DRAW:
        print("Stalemate, game drawn")
        return True
    if outcome is not None:
        print(f"Checkmate, {outcome.value.capitalize()} wins")
        return True
    if game.is_in_check(game.current_turn):
        print(f"{game.current_turn.value.capitalize()} is in check")
    return False


def main() -> None:
    game = ChessGame()
    print("Enter moves in coordinate format like e2e4 (e7e8q to promote)")
    while True:
        print_board(game)
        if announce(game):
            break
        text = input(f"{game.current_turn.value}> ")
        try:
            move = parse_coordinate_move(text)
        except ValueError:
            print("Invalid move format")
            continue
        try:
            game.make_move(move)
        except InvalidMoveError as exc:
            print(f"Illegal move: {exc}")


if __name__ == "__main__":
    main()
