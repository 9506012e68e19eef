"""Command-line entry point for the tic-tac-toe game."""

from __future__ import annotations

import logging
import os

from .config import CELL_COUNT
from .controller import Command, Controller, result_message
from .player import Player
from .ui import input as input_mod
from .ui.renderer import board_to_colored_lines, render

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[J"


def main() -> None:  # pragma: no cover - interactive loop
    """Launch the interactive tic-tac-toe game."""

    logging.basicConfig(level=os.environ.get("TICTACTOE_LOG", "WARNING").upper())

    controller = Controller()
    print(
        f"Welcome to Tic Tac Toe! ({Player.PLAYER1.label} is {Player.PLAYER1.mark}, "
        f"{Player.PLAYER2.label} is {Player.PLAYER2.mark})."
    )
    print(f"Please press a number from 1 to {CELL_COUNT} to make a move.")

    while True:
        if not _play_round(controller):
            return
        if not _prompt_new_game(controller):
            return


def _play_round(controller: Controller) -> bool:  # pragma: no cover - interactive loop
    """Run one game to completion. Returns ``False`` if the player quit."""

    while not controller.game.is_finished:
        print(CLEAR_SCREEN, end="")
        print(render(controller))
        try:
            key = input_mod.get_key()
        except (EOFError, KeyboardInterrupt):
            return False
        if controller.handle_key(key) == Command.QUIT:
            return False

    game = controller.game
    outcome = game.outcome()
    print(CLEAR_SCREEN, end="")
    print("\n".join(board_to_colored_lines(game.board_snapshot(), outcome.line or ())))
    print("")
    print(result_message(outcome))
    logger.info("Game finished after %d moves: %s", game.move_count, result_message(outcome))
    return True


def _prompt_new_game(controller: Controller) -> bool:  # pragma: no cover - interactive loop
    print("Press N for a new game or Q to quit.")
    while True:
        try:
            key = input_mod.get_key()
        except (EOFError, KeyboardInterrupt):
            return False
        command = controller.handle_key(key)
        if command == Command.NEW_GAME:
            return True
        if command == Command.QUIT:
            return False


if __name__ == "__main__":  # pragma: no cover
    main()
