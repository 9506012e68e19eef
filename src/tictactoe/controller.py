"""Controller responsible for interpreting user commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .config import ACTION_LOG_CAPACITY, CELL_COUNT
from .errors import GameEndedError, IndexTakenError, MoveError, OutOfBoundsError
from .game import Game, Outcome

logger = logging.getLogger(__name__)


class Command:
    PLACE_PREFIX = "place:"
    NEW_GAME = "new-game"
    QUIT = "quit"


def map_key_to_command(key: Optional[str]) -> Optional[str]:
    """Translate a key press into a command, or ``None`` for unknown keys.

    Digits are 1-based cell numbers, so ``"0"`` maps to position -1 and is
    left for the engine to reject.
    """

    if not key:
        return None
    if len(key) == 1 and key in "0123456789":
        return f"{Command.PLACE_PREFIX}{int(key) - 1}"
    mapping = {
        "n": Command.NEW_GAME,
        "r": Command.NEW_GAME,
        "q": Command.QUIT,
    }
    return mapping.get(key.lower())


def describe_move_error(error: MoveError, game: Game) -> str:
    """Return the message shown to the player for a rejected move."""

    if isinstance(error, IndexTakenError):
        spaces = ", ".join(str(index + 1) for index in game.available_positions())
        return (
            "That space is already taken. "
            f"Please try again choosing any of these spaces: {spaces}"
        )
    if isinstance(error, OutOfBoundsError):
        index = error.index
        shown = index + 1 if isinstance(index, int) and not isinstance(index, bool) else repr(index)
        return f"{shown} is not in the range 1-{CELL_COUNT}. Please try again."
    if isinstance(error, GameEndedError):
        return "The game has ended. Please start a new game."
    return str(error)


def _key_label(key: Optional[str]) -> str:
    # Escape sequences (arrow keys) and whitespace are shown quoted.
    if key and len(key) == 1 and key.isprintable() and not key.isspace():
        return key
    return repr(key)


def result_message(outcome: Outcome) -> str:
    if outcome.is_tie:
        return "It's a tie!"
    return f"{outcome.winner.label} wins!"


@dataclass
class Controller:
    """Translate symbolic commands into game actions."""

    game: Game = field(default_factory=Game.new)
    info_message: Optional[str] = None
    action_log: List[str] = field(default_factory=list)
    log_capacity: int = ACTION_LOG_CAPACITY

    def __post_init__(self) -> None:
        self._handlers: Dict[str, Callable[[], None]] = {
            Command.NEW_GAME: self.new_game,
        }

    def handle_key(self, key: Optional[str]) -> Optional[str]:
        """Apply a key press and return the command it mapped to."""

        command = map_key_to_command(key)
        if command is None:
            self.info_message = f"{_key_label(key)} is not a number. Please try again."
            return None
        if command != Command.QUIT:
            self.handle_input(command)
        return command

    def handle_input(self, command: str) -> None:
        if command.startswith(Command.PLACE_PREFIX):
            self.place(int(command[len(Command.PLACE_PREFIX):]))
            return

        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"Unknown command: {command}")
        handler()

    def place(self, index: int) -> bool:
        """Submit a move. Returns ``False`` when the engine rejected it."""

        player = self.game.current_player
        try:
            result = self.game.place_mark(index)
        except MoveError as exc:
            logger.debug("Rejected move at %r for %s: %s", index, player.label, exc)
            self.info_message = describe_move_error(exc, self.game)
            return False

        logger.debug("%s placed %s at %d", player.label, player.mark, index)
        self.info_message = None
        self._log_action(f"{player.label} ({player.mark}) took {result.index + 1}")
        outcome = self.game.outcome()
        if outcome is not None:
            self._log_action(result_message(outcome))
        return True

    def new_game(self) -> None:
        """Replace the current game with a fresh one. Games never restart in place."""

        self.game = Game.new()
        self.info_message = None
        self.action_log.clear()
        logger.debug("Started a new game")
        self._log_action("New game started")

    def _log_action(self, message: str) -> None:
        self.action_log.append(message)
        if len(self.action_log) > self.log_capacity:
            del self.action_log[0 : len(self.action_log) - self.log_capacity]
