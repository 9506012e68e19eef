"""Game engine for tic-tac-toe turn management and rules enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, Cell, Line
from .errors import GameEndedError
from .player import Player


@dataclass(frozen=True)
class Outcome:
    """Result of a finished game. ``winner`` is ``None`` for a tie."""

    winner: Optional[Player] = None
    line: Optional[Line] = None

    @property
    def is_tie(self) -> bool:
        return self.winner is None


@dataclass
class MoveResult:
    index: int
    player: Player
    produced_win: bool
    produced_draw: bool


@dataclass
class Game:
    """State manager for a two-player tic-tac-toe match.

    The outcome is never stored: :meth:`outcome` derives it from the board on
    every call, so there is no cached win state to fall out of date.
    """

    board: Board = field(default_factory=Board)
    current_player: Player = Player.PLAYER1

    @classmethod
    def new(cls) -> "Game":
        return cls()

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------
    def place_mark(self, index: int) -> MoveResult:
        """Place the current player's mark at ``index`` and pass the turn.

        Checks run in a fixed order: a finished game raises
        :class:`~tictactoe.errors.GameEndedError` whatever the index, then the
        board rejects out-of-range indices before looking at occupancy.
        """

        if self.is_finished:
            raise GameEndedError(index)

        player = self.current_player
        self.board.place(index, player)
        self.current_player = player.opponent

        outcome = self.outcome()
        return MoveResult(
            index=index,
            player=player,
            produced_win=outcome is not None and outcome.winner is player,
            produced_draw=outcome is not None and outcome.is_tie,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def board_snapshot(self) -> Tuple[Cell, ...]:
        return self.board.snapshot()

    def available_positions(self) -> List[int]:
        return self.board.empty_cells()

    def winning_line(self) -> Optional[Line]:
        return self.board.winning_line()

    def outcome(self) -> Optional[Outcome]:
        """Return the outcome, or ``None`` while the game is in progress."""

        line = self.winning_line()
        if line is not None:
            return Outcome(winner=self.board.cells[line[0]], line=line)
        if self.board.is_full():
            return Outcome()
        return None

    @property
    def is_finished(self) -> bool:
        return self.outcome() is not None

    @property
    def move_count(self) -> int:
        return len(self.board.history)
