"""Board model and win detection for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import CELL_COUNT, WIN_SEQUENCE_LENGTH
from .errors import IndexTakenError, OutOfBoundsError
from .player import Player

Cell = Optional[Player]
Line = Tuple[int, int, int]
MoveRecord = Tuple[Player, int]

# Rows, then columns, then diagonals. Indices are row-major.
WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass
class Board:
    """A fixed 3x3 board stored as nine row-major cells."""

    cells: List[Cell] = field(default_factory=lambda: [None] * CELL_COUNT)
    history: List[MoveRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"A board has exactly {CELL_COUNT} cells")

    # ---------------------------------------------------------------------
    # Query helpers
    # ---------------------------------------------------------------------
    def is_within_bounds(self, index: int) -> bool:
        """Return ``True`` if ``index`` addresses a cell.

        Only plain ints qualify: floats, strings, ``None`` and bools never do,
        and negative indices never wrap around.
        """

        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < CELL_COUNT

    def is_empty(self, index: int) -> bool:
        return self.is_within_bounds(index) and self.cells[index] is None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def empty_cells(self) -> List[int]:
        """Return the indices of empty cells in ascending order."""

        return [index for index, cell in enumerate(self.cells) if cell is None]

    def snapshot(self) -> Tuple[Cell, ...]:
        return tuple(self.cells)

    # ---------------------------------------------------------------------
    # Mutation helpers
    # ---------------------------------------------------------------------
    def place(self, index: int, player: Player) -> None:
        """Put ``player``'s mark at ``index``.

        Raises :class:`OutOfBoundsError` for indices outside the board and
        :class:`IndexTakenError` when the cell is occupied. The board is not
        modified when either is raised.
        """

        if not self.is_within_bounds(index):
            raise OutOfBoundsError(index)
        if not self.is_empty(index):
            raise IndexTakenError(index)

        self.cells[index] = player
        self.history.append((player, index))

    # ---------------------------------------------------------------------
    # Win detection
    # ---------------------------------------------------------------------
    def winning_line(self) -> Optional[Line]:
        """Return the first line in :data:`WINNING_LINES` held by one player."""

        for line in WINNING_LINES:
            if self._line_owner(line) is not None:
                return line
        return None

    def _line_owner(self, line: Line) -> Optional[Player]:
        counts = {player: 0 for player in Player}
        for index in line:
            occupant = self.cells[index]
            if occupant is not None:
                counts[occupant] += 1
        for player, count in counts.items():
            if count == WIN_SEQUENCE_LENGTH:
                return player
        return None
