"""Rendering helpers for the terminal UI."""

from __future__ import annotations

from typing import Collection, Iterable, List, Sequence

from ..board import Cell
from ..config import BOARD_SIZE, EMPTY_CELL
from ..controller import Controller, result_message
from ..player import Player
from .status_box import render_status_box
from .text_utils import display_width, pad_to_width

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
FG_CYAN = "\033[36m"
FG_YELLOW = "\033[33m"
FG_RED = "\033[31m"
FG_MAGENTA = "\033[35m"
FG_BLUE = "\033[34m"
FG_WHITE = "\033[37m"

PLAYER_COLORS = {
    Player.PLAYER1: FG_RED,
    Player.PLAYER2: FG_BLUE,
}

ROW_SEPARATOR = "---+---+---"


def board_to_string(cells: Sequence[Cell]) -> str:
    """Plain board: one character per cell, ``|`` between columns."""

    parts: List[str] = []
    for index, cell in enumerate(cells):
        parts.append(cell.mark if cell is not None else EMPTY_CELL)
        parts.append("\n" if index % BOARD_SIZE == BOARD_SIZE - 1 else "|")
    return "".join(parts)


def board_to_colored_lines(
    cells: Sequence[Cell], highlight: Collection[int] = ()
) -> List[str]:
    """Colored board rows with separators. Empty cells show their key number."""

    lines: List[str] = []
    for row in range(BOARD_SIZE):
        rendered = [
            _render_cell(cells[index], index, index in highlight)
            for index in range(row * BOARD_SIZE, (row + 1) * BOARD_SIZE)
        ]
        lines.append("|".join(f" {cell} " for cell in rendered))
        if row < BOARD_SIZE - 1:
            lines.append(ROW_SEPARATOR)
    return lines


def render(controller: Controller) -> str:
    game = controller.game
    lines: List[str] = [_color("Tic Tac Toe", BOLD, FG_CYAN), _render_players_line(), ""]

    board_lines = board_to_colored_lines(game.board_snapshot(), game.winning_line() or ())
    board_width = max(display_width(line) for line in board_lines)
    log_lines = _render_action_log_panel(controller.action_log, len(board_lines))
    for idx, board_line in enumerate(board_lines):
        combined = f"{pad_to_width(board_line, board_width)}   {log_lines[idx]}"
        lines.append(combined.rstrip())

    lines.append("")
    lines.append(_render_turn_line(controller))
    controls_line = _render_controls_line()
    lines.append(controls_line)

    message = controller.info_message or ""
    body_width = max(display_width(line) for line in (*lines, message))
    lines.extend(_render_status_box(message, body_width))
    return "\n".join(lines)


def _render_players_line() -> str:
    return " | ".join(
        f"{player.label} is {_color(player.mark, PLAYER_COLORS[player], BOLD)}"
        for player in Player
    )


def _render_turn_line(controller: Controller) -> str:
    outcome = controller.game.outcome()
    if outcome is not None:
        return _color(result_message(outcome), BOLD, FG_YELLOW)
    player = controller.game.current_player
    return _color(f"{player.label}'s turn.", BOLD, PLAYER_COLORS[player])


def _render_action_log_panel(action_log: Iterable[str], height: int) -> List[str]:
    lines: List[str] = [_color("Recent moves", BOLD, FG_MAGENTA)]
    entries = list(action_log)
    if entries:
        for entry in reversed(entries):
            lines.append(_color(entry, FG_BLUE))
    else:
        lines.append(_color("-", FG_WHITE, DIM))

    if len(lines) < height:
        lines.extend([""] * (height - len(lines)))
    return lines[:height]


def _render_controls_line() -> str:
    return _color("Keys: 1-9 place a mark | N new game | Q quit", FG_CYAN)


def _render_cell(cell: Cell, index: int, highlighted: bool) -> str:
    if cell is None:
        return _color(str(index + 1), DIM)
    codes = [PLAYER_COLORS[cell]]
    if highlighted:
        codes.append(BOLD)
    return _color(cell.mark, *codes)


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{RESET}"


def _render_status_box(message: str, width: int) -> List[str]:
    box_lines = render_status_box(message, width)
    colored: List[str] = []
    for idx, line in enumerate(box_lines):
        if idx == 0 or idx == len(box_lines) - 1:
            colored.append(_color(line, FG_WHITE, BOLD))
        else:
            colored.append(_color(line, FG_YELLOW))
    return colored
