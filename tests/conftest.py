"""Shared fixtures for the tic-tac-toe tests."""

import pytest

from tictactoe.game import Game

TOP_ROW_WIN = [0, 3, 1, 4, 2]
TIED_GAME = [0, 3, 1, 2, 4, 7, 5, 8, 6]


def play_moves(game, moves):
    """Apply ``moves`` in order, failing loudly if any is rejected."""
    for index in moves:
        game.place_mark(index)
    return game


@pytest.fixture
def game():
    return Game.new()


@pytest.fixture
def won_game():
    return play_moves(Game.new(), TOP_ROW_WIN)


@pytest.fixture
def tied_game():
    return play_moves(Game.new(), TIED_GAME)
