"""Tests for the key controller."""

import pytest

from conftest import TIED_GAME
from tictactoe.controller import (
    Command,
    Controller,
    map_key_to_command,
    result_message,
)
from tictactoe.game import Outcome
from tictactoe.player import Player


def press(controller, keys):
    for key in keys:
        controller.handle_key(key)


@pytest.mark.parametrize(
    "key,expected",
    [
        ("1", "place:0"),
        ("9", "place:8"),
        ("0", "place:-1"),
        ("n", Command.NEW_GAME),
        ("R", Command.NEW_GAME),
        ("q", Command.QUIT),
        ("Q", Command.QUIT),
        ("x", None),
        ("", None),
        (None, None),
        ("12", None),
    ],
)
def test_map_key_to_command(key, expected):
    assert map_key_to_command(key) == expected


def test_digit_places_one_based_cell():
    controller = Controller()

    assert controller.handle_key("5") == "place:4"
    assert controller.game.board_snapshot()[4] is Player.PLAYER1
    assert controller.game.current_player is Player.PLAYER2
    assert controller.info_message is None
    assert controller.action_log == ["Player 1 (X) took 5"]


def test_taken_space_lists_available_spaces():
    controller = Controller()
    press(controller, ["5", "1"])

    controller.handle_key("5")

    assert controller.info_message == (
        "That space is already taken. "
        "Please try again choosing any of these spaces: 2, 3, 4, 6, 7, 8, 9"
    )
    assert controller.game.current_player is Player.PLAYER1


def test_zero_is_out_of_range():
    controller = Controller()

    controller.handle_key("0")

    assert controller.info_message == "0 is not in the range 1-9. Please try again."
    assert controller.game.available_positions() == list(range(9))


def test_place_reports_out_of_range_index():
    controller = Controller()

    assert controller.place(11) is False
    assert controller.info_message == "12 is not in the range 1-9. Please try again."


def test_non_number_key():
    controller = Controller()

    assert controller.handle_key("x") is None
    assert controller.info_message == "x is not a number. Please try again."


@pytest.mark.parametrize(
    "key,shown",
    [
        ("\x1b[A", repr("\x1b[A")),
        (" ", repr(" ")),
        ("\t", repr("\t")),
        ("\x03", repr("\x03")),
    ],
)
def test_unprintable_keys_are_quoted(key, shown):
    controller = Controller()

    controller.handle_key(key)

    assert controller.info_message == f"{shown} is not a number. Please try again."


def test_place_reports_non_int_index():
    controller = Controller()

    assert controller.place("3") is False
    assert controller.info_message == "'3' is not in the range 1-9. Please try again."
    assert controller.game.move_count == 0


def test_quit_does_not_touch_the_game():
    controller = Controller()
    game = controller.game

    assert controller.handle_key("q") == Command.QUIT
    assert controller.game is game
    assert controller.action_log == []


def test_game_ended_message_after_win():
    controller = Controller()
    press(controller, ["1", "4", "2", "5", "3"])

    assert controller.game.is_finished
    assert controller.action_log[-1] == "Player 1 wins!"

    controller.handle_key("9")

    assert controller.info_message == "The game has ended. Please start a new game."


def test_new_game_replaces_the_game_instance():
    controller = Controller()
    press(controller, ["1", "4", "2", "5", "3"])
    finished = controller.game

    controller.handle_key("n")

    assert controller.game is not finished
    assert finished.is_finished
    assert not controller.game.is_finished
    assert controller.game.current_player is Player.PLAYER1
    assert controller.action_log == ["New game started"]


def test_unknown_command_raises():
    controller = Controller()

    with pytest.raises(ValueError):
        controller.handle_input("bogus")


def test_action_log_is_bounded():
    controller = Controller(log_capacity=4)
    press(controller, [str(index + 1) for index in TIED_GAME])

    assert controller.game.outcome().is_tie
    assert len(controller.action_log) == 4
    assert controller.action_log[-1] == "It's a tie!"
    assert controller.action_log[-2] == "Player 1 (X) took 7"


def test_result_messages():
    assert result_message(Outcome()) == "It's a tie!"
    assert result_message(Outcome(winner=Player.PLAYER1, line=(0, 1, 2))) == "Player 1 wins!"
    assert result_message(Outcome(winner=Player.PLAYER2, line=(2, 4, 6))) == "Player 2 wins!"
