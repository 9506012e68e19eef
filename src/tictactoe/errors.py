"""Exceptions raised when a move is rejected by the game engine."""

from __future__ import annotations


class MoveError(ValueError):
    """Base class for rejected moves. The game state is left untouched."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(message)
        self.index = index


class GameEndedError(MoveError):
    def __init__(self, index: int) -> None:
        super().__init__(index, "The game has already ended")


class OutOfBoundsError(MoveError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"Position {index} is outside the board")


class IndexTakenError(MoveError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"Position {index} is already taken")
