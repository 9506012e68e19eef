"""Player identities."""

from __future__ import annotations

from enum import Enum

from .config import PLAYER1_MARK, PLAYER2_MARK


class Player(Enum):
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def mark(self) -> str:
        return PLAYER1_MARK if self is Player.PLAYER1 else PLAYER2_MARK

    @property
    def label(self) -> str:
        return f"Player {self.value}"

    @property
    def opponent(self) -> "Player":
        return Player.PLAYER2 if self is Player.PLAYER1 else Player.PLAYER1
