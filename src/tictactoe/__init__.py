"""Top-level package for the terminal tic-tac-toe game."""

__all__ = [
    "config",
    "errors",
    "player",
    "board",
    "game",
    "controller",
]
