"""Configuration constants used across the tic-tac-toe project."""

BOARD_SIZE: int = 3
CELL_COUNT: int = BOARD_SIZE * BOARD_SIZE
WIN_SEQUENCE_LENGTH: int = 3
PLAYER1_MARK: str = "X"
PLAYER2_MARK: str = "O"
EMPTY_CELL: str = " "

# Number of entries kept in the controller's "recent moves" panel.
ACTION_LOG_CAPACITY: int = 8
