"""Shared value types and tunable constants for the game engine.

Board coordinates: x is the column, y is the row, (0, 0) is the top-left
cell and y grows downward.
"""

from enum import Enum, IntEnum
from typing import NamedTuple


class Position(NamedTuple):
    """Integer board coordinate (or offset relative to a piece origin)."""
    x: int
    y: int


class Color(IntEnum):
    """Cell fill marker. EMPTY is an unoccupied cell."""
    EMPTY = 0
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


class TetrominoType(IntEnum):
    """The seven canonical piece shapes."""
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


class Direction(IntEnum):
    """Rotation direction."""
    NONE = 0
    LEFT = 1   # Counter-clockwise
    RIGHT = 2  # Clockwise


class GameState(str, Enum):
    """Top-level game state."""
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# Board size
BOARD_WIDTH = 10
BOARD_HEIGHT = 20

# Rows at the top of the board that end the game when occupied after a lock
GAME_OVER_ROWS = 4

# Gravity timing (milliseconds)
INITIAL_DROP_INTERVAL = 1000
MIN_DROP_INTERVAL = 100
DROP_INTERVAL_STEP = 50  # Interval shrinks by this much per level

# Scoring
SCORE_PER_LINE = 100
HARD_DROP_BONUS = 2  # Per row travelled by a hard drop
LINES_PER_LEVEL = 10
