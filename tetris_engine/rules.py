"""Wall kicks, scoring and leveling rules.

The kick table is a simplified heuristic rather than the full Super
Rotation System: after a blocked rotation, three fixed offsets are tried.
"""

from typing import Dict, Optional, Tuple

from tetris_engine.board import Board
from tetris_engine.piece import Tetromino
from tetris_engine.types import (
    DROP_INTERVAL_STEP,
    LINES_PER_LEVEL,
    SCORE_PER_LINE,
    Direction,
    Position,
)

# Offsets tried in order after a blocked rotation: left, right, up.
# Each is applied to the rotated piece's original position (not cumulative).
WALL_KICKS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
)

# Bonus multiplier for simultaneous line clears
LINE_CLEAR_MULTIPLIERS: Dict[int, int] = {
    1: 1,
    2: 3,   # Double
    3: 5,   # Triple
    4: 8,   # Tetris
}


def try_rotate(
    board: Board, piece: Tetromino, direction: Direction
) -> Optional[Tetromino]:
    """Attempt to rotate a piece with wall kicks.

    Args:
        board: Current board state
        piece: Piece to rotate
        direction: Rotation direction

    Returns:
        Rotated piece if successful, None if rotation impossible
    """
    rotated = piece.rotate(direction)

    # Try without kicks first
    if board.is_valid_position(rotated):
        return rotated

    origin_x, origin_y = rotated.position
    for dx, dy in WALL_KICKS:
        kicked = rotated.clone()
        kicked.position = Position(origin_x + dx, origin_y + dy)
        if board.is_valid_position(kicked):
            return kicked

    return None


def calculate_score(
    lines_cleared: int, level: int = 1, score_per_line: int = SCORE_PER_LINE
) -> int:
    """Calculate score from lines cleared simultaneously.

    Args:
        lines_cleared: Number of lines cleared by one lock
        level: Current level multiplier
        score_per_line: Base points per line

    Returns:
        Score points
    """
    if lines_cleared <= 0:
        return 0
    multiplier = LINE_CLEAR_MULTIPLIERS.get(lines_cleared, 1)
    return lines_cleared * score_per_line * multiplier * level


def level_for_lines(lines_cleared: int, lines_per_level: int = LINES_PER_LEVEL) -> int:
    """Level reached after clearing the given total number of lines."""
    return lines_cleared // lines_per_level + 1


def drop_interval_for_level(
    level: int,
    initial_interval: int,
    min_interval: int,
    step: int = DROP_INTERVAL_STEP,
) -> int:
    """Gravity period (ms) at a level, floored at min_interval."""
    return max(initial_interval - (level - 1) * step, min_interval)
