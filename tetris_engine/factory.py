"""Random piece generator.

Pieces are drawn uniformly at random from the seven types on every call:
there is no 7-bag and no repeat suppression.
"""

import random
from typing import Optional, Tuple

from tetris_engine.piece import Tetromino, new_tetromino
from tetris_engine.types import BOARD_WIDTH, TetrominoType


class TetrominoFactory:
    """Creates fresh pieces at the spawn position."""

    TYPES: Tuple[TetrominoType, ...] = tuple(TetrominoType)

    def __init__(self, board_width: int = BOARD_WIDTH, seed: Optional[int] = None):
        """Initialize the factory.

        Args:
            board_width: Width of the board pieces spawn on
            seed: Random seed for reproducible sequences (None = unseeded)
        """
        self.board_width = board_width
        self.seed = seed
        self.rng = random.Random(seed)

    def create_random(self) -> Tetromino:
        """Create a piece of a uniformly chosen type."""
        return self.create_specific(self.rng.choice(self.TYPES))

    def create_specific(self, tetromino_type: TetrominoType) -> Tetromino:
        """Create a piece of the given type."""
        return new_tetromino(tetromino_type, self.board_width)

    def reset(self, seed: Optional[int]) -> None:
        """Reseed the generator.

        Args:
            seed: New random seed
        """
        self.seed = seed
        self.rng = random.Random(seed)
