"""Color-level views of a game for presentation layers.

Nothing here knows about pixels: a renderer maps each Color to whatever it
draws.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from tetris_engine.game import Game
from tetris_engine.piece import Tetromino
from tetris_engine.types import Color, GameState, Position

PREVIEW_SIZE = 4


def render_board(game: Game) -> List[List[Color]]:
    """Board cells with the current piece drawn on top.

    Returns:
        height rows of width colors, top row first
    """
    board = game.board
    buffer = board.get_all_cells()

    piece = game.current_tetromino
    if piece is not None:
        for x, y in piece.get_cells():
            if board.in_bounds(x, y):
                buffer[y][x] = piece.color

    return buffer


def render_preview(piece: Optional[Tetromino], size: int = PREVIEW_SIZE) -> List[List[Color]]:
    """Draw a piece centered in a size x size grid.

    Only the relative blocks are used, so the piece's board position does
    not matter.
    """
    grid = [[Color.EMPTY] * size for _ in range(size)]
    if piece is None:
        return grid

    min_x, min_y, max_x, max_y = piece.get_bounding_box()
    offset_x = (size - (max_x - min_x + 1)) // 2
    offset_y = (size - (max_y - min_y + 1)) // 2

    for dx, dy in piece.get_blocks():
        x = dx - min_x + offset_x
        y = dy - min_y + offset_y
        if 0 <= x < size and 0 <= y < size:
            grid[y][x] = piece.color

    return grid


@dataclass
class GameSnapshot:
    """Everything a presentation layer polls after a command or tick."""
    state: GameState
    board: List[List[Color]]
    current_cells: List[Position]
    preview: List[List[Color]]
    score: int
    level: int
    lines_cleared: int
    drop_interval: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert snapshot to dictionary for serialization."""
        return {
            "state": self.state.value,
            "board": {
                "w": len(self.board[0]) if self.board else 0,
                "h": len(self.board),
                "cells": [[int(cell) for cell in row] for row in self.board],
            },
            "current": [[x, y] for x, y in self.current_cells],
            "preview": [[int(cell) for cell in row] for row in self.preview],
            "score": self.score,
            "level": self.level,
            "lines_cleared": self.lines_cleared,
            "drop_interval": self.drop_interval,
        }


def snapshot(game: Game) -> GameSnapshot:
    """Capture the current state of a game."""
    current = game.current_tetromino
    return GameSnapshot(
        state=game.state,
        board=render_board(game),
        current_cells=current.get_cells() if current is not None else [],
        preview=render_preview(game.next_tetromino),
        score=game.score,
        level=game.level,
        lines_cleared=game.lines_cleared,
        drop_interval=game.drop_interval,
    )
