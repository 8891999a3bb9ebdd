"""Game board with collision detection and line clearing."""

from typing import List

from tetris_engine.piece import Tetromino
from tetris_engine.types import BOARD_HEIGHT, BOARD_WIDTH, GAME_OVER_ROWS, Color


class Board:
    """Fixed-size grid of cell colors."""

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        """Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # cells[y * width + x] represents the cell at (x, y)
        self.cells: List[Color] = [Color.EMPTY] * (width * height)

    def get_cell(self, x: int, y: int) -> Color:
        """Get cell color at (x, y).

        Args:
            x: Column
            y: Row (0 at top)

        Returns:
            Cell color, Color.EMPTY for coordinates off the board
        """
        if not self.in_bounds(x, y):
            return Color.EMPTY
        return self.cells[y * self.width + x]

    def set_cell(self, x: int, y: int, color: Color) -> None:
        """Set cell color at (x, y). Off-board coordinates are ignored."""
        if self.in_bounds(x, y):
            self.cells[y * self.width + x] = Color(color)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid_position(self, piece: Tetromino) -> bool:
        """Check whether a piece fits on the board.

        Blocks above the top row (y < 0) only have to be between the walls,
        so pieces can spawn and rotate partly above the visible board.

        Args:
            piece: The piece to check

        Returns:
            True if every block is inside the walls, above the floor and on
            an empty cell
        """
        for x, y in piece.get_cells():
            if x < 0 or x >= self.width or y >= self.height:
                return False
            if y >= 0 and self.cells[y * self.width + x] != Color.EMPTY:
                return False
        return True

    def place_tetromino(self, piece: Tetromino) -> None:
        """Write a piece's color into the board.

        Blocks that fall outside the board are skipped.
        """
        for x, y in piece.get_cells():
            self.set_cell(x, y, piece.color)

    def clear_lines(self) -> int:
        """Clear all complete lines and return count.

        Returns:
            Number of lines cleared
        """
        lines_cleared = 0
        y = self.height - 1  # Start from bottom

        while y >= 0:
            if self.is_line_full(y):
                self.remove_line(y)
                lines_cleared += 1
                # Don't decrement y; check the same row again
            else:
                y -= 1

        return lines_cleared

    def is_line_full(self, y: int) -> bool:
        """Check if a line is completely filled."""
        if not 0 <= y < self.height:
            return False
        row = self.cells[y * self.width:(y + 1) * self.width]
        return all(cell != Color.EMPTY for cell in row)

    def remove_line(self, line_y: int) -> None:
        """Remove a line and shift everything above down.

        Args:
            line_y: Row to remove
        """
        w = self.width
        # Shift all lines above down by one
        for y in range(line_y, 0, -1):
            self.cells[y * w:(y + 1) * w] = self.cells[(y - 1) * w:y * w]

        # Clear the top line
        self.cells[0:w] = [Color.EMPTY] * w

    def is_game_over(self) -> bool:
        """Check whether any block sits in the top rows of the board."""
        top = self.cells[:min(GAME_OVER_ROWS, self.height) * self.width]
        return any(cell != Color.EMPTY for cell in top)

    def clear(self) -> None:
        """Reset every cell to empty."""
        self.cells = [Color.EMPTY] * (self.width * self.height)

    def get_all_cells(self) -> List[List[Color]]:
        """Get a copy of the grid as a list of rows (top row first)."""
        w = self.width
        return [self.cells[y * w:(y + 1) * w] for y in range(self.height)]

    def get_column_height(self, x: int) -> int:
        """Get the height of a column (distance from bottom to highest block).

        Args:
            x: Column index

        Returns:
            Height (0 = empty column, height = full column)
        """
        for y in range(self.height):
            if self.get_cell(x, y) != Color.EMPTY:
                return self.height - y
        return 0

    def get_column_heights(self) -> List[int]:
        """Get heights of all columns."""
        return [self.get_column_height(x) for x in range(self.width)]

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.width, self.height)
        new_board.cells = self.cells.copy()
        return new_board

    def to_list(self) -> List[int]:
        """Export board as flat list of color values (for serialization)."""
        return [int(cell) for cell in self.cells]

    @classmethod
    def from_list(
        cls, cells: List[int], width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT
    ) -> "Board":
        """Create board from flat list.

        Args:
            cells: List of width * height color values, row-major
            width: Number of columns
            height: Number of rows

        Returns:
            New board
        """
        if len(cells) != width * height:
            raise ValueError(f"Expected {width * height} cells, got {len(cells)}")
        board = cls(width, height)
        board.cells = [Color(cell) for cell in cells]
        return board

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height})"
