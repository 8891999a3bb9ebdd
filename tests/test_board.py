"""Tests for board functionality."""

import pytest

from tetris_engine.board import Board
from tetris_engine.piece import Tetromino
from tetris_engine.types import Color, Position, TetrominoType


def fill_row(board, y, color=Color.I):
    for x in range(board.width):
        board.set_cell(x, y, color)


def test_board_initialization():
    """Test board starts empty."""
    board = Board()
    assert board.width == 10
    assert board.height == 20
    for y in range(board.height):
        for x in range(board.width):
            assert board.get_cell(x, y) == Color.EMPTY, f"({x}, {y}) should be empty"


def test_invalid_dimensions():
    """Test that non-positive dimensions are rejected."""
    with pytest.raises(ValueError):
        Board(0, 20)


def test_set_and_get_cell():
    """Test writing and reading a cell."""
    board = Board()
    board.set_cell(5, 10, Color.I)
    assert board.get_cell(5, 10) == Color.I


@pytest.mark.parametrize("x,y", [(-1, 0), (10, 0), (0, -1), (0, 20), (15, 25)])
def test_out_of_range_access(x, y):
    """Test off-board reads are empty and off-board writes are ignored."""
    board = Board()
    before = board.to_list()

    board.set_cell(x, y, Color.T)

    assert board.get_cell(x, y) == Color.EMPTY
    assert board.to_list() == before, "Grid should be unchanged"


def test_valid_position_bounds():
    """Test collision with walls and floor."""
    board = Board()

    assert board.is_valid_position(Tetromino(TetrominoType.T, x=4, y=18))

    # Left wall: T blocks span x-1..x+1
    assert not board.is_valid_position(Tetromino(TetrominoType.T, x=0, y=10))

    # Right wall
    assert not board.is_valid_position(Tetromino(TetrominoType.T, x=9, y=10))

    # Floor: T rotation 0 has a block at y+1
    assert not board.is_valid_position(Tetromino(TetrominoType.T, x=4, y=19))


def test_blocks_above_board_are_exempt():
    """Test pieces entirely above the board are accepted regardless of cells below."""
    board = Board()
    for y in range(board.height):
        fill_row(board, y)

    piece = Tetromino(TetrominoType.I, x=4, y=-3, rotation=1)  # rows -4..-1
    assert board.is_valid_position(piece)

    # Partially above the board: the on-board block still collides
    piece = Tetromino(TetrominoType.I, x=4, y=-1, rotation=1)  # rows -2..1
    assert not board.is_valid_position(piece)


def test_walls_apply_above_board():
    """Test blocks above the board must still be between the walls."""
    board = Board()
    piece = Tetromino(TetrominoType.I, x=9, y=-1)  # columns 8..11, row -1
    assert not board.is_valid_position(piece)

    piece = Tetromino(TetrominoType.I, x=7, y=-1)  # columns 6..9
    assert board.is_valid_position(piece)


def test_overlap_detection():
    """Test a placed piece blocks the same footprint."""
    board = Board()
    piece = Tetromino(TetrominoType.L, x=4, y=10)

    assert board.is_valid_position(piece)
    board.place_tetromino(piece)
    assert not board.is_valid_position(piece), "Same footprint should overlap"


def test_place_tetromino():
    """Test locking a piece onto the board."""
    board = Board()
    piece = Tetromino(TetrominoType.Z, x=4, y=5)

    board.place_tetromino(piece)

    for x, y in piece.get_cells():
        assert board.get_cell(x, y) == Color.Z, f"Cell ({x}, {y}) should be filled"
    assert sum(1 for cell in board.cells if cell != Color.EMPTY) == 4


def test_place_tetromino_skips_off_board_blocks():
    """Test blocks above the board are dropped silently."""
    board = Board()
    piece = Tetromino(TetrominoType.I, x=4, y=0, rotation=1)  # rows -1..2

    board.place_tetromino(piece)

    filled = [Position(x, y) for y in range(board.height) for x in range(board.width)
              if board.get_cell(x, y) != Color.EMPTY]
    assert filled == [Position(4, 0), Position(4, 1), Position(4, 2)]


def test_line_clearing():
    """Test clearing a single complete line."""
    board = Board()
    fill_row(board, 19)
    board.set_cell(3, 18, Color.O)

    lines_cleared = board.clear_lines()

    assert lines_cleared == 1, "Should clear one line"
    assert board.get_cell(3, 19) == Color.O, "Row above should shift down"
    assert board.get_cell(3, 18) == Color.EMPTY


def test_multiple_line_clearing():
    """Test clearing contiguous lines."""
    board = Board()
    for y in range(17, 20):
        fill_row(board, y)

    assert board.clear_lines() == 3, "Should clear three lines"
    assert all(cell == Color.EMPTY for cell in board.cells)


def test_clear_separated_lines_shifts_rows():
    """Test rows 5 and 10 cleared with marker rows shifting correctly."""
    board = Board()
    markers = list(Color)[1:]

    # Each non-full row gets a single marker cell at a column unique to the row
    for y in range(board.height):
        if y in (5, 10):
            fill_row(board, y)
        else:
            board.set_cell(y % board.width, y, markers[y % len(markers)])
    original = board.get_all_cells()

    assert board.clear_lines() == 2

    after = board.get_all_cells()
    assert after[0] == [Color.EMPTY] * board.width
    assert after[1] == [Color.EMPTY] * board.width
    for y in range(0, 5):
        assert after[y + 2] == original[y], f"Row {y} should move down by 2"
    for y in range(6, 10):
        assert after[y + 1] == original[y], f"Row {y} should move down by 1"
    for y in range(11, 20):
        assert after[y] == original[y], f"Row {y} should stay"


def test_no_full_lines():
    """Test clear_lines leaves partial rows alone."""
    board = Board()
    fill_row(board, 19)
    board.set_cell(0, 19, Color.EMPTY)
    before = board.to_list()

    assert board.clear_lines() == 0
    assert board.to_list() == before


def test_game_over_detection():
    """Test game over triggers only for blocks in the top 4 rows."""
    board = Board()
    assert not board.is_game_over()

    board.set_cell(2, 4, Color.S)
    assert not board.is_game_over(), "Row 4 is below the danger zone"

    board.set_cell(7, 3, Color.S)
    assert board.is_game_over()


def test_clear():
    """Test clearing the whole board keeps its size."""
    board = Board(8, 12)
    fill_row(board, 11)
    board.clear()
    assert board.width == 8 and board.height == 12
    assert all(cell == Color.EMPTY for cell in board.cells)


def test_column_heights():
    """Test calculating column heights."""
    board = Board()
    board.set_cell(5, 18, Color.J)
    board.set_cell(5, 17, Color.J)
    board.set_cell(5, 15, Color.J)  # Gap at 16

    heights = board.get_column_heights()
    assert heights[5] == 5, "Column 5 should have height 5 (from y=15 to bottom)"
    assert heights[0] == 0


def test_copy_and_list_round_trip():
    """Test copies and list exports are independent of the board."""
    board = Board()
    board.set_cell(1, 1, Color.L)

    clone = board.copy()
    clone.set_cell(1, 1, Color.EMPTY)
    assert board.get_cell(1, 1) == Color.L

    restored = Board.from_list(board.to_list())
    assert restored.get_cell(1, 1) == Color.L

    with pytest.raises(ValueError):
        Board.from_list([0] * 10)
