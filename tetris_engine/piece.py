"""Tetromino piece definitions and rotation logic.

Each piece is defined by its shape in 4 rotation states.
Coordinates are relative to the piece's origin; the origin itself is
placed on the board by the piece's position.
"""

from typing import List, Tuple

from tetris_engine.types import BOARD_WIDTH, Color, Direction, Position, TetrominoType

# Type alias for piece coordinates
Coords = Tuple[Position, ...]

# Piece shapes in 4 rotation states, indexed by TetrominoType ordinal.
# Each rotation is a tuple of (x, y) offsets relative to piece origin.
TETROMINO_SHAPES: Tuple[Tuple[Coords, ...], ...] = (
    # I
    (
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(2, 0)),  # horizontal
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(0, 2)),  # vertical
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(2, 0)),
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(0, 2)),
    ),
    # O: all rotations identical
    (
        (Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)),
        (Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)),
        (Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)),
        (Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)),
    ),
    # T
    (
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(0, 1)),
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(-1, 0)),
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(0, -1)),
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(1, 0)),
    ),
    # S
    (
        (Position(-1, 1), Position(0, 1), Position(0, 0), Position(1, 0)),
        (Position(0, -1), Position(0, 0), Position(1, 0), Position(1, 1)),
        (Position(-1, 1), Position(0, 1), Position(0, 0), Position(1, 0)),
        (Position(0, -1), Position(0, 0), Position(1, 0), Position(1, 1)),
    ),
    # Z
    (
        (Position(-1, 0), Position(0, 0), Position(0, 1), Position(1, 1)),
        (Position(1, -1), Position(1, 0), Position(0, 0), Position(0, 1)),
        (Position(-1, 0), Position(0, 0), Position(0, 1), Position(1, 1)),
        (Position(1, -1), Position(1, 0), Position(0, 0), Position(0, 1)),
    ),
    # J
    (
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(-1, 1)),
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(-1, -1)),
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(1, -1)),
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(1, 1)),
    ),
    # L
    (
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(1, 1)),
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(-1, 1)),
        (Position(-1, 0), Position(0, 0), Position(1, 0), Position(-1, -1)),
        (Position(0, -1), Position(0, 0), Position(0, 1), Position(1, -1)),
    ),
)

# Piece color, indexed by TetrominoType ordinal
TETROMINO_COLORS: Tuple[Color, ...] = (
    Color.I,
    Color.O,
    Color.T,
    Color.S,
    Color.Z,
    Color.J,
    Color.L,
)


class Tetromino:
    """A tetromino at a specific position and rotation.

    The instance owns its own copy of the shape table, so clones and rotated
    pieces never share backing storage with the piece they came from.
    """

    def __init__(
        self,
        tetromino_type: TetrominoType,
        x: int = 0,
        y: int = 0,
        rotation: int = 0,
    ):
        """Initialize a piece.

        Args:
            tetromino_type: One of the seven TetrominoType values
            x: Board x-coordinate of the piece origin
            y: Board y-coordinate of the piece origin (0 at top)
            rotation: Rotation index (0-3)

        Raises:
            ValueError: If tetromino_type is not a tetromino type
        """
        self.type = TetrominoType(tetromino_type)
        self.color = TETROMINO_COLORS[self.type]
        self.position = Position(x, y)
        self.rotation = rotation
        self._blocks: List[List[Position]] = [
            list(rotation_blocks) for rotation_blocks in TETROMINO_SHAPES[self.type]
        ]

    def get_blocks(self) -> List[Position]:
        """Get the 4 relative offsets for the current rotation.

        An out-of-range rotation index falls back to rotation 0.
        """
        if 0 <= self.rotation < len(self._blocks):
            return list(self._blocks[self.rotation])
        return list(self._blocks[0])

    def get_cells(self) -> List[Position]:
        """Get absolute board coordinates of all 4 cells."""
        px, py = self.position
        return [Position(px + dx, py + dy) for dx, dy in self.get_blocks()]

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the piece.

        Returns:
            (min_x, min_y, max_x, max_y) relative to piece origin
        """
        blocks = self.get_blocks()
        xs = [dx for dx, _ in blocks]
        ys = [dy for _, dy in blocks]
        return (min(xs), min(ys), max(xs), max(ys))

    def clone(self) -> "Tetromino":
        """Create an independent copy of this piece."""
        twin = Tetromino.__new__(Tetromino)
        twin.type = self.type
        twin.color = self.color
        twin.position = self.position
        twin.rotation = self.rotation
        twin._blocks = [list(rotation_blocks) for rotation_blocks in self._blocks]
        return twin

    def rotate(self, direction: Direction) -> "Tetromino":
        """Return a new piece rotated in the given direction.

        The source piece is never modified and the new piece keeps its
        position; whether it fits on the board is for the caller to check.
        """
        rotated = self.clone()
        if direction == Direction.LEFT:
            rotated.rotation = (self.rotation + 3) % 4
        elif direction == Direction.RIGHT:
            rotated.rotation = (self.rotation + 1) % 4
        return rotated

    def __repr__(self) -> str:
        x, y = self.position
        return f"Tetromino({self.type.name}, x={x}, y={y}, rotation={self.rotation})"


def get_spawn_position(board_width: int = BOARD_WIDTH) -> Position:
    """Get the spawn position of a new piece: horizontally centered, top row."""
    return Position(board_width // 2, 0)


def new_tetromino(
    tetromino_type: TetrominoType, board_width: int = BOARD_WIDTH
) -> Tetromino:
    """Create a piece of the given type at the spawn position, rotation 0."""
    x, y = get_spawn_position(board_width)
    return Tetromino(tetromino_type, x, y)
