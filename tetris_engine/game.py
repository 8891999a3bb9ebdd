"""Game controller: state machine, gravity timer, scoring and leveling.

The controller is synchronous and holds no locks. Callers that touch a game
from more than one thread must serialize access themselves (see
tetris_engine.session).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from tetris_engine.board import Board
from tetris_engine.factory import TetrominoFactory
from tetris_engine.piece import Tetromino
from tetris_engine.rules import (
    calculate_score,
    drop_interval_for_level,
    level_for_lines,
    try_rotate,
)
from tetris_engine.types import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DROP_INTERVAL_STEP,
    HARD_DROP_BONUS,
    INITIAL_DROP_INTERVAL,
    LINES_PER_LEVEL,
    MIN_DROP_INTERVAL,
    SCORE_PER_LINE,
    Direction,
    GameState,
    Position,
)

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Tunable game parameters."""
    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT
    initial_drop_interval: int = INITIAL_DROP_INTERVAL
    min_drop_interval: int = MIN_DROP_INTERVAL
    drop_interval_step: int = DROP_INTERVAL_STEP
    score_per_line: int = SCORE_PER_LINE
    lines_per_level: int = LINES_PER_LEVEL
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got "
                f"{self.board_width}x{self.board_height}"
            )
        if self.min_drop_interval <= 0 or self.initial_drop_interval < self.min_drop_interval:
            raise ValueError(
                f"Invalid drop intervals: initial={self.initial_drop_interval}, "
                f"min={self.min_drop_interval}"
            )
        if self.lines_per_level <= 0:
            raise ValueError(f"lines_per_level must be positive, got {self.lines_per_level}")


@dataclass
class GameStats:
    """Summary of a game in progress."""
    score: int
    level: int
    lines_cleared: int
    pieces_placed: int
    elapsed_time: float  # Seconds spent in the playing state

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "level": self.level,
            "lines_cleared": self.lines_cleared,
            "pieces_placed": self.pieces_placed,
            "elapsed_time": self.elapsed_time,
        }


class Game:
    """Falling-block game controller."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        factory: Optional[TetrominoFactory] = None,
    ):
        """Initialize the game in the menu state with a piece ready.

        Args:
            config: Game parameters (defaults to GameConfig())
            factory: Piece source (defaults to a factory seeded from config)
        """
        self.config = config or GameConfig()
        self.factory = factory or TetrominoFactory(
            board_width=self.config.board_width, seed=self.config.random_seed
        )
        self._board = Board(self.config.board_width, self.config.board_height)
        self._state = GameState.MENU

        self._current: Optional[Tetromino] = None
        self._next: Optional[Tetromino] = None

        self._score = 0
        self._level = 1
        self._lines_cleared = 0
        self._pieces_placed = 0
        self._elapsed_ms = 0

        self._drop_timer = 0
        self._drop_interval = self.config.initial_drop_interval

        self._generate_next_tetromino()
        self._spawn_new_tetromino()

    # State accessors

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_tetromino(self) -> Optional[Tetromino]:
        return self._current

    @property
    def next_tetromino(self) -> Optional[Tetromino]:
        return self._next

    @property
    def score(self) -> int:
        return self._score

    @property
    def level(self) -> int:
        return self._level

    @property
    def lines_cleared(self) -> int:
        return self._lines_cleared

    @property
    def pieces_placed(self) -> int:
        return self._pieces_placed

    @property
    def drop_interval(self) -> int:
        return self._drop_interval

    @property
    def drop_timer(self) -> int:
        return self._drop_timer

    def stats(self) -> GameStats:
        """Get a summary of the current game."""
        return GameStats(
            score=self._score,
            level=self._level,
            lines_cleared=self._lines_cleared,
            pieces_placed=self._pieces_placed,
            elapsed_time=self._elapsed_ms / 1000.0,
        )

    # State transitions

    def set_state(self, state: GameState) -> None:
        """Force the game into a state.

        No transition checks are made; the other operations enforce what
        each state allows.
        """
        state = GameState(state)
        if state != self._state:
            logger.debug("State %s -> %s", self._state.value, state.value)
        self._state = state

    def start(self) -> bool:
        """Start playing from the menu."""
        if self._state != GameState.MENU:
            return False
        self.set_state(GameState.PLAYING)
        return True

    def pause(self) -> bool:
        """Pause a running game."""
        if self._state != GameState.PLAYING:
            return False
        self.set_state(GameState.PAUSED)
        return True

    def resume(self) -> bool:
        """Resume a paused game."""
        if self._state != GameState.PAUSED:
            return False
        self.set_state(GameState.PLAYING)
        return True

    # Commands

    def move_tetromino(self, dx: int, dy: int) -> bool:
        """Try to move the current piece.

        Args:
            dx: Change in x
            dy: Change in y (positive is down)

        Returns:
            True if move succeeded
        """
        if self._state != GameState.PLAYING or self._current is None:
            return False

        candidate = self._current.clone()
        x, y = candidate.position
        candidate.position = Position(x + dx, y + dy)

        if self._board.is_valid_position(candidate):
            self._current = candidate
            return True
        return False

    def rotate_tetromino(self, direction: Direction) -> bool:
        """Try to rotate the current piece, falling back to wall kicks.

        Args:
            direction: Rotation direction

        Returns:
            True if rotation succeeded
        """
        if self._state != GameState.PLAYING or self._current is None:
            return False

        rotated = try_rotate(self._board, self._current, direction)
        if rotated is not None:
            self._current = rotated
            return True
        return False

    def drop_tetromino(self) -> bool:
        """Hard drop the current piece and lock it.

        Each row travelled is worth HARD_DROP_BONUS points. The piece locks
        even when it could not move at all.

        Returns:
            True if a piece was dropped
        """
        if self._state != GameState.PLAYING or self._current is None:
            return False

        while self.move_tetromino(0, 1):
            self._score += HARD_DROP_BONUS

        self._lock_current_tetromino()
        return True

    def update(self, delta_time: int) -> bool:
        """Advance the gravity timer.

        Args:
            delta_time: Milliseconds elapsed since the previous update

        Returns:
            True if the game is playing (whether or not the piece moved)
        """
        if self._state != GameState.PLAYING:
            return False

        self._elapsed_ms += delta_time
        self._drop_timer += delta_time

        if self._drop_timer >= self._drop_interval:
            self._drop_timer = 0
            if not self.move_tetromino(0, 1):
                self._lock_current_tetromino()

        return True

    def reset(self) -> None:
        """Return to the menu with an empty board and fresh counters."""
        self._state = GameState.MENU
        self._board.clear()
        self._score = 0
        self._level = 1
        self._lines_cleared = 0
        self._pieces_placed = 0
        self._elapsed_ms = 0
        self._drop_timer = 0
        self._drop_interval = self.config.initial_drop_interval

        self._generate_next_tetromino()
        self._spawn_new_tetromino()
        logger.debug("Game reset")

    # Internals

    def _lock_current_tetromino(self) -> None:
        """Commit the current piece to the board and bring in the next one."""
        if self._current is None:
            return

        self._board.place_tetromino(self._current)
        self._pieces_placed += 1

        cleared = self._board.clear_lines()
        if cleared > 0:
            self._update_score(cleared)
            self._update_level()

        if self._board.is_game_over():
            logger.info(
                "Game over: score=%d level=%d lines=%d",
                self._score, self._level, self._lines_cleared,
            )
            self._state = GameState.GAME_OVER
            self._current = None
            return

        self._spawn_new_tetromino()

    def _update_score(self, cleared: int) -> None:
        points = calculate_score(cleared, self._level, self.config.score_per_line)
        self._score += points
        self._lines_cleared += cleared
        logger.debug("Cleared %d line(s) for %d points", cleared, points)

    def _update_level(self) -> None:
        new_level = level_for_lines(self._lines_cleared, self.config.lines_per_level)
        if new_level > self._level:
            self._level = new_level
            self._drop_interval = drop_interval_for_level(
                self._level,
                self.config.initial_drop_interval,
                self.config.min_drop_interval,
                self.config.drop_interval_step,
            )
            logger.info("Level %d, drop interval %dms", self._level, self._drop_interval)

    def _spawn_new_tetromino(self) -> None:
        self._current = self._next
        self._generate_next_tetromino()

        if self._current is not None and not self._board.is_valid_position(self._current):
            logger.info("Spawned %r does not fit; game over", self._current)
            self._state = GameState.GAME_OVER
            self._current = None

    def _generate_next_tetromino(self) -> None:
        self._next = self.factory.create_random()
