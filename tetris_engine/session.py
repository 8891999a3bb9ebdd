"""Game session: start/pause/restart policy and the gravity loop.

A session is the single writer of its game. Every engine call goes through
one lock, so commands may arrive from another thread (an input handler, say)
while gravity ticks on the asyncio event loop.
"""

import asyncio
import logging
import threading
import time
from enum import Enum
from typing import Optional, Union

from tetris_engine.game import Game
from tetris_engine.types import Direction, GameState
from tetris_engine.view import GameSnapshot, snapshot

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_MS = 500


class Command(str, Enum):
    """Discrete player commands."""
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    DOWN = "DOWN"      # Soft drop one row
    ROTATE = "ROTATE"  # Clockwise rotation
    DROP = "DROP"      # Hard drop (instant lock)
    PAUSE = "PAUSE"    # Toggle pause


class GameSession:
    """Drives one game on behalf of a presentation layer."""

    def __init__(
        self,
        game: Optional[Game] = None,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
    ):
        """Initialize the session.

        Args:
            game: Game to drive (a default Game is created if None)
            tick_interval_ms: Period of the gravity loop in milliseconds
        """
        self.game = game or Game()
        self.tick_interval_ms = tick_interval_ms
        self.running = False
        self.paused = False
        self._lock = threading.RLock()
        self._stop_requested = False

    def start(self) -> None:
        """Start playing, resetting first if the last game is over."""
        with self._lock:
            if self.game.state == GameState.GAME_OVER:
                self.game.reset()
            self.game.set_state(GameState.PLAYING)
            self.running = True
            self.paused = False
        logger.info("Session started")

    def restart(self) -> None:
        """Throw away the current game and start a new one.

        A gravity loop that already returned (run() exits on game over)
        is not restarted here; await run() again to resume gravity.
        """
        with self._lock:
            self.game.reset()
            self.game.set_state(GameState.PLAYING)
            self.running = True
            self.paused = False
        logger.info("Session restarted")

    def toggle_pause(self) -> bool:
        """Pause or resume play.

        Returns:
            True if the session is paused afterwards
        """
        with self._lock:
            if not self.running:
                return self.paused

            self.paused = not self.paused
            if self.paused:
                self.game.set_state(GameState.PAUSED)
            else:
                self.game.set_state(GameState.PLAYING)
            logger.info("Session %s", "paused" if self.paused else "resumed")
            return self.paused

    def handle_command(self, command: Union[Command, str]) -> bool:
        """Forward a player command to the game.

        Args:
            command: Command or its string value

        Returns:
            True if the command changed the game

        Raises:
            ValueError: If command is not a known command
        """
        command = Command(command)
        with self._lock:
            if command == Command.PAUSE:
                was_paused = self.paused
                return self.toggle_pause() != was_paused

            if not self.running or self.paused:
                return False

            if command == Command.LEFT:
                changed = self.game.move_tetromino(-1, 0)
            elif command == Command.RIGHT:
                changed = self.game.move_tetromino(1, 0)
            elif command == Command.DOWN:
                changed = self.game.move_tetromino(0, 1)
            elif command == Command.ROTATE:
                changed = self.game.rotate_tetromino(Direction.RIGHT)
            else:
                changed = self.game.drop_tetromino()

            self._check_game_over()
            return changed

    def tick(self, delta_ms: int) -> bool:
        """Advance gravity by delta_ms.

        Returns:
            True if the game was playing
        """
        with self._lock:
            playing = self.game.update(delta_ms)
            self._check_game_over()
            return playing

    def snapshot(self) -> GameSnapshot:
        """Capture the game state for rendering."""
        with self._lock:
            return snapshot(self.game)

    def stop(self) -> None:
        """Ask a running gravity loop to exit after its current sleep."""
        self._stop_requested = True

    async def run(self, max_ticks: Optional[int] = None) -> int:
        """Run the gravity loop until game over, stop() or max_ticks.

        The elapsed time handed to the game is measured, not assumed, so a
        late wakeup still advances gravity by the real amount.

        Args:
            max_ticks: Maximum number of ticks (None = no limit)

        Returns:
            Number of ticks executed
        """
        self._stop_requested = False
        ticks = 0
        last_update = time.monotonic()

        while self.running and not self._stop_requested:
            if max_ticks is not None and ticks >= max_ticks:
                break

            await asyncio.sleep(self.tick_interval_ms / 1000.0)
            if self._stop_requested:
                break

            now = time.monotonic()
            delta_ms = int((now - last_update) * 1000)
            last_update = now

            if not self.paused:
                self.tick(delta_ms)
            ticks += 1

        logger.info("Gravity loop exited after %d ticks (state=%s)", ticks, self.game.state.value)
        return ticks

    def _check_game_over(self) -> None:
        if self.running and self.game.state == GameState.GAME_OVER:
            self.running = False
            self.paused = False
            logger.info("Session ended with score %d", self.game.score)
