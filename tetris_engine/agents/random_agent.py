"""Random agent - presses buttons uniformly at random."""

import random
from typing import Optional

from tetris_engine.agent import Agent
from tetris_engine.session import Command
from tetris_engine.view import GameSnapshot


class RandomAgent(Agent):
    """Agent that sends a uniformly random command every tick.

    This serves as a baseline and a smoke test for the session loop.
    """

    COMMANDS = (Command.LEFT, Command.RIGHT, Command.DOWN, Command.ROTATE, Command.DROP)

    def __init__(self, seed: Optional[int] = None):
        """Initialize random agent.

        Args:
            seed: Random seed for reproducibility (optional)
        """
        super().__init__(name="Random")
        self.rng = random.Random(seed)

    def select_command(self, snapshot: GameSnapshot) -> Optional[Command]:
        return self.rng.choice(self.COMMANDS)
