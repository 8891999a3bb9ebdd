"""Base class and interfaces for automated players."""

from abc import ABC, abstractmethod
from typing import Optional

from tetris_engine.session import Command
from tetris_engine.view import GameSnapshot


class Agent(ABC):
    """Abstract base class for automated players.

    An agent sees the same snapshot a human player would and answers with
    at most one command per gravity tick.
    """

    def __init__(self, name: str):
        """Initialize agent with a name.

        Args:
            name: Human-readable name for this agent
        """
        self.name = name
        self.episode_count = 0
        self.total_score = 0
        self.total_lines = 0
        self.total_pieces = 0

    @abstractmethod
    def select_command(self, snapshot: GameSnapshot) -> Optional[Command]:
        """Select the next command given the current snapshot.

        Args:
            snapshot: Current game snapshot

        Returns:
            Command to send, or None to let gravity act alone
        """

    def on_episode_start(self, seed: int) -> None:
        """Called when a new episode starts.

        Args:
            seed: Random seed for this episode
        """
        self.episode_count += 1

    def on_episode_end(self, final_score: int, final_lines: int, pieces_placed: int) -> None:
        """Called when episode ends.

        Args:
            final_score: Total score for this episode
            final_lines: Total lines cleared
            pieces_placed: Total pieces locked before the episode ended
        """
        self.total_score += final_score
        self.total_lines += final_lines
        self.total_pieces += pieces_placed

    def get_stats(self) -> dict:
        """Get agent statistics."""
        episodes = max(1, self.episode_count)
        return {
            "name": self.name,
            "episodes": self.episode_count,
            "total_score": self.total_score,
            "total_lines": self.total_lines,
            "total_pieces": self.total_pieces,
            "avg_score": self.total_score / episodes,
            "avg_lines": self.total_lines / episodes,
            "avg_pieces": self.total_pieces / episodes,
        }

    def reset_stats(self) -> None:
        """Reset all statistics."""
        self.episode_count = 0
        self.total_score = 0
        self.total_lines = 0
        self.total_pieces = 0

    def __repr__(self) -> str:
        return f"Agent(name='{self.name}', episodes={self.episode_count})"
