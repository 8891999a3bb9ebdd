"""Headless runner: plays agents through GameSession at simulated speed."""

from dataclasses import asdict, dataclass, field, replace
from typing import List, Optional
import time

from tetris_engine.agent import Agent
from tetris_engine.game import Game, GameConfig
from tetris_engine.session import DEFAULT_TICK_INTERVAL_MS, GameSession
from tetris_engine.types import GameState


@dataclass
class EpisodeStats:
    """Outcome of one game played by an agent."""

    seed: int
    score: int
    level: int
    lines_cleared: int
    pieces_placed: int
    ticks: int
    duration_seconds: float
    final_board: List[int]  # Board.to_list() at the end of the episode
    game_over: bool

    def to_dict(self) -> dict:
        """Everything but the board, for logging."""
        data = asdict(self)
        del data["final_board"]
        return data


@dataclass
class BenchmarkResults:
    agent_name: str
    episodes: List[EpisodeStats] = field(default_factory=list)

    def get_summary(self) -> dict:
        """Average score and best line count over the episodes played."""
        if not self.episodes:
            return {}
        scores = [e.score for e in self.episodes]
        return {
            "agent_name": self.agent_name,
            "num_episodes": len(self.episodes),
            "avg_score": sum(scores) / len(scores),
            "max_lines": max(e.lines_cleared for e in self.episodes),
        }


class Runner:
    """Runs agents against fresh seeded games."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        tick_ms: int = DEFAULT_TICK_INTERVAL_MS,
        verbose: bool = True,
    ):
        """Initialize runner.

        Args:
            config: Game parameters; random_seed is overridden per episode
            tick_ms: Simulated milliseconds per gravity tick
            verbose: Print one line per finished episode
        """
        self.config = config or GameConfig()
        self.tick_ms = tick_ms
        self.verbose = verbose

    def run_episode(
        self, agent: Agent, seed: int, max_ticks: Optional[int] = None
    ) -> EpisodeStats:
        """Play one game.

        Each tick the agent may send one command, then gravity advances by
        tick_ms of simulated time.

        Args:
            agent: Agent to run
            seed: Random seed for the piece sequence
            max_ticks: Maximum ticks to simulate (None = until game over)
        """
        session = GameSession(
            Game(replace(self.config, random_seed=seed)), tick_interval_ms=self.tick_ms
        )
        session.start()
        agent.on_episode_start(seed)

        ticks = 0
        started = time.time()
        while session.running and (max_ticks is None or ticks < max_ticks):
            command = agent.select_command(session.snapshot())
            if command is not None:
                session.handle_command(command)
            session.tick(self.tick_ms)
            ticks += 1

        game = session.game
        stats = EpisodeStats(
            seed=seed,
            score=game.score,
            level=game.level,
            lines_cleared=game.lines_cleared,
            pieces_placed=game.pieces_placed,
            ticks=ticks,
            duration_seconds=time.time() - started,
            final_board=game.board.to_list(),
            game_over=game.state == GameState.GAME_OVER,
        )
        agent.on_episode_end(game.score, game.lines_cleared, game.pieces_placed)

        if self.verbose:
            print(
                f"{agent.name} seed {seed}: {stats.pieces_placed} pieces, "
                f"{stats.lines_cleared} lines, score {stats.score}"
            )
        return stats

    def run_benchmark(
        self,
        agent: Agent,
        num_episodes: int,
        seeds: Optional[List[int]] = None,
        max_ticks: Optional[int] = None,
    ) -> BenchmarkResults:
        """Play num_episodes games, one per seed.

        Args:
            agent: Agent to benchmark
            num_episodes: Number of episodes to run
            seeds: List of seeds (if None, use 0, 1, 2, ...)
            max_ticks: Maximum ticks per episode (None = until game over)

        Raises:
            ValueError: If fewer seeds than episodes are given
        """
        if seeds is None:
            seeds = list(range(num_episodes))
        elif len(seeds) < num_episodes:
            raise ValueError(f"Need {num_episodes} seeds, got {len(seeds)}")

        results = BenchmarkResults(agent_name=agent.name)
        for seed in seeds[:num_episodes]:
            results.episodes.append(self.run_episode(agent, seed, max_ticks))
        return results
