#!/usr/bin/env python3
"""Demo script to run the random agent headlessly, or watch a live session."""

import asyncio
import logging
import sys

from tetris_engine.agents import RandomAgent
from tetris_engine.runner import Runner
from tetris_engine.session import GameSession

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def watch(ticks: int) -> None:
    """Run the real-time gravity loop with nobody at the controls."""
    session = GameSession(tick_interval_ms=100)
    session.start()
    await session.run(max_ticks=ticks)
    snap = session.snapshot()
    logger.info("Stopped in state %s with score %d", snap.state.value, snap.score)


def main():
    """Run agent demos."""
    print("Falling-block engine demo")
    print("=" * 60)

    if len(sys.argv) > 1 and sys.argv[1] == "watch":
        asyncio.run(watch(ticks=50))
        return

    runner = Runner(verbose=True)
    results = runner.run_benchmark(
        agent=RandomAgent(seed=42),
        num_episodes=5,
        max_ticks=5000,
    )
    summary = results.get_summary()
    print(f"\nRandom agent summary ({summary['num_episodes']} episodes):")
    print(f"  Avg score: {summary['avg_score']:.1f}")
    print(f"  Max lines cleared: {summary['max_lines']}")


if __name__ == "__main__":
    main()
