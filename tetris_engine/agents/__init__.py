"""Collection of automated players."""

from tetris_engine.agents.random_agent import RandomAgent

__all__ = ["RandomAgent"]
