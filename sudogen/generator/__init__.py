"""Generator module for creating Sudoku solutions and puzzles."""

from .generator import (
    SudokuGenerator,
    Difficulty,
    GenerationStats,
    DEFAULT_REMOVALS,
    DEFAULT_NODE_BUDGET,
)

__all__ = [
    "SudokuGenerator",
    "Difficulty",
    "GenerationStats",
    "DEFAULT_REMOVALS",
    "DEFAULT_NODE_BUDGET",
]
