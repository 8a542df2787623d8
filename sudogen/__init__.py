"""Sudoku solution generator and unique-puzzle builder."""

import random
from typing import Optional

from .core import SudokuBoard, is_valid, is_valid_placement, validate_solution
from .errors import SudokuError, InvalidRemovalCount, SearchInvariantError, SearchBudgetExceeded
from .generator import SudokuGenerator, Difficulty, DEFAULT_REMOVALS
from .solvers import BacktrackingSolver, count_solutions, has_unique_solution

__version__ = "1.0.0"


def generate_solution(rng: Optional[random.Random] = None) -> SudokuBoard:
    """Generate a complete, valid 9x9 grid."""
    return SudokuGenerator(rng=rng).generate_solution()


def generate_puzzle(removals: int = DEFAULT_REMOVALS, rng: Optional[random.Random] = None) -> SudokuBoard:
    """Generate a puzzle with up to ``removals`` empty cells and exactly one solution."""
    return SudokuGenerator(rng=rng).generate_puzzle(removals)


__all__ = [
    "SudokuBoard",
    "SudokuGenerator",
    "Difficulty",
    "BacktrackingSolver",
    "SudokuError",
    "InvalidRemovalCount",
    "SearchInvariantError",
    "SearchBudgetExceeded",
    "generate_solution",
    "generate_puzzle",
    "count_solutions",
    "has_unique_solution",
    "is_valid",
    "is_valid_placement",
    "validate_solution",
]
