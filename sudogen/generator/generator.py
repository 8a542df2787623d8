"""Sudoku solution and unique-puzzle generator."""

from __future__ import annotations
import logging
import numbers
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple, Optional, Dict, Any, Union

from tqdm import tqdm

from ..core.board import SudokuBoard, SIZE, CELLS
from ..errors import InvalidRemovalCount, SearchBudgetExceeded, SearchInvariantError
from ..solvers.backtracking_solver import BacktrackingSolver

log = logging.getLogger(__name__)

DEFAULT_REMOVALS = 40
DEFAULT_NODE_BUDGET = 200_000

Position = Tuple[int, int]
RemovalHook = Callable[[SudokuBoard, Position], None]


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def clue_range(self) -> Tuple[int, int]:
        """Get the range of clues for this difficulty (min, max)."""
        ranges = {
            Difficulty.EASY: (36, 45),
            Difficulty.MEDIUM: (28, 35),
            Difficulty.HARD: (22, 27),
            Difficulty.EXPERT: (17, 21),    # 17 is the minimum for a unique solution
        }
        return ranges[self]

    @property
    def removal_range(self) -> Tuple[int, int]:
        """Range of removals to request for this difficulty (min, max)."""
        min_clues, max_clues = self.clue_range
        return CELLS - max_clues, CELLS - min_clues


@dataclass
class GenerationStats:
    """Statistics from the last puzzle generation."""
    requested_removals: int = 0
    achieved_removals: int = 0
    counter_calls: int = 0
    rejected: int = 0
    budget_exhausted: int = 0
    nodes_explored: int = 0
    time_seconds: float = 0.0

    @property
    def saturated(self) -> bool:
        """True if fewer cells were cleared than requested."""
        return self.achieved_removals < self.requested_removals

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requested_removals": self.requested_removals,
            "achieved_removals": self.achieved_removals,
            "counter_calls": self.counter_calls,
            "rejected": self.rejected,
            "budget_exhausted": self.budget_exhausted,
            "nodes_explored": self.nodes_explored,
            "time_seconds": self.time_seconds,
            "saturated": self.saturated,
        }


def check_removals(removals) -> int:
    """Return ``removals`` as an int, or raise InvalidRemovalCount."""
    if isinstance(removals, bool) or not isinstance(removals, numbers.Integral):
        raise InvalidRemovalCount(removals)
    if removals < 0:
        raise InvalidRemovalCount(removals)
    return int(removals)


class SudokuGenerator:
    """
    Generator for complete Sudoku solutions and uniquely solvable puzzles.

    Algorithm:
    1. Fill an empty grid by randomized row-major backtracking
    2. Visit all 81 cells once in shuffled order, clearing each one
    3. Keep a clearing only if the puzzle still has exactly one solution

    A cell whose clearing is rejected is never retried, so the puzzle may
    end up with fewer empty cells than requested.

    All randomness comes from ``self.rng``; two generators built with the
    same seed produce the same solutions and puzzles.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        node_budget: Optional[int] = DEFAULT_NODE_BUDGET,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if ``rng`` is given.
            rng: Random source to draw all shuffles from.
            node_budget: Search nodes allowed per uniqueness check while
                         removing clues. A check that runs out counts as
                         "not unique". None disables the limit.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.node_budget = node_budget
        self.stats = GenerationStats()

    def generate_solution(self) -> SudokuBoard:
        """
        Generate a complete, valid Sudoku grid.

        Returns:
            A frozen, fully solved SudokuBoard.
        """
        board = SudokuBoard()
        if not BacktrackingSolver(rng=self.rng).fill(board):
            raise SearchInvariantError("backtracking failed to complete an empty grid")
        return board.freeze()

    def generate_puzzle(
        self,
        removals: int = DEFAULT_REMOVALS,
        on_removal: Optional[RemovalHook] = None,
    ) -> SudokuBoard:
        """
        Generate a puzzle with up to ``removals`` empty cells and a unique solution.

        Args:
            removals: Number of clues to try to clear (>= 0). Values above
                      what uniqueness allows saturate silently.
            on_removal: Called with the puzzle-so-far and the cleared
                        position after every accepted removal.

        Returns:
            A frozen SudokuBoard with empty cells as 0.
        """
        puzzle, _ = self.generate_with_solution(removals, on_removal=on_removal)
        return puzzle

    def generate_with_solution(
        self,
        removals: int = DEFAULT_REMOVALS,
        on_removal: Optional[RemovalHook] = None,
    ) -> Tuple[SudokuBoard, SudokuBoard]:
        """
        Generate a puzzle along with its solution.

        Returns:
            Tuple of (puzzle, solution) SudokuBoards, both frozen.
        """
        removals = check_removals(removals)
        start_time = time.perf_counter()
        self.stats = GenerationStats(requested_removals=removals)

        solution = self.generate_solution()
        puzzle = self._remove_cells(solution, removals, on_removal)

        self.stats.time_seconds = time.perf_counter() - start_time
        log.info(
            "Generated puzzle: %d/%d removals, %d clues, %d uniqueness checks in %.3fs",
            self.stats.achieved_removals, removals, puzzle.count_filled(),
            self.stats.counter_calls, self.stats.time_seconds,
        )
        return puzzle, solution

    def generate(self, difficulty: Difficulty = Difficulty.MEDIUM) -> SudokuBoard:
        """
        Generate a puzzle with the specified difficulty.

        The removal target is drawn from the difficulty's removal range.
        """
        low, high = difficulty.removal_range
        return self.generate_puzzle(self.rng.randint(low, high))

    def generate_batch(
        self,
        count: int,
        removals: Union[int, Difficulty] = DEFAULT_REMOVALS,
        show_progress: bool = False,
    ) -> List[SudokuBoard]:
        """
        Generate multiple puzzles.

        Args:
            count: Number of puzzles to generate.
            removals: Removal target, or a Difficulty to draw targets from.
            show_progress: Display a progress bar.

        Returns:
            List of SudokuBoard puzzles.
        """
        puzzles = []
        for _ in tqdm(range(count), desc="Generating", disable=not show_progress):
            if isinstance(removals, Difficulty):
                puzzles.append(self.generate(removals))
            else:
                puzzles.append(self.generate_puzzle(removals))
        return puzzles

    def _remove_cells(
        self,
        solution: SudokuBoard,
        removals: int,
        on_removal: Optional[RemovalHook],
    ) -> SudokuBoard:
        """Clear cells of a copy of ``solution`` while the solution stays unique."""
        puzzle = solution.copy()

        positions = [(row, col) for row in range(SIZE) for col in range(SIZE)]
        self.rng.shuffle(positions)

        remaining = removals
        for row, col in positions:
            if remaining == 0:
                break

            original_value = puzzle.get(row, col)
            puzzle.clear(row, col)

            if self._is_unique(puzzle):
                remaining -= 1
                self.stats.achieved_removals += 1
                log.debug("Cleared (%d, %d), %d removals left", row, col, remaining)
                if on_removal is not None:
                    on_removal(puzzle, (row, col))
            else:
                self.stats.rejected += 1
                puzzle.set(row, col, original_value)

        return puzzle.freeze()

    def _is_unique(self, puzzle: SudokuBoard) -> bool:
        counter = BacktrackingSolver(node_budget=self.node_budget)
        self.stats.counter_calls += 1
        try:
            return counter.count_solutions(puzzle) == 1
        except SearchBudgetExceeded:
            self.stats.budget_exhausted += 1
            log.debug("Uniqueness check ran out of budget; keeping the clue")
            return False
        finally:
            self.stats.nodes_explored += counter.stats.nodes_explored
