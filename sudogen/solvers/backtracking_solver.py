"""Row-major backtracking search: randomized fill and bounded solution counting."""

from __future__ import annotations
import logging
import random
from typing import List, Optional

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, SIZE, CELLS, EMPTY, DIGITS
from ..core.validator import is_valid
from ..errors import SearchBudgetExceeded

log = logging.getLogger(__name__)


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search over the cells in row-major order.

    The solver owns a private working grid (a nested list copied from the
    board it is given). Each attempt places a digit, recurses into the
    rest of the grid and clears the cell again if the branch fails, so
    recursion depth never exceeds 81.

    Two searches share this structure:

    - ``fill`` stops at the first completion. With an ``rng`` the digits
      at every cell are tried in a freshly shuffled order, which is what
      makes generated solutions vary between calls.
    - ``count_solutions`` keeps searching after each completion and stops
      as soon as ``limit`` completions have been found.
    """

    name = "DFS+Backtracking"

    def __init__(self, rng: Optional[random.Random] = None, node_budget: Optional[int] = None):
        """
        Initialize the solver.

        Args:
            rng: Random source for digit ordering in ``fill``. If None,
                 digits are tried in ascending order.
            node_budget: Maximum number of search nodes per call. If
                         exceeded, SearchBudgetExceeded is raised.
        """
        super().__init__()
        self.rng = rng
        self.node_budget = node_budget
        self._grid: List[List[int]] = []
        self._limit = 2

    def fill(self, board: SudokuBoard) -> bool:
        """
        Complete ``board`` in place.

        The board is only written to when a completion is found; on
        failure it is left exactly as it was.

        Returns:
            True if the board was completed.
        """
        self._start(board)
        if not self._fill(0):
            return False
        board.grid[:, :] = self._grid
        return True

    def count_solutions(self, board: SudokuBoard, limit: int = 2) -> int:
        """
        Count completions of ``board``, stopping once ``limit`` are found.

        The board is never modified. A board whose clues already conflict
        has no completions.

        Returns:
            Number of completions found, at most ``limit``.
        """
        self._start(board)
        self._limit = limit
        if board.is_valid():
            self._count(0)
        return self.stats.solutions_found

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        if not board.is_valid():
            return None
        if self.fill(board):
            return board
        return None

    def _start(self, board: SudokuBoard) -> None:
        self.reset_stats()
        self._grid = board.to_list()

    def _next_empty(self, start: int) -> int:
        """Index of the first empty cell at or after ``start``, or CELLS."""
        grid = self._grid
        for index in range(start, CELLS):
            if grid[index // SIZE][index % SIZE] == EMPTY:
                return index
        return CELLS

    def _visit(self) -> None:
        self.stats.nodes_explored += 1
        if self.node_budget is not None and self.stats.nodes_explored > self.node_budget:
            log.debug("Search budget of %d nodes exhausted", self.node_budget)
            raise SearchBudgetExceeded(self.node_budget)

    def _digit_order(self) -> List[int]:
        digits = list(DIGITS)
        if self.rng is not None:
            self.rng.shuffle(digits)
        return digits

    def _fill(self, start: int) -> bool:
        index = self._next_empty(start)
        if index == CELLS:
            return True

        self._visit()
        row, col = divmod(index, SIZE)
        for digit in self._digit_order():
            if is_valid(self._grid, row, col, digit):
                self._grid[row][col] = digit
                if self._fill(index + 1):
                    return True
                self._grid[row][col] = EMPTY

        self.stats.backtracks += 1
        return False

    def _count(self, start: int) -> None:
        if self.stats.solutions_found >= self._limit:
            return

        index = self._next_empty(start)
        if index == CELLS:
            self.stats.solutions_found += 1
            return

        self._visit()
        row, col = divmod(index, SIZE)
        for digit in DIGITS:
            if self.stats.solutions_found >= self._limit:
                return
            if is_valid(self._grid, row, col, digit):
                self._grid[row][col] = digit
                self._count(index + 1)
                self._grid[row][col] = EMPTY


def count_solutions(board: SudokuBoard, limit: int = 2, node_budget: Optional[int] = None) -> int:
    """
    Count the solutions of a puzzle, up to ``limit``.

    With the default limit the result is 0, 1 or 2, where 2 means
    "two or more".
    """
    return BacktrackingSolver(node_budget=node_budget).count_solutions(board, limit)


def has_unique_solution(board: SudokuBoard) -> bool:
    """Check if a puzzle has exactly one solution."""
    return count_solutions(board, limit=2) == 1
