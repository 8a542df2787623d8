"""Exceptions raised by the Sudoku generator."""


class SudokuError(Exception):
    """Base class for generator errors."""


class InvalidRemovalCount(SudokuError, ValueError):
    """The requested number of removals is negative or not a whole number."""

    def __init__(self, removals):
        super().__init__(f"removals must be a non-negative integer, got {removals!r}")
        self.removals = removals


class SearchInvariantError(SudokuError, RuntimeError):
    """Backtracking failed where a completion must exist.

    This points at a defect in the constraint check or the scan order and
    is never recovered from.
    """


class SearchBudgetExceeded(SudokuError):
    """A search visited more nodes than its budget allows."""

    def __init__(self, budget: int):
        super().__init__(f"search exceeded its budget of {budget} nodes")
        self.budget = budget
