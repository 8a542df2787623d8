"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import Sequence, TYPE_CHECKING

from .board import BOX_SIZE, SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid(grid: Sequence[Sequence[int]], row: int, col: int, digit: int) -> bool:
    """
    Check whether ``digit`` may stand at (row, col).

    The digit must not occur elsewhere in the row, the column or the
    3x3 box of the cell. The cell itself is ignored and the position is
    not range-checked.

    Args:
        grid: Any 9x9 grid indexable as ``grid[r][c]``.
        row: Row index.
        col: Column index.
        digit: Digit to check (1-9).

    Returns:
        True if the placement creates no conflict.
    """
    for i in range(SIZE):
        if i != col and grid[row][i] == digit:
            return False
        if i != row and grid[i][col] == digit:
            return False

    box_row = row - row % BOX_SIZE
    box_col = col - col % BOX_SIZE
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if grid[r][c] == digit and (r != row or c != col):
                return False

    return True


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """Board-level placement check; values outside 1-9 are never valid."""
    if value < 1 or value > SIZE:
        return False
    return is_valid(board.grid, row, col, value)


def is_valid_board(board: SudokuBoard) -> bool:
    """Check if the entire board state is valid (no conflicts)."""
    return board.is_valid()


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, conflict-free and keeps every clue.
    """
    clues = puzzle.grid != 0
    if (puzzle.grid[clues] != solution.grid[clues]).any():
        return False
    return solution.is_solved()
