"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, SIZE, BOX_SIZE, CELLS, EMPTY, DIGITS
from .validator import is_valid, is_valid_placement, is_valid_board, validate_solution

__all__ = [
    "SudokuBoard",
    "SIZE",
    "BOX_SIZE",
    "CELLS",
    "EMPTY",
    "DIGITS",
    "is_valid",
    "is_valid_placement",
    "is_valid_board",
    "validate_solution",
]
