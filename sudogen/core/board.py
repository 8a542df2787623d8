"""Fixed-size 9x9 Sudoku board representation."""

from __future__ import annotations
import numbers
import numpy as np
from typing import List, Tuple, Optional, Sequence

SIZE = 9
BOX_SIZE = 3
CELLS = SIZE * SIZE
EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))


class SudokuBoard:
    """
    A standard 9x9 Sudoku grid.

    Cells hold 0 (empty) or a digit 1-9. The grid is a numpy array of
    fixed shape (9, 9), so every board always has exactly 81 cells.
    Boards handed out by the generator are frozen; use ``copy()`` to get
    a writable board.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            if not np.issubdtype(grid.dtype, np.integer):
                raise ValueError(f"Grid values must be integers, got dtype {grid.dtype}")
            if grid.min() < EMPTY or grid.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.astype(np.int8)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int8)

    def copy(self) -> SudokuBoard:
        """Create a writable deep copy of the board."""
        return SudokuBoard(self.grid.copy())

    def freeze(self) -> SudokuBoard:
        """Make the board read-only in place and return it."""
        self.grid.flags.writeable = False
        return self

    @property
    def is_frozen(self) -> bool:
        return not self.grid.flags.writeable

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"Value must be an integer, got {value!r}")
        if value < EMPTY or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [
            self.get_box(box_row, box_col)
            for box_row in range(0, SIZE, BOX_SIZE)
            for box_col in range(0, SIZE, BOX_SIZE)
        ]
        for unit in units:
            non_zero = unit[unit != EMPTY]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[List[int]]:
        """Return the grid as a fresh nested list of ints."""
        return self.grid.tolist()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        s = s.strip()
        if len(s) != CELLS:
            raise ValueError(f"String length must be {CELLS}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(EMPTY)
            elif c in '123456789':
                values.append(int(c))
            else:
                raise ValueError(f"Invalid cell character {c!r}")
        return cls(np.array(values, dtype=np.int8).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.asarray(data))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()}, frozen={self.is_frozen})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
