"""Typed failures raised by the logic solver."""


class SudokuError(Exception):
    """Base class for solver failures."""


class InvalidInputValue(SudokuError):
    """A supplied cell value is outside 0..9 (0 = blank)."""

    def __init__(self, row: int, col: int, value: int):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(f"Invalid input value at ({row}, {col}): {value}")


class UnsolvableSudoku(SudokuError):
    """A full pass of all rules determined no new cell.

    This means the implemented rules (sole candidate and row/column/box
    reduction) cannot advance the grid any further. It is not a proof that
    the puzzle has no solution: search or advanced techniques may still
    solve it.
    """

    def __init__(self, message: str = "Unsolvable Sudoku", current=None):
        self.current = current  # grid state when the pass stalled, 0 = blank
        super().__init__(message)
