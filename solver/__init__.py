"""Logic-only 9x9 Sudoku solver (sole candidate + row/column/box reduction)."""

from .errors import InvalidInputValue, SudokuError, UnsolvableSudoku
from .sudoku_tools import Sudoku, compute_candidates_tool, solve_tool, step_tool

__all__ = [
    "InvalidInputValue",
    "Sudoku",
    "SudokuError",
    "UnsolvableSudoku",
    "compute_candidates_tool",
    "solve_tool",
    "step_tool",
]
