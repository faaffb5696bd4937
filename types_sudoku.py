# types_sudoku.py
from __future__ import annotations

from typing import Optional, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Field = list[list[Optional[int]]]
"""A 9x9 solver state as rows of determined digits (None = undetermined)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Move(TypedDict, total=False):
    """A single determination made by one of the elimination rules."""

    index: int  # 1-based order in the solve history
    technique: str  # 'sole_candidate', 'row_reduction', 'column_reduction', 'box_reduction'
    type: str  # always 'placement'
    cell: str  # target cell key (e.g., 'r2c7')
    row: int  # 0-based row
    col: int  # 0-based column
    digit: int  # the digit placed
    candidates: list[int]  # the cell's candidates at the moment it was determined
