"""Logic-only solving: the Sudoku solver instance (four elimination rules, step/solve driver) and a tool-friendly interface for the API and CLI."""

# sudoku_tools.py
# One pass = recompute candidates, then sole candidate, row reduction,
# column reduction, box reduction, in that order. No guessing.

import logging

from types_sudoku import Candidates, Field, Grid, Move

from .errors import UnsolvableSudoku
from .solver_core import (
    SIZE,
    box_options,
    candidates_by_key,
    col_options,
    compute_candidates,
    count_blanks,
    empty_options,
    parse_grid,
    rc_to_key,
    row_options,
    to_field,
    to_grid,
)

log = logging.getLogger(__name__)


class Sudoku:
    """A 9x9 puzzle plus its candidate matrix, advanced by logical deduction only.

    Cells are only ever filled in, never changed. ``step`` runs one pass and
    returns how many cells it determined; ``solve`` repeats passes until the
    grid is complete. Both raise ``UnsolvableSudoku`` when a pass makes no
    progress, leaving the partially solved grid readable through ``field``.
    """

    def __init__(self, initial_field):
        self._field = parse_grid(initial_field)
        self.options = empty_options()
        self.history: list[Move] = []
        self.last_moves: list[Move] = []

    @property
    def field(self) -> Field:
        """Current state, None for undetermined cells."""
        return to_field(self._field)

    def grid(self) -> Grid:
        """Current state with 0 for undetermined cells."""
        return to_grid(self._field)

    def candidates(self) -> Candidates:
        return candidates_by_key(self._field, self.options)

    def is_solved(self) -> bool:
        return count_blanks(self._field) == 0

    def solve(self) -> int:
        """Run passes until solved. Returns the number of productive passes."""
        passes = 0
        while self.step():
            passes += 1
        log.info("Solved after %d passes", passes)
        return passes

    def step(self) -> int:
        """Run one pass. Returns the number of cells determined (0 if already solved)."""
        self.last_moves = []
        if self.is_solved():
            return 0

        start = count_blanks(self._field)
        self.update_options()
        self.apply_sole_candidate()
        self.apply_row_reduction()
        self.apply_column_reduction()
        self.apply_box_reduction()
        end = count_blanks(self._field)

        if start == end:
            log.warning("No progress with %d cells undetermined", end)
            raise UnsolvableSudoku(current=self.grid())
        return start - end

    def update_options(self):
        self.options = compute_candidates(self._field)

    def apply_sole_candidate(self):
        """A cell with exactly one candidate takes that value."""
        log.debug("apply_sole_candidate")
        for r in range(SIZE):
            for c in range(SIZE):
                if len(self.options[r][c]) == 1:
                    self.determine(r, c, self.options[r][c][0], "sole_candidate")

    def apply_row_reduction(self):
        """A candidate seen only once among a row's open candidates is placed there.

        The multiset is gathered per cell, so cells of the row already
        determined by this rule no longer count.
        """
        log.debug("apply_row_reduction")
        for r in range(SIZE):
            for c in range(SIZE):
                if self._field[r, c]:
                    continue
                line = row_options(self._field, self.options, r)
                self._place_unique(r, c, line, "row_reduction")

    def apply_column_reduction(self):
        """Same as row reduction, over each column's open candidates."""
        log.debug("apply_column_reduction")
        for c in range(SIZE):
            for r in range(SIZE):
                if self._field[r, c]:
                    continue
                line = col_options(self._field, self.options, c)
                self._place_unique(r, c, line, "column_reduction")

    def apply_box_reduction(self):
        """Same as row reduction, over the open candidates of the cell's box.

        Cells are visited row-major.
        """
        log.debug("apply_box_reduction")
        for r in range(SIZE):
            for c in range(SIZE):
                if self._field[r, c]:
                    continue
                house = box_options(self._field, self.options, r, c)
                self._place_unique(r, c, house, "box_reduction")

    def _place_unique(self, r: int, c: int, house: list[int], technique: str):
        # first candidate (ascending) that occurs once in the house wins
        for option in self.options[r][c]:
            if house.count(option) == 1:
                self.determine(r, c, option, technique)
                break

    def determine(self, r: int, c: int, value: int, technique: str = "manual"):
        """Fix a cell's value and clear its candidates. Other cells are left as they are."""
        log.debug("Determined (%d, %d) = %d %s", r, c, value, self.options[r][c])
        move: Move = {
            "index": len(self.history) + 1,
            "technique": technique,
            "type": "placement",
            "cell": rc_to_key(r, c),
            "row": r,
            "col": c,
            "digit": int(value),
            "candidates": list(self.options[r][c]),
        }
        self._field[r, c] = value
        self.options[r][c] = []
        self.history.append(move)
        self.last_moves.append(move)


def compute_candidates_tool(current: Grid) -> dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    sudoku = Sudoku(current)
    sudoku.update_options()
    return {"candidates": sudoku.candidates()}


def step_tool(current: Grid) -> dict:
    """Run a single pass on `current`."""
    sudoku = Sudoku(current)
    progress = sudoku.step()
    return {
        "progress": progress,
        "solved": sudoku.is_solved(),
        "current": sudoku.grid(),
        "moves": sudoku.last_moves,
    }


def solve_tool(current: Grid) -> dict:
    """Solve `current` to completion; raises UnsolvableSudoku when the rules stall."""
    sudoku = Sudoku(current)
    steps = sudoku.solve()
    return {
        "solved": True,
        "steps": steps,
        "current": sudoku.grid(),
        "moves": sudoku.history,
    }
