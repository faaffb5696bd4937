"""Core Sudoku utilities used by the elimination rules: grid parsing, house readers, and candidate computation."""

# solver_core.py
# - grid construction & validation (0 = blank, 1..9 = given)
# - determined values per row / column / box
# - candidate computation (full recompute, ascending order)
# - open-candidate multisets per row / column / box
# Field is a 9x9 numpy uint8 array; 0 = undetermined. Indices are 0-based,
# cell keys ('r1c1') are 1-based like the rest of the tool layer.

import numpy as np

from types_sudoku import Candidates, Field, Grid

from .errors import InvalidInputValue

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)

Cell = tuple[int, int]  # (row, col) 0-based
Options = list[list[list[int]]]


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def box_origin(r: int, c: int) -> Cell:
    return (r // BOX * BOX, c // BOX * BOX)


def parse_grid(initial) -> np.ndarray:
    """Build a field from a 9x9 matrix of ints, rejecting values outside 0..9.

    The first offending cell in row-major order is reported.
    """
    # object dtype keeps ints too large for int64 intact
    arr = np.asarray(initial, dtype=object)
    if arr.shape != (SIZE, SIZE):
        raise ValueError(f"expected a {SIZE}x{SIZE} grid, got shape {arr.shape}")
    for (r, c), v in np.ndenumerate(arr):
        if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
            raise ValueError(f"grid value at ({r}, {c}) is not an integer: {v!r}")
        if not 0 <= v <= SIZE:
            raise InvalidInputValue(r, c, int(v))
    return arr.astype(np.uint8)


def empty_options() -> Options:
    return [[[] for _ in range(SIZE)] for _ in range(SIZE)]


def to_field(field: np.ndarray) -> Field:
    return [[int(v) if v else None for v in row] for row in field.tolist()]


def to_grid(field: np.ndarray) -> Grid:
    return [[int(v) for v in row] for row in field.tolist()]


def count_blanks(field: np.ndarray) -> int:
    return int(np.count_nonzero(field == 0))


def row_values(field: np.ndarray, r: int) -> set:
    return set(field[r, :].tolist()) - {0}


def col_values(field: np.ndarray, c: int) -> set:
    return set(field[:, c].tolist()) - {0}


def box_values(field: np.ndarray, r: int, c: int) -> set:
    r0, c0 = box_origin(r, c)
    return set(field[r0 : r0 + BOX, c0 : c0 + BOX].ravel().tolist()) - {0}


def compute_candidates(field: np.ndarray) -> Options:
    """Recompute every cell's candidates from the determined values alone.

    Determined cells get an empty list. Lists are ascending.
    """
    options = empty_options()
    for r in range(SIZE):
        for c in range(SIZE):
            if field[r, c]:
                continue
            used = row_values(field, r) | col_values(field, c) | box_values(field, r, c)
            options[r][c] = [d for d in DIGITS if d not in used]
    return options


def candidates_by_key(field: np.ndarray, options: Options) -> Candidates:
    """Keyed view of the undetermined cells' candidates, e.g. {'r2c7': [1, 3, 6, 7]}."""
    return {
        rc_to_key(r, c): list(options[r][c])
        for r in range(SIZE)
        for c in range(SIZE)
        if not field[r, c]
    }


def row_options(field: np.ndarray, options: Options, r: int) -> list[int]:
    out = []
    for c in range(SIZE):
        if not field[r, c]:
            out.extend(options[r][c])
    return out


def col_options(field: np.ndarray, options: Options, c: int) -> list[int]:
    out = []
    for r in range(SIZE):
        if not field[r, c]:
            out.extend(options[r][c])
    return out


def box_options(field: np.ndarray, options: Options, r: int, c: int) -> list[int]:
    r0, c0 = box_origin(r, c)
    out = []
    for rr in range(r0, r0 + BOX):
        for cc in range(c0, c0 + BOX):
            if not field[rr, cc]:
                out.extend(options[rr][cc])
    return out
