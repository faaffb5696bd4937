# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver", "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FIELD_1 = [
    [0, 0, 0, 0, 6, 0, 5, 0, 0],
    [0, 0, 2, 0, 0, 0, 0, 0, 4],
    [0, 1, 0, 3, 0, 0, 0, 9, 0],
    [0, 3, 4, 5, 0, 0, 0, 0, 6],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [2, 0, 0, 0, 0, 9, 8, 1, 0],
    [0, 5, 0, 0, 0, 8, 0, 3, 0],
    [3, 0, 0, 0, 0, 0, 9, 0, 0],
    [0, 0, 6, 0, 1, 0, 0, 0, 0],
]

# A valid solution: rows are shifted by 3 within a band and by 1 between bands.
SOLUTION = [[(3 * (r % 3) + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


@pytest.fixture
def field_1():
    return [row[:] for row in FIELD_1]


@pytest.fixture
def solution():
    return [row[:] for row in SOLUTION]


@pytest.fixture
def blank_box_puzzle():
    """SOLUTION with the top-left box cleared; every blank is a sole candidate."""
    grid = [row[:] for row in SOLUTION]
    for r in range(3):
        for c in range(3):
            grid[r][c] = 0
    return grid


@pytest.fixture
def empty_grid():
    return [[0] * 9 for _ in range(9)]
