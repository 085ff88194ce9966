# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "types_sudoku", "sudoku_core" and "apps" import without an install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

REFERENCE = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def reference_grid():
    return [row[:] for row in REFERENCE]


@pytest.fixture
def empty():
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def rng():
    return random.Random(20240611)
