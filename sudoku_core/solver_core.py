"""Core Sudoku utilities shared by the solver, generator and carver: input validation, index math, peers, and the constraint checker."""

# solver_core.py
# Grid is 9x9 list of lists of ints (0..9). 0 = blank.
# Cells are 0-based (row, col) pairs.
from __future__ import annotations

from typing import Iterator, Optional

import numpy as np

from types_sudoku import BOX, DIGITS, SIZE, Cell, Grid


class InvalidGridError(ValueError):
    """Raised when a grid, cell coordinate or digit breaks the 9x9 / 0..9 contract."""


def validate_grid(grid: Grid) -> None:
    """Fail fast unless ``grid`` is a 9x9 array of integers in [0, 9]."""
    try:
        arr = np.asarray(grid)
    except ValueError as exc:  # ragged rows
        raise InvalidGridError(f"grid must be 9x9, got ragged rows: {exc}") from exc
    if arr.shape != (SIZE, SIZE):
        raise InvalidGridError(f"grid must be 9x9, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidGridError(f"grid cells must be integers, got dtype {arr.dtype}")
    lo, hi = int(arr.min()), int(arr.max())
    if lo < 0 or hi > SIZE:
        raise InvalidGridError(f"grid cells must be in [0, 9], found values in [{lo}, {hi}]")


def validate_cell(row: int, col: int) -> None:
    for name, value in (("row", row), ("col", col)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidGridError(f"{name} must be an integer, got {value!r}")
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise InvalidGridError(f"cell ({row}, {col}) is outside the 9x9 grid")


def validate_digit(digit: int) -> None:
    if isinstance(digit, bool) or not isinstance(digit, (int, np.integer)):
        raise InvalidGridError(f"digit must be an integer, got {digit!r}")
    if not 0 <= digit <= SIZE:
        raise InvalidGridError(f"digit must be in [0, 9], got {digit}")


def clone_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def box_origin(row: int, col: int) -> Cell:
    return (row // BOX) * BOX, (col // BOX) * BOX


def peers(row: int, col: int) -> set[Cell]:
    """Return the set of peer coordinates for a given cell (same row, column, and 3x3 box)."""
    ps = {(row, c) for c in range(SIZE) if c != col}
    ps |= {(r, col) for r in range(SIZE) if r != row}
    r0, c0 = box_origin(row, col)
    for r in range(r0, r0 + BOX):
        for c in range(c0, c0 + BOX):
            if (r, c) != (row, col):
                ps.add((r, c))
    return ps


def iter_cells() -> Iterator[Cell]:
    for r in range(SIZE):
        for c in range(SIZE):
            yield r, c


def placement_ok(grid: Grid, row: int, col: int, digit: int) -> bool:
    """Unchecked peer test used in the search hot path; see ``is_valid_placement``."""
    if digit == 0:
        return True
    for c in range(SIZE):
        if c != col and grid[row][c] == digit:
            return False
    for r in range(SIZE):
        if r != row and grid[r][col] == digit:
            return False
    r0, c0 = box_origin(row, col)
    for r in range(r0, r0 + BOX):
        for c in range(c0, c0 + BOX):
            if (r != row or c != col) and grid[r][c] == digit:
                return False
    return True


def is_valid_placement(grid: Grid, row: int, col: int, digit: int) -> bool:
    """True when ``digit`` at (row, col) clashes with none of the cell's 20 peers.

    Only the peers are inspected, never the cell itself or the rest of the grid,
    so this is a local check. A digit of 0 (empty) is always valid.
    """
    validate_grid(grid)
    validate_cell(row, col)
    validate_digit(digit)
    return placement_ok(grid, row, col, digit)


def get_conflicts(grid: Grid) -> set[Cell]:
    """All non-empty cells whose current value repeats within their row, column or box."""
    validate_grid(grid)
    conflicts: set[Cell] = set()
    for r, c in iter_cells():
        value = grid[r][c]
        if value != 0 and not placement_ok(grid, r, c, value):
            conflicts.add((r, c))
    return conflicts


def find_next_empty_cell(grid: Grid) -> Optional[Cell]:
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return r, c
    return None


def _units(arr: np.ndarray) -> np.ndarray:
    # rows, then columns, then boxes; 27 units of 9 cells each
    boxes = arr.reshape(BOX, BOX, BOX, BOX).transpose(0, 2, 1, 3).reshape(SIZE, SIZE)
    return np.concatenate([arr, arr.T, boxes])


def is_solved_grid(grid: Grid) -> bool:
    """True when every row, column and box is a permutation of 1..9."""
    validate_grid(grid)
    units = np.sort(_units(np.asarray(grid)), axis=1)
    return bool(np.all(units == np.asarray(DIGITS)))
