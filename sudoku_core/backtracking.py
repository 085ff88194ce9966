"""Depth-first backtracking search: the solver and the capped solution counter share the same descent."""
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from types_sudoku import DIGITS, Grid

from .solver_core import clone_grid, find_next_empty_cell, get_conflicts, placement_ok, validate_grid

log = logging.getLogger(__name__)

CandidateOrder = Callable[[], Sequence[int]]

UNIQUENESS_LIMIT = 2


def search(grid: Grid, order: Optional[CandidateOrder] = None) -> bool:
    """Fill ``grid`` in place; returns False (grid restored) when no completion exists.

    ``order`` is called once per recursion frame and yields the digits to try at that
    cell. The default tries 1..9 in order.
    """
    cell = find_next_empty_cell(grid)
    if cell is None:
        return True
    row, col = cell
    for digit in (order() if order is not None else DIGITS):
        if placement_ok(grid, row, col, digit):
            grid[row][col] = digit
            if search(grid, order):
                return True
            grid[row][col] = 0
    return False


def _count(grid: Grid, limit: int, found: int = 0) -> int:
    if found >= limit:
        return found
    cell = find_next_empty_cell(grid)
    if cell is None:
        return found + 1
    row, col = cell
    for digit in DIGITS:
        if placement_ok(grid, row, col, digit):
            grid[row][col] = digit
            found = _count(grid, limit, found)
            grid[row][col] = 0
            if found >= limit:
                break
    return found


def solve(grid: Grid, in_place: bool = False) -> tuple[bool, Grid]:
    """Solve ``grid``; returns ``(found, board)``.

    The input is cloned first unless ``in_place`` is set. When no completion exists
    the returned board is left exactly as it came in, so ``(False, board)`` reads as
    "unsolvable from this state", not as an error. A board whose givens already
    clash is unsolvable too.
    """
    validate_grid(grid)
    board = grid if in_place else clone_grid(grid)
    if get_conflicts(board):
        log.debug("board already breaks a row, column or box rule; not searching")
        return False, board
    found = search(board)
    if not found:
        log.debug("no completion exists for the given board")
    return found, board


def count_solutions(grid: Grid, limit: int = UNIQUENESS_LIMIT) -> int:
    """Count completions of ``grid``, stopping as soon as ``limit`` are found.

    Works on a private copy; the caller's grid is never touched. Clashing givens count 0.
    """
    if not 1 <= limit <= UNIQUENESS_LIMIT:
        raise ValueError(f"limit must be 1 or {UNIQUENESS_LIMIT}, got {limit}")
    if get_conflicts(grid):
        return 0
    return _count(clone_grid(grid), limit)


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions(grid) == 1
