"""Puzzle carving: strip digits from a solved grid one cell at a time, keeping only removals that leave exactly one solution."""
from __future__ import annotations

import logging
import random
from typing import Mapping, Optional

from types_sudoku import SIZE, Difficulty, Grid, Puzzle

from .backtracking import count_solutions
from .config import DEFAULT_CONFIG
from .generator import generate_solved_grid, shuffled
from .solver_core import InvalidGridError, clone_grid, is_solved_grid, iter_cells

log = logging.getLogger(__name__)


class UnknownDifficultyError(ValueError):
    pass


def removals_for(difficulty: str, table: Optional[Mapping[str, int]] = None) -> int:
    table = table if table is not None else DEFAULT_CONFIG["difficulties"]
    try:
        return table[difficulty]
    except KeyError:
        raise UnknownDifficultyError(
            f"unknown difficulty {difficulty!r}; expected one of {sorted(table)}"
        ) from None


def carve(solved_grid: Grid, target_removals: int, rng: Optional[random.Random] = None) -> tuple[Grid, Grid]:
    """Return ``(puzzle, solution)`` where ``puzzle`` has exactly one completion.

    Cells are visited in random order. Each one is blanked and the counter is rerun;
    the blank is kept only when the count is exactly 1, otherwise the digit goes back.
    Stops after ``target_removals`` kept blanks or when all 81 cells have been tried,
    so fewer cells may be removed than requested.
    """
    if not is_solved_grid(solved_grid):
        raise InvalidGridError("carve needs a fully solved, rule-valid grid")
    if isinstance(target_removals, bool) or not isinstance(target_removals, int) or not 0 <= target_removals <= SIZE * SIZE:
        raise InvalidGridError(f"target_removals must be an integer in [0, 81], got {target_removals!r}")
    rng = rng if rng is not None else random.Random()

    solution = clone_grid(solved_grid)
    puzzle = clone_grid(solved_grid)
    removed = 0
    tried = 0
    for row, col in shuffled(list(iter_cells()), rng):
        if removed >= target_removals:
            break
        tried += 1
        value = puzzle[row][col]
        puzzle[row][col] = 0
        if count_solutions(puzzle) == 1:
            removed += 1
        else:
            puzzle[row][col] = value

    if removed < target_removals:
        log.info("carver stopped at %d of %d removals; no other cell keeps the solution unique",
                 removed, target_removals)
    log.debug("carved %d cells after trying %d", removed, tried)
    return puzzle, solution


def generate_puzzle(
    difficulty: Difficulty = "medium",
    rng: Optional[random.Random] = None,
    removals: Optional[Mapping[str, int]] = None,
) -> Puzzle:
    """Generate a uniquely solvable puzzle for ``difficulty`` (easy / medium / hard).

    ``removals`` overrides the tag -> removal-count table, e.g. from ``load_config()``.
    """
    target = removals_for(difficulty, removals)
    rng = rng if rng is not None else random.Random()
    puzzle, solution = carve(generate_solved_grid(rng), target, rng)
    removed = sum(1 for row in puzzle for v in row if v == 0)
    log.info("generated %s puzzle: %d/%d cells removed", difficulty, removed, target)
    return Puzzle.from_grids(puzzle, solution, difficulty=difficulty, removed=removed)
