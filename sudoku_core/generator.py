"""Random solved-grid generation: the backtracking search with a freshly shuffled candidate list in every frame."""
from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, TypeVar

from types_sudoku import DIGITS, Grid

from .backtracking import search
from .solver_core import empty_grid

log = logging.getLogger(__name__)

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    # random.Random.shuffle is an in-place Fisher-Yates pass
    out = list(items)
    rng.shuffle(out)
    return out


def generate_solved_grid(rng: Optional[random.Random] = None) -> Grid:
    """Return a random, fully filled, rule-valid grid.

    Pass a seeded ``random.Random`` to get the same grid on every run.
    """
    rng = rng if rng is not None else random.Random()
    grid = empty_grid()
    if not search(grid, order=lambda: shuffled(DIGITS, rng)):
        # unreachable: the empty grid always has a completion
        raise RuntimeError("backtracking search failed on an empty grid")
    log.debug("generated solved grid, first row %s", grid[0])
    return grid
