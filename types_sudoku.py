# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, SIZE + 1))

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""A (row, col) coordinate, both 0-based in [0, 8]."""

FrozenGrid = tuple[tuple[int, ...], ...]

Difficulty = Literal["easy", "medium", "hard"]


def freeze(grid: Grid) -> FrozenGrid:
    return tuple(tuple(int(v) for v in row) for row in grid)


def thaw(grid: FrozenGrid) -> Grid:
    return [list(row) for row in grid]


def has_solution(solution) -> bool:
    """False for the all-empty placeholder a manual puzzle carries instead of a solution."""
    return any(v != 0 for row in solution for v in row)


@dataclass(frozen=True)
class Puzzle:
    """One play session's puzzle: the initial grid and its unique solution.

    Both grids are stored frozen; the ``puzzle`` and ``solution`` properties hand out
    fresh list copies, so nothing a caller does to a board can leak back in here.
    A manual puzzle has an all-empty initial grid and an all-empty solution placeholder.
    """

    givens: FrozenGrid
    answer: FrozenGrid
    difficulty: str | None = None
    removed: int = 0

    @classmethod
    def from_grids(
        cls,
        puzzle: Grid,
        solution: Grid,
        difficulty: str | None = None,
        removed: int | None = None,
    ) -> "Puzzle":
        if removed is None:
            removed = sum(1 for row in puzzle for v in row if v == 0)
        return cls(freeze(puzzle), freeze(solution), difficulty, removed)

    @property
    def puzzle(self) -> Grid:
        return thaw(self.givens)

    @property
    def solution(self) -> Grid:
        return thaw(self.answer)

    @property
    def has_solution(self) -> bool:
        return has_solution(self.answer)

    def is_prefilled(self, row: int, col: int) -> bool:
        return self.givens[row][col] != 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "puzzle": self.puzzle,
            "solution": self.solution,
            "difficulty": self.difficulty,
            "removed": self.removed,
        }
