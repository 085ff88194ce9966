from __future__ import annotations
"""Game-session helpers below the presentation layer: locked givens, combined rule/solution conflicts, solve, check and hint. Every function returns plain JSON-friendly dicts and never mutates its inputs."""

# sudoku_tools.py
from typing import Dict, List, Optional

from types_sudoku import BOX, SIZE, Cell, Grid, Puzzle, has_solution

from .backtracking import solve
from .solver_core import (
    clone_grid,
    empty_grid,
    find_next_empty_cell,
    get_conflicts,
    validate_cell,
    validate_digit,
    validate_grid,
)


def _cells(cells) -> List[List[int]]:
    return [[r, c] for r, c in sorted(cells)]


def new_manual_puzzle() -> Puzzle:
    """All-empty board with an all-empty solution placeholder; the player types the givens."""
    return Puzzle.from_grids(empty_grid(), empty_grid(), difficulty=None, removed=0)


def conflicts_tool(current: Grid) -> Dict:
    return {"conflicts": _cells(get_conflicts(current))}


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report givens that were overwritten and every row/column/box holding a duplicate digit."""
    validate_grid(original)
    validate_grid(current)
    issues = []
    for r in range(SIZE):
        for c in range(SIZE):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append({"type": "given_overwritten", "cell": [r, c],
                               "given": original[r][c], "found": current[r][c]})

    def duplicates_in_unit(vals):
        seen = set(); dups = set()
        for v in vals:
            if v == 0: continue
            if v in seen: dups.add(v)
            seen.add(v)
        return dups

    units = []
    for r in range(SIZE):
        units.append((f"row {r}", [(r, c) for c in range(SIZE)]))
    for c in range(SIZE):
        units.append((f"col {c}", [(r, c) for r in range(SIZE)]))
    for b in range(SIZE):
        r0, c0 = BOX * (b // BOX), BOX * (b % BOX)
        units.append((f"box {b}", [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]))
    for name, cells in units:
        dups = duplicates_in_unit(current[r][c] for r, c in cells)
        if dups:
            bad = [[r, c] for r, c in cells if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": name, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def apply_cell_change(puzzle: Puzzle, current: Grid, row: int, col: int, value: int) -> Dict:
    """Write ``value`` at (row, col) unless that cell is one of the puzzle's givens.

    Conflicts combine rule clashes across the whole board with a mismatch against the
    known solution for the edited cell (only when the puzzle has a real solution).
    ``next_empty`` points at the next blank after a non-zero entry.
    """
    validate_grid(current)
    validate_cell(row, col)
    validate_digit(value)
    if puzzle.is_prefilled(row, col):
        return {"accepted": False, "current": clone_grid(current),
                "conflicts": _cells(get_conflicts(current)), "next_empty": None}

    board = clone_grid(current)
    board[row][col] = value
    conflicts = get_conflicts(board)
    if puzzle.has_solution and value != 0 and puzzle.answer[row][col] != value:
        conflicts.add((row, col))

    next_empty: Optional[Cell] = find_next_empty_cell(board) if value != 0 else None
    return {
        "accepted": True,
        "current": board,
        "conflicts": _cells(conflicts),
        "next_empty": list(next_empty) if next_empty else None,
    }


def solve_board(puzzle: Puzzle, current: Grid) -> Dict:
    """Solve a copy of ``current``.

    For a manual puzzle a successful solve also fixes what the player typed as the new
    givens and returns it as ``puzzle`` together with the found solution.
    """
    found, board = solve(current)
    if not found:
        return {"solved": False, "current": clone_grid(current), "puzzle": None,
                "message": "Could not solve the current board."}
    adopted = None
    if not puzzle.has_solution:
        adopted = Puzzle.from_grids(current, board, difficulty=None).to_dict()
    return {"solved": True, "current": board, "puzzle": adopted, "message": "Puzzle solved!"}


def check_solution(current: Grid, solution: Grid) -> Dict:
    validate_grid(current)
    validate_grid(solution)
    if not has_solution(solution):
        return {"complete": False, "correct": False, "status": "no_solution",
                "message": "No solution is known for this board yet."}
    complete = find_next_empty_cell(current) is None
    correct = all(
        current[r][c] == 0 or current[r][c] == solution[r][c]
        for r in range(SIZE) for c in range(SIZE)
    )
    if complete and correct:
        status, message = "solved", "Congratulations! Your solution is correct!"
    elif correct:
        status, message = "in_progress", "So far so good! Keep going, some cells are still empty."
    else:
        status, message = "incorrect", "Not quite right. Review your entries!"
    return {"complete": complete, "correct": correct, "status": status, "message": message}


def hint(current: Grid, solution: Grid) -> Dict:
    """Fill the first empty cell (row-major) with its value from ``solution``."""
    validate_grid(current)
    validate_grid(solution)
    if not has_solution(solution):
        return {"ok": False, "current": clone_grid(current), "cell": None, "digit": None,
                "message": "Please solve the puzzle first to get hints!"}
    cell = find_next_empty_cell(current)
    if cell is None:
        return {"ok": False, "current": clone_grid(current), "cell": None, "digit": None,
                "message": "No empty cells left! Puzzle is complete or waiting to be checked."}
    r, c = cell
    digit = solution[r][c]
    board = clone_grid(current)
    board[r][c] = digit
    return {"ok": True, "current": board, "cell": [r, c], "digit": digit,
            "message": f"Hint: Placed {digit} at ({r + 1}, {c + 1})"}


def format_grid(grid: Grid) -> str:
    lines = []
    for r, row in enumerate(grid):
        if r and r % BOX == 0:
            lines.append("------+-------+------")
        chunks = [" ".join(str(v) if v else "." for v in row[i:i + BOX]) for i in range(0, SIZE, BOX)]
        lines.append(" | ".join(chunks))
    return "\n".join(lines)
