# tests/test_sudoku_tools.py
from types_sudoku import Puzzle, has_solution
from sudoku_core.sudoku_tools import (
    apply_cell_change,
    check_solution,
    conflicts_tool,
    format_grid,
    hint,
    new_manual_puzzle,
    sanity_check,
    solve_board,
)

EMPTY = [[0] * 9 for _ in range(9)]


def test_manual_puzzle_is_blank():
    puzzle = new_manual_puzzle()
    assert puzzle.puzzle == EMPTY and puzzle.solution == EMPTY
    assert not puzzle.has_solution
    assert puzzle.removed == 0


def test_givens_are_locked(reference_grid):
    givens = [row[:] for row in reference_grid]
    givens[0][0] = 0
    puzzle = Puzzle.from_grids(givens, reference_grid)
    result = apply_cell_change(puzzle, givens, 0, 1, 9)
    assert result["accepted"] is False
    assert result["current"] == givens
    assert result["current"] is not givens


def test_wrong_digit_against_solution_is_a_conflict(reference_grid):
    puzzle = Puzzle.from_grids(EMPTY, reference_grid)
    result = apply_cell_change(puzzle, EMPTY, 0, 0, 9)
    assert result["accepted"]
    assert result["current"][0][0] == 9
    assert result["conflicts"] == [[0, 0]]
    assert result["next_empty"] == [0, 1]
    assert EMPTY[0][0] == 0


def test_manual_mode_only_reports_rule_conflicts():
    puzzle = new_manual_puzzle()
    result = apply_cell_change(puzzle, EMPTY, 0, 0, 9)
    assert result["conflicts"] == []
    board = result["current"]
    result = apply_cell_change(puzzle, board, 0, 8, 9)
    assert result["conflicts"] == [[0, 0], [0, 8]]


def test_clearing_a_cell_has_no_focus_hint(reference_grid):
    puzzle = Puzzle.from_grids(EMPTY, reference_grid)
    result = apply_cell_change(puzzle, reference_grid, 4, 4, 0)
    assert result["current"][4][4] == 0
    assert result["next_empty"] is None
    assert result["conflicts"] == []


def test_solve_board_adopts_manual_entries(reference_grid):
    current = [row[:] for row in reference_grid]
    current[0] = [0] * 9
    current[8][8] = 0
    result = solve_board(new_manual_puzzle(), current)
    assert result["solved"] and result["message"] == "Puzzle solved!"
    assert result["current"] == reference_grid
    assert result["puzzle"]["puzzle"] == current
    assert result["puzzle"]["solution"] == reference_grid


def test_solve_board_generated_puzzle_keeps_puzzle(reference_grid):
    current = [row[:] for row in reference_grid]
    current[3][3] = 0
    result = solve_board(Puzzle.from_grids(current, reference_grid), current)
    assert result["solved"] and result["puzzle"] is None


def test_solve_board_reports_failure(reference_grid):
    reference_grid[0][1] = 5
    result = solve_board(new_manual_puzzle(), reference_grid)
    assert result["solved"] is False
    assert result["message"] == "Could not solve the current board."
    assert result["current"] == reference_grid


def test_check_solution_states(reference_grid):
    assert check_solution(reference_grid, reference_grid)["status"] == "solved"
    partial = [row[:] for row in reference_grid]
    partial[2][2] = 0
    report = check_solution(partial, reference_grid)
    assert report["status"] == "in_progress" and report["correct"] and not report["complete"]
    wrong = [row[:] for row in partial]
    wrong[0][0] = 3
    assert check_solution(wrong, reference_grid)["status"] == "incorrect"
    assert check_solution(reference_grid, EMPTY)["status"] == "no_solution"


def test_hint_fills_first_empty_cell(reference_grid):
    current = [row[:] for row in reference_grid]
    current[0][0] = 0
    current[4][4] = 0
    result = hint(current, reference_grid)
    assert result["ok"] and result["cell"] == [0, 0] and result["digit"] == 5
    assert result["message"] == "Hint: Placed 5 at (1, 1)"
    assert result["current"][4][4] == 0
    assert current[0][0] == 0


def test_hint_refusals(reference_grid):
    assert hint(EMPTY, EMPTY)["message"] == "Please solve the puzzle first to get hints!"
    full = hint(reference_grid, reference_grid)
    assert full["ok"] is False and full["cell"] is None


def test_conflicts_tool_is_sorted(reference_grid):
    reference_grid[0][1] = 5
    assert conflicts_tool(reference_grid) == {"conflicts": [[0, 0], [0, 1], [3, 1]]}


def test_sanity_check(reference_grid):
    original = [row[:] for row in reference_grid]
    original[0][0] = 0
    assert sanity_check(original, reference_grid) == {"ok": True, "issues": []}

    current = [row[:] for row in reference_grid]
    current[0][1] = 5
    report = sanity_check(reference_grid, current)
    assert not report["ok"]
    kinds = [issue["type"] for issue in report["issues"]]
    assert kinds.count("given_overwritten") == 1
    units = {issue["unit"] for issue in report["issues"] if issue["type"] == "duplicate"}
    assert units == {"row 0", "col 1", "box 0"}


def test_format_grid(reference_grid):
    reference_grid[0][0] = 0
    lines = format_grid(reference_grid).splitlines()
    assert len(lines) == 11
    assert lines[0] == ". 3 4 | 6 7 8 | 9 1 2"
    assert lines[3] == "------+-------+------"


def test_solution_placeholder_is_recognised_everywhere(reference_grid):
    assert not has_solution(EMPTY) and has_solution(reference_grid)
    assert new_manual_puzzle().has_solution is has_solution(EMPTY)
    assert Puzzle.from_grids(EMPTY, reference_grid).has_solution is has_solution(reference_grid)
    assert check_solution(reference_grid, EMPTY)["status"] == "no_solution"
