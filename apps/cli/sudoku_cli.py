"""Command-line front end for the Sudoku core: generate a puzzle, solve a grid, or check a board against its solution, printing a JSON report to stdout."""

# sudoku_cli.py
# Usage:
#   python -m apps.cli.sudoku_cli --mode generate --difficulty hard --seed 123 --pretty
#   python -m apps.cli.sudoku_cli --mode solve --grid board.json
#   python -m apps.cli.sudoku_cli --mode check --grid payload.json   # {"current": [...], "solution": [...]}
#
# A --grid file holds either a bare 9x9 list, or an object with "grid" / "current" / "solution" keys.
import argparse
import json
import logging
import random
import sys
from pathlib import Path

from sudoku_core.backtracking import count_solutions, solve
from sudoku_core.carver import generate_puzzle
from sudoku_core.config import load_config
from sudoku_core.solver_core import InvalidGridError, get_conflicts
from sudoku_core.sudoku_tools import check_solution, format_grid

log = logging.getLogger("sudoku_cli")


def load_board(path):
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, list):
        return {"grid": data}
    if not isinstance(data, dict):
        raise InvalidGridError(f"{path}: expected a 9x9 list or an object, got {type(data).__name__}")
    return data


def run_generate(args, cfg):
    rng = random.Random(args.seed) if args.seed is not None else None
    difficulty = args.difficulty or cfg.default_difficulty
    puzzle = generate_puzzle(difficulty, rng=rng, removals=cfg.difficulties)
    log.info("%s puzzle: %d cells removed (target %d)", difficulty, puzzle.removed, cfg.difficulties[difficulty])
    return puzzle.to_dict(), puzzle.puzzle


def run_solve(args, cfg):
    board = load_board(args.grid)
    grid = board.get("grid") or board.get("current")
    if grid is None:
        raise InvalidGridError(f"{args.grid}: no 'grid' or 'current' board found")
    found, solved = solve(grid)
    payload = {
        "solved": found,
        "grid": solved,
        "conflicts": [[r, c] for r, c in sorted(get_conflicts(grid))],
        "unique": count_solutions(grid) == 1 if found else False,
    }
    return payload, solved


def run_check(args, cfg):
    board = load_board(args.grid)
    if "current" not in board or "solution" not in board:
        raise InvalidGridError(f"{args.grid}: check mode needs both 'current' and 'solution'")
    return check_solution(board["current"], board["solution"]), board["current"]


MODES = {"generate": run_generate, "solve": run_solve, "check": run_check}


def main(args):
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    if args.mode in ("solve", "check") and not args.grid:
        log.error("--grid is required for --mode %s", args.mode)
        return 2
    overrides = {}
    if args.removals is not None:
        if not args.difficulty:
            log.error("--removals needs --difficulty")
            return 2
        overrides["difficulties"] = {args.difficulty: args.removals}
    try:
        cfg = load_config(args.config, **overrides)
        payload, grid = MODES[args.mode](args, cfg)
        text = json.dumps(payload, indent=2)
        if args.json:
            Path(args.json).write_text(text, encoding="utf-8")
    except (ValueError, OSError) as exc:  # bad grids, config, JSON, unreadable or unwritable files
        log.error("%s", exc)
        return 1

    if args.pretty:
        print(format_grid(grid), file=sys.stderr)
    if not args.json:
        print(text)
    return 0


def build_parser():
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--mode", type=str, default="generate", choices=sorted(MODES))
    ap.add_argument("--difficulty", type=str, default=None, choices=["easy", "medium", "hard"])
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--grid", type=str, default=None, help="JSON board file for solve/check")
    ap.add_argument("--config", type=str, default=None, help="YAML difficulty table")
    ap.add_argument("--removals", type=int, default=None, help="Override the removal target for --difficulty")
    ap.add_argument("--json", type=str, default=None, help="Write the report here instead of stdout")
    ap.add_argument("--pretty", action="store_true", help="Also draw the grid on stderr")
    ap.add_argument("--verbose", action="store_true")
    return ap


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
