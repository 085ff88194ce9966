# sudoku_tool_api.py
# FastAPI wrapper around the Sudoku core for a presentation layer.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
# Set SUDOKU_CONFIG=configs/sudoku.yaml to override the difficulty table.
import random
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from types_sudoku import Puzzle
from sudoku_core.backtracking import count_solutions, solve
from sudoku_core.carver import UnknownDifficultyError, generate_puzzle
from sudoku_core.config import ConfigError, load_config
from sudoku_core.solver_core import InvalidGridError, get_conflicts, is_valid_placement, validate_grid
from sudoku_core.sudoku_tools import (
    apply_cell_change,
    check_solution as _check_solution,
    hint as _hint,
    sanity_check,
    solve_board,
)

app = FastAPI(title="Sudoku Core API")


class GridModel(BaseModel):
    grid: List[List[int]]


class PlacementRequest(BaseModel):
    grid: List[List[int]]
    row: int
    col: int
    digit: int


class GenerateRequest(BaseModel):
    difficulty: Optional[str] = None
    seed: Optional[int] = None


class BoardRequest(BaseModel):
    current: List[List[int]]
    solution: List[List[int]]


class PuzzleBoardRequest(BaseModel):
    puzzle: List[List[int]]
    solution: List[List[int]]
    current: List[List[int]]


class CellChangeRequest(PuzzleBoardRequest):
    row: int
    col: int
    value: int


class SanityRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]


@app.exception_handler(InvalidGridError)
@app.exception_handler(UnknownDifficultyError)
async def _bad_input(request: Request, exc: ValueError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(ConfigError)
async def _bad_config(request: Request, exc: ConfigError):
    return JSONResponse(status_code=500, content={"detail": f"server configuration error: {exc}"})


@app.get("/difficulties")
def api_difficulties():
    cfg = load_config()
    return {"difficulties": cfg.difficulties, "default": cfg.default_difficulty}


@app.post("/valid_placement")
def api_valid_placement(req: PlacementRequest):
    return {"valid": is_valid_placement(req.grid, req.row, req.col, req.digit)}


@app.post("/conflicts")
def api_conflicts(payload: GridModel):
    return {"conflicts": [[r, c] for r, c in sorted(get_conflicts(payload.grid))]}


@app.post("/solve")
def api_solve(payload: GridModel):
    found, board = solve(payload.grid)
    return {"solved": found, "grid": board}


@app.post("/count_solutions")
def api_count(payload: GridModel):
    return {"count": count_solutions(payload.grid)}


@app.post("/generate")
def api_generate(req: GenerateRequest):
    cfg = load_config()
    rng = random.Random(req.seed) if req.seed is not None else None
    puzzle = generate_puzzle(req.difficulty or cfg.default_difficulty, rng=rng, removals=cfg.difficulties)
    return puzzle.to_dict()


def _puzzle(req: PuzzleBoardRequest) -> Puzzle:
    validate_grid(req.puzzle)
    validate_grid(req.solution)
    return Puzzle.from_grids(req.puzzle, req.solution)


@app.post("/cell_change")
def api_cell_change(req: CellChangeRequest):
    return apply_cell_change(_puzzle(req), req.current, req.row, req.col, req.value)


@app.post("/solve_board")
def api_solve_board(req: PuzzleBoardRequest):
    return solve_board(_puzzle(req), req.current)


@app.post("/check_solution")
def api_check(req: BoardRequest):
    return _check_solution(req.current, req.solution)


@app.post("/hint")
def api_hint(req: BoardRequest):
    return _hint(req.current, req.solution)


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)
