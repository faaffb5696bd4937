# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from typing import Annotated

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from solver.errors import InvalidInputValue, UnsolvableSudoku
from solver.sudoku_tools import compute_candidates_tool, solve_tool, step_tool

app = FastAPI(title="Sudoku Logic Solver API")

Row = Annotated[list[int], Field(min_length=9, max_length=9)]


class GridModel(BaseModel):
    grid: Annotated[list[Row], Field(min_length=9, max_length=9)]


class MoveModel(BaseModel):
    index: int
    technique: str
    type: str
    cell: str
    row: int
    col: int
    digit: int
    candidates: list[int]


class CandidatesResponse(BaseModel):
    candidates: dict[str, list[int]]


class StepResponse(BaseModel):
    progress: int
    solved: bool
    current: list[list[int]]
    moves: list[MoveModel]


class SolveResponse(BaseModel):
    solved: bool
    steps: int
    current: list[list[int]]
    moves: list[MoveModel]


def _run(tool, grid):
    try:
        return tool(grid)
    except InvalidInputValue as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "InvalidInputValue", "row": e.row, "col": e.col, "value": e.value},
        )
    except UnsolvableSudoku as e:
        raise HTTPException(status_code=409, detail={"error": "UnsolvableSudoku", "current": e.current})
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"error": "ValueError", "message": str(e)})


@app.post("/compute_candidates", response_model=CandidatesResponse)
def api_cands(payload: GridModel):
    return _run(compute_candidates_tool, payload.grid)


@app.post("/step", response_model=StepResponse)
def api_step(payload: GridModel):
    return _run(step_tool, payload.grid)


@app.post("/solve", response_model=SolveResponse)
def api_solve(payload: GridModel):
    return _run(solve_tool, payload.grid)
