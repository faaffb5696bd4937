"""Command-line front end: load a puzzle (YAML file or the built-in demo grid), run the logic solver, and print the grid or a JSON payload."""

# demo_cli.py
# - Loads a puzzle from YAML (see config.py) or uses the built-in demo grid
# - Runs one pass (--mode step) or solves to completion (--mode solve)
# - Prints the moves and the resulting grid, or the tool payload with --json
#
# Usage:
#   python -m apps.cli.demo_cli --puzzle puzzles/canonical.yaml --mode step
#   python -m apps.cli.demo_cli --demo --json --verbose
#
# Exit status: 0 ok, 1 invalid input, 2 stalled (grid printed as far as it got).

import argparse
import json
import logging
import sys

from solver.errors import InvalidInputValue, UnsolvableSudoku
from solver.sudoku_tools import solve_tool, step_tool

from .config import DEFAULTS, DotDict, load_yaml, merge_overrides
from .grid_renderer import caption_for_move, format_grid

DEMO_GRID = [
    [0, 0, 0, 0, 6, 0, 5, 0, 0],
    [0, 0, 2, 0, 0, 0, 0, 0, 4],
    [0, 1, 0, 3, 0, 0, 0, 9, 0],
    [0, 3, 4, 5, 0, 0, 0, 0, 6],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [2, 0, 0, 0, 0, 9, 8, 1, 0],
    [0, 5, 0, 0, 0, 8, 0, 3, 0],
    [3, 0, 0, 0, 0, 0, 9, 0, 0],
    [0, 0, 6, 0, 1, 0, 0, 0, 0],
]


def load_puzzle(args) -> DotDict:
    if args.puzzle:
        cfg = load_yaml(args.puzzle)
    else:
        cfg = DotDict(DEFAULTS)
        cfg.update(name="demo", grid=[row[:] for row in DEMO_GRID])
    return merge_overrides(cfg, mode=args.mode, verbose=args.verbose, json=args.json)


def main(args) -> int:
    cfg = load_puzzle(args)
    logging.basicConfig(
        level=logging.DEBUG if cfg.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if cfg.grid is None:
        print("error: puzzle has no 'grid'", file=sys.stderr)
        return 1

    tool = step_tool if cfg.mode == "step" else solve_tool
    try:
        result = tool(cfg.grid)
    except (InvalidInputValue, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except UnsolvableSudoku as e:
        print(f"error: {e}", file=sys.stderr)
        if cfg.json:
            print(json.dumps({"name": cfg.name, "mode": cfg.mode, "solved": False, "current": e.current}, indent=2))
        else:
            print(format_grid(e.current))
        return 2

    if cfg.json:
        print(json.dumps({"name": cfg.name, "mode": cfg.mode, **result}, indent=2))
        return 0
    for move in result["moves"]:
        print(caption_for_move(move))
    if cfg.mode == "step":
        print(f"progress: {result['progress']}")
    print(format_grid(result["current"]))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a Sudoku with logic only (no guessing).")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--puzzle", type=str, help="YAML puzzle file")
    src.add_argument("--demo", action="store_true", help="Use the built-in demo grid; this is also what runs when --puzzle is not given")
    ap.add_argument("--mode", type=str, default=None, choices=["solve", "step"])
    ap.add_argument("--json", action="store_true", default=None, help="Print the tool payload as JSON")
    ap.add_argument("--verbose", action="store_true", default=None, help="Log every rule and determination")
    return ap


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
