# tests/test_demo_cli.py
import json

import pytest
import yaml

from apps.cli.config import load_yaml, merge_overrides
from apps.cli.demo_cli import build_parser, main
from apps.cli.grid_renderer import caption_for_move, format_grid


def run(argv):
    return main(build_parser().parse_args(argv))


def write_puzzle(path, grid, **extra):
    path.write_text(yaml.safe_dump({"grid": grid, **extra}), encoding="utf-8")
    return str(path)


def test_format_grid(field_1):
    lines = format_grid(field_1).splitlines()
    assert len(lines) == 11
    assert lines[0] == ". . . | . 6 . | 5 . ."
    assert lines[3] == "------+-------+------"


def test_caption_for_move():
    move = {"index": 3, "technique": "row_reduction", "cell": "r2c7", "digit": 3}
    assert caption_for_move(move) == "#3  row_reduction: r2c7 = 3"


def test_load_yaml_defaults(tmp_path, field_1):
    cfg = load_yaml(write_puzzle(tmp_path / "p.yaml", field_1, name="p"))
    assert cfg.grid == field_1
    assert cfg.name == "p"
    assert cfg.mode == "solve"
    assert cfg.verbose is False


def test_load_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml(path)


def test_merge_overrides_skips_none():
    cfg = merge_overrides({"mode": "solve", "json": False}, mode=None, json=True)
    assert cfg == {"mode": "solve", "json": True}


def test_cli_demo_step(capsys):
    assert run(["--demo", "--mode", "step"]) == 0
    out = capsys.readouterr().out
    assert "progress: " in out
    assert "r2c7 = 3" in out


def test_cli_solve_from_file(tmp_path, capsys, blank_box_puzzle, solution):
    assert run(["--puzzle", write_puzzle(tmp_path / "p.yaml", blank_box_puzzle)]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith(format_grid(solution))
    assert "sole_candidate" in out


def test_cli_json(tmp_path, capsys, blank_box_puzzle, solution):
    path = write_puzzle(tmp_path / "p.yaml", blank_box_puzzle, name="box", json=True)
    assert run(["--puzzle", path]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "box"
    assert payload["solved"] is True
    assert payload["current"] == solution


def test_cli_invalid_value(tmp_path, capsys, empty_grid):
    empty_grid[0][0] = 12
    assert run(["--puzzle", write_puzzle(tmp_path / "p.yaml", empty_grid)]) == 1
    assert "Invalid input value at (0, 0): 12" in capsys.readouterr().err


def test_cli_stalled(tmp_path, capsys, empty_grid):
    assert run(["--puzzle", write_puzzle(tmp_path / "p.yaml", empty_grid), "--json"]) == 2
    captured = capsys.readouterr()
    assert "Unsolvable Sudoku" in captured.err
    assert json.loads(captured.out)["solved"] is False


def test_cli_missing_grid(tmp_path, capsys):
    path = tmp_path / "p.yaml"
    path.write_text("name: nothing\n", encoding="utf-8")
    assert run(["--puzzle", str(path)]) == 1
