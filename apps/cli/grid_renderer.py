"""Plain-text rendering of solver state and move captions for the CLI."""

# grid_renderer.py
# Blanks print as '.', boxes are separated by '|' and '------+-------+------'.
from types_sudoku import Grid, Move

BOX_RULE = "------+-------+------"


def format_grid(grid: Grid) -> str:
    lines = []
    for r, row in enumerate(grid):
        if r and r % 3 == 0:
            lines.append(BOX_RULE)
        cells = [str(v) if v else "." for v in row]
        lines.append(" | ".join(" ".join(cells[i : i + 3]) for i in range(0, 9, 3)))
    return "\n".join(lines)


def caption_for_move(move: Move) -> str:
    return f"#{move.get('index', '?')}  {move.get('technique', '?')}: {move.get('cell', '')} = {move.get('digit', '')}"
