"""
Text rendering of a Grid snapshot.

One line per row, each row terminated by a line break. Live cells are drawn
as 'X', dead cells as a space. The "counts" mode replaces each live cell with
the number of its live neighbors, handy when debugging a pattern.
"""

from .grid import Grid

CLEAR_SCREEN = "\033[2J\033[H"  # clear screen, cursor home

ALIVE_GLYPH = "X"
DEAD_GLYPH = " "

RENDER_MODES = ("glyph", "counts")


def render(grid: Grid, mode: str = "glyph") -> str:
    if mode == "glyph":
        return render_glyphs(grid)
    if mode == "counts":
        return render_counts(grid)
    raise ValueError(f"Unknown render mode {mode!r}, expected one of {RENDER_MODES}")


def render_glyphs(grid: Grid) -> str:
    rows = []
    for y in range(grid.height):
        row = grid.cells[y * grid.width:(y + 1) * grid.width]
        rows.append("".join(ALIVE_GLYPH if c.alive else DEAD_GLYPH for c in row))
    return "".join(row + "\n" for row in rows)


def render_counts(grid: Grid) -> str:
    rows = []
    for y in range(grid.height):
        line = ""
        for x in range(grid.width):
            cell = grid.cell_at(x, y)
            line += str(len(grid.alive_neighbors(cell))) if cell.alive else DEAD_GLYPH
        rows.append(line)
    return "".join(row + "\n" for row in rows)
