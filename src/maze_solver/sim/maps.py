"""ASCII maze files for the simulated robot.

Glyphs: ``#`` wall, ``.`` free, ``T`` target, ``R`` robot spawn. Blank lines
and trailing whitespace are ignored; every row must have the same width.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from maze_solver.maze.cell import CellType
from maze_solver.ports import MapDescription

GLYPH_TO_CELL: dict[str, CellType] = {
    "#": CellType.BLOCKED,
    ".": CellType.FREE,
    "T": CellType.TARGET,
    "R": CellType.ROBOT,
}
CELL_TO_GLYPH: dict[CellType, str] = {cell: glyph for glyph, cell in GLYPH_TO_CELL.items()}


def parse_ascii_map(text: str) -> MapDescription:
    """Parse an ASCII maze into the transport's flattened map format."""
    rows = [line.rstrip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("map is empty")

    width = len(rows[0])
    cells: list[str] = []
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {r} has width {len(row)}, expected {width}")
        for c, glyph in enumerate(row):
            cell = GLYPH_TO_CELL.get(glyph)
            if cell is None:
                raise ValueError(f"unknown glyph {glyph!r} at ({r}, {c})")
            cells.append(cell.code)

    robots = cells.count(CellType.ROBOT.code)
    if robots != 1:
        raise ValueError(f"map must contain exactly one robot spawn 'R', found {robots}")
    return MapDescription(cells=cells, shape=(len(rows), width))


def load_map(path: Union[str, Path]) -> MapDescription:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"map file not found: {path}")
    return parse_ascii_map(path.read_text())


def render(description: MapDescription) -> str:
    """Inverse of ``parse_ascii_map``."""
    height, width = description.shape
    lines = []
    for r in range(height):
        codes = description.cells[r * width : (r + 1) * width]
        lines.append("".join(CELL_TO_GLYPH[CellType.from_code(code)] for code in codes))
    return "\n".join(lines)
