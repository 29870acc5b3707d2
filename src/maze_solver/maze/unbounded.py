"""Sparse map of the maze discovered so far, keyed by signed positions.

The robot's spawn is the origin ``(0, 0)``. Absence of a key means the cell
has not been discovered, which is distinct from ``FREE``.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .cell import CellType
from .geometry import MOVE_ORDER, Move, Position, step
from .sensors import SensorSnapshot

ORIGIN: Position = (0, 0)


class UnboundedMaze:
    """Grows monotonically: entries are only added or upgraded FREE -> TARGET."""

    def __init__(self) -> None:
        self.cells: dict[Position, CellType] = {}
        self.target: Optional[Position] = None

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self.cells

    def __iter__(self) -> Iterator[Position]:
        return iter(self.cells)

    def get(self, pos: Position) -> Optional[CellType]:
        """Cell state, or None if undiscovered."""
        return self.cells.get(pos)

    def record(self, pos: Position, cell: CellType) -> bool:
        """Record a sensed state. Returns True if the map changed.

        BLOCKED and TARGET are permanent; FREE may only be upgraded to TARGET.
        """
        if cell is CellType.ROBOT:
            cell = CellType.FREE
        current = self.cells.get(pos)
        if current is None:
            self.cells[pos] = cell
        elif current is CellType.FREE and cell is CellType.TARGET:
            self.cells[pos] = cell
        else:
            return False
        if cell is CellType.TARGET and self.target is None:
            self.target = pos
        return True

    def record_snapshot(self, pos: Position, snapshot: SensorSnapshot) -> list[Position]:
        """Record the robot's own cell and its 8 readings. Returns newly discovered positions."""
        discovered = []
        if pos not in self.cells:
            # The robot is standing here, so the cell is walkable terrain
            self.record(pos, CellType.FREE)
            discovered.append(pos)
        for cell_pos, cell in snapshot.cells_around(pos):
            is_new = cell_pos not in self.cells
            if self.record(cell_pos, cell) and is_new:
                discovered.append(cell_pos)
        return discovered

    def is_walkable(self, pos: Position) -> bool:
        return self.cells.get(pos) in (CellType.FREE, CellType.TARGET)

    def is_open(self, pos: Position) -> bool:
        """Walkable and not the target: traversable while exploring."""
        return self.cells.get(pos) is CellType.FREE

    def neighbors(self, pos: Position, allow_target: bool = True) -> list[tuple[Position, Move]]:
        """Discovered walkable 4-neighbors in priority order."""
        result = []
        for move in MOVE_ORDER:
            neighbor = step(pos, move)
            if self.is_open(neighbor) or (allow_target and self.is_walkable(neighbor)):
                result.append((neighbor, move))
        return result

    def bounds(self) -> Optional[tuple[int, int, int, int]]:
        """(min_row, max_row, min_col, max_col) over every discovered position."""
        if not self.cells:
            return None
        rows = [pos[0] for pos in self.cells]
        cols = [pos[1] for pos in self.cells]
        return min(rows), max(rows), min(cols), max(cols)
