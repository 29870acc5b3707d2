"""Fixed-size maze backed by a dense numpy grid.

Built either from a fetched full map (omniscient mode) or by converting the
sparse map discovered while exploring (blind mode). Read-only once built.
"""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

import numpy as np

from maze_solver.errors import IncompleteMaze

from .cell import CellType
from .geometry import MOVE_ORDER, Move, Position, step
from .unbounded import ORIGIN, UnboundedMaze

ASCII_GLYPHS: dict[CellType, str] = {
    CellType.FREE: ".",
    CellType.BLOCKED: "#",
    CellType.TARGET: "T",
    CellType.ROBOT: "R",
}


class BoundedMaze:
    """Dense H x W grid of cell states with a recorded start and target."""

    def __init__(self, grid: np.ndarray, start: Position, target: Position):
        grid = np.array(grid, dtype=np.int8, copy=True)
        if grid.ndim != 2 or grid.size == 0:
            raise ValueError(f"Maze grid must be a non-empty 2D array, got shape {grid.shape}")

        # The live occupant's cell is persisted as its terrain
        grid[grid == CellType.ROBOT.value] = CellType.FREE.value

        targets = np.argwhere(grid == CellType.TARGET.value)
        if len(targets) != 1:
            raise ValueError(f"Maze must contain exactly one target cell, found {len(targets)}")

        self._grid = grid
        self._grid.flags.writeable = False
        self.start: Position = (int(start[0]), int(start[1]))
        self.target: Position = (int(target[0]), int(target[1]))

        for name, pos in (("start", self.start), ("target", self.target)):
            if not self.in_bounds(pos):
                raise ValueError(f"{name} {pos} is outside the {self.height}x{self.width} maze")
        if self.get(self.target) is not CellType.TARGET:
            actual = (int(targets[0][0]), int(targets[0][1]))
            raise ValueError(f"target {self.target} is not the target cell {actual}")
        if not self.is_walkable(self.start):
            raise ValueError(f"start {self.start} is blocked")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_full_map(
        cls,
        cells: Sequence[Sequence[CellType | str]],
        start: Optional[Position] = None,
        target: Optional[Position] = None,
    ) -> BoundedMaze:
        """Build from rows of cell states or wire codes.

        A missing ``start`` is taken from the ROBOT cell and a missing
        ``target`` from the TARGET cell.
        """
        rows = [[CellType.coerce(value) for value in row] for row in cells]
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Maze rows must be non-empty and of equal length")

        robot: Optional[Position] = None
        found_target: Optional[Position] = None
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                if cell is CellType.ROBOT and robot is None:
                    robot = (r, c)
                elif cell is CellType.TARGET and found_target is None:
                    found_target = (r, c)

        start = start if start is not None else robot
        target = target if target is not None else found_target
        if start is None:
            raise ValueError("robot not found in maze")
        if target is None:
            raise ValueError("target not found in maze")

        grid = np.array([[cell.value for cell in row] for row in rows], dtype=np.int8)
        return cls(grid, start, target)

    @classmethod
    def from_flattened(cls, cells: Sequence[str], shape: Sequence[int]) -> BoundedMaze:
        """Build from the transport's row-major code list and ``(height, width)`` shape."""
        if len(shape) != 2:
            raise ValueError(f"invalid shape: expected [height, width], got {list(shape)}")
        height, width = int(shape[0]), int(shape[1])
        if len(cells) != height * width:
            raise ValueError(f"grid size mismatch: expected {height * width}, got {len(cells)}")
        rows = [cells[r * width : (r + 1) * width] for r in range(height)]
        return cls.from_full_map(rows)

    @classmethod
    def from_unbounded(
        cls,
        maze: UnboundedMaze,
        target: Optional[Position] = None,
        origin_cell: Optional[Position] = None,
    ) -> BoundedMaze:
        """Convert a fully explored sparse map into a bounded maze.

        The grid is the minimal rectangle over every discovered position.
        Undiscovered cells inside it are BLOCKED. The origin becomes the start;
        it maps to ``origin_cell`` when given (padding the grid with BLOCKED),
        otherwise to ``(-min_row, -min_col)``.

        With ``origin_cell``, BLOCKED readings that land above or left of the
        grid (off-grid cells sensed from an edge spawn) are dropped. A walkable
        cell there raises ValueError.
        """
        target = target if target is not None else maze.target
        if target is None or maze.get(target) is not CellType.TARGET:
            raise IncompleteMaze("target was never discovered")
        if not _is_connected(maze, ORIGIN, target):
            raise IncompleteMaze(f"discovered cells do not connect the origin to the target at {target}")

        bounds = maze.bounds()
        if bounds is None:
            raise IncompleteMaze("no cells were discovered")
        min_row, _, min_col, _ = bounds
        if origin_cell is None:
            row_offset, col_offset = -min_row, -min_col
        else:
            row_offset, col_offset = int(origin_cell[0]), int(origin_cell[1])

        placed: dict[Position, CellType] = {}
        for (r, c), cell in maze.cells.items():
            row, col = r + row_offset, c + col_offset
            if row < 0 or col < 0:
                if cell.is_walkable:
                    raise ValueError(
                        f"walkable cell {(r, c)} relative to the origin falls outside the grid "
                        f"when the origin is placed at {(row_offset, col_offset)}"
                    )
                continue
            placed[(row, col)] = cell

        grid = np.full(
            (max(row for row, _ in placed) + 1, max(col for _, col in placed) + 1),
            CellType.BLOCKED.value,
            dtype=np.int8,
        )
        for (row, col), cell in placed.items():
            grid[row, col] = cell.value

        return cls(
            grid,
            start=(row_offset, col_offset),
            target=(target[0] + row_offset, target[1] + col_offset),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return int(self._grid.shape[0])

    @property
    def width(self) -> int:
        return int(self._grid.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cell values."""
        return self._grid

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.height and 0 <= pos[1] < self.width

    def get(self, pos: Position) -> Optional[CellType]:
        if not self.in_bounds(pos):
            return None
        return CellType(int(self._grid[pos[0], pos[1]]))

    def is_walkable(self, pos: Position) -> bool:
        cell = self.get(pos)
        return cell is not None and cell.is_walkable

    def neighbors(self, pos: Position) -> list[tuple[Position, Move]]:
        """Walkable 4-neighbors in priority order (UP, RIGHT, DOWN, LEFT)."""
        result = []
        for move in MOVE_ORDER:
            neighbor = step(pos, move)
            if self.is_walkable(neighbor):
                result.append((neighbor, move))
        return result

    def to_ascii(self, robot: Optional[Position] = None) -> str:
        robot = robot if robot is not None else self.start
        lines = []
        for r in range(self.height):
            row = []
            for c in range(self.width):
                if (r, c) == robot:
                    row.append(ASCII_GLYPHS[CellType.ROBOT])
                else:
                    row.append(ASCII_GLYPHS[CellType(int(self._grid[r, c]))])
            lines.append("".join(row))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedMaze):
            return NotImplemented
        return (
            self.start == other.start
            and self.target == other.target
            and np.array_equal(self._grid, other._grid)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedMaze({self.height}x{self.width}, start={self.start}, target={self.target})"


def _is_connected(maze: UnboundedMaze, start: Position, goal: Position) -> bool:
    if not maze.is_walkable(start):
        return False
    queue = deque([start])
    seen = {start}
    while queue:
        current = queue.popleft()
        if current == goal:
            return True
        for neighbor, _ in maze.neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return False
