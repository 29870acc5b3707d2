"""Common contract for pathfinding over a fully known bounded maze."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from maze_solver.errors import NoPathExists
from maze_solver.maze.geometry import Move, Position

if TYPE_CHECKING:
    from maze_solver.maze.bounded import BoundedMaze

CameFrom = dict[Position, Optional[tuple[Position, Move]]]


class PathfindingStrategy:
    """Stateless planner: ``find_path`` is deterministic for a given maze.

    Subclasses implement ``_search`` and return the ``came_from`` map when the
    target is reached, or None when it is unreachable.
    """

    name: ClassVar[str] = "pathfinding"
    short_names: ClassVar[list[str]] = []

    def find_path(self, maze: BoundedMaze, start: Position, target: Position) -> list[Move]:
        for label, pos in (("start", start), ("target", target)):
            if not maze.in_bounds(pos):
                raise ValueError(f"{label} {pos} is outside the {maze.height}x{maze.width} maze")
        if start == target:
            return []
        if not maze.is_walkable(target):
            raise NoPathExists(f"{self.name}: target {target} is blocked")

        came_from = self._search(maze, start, target)
        if came_from is None:
            raise NoPathExists(f"{self.name}: no path from {start} to {target}")
        return reconstruct_path(came_from, target)

    def _search(self, maze: BoundedMaze, start: Position, target: Position) -> Optional[CameFrom]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def reconstruct_path(came_from: CameFrom, target: Position) -> list[Move]:
    path = []
    current = target
    while came_from[current] is not None:
        prev, move = came_from[current]  # type: ignore[misc]
        path.append(move)
        current = prev
    path.reverse()
    return path
