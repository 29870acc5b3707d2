from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from maze_solver.maze.geometry import Move, Position

from .base import CameFrom, PathfindingStrategy

if TYPE_CHECKING:
    from maze_solver.maze.bounded import BoundedMaze


class DepthFirstSearch(PathfindingStrategy):
    """Depth-first search; returns the first path found, not the shortest.

    Neighbors are tried in UP, RIGHT, DOWN, LEFT order, so the search always
    descends along the first open direction before considering the next.
    """

    name = "DFS"
    short_names = ["dfs"]

    def _search(self, maze: BoundedMaze, start: Position, target: Position) -> Optional[CameFrom]:
        came_from: CameFrom = {}
        stack: list[tuple[Position, Optional[tuple[Position, Move]]]] = [(start, None)]

        while stack:
            current, parent = stack.pop()
            if current in came_from:
                continue
            came_from[current] = parent
            if current == target:
                return came_from

            # Reversed so the highest-priority neighbor is popped first
            for neighbor, move in reversed(maze.neighbors(current)):
                if neighbor not in came_from:
                    stack.append((neighbor, (current, move)))

        return None
