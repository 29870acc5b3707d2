from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Optional

from maze_solver.maze.geometry import Position, manhattan

from .base import CameFrom, PathfindingStrategy

if TYPE_CHECKING:
    from maze_solver.maze.bounded import BoundedMaze


class AStar(PathfindingStrategy):
    """A* with the Manhattan heuristic; equal f-scores pop in insertion order."""

    name = "A*"
    short_names = ["astar", "a-star"]

    def _search(self, maze: BoundedMaze, start: Position, target: Position) -> Optional[CameFrom]:
        tie = 0
        open_set: list[tuple[int, int, Position]] = [(manhattan(start, target), tie, start)]
        came_from: CameFrom = {start: None}
        g_score: dict[Position, int] = {start: 0}
        closed: set[Position] = set()

        while open_set:
            _, _, current = heapq.heappop(open_set)
            if current == target:
                return came_from
            if current in closed:
                continue
            closed.add(current)

            current_g = g_score[current]
            for neighbor, move in maze.neighbors(current):
                if neighbor in closed:
                    continue
                tentative_g = current_g + 1
                if tentative_g < g_score.get(neighbor, tentative_g + 1):
                    g_score[neighbor] = tentative_g
                    came_from[neighbor] = (current, move)
                    tie += 1
                    heapq.heappush(open_set, (tentative_g + manhattan(neighbor, target), tie, neighbor))

        return None
