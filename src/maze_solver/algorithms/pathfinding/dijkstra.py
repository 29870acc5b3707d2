from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Optional

from maze_solver.maze.geometry import Position

from .base import CameFrom, PathfindingStrategy

if TYPE_CHECKING:
    from maze_solver.maze.bounded import BoundedMaze


class Dijkstra(PathfindingStrategy):
    """Uniform-cost search; frontier ordered by accumulated cost only."""

    name = "Dijkstra"
    short_names = ["dijkstra"]

    def _search(self, maze: BoundedMaze, start: Position, target: Position) -> Optional[CameFrom]:
        tie = 0
        heap: list[tuple[int, int, Position]] = [(0, tie, start)]
        came_from: CameFrom = {start: None}
        distances: dict[Position, int] = {start: 0}

        while heap:
            cost, _, current = heapq.heappop(heap)
            if current == target:
                return came_from
            # Stale entry superseded by a cheaper push
            if cost > distances[current]:
                continue

            for neighbor, move in maze.neighbors(current):
                new_cost = cost + 1
                if new_cost < distances.get(neighbor, new_cost + 1):
                    distances[neighbor] = new_cost
                    came_from[neighbor] = (current, move)
                    tie += 1
                    heapq.heappush(heap, (new_cost, tie, neighbor))

        return None
