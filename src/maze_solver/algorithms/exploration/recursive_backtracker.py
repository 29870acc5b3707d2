"""Depth-first exploration with breadth-first backtracking.

Moves to an unvisited open neighbor whenever one exists. When stuck, the
robot does not retrace its stack one cell at a time: it takes the shortest
route over discovered cells to the nearest visited cell that still has an
unvisited open neighbor.
"""

from __future__ import annotations

from typing import Optional

from maze_solver.maze.geometry import Move, Position
from maze_solver.maze.unbounded import UnboundedMaze

from .base import ExplorationStrategy, find_route


class RecursiveBacktracker(ExplorationStrategy):
    name = "Recursive Backtracker"
    short_names = ["recursive-backtracker", "recursive_backtracker", "backtracker"]

    def reset(self) -> None:
        super().reset()
        self.stack: list[Position] = []
        self.backtracks = 0
        self.last_backtrack: list[Move] = []
        self._route: list[Move] = []

    def _decide(self, position: Position, maze: UnboundedMaze) -> Optional[Move]:
        if self._route:
            return self._route.pop(0)

        for neighbor, move in maze.neighbors(position, allow_target=False):
            if neighbor not in self.visited:
                self.stack.append(position)
                return move

        route = find_route(
            maze,
            position,
            lambda pos: pos in self.visited and self._has_unvisited_neighbor(maze, pos),
        )
        if route is None:
            # Nothing left anywhere in the discovered graph
            self.stack.clear()
            return None

        goal, moves = route
        self.stack = [pos for pos in self.stack if self._has_unvisited_neighbor(maze, pos)]
        if goal in self.stack:
            del self.stack[self.stack.index(goal) :]

        self.backtracks += 1
        self.last_backtrack = list(moves)
        if self.logger is not None:
            self.logger.record_backtrack(position, moves, self.decisions)
        self._route = moves
        return self._route.pop(0)

    def _has_unvisited_neighbor(self, maze: UnboundedMaze, pos: Position) -> bool:
        return any(neighbor not in self.visited for neighbor, _ in maze.neighbors(pos, allow_target=False))
