"""Left-hand wall follower with frontier tracking.

Plain wall following only covers the boundary it starts on, so after each
closed circuit the follower checks for frontier cells (discovered open cells
with an undiscovered neighbor). If any remain it routes to the nearest one
over discovered cells and starts a new circuit from there.
"""

from __future__ import annotations

from typing import Optional

from maze_solver.maze.geometry import Move, Position, step
from maze_solver.maze.unbounded import UnboundedMaze

from .base import ExplorationStrategy, find_route, has_undiscovered_neighbor


class WallFollower(ExplorationStrategy):
    name = "Wall Follower"
    short_names = ["wall-follower", "wall_follower", "wall"]

    def __init__(self, initial_heading: Move = Move.UP) -> None:
        self.initial_heading = initial_heading
        super().__init__()

    def reset(self) -> None:
        super().reset()
        self.heading = self.initial_heading
        self.circuits = 0
        # (position, chosen move) pairs seen in the current circuit
        self._poses: set[tuple[Position, Move]] = set()
        self._route: list[Move] = []

    def _decide(self, position: Position, maze: UnboundedMaze) -> Optional[Move]:
        if self._route:
            move = self._route.pop(0)
            self.heading = move
            return move

        move = self._follow(position, maze)
        if move is not None and (position, move) not in self._poses:
            self._poses.add((position, move))
            self.heading = move
            return move

        # Circuit closed, or boxed in with nowhere to go
        self.circuits += 1
        self._poses = set()
        route = find_route(maze, position, lambda pos: has_undiscovered_neighbor(maze, pos))
        if route is None:
            return None

        goal, self._route = route
        if self.logger is not None:
            self.logger.info(f"circuit {self.circuits} closed at {position}; heading to frontier {goal}")
        move = self._route.pop(0)
        self.heading = move
        return move

    def _follow(self, position: Position, maze: UnboundedMaze) -> Optional[Move]:
        """First open direction among left, straight, right, reverse of the heading."""
        heading = self.heading
        for candidate in (heading.turn_left(), heading, heading.turn_right(), heading.reverse()):
            if maze.is_open(step(position, candidate)):
                return candidate
        return None
