"""Common contract for exploring an unknown maze one physical step at a time."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable, ClassVar, Optional

from maze_solver.maze.geometry import MOVE_ORDER, Move, Position, step
from maze_solver.maze.sensors import SensorSnapshot
from maze_solver.maze.unbounded import UnboundedMaze

if TYPE_CHECKING:
    from maze_solver.debug_logger import DebugLogger


class ExplorationStrategy:
    """Stateful explorer driven by the blind solver.

    ``step`` records the snapshot into the maze, then decides the next move.
    It returns None once the strategy's completeness criterion holds, after
    which ``complete`` stays True until ``reset``. Seeing the target only
    records it; the target cell itself is never entered while exploring.
    """

    name: ClassVar[str] = "exploration"
    short_names: ClassVar[list[str]] = []

    def __init__(self) -> None:
        self.logger: Optional[DebugLogger] = None
        self.reset()

    def reset(self) -> None:
        self.complete = False
        self.visited: set[Position] = set()
        self.decisions = 0

    def step(self, position: Position, snapshot: SensorSnapshot, maze: UnboundedMaze) -> Optional[Move]:
        if self.complete:
            return None

        maze.record_snapshot(position, snapshot)
        self.visited.add(position)
        self.decisions += 1

        move = self._decide(position, maze)
        if move is None:
            self.complete = True
        elif not maze.is_open(step(position, move)):
            raise RuntimeError(f"{self.name} chose {move.value} from {position} into a non-open cell")
        return move

    def _decide(self, position: Position, maze: UnboundedMaze) -> Optional[Move]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(complete={self.complete}, visited={len(self.visited)})"


def find_route(
    maze: UnboundedMaze,
    start: Position,
    is_goal: Callable[[Position], bool],
    allow_target: bool = False,
) -> Optional[tuple[Position, list[Move]]]:
    """BFS over discovered cells to the nearest goal other than ``start``.

    Returns the goal and the moves leading to it, or None if no goal is
    reachable through discovered walkable cells.
    """
    came_from: dict[Position, Optional[tuple[Position, Move]]] = {start: None}
    queue: deque[Position] = deque([start])

    while queue:
        current = queue.popleft()
        if current != start and is_goal(current):
            moves = []
            pos = current
            while came_from[pos] is not None:
                prev, move = came_from[pos]  # type: ignore[misc]
                moves.append(move)
                pos = prev
            moves.reverse()
            return current, moves

        for neighbor, move in maze.neighbors(current, allow_target=allow_target):
            if neighbor not in came_from:
                came_from[neighbor] = (current, move)
                queue.append(neighbor)

    return None


def has_undiscovered_neighbor(maze: UnboundedMaze, pos: Position) -> bool:
    return any(step(pos, move) not in maze for move in MOVE_ORDER)
