from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from maze_solver.maze.bounded import BoundedMaze
    from maze_solver.maze.geometry import Move


@dataclass
class SolveResult:
    """Outcome of a run that reached DONE.

    Step counts are what the benchmark compares; times are wall-clock
    seconds and carry no correctness meaning.
    """

    mode: str
    pathfinding: str
    path: list[Move] = field(default_factory=list)
    exploration: Optional[str] = None
    exploration_steps: int = 0
    execution_steps: int = 0
    exploration_time: float = 0.0
    planning_time: float = 0.0
    execution_time: float = 0.0
    maze: Optional[BoundedMaze] = None

    @property
    def total_steps(self) -> int:
        return self.exploration_steps + self.execution_steps

    @property
    def total_time(self) -> float:
        return self.exploration_time + self.planning_time + self.execution_time

    @property
    def algorithm(self) -> str:
        """Name the run is reported under: the explorer in blind mode, the planner otherwise."""
        return self.exploration or self.pathfinding
