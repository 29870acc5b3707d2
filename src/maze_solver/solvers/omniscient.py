"""Omniscient solver: FETCH_MAP -> PLAN -> EXECUTE -> DONE."""

from __future__ import annotations

import time

from maze_solver.errors import MapUnavailable, SolverError
from maze_solver.maze.bounded import BoundedMaze

from .base import Phase, PositionTracker, Solver
from .result import SolveResult


class OmniscientSolver(Solver):
    """Fetches the full map once, plans with the configured pathfinder and executes."""

    mode = "omniscient"
    INITIAL_PHASE = Phase.FETCH_MAP
    TRANSITIONS = {
        Phase.FETCH_MAP: (Phase.PLAN,),
        Phase.PLAN: (Phase.EXECUTE,),
        Phase.EXECUTE: (Phase.DONE,),
    }

    def solve(self) -> SolveResult:
        self._begin()
        try:
            maze = self._fetch_map()

            self._transition(Phase.PLAN, detail=repr(maze))
            planning_start = time.perf_counter()
            path = self.pathfinder.find_path(maze, maze.start, maze.target)
            planning_time = time.perf_counter() - planning_start
            if self.logger is not None:
                self.logger.info(f"planned {len(path)} steps with {self.pathfinder.name} in {planning_time:.6f}s")

            self._transition(Phase.EXECUTE)
            # The fetched map is in the transport's own coordinates
            execution_time = self._execute(path, maze.start, PositionTracker(offset=(0, 0)))

            self._transition(Phase.DONE, step_count=self.execution_steps)
        except SolverError as exc:
            self._tag_failure(exc)
            raise

        result = SolveResult(
            mode=self.mode,
            pathfinding=self.pathfinder.name,
            path=path,
            execution_steps=self.execution_steps,
            planning_time=planning_time,
            execution_time=execution_time,
            maze=maze,
        )
        if self.logger is not None:
            self.logger.emit_run_summary(result)
        return result

    def _fetch_map(self) -> BoundedMaze:
        description = self.port.fetch_full_map()
        try:
            return BoundedMaze.from_flattened(description.cells, description.shape)
        except ValueError as exc:
            raise MapUnavailable(f"fetched map is unusable: {exc}") from exc
