"""Blind solver: EXPLORE -> RESET -> CONVERT_AND_PLAN -> EXECUTE -> DONE.

The robot only sees its 8 neighboring cells. It explores the whole reachable
maze from the spawn (the origin of an unbounded coordinate system), is reset
to the spawn, converts what it found into a bounded maze and only then plans
and executes a path to the target.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Optional

from maze_solver.algorithms.exploration import ExplorationStrategy
from maze_solver.errors import ExplorationLimitExceeded, IncompleteMaze, ResetFailed, SensingFailed, SolverError
from maze_solver.maze.bounded import BoundedMaze
from maze_solver.maze.geometry import Position, step
from maze_solver.maze.sensors import SensorSnapshot
from maze_solver.maze.unbounded import ORIGIN, UnboundedMaze
from maze_solver.registry import make_explorer

from .base import Phase, PositionTracker, Solver
from .result import SolveResult

if TYPE_CHECKING:
    from maze_solver.config import SolverConfig
    from maze_solver.debug_logger import DebugLogger
    from maze_solver.ports import ResetAck, RobotPort


class BlindSolver(Solver):
    """Explore fully, reset, convert and plan, execute.

    ``maze``, ``position`` and ``exploration_steps`` stay inspectable after a
    failure: whatever was discovered before the error is kept as is.
    """

    mode = "blind"
    INITIAL_PHASE = Phase.EXPLORE
    TRANSITIONS = {
        Phase.EXPLORE: (Phase.RESET,),
        Phase.RESET: (Phase.CONVERT_AND_PLAN,),
        Phase.CONVERT_AND_PLAN: (Phase.EXECUTE,),
        Phase.EXECUTE: (Phase.DONE,),
    }

    def __init__(
        self,
        port: RobotPort,
        config: Optional[SolverConfig] = None,
        logger: Optional[DebugLogger] = None,
        explorer: Optional[ExplorationStrategy] = None,
        last_sequence: int = 0,
    ) -> None:
        super().__init__(port, config, logger)
        self.explorer = explorer if explorer is not None else make_explorer(self.config.exploration)
        self.explorer.reset()
        self.explorer.logger = self.logger

        self.maze = UnboundedMaze()
        self.position: Position = ORIGIN
        self.exploration_steps = 0
        self.bounded: Optional[BoundedMaze] = None

        # Snapshots by position; the maze is static so a position's reading never changes
        self.sensor_cache: dict[Position, SensorSnapshot] = {}
        # Transport action counter of the last confirmed move or reset
        self.last_sequence = last_sequence

    def solve(self) -> SolveResult:
        self._begin()
        try:
            exploration_start = time.perf_counter()
            self._explore()
            exploration_time = time.perf_counter() - exploration_start

            self._transition(
                Phase.RESET,
                step_count=self.exploration_steps,
                detail=f"discovered={len(self.maze)} target={self.maze.target}",
            )
            reset_ack = self._reset()

            self._transition(Phase.CONVERT_AND_PLAN)
            planning_start = time.perf_counter()
            self.bounded = self._convert()
            path = self.pathfinder.find_path(self.bounded, self.bounded.start, self.bounded.target)
            planning_time = time.perf_counter() - planning_start
            if self.logger is not None:
                self.logger.info(f"planned {len(path)} steps with {self.pathfinder.name} on {self.bounded!r}")

            self._transition(Phase.EXECUTE)
            execution_time = self._execute(path, self.bounded.start, self._execution_tracker(reset_ack))

            self._transition(Phase.DONE, step_count=self.execution_steps)
        except SolverError as exc:
            self._tag_failure(exc)
            raise

        result = SolveResult(
            mode=self.mode,
            pathfinding=self.pathfinder.name,
            exploration=self.explorer.name,
            path=path,
            exploration_steps=self.exploration_steps,
            execution_steps=self.execution_steps,
            exploration_time=exploration_time,
            planning_time=planning_time,
            execution_time=execution_time,
            maze=self.bounded,
        )
        if self.logger is not None:
            self.logger.info(
                f"total: {result.exploration_steps} exploration + {result.execution_steps} execution "
                f"= {result.total_steps} steps"
            )
            self.logger.emit_run_summary(result)
        return result

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _explore(self) -> None:
        spawn = self.config.spawn_cell
        tracker = PositionTracker(offset=spawn) if spawn is not None else PositionTracker()

        while True:
            snapshot = self._snapshot_at(self.position)
            first_sighting = self.maze.target is None and snapshot.sees_target()
            move = self.explorer.step(self.position, snapshot, self.maze)
            if first_sighting and self.logger is not None:
                self.logger.record_target(self.maze.target, self.exploration_steps)

            if move is None:
                break
            if self.exploration_steps >= self.config.max_exploration_steps:
                raise ExplorationLimitExceeded(
                    f"{self.explorer.name} did not finish within {self.config.max_exploration_steps} steps"
                )

            ack = self.port.move(move)
            self.last_sequence = max(self.last_sequence, ack.sequence)
            self.position = step(self.position, move)
            self.exploration_steps += 1
            tracker.confirm(self.position, ack.position)
            if self.logger is not None:
                self.logger.record_step(Phase.EXPLORE.value, self.exploration_steps, self.position, move)

        if self.logger is not None:
            self.logger.info(
                f"exploration complete after {self.exploration_steps} steps: "
                f"{len(self.maze)} cells discovered, {len(self.explorer.visited)} visited"
            )

    def _reset(self) -> ResetAck:
        ack = self.port.reset()
        self.last_sequence = max(self.last_sequence, ack.sequence)
        spawn = self.config.spawn_cell
        if spawn is not None and ack.position is not None and tuple(ack.position) != tuple(spawn):
            raise ResetFailed(f"robot reported at {ack.position} after reset, expected spawn {spawn}")
        self.position = ORIGIN
        return ack

    def _convert(self) -> BoundedMaze:
        try:
            return BoundedMaze.from_unbounded(self.maze, origin_cell=self.config.spawn_cell)
        except ValueError as exc:
            raise IncompleteMaze(str(exc)) from exc

    def _execution_tracker(self, reset_ack: ResetAck) -> PositionTracker:
        # With a known spawn the bounded grid is laid out in transport coordinates
        if self.config.spawn_cell is not None:
            return PositionTracker(offset=(0, 0))
        tracker = PositionTracker()
        if reset_ack.position is not None and self.bounded is not None:
            tracker.anchor(self.bounded.start, reset_ack.position)
        return tracker

    # ------------------------------------------------------------------
    # Sensing
    # ------------------------------------------------------------------

    def _snapshot_at(self, position: Position) -> SensorSnapshot:
        cached = self.sensor_cache.get(position)
        if cached is not None:
            if self.logger is not None:
                self.logger.record_reading(position, cached=True)
            return cached

        snapshot, stale = self._fresh_snapshot()
        self.sensor_cache[position] = snapshot
        if self.logger is not None:
            self.logger.record_reading(position, cached=False, stale_discarded=stale)
        return snapshot

    def _fresh_snapshot(self) -> tuple[SensorSnapshot, int]:
        """Read until a snapshot taken after the last confirmed action arrives."""
        stale = 0
        while True:
            snapshot = self.port.sense()
            if snapshot.sequence >= self.last_sequence:
                return snapshot, stale
            stale += 1
            if stale > self.config.max_stale_readings:
                raise SensingFailed(
                    f"no reading newer than action #{self.last_sequence} after discarding {stale} stale readings"
                )
