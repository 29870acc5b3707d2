"""Phase machine and path execution shared by both solvers."""

from __future__ import annotations

import time
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional

from maze_solver.config import SolverConfig
from maze_solver.debug_logger import DebugLogger
from maze_solver.errors import DesynchronizedPosition, SolverError
from maze_solver.maze.geometry import Move, Position, step
from maze_solver.registry import make_pathfinder

from .result import SolveResult

if TYPE_CHECKING:
    from maze_solver.ports import RobotPort


class Phase(Enum):
    FETCH_MAP = "fetch_map"
    PLAN = "plan"
    EXPLORE = "explore"
    RESET = "reset"
    CONVERT_AND_PLAN = "convert_and_plan"
    EXECUTE = "execute"
    DONE = "done"


class PositionTracker:
    """Checks transport-reported positions against the internal model.

    Internal and external coordinates differ by a fixed offset. When the
    offset is not known up front it is anchored on the first reported
    position.
    """

    def __init__(self, offset: Optional[tuple[int, int]] = None) -> None:
        self.offset = offset

    @property
    def anchored(self) -> bool:
        return self.offset is not None

    def anchor(self, internal: Position, external: Position) -> None:
        self.offset = (external[0] - internal[0], external[1] - internal[1])

    def to_external(self, internal: Position) -> Position:
        if self.offset is None:
            raise RuntimeError("position tracker is not anchored")
        return (internal[0] + self.offset[0], internal[1] + self.offset[1])

    def confirm(self, internal: Position, reported: Optional[Position]) -> None:
        """Raise DesynchronizedPosition if ``reported`` is not where ``internal`` should be."""
        if reported is None:
            return
        reported = (int(reported[0]), int(reported[1]))
        if self.offset is None:
            self.anchor(internal, reported)
            return
        expected = self.to_external(internal)
        if reported != expected:
            raise DesynchronizedPosition(f"expected robot at {expected}, transport reports {reported}")


class Solver:
    """One-shot state machine over a robot port.

    Transitions are one-way and listed in ``TRANSITIONS``; a solver runs
    once. Any SolverError escaping ``solve`` carries the phase it failed in.
    """

    mode: ClassVar[str] = ""
    INITIAL_PHASE: ClassVar[Phase]
    TRANSITIONS: ClassVar[dict[Phase, tuple[Phase, ...]]] = {}

    def __init__(
        self,
        port: RobotPort,
        config: Optional[SolverConfig] = None,
        logger: Optional[DebugLogger] = None,
    ) -> None:
        self.port = port
        self.config = config or SolverConfig()
        if logger is None and self.config.debug > 0:
            logger = DebugLogger(level=self.config.debug)
        self.logger = logger
        self.pathfinder = make_pathfinder(self.config.pathfinding)
        self.phase = self.INITIAL_PHASE
        self.phase_history: list[Phase] = [self.INITIAL_PHASE]
        self.execution_steps = 0
        self._started = False

    def _begin(self) -> None:
        if self._started:
            raise RuntimeError(f"{type(self).__name__} already ran; create a new solver for another run")
        self._started = True

    def _transition(self, new_phase: Phase, step_count: int = 0, detail: str = "") -> None:
        if new_phase not in self.TRANSITIONS.get(self.phase, ()):
            raise RuntimeError(f"illegal phase transition {self.phase.value} -> {new_phase.value}")
        if self.logger is not None:
            self.logger.record_phase(self.phase.value, new_phase.value, step=step_count, detail=detail)
        self.phase = new_phase
        self.phase_history.append(new_phase)

    def _tag_failure(self, error: SolverError) -> None:
        if error.phase is None:
            error.phase = self.phase.value
        if self.logger is not None:
            self.logger.record_failure(self.phase.value, error)

    def _execute(self, path: list[Move], start: Position, tracker: PositionTracker) -> float:
        """Issue every move of ``path`` in order, verifying each acknowledged position.

        Returns the time spent executing.
        """
        started = time.perf_counter()
        position = start
        for index, move in enumerate(path, start=1):
            ack = self.port.move(move)
            position = step(position, move)
            self.execution_steps = index
            tracker.confirm(position, ack.position)
            if self.logger is not None:
                self.logger.record_step(Phase.EXECUTE.value, index, position, move, detail=f"{index}/{len(path)}")
        return time.perf_counter() - started

    def solve(self) -> SolveResult:
        raise NotImplementedError

