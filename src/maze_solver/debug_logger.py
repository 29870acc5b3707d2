"""
Debug logging for solve runs.

Verbosity levels (``SolverConfig.debug``):
    0: disabled (no logger is created)
    1: phase transitions, target sightings, backtracks and run summaries
    2: full detail: every move, cache hit and discarded stale reading

All output lines are prefixed with ``[maze:debug]`` and written to
``sys.stderr`` so they can be grepped from mixed output. The end-of-run
summary is a single JSON object prefixed with ``[maze:debug:summary]``.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from maze_solver.maze.geometry import Move, Position
    from maze_solver.solvers.result import SolveResult

# ---------------------------------------------------------------------------
# Per-step record
# ---------------------------------------------------------------------------


@dataclass
class StepRecord:
    """One move issued to the robot."""

    phase: str
    step: int
    position: Position
    move: str
    detail: str = ""


# ---------------------------------------------------------------------------
# Phase timeline
# ---------------------------------------------------------------------------


@dataclass
class PhaseEvent:
    step: int
    old_phase: str
    new_phase: str


@dataclass
class RunCounters:
    """Counters accumulated over one run."""

    cache_hits: int = 0
    fresh_readings: int = 0
    stale_discarded: int = 0
    backtracks: int = 0
    target_sightings: list[tuple[int, Position]] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "cache_hits": self.cache_hits,
            "fresh_readings": self.fresh_readings,
            "stale_discarded": self.stale_discarded,
            "backtracks": self.backtracks,
            "target_sightings": [{"step": s, "position": list(p)} for s, p in self.target_sightings],
        }


# ---------------------------------------------------------------------------
# DebugLogger
# ---------------------------------------------------------------------------


class DebugLogger:
    """Collects and emits structured debug output for one solver.

    Parameters
    ----------
    level : int
        Verbosity level (1 or 2).
    output : file-like, optional
        Where to write output. Defaults to ``sys.stderr``.
    """

    PREFIX = "[maze:debug]"
    SUMMARY_PREFIX = "[maze:debug:summary]"

    def __init__(self, level: int = 1, output: Any = None) -> None:
        self.level = level
        self._out = output or sys.stderr
        self.steps: list[StepRecord] = []
        self.phases: list[PhaseEvent] = []
        self.counters = RunCounters()

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_phase(self, old_phase: str, new_phase: str, step: int = 0, detail: str = "") -> None:
        self.phases.append(PhaseEvent(step=step, old_phase=old_phase, new_phase=new_phase))
        suffix = f" {detail}" if detail else ""
        self._emit(f"phase {old_phase}->{new_phase} t={step}{suffix}")

    def record_step(self, phase: str, step: int, position: Position, move: Move, detail: str = "") -> None:
        self.steps.append(StepRecord(phase=phase, step=step, position=position, move=move.value, detail=detail))
        if self.level >= 2:
            tail = f" {detail}" if detail else ""
            self._emit(f"  {phase} t={step} ({position[0]},{position[1]}) act={move.value}{tail}")

    def record_reading(self, position: Position, cached: bool, stale_discarded: int = 0) -> None:
        if cached:
            self.counters.cache_hits += 1
        else:
            self.counters.fresh_readings += 1
        self.counters.stale_discarded += stale_discarded
        if self.level >= 2:
            if cached:
                self._emit(f"  cache hit ({position[0]},{position[1]})")
            elif stale_discarded:
                self._emit(f"  discarded {stale_discarded} stale reading(s) at ({position[0]},{position[1]})")

    def record_target(self, position: Position, step: int) -> None:
        self.counters.target_sightings.append((step, position))
        self._emit(f"target spotted at ({position[0]},{position[1]}) t={step}")

    def record_backtrack(self, position: Position, moves: list[Move], step: int) -> None:
        self.counters.backtracks += 1
        route = ",".join(move.value for move in moves)
        self._emit(f"backtrack from ({position[0]},{position[1]}) t={step} len={len(moves)} route={route}")

    def record_failure(self, phase: str, error: Exception) -> None:
        self._emit(f"FAILED in {phase}: {type(error).__name__}: {error}")

    def info(self, message: str) -> None:
        self._emit(message)

    # ------------------------------------------------------------------
    # End-of-run summary
    # ------------------------------------------------------------------

    def emit_run_summary(self, result: SolveResult) -> None:
        """Emit a structured JSON summary of a finished run."""
        summary = {
            "mode": result.mode,
            "pathfinding": result.pathfinding,
            "exploration": result.exploration,
            "exploration_steps": result.exploration_steps,
            "execution_steps": result.execution_steps,
            "total_steps": result.total_steps,
            "planning_time": round(result.planning_time, 6),
            "total_time": round(result.total_time, 6),
            "phases": [{"step": ev.step, "from": ev.old_phase, "to": ev.new_phase} for ev in self.phases],
            **self.counters.as_dict(),
        }
        line = json.dumps(summary, separators=(",", ":"))
        print(f"{self.SUMMARY_PREFIX} {line}", file=self._out, flush=True)

    def reset_run(self) -> None:
        self.steps.clear()
        self.phases.clear()
        self.counters = RunCounters()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _emit(self, msg: str) -> None:
        print(f"{self.PREFIX} {msg}", file=self._out, flush=True)
