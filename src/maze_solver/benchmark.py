"""Run every algorithm of one mode against the same robot and compare them.

The robot is reset between runs. A run that fails is recorded with its error
and left out of the best/fastest comparison; it does not stop the benchmark.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from maze_solver.config import SolverConfig
from maze_solver.debug_logger import DebugLogger
from maze_solver.errors import SolverError
from maze_solver.ports import RobotPort
from maze_solver.registry import ExplorationAlgorithm, PathfindingAlgorithm
from maze_solver.solvers import BlindSolver, OmniscientSolver, SolveResult, Solver


@dataclass
class BenchmarkEntry:
    name: str
    result: Optional[SolveResult] = None
    error: Optional[SolverError] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def benchmark_omniscient(
    port: RobotPort,
    config: Optional[SolverConfig] = None,
    algorithms: Optional[Sequence[PathfindingAlgorithm]] = None,
    logger: Optional[DebugLogger] = None,
) -> list[BenchmarkEntry]:
    """Solve with each pathfinding algorithm in omniscient mode."""
    config = config or SolverConfig()
    entries = []
    for index, algorithm in enumerate(algorithms or list(PathfindingAlgorithm)):
        if index > 0:
            port.reset()
        if logger is not None:
            logger.reset_run()
        solver = OmniscientSolver(port, config.model_copy(update={"pathfinding": algorithm}), logger)
        entries.append(_run(solver.pathfinder.name, solver, logger))
    return entries


def benchmark_blind(
    port: RobotPort,
    config: Optional[SolverConfig] = None,
    algorithms: Optional[Sequence[ExplorationAlgorithm]] = None,
    logger: Optional[DebugLogger] = None,
) -> list[BenchmarkEntry]:
    """Solve with each exploration algorithm in blind mode, planning with ``config.pathfinding``."""
    config = config or SolverConfig()
    entries = []
    last_sequence = 0
    for index, algorithm in enumerate(algorithms or list(ExplorationAlgorithm)):
        if index > 0:
            last_sequence = port.reset().sequence
        if logger is not None:
            logger.reset_run()
        solver = BlindSolver(
            port,
            config.model_copy(update={"exploration": algorithm}),
            logger,
            last_sequence=last_sequence,
        )
        entries.append(_run(solver.explorer.name, solver, logger))
        last_sequence = max(last_sequence, solver.last_sequence)
    return entries


def _run(name: str, solver: Solver, logger: Optional[DebugLogger]) -> BenchmarkEntry:
    try:
        return BenchmarkEntry(name=name, result=solver.solve())
    except SolverError as exc:
        if logger is not None:
            logger.info(f"{name} failed: {exc}")
        return BenchmarkEntry(name=name, error=exc)


def best_entry(entries: Sequence[BenchmarkEntry]) -> Optional[BenchmarkEntry]:
    """Completed run with the fewest total steps; ties go to the earlier run."""
    completed = [entry for entry in entries if entry.result is not None]
    if not completed:
        return None
    return min(completed, key=lambda entry: entry.result.total_steps)  # type: ignore[union-attr]


def fastest_entry(entries: Sequence[BenchmarkEntry]) -> Optional[BenchmarkEntry]:
    completed = [entry for entry in entries if entry.result is not None]
    if not completed:
        return None
    return min(completed, key=lambda entry: entry.result.total_time)  # type: ignore[union-attr]


def format_benchmark_table(entries: Sequence[BenchmarkEntry]) -> str:
    """Render entries as a fixed-width table followed by the best and fastest runs."""
    lines = [
        f"{'algorithm':<24} {'steps':>8}  {'plan (ms)':>12}  {'total (ms)':>12}",
        "-" * 62,
    ]
    for entry in entries:
        if entry.result is None:
            lines.append(f"{entry.name:<24} {'failed':>8}  {type(entry.error).__name__}")
            continue
        result = entry.result
        lines.append(
            f"{entry.name:<24} {result.total_steps:>8}  "
            f"{result.planning_time * 1000:>12.3f}  {result.total_time * 1000:>12.3f}"
        )

    best = best_entry(entries)
    fastest = fastest_entry(entries)
    if best is not None and fastest is not None:
        lines.append("")
        lines.append(f"best: {best.name} ({best.result.total_steps} steps)")  # type: ignore[union-attr]
        lines.append(f"fastest: {fastest.name} ({fastest.result.total_time * 1000:.3f} ms)")  # type: ignore[union-attr]
    return "\n".join(lines)
