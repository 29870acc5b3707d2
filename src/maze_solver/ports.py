"""Port the solvers drive: movement, sensing, reset and the optional map fetch.

Implemented outside the core by the transport layer (and by
``maze_solver.sim.SimulatedRobot`` for tests and benchmarks). Failures are
raised as the typed errors from ``maze_solver.errors``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from maze_solver.maze.geometry import Move, Position
from maze_solver.maze.sensors import SensorSnapshot


@dataclass(frozen=True)
class MapDescription:
    """Full map as delivered by the transport: row-major codes plus (height, width)."""

    cells: list[str]
    shape: tuple[int, int]


@dataclass(frozen=True)
class MoveAck:
    """Confirmation of a completed move."""

    position: Optional[Position] = None  # Robot position as reported by the transport, if any
    sequence: int = 0  # Transport action counter after this move


@dataclass(frozen=True)
class ResetAck:
    position: Optional[Position] = None
    sequence: int = 0


class RobotPort(Protocol):
    """Interface the orchestrator uses to act on the robot."""

    def fetch_full_map(self) -> MapDescription:
        """Return the full map, or raise MapUnavailable."""
        ...

    def sense(self) -> SensorSnapshot:
        """Return the latest 8-direction reading, or raise SensingFailed."""
        ...

    def move(self, move: Move) -> MoveAck:
        """Issue one cardinal step, or raise MoveRejected."""
        ...

    def reset(self) -> ResetAck:
        """Return the robot to its start without touching discovered state, or raise ResetFailed."""
        ...
