"""Typed failures surfaced by the solvers.

Nothing here is retried inside the core. When a failure escapes a solver
phase, ``phase`` names the phase that was running.
"""

from __future__ import annotations

from typing import Optional


class SolverError(Exception):
    """Base class for every failure a solve run can end with."""

    def __init__(self, message: str = "", phase: Optional[str] = None) -> None:
        super().__init__(message)
        self.phase = phase

    def __str__(self) -> str:
        message = super().__str__()
        if self.phase:
            return f"[{self.phase}] {message}"
        return message


class MapUnavailable(SolverError):
    """The transport could not supply the full map."""


class NoPathExists(SolverError):
    """The target is unreachable under 4-connectivity."""


class IncompleteMaze(SolverError):
    """Conversion attempted before the target was found or connected to the origin."""


class SensingFailed(SolverError):
    """No usable sensor reading could be obtained."""


class MoveRejected(SolverError):
    """The transport refused a move (e.g. the robot bumped a wall)."""


class ResetFailed(SolverError):
    """The transport could not confirm the robot was returned to its start."""


class DesynchronizedPosition(SolverError):
    """The reported robot position disagrees with the internal model."""


class ExplorationLimitExceeded(SolverError):
    """Exploration took more steps than allowed without completing."""
