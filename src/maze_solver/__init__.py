"""Maze-solving engine for a grid robot.

Two orchestrators share the same pathfinders and maze models:

- ``OmniscientSolver`` fetches the full map, plans and executes.
- ``BlindSolver`` explores from local 8-direction sensing, is reset to its
  spawn, converts the discovered map and then plans and executes.

Both talk to the robot through ``maze_solver.ports.RobotPort``.
"""

from maze_solver.config import SolverConfig
from maze_solver.errors import (
    DesynchronizedPosition,
    ExplorationLimitExceeded,
    IncompleteMaze,
    MapUnavailable,
    MoveRejected,
    NoPathExists,
    ResetFailed,
    SensingFailed,
    SolverError,
)
from maze_solver.solvers import BlindSolver, OmniscientSolver, SolveResult

__all__ = [
    "BlindSolver",
    "DesynchronizedPosition",
    "ExplorationLimitExceeded",
    "IncompleteMaze",
    "MapUnavailable",
    "MoveRejected",
    "NoPathExists",
    "OmniscientSolver",
    "ResetFailed",
    "SensingFailed",
    "SolveResult",
    "SolverConfig",
    "SolverError",
]
