"""Orchestrators that drive a robot port through their phase machines."""

from .base import Phase, PositionTracker, Solver
from .blind import BlindSolver
from .omniscient import OmniscientSolver
from .result import SolveResult

__all__ = ["BlindSolver", "OmniscientSolver", "Phase", "PositionTracker", "SolveResult", "Solver"]
