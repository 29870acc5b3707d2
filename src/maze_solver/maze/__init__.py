"""Maze models: dense bounded grid and sparse unbounded map."""

from .bounded import BoundedMaze
from .cell import CellType
from .geometry import MOVE_DELTAS, MOVE_ORDER, Move, Position, manhattan, step
from .sensors import SensorSnapshot
from .unbounded import ORIGIN, UnboundedMaze

__all__ = [
    "BoundedMaze",
    "CellType",
    "MOVE_DELTAS",
    "MOVE_ORDER",
    "Move",
    "ORIGIN",
    "Position",
    "SensorSnapshot",
    "UnboundedMaze",
    "manhattan",
    "step",
]
