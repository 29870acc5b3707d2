"""Exploration strategies that build an unbounded map from sensor readings."""

from .base import ExplorationStrategy, find_route, has_undiscovered_neighbor
from .recursive_backtracker import RecursiveBacktracker
from .wall_follower import WallFollower

__all__ = [
    "ExplorationStrategy",
    "RecursiveBacktracker",
    "WallFollower",
    "find_route",
    "has_undiscovered_neighbor",
]
