"""Pathfinding strategies over a fully known bounded maze."""

from .astar import AStar
from .base import PathfindingStrategy, reconstruct_path
from .dfs import DepthFirstSearch
from .dijkstra import Dijkstra

__all__ = ["AStar", "DepthFirstSearch", "Dijkstra", "PathfindingStrategy", "reconstruct_path"]
