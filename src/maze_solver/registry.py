"""Registry of pathfinding and exploration strategies, keyed by short name."""

from __future__ import annotations

import functools
from enum import Enum
from typing import Union

from maze_solver.algorithms.exploration import ExplorationStrategy, RecursiveBacktracker, WallFollower
from maze_solver.algorithms.pathfinding import AStar, DepthFirstSearch, Dijkstra, PathfindingStrategy


class PathfindingAlgorithm(str, Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"
    DFS = "dfs"


class ExplorationAlgorithm(str, Enum):
    WALL_FOLLOWER = "wall-follower"
    RECURSIVE_BACKTRACKER = "recursive-backtracker"


PATHFINDING_STRATEGIES: dict[PathfindingAlgorithm, type[PathfindingStrategy]] = {
    PathfindingAlgorithm.ASTAR: AStar,
    PathfindingAlgorithm.DIJKSTRA: Dijkstra,
    PathfindingAlgorithm.DFS: DepthFirstSearch,
}

EXPLORATION_STRATEGIES: dict[ExplorationAlgorithm, type[ExplorationStrategy]] = {
    ExplorationAlgorithm.WALL_FOLLOWER: WallFollower,
    ExplorationAlgorithm.RECURSIVE_BACKTRACKER: RecursiveBacktracker,
}


@functools.cache
def _pathfinding_short_names() -> dict[str, PathfindingAlgorithm]:
    names: dict[str, PathfindingAlgorithm] = {}
    for algorithm, strategy in PATHFINDING_STRATEGIES.items():
        names[algorithm.value] = algorithm
        for short_name in strategy.short_names:
            names[short_name] = algorithm
    return names


@functools.cache
def _exploration_short_names() -> dict[str, ExplorationAlgorithm]:
    names: dict[str, ExplorationAlgorithm] = {}
    for algorithm, strategy in EXPLORATION_STRATEGIES.items():
        names[algorithm.value] = algorithm
        for short_name in strategy.short_names:
            names[short_name] = algorithm
    return names


def list_pathfinding_names() -> tuple[str, ...]:
    return tuple(sorted(_pathfinding_short_names()))


def list_exploration_names() -> tuple[str, ...]:
    return tuple(sorted(_exploration_short_names()))


def resolve_pathfinding_algorithm(name: Union[str, PathfindingAlgorithm]) -> PathfindingAlgorithm:
    if isinstance(name, PathfindingAlgorithm):
        return name
    names = _pathfinding_short_names()
    key = name.strip().lower()
    if key in names:
        return names[key]
    available = ", ".join(sorted(names))
    raise ValueError(f"Unknown pathfinding algorithm '{name}'. Available: {available}")


def resolve_exploration_algorithm(name: Union[str, ExplorationAlgorithm]) -> ExplorationAlgorithm:
    if isinstance(name, ExplorationAlgorithm):
        return name
    names = _exploration_short_names()
    key = name.strip().lower()
    if key in names:
        return names[key]
    available = ", ".join(sorted(names))
    raise ValueError(f"Unknown exploration algorithm '{name}'. Available: {available}")


def make_pathfinder(algorithm: Union[str, PathfindingAlgorithm]) -> PathfindingStrategy:
    return PATHFINDING_STRATEGIES[resolve_pathfinding_algorithm(algorithm)]()


def make_explorer(algorithm: Union[str, ExplorationAlgorithm]) -> ExplorationStrategy:
    return EXPLORATION_STRATEGIES[resolve_exploration_algorithm(algorithm)]()
