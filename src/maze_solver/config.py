"""Run configuration for the solvers.

Maze geometry that used to be baked in (spawn cell, step limits) is passed
in here so the solvers work on mazes of any size.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maze_solver.registry import (
    ExplorationAlgorithm,
    PathfindingAlgorithm,
    resolve_exploration_algorithm,
    resolve_pathfinding_algorithm,
)


class SolverConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    pathfinding: PathfindingAlgorithm = Field(default=PathfindingAlgorithm.ASTAR)
    exploration: ExplorationAlgorithm = Field(default=ExplorationAlgorithm.RECURSIVE_BACKTRACKER)

    # External grid cell the robot spawns on; the blind solver's origin maps here.
    # None means unknown: the frame is anchored on the first reported position.
    spawn_cell: Optional[tuple[int, int]] = Field(default=(1, 1))

    max_exploration_steps: int = Field(default=10_000, ge=1)
    max_stale_readings: int = Field(default=100, ge=0)

    # 0 = silent, 1 = phases and summaries, 2 = every step
    debug: int = Field(default=0, ge=0, le=2)

    @field_validator("pathfinding", mode="before")
    @classmethod
    def _resolve_pathfinding(cls, value: object) -> object:
        if isinstance(value, str):
            return resolve_pathfinding_algorithm(value)
        return value

    @field_validator("exploration", mode="before")
    @classmethod
    def _resolve_exploration(cls, value: object) -> object:
        if isinstance(value, str):
            return resolve_exploration_algorithm(value)
        return value

    @field_validator("spawn_cell")
    @classmethod
    def _check_spawn_cell(cls, value: Optional[tuple[int, int]]) -> Optional[tuple[int, int]]:
        if value is not None and (value[0] < 0 or value[1] < 0):
            raise ValueError(f"spawn_cell must be non-negative, got {value}")
        return value
