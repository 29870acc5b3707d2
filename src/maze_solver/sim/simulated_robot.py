"""In-process robot over a known maze, implementing ``RobotPort``.

Used by the tests, the benchmark and the CLI in place of a real transport.
The knobs inject the transport failures the solvers must handle.
"""

from __future__ import annotations

import time
from typing import Optional

from maze_solver.errors import MapUnavailable, MoveRejected, ResetFailed, SensingFailed
from maze_solver.maze.cell import CellType
from maze_solver.maze.geometry import Move, Position, step
from maze_solver.maze.sensors import SENSOR_OFFSETS, SensorSnapshot
from maze_solver.ports import MapDescription, MoveAck, ResetAck


class SimulatedRobot:
    """Robot on a static grid with an action counter.

    Parameters
    ----------
    description : MapDescription
        Flattened map with exactly one robot cell, which is the spawn.
    map_available : bool
        When False, ``fetch_full_map`` raises MapUnavailable.
    stale_readings : int
        After every move or reset, this many readings still describe the
        previous position and carry the previous action counter.
    fail_sense_after : int, optional
        Number of successful readings before ``sense`` raises SensingFailed.
    fail_reset : bool
        When True, ``reset`` raises ResetFailed.
    report_positions : bool
        When False, acknowledgements carry no position.
    move_delay : float
        Seconds to sleep after each move.
    """

    def __init__(
        self,
        description: MapDescription,
        map_available: bool = True,
        stale_readings: int = 0,
        fail_sense_after: Optional[int] = None,
        fail_reset: bool = False,
        report_positions: bool = True,
        move_delay: float = 0.0,
    ) -> None:
        height, width = description.shape
        if len(description.cells) != height * width:
            raise ValueError(f"grid size mismatch: expected {height * width}, got {len(description.cells)}")

        self.height = height
        self.width = width
        self.terrain: dict[Position, CellType] = {}
        spawn: Optional[Position] = None
        for index, code in enumerate(description.cells):
            pos = (index // width, index % width)
            cell = CellType.from_code(code)
            if cell is CellType.ROBOT:
                spawn = pos
                cell = CellType.FREE
            self.terrain[pos] = cell
        if spawn is None:
            raise ValueError("map has no robot cell")

        self.spawn: Position = spawn
        self.map_available = map_available
        self.stale_readings = stale_readings
        self.fail_sense_after = fail_sense_after
        self.fail_reset = fail_reset
        self.report_positions = report_positions
        self.move_delay = move_delay

        self.position: Position = spawn
        self.sequence = 0
        self.moves = 0
        self.readings = 0
        self.resets = 0
        self.trail: list[Position] = [spawn]
        self._previous_position: Position = spawn
        self._pending_stale = 0

    # ------------------------------------------------------------------
    # RobotPort
    # ------------------------------------------------------------------

    def fetch_full_map(self) -> MapDescription:
        if not self.map_available:
            raise MapUnavailable("map service is not available")
        cells = []
        for r in range(self.height):
            for c in range(self.width):
                cell = CellType.ROBOT if (r, c) == self.position else self.terrain[(r, c)]
                cells.append(cell.code)
        return MapDescription(cells=cells, shape=(self.height, self.width))

    def sense(self) -> SensorSnapshot:
        if self.fail_sense_after is not None and self.readings >= self.fail_sense_after:
            raise SensingFailed(f"sensor went silent after {self.readings} readings")
        self.readings += 1
        if self._pending_stale > 0:
            self._pending_stale -= 1
            return self._snapshot(self._previous_position, max(self.sequence - 1, 0))
        return self._snapshot(self.position, self.sequence)

    def move(self, move: Move) -> MoveAck:
        destination = step(self.position, move)
        cell = self.terrain.get(destination)
        if cell is None or cell is CellType.BLOCKED:
            raise MoveRejected(f"cannot move {move.value} from {self.position} into {destination}")

        self._previous_position = self.position
        self.position = destination
        self.sequence += 1
        self.moves += 1
        self.trail.append(destination)
        self._pending_stale = self.stale_readings
        if self.move_delay > 0:
            time.sleep(self.move_delay)
        return MoveAck(position=self._reported(), sequence=self.sequence)

    def reset(self) -> ResetAck:
        if self.fail_reset:
            raise ResetFailed("reset was not acknowledged")
        self._previous_position = self.position
        self.position = self.spawn
        self.sequence += 1
        self.resets += 1
        self.trail = [self.spawn]
        self._pending_stale = self.stale_readings
        return ResetAck(position=self._reported(), sequence=self.sequence)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def at_target(self) -> bool:
        return self.terrain[self.position] is CellType.TARGET

    def _reported(self) -> Optional[Position]:
        return self.position if self.report_positions else None

    def _snapshot(self, pos: Position, sequence: int) -> SensorSnapshot:
        readings = {}
        for name, (dr, dc) in SENSOR_OFFSETS.items():
            # Off-grid is indistinguishable from a wall
            readings[name] = self.terrain.get((pos[0] + dr, pos[1] + dc), CellType.BLOCKED)
        return SensorSnapshot(**readings, sequence=sequence)
