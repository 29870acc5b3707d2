"""Eight-direction sensor readings around the robot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

from .cell import SENSED_STATES, CellType
from .geometry import Position

# Reading name -> (row offset, col offset)
SENSOR_OFFSETS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
    "up_left": (-1, -1),
    "up_right": (-1, 1),
    "down_left": (1, -1),
    "down_right": (1, 1),
}


@dataclass(frozen=True)
class SensorSnapshot:
    """Readings of the 8 cells around the robot at one instant.

    ``sequence`` counts the transport actions (moves and resets) confirmed
    before the reading was taken, so a reading can be matched to the state
    after the most recent move.
    """

    up: CellType
    down: CellType
    left: CellType
    right: CellType
    up_left: CellType
    up_right: CellType
    down_left: CellType
    down_right: CellType
    sequence: int = 0

    def __post_init__(self) -> None:
        for name in SENSOR_OFFSETS:
            value = getattr(self, name)
            if value not in SENSED_STATES:
                raise ValueError(f"Sensor reading {name}={value} is not FREE, BLOCKED or TARGET")

    @classmethod
    def from_codes(cls, codes: Mapping[str, str], sequence: int = 0) -> SensorSnapshot:
        """Build from single-letter codes keyed by reading name."""
        missing = set(SENSOR_OFFSETS) - set(codes)
        if missing:
            raise ValueError(f"Missing sensor readings: {sorted(missing)}")
        return cls(**{name: CellType.from_code(codes[name]) for name in SENSOR_OFFSETS}, sequence=sequence)

    def cells_around(self, pos: Position) -> Iterator[tuple[Position, CellType]]:
        """Absolute positions and states of every reading, relative to ``pos``."""
        for name, (dr, dc) in SENSOR_OFFSETS.items():
            yield (pos[0] + dr, pos[1] + dc), getattr(self, name)

    def sees_target(self) -> bool:
        return any(getattr(self, name) is CellType.TARGET for name in SENSOR_OFFSETS)
