"""Cell states shared by the bounded and unbounded maze models."""

from __future__ import annotations

from enum import Enum


class CellType(Enum):
    """Occupancy of a single maze cell."""

    FREE = 0
    BLOCKED = 1
    TARGET = 2
    ROBOT = 3  # Live occupant in fetched maps only; persisted as FREE

    @property
    def code(self) -> str:
        return _CELL_TO_CODE[self]

    @property
    def is_walkable(self) -> bool:
        return self in (CellType.FREE, CellType.TARGET, CellType.ROBOT)

    @classmethod
    def from_code(cls, code: str) -> CellType:
        """Parse a single-letter wire code (``f``, ``b``, ``t``, ``r``)."""
        try:
            return _CODE_TO_CELL[code.lower()]
        except KeyError:
            raise ValueError(f"Invalid cell code: {code!r}") from None

    @classmethod
    def coerce(cls, value: CellType | str) -> CellType:
        if isinstance(value, CellType):
            return value
        return cls.from_code(value)


_CELL_TO_CODE: dict[CellType, str] = {
    CellType.FREE: "f",
    CellType.BLOCKED: "b",
    CellType.TARGET: "t",
    CellType.ROBOT: "r",
}
_CODE_TO_CELL: dict[str, CellType] = {code: cell for cell, code in _CELL_TO_CODE.items()}

# States a sensor can report for a neighboring cell
SENSED_STATES = frozenset({CellType.FREE, CellType.BLOCKED, CellType.TARGET})
