from __future__ import annotations

from enum import Enum

Position = tuple[int, int]


class Move(Enum):
    """Single-cell cardinal step. Positions are (row, col); UP decreases the row."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return MOVE_DELTAS[self]

    def turn_left(self) -> Move:
        return _LEFT_OF[self]

    def turn_right(self) -> Move:
        return _RIGHT_OF[self]

    def reverse(self) -> Move:
        return _REVERSE_OF[self]


MOVE_DELTAS: dict[Move, tuple[int, int]] = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}

# Neighbor priority shared by every algorithm
MOVE_ORDER: tuple[Move, ...] = (Move.UP, Move.RIGHT, Move.DOWN, Move.LEFT)

_LEFT_OF = {Move.UP: Move.LEFT, Move.LEFT: Move.DOWN, Move.DOWN: Move.RIGHT, Move.RIGHT: Move.UP}
_RIGHT_OF = {Move.UP: Move.RIGHT, Move.RIGHT: Move.DOWN, Move.DOWN: Move.LEFT, Move.LEFT: Move.UP}
_REVERSE_OF = {Move.UP: Move.DOWN, Move.DOWN: Move.UP, Move.LEFT: Move.RIGHT, Move.RIGHT: Move.LEFT}


def step(pos: Position, move: Move) -> Position:
    dr, dc = MOVE_DELTAS[move]
    return (pos[0] + dr, pos[1] + dc)


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
