"""Board coordinates and movement directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def row_change(self) -> int:
        return _DELTAS[self][0]

    @property
    def col_change(self) -> int:
        return _DELTAS[self][1]

    @classmethod
    def of(cls, row_change: int, col_change: int) -> Direction:
        """Return the direction of a unit step.

        Raises ``ValueError`` for the zero vector or any non-unit step.
        """
        for direction, delta in _DELTAS.items():
            if delta == (row_change, col_change):
                return direction
        raise ValueError(
            f"({row_change}, {col_change}) is not a unit step."
        )


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Position:
    """A cell on the board. Bounds are not checked here."""

    row: int
    col: int

    # -- neighbours -----------------------------------------------------------

    def get_target(self, direction: Direction) -> Position:
        return Position(
            self.row + direction.row_change,
            self.col + direction.col_change,
        )

    def get_up(self) -> Position:
        return self.get_target(Direction.UP)

    def get_right(self) -> Position:
        return self.get_target(Direction.RIGHT)

    def get_down(self) -> Position:
        return self.get_target(Direction.DOWN)

    def get_left(self) -> Position:
        return self.get_target(Direction.LEFT)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
