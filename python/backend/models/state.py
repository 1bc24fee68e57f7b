"""Puzzle state: the block, three shoes, and the rules that move them."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from enum import IntEnum

from backend.models.position import Direction, Position

BOARD_SIZE = 3


class Piece(IntEnum):
    BLOCK = 0
    RED_SHOE = 1
    BLUE_SHOE = 2
    BLACK_SHOE = 3


# Shoes that travel with the block when they share its cell.
_DRAGGED: dict[Direction, tuple[Piece, ...]] = {
    Direction.RIGHT: (Piece.RED_SHOE, Piece.BLUE_SHOE, Piece.BLACK_SHOE),
    Direction.DOWN: (Piece.RED_SHOE, Piece.BLUE_SHOE, Piece.BLACK_SHOE),
    Direction.LEFT: (Piece.RED_SHOE, Piece.BLUE_SHOE),
}


class InvalidConfigurationError(ValueError):
    """Raised when positions do not describe a valid puzzle state."""


class PuzzleState:
    """Positions of the four pieces, indexed by :class:`Piece`.

    The block is the piece being moved; shoes standing on the same cell
    may be dragged along, depending on the direction. The puzzle is
    solved when the red and the blue shoe share a cell.

    Equality and hashing are structural. :meth:`move` is the only
    mutator, so branch from a :meth:`copy`.
    """

    def __init__(self, positions: Iterable[Position]) -> None:
        positions = list(positions)
        _check_positions(positions)
        self._positions: list[Position] = positions

    # -- construction helpers -------------------------------------------------

    @classmethod
    def initial(cls) -> PuzzleState:
        """Return the original starting layout of the puzzle."""
        return cls([
            Position(0, 0),
            Position(2, 0),
            Position(1, 1),
            Position(0, 2),
        ])

    @classmethod
    def parse(cls, text: str) -> PuzzleState:
        """Create a state from eight integers in role order.

        Accepts the display form as well as looser spellings::

            PuzzleState.parse("[(0,0),(2,0),(1,1),(0,2)]")
            PuzzleState.parse("0,0 2,0 1,1 0,2")
        """
        numbers = [int(n) for n in re.findall(r"-?\d+", text)]
        if len(numbers) != 2 * len(Piece):
            raise InvalidConfigurationError(
                f"Expected {2 * len(Piece)} coordinates, got {len(numbers)}."
            )
        return cls([
            Position(numbers[i], numbers[i + 1])
            for i in range(0, len(numbers), 2)
        ])

    # -- queries --------------------------------------------------------------

    def get_position(self, piece: Piece) -> Position:
        return self._positions[piece]

    def is_goal(self) -> bool:
        return self._same_cell(Piece.RED_SHOE, Piece.BLUE_SHOE)

    def can_move(self, direction: Direction) -> bool:
        """Check whether the block may move in *direction*."""
        block = self._positions[Piece.BLOCK]
        target = block.get_target(direction)
        if not _is_on_board(target):
            return False
        if self._is_empty(target):
            return True

        match direction:
            case Direction.RIGHT:
                return (
                    self._positions[Piece.BLACK_SHOE] == target
                    and not self._same_cell(Piece.BLOCK, Piece.BLUE_SHOE)
                )
            case Direction.DOWN:
                if (
                    self._same_cell(Piece.BLACK_SHOE, Piece.BLOCK)
                    or self._positions[Piece.BLACK_SHOE] == target
                ):
                    return False
                return self._positions[Piece.BLUE_SHOE] == target or (
                    self._positions[Piece.RED_SHOE] == target
                    and not self._same_cell(Piece.BLUE_SHOE, Piece.BLOCK)
                )
            case _:
                return False

    def legal_moves(self) -> set[Direction]:
        return {d for d in Direction if self.can_move(d)}

    # -- moves ----------------------------------------------------------------

    def move(self, direction: Direction) -> None:
        """Move the block in *direction*, dragging shoes along.

        The caller must have checked :meth:`can_move`; nothing is
        re-validated here.
        """
        if direction is Direction.UP:
            # Black carries red up only when both sit on the block.
            if self._same_cell(Piece.BLACK_SHOE, Piece.BLOCK):
                if self._same_cell(Piece.RED_SHOE, Piece.BLOCK):
                    self._step(Piece.RED_SHOE, direction)
                self._step(Piece.BLACK_SHOE, direction)
        else:
            for shoe in _DRAGGED[direction]:
                if self._same_cell(shoe, Piece.BLOCK):
                    self._step(shoe, direction)
        self._step(Piece.BLOCK, direction)

    def copy(self) -> PuzzleState:
        clone = object.__new__(type(self))
        clone._positions = list(self._positions)
        return clone

    # -- helpers --------------------------------------------------------------

    def _step(self, piece: Piece, direction: Direction) -> None:
        self._positions[piece] = self._positions[piece].get_target(direction)

    def _same_cell(self, a: Piece, b: Piece) -> bool:
        return self._positions[a] == self._positions[b]

    def _is_empty(self, position: Position) -> bool:
        return position not in self._positions

    # -- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self._positions == other._positions

    def __hash__(self) -> int:
        return hash(tuple(self._positions))

    def __str__(self) -> str:
        return "[" + ",".join(str(p) for p in self._positions) + "]"

    def __repr__(self) -> str:
        return f"PuzzleState({self})"


def _is_on_board(position: Position) -> bool:
    return 0 <= position.row < BOARD_SIZE and 0 <= position.col < BOARD_SIZE


def _check_positions(positions: Sequence[Position]) -> None:
    if len(positions) != len(Piece):
        raise InvalidConfigurationError(
            f"Expected {len(Piece)} positions, got {len(positions)}."
        )
    for position in positions:
        if not isinstance(position, Position):
            raise InvalidConfigurationError(
                f"Expected a Position, got {position!r}."
            )
        if not _is_on_board(position):
            raise InvalidConfigurationError(
                f"Position {position} is off the "
                f"{BOARD_SIZE}×{BOARD_SIZE} board."
            )
    if positions[Piece.BLUE_SHOE] == positions[Piece.BLACK_SHOE]:
        raise InvalidConfigurationError(
            "The blue and the black shoe cannot share a cell."
        )
