"""Tests for board coordinates and directions."""

from __future__ import annotations

import pytest

from backend.models.position import Direction, Position


# -- Direction ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        ((-1, 0), Direction.UP),
        ((0, 1), Direction.RIGHT),
        ((1, 0), Direction.DOWN),
        ((0, -1), Direction.LEFT),
    ],
    ids=lambda v: str(v),
)
def test_direction_of(delta: tuple[int, int], expected: Direction) -> None:
    assert Direction.of(*delta) is expected


@pytest.mark.parametrize("delta", [(0, 0), (1, 1), (2, 0), (0, -3)])
def test_direction_of_rejects_non_unit_steps(delta: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        Direction.of(*delta)


def test_direction_deltas_round_trip() -> None:
    for direction in Direction:
        assert Direction.of(direction.row_change, direction.col_change) is direction


def test_direction_order() -> None:
    assert list(Direction) == [
        Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT,
    ]


# -- Position -----------------------------------------------------------------


def test_get_target() -> None:
    origin = Position(0, 0)
    assert origin.get_target(Direction.UP) == Position(-1, 0)
    assert origin.get_target(Direction.RIGHT) == Position(0, 1)
    assert origin.get_target(Direction.DOWN) == Position(1, 0)
    assert origin.get_target(Direction.LEFT) == Position(0, -1)


def test_shorthand_neighbours() -> None:
    p = Position(1, 1)
    assert p.get_up() == Position(0, 1)
    assert p.get_right() == Position(1, 2)
    assert p.get_down() == Position(2, 1)
    assert p.get_left() == Position(1, 0)


def test_get_target_leaves_original_unchanged() -> None:
    p = Position(1, 1)
    p.get_target(Direction.DOWN)
    assert p == Position(1, 1)


def test_positions_are_immutable() -> None:
    p = Position(0, 0)
    with pytest.raises(AttributeError):
        p.row = 2  # type: ignore[misc]


def test_equality_and_hash() -> None:
    assert Position(2, 1) == Position(2, 1)
    assert Position(2, 1) != Position(1, 2)
    assert Position(2, 1) != "(2,1)"
    assert hash(Position(2, 1)) == hash(Position(2, 1))
    assert len({Position(0, 0), Position(0, 0), Position(0, 1)}) == 2


def test_str() -> None:
    assert str(Position(0, 0)) == "(0,0)"
    assert str(Position(2, 1)) == "(2,1)"
