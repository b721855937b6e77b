import pytest

from advent.direction import Direction


@pytest.mark.parametrize(
    "direction, text",
    [
        (Direction.NORTH, "NORTH"),
        (Direction.EAST, "EAST"),
        (Direction.SOUTH, "SOUTH"),
        (Direction.WEST, "WEST"),
        (Direction.NORTHEAST, "NORTHEAST"),
        (Direction.NORTHWEST, "NORTHWEST"),
        (Direction.SOUTHEAST, "SOUTHEAST"),
        (Direction.SOUTHWEST, "SOUTHWEST"),
    ],
)
def test_format_direction(direction, text):
    assert f"{direction}" == text
    assert str(direction) == text


def test_cardinal_order():
    assert Direction.cardinal() == (
        Direction.NORTH,
        Direction.EAST,
        Direction.SOUTH,
        Direction.WEST,
    )


def test_diagonal_order():
    assert Direction.diagonal() == (
        Direction.NORTHEAST,
        Direction.SOUTHEAST,
        Direction.SOUTHWEST,
        Direction.NORTHWEST,
    )


def test_all_order():
    assert Direction.all() == (
        Direction.NORTH,
        Direction.NORTHEAST,
        Direction.EAST,
        Direction.SOUTHEAST,
        Direction.SOUTH,
        Direction.SOUTHWEST,
        Direction.WEST,
        Direction.NORTHWEST,
    )


def test_all_is_union_of_cardinal_and_diagonal():
    assert set(Direction.all()) == set(Direction.cardinal()) | set(Direction.diagonal())
    assert len(Direction.all()) == 8