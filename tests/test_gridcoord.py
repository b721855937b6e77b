import pytest

from advent.direction import Direction
from advent.gridcoord import GridCoordinate, GridCoordinateInf, GridCoordinateInf64


def test_format_coord():
    assert f"{GridCoordinate(2321, 9875)}" == "(2321, 9875)"
    assert f"{GridCoordinateInf(-3213, -9932)}" == "(-3213, -9932)"


def test_add_coords():
    a = GridCoordinate(2321, 9875)
    b = GridCoordinate(1, 5)
    assert a + b == GridCoordinate(2322, 9880)


def test_add_coords_small():
    assert GridCoordinate(3, 5) + GridCoordinate(7, 11) == GridCoordinate(10, 16)


def test_add_inf_coords():
    assert GridCoordinateInf(-3, 5) + GridCoordinateInf(1, -7) == GridCoordinateInf(-2, -2)


def test_order_coords():
    early_y_late_x = GridCoordinate(5000, 0)
    early_x_late_y = GridCoordinate(0, 4000)
    early_y_early_x = GridCoordinate(5, 0)
    late_x_late_y = GridCoordinate(5000, 4000)
    assert early_y_late_x == early_y_late_x
    assert early_y_late_x < early_x_late_y
    assert early_x_late_y > early_y_late_x
    items = [late_x_late_y, early_x_late_y, early_y_late_x, early_y_early_x, early_y_late_x]
    assert sorted(items) == [
        early_y_early_x,
        early_y_late_x,
        early_y_late_x,
        early_x_late_y,
        late_x_late_y,
    ]


def test_order_inf_coords():
    items = [GridCoordinateInf(0, 1), GridCoordinateInf(5, -1), GridCoordinateInf(-5, 1)]
    assert sorted(items) == [
        GridCoordinateInf(5, -1),
        GridCoordinateInf(-5, 1),
        GridCoordinateInf(0, 1),
    ]


def test_negative_grid_coordinate_rejected():
    with pytest.raises(ValueError):
        GridCoordinate(-1, 0)
    with pytest.raises(ValueError):
        GridCoordinate(0, -1)


def test_coordinates_hashable():
    seen = {GridCoordinate(1, 2), GridCoordinate(1, 2), GridCoordinate(2, 1)}
    assert len(seen) == 2


_WALK = [
    (Direction.NORTH, (0, -1)),
    (Direction.WEST, (-1, -1)),
    (Direction.NORTHWEST, (-2, -2)),
    (Direction.NORTHEAST, (-1, -3)),
    (Direction.EAST, (0, -3)),
    (Direction.SOUTH, (0, -2)),
    (Direction.SOUTHEAST, (1, -1)),
    (Direction.SOUTHWEST, (0, 0)),
]


def test_move_on_infinite_grid():
    cur = GridCoordinateInf(0, 0)
    for direction, (x, y) in _WALK:
        cur = cur.move_dir(direction)
        assert cur == GridCoordinateInf(x, y)


def test_move_on_infinite_grid_distance():
    cur = GridCoordinateInf(0, 0)
    for direction, (x, y) in _WALK:
        cur = cur.move_dir_dist(direction, 1)
        assert cur == GridCoordinateInf(x, y)


def test_move_on_infinite_grid64():
    cur = GridCoordinateInf64(0, 0)
    for direction, (x, y) in _WALK:
        cur = cur.move_dir(direction)
        assert cur == GridCoordinateInf64(x, y)


def test_move_dir_dist_longer():
    start = GridCoordinateInf(0, 0)
    assert start.move_dir_dist(Direction.NORTH, 3) == GridCoordinateInf(0, -3)
    assert start.move_dir_dist(Direction.SOUTHWEST, 4) == GridCoordinateInf(-4, 4)