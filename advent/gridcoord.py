"""Coordinates on a bounded grid and on an unbounded plane."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from advent.direction import Direction

_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTHEAST: (1, -1),
    Direction.NORTHWEST: (-1, -1),
    Direction.SOUTHEAST: (1, 1),
    Direction.SOUTHWEST: (-1, 1),
}


@total_ordering
@dataclass(frozen=True)
class GridCoordinate:
    """A non-negative position on a grid; ordered by row (y), then column (x)."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"grid coordinates must be non-negative: ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __add__(self, other: GridCoordinate) -> GridCoordinate:
        if not isinstance(other, GridCoordinate):
            return NotImplemented
        return GridCoordinate(self.x + other.x, self.y + other.y)

    def __lt__(self, other: GridCoordinate) -> bool:
        if not isinstance(other, GridCoordinate):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)


@total_ordering
@dataclass(frozen=True)
class GridCoordinateInf:
    """A position on an unbounded plane; ordered by y, then x."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __add__(self, other: GridCoordinateInf) -> GridCoordinateInf:
        if not isinstance(other, GridCoordinateInf):
            return NotImplemented
        return GridCoordinateInf(self.x + other.x, self.y + other.y)

    def __lt__(self, other: GridCoordinateInf) -> bool:
        if not isinstance(other, GridCoordinateInf):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def move_dir(self, direction: Direction) -> GridCoordinateInf:
        """Return the neighbouring position one step in the given direction."""
        return self.move_dir_dist(direction, 1)

    def move_dir_dist(self, direction: Direction, distance: int) -> GridCoordinateInf:
        """Return the position `distance` steps away in the given direction."""
        dx, dy = _STEPS[direction]
        return GridCoordinateInf(self.x + dx * distance, self.y + dy * distance)


GridCoordinateInf64 = GridCoordinateInf