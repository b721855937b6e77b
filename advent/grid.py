"""A fixed-size rectangular grid of values with neighbour lookup and text rendering."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, Optional, Protocol, TypeVar, Union, runtime_checkable

from advent.direction import Direction
from advent.gridcoord import GridCoordinate

T = TypeVar("T")

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTHEAST: (1, -1),
    Direction.SOUTHEAST: (1, 1),
    Direction.SOUTHWEST: (-1, 1),
    Direction.NORTHWEST: (-1, -1),
}


@runtime_checkable
class GridPrintable(Protocol):
    """Anything that renders as a single character in a grid."""

    @property
    def character(self) -> str: ...


@runtime_checkable
class GridOverlay(GridPrintable, Protocol):
    """A printable marker placed at a fixed grid position."""

    @property
    def position(self) -> GridCoordinate: ...


@dataclass(frozen=True)
class SimpleGridOverlay:
    """An overlay showing one character at one position."""

    character: str
    position: GridCoordinate


def _character_of(value: Union[str, GridPrintable]) -> str:
    return value if isinstance(value, str) else value.character


@dataclass
class Grid(Generic[T]):
    """A width x height grid stored row by row; (0, 0) is the top-left corner."""

    width: int
    height: int
    values: list[T] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.values = list(self.values)
        if self.width * self.height != len(self.values):
            raise ValueError(
                f"grid of {self.width}x{self.height} needs {self.width * self.height} "
                f"values, got {len(self.values)}"
            )

    def __copy__(self) -> Grid[T]:
        return Grid(self.width, self.height, list(self.values))

    def copy(self) -> Grid[T]:
        """Return an independent copy of the grid."""
        return copy.copy(self)

    def coord_iter(self) -> Iterator[GridCoordinate]:
        """Yield every coordinate, row by row from the top-left."""
        for y in range(self.height):
            for x in range(self.width):
                yield GridCoordinate(x, y)

    def data_copy(self) -> list[T]:
        """Return a copy of the values in row-major order."""
        return list(self.values)

    def _in_bounds(self, pos: GridCoordinate) -> bool:
        return pos.x < self.width and pos.y < self.height

    def get_value(self, pos: GridCoordinate) -> Optional[T]:
        """Return the value at pos, or None if pos lies outside the grid."""
        if not self._in_bounds(pos):
            return None
        return self.values[pos.x + pos.y * self.width]

    def set_value(self, pos: GridCoordinate, value: T) -> None:
        """Store value at pos; positions outside the grid are ignored."""
        if self._in_bounds(pos):
            self.values[pos.x + pos.y * self.width] = value

    def get_coordinate_by_direction(
        self, pos: GridCoordinate, direction: Direction
    ) -> Optional[GridCoordinate]:
        """Return the neighbour of pos in direction, or None if it is off the grid."""
        dx, dy = _OFFSETS[direction]
        x, y = pos.x + dx, pos.y + dy
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return GridCoordinate(x, y)

    def _neighbours(
        self, pos: GridCoordinate, directions: Iterable[Direction]
    ) -> list[tuple[GridCoordinate, Direction]]:
        result = []
        for direction in directions:
            coord = self.get_coordinate_by_direction(pos, direction)
            if coord is not None:
                result.append((coord, direction))
        return result

    def get_adjacent_coordinates(self, pos: GridCoordinate) -> list[GridCoordinate]:
        """Cardinal neighbours of pos inside the grid."""
        return [coord for coord, _ in self._neighbours(pos, Direction.cardinal())]

    def get_adjacent_coordinates_and_direction(
        self, pos: GridCoordinate
    ) -> list[tuple[GridCoordinate, Direction]]:
        """Cardinal neighbours of pos with the direction to each."""
        return self._neighbours(pos, Direction.cardinal())

    def get_diag_adjacent_coordinates(self, pos: GridCoordinate) -> list[GridCoordinate]:
        """Diagonal neighbours of pos inside the grid."""
        return [coord for coord, _ in self._neighbours(pos, Direction.diagonal())]

    def get_diag_adjacent_coordinates_and_direction(
        self, pos: GridCoordinate
    ) -> list[tuple[GridCoordinate, Direction]]:
        """Diagonal neighbours of pos with the direction to each."""
        return self._neighbours(pos, Direction.diagonal())

    def get_all_adjacent_coordinates(self, pos: GridCoordinate) -> list[GridCoordinate]:
        """All eight neighbours of pos inside the grid."""
        return [coord for coord, _ in self._neighbours(pos, Direction.all())]

    def get_all_adjacent_coordinates_and_direction(
        self, pos: GridCoordinate
    ) -> list[tuple[GridCoordinate, Direction]]:
        """All eight neighbours of pos with the direction to each."""
        return self._neighbours(pos, Direction.all())

    def rotate_clockwise(self) -> None:
        """Rotate the grid a quarter turn clockwise in place."""
        old = list(self.values)
        rows, cols = self.height, self.width
        new_width = rows
        for i in range(rows):
            for j in range(cols):
                self.values[j * new_width + (rows - 1 - i)] = old[i * cols + j]
        self.width, self.height = rows, cols

    def _characters(self) -> list[str]:
        return [_character_of(value) for value in self.values]

    def _rows(self, chars: list[str]) -> list[str]:
        return [
            "".join(chars[start : start + self.width])
            for start in range(0, len(chars), self.width)
        ]

    def grid_strings(self) -> list[str]:
        """Render each row of the grid as a string."""
        return self._rows(self._characters())

    def grid_strings_with_overlay(self, overlay: Iterable[GridOverlay]) -> list[str]:
        """Render the grid with each overlay's character drawn at its position."""
        chars = self._characters()
        for item in overlay:
            pos = item.position
            chars[pos.x + pos.y * self.width] = item.character
        return self._rows(chars)