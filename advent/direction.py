"""Compass directions on a grid whose y axis grows downwards."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """One of the eight compass directions."""

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"
    NORTHEAST = "NORTHEAST"
    SOUTHEAST = "SOUTHEAST"
    SOUTHWEST = "SOUTHWEST"
    NORTHWEST = "NORTHWEST"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def cardinal(cls) -> tuple[Direction, ...]:
        """The four cardinal directions, clockwise from north."""
        return (cls.NORTH, cls.EAST, cls.SOUTH, cls.WEST)

    @classmethod
    def diagonal(cls) -> tuple[Direction, ...]:
        """The four diagonal directions, clockwise from north-east."""
        return (cls.NORTHEAST, cls.SOUTHEAST, cls.SOUTHWEST, cls.NORTHWEST)

    @classmethod
    def all(cls) -> tuple[Direction, ...]:
        """All eight directions, clockwise from north."""
        return (
            cls.NORTH,
            cls.NORTHEAST,
            cls.EAST,
            cls.SOUTHEAST,
            cls.SOUTH,
            cls.SOUTHWEST,
            cls.WEST,
            cls.NORTHWEST,
        )