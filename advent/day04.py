"""Paper rolls on a grid: find rolls a forklift can reach and remove them repeatedly."""

from __future__ import annotations

import argparse
import logging
from collections import deque
from collections.abc import Sequence
from enum import Enum
from typing import Optional

from advent.filelib import load_no_blanks
from advent.grid import Grid, SimpleGridOverlay
from advent.gridcoord import GridCoordinate

logger = logging.getLogger(__name__)

NeighborMap = dict[GridCoordinate, int]
Queue = deque[GridCoordinate]

ACCESS_LIMIT = 4


class Cell(Enum):
    """What occupies one grid cell."""

    PAPER = "@"
    EMPTY = "."

    @property
    def character(self) -> str:
        return self.value


def parse_grid(lines: Sequence[str]) -> Grid[Cell]:
    """Build a grid of cells from lines of '@' and '.' characters."""
    if not lines:
        raise ValueError("at least one line of input is required")
    height = len(lines)
    width = len(lines[0])
    values = []
    for line in lines:
        for char in line:
            try:
                values.append(Cell(char))
            except ValueError:
                raise ValueError(f"Unknown character {char}") from None
    return Grid(width, height, values)


def _paper_neighbours(grid: Grid[Cell], coord: GridCoordinate) -> int:
    return sum(
        1
        for adjacent in grid.get_all_adjacent_coordinates(coord)
        if grid.get_value(adjacent) is Cell.PAPER
    )


def accessible_rolls(grid: Grid[Cell], max_neighbors: int) -> list[GridCoordinate]:
    """Coordinates of paper rolls with fewer than max_neighbors paper neighbours."""
    return [
        coord
        for coord in grid.coord_iter()
        if grid.get_value(coord) is Cell.PAPER
        and _paper_neighbours(grid, coord) < max_neighbors
    ]


def _log_solution(grid: Grid[Cell], solution: Sequence[GridCoordinate]) -> None:
    logger.info("Grid solution %d:\n", len(solution))
    overlay = [SimpleGridOverlay("X", coord) for coord in solution]
    for line in grid.grid_strings_with_overlay(overlay):
        logger.info("%s", line)


def puzzle_a(lines: Sequence[str]) -> int:
    """Count the rolls of paper with fewer than four paper neighbours."""
    grid = parse_grid(lines)
    solution = accessible_rolls(grid, ACCESS_LIMIT)
    _log_solution(grid, solution)
    return len(solution)


def create_search_space(grid: Grid[Cell]) -> tuple[NeighborMap, Queue]:
    """Count paper neighbours of every roll and queue the ones that start accessible."""
    neighbor_counts: NeighborMap = {}
    queue: Queue = deque()
    for coord in grid.coord_iter():
        if grid.get_value(coord) is Cell.PAPER:
            count = _paper_neighbours(grid, coord)
            neighbor_counts[coord] = count
            if count < ACCESS_LIMIT:
                queue.append(coord)
    return neighbor_counts, queue


def queue_removal(grid: Grid[Cell], neighbor_counts: NeighborMap, queue: Queue) -> int:
    """Remove queued rolls, queueing neighbours that become accessible; return how many."""
    total_removed = 0
    processed: set[GridCoordinate] = set()
    while queue:
        current = queue.popleft()
        if current in processed:
            continue
        grid.set_value(current, Cell.EMPTY)
        processed.add(current)
        total_removed += 1

        for neighbour in grid.get_all_adjacent_coordinates(current):
            count = neighbor_counts.get(neighbour)
            if count is not None and count > 0:
                count -= 1
                neighbor_counts[neighbour] = count
                if count < ACCESS_LIMIT:
                    queue.append(neighbour)
    return total_removed


def puzzle_b(lines: Sequence[str]) -> int:
    """Keep removing accessible rolls until none remain; return the total removed."""
    grid = parse_grid(lines)
    neighbor_counts, queue = create_search_space(grid)
    return queue_removal(grid, neighbor_counts, queue)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Solve both parts for an input file and print the answers."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("filename", nargs="?", default="input")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    lines = load_no_blanks(args.filename)
    print(f"Answer to 1st question: {puzzle_a(lines)}")
    print(f"Answer to 2nd question: {puzzle_b(lines)}")