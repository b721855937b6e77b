"""Ingredient freshness: check ids against fresh ranges and count fresh ids."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from advent.filelib import load, split_lines_by_blanks

logger = logging.getLogger(__name__)

IdRange = tuple[int, int]


def parse_fresh_id_ranges(lines: Iterable[str]) -> list[IdRange]:
    """Parse lines of 'start-end' into inclusive ranges."""
    ranges = []
    for line in lines:
        logger.info("Processing %s", line)
        start, dash, end = line.partition("-")
        if not dash:
            raise ValueError(f"range without a dash: {line!r}")
        ranges.append((int(start), int(end)))
    return ranges


def parse_available_ids(lines: Iterable[str]) -> list[int]:
    """Parse each line as an ingredient id."""
    return [int(line) for line in lines]


def is_fresh(ranges: Iterable[IdRange], ingredient: int) -> bool:
    """True if the ingredient id falls inside any of the ranges."""
    for start, end in ranges:
        if start <= ingredient <= end:
            logger.info("Is fresh %d", ingredient)
            return True
    return False


def merge_ranges(ranges: Sequence[IdRange]) -> list[IdRange]:
    """Merge overlapping ranges; the input must be sorted by start."""
    if not ranges:
        raise ValueError("at least one range is required")
    merged = []
    current_start, current_end = ranges[0]
    logger.info("Expanding %d %d", current_start, current_end)
    for start, end in ranges[1:]:
        if start <= current_end:
            current_end = max(current_end, end)
        else:
            logger.info("Merged range: %d %d", current_start, current_end)
            merged.append((current_start, current_end))
            logger.info("Expanding %d %d", start, end)
            current_start, current_end = start, end
    logger.info("Merged range: %d %d", current_start, current_end)
    merged.append((current_start, current_end))
    return merged


def count_range(start: int, end: int) -> int:
    """Number of ids in the inclusive range."""
    return end - start + 1


def _sorted_ranges(groups: Sequence[Sequence[str]]) -> list[IdRange]:
    return sorted(parse_fresh_id_ranges(groups[0]), key=lambda r: r[0])


def puzzle_a(groups: Sequence[Sequence[str]]) -> int:
    """Count the available ingredient ids that are fresh."""
    ranges = _sorted_ranges(groups)
    available = parse_available_ids(groups[1])
    return sum(1 for ingredient in available if is_fresh(ranges, ingredient))


def puzzle_b(groups: Sequence[Sequence[str]]) -> int:
    """Count every id covered by at least one fresh range."""
    merged = merge_ranges(_sorted_ranges(groups))
    return sum(count_range(start, end) for start, end in merged)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Solve both parts for an input file and print the answers."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("filename", nargs="?", default="input")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    groups = split_lines_by_blanks(load(args.filename))
    print(f"Answer to 1st question: {puzzle_a(groups)}")
    print(f"Answer to 2nd question: {puzzle_b(groups)}")