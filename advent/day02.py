"""Product id ranges: find ids made of a digit sequence repeated."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import Optional

from advent.filelib import load_no_blanks

logger = logging.getLogger(__name__)


def get_ranges(line: str) -> list[tuple[int, int]]:
    """Parse 'a-b,c-d,...' into inclusive (first, last) pairs."""
    ranges = []
    for range_string in line.split(","):
        first, dash, last = range_string.partition("-")
        if not dash:
            raise ValueError(f"range without a dash: {range_string!r}")
        ranges.append((int(first), int(last)))
    return ranges


def _find(first: int, last: int, predicate: Callable[[int], bool]) -> list[int]:
    found = []
    for number in range(first, last + 1):
        if predicate(number):
            logger.info("Found repeat: %d", number)
            found.append(number)
    return found


def is_repeated_twice(number: int) -> bool:
    """True if the number's digits are one sequence written exactly twice."""
    if number < 10:
        return False
    digits = str(number)
    if len(digits) % 2 != 0:
        return False
    half = len(digits) // 2
    divisor = 10**half
    return number // divisor == number % divisor


def is_repeated_any_number_of_times(number: int) -> bool:
    """True if the number's digits are one sequence written two or more times."""
    digits = str(number)
    doubled = digits + digits
    return digits in doubled[1:-1]


def find_invalid_ids(first: int, last: int) -> list[int]:
    """Ids in [first, last] made of a sequence repeated exactly twice."""
    return _find(first, last, is_repeated_twice)


def find_invalid_ids_b(first: int, last: int) -> list[int]:
    """Ids in [first, last] made of a sequence repeated any number of times."""
    return _find(first, last, is_repeated_any_number_of_times)


def _first_line(lines: Sequence[str]) -> str:
    if not lines:
        raise ValueError("at least one line of input is required")
    return lines[0]


def puzzle_a(lines: Sequence[str]) -> int:
    """Sum every id repeated exactly twice across all ranges."""
    return sum(
        sum(find_invalid_ids(first, last))
        for first, last in get_ranges(_first_line(lines))
    )


def puzzle_b(lines: Sequence[str]) -> int:
    """Sum every id repeated any number of times across all ranges."""
    return sum(
        sum(find_invalid_ids_b(first, last))
        for first, last in get_ranges(_first_line(lines))
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Solve both parts for an input file and print the answers."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("filename", nargs="?", default="input")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    lines = load_no_blanks(args.filename)
    print(f"Answer to 1st question: {puzzle_a(lines)}")
    print(f"Answer to 2nd question: {puzzle_b(lines)}")