"""Dial rotations: count how often a 0-99 dial lands on, or passes, zero."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from advent.filelib import load_no_blanks
from advent.mathlib import modulus

logger = logging.getLogger(__name__)

DIAL_SIZE = 100
START_POSITION = 50


def convert_ints(lines: Iterable[str]) -> list[int]:
    """Turn rotations such as 'L68' or 'R48' into signed amounts (left is negative)."""
    rotations = []
    for line in lines:
        amount = int(line[1:])
        rotations.append(-amount if line.startswith("L") else amount)
    return rotations


def move_int(value: int, rotation: int) -> int:
    """Turn the dial from value by rotation and return where it stops."""
    return modulus(value + rotation, DIAL_SIZE)


def move_counting_zeros(value: int, rotation: int) -> tuple[int, int]:
    """Turn the dial and return the new position and how many times zero was reached."""
    count = abs(rotation) // DIAL_SIZE
    remainder = abs(rotation) % DIAL_SIZE
    if rotation < 0:
        remainder = -remainder
    logger.info("After dividing, have count %d, and remainder %d", count, remainder)

    addition = value + remainder
    modded = modulus(addition, DIAL_SIZE)
    if (value != 0 and modded != addition) or addition == 0:
        count += 1
        logger.info("Detected past 0, count is %d", count)
    return modded, count


def puzzle_a(lines: Iterable[str]) -> int:
    """Count how many rotations leave the dial resting at zero."""
    position = START_POSITION
    count = 0
    for rotation in convert_ints(lines):
        position = move_int(position, rotation)
        if position == 0:
            count += 1
    return count


def puzzle_b(lines: Iterable[str]) -> int:
    """Count every time the dial points at zero, including while passing it."""
    position = START_POSITION
    count = 0
    for rotation in convert_ints(lines):
        logger.info("v %d, i %d", position, rotation)
        position, passed = move_counting_zeros(position, rotation)
        count += passed
    return count


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Solve both parts for an input file and print the answers."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("filename", nargs="?", default="input")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    lines = load_no_blanks(args.filename)
    print(f"Answer to 1st question: {puzzle_a(lines)}")
    print(f"Answer to 2nd question: {puzzle_b(lines)}")