"""Battery banks: pick digits in order to form the largest joltage."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from advent.filelib import load_no_blanks

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def parse_batteries(lines: Iterable[str]) -> list[list[int]]:
    """Turn each line of digits into a list of battery ratings."""
    banks = []
    for line in lines:
        bank = []
        for char in line:
            if char not in _DIGITS:
                raise ValueError(f"battery rating must be a digit 0-9: {char!r}")
            bank.append(int(char))
        banks.append(bank)
    return banks


def get_joltage(bank: Sequence[int]) -> int:
    """Largest two-digit number formed by two batteries kept in order."""
    tens = max(bank[:-1])
    index = list(bank).index(tens)
    ones = max(bank[index + 1 :])
    logger.info("Returning %d and %d", tens, ones)
    return tens * 10 + ones


def get_large_joltage(bank: Sequence[int], steps: int) -> int:
    """Largest number formed by choosing `steps` batteries kept in order."""
    total = 0
    remaining = list(bank)
    for step in range(steps, 0, -1):
        if len(remaining) < step:
            raise ValueError(f"bank too short to pick {step} more batteries")
        search = remaining[: len(remaining) - step + 1]
        logger.info("Searching %s", search)
        best = max(search)
        index = remaining.index(best)
        total += best * 10 ** (step - 1)
        remaining = remaining[index + 1 :]
    return total


def puzzle_a(lines: Iterable[str]) -> int:
    """Sum the best two-battery joltage of every bank."""
    return sum(get_joltage(bank) for bank in parse_batteries(lines))


def puzzle_b(lines: Iterable[str]) -> int:
    """Sum the best twelve-battery joltage of every bank."""
    return sum(get_large_joltage(bank, 12) for bank in parse_batteries(lines))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Solve both parts for an input file and print the answers."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("filename", nargs="?", default="input")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    lines = load_no_blanks(args.filename)
    print(f"Answer to 1st question: {puzzle_a(lines)}")
    print(f"Answer to 2nd question: {puzzle_b(lines)}")