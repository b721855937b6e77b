"""Vertical arithmetic worksheet: read column problems and total their answers."""

from __future__ import annotations

import argparse
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from advent.filelib import load_no_blanks

logger = logging.getLogger(__name__)


class Operation(Enum):
    """How the numbers of a problem are combined."""

    PLUS = "+"
    MULTIPLY = "*"


@dataclass
class Problem:
    """A list of numbers combined by one operation."""

    nums: list[int] = field(default_factory=list)
    op: Operation = Operation.PLUS

    def solve(self) -> int:
        """Add or multiply the numbers together."""
        logger.info("Solving: %s", self)
        if self.op is Operation.PLUS:
            return sum(self.nums)
        return math.prod(self.nums)


def _tokens(line: str) -> list[str]:
    return [token for token in line.strip().split(" ") if token]


def parse_problems(lines: Sequence[str]) -> list[Problem]:
    """Read problems column by column, with the operations on the last line."""
    if not lines:
        return []
    *number_lines, op_line = lines

    ops = []
    for token in _tokens(op_line):
        try:
            ops.append(Operation(token))
        except ValueError:
            raise ValueError(f'Unknown character in last line "{token}"') from None

    columns: list[list[int]] = [[] for _ in ops]
    for line in number_lines:
        tokens = _tokens(line)
        logger.info("Reading %s", tokens)
        if len(tokens) > len(columns):
            raise ValueError(f"more numbers than operations in line {line!r}")
        for column, token in zip(columns, tokens):
            column.append(int(token))

    return [Problem(nums, op) for op, nums in zip(ops, columns)]


def puzzle_a(lines: Sequence[str]) -> int:
    """Grand total of every problem read by whitespace-separated columns."""
    return sum(problem.solve() for problem in parse_problems(lines))


def parse_problems_rtl_col(lines: Sequence[str]) -> list[Problem]:
    """Read problems right to left, each character column forming one number."""
    max_width = max((len(line) for line in lines), default=0)
    problems = []
    current_op = Operation.MULTIPLY
    current: list[int] = []

    for x in reversed(range(max_width)):
        chars = []
        for line in lines:
            if x >= len(line):
                continue
            c = line[x]
            if c in ("+", "*"):
                current_op = Operation(c)
                # A space marks the column as non-empty without adding a digit.
                chars.append(" ")
            elif not c.isspace():
                chars.append(c)
        column = "".join(chars)
        logger.info("Reading column: %s", column)

        if not column:
            problems.append(Problem(current, current_op))
            current = []
            continue
        current.append(int(column.strip()))

    problems.append(Problem(current, current_op))
    return problems


def puzzle_b(lines: Sequence[str]) -> int:
    """Grand total of every problem read right to left by character columns."""
    return sum(problem.solve() for problem in parse_problems_rtl_col(lines))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Solve both parts for an input file and print the answers."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("filename", nargs="?", default="input")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    lines = load_no_blanks(args.filename)
    print(f"Answer to 1st question: {puzzle_a(lines)}")
    print(f"Answer to 2nd question: {puzzle_b(lines)}")