"""Reading puzzle input files and parsing common line formats."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def _lines(text: str) -> list[str]:
    """Split text into lines on '\\n', dropping a trailing '\\r' from each line."""
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    return [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]


def load(filename: str | Path) -> str:
    """Return the whole contents of a text file."""
    return Path(filename).read_text()


def remove_blanks(text_input: str) -> list[str]:
    """Return the lines of the text that are not empty or whitespace only."""
    return [line for line in _lines(text_input) if line.strip()]


def load_no_blanks(filename: str | Path) -> list[str]:
    """Load a file and return its non-blank lines."""
    return remove_blanks(load(filename))


def strings_to_ints(strings: Iterable[str]) -> list[int]:
    """Parse every string as an integer."""
    return [int(s) for s in strings]


def load_as_ints(filename: str | Path) -> list[int]:
    """Load a file and parse each non-blank line as an integer."""
    return strings_to_ints(load_no_blanks(filename))


def split_lines_by_blanks(lines: str) -> list[list[str]]:
    """Group lines into blocks separated by blank lines; empty blocks are dropped."""
    groups: list[list[str]] = []
    current: list[str] = []
    for line in _lines(lines):
        if line.strip():
            current.append(line)
        else:
            groups.append(current)
            current = []
    groups.append(current)
    return [group for group in groups if group]


def parse_csv_int_lines(lines: Iterable[Iterable[str]]) -> list[int]:
    """Flatten groups of comma separated lines into a single list of integers."""
    return [
        int(field)
        for group in lines
        for line in group
        for field in (part.strip() for part in line.split(","))
        if field
    ]


def parse_line_to_linecoords(line: str) -> tuple[int, int, int, int]:
    """Parse a line of the form 'x1,y1 -> x2,y2' into four integers."""
    numbers = [
        int(part.strip())
        for pair in line.split("->")
        for part in pair.split(",")
    ]
    return numbers[0], numbers[1], numbers[2], numbers[3]


def parse_path_to_coords(line: str) -> list[tuple[int, int]]:
    """Parse a path of the form 'x1,y1 -> x2,y2 -> ...' into coordinate pairs."""
    coords = []
    for pair in line.split("->"):
        if "," not in pair:
            raise ValueError(f"coordinate pair without a comma: {pair!r}")
        x, y = pair.split(",", 1)
        coords.append((int(x.strip()), int(y.strip())))
    return coords