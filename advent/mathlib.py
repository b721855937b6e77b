"""Small numeric helpers: modulus, interpolation, multiples, polygons, distances, lines.

Integer arguments use truncating division and remainder, matching fixed-width
integer arithmetic; float arguments use ordinary float arithmetic.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional, Union

Number = Union[int, float]


def _both_int(a: Number, b: Number) -> bool:
    return isinstance(a, int) and isinstance(b, int)


def _rem(a: Number, b: Number) -> Number:
    """Remainder whose sign follows the dividend."""
    if _both_int(a, b):
        if b == 0:
            raise ZeroDivisionError("integer remainder by zero")
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return math.fmod(a, b)


def _div(a: Number, b: Number) -> Number:
    """Division that truncates toward zero for integers."""
    if _both_int(a, b):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        q = abs(a) // abs(b)
        return -q if (a < 0) != (b < 0) else q
    return a / b


def modulus(a: Number, b: Number) -> Number:
    """Return the modulus of a by b (never the plain remainder)."""
    return _rem(_rem(a, b) + b, b)


def lerp(start: Number, end: Number, percentage: Number) -> Number:
    """Linear interpolation between start and end."""
    return start + (end - start) * percentage


def remap(value: Number, low1: Number, high1: Number, low2: Number, high2: Number) -> Number:
    """Map value linearly from the range [low1, high1] onto [low2, high2]."""
    return low2 + _div((value - low1) * (high2 - low2), high1 - low1)


def gcd(a: Number, b: Number) -> Number:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _rem(a, b)
    return a


def lcm(a: Number, b: Number) -> Number:
    """Least common multiple; zero if either argument is zero."""
    if a == 0 or b == 0:
        return a * 0
    return _div(abs(a), gcd(a, b)) * abs(b)


def _edges(points: Sequence[tuple[Number, Number]]):
    return zip(points, [*points[1:], points[0]])


def _zero_like(points: Sequence[tuple[Number, Number]]) -> Number:
    return points[0][0] * 0 if points else 0


def shoelace_area(points: Sequence[tuple[Number, Number]]) -> Number:
    """Area enclosed by a polygon given its vertices in order."""
    if len(points) < 3:
        return _zero_like(points)
    total = _zero_like(points)
    for (x1, y1), (x2, y2) in _edges(points):
        total += x1 * y2 - x2 * y1
    return abs(_div(total, 2))


def picks_theorem_i(area: Number, integer_points_boundary: Number) -> Number:
    """Number of interior lattice points from the area and boundary point count."""
    return (area + 1) - _div(integer_points_boundary, 2)


def _shoepick(points: Sequence[tuple[Number, Number]], integer_lengths: bool) -> Number:
    if len(points) < 3:
        return _zero_like(points)
    integer_points = isinstance(points[0][0], int)
    shoelace_sum = _zero_like(points)
    boundary_len = _zero_like(points)
    for (x1, y1), (x2, y2) in _edges(points):
        shoelace_sum += x1 * y2 - x2 * y1
        length = euclidean_distance(x1, y1, x2, y2)
        if integer_lengths or integer_points:
            length = int(length)
        boundary_len += length if integer_points else float(length)
    return _div(abs(shoelace_sum) - boundary_len, 2) + 1


def shoepick(points: Sequence[tuple[Number, Number]]) -> Number:
    """Interior lattice points of a polygon straight from its vertices."""
    return _shoepick(points, False)


def shoepick_intlengths(points: Sequence[tuple[Number, Number]]) -> Number:
    """As shoepick, but with each edge length truncated to a whole number."""
    return _shoepick(points, True)


def manhattan_distance(x1: Number, y1: Number, x2: Number, y2: Number) -> Number:
    """Manhattan distance between two points."""
    return abs(x1 - x2) + abs(y1 - y2)


def euclidean_distance_squared(x1: Number, y1: Number, x2: Number, y2: Number) -> Number:
    """Square of the Euclidean distance between two points."""
    a = x2 - x1
    b = y2 - y1
    return a * a + b * b


def euclidean_distance(x1: Number, y1: Number, x2: Number, y2: Number) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(float(euclidean_distance_squared(x1, y1, x2, y2)))


def determinant(x1: Number, y1: Number, x2: Number, y2: Number) -> Number:
    """Determinant of the 2x2 matrix formed by two vectors."""
    return x1 * y2 - x2 * y1


def line_intersect(
    ax: Number,
    ay: Number,
    bx: Number,
    by: Number,
    cx: Number,
    cy: Number,
    dx: Number,
    dy: Number,
) -> Optional[tuple[Number, Number]]:
    """Intersection of line AB with line CD, or None if they are parallel."""
    denominator = determinant(ax - bx, ay - by, cx - dx, cy - dy)
    if denominator == 0:
        return None
    det_ab = determinant(ax, ay, bx, by)
    det_cd = determinant(cx, cy, dx, dy)
    x = _div(det_ab * (cx - dx) - (ax - bx) * det_cd, denominator)
    y = _div(det_ab * (cy - dy) - (ay - by) * det_cd, denominator)
    return x, y