"""Koch subdivision of a single line segment."""

from __future__ import annotations

import math

from koch_ascii.config import validate_depth
from koch_ascii.types import Point

_HALF_SQRT3 = math.sqrt(3) / 2


def height_direction(outward: bool) -> int:
    """+1 erects bumps inward, -1 outward."""
    return -1 if outward else 1


def apex(p1: Point, p3: Point, outward: bool) -> Point:
    """Third vertex of the equilateral triangle erected on p1 -> p3."""
    h = height_direction(outward)
    dx = p3.x - p1.x
    dy = p3.y - p1.y
    return Point(
        p1.x + 0.5 * dx - h * _HALF_SQRT3 * dy,
        p1.y + 0.5 * dy + h * _HALF_SQRT3 * dx,
    )


def subdivide(start: Point, end: Point, depth: int, outward: bool = False) -> list[Point]:
    """Expand start -> end into a Koch polyline of the given depth.

    The result starts at ``start``, ends at ``end`` and has ``4**depth + 1``
    points; shared vertices between the four sub-curves appear once.

    Raises:
        InvalidDepthError: If depth is outside the supported range.
    """
    validate_depth(depth)
    return _subdivide(start, end, depth, outward)


def _subdivide(start: Point, end: Point, depth: int, outward: bool) -> list[Point]:
    if depth == 0:
        return [start, end]

    dx = end.x - start.x
    dy = end.y - start.y
    p1 = Point(start.x + dx / 3, start.y + dy / 3)
    p3 = Point(start.x + (2 * dx) / 3, start.y + (2 * dy) / 3)
    p2 = apex(p1, p3, outward)

    result: list[Point] = []
    for a, b in ((start, p1), (p1, p2), (p2, p3)):
        result.extend(_subdivide(a, b, depth - 1, outward)[:-1])
    result.extend(_subdivide(p3, end, depth - 1, outward))
    return result
