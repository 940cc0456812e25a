"""Base shapes: the hexagon outline or the single-edge baseline."""

from __future__ import annotations

import math

from koch_ascii.config import EDGE_MARGIN, RenderConfig, SurfaceGeometry
from koch_ascii.types import Point, Segment

HEXAGON_SIDES: int = 6


def hexagon_vertices(center_x: float, center_y: float, radius: float) -> list[Point]:
    """Six vertices on a circle, starting at -90° and stepping 60°."""
    points: list[Point] = []
    for i in range(HEXAGON_SIDES):
        angle = (math.pi / 3) * i - math.pi / 2
        points.append(Point(center_x + radius * math.cos(angle), center_y + radius * math.sin(angle)))
    return points


def baseline(geometry: SurfaceGeometry) -> Segment:
    """Horizontal baseline across the middle of the surface."""
    start = Point(geometry.width * EDGE_MARGIN, geometry.center_y)
    end = Point(geometry.width * (1 - EDGE_MARGIN), geometry.center_y)
    return start, end


def base_shape(config: RenderConfig, geometry: SurfaceGeometry) -> list[Segment]:
    """Base segments to subdivide, in draw order.

    The last hexagon edge ends on the same vertex the first one starts on,
    so the assembled path closes exactly.
    """
    if config.single_edge:
        return [baseline(geometry)]

    vertices = hexagon_vertices(geometry.center_x, geometry.center_y, geometry.base_radius)
    return [(vertices[i], vertices[(i + 1) % HEXAGON_SIDES]) for i in range(HEXAGON_SIDES)]
