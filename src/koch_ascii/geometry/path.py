"""Stitch subdivided base segments into one continuous point sequence."""

from __future__ import annotations

from collections.abc import Sequence

from koch_ascii.config import RenderConfig, SurfaceGeometry, validate_depth
from koch_ascii.geometry.koch import subdivide
from koch_ascii.geometry.shapes import base_shape
from koch_ascii.types import Point, Segment


def assemble(segments: Sequence[Segment], depth: int, outward: bool = False) -> list[Point]:
    """Subdivide each base segment in order and join the results.

    Every joint between consecutive segments appears exactly once. A closed
    outline (last segment ending where the first starts) yields a closed loop.
    """
    validate_depth(depth)
    points: list[Point] = []
    for start, end in segments:
        edge = subdivide(start, end, depth, outward)
        if points:
            points.pop()
        points.extend(edge)
    return points


def generate_points(config: RenderConfig, geometry: SurfaceGeometry) -> list[Point]:
    """Full point sequence for one render request."""
    return assemble(base_shape(config, geometry), config.depth, config.outward)
