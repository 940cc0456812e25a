"""Curve geometry: base shapes, Koch subdivision and path assembly."""

from __future__ import annotations

from koch_ascii.geometry.koch import apex, height_direction, subdivide
from koch_ascii.geometry.path import assemble, generate_points
from koch_ascii.geometry.shapes import HEXAGON_SIDES, base_shape, baseline, hexagon_vertices

__all__ = [
    "HEXAGON_SIDES",
    "apex",
    "assemble",
    "base_shape",
    "baseline",
    "generate_points",
    "height_direction",
    "hexagon_vertices",
    "subdivide",
]
