"""Centralized configuration for koch-ascii."""

from __future__ import annotations

from dataclasses import dataclass

from koch_ascii.errors import InvalidDepthError

MIN_DEPTH = 0
MAX_DEPTH = 5

LOADING_DELAY_MS = 1000
HEXAGON_DURATION_MS = 5000
SINGLE_EDGE_DURATION_MS = 3000

# Single-edge baseline spans [EDGE_MARGIN, 1 - EDGE_MARGIN] of the width.
EDGE_MARGIN = 0.05
# Leaves room for outward bumps on the hexagon.
RADIUS_RATIO = 0.40

_LINE_WIDTHS: dict[int, float] = {
    0: 2.0,
    1: 2.0,
    2: 1.5,
    3: 1.5,
    4: 0.7,
    5: 0.7,
}
DEFAULT_LINE_WIDTH = 2.0


def validate_depth(depth: int) -> int:
    """Return depth unchanged, or raise InvalidDepthError if out of range."""
    if isinstance(depth, bool) or not isinstance(depth, int) or not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise InvalidDepthError(depth, MIN_DEPTH, MAX_DEPTH)
    return depth


def line_width_for_depth(depth: int | None) -> float:
    """Stroke width used to draw a curve of the given depth."""
    if depth is None:
        return DEFAULT_LINE_WIDTH
    return _LINE_WIDTHS.get(depth, DEFAULT_LINE_WIDTH)


def reveal_duration_ms(single_edge: bool) -> int:
    return SINGLE_EDGE_DURATION_MS if single_edge else HEXAGON_DURATION_MS


@dataclass(frozen=True)
class RenderConfig:
    """One render request: recursion depth, bump direction and shape mode."""

    depth: int
    outward: bool = False
    single_edge: bool = False

    def __post_init__(self) -> None:
        validate_depth(self.depth)


@dataclass(frozen=True)
class SurfaceGeometry:
    """Where on the drawing surface the curve is laid out."""

    center_x: float
    center_y: float
    base_radius: float
    width: float
    height: float

    @classmethod
    def for_size(cls, width: float, height: float) -> SurfaceGeometry:
        """Centre the figure on a width x height surface."""
        return cls(
            center_x=width / 2,
            center_y=height / 2,
            base_radius=min(width, height) * RADIUS_RATIO,
            width=width,
            height=height,
        )
