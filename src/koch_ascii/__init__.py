"""koch-ascii: animated Koch-curve fractals as ASCII/Unicode text output."""

from koch_ascii.config import MAX_DEPTH, MIN_DEPTH, RenderConfig, SurfaceGeometry
from koch_ascii.controller import KochController
from koch_ascii.errors import InvalidDepthError, KochError
from koch_ascii.geometry import assemble, base_shape, generate_points, subdivide
from koch_ascii.renderers.charset import DOTS_X, DOTS_Y
from koch_ascii.renderers.text import TextRenderer
from koch_ascii.types import Point, Signal, Status

__all__ = [
    "MAX_DEPTH",
    "MIN_DEPTH",
    "InvalidDepthError",
    "KochController",
    "KochError",
    "Point",
    "RenderConfig",
    "Signal",
    "Status",
    "SurfaceGeometry",
    "assemble",
    "base_shape",
    "generate_points",
    "render_koch",
    "subdivide",
]


def render_koch(
    depth: int,
    outward: bool = False,
    single_edge: bool = False,
    columns: int = 80,
    rows: int = 40,
    unicode: bool = True,
) -> str:
    """Render a Koch curve to ASCII/Unicode art.

    Args:
        depth: Recursion depth, 0 to 5.
        outward: Erect bumps outward instead of inward.
        single_edge: Draw one enlarged edge instead of the hexagon.
        columns: Output width in characters.
        rows: Output height in lines.
        unicode: True for Braille dot cells; False for ASCII stroke characters.

    Returns:
        The rendered string, one line per row.

    Raises:
        InvalidDepthError: If depth is outside [0, 5].
    """
    config = RenderConfig(depth=depth, outward=outward, single_edge=single_edge)
    geometry = SurfaceGeometry.for_size(columns * DOTS_X, rows * DOTS_Y)
    points = generate_points(config, geometry)
    return TextRenderer(unicode=unicode).render(points, columns, rows, depth)
