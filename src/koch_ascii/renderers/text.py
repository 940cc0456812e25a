"""Static text renderer."""

from __future__ import annotations

from collections.abc import Sequence

from koch_ascii.config import line_width_for_depth
from koch_ascii.renderers.canvas import Canvas
from koch_ascii.renderers.charset import CharSet
from koch_ascii.types import Point


class TextRenderer:
    """Renders a finished point sequence onto a fresh canvas."""

    def __init__(self, unicode: bool = True) -> None:
        self.charset = CharSet.Unicode if unicode else CharSet.Ascii

    def canvas(self, columns: int, rows: int) -> Canvas:
        return Canvas(columns, rows, self.charset)

    def render(self, points: Sequence[Point], columns: int, rows: int, depth: int | None = None) -> str:
        if len(points) < 2:
            return ""
        canvas = self.canvas(columns, rows)
        canvas.draw_polyline(points, line_width_for_depth(depth))
        return canvas.to_string()
