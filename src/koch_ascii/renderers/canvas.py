"""Canvas — 2D character grid used as a drawing surface."""

from __future__ import annotations

import math
from collections.abc import Sequence

from koch_ascii.renderers.charset import BRAILLE_BITS, DOTS_X, DOTS_Y, CharSet, Strokes, braille_char
from koch_ascii.types import Point


class Canvas:
    """A character grid that plots lines at sub-cell resolution.

    Plot space is ``columns * DOTS_X`` by ``rows * DOTS_Y`` units. Unicode
    canvases show each cell as a Braille dot matrix; ASCII canvases show the
    merged stroke directions that crossed the cell.
    """

    def __init__(self, columns: int, rows: int, charset: CharSet = CharSet.Unicode) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError(f"canvas must be at least 1x1, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows
        self.charset = charset
        self.dots: list[list[int]] = [[0] * columns for _ in range(rows)]
        self.strokes: list[list[Strokes]] = [[Strokes() for _ in range(columns)] for _ in range(rows)]

    @property
    def width(self) -> int:
        return self.columns * DOTS_X

    @property
    def height(self) -> int:
        return self.rows * DOTS_Y

    def clear(self) -> None:
        for row in range(self.rows):
            for col in range(self.columns):
                self.dots[row][col] = 0
                self.strokes[row][col] = Strokes()

    def plot(self, x: int, y: int, stroke: Strokes | None = None) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        col, dx = divmod(x, DOTS_X)
        row, dy = divmod(y, DOTS_Y)
        self.dots[row][col] |= BRAILLE_BITS[dy][dx]
        if stroke is not None:
            self.strokes[row][col] = self.strokes[row][col].merge(stroke)

    def line(self, a: Point, b: Point, pen: int = 1) -> None:
        """Rasterise a -> b with a DDA walk and a square pen."""
        dx = b.x - a.x
        dy = b.y - a.y
        stroke = Strokes.from_delta(dx, dy)
        steps = max(1, math.ceil(max(abs(dx), abs(dy))))
        for i in range(steps + 1):
            t = i / steps
            x = math.floor(a.x + dx * t)
            y = math.floor(a.y + dy * t)
            for ox in range(pen):
                for oy in range(pen):
                    self.plot(x + ox, y + oy, stroke)

    def draw_polyline(self, points: Sequence[Point], line_width: float = 1.0) -> None:
        pen = max(1, round(line_width))
        for i in range(len(points) - 1):
            self.line(points[i], points[i + 1], pen)

    def cell(self, col: int, row: int) -> str:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            return " "
        if self.charset == CharSet.Unicode:
            return braille_char(self.dots[row][col])
        return self.strokes[row][col].to_char()

    def to_string(self) -> str:
        lines = []
        for row in range(self.rows):
            line = "".join(self.cell(col, row) for col in range(self.columns)).rstrip()
            lines.append(line)
        out = "\n".join(lines)
        trimmed = out.rstrip("\n")
        return trimmed + "\n"
