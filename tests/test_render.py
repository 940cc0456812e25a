"""Tests for the character canvas, stroke merging and the text renderer."""

from koch_ascii import render_koch
from koch_ascii.renderers import Canvas, CharSet, Strokes, TextRenderer, braille_char
from koch_ascii.renderers.charset import BRAILLE_BITS, DOTS_X, DOTS_Y
from koch_ascii.types import Point


def lit(canvas, x, y):
    if not (0 <= x < canvas.width and 0 <= y < canvas.height):
        return False
    col, dx = divmod(x, DOTS_X)
    row, dy = divmod(y, DOTS_Y)
    return bool(canvas.dots[row][col] & BRAILLE_BITS[dy][dx])


class TestStrokesFromDelta:
    def test_horizontal(self):
        assert Strokes.from_delta(5, 1).to_char() == "-"
        assert Strokes.from_delta(-5, 0).to_char() == "-"

    def test_vertical(self):
        assert Strokes.from_delta(0, 3).to_char() == "|"
        assert Strokes.from_delta(1, -4).to_char() == "|"

    def test_diagonals_in_screen_coordinates(self):
        # y grows downward: moving right and down is "\"
        assert Strokes.from_delta(2, 2).to_char() == "\\"
        assert Strokes.from_delta(2, -2).to_char() == "/"
        assert Strokes.from_delta(-2, 2).to_char() == "/"


class TestStrokesMerge:
    def test_merge_cross(self):
        h, v = Strokes(horizontal=True), Strokes(vertical=True)
        assert h.merge(v).to_char() == "+"

    def test_merge_diagonals(self):
        r, f = Strokes(rising=True), Strokes(falling=True)
        assert r.merge(f).to_char() == "X"

    def test_merge_mixed(self):
        assert Strokes(horizontal=True).merge(Strokes(rising=True)).to_char() == "*"

    def test_merge_idempotent(self):
        s = Strokes(vertical=True)
        assert s.merge(s) == s


class TestBraille:
    def test_blank_is_space(self):
        assert braille_char(0) == " "

    def test_full_cell(self):
        assert braille_char(0xFF) == "⣿"


class TestCanvasBasics:
    def test_plot_space(self):
        canvas = Canvas(10, 5)
        assert (canvas.width, canvas.height) == (20, 20)

    def test_plot_sets_dot_bit(self):
        canvas = Canvas(10, 5)
        canvas.plot(3, 6)
        assert lit(canvas, 3, 6)
        assert not lit(canvas, 2, 6)
        # dot (1, 2) of cell (1, 1) is bit 0x20
        assert canvas.cell(1, 1) == chr(0x2800 + 0x20)

    def test_out_of_bounds_ignored(self):
        canvas = Canvas(2, 2)
        canvas.plot(-1, 0)
        canvas.plot(100, 100)
        assert not lit(canvas, -1, 0)
        assert canvas.to_string() == "\n"

    def test_line_lights_endpoints(self):
        canvas = Canvas(20, 10)
        canvas.line(Point(1.0, 1.0), Point(30.0, 25.0))
        assert lit(canvas, 1, 1)
        assert lit(canvas, 30, 25)

    def test_pen_width(self):
        canvas = Canvas(10, 10)
        canvas.draw_polyline([Point(4.0, 4.0), Point(4.0, 4.0)], line_width=2.0)
        assert all(lit(canvas, x, y) for x in (4, 5) for y in (4, 5))
        assert not lit(canvas, 6, 4)

    def test_clear(self):
        canvas = Canvas(10, 5, CharSet.Ascii)
        canvas.draw_polyline([Point(0.0, 0.0), Point(19.0, 0.0)])
        assert canvas.to_string().startswith("-")
        canvas.clear()
        assert canvas.to_string() == "\n"

    def test_ascii_horizontal_line(self):
        canvas = Canvas(5, 2, CharSet.Ascii)
        canvas.draw_polyline([Point(0.0, 1.0), Point(9.0, 1.0)])
        assert canvas.to_string() == "-----\n"

    def test_to_string_strips_trailing_spaces(self):
        canvas = Canvas(10, 3)
        canvas.plot(0, 0)
        lines = canvas.to_string().split("\n")
        assert lines[0] == "⠁"
        assert canvas.to_string().endswith("\n")


class TestTextRenderer:
    def test_too_few_points(self):
        assert TextRenderer().render([Point(0.0, 0.0)], 10, 5) == ""

    def test_render_koch_unicode(self):
        out = render_koch(2, columns=40, rows=20)
        assert any("⠀" < ch <= "⣿" for ch in out)
        assert len(out.rstrip("\n").split("\n")) <= 20

    def test_render_koch_ascii(self):
        out = render_koch(1, columns=40, rows=20, unicode=False)
        assert not any("⠀" <= ch <= "⣿" for ch in out)
        assert set(out) <= set("-|/\\+X* \n")
        assert out.strip()

    def test_render_koch_single_edge_spans_width(self):
        out = render_koch(0, single_edge=True, columns=40, rows=10, unicode=False)
        lines = out.rstrip("\n").split("\n")
        row = next(line for line in lines if line.strip())
        assert row.strip() == "-" * 37
        assert row.startswith("  ")

    def test_outward_differs_from_inward(self):
        assert render_koch(2, outward=True, columns=40, rows=20) != render_koch(2, columns=40, rows=20)
