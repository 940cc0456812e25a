"""Drawing surfaces and renderers."""

from koch_ascii.renderers.base import Surface
from koch_ascii.renderers.canvas import Canvas
from koch_ascii.renderers.charset import DOTS_X, DOTS_Y, CharSet, Strokes, braille_char
from koch_ascii.renderers.text import TextRenderer

__all__ = [
    "DOTS_X",
    "DOTS_Y",
    "Canvas",
    "CharSet",
    "Strokes",
    "Surface",
    "TextRenderer",
    "braille_char",
]
