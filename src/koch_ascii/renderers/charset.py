"""Character sets: Braille dot cells and ASCII stroke merging."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


# Each character cell covers DOTS_X x DOTS_Y plot units.
DOTS_X = 2
DOTS_Y = 4

BRAILLE_BLANK = 0x2800

# Braille dot bits indexed [row][col] within a cell.
BRAILLE_BITS: tuple[tuple[int, int], ...] = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)


def braille_char(mask: int) -> str:
    """Braille character for a dot mask; a blank cell becomes a space."""
    if mask == 0:
        return " "
    return chr(BRAILLE_BLANK + mask)


@dataclass
class Strokes:
    """Which stroke directions pass through an ASCII cell."""

    horizontal: bool = False
    vertical: bool = False
    rising: bool = False  # /
    falling: bool = False  # \

    @classmethod
    def from_delta(cls, dx: float, dy: float) -> Strokes:
        """Stroke for a segment direction, in screen coordinates (y down)."""
        adx, ady = abs(dx), abs(dy)
        if ady * 2 <= adx:
            return cls(horizontal=True)
        if adx * 2 <= ady:
            return cls(vertical=True)
        if (dx > 0) == (dy > 0):
            return cls(falling=True)
        return cls(rising=True)

    def merge(self, other: Strokes) -> Strokes:
        return Strokes(
            horizontal=self.horizontal or other.horizontal,
            vertical=self.vertical or other.vertical,
            rising=self.rising or other.rising,
            falling=self.falling or other.falling,
        )

    def to_char(self) -> str:
        key = (self.horizontal, self.vertical, self.rising, self.falling)
        match key:
            case (False, False, False, False):
                return " "
            case (True, False, False, False):
                return "-"
            case (False, True, False, False):
                return "|"
            case (False, False, True, False):
                return "/"
            case (False, False, False, True):
                return "\\"
            case (True, True, False, False):
                return "+"
            case (False, False, True, True):
                return "X"
            case _:
                return "*"
