"""Drawing surface protocol."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from koch_ascii.types import Point


class Surface(Protocol):
    """Protocol that all drawing surfaces must implement.

    ``width`` and ``height`` are in the units points are expressed in.
    """

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def clear(self) -> None:
        """Discard everything drawn so far."""
        ...

    def draw_polyline(self, points: Sequence[Point], line_width: float) -> None:
        """Stroke consecutive points as connected line segments."""
        ...
