"""Shared fixtures: a manually advanced frame clock and a recording surface."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Sequence

import pytest

from koch_ascii.types import Point


class _Timer:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """FrameClock whose time only moves when a test calls advance()."""

    def __init__(self, frame_ms: float = 16.0) -> None:
        self.time = 0.0
        self.frame_ms = frame_ms
        self._queue: list[tuple[float, int, _Timer]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self.time

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> _Timer:
        timer = _Timer(self.time + delay_ms, callback)
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        return timer

    def request_frame(self, callback: Callable[[], None]) -> _Timer:
        return self.call_later(self.frame_ms, callback)

    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def advance(self, ms: float) -> None:
        target = self.time + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.time = due
            timer.callback()
        self.time = target


class RecordingSurface:
    """Surface that remembers what was drawn on it."""

    def __init__(self, width: float = 200.0, height: float = 200.0) -> None:
        self.width = width
        self.height = height
        self.clears = 0
        self.polylines: list[tuple[list[Point], float]] = []

    def clear(self) -> None:
        self.clears += 1
        self.polylines = []

    def draw_polyline(self, points: Sequence[Point], line_width: float) -> None:
        self.polylines.append((list(points), line_width))

    def drawn_points(self) -> list[Point]:
        """All drawn polylines joined, with shared joints counted once."""
        out: list[Point] = []
        for pts, _ in self.polylines:
            if out and out[-1] == pts[0]:
                out.extend(pts[1:])
            else:
                out.extend(pts)
        return out


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
