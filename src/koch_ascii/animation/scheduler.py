"""Progressive reveal of a precomputed point sequence over wall-clock time.

State machine::

    Idle -> Loading -> Revealing -> Idle
               \\          \\
                +-> Cancelled -> Idle

Loading lasts a fixed delay before anything is drawn. While revealing, each
frame maps the time elapsed since the reveal started to a target index and
hands the newly exposed sub-polyline to ``on_segment``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

from koch_ascii.animation.clock import Cancellable, FrameClock
from koch_ascii.config import LOADING_DELAY_MS, reveal_duration_ms
from koch_ascii.types import AnimationState, Point, Signal

logger = logging.getLogger(__name__)

SegmentCallback = Callable[[Sequence[Point]], None]
SignalCallback = Callable[[Signal], None]


def reveal_progress(elapsed_ms: float, duration_ms: float) -> float:
    """Fraction of the reveal completed, clamped to [0, 1]."""
    if duration_ms <= 0:
        return 1.0
    return min(max(elapsed_ms / duration_ms, 0.0), 1.0)


def reveal_index(elapsed_ms: float, duration_ms: float, point_count: int) -> int:
    """Index of the last point that should be visible after elapsed_ms."""
    if point_count <= 1:
        return 0
    return math.floor(reveal_progress(elapsed_ms, duration_ms) * (point_count - 1))


class Animation:
    """One in-flight reveal. Carries its own state instead of closures."""

    def __init__(
        self,
        scheduler: AnimationScheduler,
        points: Sequence[Point],
        duration_ms: float,
        on_segment: SegmentCallback,
        on_done: Callable[[], None] | None,
    ) -> None:
        self._scheduler = scheduler
        self.points = points
        self.duration_ms = duration_ms
        self.on_segment = on_segment
        self.on_done = on_done
        self.state = AnimationState.Idle
        self.last_drawn_index = 0
        self.reveal_start: float | None = None
        self.cancelled = False
        self._pending: Cancellable | None = None

    @property
    def active(self) -> bool:
        return self.state in (AnimationState.Loading, AnimationState.Revealing)

    def cancel(self) -> None:
        """Stop scheduling ticks and drop the remaining progress."""
        if not self.active:
            return
        self.cancelled = True
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.state = AnimationState.Cancelled
        logger.debug(f"Animation cancelled at index {self.last_drawn_index}/{len(self.points) - 1}")
        self._scheduler._finish(self, Signal.Cancelled)
        self.state = AnimationState.Idle

    def _start(self) -> None:
        self.state = AnimationState.Loading
        self._pending = self._scheduler.clock.call_later(LOADING_DELAY_MS, self._begin_reveal)

    def _begin_reveal(self) -> None:
        self._pending = None
        if self.cancelled:
            return
        self.state = AnimationState.Revealing
        self.reveal_start = self._scheduler.clock.now()
        self._scheduler._emit(Signal.RevealStarted)
        self._tick()

    def _tick(self) -> None:
        self._pending = None
        if self.cancelled or self.reveal_start is None:
            return

        elapsed = self._scheduler.clock.now() - self.reveal_start
        progress = reveal_progress(elapsed, self.duration_ms)
        target = reveal_index(elapsed, self.duration_ms, len(self.points))

        if target > self.last_drawn_index:
            self.on_segment(self.points[self.last_drawn_index : target + 1])
            self.last_drawn_index = target
            if self.cancelled:
                return

        if progress < 1:
            self._pending = self._scheduler.clock.request_frame(self._tick)
            return

        self.state = AnimationState.Idle
        self._scheduler._finish(self, Signal.Done)
        if self.on_done is not None:
            self.on_done()


class AnimationScheduler:
    """Runs at most one Animation at a time on a host frame clock."""

    def __init__(self, clock: FrameClock, on_signal: SignalCallback | None = None) -> None:
        self.clock = clock
        self.on_signal = on_signal
        self.current: Animation | None = None

    @property
    def is_animating(self) -> bool:
        return self.current is not None and self.current.active

    @property
    def state(self) -> AnimationState:
        if self.current is None:
            return AnimationState.Idle
        return self.current.state

    def animate(
        self,
        points: Sequence[Point],
        depth: int,
        single_edge: bool,
        on_segment: SegmentCallback,
        on_done: Callable[[], None] | None = None,
    ) -> Animation | None:
        """Start revealing points; returns None (and signals Busy) if one is already running."""
        if self.is_animating:
            logger.info("Animation request rejected: another animation is in progress")
            self._emit(Signal.Busy)
            return None

        duration = reveal_duration_ms(single_edge)
        animation = Animation(self, points, duration, on_segment, on_done)
        self.current = animation
        logger.debug(f"Animating {len(points)} points at depth {depth} over {duration} ms")
        animation._start()
        self._emit(Signal.LoadingStarted)
        return animation

    def cancel(self) -> None:
        if self.current is not None:
            self.current.cancel()

    def _finish(self, animation: Animation, signal: Signal) -> None:
        if self.current is animation:
            self.current = None
        self._emit(signal)

    def _emit(self, signal: Signal) -> None:
        if self.on_signal is not None:
            self.on_signal(signal)
