"""Controller: owns one drawing surface and routes user selections to it.

One controller is created per surface. It holds the selected level, the
direction and mode flags, the surface geometry and the animation scheduler.
While an animation is running every selection is rejected with
``Status.Busy``; nothing is queued and nothing is interrupted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from koch_ascii.animation.clock import FrameClock
from koch_ascii.animation.scheduler import AnimationScheduler, SignalCallback
from koch_ascii.config import RenderConfig, SurfaceGeometry, line_width_for_depth, validate_depth
from koch_ascii.geometry.path import generate_points
from koch_ascii.renderers.base import Surface
from koch_ascii.types import Point, Signal, Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControllerSnapshot:
    level: int | None
    outward: bool
    single_edge: bool
    is_animating: bool


class KochController:
    def __init__(
        self,
        surface: Surface,
        clock: FrameClock,
        on_signal: SignalCallback | None = None,
        on_change: Callable[[], None] | None = None,
        outward: bool = False,
        single_edge: bool = False,
    ) -> None:
        self.surface = surface
        self.on_signal = on_signal
        self.on_change = on_change
        self.level: int | None = None
        self.outward = outward
        self.single_edge = single_edge
        self.geometry = SurfaceGeometry.for_size(surface.width, surface.height)
        self.scheduler = AnimationScheduler(clock, on_signal=self._emit)

    # ─── Queries ─────────────────────────────────────────────────────────────

    @property
    def is_animating(self) -> bool:
        return self.scheduler.is_animating

    def config_for(self, level: int) -> RenderConfig:
        return RenderConfig(depth=level, outward=self.outward, single_edge=self.single_edge)

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            level=self.level,
            outward=self.outward,
            single_edge=self.single_edge,
            is_animating=self.is_animating,
        )

    # ─── User selections ─────────────────────────────────────────────────────

    def select_level(self, level: int, animate: bool = True) -> Status:
        """Draw the curve at the given level.

        Raises:
            InvalidDepthError: If level is outside the supported range.
        """
        if self._reject_if_busy("level"):
            return Status.Busy
        validate_depth(level)
        self.level = level
        self.draw_level(level, animate)
        return Status.Accepted

    def toggle_direction(self) -> Status:
        if self._reject_if_busy("direction"):
            return Status.Busy
        self.outward = not self.outward
        logger.debug(f"Direction set to {'outward' if self.outward else 'inward'}")
        self._cancel_active_state()
        self._emit(Signal.PromptLevel)
        return Status.Accepted

    def set_single_edge(self, single_edge: bool) -> Status:
        if self._reject_if_busy("mode"):
            return Status.Busy
        self.single_edge = single_edge
        logger.debug(f"Shape mode set to {'single edge' if single_edge else 'hexagon'}")
        self._cancel_active_state()
        self._emit(Signal.PromptLevel)
        return Status.Accepted

    def resize(self, surface: Surface | None = None) -> None:
        """Adopt a new surface size, redrawing the current level without animation."""
        self.scheduler.cancel()
        if surface is not None:
            self.surface = surface
        self.geometry = SurfaceGeometry.for_size(self.surface.width, self.surface.height)
        logger.debug(f"Surface resized to {self.surface.width}x{self.surface.height}")
        if self.level is not None:
            self.draw_level(self.level, animate=False)
        else:
            self.surface.clear()
            self._changed()

    # ─── Drawing ─────────────────────────────────────────────────────────────

    def draw_level(self, level: int, animate: bool = True) -> None:
        self.scheduler.cancel()
        self.surface.clear()
        self._changed()

        points = generate_points(self.config_for(level), self.geometry)
        line_width = line_width_for_depth(level)

        if not animate:
            self.surface.draw_polyline(points, line_width)
            self._changed()
            return

        def on_segment(segment: Sequence[Point]) -> None:
            self.surface.draw_polyline(segment, line_width)
            self._changed()

        self.scheduler.animate(points, level, self.single_edge, on_segment)

    def _cancel_active_state(self) -> None:
        self.level = None
        self.surface.clear()
        self._changed()

    def _reject_if_busy(self, what: str) -> bool:
        if not self.is_animating:
            return False
        logger.info(f"Rejected {what} change while drawing")
        self._emit(Signal.Busy)
        return True

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _emit(self, signal: Signal) -> None:
        if self.on_signal is not None:
            self.on_signal(signal)
