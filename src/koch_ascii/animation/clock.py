"""Frame clocks: the host-provided timing primitive the scheduler runs on."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol

DEFAULT_FPS = 60


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class FrameClock(Protocol):
    """Protocol that all frame clocks must implement.

    Times are in milliseconds. Callbacks run on the clock's own thread, one at
    a time; the scheduler never blocks inside them.
    """

    def now(self) -> float:
        """Current monotonic time in milliseconds."""
        ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> Cancellable:
        """Run callback once after delay_ms."""
        ...

    def request_frame(self, callback: Callable[[], None]) -> Cancellable:
        """Run callback at the next frame."""
        ...


class AsyncioFrameClock:
    """Frame clock driven by an asyncio event loop at a fixed frame rate."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None, fps: int = DEFAULT_FPS) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.loop = loop if loop is not None else asyncio.get_running_loop()
        self.frame_interval_ms = 1000 / fps

    def now(self) -> float:
        return self.loop.time() * 1000

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay_ms) / 1000, callback)

    def request_frame(self, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.call_later(self.frame_interval_ms, callback)
