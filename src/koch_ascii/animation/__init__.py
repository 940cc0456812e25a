"""Animation scheduling on a host frame clock."""

from koch_ascii.animation.clock import DEFAULT_FPS, AsyncioFrameClock, Cancellable, FrameClock
from koch_ascii.animation.scheduler import Animation, AnimationScheduler, reveal_index, reveal_progress

__all__ = [
    "DEFAULT_FPS",
    "Animation",
    "AnimationScheduler",
    "AsyncioFrameClock",
    "Cancellable",
    "FrameClock",
    "reveal_index",
    "reveal_progress",
]
