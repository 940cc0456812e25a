"""Shared type definitions for koch-ascii.

Value types and enums used across geometry, animation, renderers, and the
controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class Point:
    """A 2D point in drawing-surface coordinates (y grows downward)."""

    x: float
    y: float


PointSequence = list[Point]
Segment = tuple[Point, Point]


class AnimationState(Enum):
    Idle = auto()
    Loading = auto()
    Revealing = auto()
    Cancelled = auto()


class Signal(Enum):
    LoadingStarted = auto()
    RevealStarted = auto()
    Done = auto()
    Cancelled = auto()
    Busy = auto()
    PromptLevel = auto()  # direction/mode changed, a level must be picked again


class Status(Enum):
    Accepted = auto()
    Busy = auto()
