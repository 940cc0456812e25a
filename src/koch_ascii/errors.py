"""Exception types raised by koch-ascii."""

from __future__ import annotations


class KochError(Exception):
    """Base class for all koch-ascii errors."""


class InvalidDepthError(KochError, ValueError):
    """Raised when a recursion depth falls outside the supported range."""

    def __init__(self, depth: object, lo: int, hi: int) -> None:
        super().__init__(f"depth must be in [{lo}, {hi}], got {depth!r}")
        self.depth = depth
