"""Terminal front end: repaints a canvas and turns key presses into selections."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import sys
from collections.abc import Callable

import click

from koch_ascii.animation.clock import AsyncioFrameClock, Cancellable, FrameClock
from koch_ascii.config import MAX_DEPTH, MIN_DEPTH
from koch_ascii.controller import KochController
from koch_ascii.renderers.canvas import Canvas
from koch_ascii.renderers.charset import CharSet
from koch_ascii.types import Signal

logger = logging.getLogger(__name__)

BUSY_MESSAGE = "Drawing in progress, please wait..."
PROMPT_MESSAGE = "Press a level key (0-5)"
LOADING_MESSAGE = "Loading..."
NOTICE_MS = 3000
PROMPT_DELAY_MS = 1000
STATUS_LINES = 1

_HOME = "\x1b[H"
_ERASE_LINE = "\x1b[K"
_ERASE_DOWN = "\x1b[J"
_ESC = "\x1b"
_CSI_INTRODUCERS = ("[", "O")
_LEVEL_KEYS = "".join(str(d) for d in range(MIN_DEPTH, MAX_DEPTH + 1))


def _escape_complete(seq: str) -> bool:
    """True once the bytes after ESC form a whole sequence."""
    if seq[:1] not in _CSI_INTRODUCERS:
        return True
    return len(seq) > 1 and (seq[-1].isalpha() or seq[-1] == "~")


def terminal_canvas_size(columns: int | None, rows: int | None) -> tuple[int, int]:
    """Fill in missing dimensions from the terminal, leaving room for the status line."""
    size = shutil.get_terminal_size((80, 24))
    cols = columns if columns is not None else size.columns
    lines = rows if rows is not None else max(1, size.lines - STATUS_LINES)
    return max(1, cols), max(1, lines)


class TerminalSession:
    """A canvas on screen plus a status line, driven by a KochController."""

    def __init__(
        self,
        canvas: Canvas,
        clock: FrameClock,
        ansi: bool = True,
        outward: bool = False,
        single_edge: bool = False,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self.clock = clock
        self.ansi = ansi
        self.on_finished = on_finished
        self.loading = False
        self.notice: str | None = None
        self._notice_timer: Cancellable | None = None
        self._escape: str | None = None
        self.controller = KochController(
            canvas,
            clock,
            on_signal=self.handle_signal,
            on_change=self.repaint,
            outward=outward,
            single_edge=single_edge,
        )

    @property
    def canvas(self) -> Canvas:
        return self.controller.surface  # type: ignore[return-value]

    def status_line(self) -> str:
        snap = self.controller.snapshot()
        level = "-" if snap.level is None else str(snap.level)
        direction = "outward" if snap.outward else "inward"
        mode = "single edge" if snap.single_edge else "hexagon"
        parts = [f"level {level}", direction, mode]
        if self.loading:
            parts.append(LOADING_MESSAGE)
        if self.notice:
            parts.append(self.notice)
        return " | ".join(parts)

    def frame(self) -> str:
        lines = self.canvas.to_string().rstrip("\n").split("\n")
        body = "".join(line + _ERASE_LINE + "\n" for line in lines)
        return _HOME + body + self.status_line() + _ERASE_LINE + _ERASE_DOWN

    def repaint(self) -> None:
        if self.ansi:
            click.echo(self.frame(), nl=False)

    def show_notice(self, message: str) -> None:
        if self._notice_timer is not None:
            self._notice_timer.cancel()
        self.notice = message
        self._notice_timer = self.clock.call_later(NOTICE_MS, self._clear_notice)
        self.repaint()

    def _clear_notice(self) -> None:
        self.notice = None
        self._notice_timer = None
        self.repaint()

    def handle_signal(self, signal: Signal) -> None:
        if signal == Signal.LoadingStarted:
            self.loading = True
        elif signal in (Signal.RevealStarted, Signal.Cancelled, Signal.Done):
            self.loading = False
            if signal != Signal.RevealStarted and self.on_finished is not None:
                self.on_finished()
        elif signal == Signal.Busy:
            self.show_notice(BUSY_MESSAGE)
            return
        elif signal == Signal.PromptLevel:
            self.show_notice(PROMPT_MESSAGE)
            return
        self.repaint()

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns False when the session should end.

        Escape sequences (arrow and function keys) arrive one byte at a time
        and are swallowed whole.
        """
        if self._escape is not None:
            self._escape += key
            if _escape_complete(self._escape):
                self._escape = None
            return True
        if key == _ESC:
            self._escape = ""
            return True
        if key in ("q", "Q"):
            return False
        if len(key) == 1 and key in _LEVEL_KEYS:
            self.controller.select_level(int(key))
        elif key in ("d", "D"):
            self.controller.toggle_direction()
        elif key in ("e", "E"):
            self.controller.set_single_edge(not self.controller.single_edge)
        return True

    def resize(self, columns: int, rows: int) -> None:
        self.controller.resize(Canvas(columns, rows, self.canvas.charset))


async def run_animation(canvas: Canvas, depth: int, outward: bool, single_edge: bool, ansi: bool) -> str:
    """Animate one render to completion and return the final picture."""
    loop = asyncio.get_running_loop()
    done: asyncio.Future[None] = loop.create_future()

    def finished() -> None:
        if not done.done():
            done.set_result(None)

    session = TerminalSession(
        canvas,
        AsyncioFrameClock(loop),
        ansi=ansi,
        outward=outward,
        single_edge=single_edge,
        on_finished=finished,
    )
    session.controller.select_level(depth)
    await done
    return session.canvas.to_string()


async def run_interactive(charset: CharSet, columns: int | None, rows: int | None) -> None:
    """Keyboard-driven session: 0-5 level, d direction, e edge mode, q quit."""
    import signal
    import termios
    import tty

    loop = asyncio.get_running_loop()
    clock = AsyncioFrameClock(loop)
    cols, lines = terminal_canvas_size(columns, rows)
    session = TerminalSession(Canvas(cols, lines, charset), clock)
    keys: asyncio.Queue[str] = asyncio.Queue()

    def on_winch() -> None:
        session.resize(*terminal_canvas_size(columns, rows))

    watch_winch = columns is None or rows is None
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        loop.add_reader(fd, lambda: keys.put_nowait(os.read(fd, 1).decode(errors="ignore")))
        if watch_winch:
            loop.add_signal_handler(signal.SIGWINCH, on_winch)

        click.echo(_HOME + _ERASE_DOWN, nl=False)
        session.repaint()
        clock.call_later(PROMPT_DELAY_MS, lambda: session.show_notice(PROMPT_MESSAGE))
        while session.handle_key(await keys.get()):
            pass
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        session.controller.scheduler.cancel()
        loop.remove_reader(fd)
        if watch_winch:
            loop.remove_signal_handler(signal.SIGWINCH)
        click.echo()
    logger.debug("Interactive session ended")
