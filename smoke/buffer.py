"""
Script output with a stack of capture buffers.

Everything the scenario prints goes through Output. Writes land in the
innermost open capture level, or in the sink when no level is open.
"""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO


class OutputBufferError(RuntimeError):
    """Buffer operation requested while no capture level is open."""
    pass


class Capture:
    """Result of a scoped capture region; `.text` is filled on exit."""

    def __init__(self) -> None:
        self.text: str = ""


class Output:
    def __init__(self, sink: Optional[TextIO] = None):
        self._sink: TextIO = sink if sink is not None else sys.stdout
        self._levels: List[io.StringIO] = []

    # ---------------- plain output ---------------- #

    def handle(self) -> TextIO:
        """Underlying stream, bypassing any open capture level."""
        return self._sink

    def echo(self, *parts: str) -> None:
        target = self._levels[-1] if self._levels else self._sink
        for part in parts:
            target.write(part)

    def printf(self, fmt: str, *args: object) -> None:
        self.echo(fmt % args)

    # ---------------- buffering ---------------- #

    @property
    def level(self) -> int:
        return len(self._levels)

    def start(self) -> None:
        self._levels.append(io.StringIO())

    def get_contents(self) -> str:
        return self._top().getvalue()

    def get_clean(self) -> str:
        """Return the innermost level's contents and close it without emitting."""
        text = self._top().getvalue()
        self._levels.pop()
        return text

    def end_flush(self) -> None:
        """Close the innermost level, writing its contents to the parent."""
        text = self.get_clean()
        self.echo(text)

    def flush_all(self) -> None:
        while self._levels:
            self.end_flush()
        self._sink.flush()

    def discard_all(self) -> None:
        self._levels.clear()

    @contextmanager
    def capture(self) -> Iterator[Capture]:
        """
        Scoped capture region: output written inside the block is kept
        in `Capture.text` and never reaches the parent.
        """
        cap = Capture()
        self.start()
        depth = self.level
        try:
            yield cap
        finally:
            # levels opened inside the block and left open belong to it
            while self.level > depth:
                self.end_flush()
            cap.text = self.get_clean()

    def _top(self) -> io.StringIO:
        if not self._levels:
            raise OutputBufferError("no output buffer is active")
        return self._levels[-1]

    # ---------------- lifecycle ---------------- #

    def __enter__(self) -> "Output":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.flush_all()
        else:
            self.discard_all()


def ob_demo(out: Output) -> None:
    """Writes Start, captures Hello, writes End, then the captured text."""
    out.echo("Start")
    out.start()
    out.echo("Hello")
    b = out.get_clean()
    out.echo("End")
    out.echo(b)


__all__ = ["Output", "OutputBufferError", "Capture", "ob_demo"]
