"""Key sources feeding decoded events to the active prompt.

``TerminalKeySource`` reads the real terminal under raw mode.
``ScriptedKeySource`` replays a fixed event list for tests and automation.
"""

from __future__ import annotations

import asyncio
import contextlib
import sys
from collections.abc import Iterable, Iterator
from typing import Protocol

from ..terminal import TerminalController
from .events import KeyEvent, keys
from .reader import read_key_event


class KeySource(Protocol):
    """Anything a prompt can pull key events from."""

    def attached(self) -> contextlib.AbstractContextManager[None]:
        """Bracket one prompt run (raw mode on a terminal)."""

    async def read(self) -> KeyEvent | None:
        """Return the next event, or ``None`` at end of input."""


class ScriptedKeySource:
    """Replay events in order, then report end of input."""

    def __init__(self, events: Iterable[str | KeyEvent] = ()) -> None:
        self._events: list[KeyEvent] = keys(*events)
        self.consumed = 0

    def feed(self, *events: str | KeyEvent) -> None:
        """Append more events to the script."""
        self._events.extend(keys(*events))

    @property
    def remaining(self) -> int:
        return len(self._events) - self.consumed

    @contextlib.contextmanager
    def attached(self) -> Iterator[None]:
        yield

    async def read(self) -> KeyEvent | None:
        if self.consumed >= len(self._events):
            return None
        event = self._events[self.consumed]
        self.consumed += 1
        return event


class TerminalKeySource:
    """Decode keys from a tty file descriptor without blocking the event loop."""

    def __init__(self, stdin_fd: int | None = None, stdout_fd: int | None = None) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self._terminal: TerminalController | None = None

    @contextlib.contextmanager
    def attached(self) -> Iterator[None]:
        if self._terminal is None:
            self._terminal = TerminalController(self.stdin_fd, self.stdout_fd)
        with self._terminal.raw_mode():
            yield

    async def read(self) -> KeyEvent | None:
        return await asyncio.to_thread(read_key_event, self.stdin_fd)


__all__ = ["KeySource", "ScriptedKeySource", "TerminalKeySource"]
