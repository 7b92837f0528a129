"""Terminal control helpers for prompt sessions.

``TerminalController`` owns the raw-mode lifecycle of the input tty.
``Screen`` owns the output side: frame redraws and cursor visibility.
"""

from __future__ import annotations

import contextlib
import shutil
import sys
import termios
import tty
from collections.abc import Iterator, Sequence
from typing import TextIO

from .ansi import physical_rows

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
ERASE_DOWN = "\x1b[J"


class TerminalController:
    """Switch the input tty into raw mode and back."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_raw_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Keep output post-processing so "\n" still returns the carriage.
        mode = termios.tcgetattr(self.stdin_fd)
        mode[1] = mode[1] | termios.OPOST | termios.ONLCR
        termios.tcsetattr(self.stdin_fd, termios.TCSADRAIN, mode)

    def disable_raw_mode(self) -> None:
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        try:
            self.enable_raw_mode()
            yield
        finally:
            self.disable_raw_mode()


class Screen:
    """Redraw a multi-line frame in place below the current cursor line.

    The screen remembers how many physical rows the last frame used and where
    it left the cursor, so ``clear`` can move back to the top of the frame and
    erase it before the next one is written.
    """

    def __init__(self, stream: TextIO | None = None, columns: int | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._columns = columns
        self._rows = 0
        self._cursor_row = 0
        self._cursor_hidden = False

    @property
    def columns(self) -> int:
        if self._columns is not None:
            return max(1, self._columns)
        return max(1, shutil.get_terminal_size((80, 24)).columns)

    def write(self, text: str) -> None:
        if not text:
            return
        self.stream.write(text)
        self.stream.flush()

    def clear(self) -> None:
        """Erase the last drawn frame; does nothing when none is on screen."""
        if self._rows == 0:
            return
        up = f"\x1b[{self._cursor_row}A" if self._cursor_row else ""
        self.write("\r" + up + ERASE_DOWN)
        self._rows = 0
        self._cursor_row = 0

    def draw(self, lines: Sequence[str], cursor: tuple[int, int] | None = None) -> None:
        """Replace the current frame with ``lines``.

        ``cursor`` is ``(line_index, column)`` in display cells; when omitted
        the cursor stays after the last line.
        """
        self.clear()
        lines = list(lines) or [""]
        columns = self.columns
        self.write("\n".join(lines))
        heights = [physical_rows(line, columns) for line in lines]
        self._rows = sum(heights)
        self._cursor_row = self._rows - 1
        if cursor is None:
            return

        line_idx, col = cursor
        line_idx = max(0, min(line_idx, len(lines) - 1))
        col = max(0, col)
        target_row = sum(heights[:line_idx]) + col // columns
        target_col = col % columns
        moves = ""
        up = self._cursor_row - target_row
        if up > 0:
            moves += f"\x1b[{up}A"
        moves += "\r"
        if target_col:
            moves += f"\x1b[{target_col}C"
        self.write(moves)
        self._cursor_row = target_row

    def newline(self) -> None:
        """Move below the frame and forget it, leaving it on screen."""
        down = self._rows - 1 - self._cursor_row
        if down > 0:
            self.write(f"\x1b[{down}B")
        self.write("\n")
        self._rows = 0
        self._cursor_row = 0

    def cursor_hide(self) -> None:
        if self._cursor_hidden:
            return
        self.write(HIDE_CURSOR)
        self._cursor_hidden = True

    def cursor_show(self) -> None:
        if not self._cursor_hidden:
            return
        self.write(SHOW_CURSOR)
        self._cursor_hidden = False

    @property
    def cursor_hidden(self) -> bool:
        return self._cursor_hidden

    @property
    def rows(self) -> int:
        return self._rows


__all__ = ["TerminalController", "Screen", "HIDE_CURSOR", "SHOW_CURSOR", "ERASE_DOWN"]
