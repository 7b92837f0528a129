"""ANSI-aware text measurement utilities.

Frames mix styled text with wide characters; redraws need the number of
terminal rows each line really occupies, so widths here skip escape codes.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove escape sequences, leaving only printable text."""
    return ANSI_ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return display columns used by ``text`` once escape codes are dropped."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def physical_rows(text: str, columns: int) -> int:
    """Return how many terminal rows one logical line wraps onto."""
    if columns <= 0:
        return 1
    width = visible_width(text)
    if width == 0:
        return 1
    return (width + columns - 1) // columns


__all__ = ["ANSI_ESCAPE_RE", "TAB_STOP", "char_display_width", "strip_ansi", "visible_width", "physical_rows"]
