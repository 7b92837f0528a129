"""Free-text entry prompts: input, text, password, invisible, list."""

from __future__ import annotations

from typing import Any

from ..ansi import visible_width
from ..input import KeyComboBinding, KeyEvent, bind
from .base import Prompt


class TextBuffer:
    """Editable string with a cursor, shared by string and form fields."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.cursor = len(text)

    def insert(self, chars: str) -> None:
        self.text = self.text[: self.cursor] + chars + self.text[self.cursor :]
        self.cursor += len(chars)

    def backspace(self) -> None:
        if self.cursor == 0:
            return
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.cursor -= 1

    def delete(self) -> None:
        if self.cursor >= len(self.text):
            return
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]

    def left(self) -> None:
        self.cursor = max(0, self.cursor - 1)

    def right(self) -> None:
        self.cursor = min(len(self.text), self.cursor + 1)

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.text)

    def kill_to_start(self) -> None:
        self.text = self.text[self.cursor :]
        self.cursor = 0


class StringPrompt(Prompt):
    """Single-line (or ``multiline``) text entry."""

    type_name = "input"
    shows_cursor = True

    def setup(self) -> None:
        initial = self.options.initial
        self.buffer = TextBuffer("" if initial is None else str(initial))
        self.multiline = bool(self.options.get("multiline", False))

    @property
    def value(self) -> str:
        return self.buffer.text

    @property
    def cursor(self) -> int:
        return self.buffer.cursor

    def bindings(self) -> list[KeyComboBinding]:
        bindings = [
            bind("backspace", handler=self.buffer.backspace),
            bind("delete", handler=self.buffer.delete),
            bind("home", "ctrl+a", handler=self.buffer.home),
            bind("end", "ctrl+e", handler=self.buffer.end),
            bind("ctrl+u", handler=self.buffer.kill_to_start),
        ]
        if self.multiline:
            bindings.append(bind("return", "enter", handler=self.newline))
            bindings.append(bind("ctrl+d", handler=self.submit))
        return bindings

    def newline(self) -> None:
        self.buffer.insert("\n")

    def left(self) -> None:
        self.buffer.left()

    def right(self) -> None:
        self.buffer.right()

    def on_character(self, ch: str, event: KeyEvent) -> None:
        self.buffer.insert(ch)

    def mask(self, text: str) -> str:
        """Return what the user sees for ``text``."""
        return text

    def render_value(self) -> str:
        return self.mask(self.buffer.text)

    def value_cursor(self) -> tuple[int, int]:
        before = self.mask(self.buffer.text[: self.buffer.cursor])
        row = before.count("\n")
        return row, visible_width(before.rsplit("\n", 1)[-1])

    def format_value(self, value: Any) -> str:
        return self.mask("" if value is None else str(value))


class TextPrompt(StringPrompt):
    type_name = "text"


class PasswordPrompt(StringPrompt):
    """Shows one mask glyph per character typed."""

    type_name = "password"

    def mask(self, text: str) -> str:
        return "\n".join(self.symbols.mask * len(line) for line in text.split("\n"))


class InvisiblePrompt(StringPrompt):
    """Shows nothing at all while typing."""

    type_name = "invisible"

    def mask(self, text: str) -> str:
        return ""


class ListPrompt(StringPrompt):
    """Text entry submitted as a list split on ``separator`` (default ``,``)."""

    type_name = "list"

    def setup(self) -> None:
        self.separator = str(self.options.get("separator", ",")) or ","
        initial = self.options.initial
        if isinstance(initial, (list, tuple)):
            initial = f"{self.separator} ".join(str(item) for item in initial)
        self.buffer = TextBuffer("" if initial is None else str(initial))
        self.multiline = False

    def split(self, text: str) -> list[str]:
        return [part.strip() for part in text.split(self.separator) if part.strip()]

    def submit_value(self) -> list[str]:
        return self.split(self.buffer.text)

    def current_value(self) -> list[str]:
        return self.split(self.buffer.text)

    def format_value(self, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value)
        return super().format_value(value)


__all__ = ["TextBuffer", "StringPrompt", "TextPrompt", "PasswordPrompt", "InvisiblePrompt", "ListPrompt"]
