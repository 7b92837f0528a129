"""Yes/no confirmation."""

from __future__ import annotations

from typing import Any

from ..input import KeyComboBinding, KeyEvent, bind
from .base import Prompt


class ConfirmPrompt(Prompt):
    """Boolean answer; ``y``/``n`` set it and arrows/space/tab toggle it."""

    type_name = "confirm"

    def setup(self) -> None:
        self.value = bool(self.options.initial) if self.options.initial is not None else False

    def bindings(self) -> list[KeyComboBinding]:
        return [bind("space", "tab", handler=self.toggle)]

    def toggle(self) -> None:
        self.value = not self.value

    def left(self) -> None:
        self.toggle()

    def right(self) -> None:
        self.toggle()

    def on_character(self, ch: str, event: KeyEvent) -> None:
        if ch.lower() == "y":
            self.value = True
        elif ch.lower() == "n":
            self.value = False

    def is_empty(self, value: Any) -> bool:
        return False

    def render_value(self) -> str:
        hint = "(Y/n)" if self.value else "(y/N)"
        return f"{self.theme.style('muted', hint)} {self.theme.style('primary', self.format_value(self.value))}"

    def format_value(self, value: Any) -> str:
        return "Yes" if value else "No"


__all__ = ["ConfirmPrompt"]
