"""Shared cursor and window handling for prompts over a ``choices`` list.

The cursor always holds a choice index (identity), never a display position,
so sorting and filtering never change what is focused. Navigation wraps at
both ends and skips choices that are disabled or separators; with no
selectable choice visible the cursor is ``-1``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..choices import Choice, normalize_choices
from .base import Prompt


class ArrayPrompt(Prompt):
    """Base for variants that navigate a list of ``Choice`` items."""

    unique_choices: ClassVar[bool] = False

    def setup(self) -> None:
        self.choices: list[Choice] = self.load_choices()
        self.order: list[int] = list(range(len(self.choices)))
        if self.options.get("sort", False):
            self.order.sort(key=lambda idx: self.choices[idx].message.lower())
        limit = self.options.get("limit")
        self.limit: int | None = limit if isinstance(limit, int) and limit > 0 else None
        self._top = 0
        self.cursor = self.initial_cursor()

    def load_choices(self) -> list[Choice]:
        return normalize_choices(self.options.get("choices"), unique=self.unique_choices)

    # -- navigation ----------------------------------------------------

    def visible_indices(self) -> list[int]:
        """Choice indices currently shown, in display order."""
        return self.order

    def selectable_indices(self) -> list[int]:
        return [idx for idx in self.visible_indices() if self.choices[idx].selectable]

    def initial_cursor(self) -> int:
        initial = self.options.initial
        visible = self.visible_indices()
        if isinstance(initial, bool):
            initial = None
        start: int | None = None
        if isinstance(initial, int) and 0 <= initial < len(self.choices):
            start = initial
        elif isinstance(initial, str):
            start = next((idx for idx, choice in enumerate(self.choices) if choice.name == initial), None)
        if start is not None and start in visible:
            if self.choices[start].selectable:
                return start
            return self._seek(visible.index(start), 1)
        return self._seek(-1, 1)

    def _seek(self, position: int, direction: int) -> int:
        """Return the next selectable index after display ``position`` (wrapping)."""
        visible = self.visible_indices()
        count = len(visible)
        for step in range(1, count + 1):
            candidate = visible[(position + direction * step) % count]
            if self.choices[candidate].selectable:
                return candidate
        return -1

    def move(self, direction: int) -> None:
        visible = self.visible_indices()
        if not visible:
            self.cursor = -1
            return
        position = visible.index(self.cursor) if self.cursor in visible else -1
        if position == -1 and direction < 0:
            position = 0
        self.cursor = self._seek(position, direction)

    def up(self) -> None:
        self.move(-1)

    def down(self) -> None:
        self.move(1)

    @property
    def focused(self) -> Choice | None:
        return self.choices[self.cursor] if self.cursor >= 0 else None

    # -- rendering -----------------------------------------------------

    def window(self) -> list[int]:
        """Visible indices limited to ``limit`` rows kept around the cursor."""
        visible = self.visible_indices()
        if self.limit is None or len(visible) <= self.limit:
            self._top = 0
            return visible
        position = visible.index(self.cursor) if self.cursor in visible else 0
        if position < self._top:
            self._top = position
        elif position >= self._top + self.limit:
            self._top = position - self.limit + 1
        self._top = max(0, min(self._top, len(visible) - self.limit))
        return visible[self._top : self._top + self.limit]

    def pointer(self, idx: int) -> str:
        if idx == self.cursor:
            return self.theme.style("primary", self.symbols.pointer)
        return " " * len(self.symbols.pointer)

    def choice_label(self, idx: int) -> str:
        choice = self.choices[idx]
        if choice.is_separator:
            return self.theme.style("muted", choice.message or self.symbols.line * 8)
        if choice.disabled:
            return f"{self.theme.style('disabled', choice.message)} {self.theme.style('muted', choice.disabled_reason)}"
        label = self.highlight(choice.message)
        if idx == self.cursor:
            label = self.theme.style("primary", label)
        if choice.hint:
            label += " " + self.theme.style("muted", choice.hint)
        return label

    def highlight(self, text: str) -> str:
        return text

    def empty_message(self) -> str:
        return self.theme.style("muted", "No choices available")

    def render_body(self) -> list[str]:
        rows = self.window()
        if not rows:
            return [self.empty_message()]
        return [self.render_row(idx) for idx in rows]

    def render_row(self, idx: int) -> str:
        return f"{self.pointer(idx)} {self.choice_label(idx)}"

    def messages_for(self, values: Any) -> str:
        """Join the messages of choices whose values are in ``values``."""
        wanted = list(values) if isinstance(values, (list, tuple)) else [values]
        labels = []
        for value in wanted:
            match = next((c for c in self.choices if c.value == value and not c.is_separator), None)
            labels.append(match.message if match is not None else str(value))
        return ", ".join(labels)


__all__ = ["ArrayPrompt"]
