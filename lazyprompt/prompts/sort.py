"""Reorder choices by dragging the focused item."""

from __future__ import annotations

from typing import Any

from ..input import KeyComboBinding, bind
from .array import ArrayPrompt


class SortPrompt(ArrayPrompt):
    """The value is every choice value in the final display order.

    ``shift+up``/``shift+down`` swap the focused item with its neighbour; the
    cursor follows the item. ``numbered`` adds 1-based ranks to the display.
    """

    type_name = "sort"

    def setup(self) -> None:
        super().setup()
        self.numbered = bool(self.options.get("numbered", False))

    def bindings(self) -> list[KeyComboBinding]:
        return [
            bind("shift+up", handler=lambda: self.shift(-1)),
            bind("shift+down", handler=lambda: self.shift(1)),
        ]

    def shift(self, direction: int) -> None:
        if self.cursor < 0:
            return
        position = self.order.index(self.cursor)
        target = position + direction
        if not 0 <= target < len(self.order):
            return
        self.order[position], self.order[target] = self.order[target], self.order[position]

    @property
    def value(self) -> list[Any]:
        return [self.choices[idx].value for idx in self.selectable_indices()]

    def format_value(self, value: Any) -> str:
        return ", ".join(self.choices[idx].message for idx in self.selectable_indices())

    def render_value(self) -> str:
        return self.theme.style("muted", "(shift+up/down to move)")

    def render_row(self, idx: int) -> str:
        if not self.numbered:
            return super().render_row(idx)
        rank = self.order.index(idx) + 1
        width = len(str(len(self.order)))
        return f"{self.pointer(idx)} {self.theme.style('muted', f'{rank:>{width}}.')} {self.choice_label(idx)}"


__all__ = ["SortPrompt"]
