"""Single and multiple selection prompts, including autocomplete."""

from __future__ import annotations

from typing import Any

from ..errors import ConfigurationError, ValidationFailure
from ..input import KeyComboBinding, KeyEvent, bind
from .array import ArrayPrompt

NO_CHOICES_MESSAGE = "No choices available"


class SelectPrompt(ArrayPrompt):
    """Pick one choice, or several when ``multiple`` is set.

    ``max_choices`` caps the selected set; a toggle past the cap is ignored and
    leaves a hint in ``state.error`` until the next key.
    """

    type_name = "select"
    force_multiple = False

    def setup(self) -> None:
        super().setup()
        self.multiple = self.force_multiple or bool(self.options.get("multiple", False))
        max_choices = self.options.get("max_choices")
        if max_choices is not None and (isinstance(max_choices, bool) or not isinstance(max_choices, int) or max_choices < 1):
            raise ConfigurationError(f"'max_choices' of {self.name!r} must be a positive integer")
        self.max_choices: int | None = max_choices
        self.selected: set[int] = set()
        if self.multiple:
            self.selected = self._initial_selection()

    def _initial_selection(self) -> set[int]:
        initial = self.options.initial
        names = set(initial) if isinstance(initial, (list, tuple, set)) else set()
        picked = [
            idx
            for idx, choice in enumerate(self.choices)
            if choice.selectable and (choice.enabled or choice.name in names)
        ]
        if self.max_choices is not None:
            picked = picked[: self.max_choices]
        return set(picked)

    def initial_cursor(self) -> int:
        if isinstance(self.options.initial, (list, tuple, set)):
            return self._seek(-1, 1)
        return super().initial_cursor()

    # -- selection -----------------------------------------------------

    def bindings(self) -> list[KeyComboBinding]:
        if not self.multiple:
            return []
        return [
            bind("space", handler=self.toggle),
            bind("a", handler=self.toggle_all),
            bind("i", handler=self.invert),
        ]

    def _at_capacity(self, size: int) -> bool:
        return self.max_choices is not None and size > self.max_choices

    def _limit_hint(self) -> None:
        self.state.error = f"You can select at most {self.max_choices}"

    def toggle(self) -> None:
        if self.cursor < 0 or not self.choices[self.cursor].selectable:
            return
        if self.cursor in self.selected:
            self.selected.discard(self.cursor)
            return
        if self._at_capacity(len(self.selected) + 1):
            self._limit_hint()
            return
        self.selected.add(self.cursor)

    def toggle_all(self) -> None:
        selectable = [idx for idx in self.order if self.choices[idx].selectable]
        if selectable and all(idx in self.selected for idx in selectable):
            self.selected.clear()
            return
        for idx in selectable:
            if idx in self.selected:
                continue
            if self._at_capacity(len(self.selected) + 1):
                self._limit_hint()
                break
            self.selected.add(idx)

    def invert(self) -> None:
        inverted = {idx for idx in self.order if self.choices[idx].selectable and idx not in self.selected}
        if self._at_capacity(len(inverted)):
            self._limit_hint()
            return
        self.selected = inverted

    # -- value ---------------------------------------------------------

    @property
    def value(self) -> Any:
        if self.multiple:
            return [self.choices[idx].value for idx in sorted(self.selected)]
        focused = self.focused
        return focused.value if focused is not None else None

    def submit_value(self) -> Any:
        if self.multiple:
            return self.value
        if self.focused is None:
            raise ValidationFailure(NO_CHOICES_MESSAGE)
        return self.focused.value

    def format_value(self, value: Any) -> str:
        if self.multiple:
            return ", ".join(self.choices[idx].message for idx in sorted(self.selected))
        focused = self.focused
        return focused.message if focused is not None else self.messages_for(value)

    # -- rendering -----------------------------------------------------

    def render_value(self) -> str:
        if self.multiple:
            return self.theme.style("muted", "(space to toggle, a for all, i to invert)")
        return ""

    def render_row(self, idx: int) -> str:
        if not self.multiple or not self.choices[idx].selectable:
            return super().render_row(idx)
        if idx in self.selected:
            mark = self.theme.style("success", self.symbols.radio_on)
        else:
            mark = self.theme.style("muted", self.symbols.radio_off)
        return f"{self.pointer(idx)} {mark} {self.choice_label(idx)}"


class MultiSelectPrompt(SelectPrompt):
    type_name = "multiselect"
    force_multiple = True


class AutoCompletePrompt(SelectPrompt):
    """Select from choices filtered by a typed query.

    Typing edits the query, so selection toggles use ``tab`` instead of space.
    """

    type_name = "autocomplete"
    shows_cursor = True

    def setup(self) -> None:
        self.query = ""
        super().setup()

    def bindings(self) -> list[KeyComboBinding]:
        bindings = [bind("backspace", handler=self.backspace)]
        if self.multiple:
            bindings.append(bind("tab", handler=self.toggle))
        return bindings

    def visible_indices(self) -> list[int]:
        needle = self.query.lower()
        if not needle:
            return self.order
        return [
            idx
            for idx in self.order
            if not self.choices[idx].is_separator
            and (needle in self.choices[idx].message.lower() or needle in self.choices[idx].name.lower())
        ]

    def _requery(self) -> None:
        self._top = 0
        self.cursor = self._seek(-1, 1)

    def backspace(self) -> None:
        if self.query:
            self.query = self.query[:-1]
            self._requery()

    def on_character(self, ch: str, event: KeyEvent) -> None:
        self.query += ch
        self._requery()

    def highlight(self, text: str) -> str:
        if not self.query:
            return text
        if self.options.highlight is not None:
            return self.options.highlight(text)
        start = text.lower().find(self.query.lower())
        if start < 0:
            return text
        end = start + len(self.query)
        return text[:start] + self.theme.style("em", text[start:end]) + text[end:]

    def empty_message(self) -> str:
        return self.theme.style("muted", "No matches")

    def render_value(self) -> str:
        return self.query

    def value_cursor(self) -> tuple[int, int]:
        return 0, len(self.query)


__all__ = ["SelectPrompt", "MultiSelectPrompt", "AutoCompletePrompt", "NO_CHOICES_MESSAGE"]
