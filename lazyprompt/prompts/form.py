"""Multi-field prompts: form, editable, and template snippets."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from ..ansi import visible_width
from ..choices import Choice, normalize_choices
from ..errors import ConfigurationError, ValidationFailure
from ..input import KeyComboBinding, KeyEvent, bind
from .array import ArrayPrompt
from .string import TextBuffer


class FormPrompt(ArrayPrompt):
    """Each choice is a named text field; the value is ``{name: text}``.

    ``tab``/``down`` focus the next field and ``shift+tab``/``up`` the previous
    one, wrapping. With ``required`` every editable field must be filled.
    """

    type_name = "form"
    shows_cursor = True
    unique_choices = True

    def setup(self) -> None:
        super().setup()
        seeds = self.options.initial if isinstance(self.options.initial, Mapping) else {}
        self.fields: dict[int, TextBuffer] = {}
        for idx, choice in enumerate(self.choices):
            if choice.is_separator:
                continue
            seed = seeds.get(choice.name, choice.initial)
            self.fields[idx] = TextBuffer("" if seed is None else str(seed))

    def initial_cursor(self) -> int:
        return self._seek(-1, 1)

    def bindings(self) -> list[KeyComboBinding]:
        return [
            bind("tab", handler=self.down),
            bind("shift+tab", handler=self.up),
            bind("backspace", handler=lambda: self._edit(TextBuffer.backspace)),
            bind("delete", handler=lambda: self._edit(TextBuffer.delete)),
            bind("home", "ctrl+a", handler=lambda: self._edit(TextBuffer.home)),
            bind("end", "ctrl+e", handler=lambda: self._edit(TextBuffer.end)),
            bind("ctrl+u", handler=lambda: self._edit(TextBuffer.kill_to_start)),
        ]

    @property
    def active_field(self) -> TextBuffer | None:
        return self.fields.get(self.cursor) if self.cursor >= 0 else None

    def _edit(self, action: Callable[[TextBuffer], None]) -> None:
        field = self.active_field
        if field is not None:
            action(field)

    def left(self) -> None:
        self._edit(TextBuffer.left)

    def right(self) -> None:
        self._edit(TextBuffer.right)

    def on_character(self, ch: str, event: KeyEvent) -> None:
        field = self.active_field
        if field is not None:
            field.insert(ch)

    # -- value ---------------------------------------------------------

    @property
    def value(self) -> dict[str, str]:
        return {self.choices[idx].name: self.fields[idx].text for idx in self.order if idx in self.fields}

    def missing_fields(self) -> list[str]:
        return [
            self.choices[idx].name
            for idx in self.order
            if idx in self.fields and self.choices[idx].selectable and self.fields[idx].text == ""
        ]

    def submit_value(self) -> Any:
        if self.options.required:
            missing = self.missing_fields()
            if missing:
                raise ValidationFailure(f"Missing: {', '.join(missing)}")
        return self.value

    def is_empty(self, value: Any) -> bool:
        if isinstance(value, Mapping):
            return all(text == "" for text in value.values())
        return super().is_empty(value)

    def format_value(self, value: Any) -> str:
        if isinstance(value, Mapping):
            return ", ".join(f"{name}: {text}" for name, text in value.items())
        return super().format_value(value)

    # -- rendering -----------------------------------------------------

    def field_prefix(self, idx: int) -> str:
        choice = self.choices[idx]
        role = "primary" if idx == self.cursor else "muted"
        label = self.theme.style("disabled" if choice.disabled else role, choice.message)
        return f"{self.pointer(idx)} {label}: "

    def render_row(self, idx: int) -> str:
        if idx not in self.fields:
            return super().render_row(idx)
        text = self.fields[idx].text
        if not text and idx != self.cursor and self.choices[idx].hint:
            text = self.theme.style("placeholder", self.choices[idx].hint)
        return self.field_prefix(idx) + text

    def render_value(self) -> str:
        return self.theme.style("muted", "(tab to move between fields)")

    def body_cursor(self) -> tuple[int, int] | None:
        field = self.active_field
        rows = self.window()
        if field is None or self.cursor not in rows:
            return None
        col = visible_width(self.field_prefix(self.cursor)) + visible_width(field.text[: field.cursor])
        return rows.index(self.cursor), col


class EditablePrompt(FormPrompt):
    type_name = "editable"


PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][\w.-]*)(?::([^}]*))?\}")


class SnippetPrompt(FormPrompt):
    """Fill ``${name}`` placeholders of a ``template``.

    ``${name:default}`` seeds a field. The answer is
    ``{"values": {name: text}, "result": filled_template}``.
    """

    type_name = "snippet"

    def load_choices(self) -> list[Choice]:
        template = self.options.get("template")
        if not isinstance(template, str) or not template:
            raise ConfigurationError(f"snippet {self.name!r} needs a non-empty 'template'")
        self.template = template
        self.newline = str(self.options.get("newline", "\n"))
        overrides = {choice.name: choice for choice in normalize_choices(self.options.get("choices"))}
        choices: list[Choice] = []
        seen: set[str] = set()
        for match in PLACEHOLDER_RE.finditer(template):
            name, default = match.group(1), match.group(2)
            if name in seen:
                continue
            seen.add(name)
            extra = overrides.get(name)
            choices.append(
                Choice(
                    name=name,
                    message=extra.message if extra else name,
                    hint=extra.hint if extra else "",
                    initial=default if default is not None else (extra.initial if extra else None),
                )
            )
        if not choices:
            raise ConfigurationError(f"snippet {self.name!r} template has no ${{placeholders}}")
        return choices

    def fill(self, values: Mapping[str, str], *, preview: bool = False) -> str:
        def replace(match: re.Match[str]) -> str:
            text = values.get(match.group(1), "")
            if text or not preview:
                return text
            return self.theme.style("placeholder", match.group(0))

        filled = PLACEHOLDER_RE.sub(replace, self.template)
        return filled if preview else self.newline.join(filled.split("\n"))

    def submit_value(self) -> dict[str, Any]:
        values = super().submit_value()
        return {"values": values, "result": self.fill(values)}

    def current_value(self) -> dict[str, Any]:
        values = self.value
        return {"values": values, "result": self.fill(values)}

    def is_empty(self, value: Any) -> bool:
        if isinstance(value, Mapping) and "values" in value:
            return super().is_empty(value["values"])
        return super().is_empty(value)

    def format_value(self, value: Any) -> str:
        if isinstance(value, Mapping) and "result" in value:
            return str(value["result"]).replace("\n", " ")
        return super().format_value(value)

    def preview_lines(self) -> list[str]:
        return self.fill(self.value, preview=True).split("\n")

    def render_body(self) -> list[str]:
        return [*self.preview_lines(), *super().render_body()]

    def body_cursor(self) -> tuple[int, int] | None:
        inner = super().body_cursor()
        if inner is None:
            return None
        return inner[0] + len(self.preview_lines()), inner[1]


__all__ = ["FormPrompt", "EditablePrompt", "SnippetPrompt", "PLACEHOLDER_RE"]
