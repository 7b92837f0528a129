"""Rate every choice on a shared scale."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import ConfigurationError
from ..input import KeyEvent
from .array import ArrayPrompt

LIKERT_SCALE = ("Strongly disagree", "Disagree", "Neutral", "Agree", "Strongly agree")
NUMERIC_SCALE = ("1", "2", "3", "4", "5")


def _scale_labels(raw: Any, default: tuple[str, ...]) -> tuple[str, ...]:
    if raw is None:
        return default
    if isinstance(raw, (str, bytes)) or not isinstance(raw, (list, tuple)) or not raw:
        raise ConfigurationError("'scale' must be a non-empty list")
    labels = []
    for item in raw:
        if isinstance(item, Mapping):
            item = item.get("message", item.get("name", ""))
        labels.append(str(item))
    return tuple(labels)


class ScalePrompt(ArrayPrompt):
    """Rows are choices; ``left``/``right`` (or a digit) set the row's rating.

    The value maps each selectable choice name to the chosen scale index.
    """

    type_name = "scale"
    unique_choices = True
    default_scale = NUMERIC_SCALE

    def setup(self) -> None:
        super().setup()
        self.scale = _scale_labels(self.options.get("scale"), self.default_scale)
        default_rating = self.options.initial if isinstance(self.options.initial, int) else len(self.scale) // 2
        self.ratings: dict[int, int] = {}
        for idx, choice in enumerate(self.choices):
            if not choice.selectable:
                continue
            rating = choice.initial if isinstance(choice.initial, int) else default_rating
            self.ratings[idx] = self._clamp(rating)

    def initial_cursor(self) -> int:
        return self._seek(-1, 1)

    def _clamp(self, rating: int) -> int:
        return max(0, min(len(self.scale) - 1, rating))

    def rate(self, delta: int) -> None:
        if self.cursor < 0:
            return
        self.ratings[self.cursor] = self._clamp(self.ratings[self.cursor] + delta)

    def left(self) -> None:
        self.rate(-1)

    def right(self) -> None:
        self.rate(1)

    def on_character(self, ch: str, event: KeyEvent) -> None:
        if self.cursor < 0 or not ch.isdigit():
            return
        pick = int(ch) - 1
        if 0 <= pick < len(self.scale):
            self.ratings[self.cursor] = pick

    @property
    def value(self) -> dict[str, int]:
        return {self.choices[idx].name: self.ratings[idx] for idx in sorted(self.ratings)}

    def format_value(self, value: Any) -> str:
        if not isinstance(value, Mapping):
            return super().format_value(value)
        parts = []
        for name, rating in value.items():
            label = self.scale[rating] if isinstance(rating, int) and 0 <= rating < len(self.scale) else rating
            parts.append(f"{name}: {label}")
        return ", ".join(parts)

    def render_value(self) -> str:
        return self.theme.style("muted", "(left/right to rate)")

    def render_body(self) -> list[str]:
        legend = "  ".join(f"{n + 1}. {label}" for n, label in enumerate(self.scale))
        return [self.theme.style("muted", legend), *super().render_body()]

    def render_row(self, idx: int) -> str:
        row = super().render_row(idx)
        if idx not in self.ratings:
            return row
        marks = []
        for n in range(len(self.scale)):
            if n == self.ratings[idx]:
                marks.append(self.theme.style("primary" if idx == self.cursor else "success", self.symbols.radio_on))
            else:
                marks.append(self.theme.style("muted", self.symbols.radio_off))
        return f"{row}  {' '.join(marks)}"


class SurveyPrompt(ScalePrompt):
    type_name = "survey"
    default_scale = LIKERT_SCALE


__all__ = ["ScalePrompt", "SurveyPrompt", "LIKERT_SCALE", "NUMERIC_SCALE"]
