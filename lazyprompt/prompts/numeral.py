"""Numeric entry with stepping and clamping."""

from __future__ import annotations

import math
from typing import Any

from ..errors import ConfigurationError, ValidationFailure
from ..input import KeyComboBinding, KeyEvent, bind
from .base import Prompt

INVALID_NUMBER_MESSAGE = "Enter a valid number"


def _as_number(value: Any, option: str) -> float | int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"numeral option {option!r} must be a number")
    return value


class NumeralPrompt(Prompt):
    """Digits (and ``.`` when ``float``) edit a text buffer parsed on submit.

    ``up``/``down`` step by ``minor``; with shift (or page keys) by ``major``.
    Stepped and submitted values are clamped to ``[min, max]``.
    """

    type_name = "numeral"
    shows_cursor = True

    def setup(self) -> None:
        opts = self.options
        self.minimum = _as_number(opts.get("min"), "min")
        self.maximum = _as_number(opts.get("max"), "max")
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ConfigurationError(f"numeral {self.name!r} has min greater than max")
        self.allow_float = bool(opts.get("float", False))
        self.round = bool(opts.get("round", False))
        self.minor = _as_number(opts.get("minor", 1), "minor")
        self.major = _as_number(opts.get("major", 10), "major")
        self.initial = _as_number(opts.initial, "initial")
        if not self.allow_float:
            whole = {"min": self.minimum, "max": self.maximum, "minor": self.minor, "major": self.major, "initial": self.initial}
            for option, number in whole.items():
                if isinstance(number, float) and not number.is_integer():
                    raise ConfigurationError(f"numeral option {option!r} must be a whole number unless 'float' is set")
        self.buffer = "" if self.initial is None else self.format_number(self.initial)

    @property
    def value(self) -> float | int | None:
        try:
            return self.parse(self.buffer)
        except ValueError:
            return None

    def bindings(self) -> list[KeyComboBinding]:
        return [
            bind("backspace", handler=self.backspace),
            bind("shift+up", "pageup", handler=lambda: self.step(self.major)),
            bind("shift+down", "pagedown", handler=lambda: self.step(-self.major)),
        ]

    def up(self) -> None:
        self.step(self.minor)

    def down(self) -> None:
        self.step(-self.minor)

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]

    def on_character(self, ch: str, event: KeyEvent) -> None:
        if ch.isdigit():
            self.buffer += ch
        elif ch == "." and self.allow_float and "." not in self.buffer:
            self.buffer += ch
        elif ch == "-" and not self.buffer and (self.minimum is None or self.minimum < 0):
            self.buffer = "-"

    def parse(self, text: str) -> float | int | None:
        if text == "":
            return None
        if self.allow_float:
            number = float(text)
            if math.isnan(number) or math.isinf(number):
                raise ValueError(text)
            return number
        return int(text)

    def clamp(self, number: float | int) -> float | int:
        if self.minimum is not None and number < self.minimum:
            number = self.minimum
        if self.maximum is not None and number > self.maximum:
            number = self.maximum
        return number

    def step(self, delta: float | int) -> None:
        current = self.value
        if current is None:
            if self.initial is not None:
                current = self.initial
            elif self.minimum is not None and self.minimum > 0:
                current = self.minimum
            else:
                current = 0
        stepped = current + delta
        if self.allow_float:
            stepped = round(stepped, 10)
        self.buffer = self.format_number(self.clamp(stepped))

    def format_number(self, number: float | int) -> str:
        if isinstance(number, float) and number.is_integer() and not self.allow_float:
            return str(int(number))
        return str(number)

    def submit_value(self) -> float | int | None:
        try:
            number = self.parse(self.buffer)
        except ValueError:
            raise ValidationFailure(INVALID_NUMBER_MESSAGE) from None
        if number is None:
            number = self.initial
        if number is None:
            return None
        number = self.clamp(number)
        if self.round:
            # half rounds up, so 2.5 becomes 3 and -2.5 becomes -2
            number = math.floor(number + 0.5)
        return number

    def render_value(self) -> str:
        return self.buffer

    def value_cursor(self) -> tuple[int, int]:
        return 0, len(self.buffer)

    def format_value(self, value: Any) -> str:
        if value is None:
            return ""
        return self.format_number(value)


class NumberPrompt(NumeralPrompt):
    type_name = "number"


__all__ = ["NumeralPrompt", "NumberPrompt", "INVALID_NUMBER_MESSAGE"]
