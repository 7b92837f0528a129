"""Selectable items for list-based prompts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ConfigurationError

_UNSET: Any = object()


@dataclass(frozen=True)
class Choice:
    """One item of a ``choices`` list.

    ``enabled`` marks a choice as pre-selected in multi-selection prompts.
    ``disabled`` may be ``True`` or a reason string shown in place of the hint.
    """

    name: str
    message: str = ""
    value: Any = _UNSET
    hint: str = ""
    role: str = ""
    enabled: bool = False
    disabled: bool | str = False
    initial: Any = None

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", self.name)
        if self.value is _UNSET:
            object.__setattr__(self, "value", self.name)

    @property
    def is_separator(self) -> bool:
        return self.role == "separator"

    @property
    def selectable(self) -> bool:
        """Whether the cursor may rest on this choice and it may be selected."""
        return not self.disabled and not self.is_separator

    @property
    def disabled_reason(self) -> str:
        if isinstance(self.disabled, str) and self.disabled:
            return self.disabled
        return "(disabled)" if self.disabled else ""


_CHOICE_KEYS = {"name", "message", "value", "hint", "role", "enabled", "disabled", "initial"}


def normalize_choice(raw: str | Mapping[str, Any] | Choice) -> Choice:
    if isinstance(raw, Choice):
        return raw
    if isinstance(raw, str):
        return Choice(name=raw)
    if isinstance(raw, Mapping):
        data = {key: value for key, value in raw.items() if key in _CHOICE_KEYS}
        name = data.get("name", data.get("message"))
        if not isinstance(name, str) or not name:
            if raw.get("role") == "separator":
                name = ""
            else:
                raise ConfigurationError(f"choice is missing a 'name': {dict(raw)!r}")
        data["name"] = name
        return Choice(**data)
    raise ConfigurationError(f"choice must be a string or mapping, got {type(raw).__name__}")


def normalize_choices(raw: Iterable[Any] | None, *, unique: bool = False) -> list[Choice]:
    """Turn a ``choices`` option into ``Choice`` objects.

    With ``unique`` the choice names must be distinct, since they become keys
    of the prompt's value.
    """
    if raw is None:
        return []
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        raise ConfigurationError("'choices' must be a list")
    choices = [normalize_choice(item) for item in raw]
    if unique:
        seen: set[str] = set()
        for choice in choices:
            if choice.is_separator:
                continue
            if choice.name in seen:
                raise ConfigurationError(f"duplicate choice name {choice.name!r}")
            seen.add(choice.name)
    return choices


__all__ = ["Choice", "normalize_choice", "normalize_choices"]
