"""Per-question configuration.

``PromptOptions`` is frozen: once a prompt is built from it the name and type
cannot change. Variant-specific keys (``choices``, ``min``, ``template`` ...)
are kept in a read-only ``extras`` mapping and read with ``get``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from .errors import ConfigurationError

# camelCase spellings accepted in question mappings (e.g. JSON question files).
_ALIASES = {
    "onSubmit": "on_submit",
    "onCancel": "on_cancel",
    "maxChoices": "max_choices",
}


@dataclass(frozen=True)
class PromptOptions:
    """Immutable description of one question."""

    name: str
    type: str = ""
    message: str | Callable[[], Any] = ""
    prefix: str | None = None
    suffix: str | None = None
    header: str = ""
    footer: str = ""
    styles: Mapping[str, str] = field(default_factory=dict)
    symbols: Mapping[str, str] = field(default_factory=dict)
    highlight: Callable[[str], str] | None = None
    initial: Any = None
    required: bool = False
    skip: bool | Callable[..., Any] | None = None
    validate: Callable[[Any], Any] | None = None
    on_submit: Callable[..., Any] | None = None
    on_cancel: Callable[..., Any] | None = None
    format: Callable[[Any], Any] | None = None
    result: Callable[[Any], Any] | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError("question is missing a non-empty 'name'")
        if not isinstance(self.type, str):
            raise ConfigurationError(f"question {self.name!r} has a non-string 'type'")
        object.__setattr__(self, "styles", MappingProxyType(dict(self.styles or {})))
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols or {})))
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras or {})))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, default_type: str = "") -> PromptOptions:
        """Build options from a question mapping, moving unknown keys to ``extras``."""
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"question must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)} - {"extras"}
        base: dict[str, Any] = {}
        extras: dict[str, Any] = dict(data.get("extras") or {})
        for raw_key, value in data.items():
            if raw_key == "extras":
                continue
            key = _ALIASES.get(raw_key, raw_key)
            if key in known:
                base[key] = value
            else:
                extras[key] = value
        if "name" not in base:
            raise ConfigurationError("question is missing a non-empty 'name'")
        if not base.get("type"):
            base["type"] = default_type
        return cls(**base, extras=extras)

    def get(self, key: str, default: Any = None) -> Any:
        """Return a variant-specific option."""
        return self.extras.get(_ALIASES.get(key, key), default)


__all__ = ["PromptOptions"]
