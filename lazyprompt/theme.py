"""Prompt theme definitions and selection helpers.

Themes map semantic roles (``primary``, ``danger`` ...) to Pygments console
attribute strings such as ``"*cyan*"`` (bold cyan) or ``"brightblack"``.
Symbols are a separate set so ASCII-only terminals can swap glyphs alone.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from pygments.console import ansiformat, codes

STYLE_ROLES = (
    "primary",
    "success",
    "danger",
    "warning",
    "muted",
    "strong",
    "em",
    "disabled",
    "placeholder",
)


@dataclass(frozen=True)
class SymbolSet:
    """Glyphs drawn around prompt content."""

    name: str
    pointer: str
    check: str
    cross: str
    ellipsis: str
    question: str
    radio_on: str
    radio_off: str
    line: str
    mask: str
    separator: str
    middot: str


UNICODE_SYMBOLS = SymbolSet(
    name="unicode",
    pointer="❯",
    check="✔",
    cross="✖",
    ellipsis="…",
    question="?",
    radio_on="◉",
    radio_off="◯",
    line="─",
    mask="*",
    separator="›",
    middot="·",
)

ASCII_SYMBOLS = SymbolSet(
    name="ascii",
    pointer=">",
    check="v",
    cross="x",
    ellipsis="...",
    question="?",
    radio_on="(*)",
    radio_off="( )",
    line="-",
    mask="*",
    separator=">",
    middot="-",
)

_SYMBOL_SETS: dict[str, SymbolSet] = {
    UNICODE_SYMBOLS.name: UNICODE_SYMBOLS,
    ASCII_SYMBOLS.name: ASCII_SYMBOLS,
}


@dataclass(frozen=True)
class PromptTheme:
    """Semantic palette used by prompt renderers."""

    name: str
    primary: str
    success: str
    danger: str
    warning: str
    muted: str
    strong: str
    em: str
    disabled: str
    placeholder: str

    def style(self, role: str, text: str) -> str:
        """Wrap ``text`` in the escape codes for ``role``; unknown roles pass through."""
        attr = getattr(self, role, "") if role in STYLE_ROLES else ""
        if not attr or not text:
            return text
        return ansiformat(attr, text)

    def with_overrides(self, overrides: Mapping[str, str] | None) -> PromptTheme:
        """Return a copy with roles replaced by valid Pygments attribute strings."""
        if not overrides:
            return self
        changes = {
            role: attr
            for role, attr in overrides.items()
            if role in STYLE_ROLES and isinstance(attr, str) and _is_valid_attr(attr)
        }
        return replace(self, **changes) if changes else self


def _is_valid_attr(attr: str) -> bool:
    core = attr
    for marker in ("+", "*", "_"):
        if core and core[0] == core[-1] == marker:
            core = core[1:-1]
    return core in codes


DEFAULT_THEME = PromptTheme(
    name="default",
    primary="cyan",
    success="green",
    danger="red",
    warning="yellow",
    muted="brightblack",
    strong="*",
    em="_",
    disabled="brightblack",
    placeholder="brightblack",
)

OCEAN_THEME = PromptTheme(
    name="ocean",
    primary="*brightblue*",
    success="brightcyan",
    danger="brightmagenta",
    warning="brightyellow",
    muted="blue",
    strong="*white*",
    em="_brightcyan_",
    disabled="blue",
    placeholder="blue",
)

PLAIN_THEME = PromptTheme(
    name="plain",
    **{f.name: "" for f in fields(PromptTheme) if f.name != "name"},
)

_THEMES: dict[str, PromptTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> PromptTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def resolve_symbols(name: str | None = None, overrides: Mapping[str, str] | None = None) -> SymbolSet:
    """Return the named symbol set with per-prompt glyph overrides applied."""
    base = _SYMBOL_SETS.get(str(name or "").strip().lower(), UNICODE_SYMBOLS)
    return with_symbol_overrides(base, overrides)


def with_symbol_overrides(base: SymbolSet, overrides: Mapping[str, str] | None) -> SymbolSet:
    """Return ``base`` with known glyph names replaced; unknown keys are ignored."""
    if not overrides:
        return base
    names = {f.name for f in fields(SymbolSet)} - {"name"}
    changes = {key: str(value) for key, value in overrides.items() if key in names}
    return replace(base, **changes) if changes else base


__all__ = [
    "STYLE_ROLES",
    "SymbolSet",
    "UNICODE_SYMBOLS",
    "ASCII_SYMBOLS",
    "PromptTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "resolve_symbols",
    "with_symbol_overrides",
]
