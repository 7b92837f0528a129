"""Structured key events produced by the decoder and consumed by prompts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keypress.

    ``name`` is a lowercase key name (``"a"``, ``"return"``, ``"up"``).
    ``sequence`` is the text the key produced and ``raw`` the undecoded input.
    """

    name: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    option: bool = False
    sequence: str = ""
    raw: str = ""

    @property
    def combo(self) -> str:
        """Return registry token such as ``"ctrl+c"`` or ``"shift+up"``."""
        parts: list[str] = []
        if self.ctrl:
            parts.append("ctrl")
        if self.meta or self.option:
            parts.append("meta")
        if self.shift and not self.is_printable:
            parts.append("shift")
        parts.append(self.name)
        return "+".join(parts)

    @property
    def is_printable(self) -> bool:
        """Return whether the key inserts text when typed."""
        if self.ctrl or self.meta:
            return False
        if self.name == "space":
            return True
        return len(self.sequence) == 1 and self.sequence.isprintable()

    @property
    def char(self) -> str:
        """Return the inserted character for printable keys, else ``""``."""
        return self.sequence if self.is_printable else ""


def key(name: str, **modifiers: bool) -> KeyEvent:
    """Build a named key event, e.g. ``key("up", shift=True)``."""
    sequences = {
        "return": "\r",
        "enter": "\n",
        "tab": "\t",
        "space": " ",
        "escape": "\x1b",
        "backspace": "\x7f",
    }
    if len(name) == 1:
        sequence = name
        name = name.lower()
        modifiers.setdefault("shift", sequence.isupper())
        if sequence == " ":
            name = "space"
    else:
        sequence = sequences.get(name, "")
    return KeyEvent(name=name, sequence=sequence, raw=sequence, **modifiers)


def keys(*items: str | KeyEvent) -> list[KeyEvent]:
    """Expand strings and events into a flat event list.

    Multi-character strings that are not key names are typed one character at
    a time, so ``keys("abc", "return")`` is four events.
    """
    out: list[KeyEvent] = []
    for item in items:
        if isinstance(item, KeyEvent):
            out.append(item)
        elif item in _NAMED_KEYS or _is_combo(item):
            out.append(_parse_combo(item))
        else:
            out.extend(key(ch) for ch in item)
    return out


_NAMED_KEYS = frozenset(
    {
        "return",
        "enter",
        "tab",
        "space",
        "escape",
        "backspace",
        "delete",
        "up",
        "down",
        "left",
        "right",
        "home",
        "end",
        "pageup",
        "pagedown",
        "insert",
    }
)


def _is_combo(token: str) -> bool:
    *mods, name = token.split("+")
    return bool(mods) and bool(name) and all(mod in {"ctrl", "meta", "shift"} for mod in mods)


def _parse_combo(token: str) -> KeyEvent:
    """Parse ``"shift+up"``-style shorthand into an event."""
    *mods, name = token.split("+")
    flags = {"ctrl": False, "meta": False, "shift": False}
    for mod in mods:
        if mod in flags:
            flags[mod] = True
    if flags["ctrl"] and len(name) == 1:
        control = chr(ord(name.lower()) - ord("a") + 1)
        return KeyEvent(name=name.lower(), ctrl=True, meta=flags["meta"], sequence=control, raw=control)
    return key(name, **flags)
