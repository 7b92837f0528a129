"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .events import KeyEvent

# Handlers may return an awaitable; the prompt awaits it before rendering.
KeyHandler = Callable[[], Any]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more combo tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: KeyHandler


class KeyComboRegistry:
    """Small key-dispatch table keyed by ``KeyEvent.combo`` tokens."""

    def __init__(self) -> None:
        self._handlers: dict[str, KeyHandler] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo.lower()] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, event: KeyEvent) -> KeyHandler | None:
        """Return the handler bound to ``event``'s combo, if any."""
        return self._handlers.get(event.combo)


def bind(*combos: str, handler: KeyHandler) -> KeyComboBinding:
    """Shorthand for ``KeyComboBinding(combos, handler)``."""
    return KeyComboBinding(combos=tuple(combos), handler=handler)
