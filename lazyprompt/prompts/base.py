"""Prompt base lifecycle shared by every variant.

A prompt is ``RUNNING`` from construction until ``submit`` or ``cancel``
settles it. ``run`` renders once, then reads one key event at a time:
notify keypress listeners, dispatch through the key registry, render again.
Variants plug in through a fixed set of overridable methods (``setup``,
``bindings``, ``on_character``, ``render_value``, ``render_body``,
``submit_value``, ``format_value``) and never touch the loop itself.
"""

from __future__ import annotations

import enum
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, ClassVar

from ..ansi import visible_width
from ..errors import PromptCancelled, ValidationFailure
from ..input import KeyComboBinding, KeyComboRegistry, KeyEvent, KeySource, TerminalKeySource, bind
from ..options import PromptOptions
from ..pipeline import is_empty, resolve_value, run_cancel_hooks, run_submit_pipeline
from ..terminal import Screen
from ..theme import DEFAULT_THEME, UNICODE_SYMBOLS, PromptTheme, SymbolSet, with_symbol_overrides

log = logging.getLogger(__name__)

KeypressListener = Callable[[str, KeyEvent], None]


class PromptStatus(enum.Enum):
    RUNNING = "running"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


@dataclass
class PromptState:
    """Render-facing data derived from the prompt's value."""

    message: str = ""
    error: str = ""
    status: PromptStatus = PromptStatus.RUNNING
    display: str = ""
    submitted_value: Any = None


class Prompt:
    """One interactive question."""

    type_name: ClassVar[str] = "prompt"
    shows_cursor: ClassVar[bool] = False

    def __init__(
        self,
        options: PromptOptions | Mapping[str, Any] | None = None,
        *,
        keys: KeySource | None = None,
        screen: Screen | None = None,
        theme: PromptTheme | None = None,
        symbols: SymbolSet | None = None,
        answers: Mapping[str, Any] | None = None,
        **option_fields: Any,
    ) -> None:
        if options is None:
            options = option_fields
        elif option_fields:
            raise TypeError("pass options either as a mapping or as keywords, not both")
        if not isinstance(options, PromptOptions):
            options = PromptOptions.from_mapping(options, default_type=self.type_name)
        self.options = options
        self.name = options.name
        self.keys: KeySource = keys if keys is not None else TerminalKeySource()
        self.screen = screen if screen is not None else Screen()
        self.theme = (theme or DEFAULT_THEME).with_overrides(options.styles)
        self.symbols = with_symbol_overrides(symbols or UNICODE_SYMBOLS, options.symbols)
        pointer = options.get("pointer")
        if isinstance(pointer, str) and pointer:
            self.symbols = replace(self.symbols, pointer=pointer)
        self.answers: Mapping[str, Any] = MappingProxyType(dict(answers or {}))
        self.state = PromptState()
        self.render_count = 0
        self._listeners: list[KeypressListener] = []
        self._started = False
        self._closed = False
        self.setup()
        self._registry = KeyComboRegistry().register_bindings(*self._default_bindings(), *self.bindings())

    # -- variant hooks -------------------------------------------------

    def setup(self) -> None:
        """Initialise the variant's value from options."""
        self.value: Any = self.options.initial

    def bindings(self) -> list[KeyComboBinding]:
        """Extra key bindings; these override the defaults for the same combo."""
        return []

    def on_character(self, ch: str, event: KeyEvent) -> Any:
        """Handle a printable key no binding claimed."""

    def up(self) -> Any:
        pass

    def down(self) -> Any:
        pass

    def left(self) -> Any:
        pass

    def right(self) -> Any:
        pass

    def render_value(self) -> str:
        """Inline text after the question while running (may contain newlines)."""
        return ""

    def value_cursor(self) -> tuple[int, int] | None:
        """Cursor ``(row, col)`` relative to the start of ``render_value``."""
        return None

    def render_body(self) -> list[str]:
        """Lines drawn below the question while running."""
        return []

    def body_cursor(self) -> tuple[int, int] | None:
        """Cursor ``(row, col)`` within ``render_body`` lines."""
        return None

    def submit_value(self) -> Any:
        """Value handed to the pipeline; raise ``ValidationFailure`` to reject it."""
        return self.current_value()

    def current_value(self) -> Any:
        return getattr(self, "value", None)

    def is_empty(self, value: Any) -> bool:
        return is_empty(value)

    def format_value(self, value: Any) -> str:
        """Display text for the submitted value when no ``format`` option is set."""
        return "" if value is None else str(value)

    # -- lifecycle -----------------------------------------------------

    @property
    def status(self) -> PromptStatus:
        return self.state.status

    @property
    def running(self) -> bool:
        return self.state.status is PromptStatus.RUNNING

    def on_keypress(self, listener: KeypressListener) -> KeypressListener:
        """Call ``listener(character, event)`` for every key the prompt receives."""
        self._listeners.append(listener)
        return listener

    def off_keypress(self, listener: KeypressListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def run(self) -> Any:
        """Drive the prompt until it settles and return the stored answer.

        Raises ``PromptCancelled`` when the user cancels.
        """
        if self._started:
            raise RuntimeError(f"prompt {self.name!r} has already been run")
        self._started = True
        log.debug("prompt %s (%s) started", self.name, self.options.type)
        with self.keys.attached():
            try:
                if not self.shows_cursor:
                    self.cursor_hide()
                await self.redraw()
                while self.running:
                    event = await self.keys.read()
                    if event is None:
                        log.debug("end of input while %s was running", self.name)
                        await self.cancel()
                        break
                    await self.keypress(event)
            finally:
                self.close()
        if self.state.status is PromptStatus.CANCELLED:
            raise PromptCancelled(self.name)
        return self.state.submitted_value

    async def keypress(self, event: KeyEvent) -> None:
        """Process one key event to completion."""
        if not self.running:
            return
        for listener in list(self._listeners):
            listener(event.char or event.sequence, event)
        self.state.error = ""
        handler = self._registry.lookup(event)
        if handler is not None:
            await _settle(handler())
        elif event.is_printable:
            await _settle(self.on_character(event.char, event))
        if self.running:
            await self.redraw()

    async def submit(self) -> None:
        if not self.running:
            return
        self.state.error = ""
        try:
            submission = await run_submit_pipeline(self)
        except ValidationFailure as failure:
            self.state.error = failure.message
            log.debug("submit of %s rejected: %s", self.name, failure.message)
            return
        self.state.submitted_value = submission.answer
        self.state.display = submission.display
        self.state.status = PromptStatus.SUBMITTED
        log.debug("prompt %s submitted", self.name)
        self.cursor_hide()
        await self.redraw()

    async def cancel(self) -> None:
        if not self.running:
            return
        await run_cancel_hooks(self)
        self.state.status = PromptStatus.CANCELLED
        log.debug("prompt %s cancelled", self.name)
        self.cursor_hide()
        await self.redraw()

    # -- rendering -----------------------------------------------------

    async def redraw(self) -> None:
        """Re-evaluate the message and render."""
        self.state.message = await self.resolve_message()
        self.render()

    async def resolve_message(self) -> str:
        message = await resolve_value("message", self.options.message)
        return str(message) if message not in (None, "") else self.name

    def render(self) -> None:
        self.render_count += 1
        lines, cursor = self.compose_frame()
        if self._closed:
            return
        self.screen.draw(lines, cursor)

    def prefix(self) -> str:
        if self.options.prefix is not None:
            return self.options.prefix
        if self.state.status is PromptStatus.SUBMITTED:
            return self.theme.style("success", self.symbols.check)
        if self.state.status is PromptStatus.CANCELLED:
            return self.theme.style("danger", self.symbols.cross)
        return self.theme.style("primary", self.symbols.question)

    def suffix(self) -> str:
        if self.options.suffix is not None:
            return self.options.suffix
        glyph = self.symbols.separator if self.running else self.symbols.middot
        return self.theme.style("muted", glyph)

    def compose_frame(self) -> tuple[list[str], tuple[int, int] | None]:
        """Build the frame lines and the cursor position for the current state."""
        lines = self.options.header.splitlines() if self.options.header else []
        lead = " ".join(part for part in (self.prefix(), self.theme.style("strong", self.state.message), self.suffix()) if part)
        lead += " "
        cursor: tuple[int, int] | None = None

        if self.running:
            inline = self.render_value().split("\n")
            value_row = len(lines)
            offset = self.value_cursor()
            if offset is not None:
                row, col = offset
                cursor = (value_row + row, col + (visible_width(lead) if row == 0 else 0))
            lines.append(lead + inline[0])
            lines.extend(inline[1:])
            body_row = len(lines)
            lines.extend(self.render_body())
            inner = self.body_cursor()
            if inner is not None:
                cursor = (body_row + inner[0], inner[1])
            if self.state.error:
                lines.append(self.theme.style("danger", f"{self.symbols.pointer} {self.state.error}"))
        elif self.state.status is PromptStatus.SUBMITTED:
            first, *rest = self.state.display.split("\n")
            lines.append(lead + self.theme.style("primary", first))
            lines.extend(self.theme.style("primary", line) for line in rest)
        else:
            lines.append(lead.rstrip())

        if self.options.footer:
            lines.extend(self.options.footer.splitlines())
        return lines, cursor

    # -- terminal ------------------------------------------------------

    def write(self, text: str) -> None:
        if self._closed:
            log.debug("ignoring write after %s closed", self.name)
            return
        self.screen.write(text)

    def clear(self) -> None:
        if not self._closed:
            self.screen.clear()

    def cursor_hide(self) -> None:
        self.screen.cursor_hide()

    def cursor_show(self) -> None:
        self.screen.cursor_show()

    def close(self) -> None:
        """Leave the final frame on screen and release the terminal."""
        if self._closed:
            return
        self.screen.newline()
        self.cursor_show()
        self._closed = True

    # -- helpers -------------------------------------------------------

    def _default_bindings(self) -> list[KeyComboBinding]:
        return [
            bind("return", "enter", handler=self.submit),
            bind("escape", "ctrl+c", handler=self.cancel),
            bind("up", handler=self.up),
            bind("down", handler=self.down),
            bind("left", handler=self.left),
            bind("right", handler=self.right),
        ]


async def _settle(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


__all__ = ["Prompt", "PromptState", "PromptStatus", "KeypressListener"]
