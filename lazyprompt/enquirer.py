"""Run a sequence of questions and collect the answers.

``Enquirer.prompt`` awaits one prompt at a time. Answers are keyed by question
name in the order questions finished; skipped questions leave no key. A
cancelled prompt stops the sequence and ``PromptCancelled`` is re-raised with
the answers gathered so far.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .config import load_display_preferences
from .errors import ConfigurationError, PromptCancelled
from .input import KeySource, TerminalKeySource
from .options import PromptOptions
from .pipeline import call_hook, resolve_value
from .prompts import BUILTIN_PROMPTS, Prompt
from .terminal import Screen
from .theme import PromptTheme, SymbolSet

log = logging.getLogger(__name__)

EVENTS = ("prompt", "answer", "skip", "cancel")

Question = Mapping[str, Any] | PromptOptions | Callable[..., Any]


@dataclass(frozen=True)
class SkipContext:
    """What a ``skip`` predicate gets to look at."""

    answers: Mapping[str, Any]
    question: PromptOptions
    enquirer: Enquirer


def _is_prompt_class(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, Prompt)


class Enquirer:
    """Question runner with its own custom type registry."""

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        answers: Mapping[str, Any] | None = None,
        *,
        theme: PromptTheme | None = None,
        symbols: SymbolSet | None = None,
        keys: KeySource | None = None,
        screen: Screen | None = None,
    ) -> None:
        self.options: dict[str, Any] = dict(options or {})
        self.answers: dict[str, Any] = dict(answers or {})
        if theme is None or symbols is None:
            preferences = load_display_preferences()
            theme = theme or preferences.theme
            symbols = symbols or preferences.symbols
        self.theme = theme
        self.symbols = symbols
        self.keys: KeySource = keys if keys is not None else TerminalKeySource()
        self.screen = screen if screen is not None else Screen()
        self.prompts: dict[str, Any] = {}
        self._resolved: dict[str, type[Prompt]] = {}
        self._listeners: dict[str, list[Callable[..., Any]]] = {event: [] for event in EVENTS}

    # -- extension -----------------------------------------------------

    def register(self, type_name: str | Mapping[str, Any], factory: Any = None) -> Enquirer:
        """Install custom prompt types.

        ``factory`` is a ``Prompt`` subclass or a zero-argument callable
        returning one; the callable runs on first use. The last registration
        for a name wins, built-in names included.
        """
        if isinstance(type_name, Mapping):
            for name, item in type_name.items():
                self.register(name, item)
            return self
        if not isinstance(type_name, str) or not type_name:
            raise ConfigurationError("prompt type name must be a non-empty string")
        if isinstance(factory, type) and not _is_prompt_class(factory):
            raise ConfigurationError(f"prompt type {type_name!r} must subclass Prompt, got {factory.__name__}")
        if not callable(factory):
            raise ConfigurationError(f"prompt type {type_name!r} needs a Prompt subclass or a callable")
        self.prompts[type_name] = factory
        self._resolved.pop(type_name, None)
        log.debug("registered prompt type %s", type_name)
        return self

    def use(self, plugin: Callable[[Enquirer], Any]) -> Enquirer:
        plugin(self)
        return self

    def on(self, event: str, listener: Callable[..., Any]) -> Callable[..., Any]:
        """Call ``listener`` on ``prompt``, ``answer``, ``skip`` or ``cancel``."""
        if event not in self._listeners:
            raise ValueError(f"unknown event {event!r}; expected one of {', '.join(EVENTS)}")
        self._listeners[event].append(listener)
        return listener

    def _emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners[event]):
            listener(*args)

    def resolve_prompt_class(self, type_name: str) -> type[Prompt]:
        """Map a question ``type`` to a prompt class, custom types first."""
        if type_name in self._resolved:
            return self._resolved[type_name]
        if type_name in self.prompts:
            factory = self.prompts[type_name]
            cls = factory if _is_prompt_class(factory) else factory()
            if not _is_prompt_class(cls):
                raise ConfigurationError(f"prompt type {type_name!r} did not resolve to a Prompt subclass")
            self._resolved[type_name] = cls
            return cls
        if type_name in BUILTIN_PROMPTS:
            return BUILTIN_PROMPTS[type_name]
        raise ConfigurationError(f"unknown prompt type {type_name!r}")

    # -- running -------------------------------------------------------

    async def prompt(self, questions: Question | Iterable[Question]) -> dict[str, Any]:
        """Ask every question in order and return a copy of the answers.

        Raises ``PromptCancelled`` (with ``answers`` set) when a prompt is
        cancelled, ``ConfigurationError`` for bad questions and ``HookError``
        when a hook fails.
        """
        if callable(questions) and not _is_prompt_class(questions):
            questions = await call_hook("question", questions, self)
        if isinstance(questions, (Mapping, PromptOptions)):
            questions = [questions]

        for item in questions:
            options = await self.resolve_question(item)
            if await self.should_skip(options):
                log.debug("skipping question %s", options.name)
                self._emit("skip", options)
                continue

            cls = self.resolve_prompt_class(options.type)
            prompt = cls(
                options,
                keys=self.keys,
                screen=self.screen,
                theme=self.theme,
                symbols=self.symbols,
                answers=self.answers,
            )
            self._emit("prompt", prompt)
            try:
                value = await prompt.run()
            except PromptCancelled as exc:
                exc.answers = dict(self.answers)
                log.debug("question %s cancelled after %d answers", options.name, len(self.answers))
                self._emit("cancel", prompt, exc.answers)
                raise
            self.answers[options.name] = value
            self._emit("answer", options.name, value)
        return dict(self.answers)

    async def resolve_question(self, item: Question) -> PromptOptions:
        """Turn one entry into ``PromptOptions``, calling thunks with this instance."""
        if callable(item) and not isinstance(item, (Mapping, PromptOptions)):
            item = await call_hook("question", item, self)
        if isinstance(item, PromptOptions):
            options = item
        elif isinstance(item, Mapping):
            options = PromptOptions.from_mapping({**self.options, **item})
        else:
            raise ConfigurationError(f"question must be a mapping, got {type(item).__name__}")
        if not options.type:
            raise ConfigurationError(f"question {options.name!r} is missing a 'type'")
        return options

    async def should_skip(self, options: PromptOptions) -> bool:
        if options.skip is None:
            return False
        context = SkipContext(answers=dict(self.answers), question=options, enquirer=self)
        verdict = await resolve_value("skip", options.skip, context)
        return bool(verdict)


async def prompt(questions: Question | Iterable[Question], **kwargs: Any) -> dict[str, Any]:
    """Ask ``questions`` with a fresh ``Enquirer`` built from ``kwargs``."""
    return await Enquirer(**kwargs).prompt(questions)


def prompt_sync(questions: Question | Iterable[Question], **kwargs: Any) -> dict[str, Any]:
    """Blocking wrapper around ``prompt`` for scripts without an event loop."""
    return asyncio.run(prompt(questions, **kwargs))


__all__ = ["Enquirer", "SkipContext", "EVENTS", "prompt", "prompt_sync"]
