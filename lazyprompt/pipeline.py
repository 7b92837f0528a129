"""Validation and submission pipeline run when a prompt tries to finish.

Steps run in order and stop at the first ``ValidationFailure``:
variant value check, ``required``, ``validate``, ``result``/``format``,
``on_submit``. Hooks may be plain callables or return awaitables; a hook that
raises is wrapped in ``HookError`` and ends the prompt.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .errors import HookError, ValidationFailure

if TYPE_CHECKING:
    from .prompts.base import Prompt

REQUIRED_MESSAGE = "Value is required"
INVALID_MESSAGE = "Invalid value"
REJECTED_MESSAGE = "Submission was rejected"

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Submission:
    """Accepted outcome of one submit attempt."""

    value: Any
    answer: Any
    display: str


async def call_hook(hook: str, fn: Callable[..., Any], *args: Any) -> Any:
    """Call ``fn`` and await its result when needed, wrapping failures."""
    try:
        result = fn(*args)
        if inspect.isawaitable(result):
            result = await result
    except (ValidationFailure, HookError):
        raise
    except Exception as exc:
        log.debug("%s hook raised %r", hook, exc)
        raise HookError(hook, exc) from exc
    return result


async def resolve_value(hook: str, value: Any, *args: Any) -> Any:
    """Return ``value``, calling it first when it is a thunk."""
    if callable(value):
        return await call_hook(hook, value, *args)
    if inspect.isawaitable(value):
        try:
            return await value
        except Exception as exc:
            raise HookError(hook, exc) from exc
    return value


def is_empty(value: Any) -> bool:
    """Return whether ``value`` counts as unanswered for ``required``."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _verdict_message(verdict: Any) -> str | None:
    """Map a validator result to a failure message, or ``None`` when it passed."""
    if verdict is True or verdict is None:
        return None
    if isinstance(verdict, str):
        return verdict or INVALID_MESSAGE
    return None if verdict else INVALID_MESSAGE


async def run_submit_pipeline(prompt: Prompt) -> Submission:
    """Validate and transform the prompt's current value.

    Raises ``ValidationFailure`` when the value is rejected at any step.
    """
    options = prompt.options
    value = prompt.submit_value()

    if options.required and prompt.is_empty(value):
        raise ValidationFailure(REQUIRED_MESSAGE)

    if options.validate is not None:
        message = _verdict_message(await call_hook("validate", options.validate, value))
        if message is not None:
            raise ValidationFailure(message)

    answer = value
    if options.result is not None:
        answer = await call_hook("result", options.result, value)

    if options.format is not None:
        display = str(await call_hook("format", options.format, value))
    else:
        display = prompt.format_value(value)

    if options.on_submit is not None:
        accepted = await call_hook("on_submit", options.on_submit, options.name, value, prompt)
        if accepted is False:
            raise ValidationFailure(REJECTED_MESSAGE)

    return Submission(value=value, answer=answer, display=display)


async def run_cancel_hooks(prompt: Prompt) -> None:
    """Run ``on_cancel``; its return value never keeps the prompt alive."""
    options = prompt.options
    if options.on_cancel is None:
        return
    outcome = await call_hook("on_cancel", options.on_cancel, options.name, prompt.current_value(), prompt)
    if outcome:
        log.debug("on_cancel for %s returned %r; cancellation is not vetoable", options.name, outcome)


__all__ = [
    "REQUIRED_MESSAGE",
    "INVALID_MESSAGE",
    "REJECTED_MESSAGE",
    "Submission",
    "call_hook",
    "resolve_value",
    "is_empty",
    "run_submit_pipeline",
    "run_cancel_hooks",
]
