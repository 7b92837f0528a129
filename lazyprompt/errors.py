"""Exception taxonomy shared by prompts and the orchestrator.

Only ``ValidationFailure`` is recoverable inside a running prompt.
Everything else ends the prompt and reaches the caller of ``prompt()``.
"""

from __future__ import annotations

from collections.abc import Mapping


class LazyPromptError(Exception):
    """Base class for all lazyprompt errors."""


class ValidationFailure(LazyPromptError):
    """Submitted value was rejected; the prompt keeps running and shows ``message``."""

    def __init__(self, message: str = "Invalid value") -> None:
        super().__init__(message)
        self.message = message


class PromptCancelled(LazyPromptError):
    """User cancelled a prompt.

    ``answers`` holds whatever the orchestrator had collected before the
    cancelled question; it is empty when raised by a standalone prompt.
    """

    def __init__(self, name: str, answers: Mapping[str, object] | None = None) -> None:
        super().__init__(f"prompt {name!r} was cancelled")
        self.name = name
        self.answers: dict[str, object] = dict(answers or {})


class ConfigurationError(LazyPromptError):
    """Question options cannot be turned into a prompt."""


class HookError(LazyPromptError):
    """A user hook raised instead of returning a result."""

    def __init__(self, hook: str, cause: BaseException) -> None:
        super().__init__(f"{hook} hook failed: {cause!r}")
        self.hook = hook
        self.cause = cause


__all__ = [
    "LazyPromptError",
    "ValidationFailure",
    "PromptCancelled",
    "ConfigurationError",
    "HookError",
]
