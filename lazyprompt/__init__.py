"""Interactive terminal prompts driven by declarative questions."""

from .choices import Choice
from .enquirer import Enquirer, SkipContext, prompt, prompt_sync
from .errors import ConfigurationError, HookError, LazyPromptError, PromptCancelled, ValidationFailure
from .input import KeyEvent, ScriptedKeySource, TerminalKeySource, key, keys
from .options import PromptOptions
from .prompts import BUILTIN_PROMPTS, Prompt
from .terminal import Screen
from .theme import PromptTheme, SymbolSet

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_PROMPTS",
    "Choice",
    "ConfigurationError",
    "Enquirer",
    "HookError",
    "KeyEvent",
    "LazyPromptError",
    "Prompt",
    "PromptCancelled",
    "PromptOptions",
    "PromptTheme",
    "Screen",
    "ScriptedKeySource",
    "SkipContext",
    "SymbolSet",
    "TerminalKeySource",
    "ValidationFailure",
    "key",
    "keys",
    "prompt",
    "prompt_sync",
]
