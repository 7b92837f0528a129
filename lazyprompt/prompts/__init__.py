"""Built-in prompt variants keyed by question ``type``."""

from __future__ import annotations

from types import MappingProxyType

from .array import ArrayPrompt
from .base import Prompt, PromptState, PromptStatus
from .confirm import ConfirmPrompt
from .form import EditablePrompt, FormPrompt, SnippetPrompt
from .numeral import NumberPrompt, NumeralPrompt
from .scale import ScalePrompt, SurveyPrompt
from .select import AutoCompletePrompt, MultiSelectPrompt, SelectPrompt
from .sort import SortPrompt
from .string import InvisiblePrompt, ListPrompt, PasswordPrompt, StringPrompt, TextPrompt

BUILTIN_PROMPTS = MappingProxyType(
    {
        cls.type_name: cls
        for cls in (
            StringPrompt,
            TextPrompt,
            PasswordPrompt,
            InvisiblePrompt,
            ListPrompt,
            NumeralPrompt,
            NumberPrompt,
            ConfirmPrompt,
            SelectPrompt,
            MultiSelectPrompt,
            AutoCompletePrompt,
            ScalePrompt,
            SurveyPrompt,
            SortPrompt,
            FormPrompt,
            EditablePrompt,
            SnippetPrompt,
        )
    }
)

__all__ = [
    "BUILTIN_PROMPTS",
    "Prompt",
    "PromptState",
    "PromptStatus",
    "ArrayPrompt",
    "StringPrompt",
    "TextPrompt",
    "PasswordPrompt",
    "InvisiblePrompt",
    "ListPrompt",
    "NumeralPrompt",
    "NumberPrompt",
    "ConfirmPrompt",
    "SelectPrompt",
    "MultiSelectPrompt",
    "AutoCompletePrompt",
    "ScalePrompt",
    "SurveyPrompt",
    "SortPrompt",
    "FormPrompt",
    "EditablePrompt",
    "SnippetPrompt",
]
