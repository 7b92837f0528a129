"""Question option parsing and choice normalisation tests."""

from __future__ import annotations

import dataclasses
import unittest

from lazyprompt.choices import Choice, normalize_choice, normalize_choices
from lazyprompt.errors import ConfigurationError
from lazyprompt.options import PromptOptions


class PromptOptionsTests(unittest.TestCase):
    def test_unknown_keys_move_to_extras_and_aliases_resolve(self) -> None:
        options = PromptOptions.from_mapping(
            {"name": "color", "type": "select", "choices": ["red"], "maxChoices": 2, "onSubmit": print}
        )
        self.assertEqual(options.get("choices"), ["red"])
        self.assertEqual(options.get("maxChoices"), 2)
        self.assertEqual(options.get("max_choices"), 2)
        self.assertIs(options.on_submit, print)
        self.assertNotIn("onSubmit", options.extras)

    def test_default_type_fills_missing_type(self) -> None:
        options = PromptOptions.from_mapping({"name": "n"}, default_type="input")
        self.assertEqual(options.type, "input")

    def test_name_is_required(self) -> None:
        with self.assertRaises(ConfigurationError):
            PromptOptions.from_mapping({"type": "input"})
        with self.assertRaises(ConfigurationError):
            PromptOptions(name="")

    def test_options_are_immutable(self) -> None:
        options = PromptOptions(name="n", type="input", extras={"min": 1})
        with self.assertRaises(dataclasses.FrozenInstanceError):
            options.name = "other"  # type: ignore[misc]
        with self.assertRaises(TypeError):
            options.extras["min"] = 2  # type: ignore[index]

    def test_non_mapping_question_is_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            PromptOptions.from_mapping(["name"])  # type: ignore[arg-type]


class ChoiceTests(unittest.TestCase):
    def test_message_and_value_default_to_name(self) -> None:
        choice = normalize_choice("red")
        self.assertEqual((choice.name, choice.message, choice.value), ("red", "red", "red"))

    def test_mapping_keeps_explicit_fields(self) -> None:
        choice = normalize_choice({"name": "r", "message": "Red", "value": 1, "hint": "warm", "extra": "ignored"})
        self.assertEqual(choice, Choice(name="r", message="Red", value=1, hint="warm"))

    def test_disabled_reason_and_selectability(self) -> None:
        self.assertEqual(Choice("a", disabled="Sold out").disabled_reason, "Sold out")
        self.assertEqual(Choice("a", disabled=True).disabled_reason, "(disabled)")
        self.assertFalse(Choice("a", disabled=True).selectable)
        self.assertFalse(normalize_choice({"role": "separator"}).selectable)

    def test_malformed_entries_raise(self) -> None:
        with self.assertRaises(ConfigurationError):
            normalize_choice(3)  # type: ignore[arg-type]
        with self.assertRaises(ConfigurationError):
            normalize_choice({"hint": "no name"})
        with self.assertRaises(ConfigurationError):
            normalize_choices("abc")

    def test_unique_names_are_enforced_only_when_asked(self) -> None:
        self.assertEqual(len(normalize_choices(["a", "a"])), 2)
        with self.assertRaises(ConfigurationError):
            normalize_choices(["a", "a"], unique=True)


if __name__ == "__main__":
    unittest.main()
