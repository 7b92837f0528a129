"""Unit tests for numeric entry and yes/no confirmation."""

from __future__ import annotations

import io
import unittest

from lazyprompt.errors import ConfigurationError
from lazyprompt.input import ScriptedKeySource
from lazyprompt.prompts import ConfirmPrompt, NumberPrompt, NumeralPrompt
from lazyprompt.prompts.numeral import INVALID_NUMBER_MESSAGE
from lazyprompt.terminal import Screen
from lazyprompt.theme import PLAIN_THEME


def _make(cls, events, **options):
    out = io.StringIO()
    options.setdefault("name", "answer")
    prompt = cls(keys=ScriptedKeySource(events), screen=Screen(out, columns=80), theme=PLAIN_THEME, **options)
    return prompt, out


class NumeralPromptTests(unittest.IsolatedAsyncioTestCase):
    async def test_stepping_down_clamps_at_min(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["down"] * 6 + ["return"], min=0, max=10, initial=5)
        self.assertEqual(await prompt.run(), 0)

    async def test_stepping_up_clamps_at_max(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["shift+up", "return"], min=0, max=10, initial=5)
        self.assertEqual(await prompt.run(), 10)

    async def test_typed_value_above_max_is_clamped_on_submit(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["42", "return"], max=10)
        self.assertEqual(await prompt.run(), 10)

    async def test_major_step_and_page_keys(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["shift+up", "pageup", "shift+down", "return"], initial=1)
        self.assertEqual(await prompt.run(), 11)

    async def test_custom_minor_step(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["up", "up", "return"], initial=0, minor=5)
        self.assertEqual(await prompt.run(), 10)

    async def test_non_numeric_characters_are_ignored(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["1a.2", "return"])
        self.assertEqual(await prompt.run(), 12)

    async def test_negative_sign_only_when_min_allows(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["-3", "return"])
        self.assertEqual(await prompt.run(), -3)

        prompt, _out = _make(NumeralPrompt, ["-3", "return"], min=0)
        self.assertEqual(await prompt.run(), 3)

    async def test_float_and_round(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["1.5", "return"], float=True)
        self.assertEqual(await prompt.run(), 1.5)

        prompt, _out = _make(NumeralPrompt, ["2.6", "return"], float=True, round=True)
        self.assertEqual(await prompt.run(), 3)

    async def test_round_takes_halves_up(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["2.5", "return"], float=True, round=True)
        self.assertEqual(await prompt.run(), 3)

        prompt, _out = _make(NumeralPrompt, ["-2.5", "return"], float=True, round=True)
        self.assertEqual(await prompt.run(), -2)

    def test_fractional_options_require_float(self) -> None:
        for option in ("min", "max", "minor", "major", "initial"):
            with self.subTest(option=option):
                with self.assertRaises(ConfigurationError):
                    _make(NumeralPrompt, [], **{option: 0.5})

    async def test_whole_float_steps_keep_integer_buffer(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["up", "up", "return"], initial=5, minor=2.0)
        prompt.up()
        self.assertEqual(prompt.buffer, "7")
        self.assertEqual(await prompt.run(), 11)

    async def test_fractional_steps_with_float(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["up", "up", "return"], float=True, initial=5, minor=0.5)
        self.assertEqual(await prompt.run(), 6.0)
        self.assertEqual(prompt.state.error, "")

    async def test_float_steps_do_not_accumulate_error(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["up", "up", "up", "return"], float=True, initial=0, minor=0.1)
        self.assertEqual(await prompt.run(), 0.3)

    async def test_lone_minus_sign_is_rejected(self) -> None:
        prompt, _out = _make(NumeralPrompt, [])
        prompt.buffer = "-"
        await prompt.submit()
        self.assertEqual(prompt.state.error, INVALID_NUMBER_MESSAGE)
        self.assertTrue(prompt.running)

    async def test_empty_submission_uses_initial_or_none(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["backspace", "return"], initial=7)
        self.assertEqual(await prompt.run(), 7)

        prompt, _out = _make(NumeralPrompt, ["return"])
        self.assertIsNone(await prompt.run())

    async def test_required_blocks_empty_value(self) -> None:
        prompt, _out = _make(NumeralPrompt, [], required=True)
        await prompt.submit()
        self.assertEqual(prompt.state.error, "Value is required")

    async def test_step_from_empty_starts_at_positive_min(self) -> None:
        prompt, _out = _make(NumeralPrompt, ["down", "return"], min=3)
        self.assertEqual(await prompt.run(), 3)

    async def test_number_alias(self) -> None:
        prompt, _out = _make(NumberPrompt, ["8", "return"])
        self.assertEqual(await prompt.run(), 8)
        self.assertEqual(prompt.options.type, "number")

    def test_invalid_bounds_raise(self) -> None:
        with self.assertRaises(ConfigurationError):
            _make(NumeralPrompt, [], min=5, max=1)
        with self.assertRaises(ConfigurationError):
            _make(NumeralPrompt, [], min="zero")


class ConfirmPromptTests(unittest.IsolatedAsyncioTestCase):
    async def test_default_is_no(self) -> None:
        prompt, _out = _make(ConfirmPrompt, ["return"])
        self.assertIs(await prompt.run(), False)
        self.assertEqual(prompt.state.display, "No")

    async def test_y_and_n_set_the_value(self) -> None:
        prompt, _out = _make(ConfirmPrompt, ["y", "return"])
        self.assertIs(await prompt.run(), True)

        prompt, _out = _make(ConfirmPrompt, ["Y", "n", "return"])
        self.assertIs(await prompt.run(), False)

    async def test_toggle_keys(self) -> None:
        prompt, _out = _make(ConfirmPrompt, ["space", "return"], initial=True)
        self.assertIs(await prompt.run(), False)

        prompt, _out = _make(ConfirmPrompt, ["right", "tab", "left", "return"])
        self.assertIs(await prompt.run(), True)

    async def test_other_letters_are_ignored(self) -> None:
        prompt, _out = _make(ConfirmPrompt, ["q", "return"], initial=True)
        self.assertIs(await prompt.run(), True)

    async def test_required_accepts_false(self) -> None:
        prompt, _out = _make(ConfirmPrompt, ["return"], required=True)
        self.assertIs(await prompt.run(), False)

    async def test_hint_follows_value(self) -> None:
        prompt, _out = _make(ConfirmPrompt, [], message="Continue?", initial=True)
        await prompt.redraw()
        lines, _cursor = prompt.compose_frame()
        self.assertEqual(lines, ["? Continue? › (Y/n) Yes"])


if __name__ == "__main__":
    unittest.main()
