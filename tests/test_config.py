from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyprompt import config
from lazyprompt.theme import ASCII_SYMBOLS, DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, UNICODE_SYMBOLS


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, text: str | None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if text is not None:
            config_path.write_text(text, encoding="utf-8")
        patcher = mock.patch("lazyprompt.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        env = mock.patch.dict("lazyprompt.config.os.environ", {}, clear=True)
        env.start()
        self.addCleanup(env.stop)

    def test_missing_file_uses_defaults(self) -> None:
        self._with_config(None)
        self.assertEqual(config.load_config(), {})
        prefs = config.load_display_preferences()
        self.assertIs(prefs.theme, DEFAULT_THEME)
        self.assertIs(prefs.symbols, UNICODE_SYMBOLS)

    def test_theme_and_symbols_are_read_from_file(self) -> None:
        self._with_config('{"theme": " Ocean ", "symbols": "ASCII"}')
        self.assertEqual(config.load_theme_name(), "Ocean")
        prefs = config.load_display_preferences()
        self.assertIs(prefs.theme, OCEAN_THEME)
        self.assertIs(prefs.symbols, ASCII_SYMBOLS)

    def test_explicit_theme_argument_beats_config(self) -> None:
        self._with_config('{"theme": "ocean"}')
        self.assertIs(config.load_display_preferences("default").theme, DEFAULT_THEME)

    def test_malformed_json_falls_back_to_defaults(self) -> None:
        self._with_config("{not json")
        with self.assertLogs("lazyprompt.config", level="WARNING"):
            self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())

    def test_non_object_json_is_ignored(self) -> None:
        self._with_config('["ocean"]')
        self.assertEqual(config.load_config(), {})

    def test_no_color_from_config_or_environment(self) -> None:
        self._with_config('{"no_color": true}')
        self.assertTrue(config.load_no_color())
        self.assertIs(config.load_display_preferences().theme, PLAIN_THEME)

        self._with_config("{}")
        self.assertFalse(config.load_no_color())
        with mock.patch.dict("lazyprompt.config.os.environ", {"NO_COLOR": "1"}):
            self.assertTrue(config.load_no_color())

    def test_explicit_no_color_false_overrides_environment(self) -> None:
        self._with_config("{}")
        with mock.patch.dict("lazyprompt.config.os.environ", {"NO_COLOR": "1"}):
            prefs = config.load_display_preferences(no_color=False)
        self.assertIs(prefs.theme, DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()
