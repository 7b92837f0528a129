"""Theme and symbol-set resolution tests."""

from __future__ import annotations

import unittest

from pygments.console import ansiformat

from lazyprompt import theme as theme_mod


class PromptThemeTests(unittest.TestCase):
    def test_style_uses_pygments_console_attributes(self) -> None:
        self.assertEqual(theme_mod.DEFAULT_THEME.style("primary", "x"), ansiformat("cyan", "x"))
        self.assertEqual(theme_mod.DEFAULT_THEME.style("strong", "x"), ansiformat("*", "x"))

    def test_plain_theme_and_unknown_roles_pass_text_through(self) -> None:
        self.assertEqual(theme_mod.PLAIN_THEME.style("primary", "x"), "x")
        self.assertEqual(theme_mod.DEFAULT_THEME.style("nonsense", "x"), "x")
        self.assertEqual(theme_mod.DEFAULT_THEME.style("primary", ""), "")

    def test_overrides_keep_only_valid_roles_and_attributes(self) -> None:
        custom = theme_mod.DEFAULT_THEME.with_overrides(
            {"primary": "*magenta*", "danger": "not-a-color", "bogus": "red"}
        )
        self.assertEqual(custom.primary, "*magenta*")
        self.assertEqual(custom.danger, theme_mod.DEFAULT_THEME.danger)
        self.assertIs(theme_mod.DEFAULT_THEME.with_overrides({}), theme_mod.DEFAULT_THEME)

    def test_resolve_theme_handles_unknown_names_and_no_color(self) -> None:
        self.assertIs(theme_mod.resolve_theme("OCEAN"), theme_mod.OCEAN_THEME)
        self.assertIs(theme_mod.resolve_theme("missing"), theme_mod.DEFAULT_THEME)
        self.assertIs(theme_mod.resolve_theme("ocean", no_color=True), theme_mod.PLAIN_THEME)
        self.assertEqual(theme_mod.available_theme_names(), ("default", "ocean"))


class SymbolSetTests(unittest.TestCase):
    def test_resolve_symbols_applies_known_overrides(self) -> None:
        symbols = theme_mod.resolve_symbols("ascii", {"pointer": "->", "unknown": "?"})
        self.assertEqual(symbols.pointer, "->")
        self.assertEqual(symbols.check, theme_mod.ASCII_SYMBOLS.check)

    def test_unknown_symbol_set_falls_back_to_unicode(self) -> None:
        self.assertIs(theme_mod.resolve_symbols("emoji"), theme_mod.UNICODE_SYMBOLS)


if __name__ == "__main__":
    unittest.main()
