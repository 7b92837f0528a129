"""Regression tests for ANSI-aware width math.

Frame redraws depend on how many columns and rows styled lines occupy.
"""

import unittest

from lazyprompt import ansi as ansi_mod


class VisibleWidthTests(unittest.TestCase):
    def test_escape_codes_are_ignored(self) -> None:
        styled = "\x1b[01m\x1b[36mhello\x1b[39;49;00m"
        self.assertEqual(ansi_mod.strip_ansi(styled), "hello")
        self.assertEqual(ansi_mod.visible_width(styled), 5)

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(ansi_mod.visible_width("日本"), 4)
        self.assertEqual(ansi_mod.visible_width("é"), 1)

    def test_tabs_expand_to_next_stop(self) -> None:
        self.assertEqual(ansi_mod.visible_width("ab\tc"), 9)


class PhysicalRowsTests(unittest.TestCase):
    def test_empty_line_still_takes_a_row(self) -> None:
        self.assertEqual(ansi_mod.physical_rows("", 80), 1)

    def test_lines_wrap_at_column_width(self) -> None:
        self.assertEqual(ansi_mod.physical_rows("x" * 80, 80), 1)
        self.assertEqual(ansi_mod.physical_rows("x" * 81, 80), 2)

    def test_non_positive_width_counts_one_row(self) -> None:
        self.assertEqual(ansi_mod.physical_rows("abc", 0), 1)


if __name__ == "__main__":
    unittest.main()
