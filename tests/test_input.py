"""Regression tests for raw-key decoding.

Covers ESC timing, CSI/SS3 sequences with modifiers, and control-key mapping.
These tests protect interactive input handling in raw terminal mode.
"""

import os
import time
import unittest

from lazyprompt import input as input_mod


def _decode(payload: bytes, count: int = 1):
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        events = [input_mod.read_key_event(read_fd, timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)
    return events[0] if count == 1 else events


class ReadKeyEventRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_single_escape_returns_escape_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            event = input_mod.read_key_event(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(event.combo, "escape")
        # Esc waits briefly for sequence bytes, but should not require another key press.
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(_decode(b"\x1b[A").combo, "up")
        self.assertEqual(_decode(b"\x1b[D").combo, "left")
        self.assertEqual(_decode(b"\x1bOB").combo, "down")

    def test_modified_arrow_carries_shift_and_ctrl(self) -> None:
        self.assertEqual(_decode(b"\x1b[1;2A").combo, "shift+up")
        self.assertEqual(_decode(b"\x1b[1;5C").combo, "ctrl+right")
        self.assertEqual(_decode(b"\x1b[1;3B").combo, "meta+down")

    def test_back_tab_decodes_as_shift_tab(self) -> None:
        event = _decode(b"\x1b[Z")
        self.assertEqual(event.name, "tab")
        self.assertTrue(event.shift)
        self.assertEqual(event.combo, "shift+tab")

    def test_tilde_sequences_map_to_editing_keys(self) -> None:
        self.assertEqual(_decode(b"\x1b[3~").name, "delete")
        self.assertEqual(_decode(b"\x1b[5~").name, "pageup")
        self.assertEqual(_decode(b"\x1b[6~").name, "pagedown")
        self.assertEqual(_decode(b"\x1b[2~").name, "insert")

    def test_unknown_csi_sequence_is_undefined(self) -> None:
        event = _decode(b"\x1b[99~")
        self.assertEqual(event.name, "undefined")
        self.assertEqual(event.raw, "\x1b[99~")

    def test_control_keys_are_recognized(self) -> None:
        self.assertEqual(_decode(b"\x03").combo, "ctrl+c")
        self.assertEqual(_decode(b"\x04").combo, "ctrl+d")
        self.assertEqual(_decode(b"\r").combo, "return")
        self.assertEqual(_decode(b"\n").combo, "enter")
        self.assertEqual(_decode(b"\t").combo, "tab")
        self.assertEqual(_decode(b"\x7f").combo, "backspace")

    def test_printable_keys_keep_their_text(self) -> None:
        upper = _decode(b"A")
        self.assertEqual(upper.name, "a")
        self.assertTrue(upper.shift)
        self.assertEqual(upper.char, "A")
        self.assertEqual(upper.combo, "a")

        space = _decode(b" ")
        self.assertEqual(space.name, "space")
        self.assertEqual(space.char, " ")

    def test_multibyte_utf8_is_one_event(self) -> None:
        event = _decode("é".encode("utf-8"))
        self.assertEqual(event.char, "é")
        self.assertTrue(event.is_printable)

    def test_escape_prefixed_letter_is_meta(self) -> None:
        event = _decode(b"\x1bx")
        self.assertTrue(event.meta)
        self.assertEqual(event.combo, "meta+x")
        self.assertFalse(event.is_printable)

    def test_double_escape_yields_two_escape_events(self) -> None:
        first, second = _decode(b"\x1b\x1b", count=2)
        self.assertEqual(first.combo, "escape")
        self.assertEqual(second.combo, "escape")

    def test_timeout_without_input_returns_none(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertIsNone(input_mod.read_key_event(read_fd, timeout_ms=5))
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_end_of_input_returns_none(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            self.assertIsNone(input_mod.read_key_event(read_fd))
        finally:
            os.close(read_fd)


if __name__ == "__main__":
    unittest.main()
