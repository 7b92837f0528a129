"""CLI argument, question-file, and exit-status tests.

Verifies how ``lazyprompt.cli.main`` loads questions and reports answers.
The terminal is replaced with a scripted key source.
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyprompt import cli
from lazyprompt.enquirer import Enquirer
from lazyprompt.input import ScriptedKeySource
from lazyprompt.terminal import Screen
from lazyprompt.theme import PLAIN_THEME, UNICODE_SYMBOLS


def _scripted(*events):
    def build(theme, no_color):
        return Enquirer(
            keys=ScriptedKeySource(events),
            screen=Screen(io.StringIO(), columns=80),
            theme=PLAIN_THEME,
            symbols=UNICODE_SYMBOLS,
        )

    return build


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        patcher = mock.patch("lazyprompt.cli.setup_logging")
        self.setup_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def _questions(self, data) -> Path:
        path = self.root / "questions.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_answers_are_printed_as_json(self) -> None:
        path = self._questions(
            [
                {"name": "name", "type": "input"},
                {"name": "ok", "type": "confirm"},
            ]
        )
        with mock.patch("lazyprompt.cli.build_enquirer", _scripted("Ada", "return", "y", "return")), mock.patch(
            "sys.stdout", new_callable=io.StringIO
        ) as stdout:
            status = cli.main([str(path)])

        self.assertEqual(status, 0)
        self.assertEqual(json.loads(stdout.getvalue()), {"name": "Ada", "ok": True})

    def test_single_question_object_is_accepted(self) -> None:
        path = self._questions({"name": "n", "type": "numeral"})
        with mock.patch("lazyprompt.cli.build_enquirer", _scripted("7", "return")), mock.patch(
            "sys.stdout", new_callable=io.StringIO
        ) as stdout:
            cli.main([str(path)])

        self.assertEqual(json.loads(stdout.getvalue()), {"n": 7})

    def test_cancel_exits_130_with_partial_answers_on_stderr(self) -> None:
        path = self._questions([{"name": "a", "type": "input"}, {"name": "b", "type": "input"}])
        with mock.patch("lazyprompt.cli.build_enquirer", _scripted("x", "return", "escape")), mock.patch(
            "sys.stdout", new_callable=io.StringIO
        ) as stdout, mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            status = cli.main([str(path)])

        self.assertEqual(status, cli.CANCELLED_EXIT_STATUS)
        self.assertEqual(stdout.getvalue(), "")
        self.assertEqual(json.loads(stderr.getvalue()), {"a": "x"})

    def test_configuration_error_exits_with_message(self) -> None:
        path = self._questions([{"name": "a", "type": "nope"}])
        with mock.patch("lazyprompt.cli.build_enquirer", _scripted()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(path)])
        self.assertIn("unknown prompt type", str(ctx.exception.code))

    def test_bad_question_files(self) -> None:
        broken = self.root / "broken.json"
        broken.write_text("{", encoding="utf-8")
        with self.assertRaises(SystemExit):
            cli.main([str(broken)])

        with self.assertRaises(SystemExit):
            cli.main([str(self._questions(["not a question"]))])

        with self.assertRaises(SystemExit):
            cli.main([str(self.root / "missing.json")])

    def test_logging_options_are_forwarded(self) -> None:
        path = self._questions([{"name": "a", "type": "confirm"}])
        log_file = self.root / "run.jsonl"
        with mock.patch("lazyprompt.cli.build_enquirer", _scripted("return")), mock.patch(
            "sys.stdout", new_callable=io.StringIO
        ):
            cli.main([str(path), "--log-file", str(log_file), "--log-level", "debug"])

        self.setup_logging.assert_called_once_with(log_file, logging.DEBUG)

    def test_theme_and_no_color_reach_the_enquirer(self) -> None:
        path = self._questions([{"name": "a", "type": "confirm"}])
        build = mock.Mock(side_effect=_scripted("return"))
        with mock.patch("lazyprompt.cli.build_enquirer", build), mock.patch("sys.stdout", new_callable=io.StringIO):
            cli.main([str(path), "--theme", "ocean", "--no-color"])

        build.assert_called_once_with("ocean", True)

    def test_log_level_type(self) -> None:
        self.assertEqual(cli._log_level("warning"), logging.WARNING)
        with self.assertRaises(argparse.ArgumentTypeError):
            cli._log_level("loud")


if __name__ == "__main__":
    unittest.main()
