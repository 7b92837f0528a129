"""Command-line front door for lazyprompt.

Loads a JSON question file, runs the questions on the terminal and prints
the answers as JSON. Prompts draw on stderr so stdout stays machine-readable.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .config import load_display_preferences
from .enquirer import Enquirer
from .errors import LazyPromptError, PromptCancelled
from .input import TerminalKeySource
from .log import setup_logging
from .terminal import Screen
from .theme import available_theme_names

CANCELLED_EXIT_STATUS = 130

log = logging.getLogger(__name__)


def _log_level(value: str) -> int:
    """argparse type for logging level names."""
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"invalid log level: {value!r}")
    return level


def load_questions(path: Path) -> list[dict[str, Any]]:
    """Read a JSON question list (or a single question object) from ``path``."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise SystemExit(f"{path} must hold a question object or a list of them")
    return data


def build_enquirer(theme: str | None, no_color: bool) -> Enquirer:
    preferences = load_display_preferences(theme, no_color=True if no_color else None)
    return Enquirer(
        theme=preferences.theme,
        symbols=preferences.symbols,
        keys=TerminalKeySource(),
        screen=Screen(sys.stderr),
    )


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, ask the questions and print the answers.

    Returns the process exit status: ``0`` on success and ``130`` when the
    user cancels, in which case the partial answers go to stderr.
    """
    parser = argparse.ArgumentParser(
        prog="lazyprompt",
        description="Ask the questions in a JSON file and print the answers as JSON.",
    )
    parser.add_argument("path", type=Path, help="JSON file with a question or a list of questions.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write JSON-lines logs to this file.")
    parser.add_argument("--log-level", type=_log_level, default=logging.INFO, help="Logging level (default: INFO).")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.log_level)
    questions = load_questions(args.path)
    enquirer = build_enquirer(args.theme, args.no_color)
    log.info("asking %d questions from %s", len(questions), args.path)

    try:
        answers = asyncio.run(enquirer.prompt(questions))
    except PromptCancelled as exc:
        log.info("cancelled at %s", exc.name)
        sys.stderr.write(json.dumps(exc.answers, default=str) + "\n")
        return CANCELLED_EXIT_STATUS
    except LazyPromptError as exc:
        log.error("prompt session failed: %s", exc)
        raise SystemExit(f"lazyprompt: {exc}") from exc

    sys.stdout.write(json.dumps(answers, default=str) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
