"""Structured JSON logging for prompt sessions.

Prompts own the terminal, so log records go to a file rather than stderr.
Library code only calls ``logging.getLogger(__name__)``; this module wires
handlers for the CLI or for applications that want the same format.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

LOGGER_NAME = "lazyprompt"


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "data"):
            entry["data"] = record.data  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(log_file: Path | None = None, level: int = logging.INFO) -> logging.Logger:
    """Configure the ``lazyprompt`` logger.

    Args:
        log_file: JSON-lines destination. If None, records are discarded.
        level: Logging level.

    Returns:
        The root ``lazyprompt`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(JSONFormatter())
    handler.setLevel(level)
    logger.addHandler(handler)
    # Keep records off the terminal the prompts are drawing on.
    logger.propagate = False
    return logger


__all__ = ["JSONFormatter", "setup_logging", "LOGGER_NAME"]
