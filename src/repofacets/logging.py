"""Logging setup for repofacets.

Only the `repofacets` logger tree is configured; the host application's root
logger is left alone. Output is one JSON object per line.

Usage:
    from repofacets.logging import configure_logging

    configure_logging("debug")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

LOGGER_NAME = "repofacets"

# Context fields lifted out of `extra=` into the top level of each line
CONTEXT_FIELDS = ("project",)


class JsonFormatter(logging.Formatter):
    """Render records as JSON lines with repofacets context fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        line: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                line[name] = value
        if record.exc_info:
            line["error"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> logging.Logger:
    """Send repofacets logs to a stream (stdout by default) as JSON lines.

    Calling again replaces the previous handler instead of adding another.

    Args:
        level: Level name, case-insensitive.
        stream: Destination stream.

    Returns:
        The configured `repofacets` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
