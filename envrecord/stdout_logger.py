# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""JSON-lines logger writing to stdout."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import Logger

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class StdoutLogger(Logger):
    """Writes one JSON object per event to stdout.

    Every event at or above ``level`` is also passed to the stdlib logger of
    the same name, so handlers and pytest's ``caplog`` see it.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Minimum level written (DEBUG, INFO, WARNING, ERROR)
            name: Logger name, also used for the stdlib logger

        Raises:
            ValueError: If level is not one of LEVELS
        """
        self.level = level.upper()
        self.name = name or "envrecord"

        if self.level not in LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(LEVELS)}")

        self._stdlib_logger = logging.getLogger(self.name)

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Write an event as JSON and mirror it to stdlib logging.

        Args:
            level: Level name; events below ``self.level`` are dropped
            message: The log message
            **kwargs: Structured fields, written under ``extra``
        """
        if LEVELS[level] < LEVELS[self.level]:
            return

        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if kwargs:
            entry["extra"] = kwargs

        print(json.dumps(entry, default=str), file=sys.stdout, flush=True)
        self._stdlib_logger.log(LEVELS[level], message, extra={"extra": kwargs} if kwargs else None)
