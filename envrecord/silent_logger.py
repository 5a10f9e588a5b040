# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""In-memory logger for tests."""

from typing import Any

from .logger import Logger


class SilentLogger(Logger):
    """Keeps every event in ``logs`` and prints nothing.

    No level filtering is applied, so tests can assert on DEBUG events.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        self.name = name or "envrecord"
        self.logs: list[dict[str, Any]] = []

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Store an event.

        Args:
            level: Level name
            message: The log message
            **kwargs: Structured fields, stored under ``extra``
        """
        entry: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            entry["extra"] = kwargs
        self.logs.append(entry)

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Get stored events, optionally filtered by level.

        Args:
            level: Optional level name to filter by

        Returns:
            List of log entries
        """
        if level is None:
            return self.logs
        return [entry for entry in self.logs if entry["level"] == level]
