# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Abstract logger interface for loader events."""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for loggers.

    Implementations only provide :meth:`log`; the level helpers used by the
    loader delegate to it.
    """

    @abstractmethod
    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Record a single event.

        Args:
            level: Level name (DEBUG, INFO, WARNING, ERROR)
            message: The log message
            **kwargs: Additional structured data to log
        """
        pass

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug-level message.

        Args:
            message: The log message
            **kwargs: Additional structured data to log
        """
        self.log("DEBUG", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning-level message.

        Args:
            message: The log message
            **kwargs: Additional structured data to log
        """
        self.log("WARNING", message, **kwargs)
