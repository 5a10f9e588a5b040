# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Logger construction and the package-wide default logger."""

import os

from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

LOGGER_TYPES = {"stdout": StdoutLogger, "silent": SilentLogger}

_default_logger: Logger | None = None


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Create a logger, reading unset arguments from the environment.

    Each argument falls back to ``LOG_TYPE``, ``LOG_LEVEL`` and ``LOG_NAME``
    and then to "stdout", "INFO" and "envrecord".

    Args:
        logger_type: "stdout" or "silent"
        level: Minimum level (DEBUG, INFO, WARNING, ERROR)
        name: Logger name

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type or level is not recognized
    """
    logger_type = (logger_type or os.getenv("LOG_TYPE") or "stdout").lower()
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    name = name or os.getenv("LOG_NAME") or "envrecord"

    if logger_type not in LOGGER_TYPES:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. "
            f"Must be one of: {', '.join(LOGGER_TYPES)}"
        )
    return LOGGER_TYPES[logger_type](level=level, name=name)


def set_default_logger(logger: Logger | None) -> None:
    """Set the logger used by RecordLoader when none is injected.

    Passing None makes the next get_logger() call rebuild it from the
    environment.
    """
    global _default_logger
    _default_logger = logger


def get_logger() -> Logger:
    """Return the default logger, creating it with create_logger() on first use."""
    global _default_logger
    if _default_logger is None:
        _default_logger = create_logger()
    return _default_logger
