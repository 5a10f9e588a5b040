# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""envrecord: populate dataclass records from environment variables.

Example:
    >>> from dataclasses import dataclass, field
    >>> from envrecord import load_envs_with_prefix
    >>>
    >>> @dataclass
    ... class Settings:
    ...     username: str = ""
    ...     secret_key: str = field(default="", metadata={"default": "s3cr37"})
    ...     auto_restart: bool = field(default=False, metadata={"default": "true"})
    ...     ignored_field: str = field(default="", metadata={"envrecord": "-"})
    >>>
    >>> settings = load_envs_with_prefix("pref", Settings)  # reads PREF_USERNAME, ...
"""

__version__ = "0.1.0"

from .base import EnvironmentProvider
from .coercion import coerce, parse_bool, zero_value
from .env_provider import OsEnvironmentProvider
from .loader import RecordLoader, load_envs, load_envs_with_prefix
from .log_factory import create_logger, get_logger, set_default_logger
from .logger import Logger
from .naming import resolve_env_name, snake_case
from .numeric import Float32, Float64, Int8, Int16, Int32, Int64
from .schema import FieldSpec, RecordTypeError, describe_init_vars, describe_record, env_field
from .silent_logger import SilentLogger
from .static_provider import StaticEnvironmentProvider
from .stdout_logger import StdoutLogger

__all__ = [
    # Version
    "__version__",
    # Loading
    "RecordLoader",
    "load_envs",
    "load_envs_with_prefix",
    # Schema
    "FieldSpec",
    "RecordTypeError",
    "describe_record",
    "describe_init_vars",
    "env_field",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Float32",
    "Float64",
    # Naming and coercion
    "snake_case",
    "resolve_env_name",
    "coerce",
    "parse_bool",
    "zero_value",
    # Environment providers
    "EnvironmentProvider",
    "OsEnvironmentProvider",
    "StaticEnvironmentProvider",
    # Logging
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    "get_logger",
    "set_default_logger",
]
