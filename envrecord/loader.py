# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Populate dataclass records from environment variables."""

from collections.abc import Mapping
from typing import Any, Optional, TypeVar, Union

from .base import EnvironmentProvider
from .coercion import coerce, zero_value
from .env_provider import OsEnvironmentProvider
from .log_factory import get_logger
from .logger import Logger
from .naming import resolve_env_name
from .schema import FieldSpec, describe_init_vars, describe_record, record_type_of

T = TypeVar("T")

Environ = Union[EnvironmentProvider, Mapping[str, str], None]


def _as_provider(environ: Environ) -> EnvironmentProvider:
    if isinstance(environ, EnvironmentProvider):
        return environ
    return OsEnvironmentProvider(environ)


class RecordLoader:
    """Loads dataclass records from an environment provider.

    Every field gets a value: malformed numbers and missing variables leave
    the zero value of the field's type, and skipped fields are never read.
    """

    def __init__(
        self,
        prefix: str = "",
        provider: Optional[EnvironmentProvider] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the record loader.

        Args:
            prefix: Optional prefix joined to every variable name with ``_``
            provider: Environment source (defaults to ``os.environ``)
            logger: Logger for debug events (defaults to get_logger())
        """
        self.prefix = prefix
        self.provider = provider or OsEnvironmentProvider()
        self.logger = logger or get_logger()

    def load(self, template: Union[type[T], T]) -> T:
        """Build a new record of the template's type.

        Args:
            template: Dataclass type or instance; only its type is used

        Returns:
            New populated record

        Raises:
            RecordTypeError: If template is not a dataclass type or instance
        """
        record_type = record_type_of(template)
        specs = describe_record(record_type)

        for spec in specs:
            # A string here is a postponed annotation that could not be evaluated
            if isinstance(spec.field_type, str) and not spec.skip:
                self.logger.warning(
                    "Unresolved field annotation, loading as string",
                    record_type=record_type.__name__,
                    field=spec.name,
                    annotation=spec.field_type,
                )

        values = {spec.name: self._load_field(spec) for spec in specs}

        init_values = {spec.name: values[spec.name] for spec in specs if spec.init}
        for spec in describe_init_vars(record_type):
            init_values[spec.name] = self._load_field(spec)
        record = record_type(**init_values)
        for spec in specs:
            if not spec.init:
                object.__setattr__(record, spec.name, values[spec.name])

        self.logger.debug(
            "Loaded record from environment",
            record_type=record_type.__name__,
            prefix=self.prefix,
            field_count=len(specs),
        )
        return record

    def _load_field(self, spec: FieldSpec) -> Any:
        if spec.skip:
            self.logger.debug("Skipping field", field=spec.name)
            return zero_value(spec)

        key = resolve_env_name(spec.name, self.prefix)
        raw = self.provider.get(key) or ""
        if raw == "" and spec.default is not None:
            self.logger.debug("Using default value", field=spec.name, env_var=key)
            raw = spec.default

        try:
            return coerce(spec, raw)
        except ValueError:
            if raw:
                # The raw value is not logged; it may hold a secret
                self.logger.debug(
                    "Ignoring malformed value",
                    field=spec.name,
                    env_var=key,
                    kind=spec.kind,
                )
            return zero_value(spec)


def load_envs_with_prefix(
    prefix: str,
    template: Union[type[T], T],
    *,
    environ: Environ = None,
    logger: Optional[Logger] = None,
) -> T:
    """Load a record from environment variables named ``PREFIX_FIELD_NAME``.

    A field named ``APIKey`` (or ``api_key``) is read from ``API_KEY``; with
    prefix ``"pref"`` it is read from ``PREF_API_KEY``.

    Field metadata controls the lookup:

    - ``{"envrecord": "-"}`` leaves the field at its zero value.
    - ``{"default": "..."}`` is used when the variable is missing or empty.

    Supported types are bool, int, float, list[str], str and the sized types
    of :mod:`envrecord.numeric`. Any other type receives the raw string.

    Args:
        prefix: Variable name prefix; empty for none
        template: Dataclass type or instance
        environ: Environment provider or mapping (defaults to ``os.environ``)
        logger: Optional logger

    Returns:
        New populated record

    Example:
        >>> @dataclass
        ... class Settings:
        ...     username: str = ""
        ...     secret_key: str = field(default="", metadata={"default": "s3cr37"})
        ...     auto_restart: bool = field(default=False, metadata={"default": "true"})
        ...     ignored_field: str = field(default="", metadata={"envrecord": "-"})
        >>> settings = load_envs_with_prefix("pref", Settings)
    """
    loader = RecordLoader(prefix=prefix, provider=_as_provider(environ), logger=logger)
    return loader.load(template)


def load_envs(
    template: Union[type[T], T],
    *,
    environ: Environ = None,
    logger: Optional[Logger] = None,
) -> T:
    """Load a record from environment variables without a prefix."""
    return load_envs_with_prefix("", template, environ=environ, logger=logger)
