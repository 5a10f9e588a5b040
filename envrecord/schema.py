# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Field descriptors derived from dataclass records."""

import dataclasses
import sys
import types
import typing
import weakref
from dataclasses import dataclass
from typing import Any, Optional, Union

from .numeric import FLOAT_WIDTHS, INT_WIDTHS

SKIP_KEY = "envrecord"
DEFAULT_KEY = "default"
SKIP_VALUE = "-"


class RecordTypeError(TypeError):
    """Exception raised when a template is not a dataclass record."""
    pass


@dataclass(frozen=True)
class FieldSpec:
    """Specification for a single record field."""
    name: str
    field_type: Any
    kind: str  # "bool", "int", "float", "list", "str"
    width: int = 0  # bit width for "int" and "float"
    skip: bool = False
    default: Optional[str] = None
    init: bool = True
    init_var: bool = False  # InitVar constructor argument, not stored


def env_field(
    *,
    env_default: Optional[str] = None,
    skip: bool = False,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field with environment annotations.

    Thin wrapper around :func:`dataclasses.field` that fills the ``default``
    and ``envrecord`` metadata keys.

    Args:
        env_default: String used when the variable is missing or empty
        skip: Never read this field from the environment
        **kwargs: Passed through to :func:`dataclasses.field`

    Example:
        >>> @dataclass
        ... class Settings:
        ...     secret_key: str = env_field(env_default="s3cr37", default="")
        ...     ignored: str = env_field(skip=True, default="")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if env_default is not None:
        metadata[DEFAULT_KEY] = env_default
    if skip:
        metadata[SKIP_KEY] = SKIP_VALUE
    return dataclasses.field(metadata=metadata, **kwargs)


def _unwrap_optional(field_type: Any) -> Any:
    if typing.get_origin(field_type) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return field_type


def _is_string_list(field_type: Any) -> bool:
    if field_type is list:
        return True
    if typing.get_origin(field_type) is not list:
        return False
    args = typing.get_args(field_type)
    return not args or args == (str,)


def resolve_kind(field_type: Any) -> tuple[str, int]:
    """Map a declared type to its coercion kind and bit width.

    Anything that is not a bool, integer, float or list of strings is a
    string field.
    """
    field_type = _unwrap_optional(field_type)
    if field_type is bool:
        return "bool", 0
    if field_type is int:
        return "int", 64
    if field_type is float:
        return "float", 64
    if isinstance(field_type, typing.NewType):
        if field_type in INT_WIDTHS:
            return "int", INT_WIDTHS[field_type]
        if field_type in FLOAT_WIDTHS:
            return "float", FLOAT_WIDTHS[field_type]
        return resolve_kind(field_type.__supertype__)
    if _is_string_list(field_type):
        return "list", 0
    return "str", 0


def _default_from_metadata(metadata: Any) -> Optional[str]:
    default = metadata.get(DEFAULT_KEY)
    if default is None or default == "":
        return None
    return str(default)


def _resolve_annotation(record_type: type, annotation: Any) -> Any:
    """Evaluate a postponed (string) annotation in the record's module.

    Each field is resolved on its own, so one unresolvable name (e.g. an
    import guarded by ``TYPE_CHECKING``) only affects that field.
    """
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(record_type.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(annotation, globalns, dict(vars(record_type)))  # pylint: disable=eval-used
    except (NameError, AttributeError, SyntaxError, TypeError):
        # Unresolved; resolve_kind treats the raw string as a string field
        return annotation


def _make_spec(f: dataclasses.Field, field_type: Any, init_var: bool = False) -> FieldSpec:
    kind, width = resolve_kind(field_type)
    return FieldSpec(
        name=f.name,
        field_type=field_type,
        kind=kind,
        width=width,
        skip=f.metadata.get(SKIP_KEY) == SKIP_VALUE,
        default=_default_from_metadata(f.metadata),
        init=f.init,
        init_var=init_var,
    )


def _describe_type(record_type: type) -> tuple[tuple[FieldSpec, ...], tuple[FieldSpec, ...]]:
    specs = tuple(
        _make_spec(f, _resolve_annotation(record_type, f.type))
        for f in dataclasses.fields(record_type)
    )

    init_vars = []
    for f in record_type.__dataclass_fields__.values():
        # dataclasses.fields() leaves out InitVar pseudo-fields
        if f._field_type is not dataclasses._FIELD_INITVAR:  # type: ignore[attr-defined]
            continue
        annotation = _resolve_annotation(record_type, f.type)
        inner = annotation.type if isinstance(annotation, dataclasses.InitVar) else str
        init_vars.append(_make_spec(f, inner, init_var=True))

    return specs, tuple(init_vars)


_schema_cache: "weakref.WeakKeyDictionary[type, tuple[tuple[FieldSpec, ...], tuple[FieldSpec, ...]]]" = (
    weakref.WeakKeyDictionary()
)


def _schema_for(template: Any) -> tuple[tuple[FieldSpec, ...], tuple[FieldSpec, ...]]:
    record_type = record_type_of(template)
    schema = _schema_cache.get(record_type)
    if schema is None:
        schema = _describe_type(record_type)
        _schema_cache[record_type] = schema
    return schema


def record_type_of(template: Any) -> type:
    """Return the dataclass type of a record class or instance.

    Raises:
        RecordTypeError: If template is not a dataclass type or instance
    """
    record_type = template if isinstance(template, type) else type(template)
    if not dataclasses.is_dataclass(record_type):
        raise RecordTypeError(
            f"Expected a dataclass type or instance, got {record_type.__name__}"
        )
    return record_type


def describe_record(template: Any) -> tuple[FieldSpec, ...]:
    """Return the field descriptors of a record, in declaration order.

    Descriptors are built once per record type and cached. The cache holds
    record types weakly, so classes created at runtime can be freed.

    Args:
        template: Dataclass type or instance

    Returns:
        Tuple of FieldSpec

    Raises:
        RecordTypeError: If template is not a dataclass type or instance
    """
    return _schema_for(template)[0]


def describe_init_vars(template: Any) -> tuple[FieldSpec, ...]:
    """Return descriptors for the record's ``InitVar`` constructor arguments.

    They are loaded like fields and passed to ``__init__``, but are not
    stored on the record.
    """
    return _schema_for(template)[1]
