# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""String to field value conversion."""

import math
import re
import struct
from typing import Any

from .schema import FieldSpec

TRUE_VALUES = ("yes", "true", "y", "1", "on")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def parse_bool(raw: str) -> bool:
    """Return True for yes/true/y/1/on (any case), False for anything else."""
    return raw.lower() in TRUE_VALUES


def parse_int(raw: str, width: int = 64) -> int:
    """Parse a base-10 integer and wrap it to a signed ``width``-bit value.

    Raises:
        ValueError: If raw is not a decimal integer or exceeds 64 bits
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid integer literal: {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    if width < 64:
        half = 1 << (width - 1)
        value = ((value + half) % (1 << width)) - half
    return value


def parse_float(raw: str, width: int = 64) -> float:
    """Parse a decimal float at single (32) or double (64) precision.

    Raises:
        ValueError: If raw is not a float literal or overflows the width
    """
    if raw != raw.strip() or "_" in raw:
        raise ValueError(f"invalid float literal: {raw!r}")
    value = float(raw)
    if math.isinf(value) and "inf" not in raw.lower():
        raise ValueError(f"float out of range: {raw!r}")
    if width == 32:
        # Older interpreters raise OverflowError, newer ones round to inf
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            value = math.inf
        if math.isinf(value) and "inf" not in raw.lower():
            raise ValueError(f"float out of range for 32 bits: {raw!r}")
    return value


def parse_list(raw: str) -> list[str]:
    """Split on commas with no trimming; the empty string is an empty list."""
    if not raw:
        return []
    return raw.split(",")


def zero_value(spec: FieldSpec) -> Any:
    """Return a fresh zero value for the field's kind."""
    if spec.kind == "bool":
        return False
    if spec.kind == "int":
        return 0
    if spec.kind == "float":
        return 0.0
    if spec.kind == "list":
        return []
    return ""


def coerce(spec: FieldSpec, raw: str) -> Any:
    """Convert a raw string into the field's declared type.

    Booleans, lists and strings always convert. Numbers raise ValueError on
    malformed input; callers decide how to recover.

    Args:
        spec: Field descriptor
        raw: Value from the environment or the default annotation

    Returns:
        Converted value

    Raises:
        ValueError: If a numeric field cannot be parsed
    """
    if spec.kind == "bool":
        return parse_bool(raw)
    if spec.kind == "int":
        return parse_int(raw, spec.width)
    if spec.kind == "float":
        return parse_float(raw, spec.width)
    if spec.kind == "list":
        return parse_list(raw)
    return raw
