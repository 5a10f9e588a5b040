# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Fixed-width numeric field types.

Declaring a field with one of these types keeps the value within the given
width. They are plain ``int``/``float`` at runtime.

Example:
    >>> @dataclass
    ... class Settings:
    ...     retries: Int8 = 0
    ...     ratio: Float32 = 0.0
"""

from typing import NewType

Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)

INT_WIDTHS = {Int8: 8, Int16: 16, Int32: 32, Int64: 64}
FLOAT_WIDTHS = {Float32: 32, Float64: 64}

__all__ = ["Int8", "Int16", "Int32", "Int64", "Float32", "Float64"]
