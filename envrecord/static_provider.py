# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Static/dictionary-backed environment provider."""

from typing import Optional

from .base import EnvironmentProvider


class StaticEnvironmentProvider(EnvironmentProvider):
    """Environment provider with static values (useful for tests).

    Keys are stored as given; lookups use the upper-cased variable name, so
    entries should be written in upper case.
    """

    def __init__(self, values: dict[str, str] | None = None):
        self._values = dict(values) if values is not None else {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)
