# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Process environment provider."""

import os
from typing import Mapping, Optional

from .base import EnvironmentProvider


class OsEnvironmentProvider(EnvironmentProvider):
    """Environment provider that reads from the process environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)
