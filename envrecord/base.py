# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Base environment lookup interface."""

from abc import ABC, abstractmethod
from typing import Optional


class EnvironmentProvider(ABC):
    """Abstract read-only source of environment variables."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value of a variable, or None when it is not set."""
        raise NotImplementedError
