# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Shared pytest fixtures."""

import pytest

import envrecord.log_factory as log_factory


@pytest.fixture(autouse=True)
def reset_default_logger():
    """Reset the module default logger around each test."""
    log_factory._default_logger = None
    yield
    log_factory._default_logger = None
