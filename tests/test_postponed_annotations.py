# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Tests for records declared with postponed annotations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from envrecord import (
    Int8,
    SilentLogger,
    StaticEnvironmentProvider,
    describe_record,
    load_envs,
)

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass
class PostponedSettings:
    debug: bool = False
    retries: Int8 = 0
    hosts: list[str] = field(default_factory=list)
    name: str = ""


@dataclass
class PartiallyResolvable:
    port: int = 0
    debug: bool = False
    ratio: Decimal | None = None
    hosts: list[str] = field(default_factory=list)


class TestPostponedAnnotations:
    """Tests for string annotations."""

    def test_string_annotations_are_resolved(self):
        """Test that annotations are resolved to real types."""
        kinds = {spec.name: (spec.kind, spec.width) for spec in describe_record(PostponedSettings)}

        assert kinds == {
            "debug": ("bool", 0),
            "retries": ("int", 8),
            "hosts": ("list", 0),
            "name": ("str", 0),
        }

    def test_load(self):
        """Test loading a record with string annotations."""
        provider = StaticEnvironmentProvider({
            "DEBUG": "on",
            "RETRIES": "300",
            "HOSTS": "a,b",
            "NAME": "svc",
        })

        settings = load_envs(PostponedSettings, environ=provider)

        assert settings == PostponedSettings(debug=True, retries=44, hosts=["a", "b"], name="svc")


class TestUnresolvableAnnotations:
    """Tests for annotations naming a type only imported for type checking."""

    def test_only_unresolvable_field_becomes_string(self):
        """Test that other fields keep their declared kinds."""
        by_name = {spec.name: spec for spec in describe_record(PartiallyResolvable)}

        assert by_name["port"].kind == "int"
        assert by_name["debug"].kind == "bool"
        assert by_name["hosts"].kind == "list"
        assert by_name["ratio"].kind == "str"
        assert by_name["ratio"].field_type == "Decimal | None"

    def test_load_coerces_resolvable_fields(self):
        """Test that resolvable fields are still converted."""
        provider = StaticEnvironmentProvider({
            "PORT": "8080",
            "DEBUG": "yes",
            "RATIO": "0.25",
            "HOSTS": "a,b",
        })

        record = load_envs(PartiallyResolvable, environ=provider, logger=SilentLogger())

        assert record.port == 8080
        assert record.debug is True
        assert record.hosts == ["a", "b"]
        assert record.ratio == "0.25"

    def test_unresolved_annotation_is_logged(self):
        """Test that a warning names the unresolved field."""
        logger = SilentLogger()

        load_envs(PartiallyResolvable, environ={}, logger=logger)

        warnings = logger.get_logs("WARNING")
        assert len(warnings) == 1
        assert warnings[0]["extra"] == {
            "record_type": "PartiallyResolvable",
            "field": "ratio",
            "annotation": "Decimal | None",
        }
