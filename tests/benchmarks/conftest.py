"""Deterministic documents and schemas for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 100-field flat, 10,000-field flat, and a 1,000-entry array of
small objects. The flat tiers exercise the single pass over object keys.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_config_parser import ConfigElement, ConfigElementBuilder


def generate_flat_document(num_keys: int) -> dict[str, Any]:
    """Generate a flat dict alternating string and number values."""
    return {
        f"field_{i}": (f"value_{i}" if i % 2 == 0 else i) for i in range(num_keys)
    }


def generate_flat_schema(num_keys: int) -> ConfigElement:
    """Generate an object element declaring every field of ``generate_flat_document``."""
    children = [
        ConfigElementBuilder().of_type_string().with_name(f"field_{i}").with_max_length(32).build()
        if i % 2 == 0
        else ConfigElementBuilder().of_type_number().with_name(f"field_{i}").with_min_value(0).build()
        for i in range(num_keys)
    ]
    return ConfigElementBuilder().of_type_object().with_child_elements(*children).build()


def _make_entries(num_entries: int) -> tuple[list[dict[str, Any]], ConfigElement]:
    entry = (
        ConfigElementBuilder()
        .of_type_object()
        .with_child_elements(
            ConfigElementBuilder().of_type_number().with_name("id").build(),
            ConfigElementBuilder()
            .of_type_string()
            .with_name("level")
            .with_valid_string_values("debug", "info", "warning")
            .build(),
            ConfigElementBuilder().of_type_boolean().with_name("enabled").build(),
        )
        .build()
    )
    schema = ConfigElementBuilder().of_type_array().with_object_array_elements(entry).build()
    levels = ("debug", "info", "warning")
    document = [
        {"id": i, "level": levels[i % 3], "enabled": i % 2 == 0}
        for i in range(num_entries)
    ]
    return document, schema


# --- Fixtures for each size tier ---


@pytest.fixture
def flat_100() -> tuple[dict[str, Any], ConfigElement]:
    """100-field flat document and its schema."""
    return generate_flat_document(100), generate_flat_schema(100)


@pytest.fixture
def flat_10000() -> tuple[dict[str, Any], ConfigElement]:
    """10,000-field flat document and its schema."""
    return generate_flat_document(10_000), generate_flat_schema(10_000)


@pytest.fixture
def array_1000() -> tuple[list[dict[str, Any]], ConfigElement]:
    """1,000-entry array of small objects and its schema."""
    return _make_entries(1_000)
