"""Shared test fixtures for the duic test suite."""

from __future__ import annotations

from typing import Any

import pytest

from duic import defaults
from duic.accessor import ConfigAccessor
from duic.source import MapConfigSource

from config_helpers import Unprintable


@pytest.fixture
def sample_data() -> dict[str, Any]:
    """Raw values covering every ValueKind."""
    return {
        "app": {
            "name": "billing",
            "debug": "TRUE",
            "enabled": True,
            "workers": "42",
            "ratio": "3.9",
            "port": 8080,
            "timeout": 2.5,
            "tags": ["a", "b"],
        },
        "flat.key": "verbatim",
        "zero": 0,
        "empty": "",
        "off": False,
        "garbage": "not-a-number",
        "weird": Unprintable(),
    }


@pytest.fixture
def source(sample_data: dict[str, Any]) -> MapConfigSource:
    """MapConfigSource over sample_data."""
    return MapConfigSource(sample_data)


@pytest.fixture
def accessor(source: MapConfigSource) -> ConfigAccessor:
    """ConfigAccessor bound to the sample source."""
    return ConfigAccessor(source)


@pytest.fixture
def unset_accessor() -> ConfigAccessor:
    """ConfigAccessor with no source registered."""
    return ConfigAccessor()


@pytest.fixture
def reset_default_config() -> Any:
    """Clear the process-wide source before and after a test."""
    defaults.set_default_config(None)
    yield
    defaults.set_default_config(None)
