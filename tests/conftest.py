"""Shared fixtures for registry tests."""
from __future__ import annotations

import pytest

from functions_registry import Registry, RegistryConfig, set_global_registry


@pytest.fixture
def registry():
    """Return a fresh, empty registry with default config."""
    return Registry()


@pytest.fixture
def strict_registry():
    """Return a registry that rejects empty names."""
    return Registry(RegistryConfig(allow_empty_names=False))


@pytest.fixture
def isolated_global_registry():
    """Install an empty global registry for the test, restore afterwards."""
    fresh = Registry()
    previous = set_global_registry(fresh)
    yield fresh
    set_global_registry(previous)
