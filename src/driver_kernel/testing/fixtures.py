"""
──────────────────────────────────────────────────────────────────────────────
driver_kernel.testing.fixtures
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Provide reusable pytest fixtures for apps built on driver_kernel.

Exports:
    - CountingBuilder   → InstanceBuilder that records every instantiate() call
    - container         → fresh Container with the registry provider installed
    - driver_registry   → fresh, unconfigured DriverRegistry
    - counting_builder  → CountingBuilder wrapping a fresh Container

Usage in your test (conftest.py):
    pytest_plugins = ["driver_kernel.testing.fixtures"]

    def test_file_store(driver_registry):
        driver_registry.configure(contract=StorageContract)
        driver_registry.enable(FileStore)
        assert driver_registry.get(FileStore) is driver_registry.get(FileStore)
──────────────────────────────────────────────────────────────────────────────
"""
from __future__ import annotations
from typing import Any, List, Mapping, Optional, Tuple

import pytest

from driver_kernel.bootstrap import bootstrap, get_driver_registry
from driver_kernel.di import Container
from driver_kernel.introspection import TypeRef
from driver_kernel.registry import DriverRegistry


class CountingBuilder:
    """Delegates to a Container and keeps a log of (type_ref, parameters)."""

    def __init__(self, container: Optional[Container] = None):
        self.container = container or Container()
        self.calls: List[Tuple[TypeRef, Mapping[str, Any]]] = []

    @property
    def count(self) -> int:
        return len(self.calls)

    def instantiate(self, type_ref: TypeRef, parameters: Mapping[str, Any]) -> Any:
        self.calls.append((type_ref, dict(parameters)))
        return self.container.instantiate(type_ref, parameters)


# ──────────────────────────────────────────────────────────────
# Container / registry fixtures (per test)
# ──────────────────────────────────────────────────────────────
@pytest.fixture()
def container() -> Container:
    return bootstrap()


@pytest.fixture()
def counting_builder(container) -> CountingBuilder:
    return CountingBuilder(container)


@pytest.fixture()
def driver_registry(counting_builder) -> DriverRegistry:
    return DriverRegistry(counting_builder, counting_builder.container.introspector)


@pytest.fixture()
def fresh_global_registry():
    """Clear the cached process-wide registry before and after a test."""
    get_driver_registry.cache_clear()
    yield
    get_driver_registry.cache_clear()
