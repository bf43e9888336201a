# driver_kernel/web/deps.py
from __future__ import annotations

from driver_kernel.bootstrap import get_driver_registry
from driver_kernel.registry import DriverRegistry


def get_registry() -> DriverRegistry:
    """
    FastAPI dependency returning the process-wide driver registry.

    Override in tests:
        app.dependency_overrides[get_registry] = lambda: my_registry
    """
    return get_driver_registry()
