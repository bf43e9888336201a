# driver_kernel/bootstrap.py
"""
──────────────────────────────────────────────────────────────────────────────
Registry Bootstrap
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Make DriverRegistry available to the rest of an application.

Exports:
    - DriverRegistryProvider   → service provider: any class asking for a
                                 DriverRegistry gets a fresh, wired one
    - bootstrap()              → container with the provider installed
    - registry_from_settings() → configured + enabled registry from settings
    - get_driver_registry()    → process-wide registry (lazy, cached)

Usage:
    class StorageFactory:
        def __init__(self, drivers: DriverRegistry):
            drivers.configure(contract=StorageContract)
            self.drivers = drivers

    container = bootstrap()
    factory = container.instantiate(StorageFactory)
"""
from __future__ import annotations
import logging
from functools import lru_cache
from typing import Any, Mapping, Optional

from driver_kernel.config.base_settings import DriverSettings
from driver_kernel.di import Container
from driver_kernel.registry import DriverRegistry

log = logging.getLogger(__name__)


class DriverRegistryProvider:
    """
    Builds DriverRegistry instances for the container.

    Not a singleton: each consumer configures its own driver family.
    """

    def __init__(self, container: Container):
        self.container = container

    def supports(self, cls: type) -> bool:
        return cls is DriverRegistry

    def handle(self, cls: type, parameters: Mapping[str, Any]) -> DriverRegistry:
        params = dict(parameters)
        params.setdefault("builder", self.container)
        params.setdefault("introspector", self.container.introspector)
        return cls(**params)

    def is_singleton_expected(self, cls: type) -> bool:
        return False


def bootstrap(container: Optional[Container] = None) -> Container:
    """Install the DriverRegistry provider on *container* (or a new one)."""
    container = container or Container()
    container.add_provider(DriverRegistryProvider(container))
    return container


def registry_from_settings(settings: DriverSettings, container: Container) -> DriverRegistry:
    """
    Build a registry and apply *settings* to it.

    An unset configuration leaves the registry unconfigured; listing drivers
    without configuring raises NOT_CONFIGURED.
    """
    registry: DriverRegistry = container.resolve(DriverRegistry)
    if settings.is_set:
        registry.configure(settings.attribute, settings.contract)
        log.info("✅ [drivers] registry configured (attribute=%s, contract=%s)",
                 settings.attribute, settings.contract)
    for name in settings.enabled:
        registry.enable(name)
        log.info("✅ [drivers] enabled %s", name)
    return registry


@lru_cache(maxsize=1)
def get_driver_registry() -> DriverRegistry:
    # singleton (reads env once)
    return registry_from_settings(DriverSettings(), bootstrap())
