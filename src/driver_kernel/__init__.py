# driver_kernel/__init__.py
"""
driver_kernel
──────────────────────────────────────────────────────────────
A driver registry for pluggable implementations.
Provides:
    - One-shot configuration by marker attribute and/or contract
    - Enablement of qualifying driver classes
    - Lazy, at-most-once construction per driver
    - A small DI container that builds drivers and their dependencies
    - Settings-driven bootstrap and FastAPI status endpoints
──────────────────────────────────────────────────────────────
"""

__version__ = "0.1.0"

from driver_kernel.contracts import DriverAttributeContract, DriverContract, attribute
from driver_kernel.errors import DriverError, DriverErrorKind
from driver_kernel.identification import Configuration, IdentificationStrategy
from driver_kernel.introspection import PythonIntrospector, TypeIntrospector
from driver_kernel.registry import DriverRegistry, InstanceBuilder
from driver_kernel.di import Container, ConstructionError, ConstructionErrorKind
from driver_kernel.bootstrap import DriverRegistryProvider, bootstrap, get_driver_registry

__all__ = [
    "DriverAttributeContract",
    "DriverContract",
    "attribute",
    "DriverError",
    "DriverErrorKind",
    "Configuration",
    "IdentificationStrategy",
    "PythonIntrospector",
    "TypeIntrospector",
    "DriverRegistry",
    "InstanceBuilder",
    "Container",
    "ConstructionError",
    "ConstructionErrorKind",
    "DriverRegistryProvider",
    "bootstrap",
    "get_driver_registry",
]
