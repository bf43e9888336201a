"""
Testing utilities for driver_kernel apps.
──────────────────────────────────────────────────────────────
Provides pytest fixtures and a call-counting instance builder.
──────────────────────────────────────────────────────────────
"""
from .fixtures import CountingBuilder, container, counting_builder, driver_registry, fresh_global_registry

__all__ = [
    "CountingBuilder",
    "container",
    "counting_builder",
    "driver_registry",
    "fresh_global_registry",
]
