"""
Object construction for drivers.
──────────────────────────────────────────────────────────────
Container builds instances and their constructor dependencies;
ConstructionError reports why it could not.
──────────────────────────────────────────────────────────────
"""
from .container import Container
from .errors import ConstructionError, ConstructionErrorKind
from .registry import ProviderRegistry, ServiceProvider

__all__ = [
    "Container",
    "ConstructionError",
    "ConstructionErrorKind",
    "ProviderRegistry",
    "ServiceProvider",
]
