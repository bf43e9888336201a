from __future__ import annotations
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Type

"""
──────────────────────────────────────────────────────────────────────────────
Provider Registry
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Maintain the container's mapping of types → provider functions, plus
    service providers that build whole families of types on demand.

APIs:
    - register(type, provider_fn)
    - resolve(type) → instance
    - add(service_provider)
    - handle(type, parameters) → instance (from the first provider that supports it)

Used by:
    - Container.resolve()      → explicit bindings win over autowiring
    - autowire()               → fills annotated attributes after construction

Usage:
    providers = ProviderRegistry()
    providers.register(Clock, lambda: SystemClock())
    clock = providers.resolve(Clock)
"""


class ServiceProvider(Protocol):
    def supports(self, cls: type) -> bool: ...
    def handle(self, cls: type, parameters: Mapping[str, Any]) -> Any: ...
    def is_singleton_expected(self, cls: type) -> bool: ...


class ProviderRegistry:
    def __init__(self) -> None:
        self._providers: Dict[Type[Any], Callable[[], Any]] = {}
        self._services: List[ServiceProvider] = []
        self._singletons: Dict[Type[Any], Any] = {}

    # ------------------------------------------------------------------
    # Plain bindings
    # ------------------------------------------------------------------
    def register(self, type_: Type[Any], provider: Callable[[], Any]) -> None:
        self._providers[type_] = provider

    def has(self, type_: Type[Any]) -> bool:
        return type_ in self._providers

    def resolve(self, type_: Type[Any]) -> Any:
        try:
            provider = self._providers[type_]
        except KeyError:
            raise RuntimeError(f"No provider registered for type {type_.__module__}.{type_.__name__}")
        return provider()

    # ------------------------------------------------------------------
    # Service providers
    # ------------------------------------------------------------------
    def add(self, service: ServiceProvider) -> None:
        self._services.append(service)

    def service_for(self, type_: Type[Any]) -> Optional[ServiceProvider]:
        for service in self._services:
            if service.supports(type_):
                return service
        return None

    def handle(self, type_: Type[Any], parameters: Mapping[str, Any]) -> Any:
        service = self.service_for(type_)
        if service is None:
            raise RuntimeError(f"No service provider supports type {type_.__module__}.{type_.__name__}")
        if type_ in self._singletons:
            return self._singletons[type_]
        instance = service.handle(type_, parameters)
        if service.is_singleton_expected(type_):
            self._singletons[type_] = instance
        return instance
