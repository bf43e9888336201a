# driver_kernel/di/container.py
"""
Dependency Injection Container
──────────────────────────────────────────────
Builds fully-wired instances from a class (or class name) and optional
explicit parameters.

Resolution order for each constructor parameter:
    1. explicit parameters passed to instantiate()
    2. a registered provider / service provider for the hinted class
    3. the parameter's default value
    4. recursive instantiation of the hinted class
    5. None, when the hint is Optional[...]

Failures are ConstructionError, tagged with a ConstructionErrorKind.
"""
from __future__ import annotations
import builtins
import logging
from typing import Any, Callable, List, Mapping, Optional, Type

from driver_kernel.introspection import PythonIntrospector, TypeIntrospector, TypeRef
from .errors import ConstructionError, ConstructionErrorKind
from .inject import ParameterSpec, autowire, discover_parameters
from .registry import ProviderRegistry, ServiceProvider

log = logging.getLogger(__name__)


def _name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class Container:
    def __init__(self, introspector: Optional[TypeIntrospector] = None):
        self.introspector: TypeIntrospector = introspector or PythonIntrospector()
        self.providers = ProviderRegistry()
        self._building: List[type] = []

    # ──────────────────────────────────────────────
    # Bindings
    # ──────────────────────────────────────────────
    def register(self, type_: Type[Any], provider: Callable[[], Any]) -> None:
        self.providers.register(type_, provider)

    def register_instance(self, type_: Type[Any], instance: Any) -> None:
        self.providers.register(type_, lambda: instance)

    def add_provider(self, service: ServiceProvider) -> None:
        self.providers.add(service)

    def can_resolve(self, type_: Type[Any]) -> bool:
        return self.providers.has(type_) or self.providers.service_for(type_) is not None

    def resolve(self, type_: Type[Any]) -> Any:
        if self.providers.has(type_):
            return self.providers.resolve(type_)
        if self.providers.service_for(type_) is not None:
            return self.providers.handle(type_, {})
        return self.instantiate(type_)

    # ──────────────────────────────────────────────
    # Construction
    # ──────────────────────────────────────────────
    def instantiate(self, type_ref: TypeRef, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        cls = self.introspector.declared_type(type_ref)
        if cls is None:
            raise ConstructionError(
                ConstructionErrorKind.CLASS_NOT_DEFINED,
                f"Class is not defined: {type_ref}",
                subject=str(type_ref),
            )
        if not self.introspector.is_instantiable(cls):
            raise ConstructionError(
                ConstructionErrorKind.CLASS_NOT_INSTANTIABLE,
                f"Class is abstract and cannot be instantiated: {_name(cls)}",
                subject=_name(cls),
            )
        if cls in self._building:
            chain = [_name(c) for c in self._building] + [_name(cls)]
            raise ConstructionError(
                ConstructionErrorKind.CIRCULAR_REFERENCE,
                "Circular reference while instantiating: " + " -> ".join(chain),
                subject=_name(cls),
                chain=chain,
            )

        self._building.append(cls)
        try:
            explicit = dict(parameters or {})
            kwargs = {
                spec.name: self._argument(cls, spec, explicit)
                for spec in discover_parameters(cls)
            }
            try:
                instance = cls(**kwargs)
            except Exception as exc:
                raise ConstructionError(
                    ConstructionErrorKind.INSTANTIATION_FAILED,
                    f"Instantiation of {_name(cls)} failed: {exc}",
                    subject=_name(cls),
                ) from exc
            autowire(instance, self.providers)
        finally:
            self._building.pop()

        log.debug("[di] built %s", _name(cls))
        return instance

    def _argument(self, cls: type, spec: ParameterSpec, explicit: Mapping[str, Any]) -> Any:
        if spec.name in explicit:
            return explicit[spec.name]
        if not spec.has_hint:
            if spec.has_default:
                return spec.default
            raise ConstructionError(
                ConstructionErrorKind.PARAMETER_TYPE_REQUIRED,
                f"Parameter '{spec.name}' of {_name(cls)} needs a type hint or a default",
                subject=_name(cls),
                parameter=spec.name,
            )
        hint = spec.hint
        if not isinstance(hint, type):
            if spec.has_default:
                return spec.default
            if spec.optional:
                return None
            raise ConstructionError(
                ConstructionErrorKind.UNSUPPORTED_PARAMETER_TYPE,
                f"Parameter '{spec.name}' of {_name(cls)} has unsupported type {hint!r}",
                subject=_name(cls),
                parameter=spec.name,
            )
        if self.can_resolve(hint):
            return self.resolve(hint)
        if spec.has_default:
            return spec.default
        if hint.__module__ != builtins.__name__ and self.introspector.is_instantiable(hint):
            return self.instantiate(hint)
        if spec.optional:
            return None
        raise ConstructionError(
            ConstructionErrorKind.PARAMETER_DISCOVERY_FAILED,
            f"Cannot resolve parameter '{spec.name}' ({hint.__qualname__}) of {_name(cls)}",
            subject=_name(cls),
            parameter=spec.name,
        )
