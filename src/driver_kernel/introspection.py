# driver_kernel/introspection.py
"""
──────────────────────────────────────────────────────────────────────────────
Type Introspection
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Answer the narrow questions the registry and the container ask about
    classes, so both can be driven by a fake in tests.

APIs:
    - declared_type(name)                  → class or None
    - annotations_of(cls, annotation_type) → attribute instances on cls
    - implements_interface(cls, target)    → subclass check
    - is_interface_or_abstract(cls)        → abstract base / Protocol check
    - is_instantiable(cls)                 → can be constructed by the container
    - is_attribute_type(cls)               → decorated with @attribute

Name resolution (PythonIntrospector):
    1. names registered with declare()
    2. "package.module:Qual.Name"
    3. "package.module.Qual.Name" (longest importable module prefix wins)
"""
from __future__ import annotations
import importlib
import inspect
from abc import ABC
from typing import Any, Dict, Optional, Protocol, Sequence, Type, Union

from driver_kernel.contracts import ATTRIBUTE_FLAG, attributes_of

TypeRef = Union[str, Type[Any]]


class TypeIntrospector(Protocol):
    def declared_type(self, name: TypeRef) -> Optional[type]: ...
    def annotations_of(self, cls: type, annotation_type: type) -> Sequence[Any]: ...
    def implements_interface(self, cls: type, target: type) -> bool: ...
    def is_interface_or_abstract(self, cls: type) -> bool: ...
    def is_instantiable(self, cls: type) -> bool: ...
    def is_attribute_type(self, cls: type) -> bool: ...


class PythonIntrospector:
    """Introspector backed by importlib and the inspect module."""

    def __init__(self, types: Optional[Dict[str, type]] = None):
        self._declared: Dict[str, type] = dict(types or {})

    # ------------------------------------------------------------------
    # Name table
    # ------------------------------------------------------------------
    def declare(self, cls: type, name: Optional[str] = None) -> type:
        """Make *cls* resolvable by *name* (defaults to its class name)."""
        self._declared[name or cls.__name__] = cls
        return cls

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def declared_type(self, name: TypeRef) -> Optional[type]:
        if isinstance(name, type):
            return name
        if not isinstance(name, str) or not name:
            return None
        if name in self._declared:
            return self._declared[name]
        if ":" in name:
            module_name, _, qualname = name.partition(":")
            return _lookup(module_name, qualname)
        parts = name.split(".")
        for cut in range(len(parts) - 1, 0, -1):
            found = _lookup(".".join(parts[:cut]), ".".join(parts[cut:]))
            if found is not None:
                return found
        return None

    def annotations_of(self, cls: type, annotation_type: type) -> Sequence[Any]:
        # exact type only; attribute subclasses are a different attribute
        return [a for a in attributes_of(cls) if type(a) is annotation_type]

    def implements_interface(self, cls: type, target: type) -> bool:
        try:
            return issubclass(cls, target)
        except TypeError:
            # non runtime-checkable protocols refuse issubclass()
            return target in getattr(cls, "__mro__", ())

    def is_interface_or_abstract(self, cls: type) -> bool:
        return (
            inspect.isabstract(cls)
            or bool(getattr(cls, "_is_protocol", False))
            or ABC in cls.__bases__
        )

    def is_instantiable(self, cls: type) -> bool:
        return not (inspect.isabstract(cls) or getattr(cls, "_is_protocol", False))

    def is_attribute_type(self, cls: type) -> bool:
        return bool(cls.__dict__.get(ATTRIBUTE_FLAG, False))


def _lookup(module_name: str, qualname: str) -> Optional[type]:
    try:
        obj: Any = importlib.import_module(module_name)
    except Exception:
        # relative names, missing modules and modules failing at import are all undeclared
        return None
    for part in qualname.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            return None
    return obj if isinstance(obj, type) else None
