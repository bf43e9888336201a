# driver_kernel/contracts.py
"""
──────────────────────────────────────────────────────────────────────────────
Driver Markers
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Base markers used to identify driver families.

Exports:
    - DriverContract           → base every driver contract must extend
    - DriverAttributeContract  → base every driver attribute must extend
    - attribute                → turns a class into a marker attribute type

Example:
    @attribute
    class StorageDriver(DriverAttributeContract):
        pass

    class StorageContract(DriverContract, ABC):
        pass

    @StorageDriver()
    class FileStore(StorageContract):
        ...
"""
from __future__ import annotations
from abc import ABC
from typing import Any, Tuple, Type, TypeVar

T = TypeVar("T", bound=type)

# Class attribute holding the attribute instances applied to a class.
ATTRIBUTES_FIELD = "__driver_attributes__"
# Flag set on classes decorated with @attribute.
ATTRIBUTE_FLAG = "__is_attribute_type__"


class DriverContract(ABC):
    """Marker base for driver contracts. Declares nothing."""


class DriverAttributeContract:
    """Marker base for driver attribute types. Declares nothing."""


def _apply(self: Any, target: T) -> T:
    if not isinstance(target, type):
        raise TypeError(f"{type(self).__name__} can only decorate classes, got {target!r}")
    own: Tuple[Any, ...] = target.__dict__.get(ATTRIBUTES_FIELD, ())
    setattr(target, ATTRIBUTES_FIELD, own + (self,))
    return target


def attribute(cls: Type[Any]) -> Type[Any]:
    """
    Mark *cls* as an attribute type.

    Instances of the decorated class become class decorators; applying one
    records the instance on the decorated class (not on its subclasses).
    A __call__ defined by the attribute type itself is kept and wins.
    """
    setattr(cls, ATTRIBUTE_FLAG, True)
    if "__call__" not in cls.__dict__:
        cls.__call__ = _apply
    return cls


def attributes_of(cls: type) -> Tuple[Any, ...]:
    """Attribute instances applied directly to *cls*."""
    return cls.__dict__.get(ATTRIBUTES_FIELD, ())
