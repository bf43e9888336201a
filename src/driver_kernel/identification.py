# driver_kernel/identification.py
"""
Driver identification
──────────────────────────────────────────────
A class qualifies as a driver when it carries the configured attribute
OR extends the configured contract. Unknown classes never qualify.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Protocol

from driver_kernel.introspection import TypeIntrospector, TypeRef


@dataclass(frozen=True)
class Configuration:
    """Identifiers a registry was configured with. At least one is set."""

    attribute: Optional[type] = None
    contract: Optional[type] = None


class Matcher(Protocol):
    def matches(self, cls: type) -> bool: ...


class AttributeMatch:
    def __init__(self, introspector: TypeIntrospector, attribute: type):
        self.introspector = introspector
        self.attribute = attribute

    def matches(self, cls: type) -> bool:
        return len(self.introspector.annotations_of(cls, self.attribute)) > 0


class ContractMatch:
    def __init__(self, introspector: TypeIntrospector, contract: type):
        self.introspector = introspector
        self.contract = contract

    def matches(self, cls: type) -> bool:
        return self.introspector.implements_interface(cls, self.contract)


class IdentificationStrategy:
    """Pure predicate: does a class qualify under a configuration?"""

    def __init__(self, introspector: TypeIntrospector):
        self.introspector = introspector

    def matchers(self, config: Configuration) -> List[Matcher]:
        out: List[Matcher] = []
        if config.attribute is not None:
            out.append(AttributeMatch(self.introspector, config.attribute))
        if config.contract is not None:
            out.append(ContractMatch(self.introspector, config.contract))
        return out

    def supports(self, config: Configuration, class_name: TypeRef) -> bool:
        cls = self.introspector.declared_type(class_name)
        if cls is None:
            return False
        return any(m.matches(cls) for m in self.matchers(config))
