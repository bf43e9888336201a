# driver_kernel/registry.py
"""
──────────────────────────────────────────────────────────────────────────────
Driver Registry
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Declare a family of interchangeable drivers, enable members of that
    family and hand out exactly one lazily-built instance per driver class.

Lifecycle:
    configure(attribute, contract)   → once, permanent
    enable(cls)                      → records eligibility, builds nothing
    get(cls)                         → builds on first call, then cached

Collaborators:
    - TypeIntrospector → answers "what is this class?"
    - InstanceBuilder  → builds a driver and its own dependencies

Usage:
    registry = DriverRegistry(Container())
    registry.configure(contract=StorageContract)
    registry.enable(FileStore)
    store = registry.get(FileStore)
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

from driver_kernel.contracts import DriverAttributeContract, DriverContract
from driver_kernel.errors import DriverError, DriverErrorKind
from driver_kernel.identification import Configuration, IdentificationStrategy
from driver_kernel.introspection import PythonIntrospector, TypeIntrospector, TypeRef


class InstanceBuilder(Protocol):
    def instantiate(self, type_ref: TypeRef, parameters: Mapping[str, Any]) -> Any: ...


# ──────────────────────────────────────────────
# Driver slots
# ──────────────────────────────────────────────
@dataclass(frozen=True)
class Pending:
    """Enabled, not built yet."""

    driver: type


@dataclass(frozen=True)
class Built:
    """Enabled and built; the registry owns the instance."""

    driver: type
    instance: Any


Slot = Union[Pending, Built]


class DriverRegistry:
    """
    One family of drivers.

    Not thread-safe: callers serialize access when sharing a registry.
    """

    def __init__(
        self,
        builder: InstanceBuilder,
        introspector: Optional[TypeIntrospector] = None,
    ):
        self._builder = builder
        self._introspector: TypeIntrospector = introspector or PythonIntrospector()
        self._strategy = IdentificationStrategy(self._introspector)
        self._configuration: Optional[Configuration] = None
        self._drivers: Dict[type, Slot] = {}

    # ──────────────────────────────────────────────
    # Configuration
    # ──────────────────────────────────────────────
    @property
    def configuration(self) -> Optional[Configuration]:
        return self._configuration

    def is_configured(self) -> bool:
        return self._configuration is not None

    def configure(
        self,
        attribute: Optional[TypeRef] = None,
        contract: Optional[TypeRef] = None,
    ) -> None:
        """
        Freeze the identifiers used to recognise drivers.

        Both identifiers are validated before anything is stored, so a
        rejected call leaves the registry unconfigured.
        """
        if self.is_configured():
            raise DriverError(DriverErrorKind.ALREADY_CONFIGURED)
        if attribute is None and contract is None:
            raise DriverError(DriverErrorKind.IDENTIFIER_REQUIRED)

        attribute_cls = self._validate_attribute(attribute) if attribute is not None else None
        contract_cls = self._validate_contract(contract) if contract is not None else None

        self._configuration = Configuration(attribute=attribute_cls, contract=contract_cls)

    def _validate_attribute(self, ref: TypeRef) -> type:
        cls = self._introspector.declared_type(ref)
        if cls is None:
            raise DriverError.about(DriverErrorKind.ATTRIBUTE_TYPE_UNDECLARED, ref)
        if not self._introspector.is_attribute_type(cls):
            raise DriverError.about(DriverErrorKind.NOT_AN_ATTRIBUTE_TYPE, cls)
        if not self._introspector.implements_interface(cls, DriverAttributeContract):
            raise DriverError.about(DriverErrorKind.ATTRIBUTE_CONTRACT_UNIMPLEMENTED, cls)
        return cls

    def _validate_contract(self, ref: TypeRef) -> type:
        cls = self._introspector.declared_type(ref)
        if cls is None:
            raise DriverError.about(DriverErrorKind.CONTRACT_TYPE_UNDECLARED, ref)
        if not self._introspector.is_interface_or_abstract(cls):
            raise DriverError.about(DriverErrorKind.CONTRACT_NOT_ABSTRACT, cls)
        if not self._introspector.implements_interface(cls, DriverContract):
            raise DriverError.about(DriverErrorKind.CONTRACT_BASE_UNIMPLEMENTED, cls)
        return cls

    def _require_configuration(self) -> Configuration:
        if self._configuration is None:
            raise DriverError(DriverErrorKind.NOT_CONFIGURED)
        return self._configuration

    # ──────────────────────────────────────────────
    # Qualification & enablement
    # ──────────────────────────────────────────────
    def supports(self, class_name: TypeRef) -> bool:
        config = self._require_configuration()
        if self._introspector.declared_type(class_name) is None:
            return False
        return self._strategy.supports(config, class_name)

    def enable(self, class_name: TypeRef) -> None:
        self._require_configuration()
        if not self.supports(class_name):
            raise DriverError.about(DriverErrorKind.NOT_SUPPORTED, class_name)
        cls = self._introspector.declared_type(class_name)
        if cls in self._drivers:
            raise DriverError.about(DriverErrorKind.ALREADY_ENABLED, cls)
        self._drivers[cls] = Pending(cls)

    def is_enabled(self, class_name: TypeRef) -> bool:
        self._require_configuration()
        return self._slot(class_name) is not None

    def is_built(self, class_name: TypeRef) -> bool:
        self._require_configuration()
        return isinstance(self._slot(class_name), Built)

    def enabled_drivers(self) -> List[type]:
        """Enabled driver classes in enablement order."""
        self._require_configuration()
        return list(self._drivers)

    def _slot(self, class_name: TypeRef) -> Optional[Slot]:
        cls = self._introspector.declared_type(class_name)
        if cls is None:
            return None
        return self._drivers.get(cls)

    # ──────────────────────────────────────────────
    # Resolution
    # ──────────────────────────────────────────────
    def get(self, class_name: TypeRef) -> Any:
        """
        Return the driver instance, building it on first request.

        Builder errors propagate as-is and leave the driver unbuilt, so a
        later call retries construction.
        """
        self._require_configuration()
        slot = self._slot(class_name)
        if slot is None:
            raise DriverError.about(DriverErrorKind.NOT_ENABLED, class_name)
        if isinstance(slot, Built):
            return slot.instance
        instance = self._builder.instantiate(slot.driver, {})
        self._drivers[slot.driver] = Built(slot.driver, instance)
        return instance
