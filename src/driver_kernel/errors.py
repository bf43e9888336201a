# driver_kernel/errors.py
"""
Driver registry errors
──────────────────────────────────────────────
One exception type, tagged with a closed DriverErrorKind.
Each kind carries a stable numeric code (2201–2212).
"""
from __future__ import annotations
from enum import Enum
from typing import Optional


class DriverErrorKind(Enum):
    NOT_ENABLED = 2201
    IDENTIFIER_REQUIRED = 2202
    ATTRIBUTE_TYPE_UNDECLARED = 2203
    NOT_AN_ATTRIBUTE_TYPE = 2204
    ATTRIBUTE_CONTRACT_UNIMPLEMENTED = 2205
    CONTRACT_TYPE_UNDECLARED = 2206
    CONTRACT_NOT_ABSTRACT = 2207
    CONTRACT_BASE_UNIMPLEMENTED = 2208
    NOT_SUPPORTED = 2209
    ALREADY_ENABLED = 2210
    ALREADY_CONFIGURED = 2211
    NOT_CONFIGURED = 2212


_MESSAGES = {
    DriverErrorKind.NOT_ENABLED: "The specified driver is not enabled",
    DriverErrorKind.IDENTIFIER_REQUIRED: (
        "You must provide an attribute, a contract, or both, to the driver registry"
    ),
    DriverErrorKind.ATTRIBUTE_TYPE_UNDECLARED: "The specified attribute class does not exist",
    DriverErrorKind.NOT_AN_ATTRIBUTE_TYPE: (
        "The specified class exists but is not an attribute class"
    ),
    DriverErrorKind.ATTRIBUTE_CONTRACT_UNIMPLEMENTED: (
        "The specified attribute class does not subclass DriverAttributeContract"
    ),
    DriverErrorKind.CONTRACT_TYPE_UNDECLARED: "The specified contract class does not exist",
    DriverErrorKind.CONTRACT_NOT_ABSTRACT: (
        "The specified contract exists but is not an abstract class or protocol"
    ),
    DriverErrorKind.CONTRACT_BASE_UNIMPLEMENTED: (
        "The specified contract does not extend DriverContract"
    ),
    DriverErrorKind.NOT_SUPPORTED: (
        "The specified class is not supported by this driver registry"
    ),
    DriverErrorKind.ALREADY_ENABLED: "The specified driver is already enabled",
    DriverErrorKind.ALREADY_CONFIGURED: "This driver registry has already been configured",
    DriverErrorKind.NOT_CONFIGURED: "This driver registry has not been configured",
}


def describe(ref) -> str:
    """Readable name for a class or a type name."""
    if isinstance(ref, type):
        return f"{ref.__module__}.{ref.__qualname__}"
    return str(ref)


class DriverError(Exception):
    """
    Raised by DriverRegistry for every rejected operation.

    Attributes
    ----------
    kind : DriverErrorKind
        What went wrong.
    subject : str | None
        Offending class name, when the failure is about one class.
    """

    def __init__(self, kind: DriverErrorKind, subject: Optional[str] = None):
        self.kind = kind
        self.subject = subject
        message = _MESSAGES[kind]
        if subject is not None:
            message = f"{message}: {subject}"
        super().__init__(message)

    @property
    def code(self) -> int:
        return self.kind.value

    @classmethod
    def about(cls, kind: DriverErrorKind, ref) -> "DriverError":
        return cls(kind, describe(ref))

    def __repr__(self) -> str:
        return f"DriverError({self.kind.name}, {self.subject!r})"
