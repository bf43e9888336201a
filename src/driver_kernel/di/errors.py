# driver_kernel/di/errors.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Sequence


class ConstructionErrorKind(Enum):
    CLASS_NOT_DEFINED = "class_not_defined"
    CLASS_NOT_INSTANTIABLE = "class_not_instantiable"
    CIRCULAR_REFERENCE = "circular_reference"
    INSTANTIATION_FAILED = "instantiation_failed"
    PARAMETER_DISCOVERY_FAILED = "parameter_discovery_failed"
    PARAMETER_TYPE_REQUIRED = "parameter_type_required"
    UNSUPPORTED_PARAMETER_TYPE = "unsupported_parameter_type"


class ConstructionError(Exception):
    """
    Raised by Container when an instance cannot be built.

    `subject` names the class being built, `parameter` the constructor
    parameter at fault (if any), `chain` the in-flight build chain for
    circular references.
    """

    def __init__(
        self,
        kind: ConstructionErrorKind,
        message: str,
        *,
        subject: Optional[str] = None,
        parameter: Optional[str] = None,
        chain: Sequence[str] = (),
    ):
        self.kind = kind
        self.subject = subject
        self.parameter = parameter
        self.chain = tuple(chain)
        super().__init__(message)
