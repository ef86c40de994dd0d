"""
Executable counterparts of the generated dispatchers.

The assembler only describes the inherent and unsigned-validation
dispatchers; this package runs them against module implementations
supplied by the host:

    assembled = assemble_file(Path("runtime.rt"))
    inherents, unsigned = bind_dispatchers(assembled, {"Timestamp": timestamp, ...})
    result = inherents.check_extrinsics(block, data)
"""

from collections.abc import Mapping
from typing import Any

from ..core import ir
from .calls import OuterCall
from .inherents import (
    CheckInherentsResult,
    InherentCheckError,
    InherentDispatcher,
    InherentValidationFailure,
    ProvideInherent,
    resolve_module,
)
from .types import (
    Block,
    Extrinsic,
    InherentData,
    RuntimeCall,
    TransactionValidity,
    ValidityOutcome,
)
from .unsigned import UnsignedValidator, ValidateUnsigned


def bind_dispatchers(
    assembled: ir.AssembledRuntime, modules: Mapping[str, Any]
) -> tuple[InherentDispatcher, UnsignedValidator]:
    """Bind the inherent and unsigned dispatchers of a runtime to implementations."""
    inherents = InherentDispatcher(assembled.inherents, assembled.call, modules)
    unsigned = UnsignedValidator(assembled.validate_unsigned, modules)
    return inherents, unsigned


__all__ = [
    "Block",
    "CheckInherentsResult",
    "Extrinsic",
    "InherentCheckError",
    "InherentData",
    "InherentDispatcher",
    "InherentValidationFailure",
    "OuterCall",
    "ProvideInherent",
    "RuntimeCall",
    "TransactionValidity",
    "UnsignedValidator",
    "ValidateUnsigned",
    "ValidityOutcome",
    "bind_dispatchers",
    "resolve_module",
]
