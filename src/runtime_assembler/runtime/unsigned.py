"""
Unsigned transaction validation.

Consults the ValidateUnsigned modules in declaration order. The first
definitive answer (valid or invalid) wins; a module that does not
recognize the call answers UNKNOWN and the next module is asked. When
nobody decides, the call is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Protocol, runtime_checkable

from ..core import ir
from .inherents import resolve_module
from .types import RuntimeCall, TransactionValidity

logger = logging.getLogger(__name__)

NO_VALIDATOR_REASON = "no module accepted the unsigned call"


@runtime_checkable
class ValidateUnsigned(Protocol):
    """Interface a module implements to validate unsigned calls."""

    def validate_unsigned(self, call: RuntimeCall) -> TransactionValidity: ...


class UnsignedValidator:
    """
    Chains the ValidateUnsigned modules of a runtime.

    Args:
        spec: Generated validation chain
        modules: Module implementations keyed by binding name
    """

    def __init__(self, spec: ir.ValidateUnsignedSpec, modules: Mapping[str, Any]):
        self.spec = spec
        self.validators: list[tuple[str, ValidateUnsigned]] = [
            (name, resolve_module(modules, name, ValidateUnsigned)) for name in spec.modules
        ]

    def validate(self, call: RuntimeCall) -> TransactionValidity:
        for name, validator in self.validators:
            validity = validator.validate_unsigned(call)
            if validity.is_definitive:
                logger.debug(
                    "Unsigned call to %s decided by %s: %s",
                    call.module,
                    name,
                    validity.outcome.value,
                )
                if validity.module is None:
                    return replace(validity, module=name)
                return validity

        return TransactionValidity.invalid(NO_VALIDATOR_REASON)
