"""
Runtime value types used by the generated dispatchers.

These are the values flowing through a running runtime (calls,
extrinsics, blocks, validity results), as opposed to the IR describing
how the runtime is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Inherent data supplied by the block author, keyed by inherent identifier
InherentData = dict[str, Any]


@dataclass(frozen=True)
class RuntimeCall:
    """
    A value of the outer call: one module's call wrapped with its variant.

    Attributes:
        index: Variant index (position among Call-declaring modules)
        module: Binding name of the module owning the call
        call: The module's own call value
    """

    index: int
    module: str
    call: Any


@dataclass(frozen=True)
class Extrinsic:
    """An extrinsic in a block: a call, signed or not."""

    call: RuntimeCall
    signed: bool = False


@dataclass
class Block:
    """A block as seen by the inherent checker: just its extrinsics."""

    extrinsics: list[Extrinsic] = field(default_factory=list)


class ValidityOutcome(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    UNKNOWN = "unknown"  # not recognized; defer to the next module


@dataclass(frozen=True)
class TransactionValidity:
    """
    Result of validating an unsigned transaction.

    Attributes:
        outcome: VALID, INVALID, or UNKNOWN
        priority: Pool priority for VALID transactions
        requires: Tags this transaction depends on
        provides: Tags this transaction provides
        longevity: Number of blocks the transaction stays valid
        reason: Why it was rejected or not recognized
        module: Module that decided, if any
    """

    outcome: ValidityOutcome
    priority: int = 0
    requires: tuple[str, ...] = ()
    provides: tuple[str, ...] = ()
    longevity: int | None = None
    reason: str | None = None
    module: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.outcome == ValidityOutcome.VALID

    @property
    def is_definitive(self) -> bool:
        return self.outcome != ValidityOutcome.UNKNOWN

    @classmethod
    def valid(cls, priority: int = 0, **kwargs: Any) -> TransactionValidity:
        return cls(outcome=ValidityOutcome.VALID, priority=priority, **kwargs)

    @classmethod
    def invalid(cls, reason: str, **kwargs: Any) -> TransactionValidity:
        return cls(outcome=ValidityOutcome.INVALID, reason=reason, **kwargs)

    @classmethod
    def unknown(cls, reason: str | None = None) -> TransactionValidity:
        return cls(outcome=ValidityOutcome.UNKNOWN, reason=reason)
