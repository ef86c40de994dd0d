"""
Inherent creation and checking.

Executes an InherentDispatcherSpec against the module implementations
provided by the host. Each participating module is consulted once, in
declaration order. A failing check is recorded in the result and the
remaining modules are still checked.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from ..core import ir
from ..core.errors import UnresolvedModuleError
from .calls import OuterCall
from .types import Block, Extrinsic, InherentData

logger = logging.getLogger(__name__)


class InherentCheckError(Exception):
    """
    Raised by a module's `check_inherent` when its inherent is wrong.

    Attributes:
        fatal: Whether the block must be rejected outright
    """

    def __init__(self, message: str, fatal: bool = True):
        self.message = message
        self.fatal = fatal
        super().__init__(message)


@runtime_checkable
class ProvideInherent(Protocol):
    """Interface a module implements to take part in inherents."""

    def create_inherent(self, data: InherentData) -> Any | None: ...

    def check_inherent(self, call: Any, data: InherentData) -> None: ...


@dataclass(frozen=True)
class InherentValidationFailure:
    """A single module's failed inherent check."""

    module: str
    message: str
    fatal: bool = True


@dataclass
class CheckInherentsResult:
    """Outcome of checking every inherent of a block."""

    failures: list[InherentValidationFailure] = field(default_factory=list)
    checked: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def fatal_error(self) -> bool:
        return any(failure.fatal for failure in self.failures)

    def put_error(self, module: str, error: InherentCheckError) -> None:
        self.failures.append(InherentValidationFailure(module, error.message, error.fatal))


def resolve_module(modules: Mapping[str, Any], name: str, protocol: type) -> Any:
    """
    Look up a module implementation and check it provides `protocol`.

    Raises:
        UnresolvedModuleError: If missing or not implementing the protocol
    """
    implementation = modules.get(name)
    if implementation is None:
        raise UnresolvedModuleError(f"No implementation provided for module '{name}'")
    if not isinstance(implementation, protocol):
        raise UnresolvedModuleError(
            f"Module '{name}' does not implement {protocol.__name__}"
        )
    return implementation


class InherentDispatcher:
    """
    Creates and checks inherent extrinsics for every participating module.

    Args:
        spec: Generated inherent dispatcher description
        call: Generated outer call description
        modules: Module implementations keyed by binding name
    """

    def __init__(
        self,
        spec: ir.InherentDispatcherSpec,
        call: ir.OuterCallSpec,
        modules: Mapping[str, Any],
    ):
        self.spec = spec
        self.outer_call = OuterCall(call)
        for participant in spec.participants:
            try:
                call.variant_index(participant.call_source)
            except KeyError:
                raise UnresolvedModuleError(
                    f"Inherent call source '{participant.call_source}' "
                    f"of module '{participant.name}' does not declare Call"
                ) from None
        self.providers: dict[str, ProvideInherent] = {
            participant.name: resolve_module(modules, participant.name, ProvideInherent)
            for participant in spec.participants
        }

    def create_extrinsics(self, data: InherentData) -> list[Extrinsic]:
        """
        Build the unsigned inherent extrinsics for a new block.

        Modules returning None have nothing to insert.
        """
        extrinsics = []
        for participant in self.spec.participants:
            inner = self.providers[participant.name].create_inherent(data)
            if inner is None:
                continue
            call = self.outer_call.wrap(participant.call_source, inner)
            extrinsics.append(Extrinsic(call=call, signed=False))
        return extrinsics

    def check_extrinsics(self, block: Block, data: InherentData) -> CheckInherentsResult:
        """
        Check the inherents of a finalized block.

        Inherents come first in a block, so the walk stops at the first
        signed extrinsic.
        """
        result = CheckInherentsResult()
        for extrinsic in block.extrinsics:
            if extrinsic.signed:
                break

            for participant in self.spec.participants:
                if extrinsic.call.module != participant.call_source:
                    continue
                result.checked.append(participant.name)
                try:
                    self.providers[participant.name].check_inherent(extrinsic.call.call, data)
                except InherentCheckError as e:
                    logger.info("Inherent check failed for %s: %s", participant.name, e.message)
                    result.put_error(participant.name, e)

        return result
