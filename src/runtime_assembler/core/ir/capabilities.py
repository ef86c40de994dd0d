"""
Capability types for runtime assembly IR.

A capability is a named facet a module exposes to the runtime (its calls,
its events, its genesis config, ...). Every generator filters the module
table by capability kind.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class CapabilityKind(str, Enum):
    """Capabilities a module may declare."""

    MODULE = "Module"
    CALL = "Call"
    STORAGE = "Storage"
    EVENT = "Event"
    ORIGIN = "Origin"
    CONFIG = "Config"
    INHERENT = "Inherent"
    VALIDATE_UNSIGNED = "ValidateUnsigned"


# Capabilities that may carry generic parameters, e.g. Event<T> or Event<T, I>
GENERIC_CAPABILITIES = frozenset(
    {
        CapabilityKind.EVENT,
        CapabilityKind.ORIGIN,
        CapabilityKind.CONFIG,
    }
)


class Capability(BaseModel):
    """
    A single canonical capability of a module.

    Attributes:
        kind: Which capability this is
        generics: Generic parameter names as written, e.g. ("T",) or ("T", "I")
        call_source: Alternate call-source module for `Inherent(Alt)`
    """

    kind: CapabilityKind
    generics: tuple[str, ...] = ()
    call_source: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def is_generic(self) -> bool:
        """Whether the capability type is parameterized by the runtime."""
        return bool(self.generics)

    def render(self) -> str:
        """Render back to declaration syntax, e.g. `Event<T, I>` or `Inherent(Timestamp)`."""
        text = self.kind.value
        if self.generics:
            text += "<" + ", ".join(self.generics) + ">"
        if self.call_source:
            text += f"({self.call_source})"
        return text

    @classmethod
    def plain(cls, kind: CapabilityKind) -> Capability:
        return cls(kind=kind)

    @classmethod
    def generic(cls, kind: CapabilityKind, *generics: str) -> Capability:
        return cls(kind=kind, generics=generics or ("T",))
