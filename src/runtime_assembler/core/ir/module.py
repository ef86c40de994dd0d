"""
Module-level IR types for runtime assembly.

This module contains the canonical module declaration, the ordered module
table shared by every generator, and the complete runtime declaration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..errors import DuplicateSystemError, MissingSystemError
from .capabilities import Capability, CapabilityKind

SYSTEM_MODULE_NAME = "System"


class ModuleDecl(BaseModel):
    """
    Canonical declaration of one module in the runtime.

    Attributes:
        name: User-facing binding name (e.g. "Balances")
        module_path: Path of the module implementation (e.g. "balances")
        instance: Instance marker when the same implementation is used more than once
        capabilities: Capabilities in declared order
    """

    name: str
    module_path: str
    instance: str | None = None
    capabilities: tuple[Capability, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def is_system(self) -> bool:
        return self.name == SYSTEM_MODULE_NAME

    @property
    def registry_key(self) -> tuple[str, str | None]:
        """Key identifying the concrete module type: (module_path, instance)."""
        return (self.module_path, self.instance)

    @property
    def capability_names(self) -> tuple[str, ...]:
        return tuple(cap.name for cap in self.capabilities)

    def has(self, kind: CapabilityKind) -> bool:
        return any(cap.kind == kind for cap in self.capabilities)

    def find(self, kind: CapabilityKind) -> Capability | None:
        """Return the first capability of the given kind, if declared."""
        for cap in self.capabilities:
            if cap.kind == kind:
                return cap
        return None

    def render(self) -> str:
        """Render the canonical (explicit) form of this declaration."""
        instance = f"<{self.instance}>::" if self.instance else ""
        caps = ", ".join(cap.render() for cap in self.capabilities)
        return f"{self.name}: {self.module_path}::{instance}{{{caps}}}"


class ModuleTable(BaseModel):
    """
    Ordered, immutable list of canonical module declarations.

    Declaration order is significant: it fixes call variant indices, the
    lifecycle hook order and genesis population order.
    """

    modules: tuple[ModuleDecl, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.modules)

    def get(self, name: str) -> ModuleDecl | None:
        """Look up a module by binding name."""
        for module in self.modules:
            if module.name == name:
                return module
        return None

    def with_capability(self, kind: CapabilityKind) -> list[ModuleDecl]:
        """Modules declaring the given capability, in declaration order."""
        return [module for module in self.modules if module.has(kind)]

    def find_system(self) -> ModuleDecl | None:
        """
        Locate the distinguished `System` module by name.

        Raises:
            DuplicateSystemError: If more than one module is named System
        """
        systems = [module for module in self.modules if module.is_system]
        if len(systems) > 1:
            paths = ", ".join(module.module_path for module in systems)
            raise DuplicateSystemError(
                f"There can only be one '{SYSTEM_MODULE_NAME}' module, "
                f"found {len(systems)} (paths: {paths})"
            )
        return systems[0] if systems else None

    def require_system(self) -> ModuleDecl:
        """
        Locate the `System` module, which must be declared exactly once.

        Raises:
            DuplicateSystemError: If more than one module is named System
            MissingSystemError: If no module is named System
        """
        system = self.find_system()
        if system is None:
            raise MissingSystemError(
                f"No '{SYSTEM_MODULE_NAME}' module declared; "
                f"declare one, e.g. `{SYSTEM_MODULE_NAME}: system`"
            )
        return system


class RuntimeDeclaration(BaseModel):
    """
    Complete, normalized runtime declaration.

    Attributes:
        name: Runtime type name (e.g. "Runtime")
        block: Block type used inside the runtime
        node_block: Block type used by the node (a type path)
        unchecked_extrinsic: Unchecked extrinsic type
        modules: Canonical module table
        file: Source file the declaration was read from
    """

    name: str
    block: str
    node_block: str
    unchecked_extrinsic: str
    modules: ModuleTable = Field(default_factory=ModuleTable)
    file: Path | None = None

    model_config = ConfigDict(frozen=True)
