"""
Base generator classes for artifact generation.

Generators are responsible for deriving one artifact each from the module
table:
- OuterEventGenerator / OuterOriginGenerator: outer Event and Origin unions
- ModuleRegistryGenerator: module aliases and the lifecycle collection
- OuterCallGenerator: outer Call dispatcher
- MetadataGenerator: runtime metadata descriptors
- GenesisConfigGenerator: aggregate genesis config
- InherentGenerator: inherent dispatcher
- ValidateUnsignedGenerator: unsigned transaction validation chain

Each generator only reads the module table, so they can run in any order.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from .. import ir


class Generator(ABC):
    """
    Base class for all artifact generators.

    Subclasses set `artifact` to the AssembledRuntime field they fill.

    Example:
        class ValidateUnsignedGenerator(Generator):
            artifact = "validate_unsigned"

            def generate(self) -> ir.ValidateUnsignedSpec:
                modules = self.table.with_capability(ir.CapabilityKind.VALIDATE_UNSIGNED)
                return ir.ValidateUnsignedSpec(
                    runtime=self.runtime_name,
                    modules=tuple(m.name for m in modules),
                )
    """

    artifact: str = ""

    def __init__(self, declaration: ir.RuntimeDeclaration):
        """
        Initialize generator.

        Args:
            declaration: Normalized runtime declaration
        """
        self.declaration = declaration

    @property
    def table(self) -> ir.ModuleTable:
        return self.declaration.modules

    @property
    def runtime_name(self) -> str:
        return self.declaration.name

    @abstractmethod
    def generate(self) -> BaseModel:
        """
        Generate the artifact.

        Returns:
            Structural description of the artifact
        """
        pass

    def _type_path(
        self,
        module: ir.ModuleDecl,
        type_name: str,
        generic: bool = True,
    ) -> str:
        """
        Render a module-owned type instantiated for this runtime.

        The runtime parameter is added when `generic`, the instance marker
        when the module declares one:

            balances::Event
            balances::Call<Runtime>
            test3::Module<Runtime, test3::Instance1>
        """
        params = []
        if generic:
            params.append(self.runtime_name)
        if module.instance:
            params.append(f"{module.module_path}::{module.instance}")

        path = f"{module.module_path}::{type_name}"
        if params:
            path += "<" + ", ".join(params) + ">"
        return path


def instance_alias(module: ir.ModuleDecl) -> str | None:
    """Import alias used to tell instances apart, e.g. `test3_Instance1`."""
    if module.instance is None:
        return None
    return f"{module.module_path}_{module.instance}"
