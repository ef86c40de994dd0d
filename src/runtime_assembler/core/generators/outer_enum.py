"""
Outer Event and Origin aggregation.

Both unions are built by the same algorithm. The System module always
supplies the first variant under its module path, whatever it declares,
since every runtime carries system events and the root/signed origins.
The remaining variants are one per other module carrying the target
capability, in declaration order.
"""

import logging

from .. import ir
from .base import Generator, instance_alias

logger = logging.getLogger(__name__)


class OuterEnumGenerator(Generator):
    """Shared engine for the outer Event and Origin unions."""

    capability: ir.CapabilityKind
    # Whether System's type is parameterized when System does not declare the capability
    system_generic: bool = False

    def generate(self) -> ir.OuterEnumSpec:
        system = self.table.require_system()

        system_cap = system.find(self.capability)
        variants = [
            self._variant(system, system_cap.is_generic if system_cap else self.system_generic)
        ]
        for module in self.table.modules:
            if module.is_system:
                continue
            cap = module.find(self.capability)
            if cap is None:
                continue
            variants.append(self._variant(module, cap.is_generic))

        logger.debug(
            "Outer %s for %s: %s",
            self.capability.value,
            self.runtime_name,
            ", ".join(v.type_path for v in variants),
        )
        return ir.OuterEnumSpec(
            kind=self.capability,
            runtime=self.runtime_name,
            system=system.module_path,
            variants=tuple(variants),
        )

    def _variant(self, module: ir.ModuleDecl, generic: bool) -> ir.OuterEnumVariant:
        return ir.OuterEnumVariant(
            module_name=module.name,
            module_path=module.module_path,
            instance=module.instance,
            generic=generic,
            type_path=self._type_path(module, self.capability.value, generic),
            alias=instance_alias(module),
        )


class OuterEventGenerator(OuterEnumGenerator):
    artifact = "event"
    capability = ir.CapabilityKind.EVENT


class OuterOriginGenerator(OuterEnumGenerator):
    artifact = "origin"
    capability = ir.CapabilityKind.ORIGIN
    system_generic = True
