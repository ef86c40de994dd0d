"""
Genesis config aggregation.

Every module declaring `Config` contributes a `<Name>Config` field. Fields
are populated in declaration order: a module whose genesis depends on
another module's genesis state must be declared after it. That ordering
is not checked.
"""

from .. import ir
from .base import Generator

CONFIG_SUFFIX = "Config"


class GenesisConfigGenerator(Generator):
    artifact = "genesis"

    def generate(self) -> ir.GenesisConfigSpec:
        fields = []
        for module in self.table.with_capability(ir.CapabilityKind.CONFIG):
            cap = module.find(ir.CapabilityKind.CONFIG)
            generic = bool(cap and cap.is_generic)
            fields.append(
                ir.GenesisConfigField(
                    field_name=f"{module.name}{CONFIG_SUFFIX}",
                    module_name=module.name,
                    module_path=module.module_path,
                    instance=module.instance,
                    generic=generic,
                    config_type=self._type_path(module, "GenesisConfig", generic),
                )
            )

        return ir.GenesisConfigSpec(runtime=self.runtime_name, config_fields=tuple(fields))
