"""
Runtime metadata descriptor generation.

Capabilities are walked in declared order. Names seen before a `Module`
capability are leading modifiers: they accumulate across modules until a
module that declares `Module` is reached, and are folded into that
module's descriptor. Modules without `Module` get no descriptor of their
own. Generic parameters are not part of the metadata.
"""

import logging

from .. import ir
from .base import Generator

logger = logging.getLogger(__name__)

MODULE = ir.CapabilityKind.MODULE.value


class MetadataGenerator(Generator):
    artifact = "metadata"

    def generate(self) -> ir.RuntimeMetadataSpec:
        entries: list[ir.MetadataEntry] = []
        leading: list[str] = []

        for module in self.table.modules:
            names = module.capability_names
            if MODULE not in names:
                leading.extend(names)
                continue

            split = names.index(MODULE)
            leading.extend(names[:split])
            entries.append(
                ir.MetadataEntry(
                    module_path=module.module_path,
                    instance=module.instance,
                    name=module.name,
                    leading=tuple(leading),
                    capabilities=tuple(leading) + names[split + 1 :],
                )
            )
            leading = []

        if leading:
            logger.debug(
                "Dropping trailing capabilities with no following Module: %s",
                ", ".join(leading),
            )

        return ir.RuntimeMetadataSpec(runtime=self.runtime_name, modules=tuple(entries))
