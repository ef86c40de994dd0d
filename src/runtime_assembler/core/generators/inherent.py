"""
Inherent dispatcher generation.

`Inherent` makes the module its own call source; `Inherent(Alt)` delegates
the inherent call to module `Alt`'s call type.
"""

import logging

from .. import ir
from .base import Generator

logger = logging.getLogger(__name__)


class InherentGenerator(Generator):
    artifact = "inherents"

    def generate(self) -> ir.InherentDispatcherSpec:
        participants = []
        for module in self.table.with_capability(ir.CapabilityKind.INHERENT):
            cap = module.find(ir.CapabilityKind.INHERENT)
            call_source = (cap.call_source if cap else None) or module.name
            participants.append(
                ir.InherentParticipant(
                    name=module.name,
                    module_path=module.module_path,
                    call_source=call_source,
                )
            )

            source = self.table.get(call_source)
            if source is None or not source.has(ir.CapabilityKind.CALL):
                logger.warning(
                    "Inherent call source '%s' of module '%s' does not declare Call",
                    call_source,
                    module.name,
                )

        return ir.InherentDispatcherSpec(
            runtime=self.runtime_name,
            block=self.declaration.block,
            unchecked_extrinsic=self.declaration.unchecked_extrinsic,
            participants=tuple(participants),
        )
