"""
Outer call dispatcher generation.

The variant index of each module is its position among the Call-declaring
modules. Indices are part of the call encoding, so reordering those
modules in the declaration invalidates previously encoded calls.
"""

import logging

from .. import ir
from .base import Generator

logger = logging.getLogger(__name__)


class OuterCallGenerator(Generator):
    artifact = "call"

    def generate(self) -> ir.OuterCallSpec:
        variants = tuple(
            ir.CallVariant(
                index=index,
                name=module.name,
                module_path=module.module_path,
                instance=module.instance,
                call_type=self._type_path(module, "Call"),
            )
            for index, module in enumerate(self.table.with_capability(ir.CapabilityKind.CALL))
        )

        logger.debug(
            "Outer call for %s: %s",
            self.runtime_name,
            ", ".join(f"{v.index}={v.name}" for v in variants) or "<empty>",
        )
        return ir.OuterCallSpec(runtime=self.runtime_name, variants=variants)
