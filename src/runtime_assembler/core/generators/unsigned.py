from .. import ir
from .base import Generator


class ValidateUnsignedGenerator(Generator):
    """Chain of modules consulted, in order, for unsigned transactions."""

    artifact = "validate_unsigned"

    def generate(self) -> ir.ValidateUnsignedSpec:
        modules = self.table.with_capability(ir.CapabilityKind.VALIDATE_UNSIGNED)
        return ir.ValidateUnsignedSpec(
            runtime=self.runtime_name,
            modules=tuple(module.name for module in modules),
        )
