"""
Outer call construction.

Wraps module calls into RuntimeCall values using the variant indices of
the generated outer call. Indices follow declaration order among
Call-declaring modules.
"""

from typing import Any

from ..core import ir
from .types import RuntimeCall


class OuterCall:
    """Constructs and inspects outer call values for one runtime."""

    def __init__(self, spec: ir.OuterCallSpec):
        self.spec = spec

    def wrap(self, module: str, call: Any) -> RuntimeCall:
        """
        Wrap a module's call in the outer call.

        Raises:
            KeyError: If the module does not declare Call
        """
        return RuntimeCall(index=self.spec.variant_index(module), module=module, call=call)

    def from_index(self, index: int, call: Any) -> RuntimeCall:
        """Rebuild an outer call from an encoded variant index."""
        variant = self.spec.variant_at(index)
        return RuntimeCall(index=variant.index, module=variant.name, call=call)

    def is_current(self, call: RuntimeCall) -> bool:
        """Whether the call's index still matches its module under this runtime."""
        try:
            return self.spec.variant_index(call.module) == call.index
        except KeyError:
            return False
