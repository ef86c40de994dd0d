"""
Module registry generation.

Binds every module name to its concrete instantiation and collects all
bindings, System first, for the per-block lifecycle hooks.
"""

import logging

from .. import ir
from ..errors import DuplicateModuleError
from .base import Generator

logger = logging.getLogger(__name__)


class ModuleRegistryGenerator(Generator):
    artifact = "registry"

    def generate(self) -> ir.ModuleRegistrySpec:
        system = self.table.require_system()

        bindings: list[ir.ModuleBinding] = []
        seen: dict[str, ir.ModuleDecl] = {}
        for module in self.table.modules:
            if module.name in seen:
                previous = seen[module.name]
                raise DuplicateModuleError(
                    f"Module name '{module.name}' is bound twice "
                    f"('{previous.module_path}' and '{module.module_path}')"
                )
            seen[module.name] = module
            bindings.append(
                ir.ModuleBinding(
                    name=module.name,
                    module_path=module.module_path,
                    instance=module.instance,
                    type_path=self._type_path(module, "Module"),
                )
            )

        all_modules = [system.name] + [b.name for b in bindings if b.name != system.name]

        shared = self._shared_implementations()
        for module_path, instances in shared.items():
            logger.debug(
                "Module path '%s' bound %d times (instances: %s)",
                module_path,
                len(instances),
                ", ".join(i or "<default>" for i in instances),
            )

        return ir.ModuleRegistrySpec(
            runtime=self.runtime_name,
            system=system.name,
            bindings=tuple(bindings),
            all_modules=tuple(all_modules),
        )

    def _shared_implementations(self) -> dict[str, list[str | None]]:
        """Module paths used by more than one binding, with their instances."""
        by_path: dict[str, list[str | None]] = {}
        for module in self.table.modules:
            by_path.setdefault(module.module_path, []).append(module.instance)
        return {path: instances for path, instances in by_path.items() if len(instances) > 1}
