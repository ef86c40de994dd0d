"""
Runtime assembly entry point.

Parses the outer declaration, normalizes every module entry once, then
runs each artifact generator against the same immutable module table and
collects the results.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from . import ir
from .generators import GENERATORS, Generator
from .parser import parse_runtime_file, parse_runtime_source

logger = logging.getLogger(__name__)


class RuntimeAssembler:
    """
    Runs every generator over a normalized runtime declaration.

    Args:
        declaration: Normalized runtime declaration
        generators: Generator classes to run (defaults to all of them)
    """

    def __init__(
        self,
        declaration: ir.RuntimeDeclaration,
        generators: tuple[type[Generator], ...] = GENERATORS,
    ):
        self.declaration = declaration
        self.generators = generators

    def run(self) -> dict[str, BaseModel]:
        """Run the generators and return artifacts keyed by name."""
        artifacts: dict[str, BaseModel] = {}
        for generator_cls in self.generators:
            generator = generator_cls(self.declaration)
            artifacts[generator.artifact] = generator.generate()
            logger.debug("Generated %s artifact", generator.artifact)
        return artifacts

    def assemble(self) -> ir.AssembledRuntime:
        """
        Produce every artifact for the runtime.

        Raises:
            DuplicateSystemError: If more than one module is named System
            MissingSystemError: If no module is named System
            DuplicateModuleError: If a binding name is used twice
        """
        artifacts = self.run()
        decl = self.declaration

        assembled = ir.AssembledRuntime(
            runtime=ir.RuntimeTypeSpec(
                name=decl.name,
                block=decl.block,
                node_block=decl.node_block,
                unchecked_extrinsic=decl.unchecked_extrinsic,
            ),
            modules=decl.modules,
            **artifacts,
        )
        logger.info(
            "Assembled runtime %s: %d modules, %d call variants, %d event variants",
            decl.name,
            len(decl.modules),
            len(assembled.call.variants),
            len(assembled.event.variants),
        )
        return assembled


def assemble_runtime(declaration: ir.RuntimeDeclaration) -> ir.AssembledRuntime:
    """Assemble an already-normalized declaration."""
    return RuntimeAssembler(declaration).assemble()


def assemble_source(text: str, file: Path | None = None) -> ir.AssembledRuntime:
    """Parse, normalize and assemble declaration text."""
    return assemble_runtime(parse_runtime_source(text, file))


def assemble_file(path: Path) -> ir.AssembledRuntime:
    """Parse, normalize and assemble a declaration file."""
    return assemble_runtime(parse_runtime_file(path))
