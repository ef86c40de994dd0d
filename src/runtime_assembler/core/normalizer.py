"""
Grammar normalizer.

Rewrites every surface form of a module entry into the one canonical
`ModuleDecl`:

- bare `Name: path` becomes `Name: path::{default}`
- `Name: path::{default, Extra...}` becomes
  `Name: path::{Module, Call, Storage, Event<T>, Config<T>, Extra...}`
- explicit lists pass through, after each capability token is checked

Nothing downstream of this module ever sees surface syntax.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import ir
from .errors import GrammarError, make_grammar_error, source_line

logger = logging.getLogger(__name__)

# Prepended, verbatim and in this order, by the `default` shorthand
DEFAULT_CAPABILITIES: tuple[ir.Capability, ...] = (
    ir.Capability.plain(ir.CapabilityKind.MODULE),
    ir.Capability.plain(ir.CapabilityKind.CALL),
    ir.Capability.plain(ir.CapabilityKind.STORAGE),
    ir.Capability.generic(ir.CapabilityKind.EVENT, "T"),
    ir.Capability.generic(ir.CapabilityKind.CONFIG, "T"),
)

_KINDS_BY_NAME = {kind.value: kind for kind in ir.CapabilityKind}


class Normalizer:
    """
    Converts parsed surface syntax into canonical IR.

    Args:
        file: Source file, for error locations
        text: Source text, for error snippets
    """

    def __init__(self, file: Path | None = None, text: str = ""):
        self.file = file or Path("<runtime>")
        self.text = text

    def normalize(self, syntax: ir.RuntimeSyntax) -> ir.RuntimeDeclaration:
        """Normalize a whole runtime declaration into its module table."""
        modules = tuple(self.normalize_entry(entry) for entry in syntax.entries)
        logger.debug("Normalized %d module entries for runtime %s", len(modules), syntax.name)

        return ir.RuntimeDeclaration(
            name=syntax.name,
            block=syntax.block,
            node_block=syntax.node_block,
            unchecked_extrinsic=syntax.unchecked_extrinsic,
            modules=ir.ModuleTable(modules=modules),
            file=syntax.file,
        )

    def normalize_entry(self, entry: ir.ModuleEntrySyntax) -> ir.ModuleDecl:
        """Produce the canonical declaration for one module entry."""
        if entry.form == ir.DeclarationForm.BARE:
            # Form A is Form B with no extras
            entry = entry.model_copy(update={"form": ir.DeclarationForm.DEFAULT})

        if entry.form == ir.DeclarationForm.DEFAULT and entry.instance is not None:
            raise self._error(
                "'default' cannot be combined with an instance; "
                "list the capabilities explicitly",
                entry.line,
                entry.column,
                entry.name,
            )

        capabilities = tuple(self.normalize_capability(cap, entry) for cap in entry.capabilities)
        if entry.form == ir.DeclarationForm.DEFAULT:
            capabilities = DEFAULT_CAPABILITIES + capabilities

        decl = ir.ModuleDecl(
            name=entry.name,
            module_path=entry.module_path,
            instance=entry.instance,
            capabilities=capabilities,
        )
        logger.debug("%s form normalized to %s", entry.form.value, decl.render())
        return decl

    def normalize_capability(
        self, cap: ir.CapabilitySyntax, entry: ir.ModuleEntrySyntax
    ) -> ir.Capability:
        """Check one capability token and convert it to a Capability."""
        kind = _KINDS_BY_NAME.get(cap.name)
        if kind is None:
            expected = ", ".join(_KINDS_BY_NAME)
            raise self._error(
                f"Unknown capability '{cap.name}' (expected one of: {expected})",
                cap.line,
                cap.column,
                entry.name,
            )

        if cap.generics and kind not in ir.GENERIC_CAPABILITIES:
            raise self._error(
                f"Capability '{cap.name}' does not take generic parameters",
                cap.line,
                cap.column,
                entry.name,
            )

        call_source = None
        if cap.args is not None:
            if kind != ir.CapabilityKind.INHERENT:
                raise self._error(
                    f"Capability '{cap.name}' does not take arguments",
                    cap.line,
                    cap.column,
                    entry.name,
                )
            if len(cap.args) != 1:
                raise self._error(
                    f"'Inherent' takes exactly one call-source module, got {len(cap.args)}",
                    cap.line,
                    cap.column,
                    entry.name,
                )
            call_source = cap.args[0]

        return ir.Capability(kind=kind, generics=cap.generics, call_source=call_source)

    def _error(self, message: str, line: int, column: int, module: str) -> GrammarError:
        return make_grammar_error(
            message,
            self.file,
            line,
            column,
            snippet=source_line(self.text, line) if self.text else None,
            module=module,
        )


def normalize_runtime(
    syntax: ir.RuntimeSyntax, text: str = ""
) -> ir.RuntimeDeclaration:
    """Convenience wrapper around Normalizer.normalize."""
    return Normalizer(syntax.file, text).normalize(syntax)
