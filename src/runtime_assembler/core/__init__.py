"""Core runtime assembly: IR, lexer, parser, normalizer, generators, manifest."""

from . import ir
from .assembler import RuntimeAssembler, assemble_file, assemble_runtime, assemble_source
from .errors import (
    AssemblyError,
    DuplicateModuleError,
    DuplicateSystemError,
    ErrorContext,
    GrammarError,
    ManifestError,
    MissingSystemError,
    SystemModuleError,
    UnresolvedModuleError,
)
from .manifest import AssemblyManifest, load_manifest
from .normalizer import Normalizer, normalize_runtime
from .parser import parse_module_decl, parse_runtime_file, parse_runtime_source

__all__ = [
    "ir",
    "AssemblyError",
    "GrammarError",
    "SystemModuleError",
    "DuplicateSystemError",
    "MissingSystemError",
    "DuplicateModuleError",
    "UnresolvedModuleError",
    "ManifestError",
    "ErrorContext",
    "Normalizer",
    "normalize_runtime",
    "parse_runtime_source",
    "parse_runtime_file",
    "parse_module_decl",
    "RuntimeAssembler",
    "assemble_runtime",
    "assemble_source",
    "assemble_file",
    "AssemblyManifest",
    "load_manifest",
]
