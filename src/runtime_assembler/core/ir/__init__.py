"""
Runtime assembly Intermediate Representation (IR) types.

Types are organized into submodules:
- capabilities: capability kinds and canonical capabilities
- syntax: surface syntax of module entries (parser output)
- module: canonical module declarations and the module table
- artifacts: structural descriptions produced by the generators

All types are re-exported from this package.
"""

from .artifacts import (
    AssembledRuntime,
    CallVariant,
    GenesisConfigField,
    GenesisConfigSpec,
    InherentDispatcherSpec,
    InherentParticipant,
    MetadataEntry,
    ModuleBinding,
    ModuleRegistrySpec,
    OuterCallSpec,
    OuterEnumSpec,
    OuterEnumVariant,
    RuntimeMetadataSpec,
    RuntimeTypeSpec,
    ValidateUnsignedSpec,
)
from .capabilities import GENERIC_CAPABILITIES, Capability, CapabilityKind
from .module import SYSTEM_MODULE_NAME, ModuleDecl, ModuleTable, RuntimeDeclaration
from .syntax import CapabilitySyntax, DeclarationForm, ModuleEntrySyntax, RuntimeSyntax

__all__ = [
    # Capabilities
    "Capability",
    "CapabilityKind",
    "GENERIC_CAPABILITIES",
    # Surface syntax
    "CapabilitySyntax",
    "DeclarationForm",
    "ModuleEntrySyntax",
    "RuntimeSyntax",
    # Canonical modules
    "SYSTEM_MODULE_NAME",
    "ModuleDecl",
    "ModuleTable",
    "RuntimeDeclaration",
    # Artifacts
    "AssembledRuntime",
    "CallVariant",
    "GenesisConfigField",
    "GenesisConfigSpec",
    "InherentDispatcherSpec",
    "InherentParticipant",
    "MetadataEntry",
    "ModuleBinding",
    "ModuleRegistrySpec",
    "OuterCallSpec",
    "OuterEnumSpec",
    "OuterEnumVariant",
    "RuntimeMetadataSpec",
    "RuntimeTypeSpec",
    "ValidateUnsignedSpec",
]
