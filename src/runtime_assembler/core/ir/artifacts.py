"""
Generated artifact types.

Each generator produces one of these structural descriptions from the
module table. Artifacts never reference each other; they agree with one
another only because they are derived from the same module table.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .capabilities import CapabilityKind
from .module import ModuleTable


class RuntimeTypeSpec(BaseModel):
    """
    The runtime unit type and its block type bindings.

    Attributes:
        name: Runtime type name
        block: Block type used by the runtime (GetRuntimeBlockType)
        node_block: Block type used by the node (GetNodeBlockType)
        unchecked_extrinsic: Unchecked extrinsic type
    """

    name: str
    block: str
    node_block: str
    unchecked_extrinsic: str

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Outer Event / Origin
# =============================================================================


class OuterEnumVariant(BaseModel):
    """One variant of the outer Event or Origin union."""

    module_name: str
    module_path: str
    instance: str | None = None
    generic: bool = False
    type_path: str
    alias: str | None = None  # instance import alias, e.g. "test3_Instance1"

    model_config = ConfigDict(frozen=True)


class OuterEnumSpec(BaseModel):
    """
    Outer tagged union over the per-module Event (or Origin) types.

    Attributes:
        kind: EVENT or ORIGIN
        runtime: Runtime type name
        system: Module path of the System module (the shared type parameter)
        variants: One variant per module declaring the capability, in order
    """

    kind: CapabilityKind
    runtime: str
    system: str
    variants: tuple[OuterEnumVariant, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.kind.value


# =============================================================================
# Module Registry
# =============================================================================


class ModuleBinding(BaseModel):
    """A type alias binding a module name to its concrete instantiation."""

    name: str
    module_path: str
    instance: str | None = None
    type_path: str

    model_config = ConfigDict(frozen=True)


class ModuleRegistrySpec(BaseModel):
    """
    Named aliases for every module plus the ordered lifecycle collection.

    `all_modules` lists every binding name with System first; the host calls
    per-block lifecycle hooks in this order.
    """

    runtime: str
    system: str
    bindings: tuple[ModuleBinding, ...] = ()
    all_modules: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def binding(self, name: str) -> ModuleBinding | None:
        for binding in self.bindings:
            if binding.name == name:
                return binding
        return None


# =============================================================================
# Outer Call
# =============================================================================


class CallVariant(BaseModel):
    """A variant of the outer call, wrapping one module's own Call type."""

    index: int
    name: str
    module_path: str
    instance: str | None = None
    call_type: str

    model_config = ConfigDict(frozen=True)


class OuterCallSpec(BaseModel):
    """
    Outer call dispatcher.

    Variant indices equal declaration order among Call-declaring modules and
    are part of the encoding: reordering those modules breaks previously
    encoded calls.
    """

    runtime: str
    origin: str = "Origin"
    variants: tuple[CallVariant, ...] = ()

    model_config = ConfigDict(frozen=True)

    def variant_index(self, name: str) -> int:
        """Index of the variant for a module binding name."""
        for variant in self.variants:
            if variant.name == name:
                return variant.index
        raise KeyError(f"Module '{name}' does not declare Call")

    def variant_at(self, index: int) -> CallVariant:
        """Variant for an encoded index."""
        if 0 <= index < len(self.variants):
            return self.variants[index]
        raise IndexError(f"No call variant with index {index}")


# =============================================================================
# Metadata
# =============================================================================


class MetadataEntry(BaseModel):
    """
    Metadata descriptor for one module.

    Attributes:
        module_path: Module implementation path
        instance: Instance marker, if any
        name: Binding name
        leading: Capability names accumulated before `Module`
        capabilities: All accumulated capability names (leading first)
    """

    module_path: str
    instance: str | None = None
    name: str
    leading: tuple[str, ...] = ()
    capabilities: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class RuntimeMetadataSpec(BaseModel):
    runtime: str
    modules: tuple[MetadataEntry, ...] = ()

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Genesis Config
# =============================================================================


class GenesisConfigField(BaseModel):
    """One field of the aggregate genesis config."""

    field_name: str
    module_name: str
    module_path: str
    instance: str | None = None
    generic: bool = False
    config_type: str

    model_config = ConfigDict(frozen=True)


class GenesisConfigSpec(BaseModel):
    """
    Aggregate genesis config.

    Fields are populated in order; a module may only depend on the genesis
    state of modules declared before it.
    """

    runtime: str
    name: str = "GenesisConfig"
    config_fields: tuple[GenesisConfigField, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_field(self, field_name: str) -> GenesisConfigField | None:
        for item in self.config_fields:
            if item.field_name == field_name:
                return item
        return None


# =============================================================================
# Inherents / ValidateUnsigned
# =============================================================================


class InherentParticipant(BaseModel):
    """A module taking part in inherent creation and checking."""

    name: str
    module_path: str
    call_source: str

    model_config = ConfigDict(frozen=True)

    @property
    def delegated(self) -> bool:
        """Whether the inherent call comes from another module's Call type."""
        return self.call_source != self.name


class InherentDispatcherSpec(BaseModel):
    runtime: str
    block: str
    unchecked_extrinsic: str
    participants: tuple[InherentParticipant, ...] = ()

    model_config = ConfigDict(frozen=True)


class ValidateUnsignedSpec(BaseModel):
    """Modules chained, in order, to validate unsigned transactions."""

    runtime: str
    modules: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Assembly result
# =============================================================================


class AssembledRuntime(BaseModel):
    """Everything produced for one runtime declaration."""

    runtime: RuntimeTypeSpec
    modules: ModuleTable = Field(default_factory=ModuleTable)
    event: OuterEnumSpec
    origin: OuterEnumSpec
    registry: ModuleRegistrySpec
    call: OuterCallSpec
    metadata: RuntimeMetadataSpec
    genesis: GenesisConfigSpec
    inherents: InherentDispatcherSpec
    validate_unsigned: ValidateUnsignedSpec

    model_config = ConfigDict(frozen=True)
