"""
Artifact generators.

Every generator reads the same module table and produces one artifact.
`GENERATORS` lists them in the order the assembler runs them.
"""

from .base import Generator, instance_alias
from .dispatch import OuterCallGenerator
from .genesis import GenesisConfigGenerator
from .inherent import InherentGenerator
from .metadata import MetadataGenerator
from .outer_enum import OuterEnumGenerator, OuterEventGenerator, OuterOriginGenerator
from .registry import ModuleRegistryGenerator
from .unsigned import ValidateUnsignedGenerator

GENERATORS: tuple[type[Generator], ...] = (
    OuterEventGenerator,
    OuterOriginGenerator,
    ModuleRegistryGenerator,
    OuterCallGenerator,
    MetadataGenerator,
    GenesisConfigGenerator,
    InherentGenerator,
    ValidateUnsignedGenerator,
)

__all__ = [
    "GENERATORS",
    "Generator",
    "GenesisConfigGenerator",
    "InherentGenerator",
    "MetadataGenerator",
    "ModuleRegistryGenerator",
    "OuterCallGenerator",
    "OuterEnumGenerator",
    "OuterEventGenerator",
    "OuterOriginGenerator",
    "ValidateUnsignedGenerator",
    "instance_alias",
]
