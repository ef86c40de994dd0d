"""
Surface syntax IR.

These types mirror what was written in the declaration, before
normalization. They record which surface form an entry used so the
normalizer can expand it; generators never see them.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class DeclarationForm(str, Enum):
    """The three accepted ways of writing a module entry."""

    BARE = "bare"  # Name: module_path
    DEFAULT = "default"  # Name: module_path::{default, Extra, ...}
    EXPLICIT = "explicit"  # Name: module_path::[<Instance>::]{Cap, ...}


class CapabilitySyntax(BaseModel):
    """
    A capability token as written, e.g. `Event<T, I>` or `Inherent(Timestamp)`.

    Attributes:
        name: Capability identifier
        generics: Generic parameter identifiers inside `<...>`
        args: Argument identifiers inside `(...)`, or None when no parentheses were written
        line: Source line (1-indexed)
        column: Source column (1-indexed)
    """

    name: str
    generics: tuple[str, ...] = ()
    args: tuple[str, ...] | None = None
    line: int = 0
    column: int = 0

    model_config = ConfigDict(frozen=True)


class ModuleEntrySyntax(BaseModel):
    """
    One module entry of the runtime body as written.

    For the DEFAULT form, `capabilities` holds only the extras following
    `default`; for the BARE form it is empty.
    """

    name: str
    module_path: str
    instance: str | None = None
    form: DeclarationForm
    capabilities: tuple[CapabilitySyntax, ...] = ()
    line: int = 0
    column: int = 0

    model_config = ConfigDict(frozen=True)


class RuntimeSyntax(BaseModel):
    """The whole runtime declaration as written."""

    name: str
    block: str
    node_block: str
    unchecked_extrinsic: str
    entries: tuple[ModuleEntrySyntax, ...] = ()
    file: Path | None = None

    model_config = ConfigDict(frozen=True)
