"""
runtime_assembler - declarative runtime assembly compiler.

Reads a runtime declaration listing modules and their capabilities,
normalizes every entry to one canonical form, and derives the outer
types and dispatchers of the runtime from the resulting module table.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.assembler import assemble_file, assemble_source
from .core.errors import AssemblyError, GrammarError, ManifestError, SystemModuleError


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("runtime-assembler")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "assemble_file",
    "assemble_source",
    "AssemblyError",
    "GrammarError",
    "ManifestError",
    "SystemModuleError",
]
