"""Helpers for building runtime declarations in tests."""

from runtime_assembler.core import ir
from runtime_assembler.core.parser import parse_runtime_source

HEADER = """\
pub enum Runtime where
    Block = Block,
    NodeBlock = opaque::Block,
    UncheckedExtrinsic = UncheckedExtrinsic
"""


def runtime_source(*entries: str) -> str:
    """Wrap module entries in a runtime declaration header."""
    body = "".join(f"    {entry},\n" for entry in entries)
    return HEADER + "{\n" + body + "}\n"


def declare(*entries: str) -> ir.RuntimeDeclaration:
    """Parse and normalize a runtime made of the given module entries."""
    return parse_runtime_source(runtime_source(*entries))
