"""Shared pytest fixtures for runtime assembler tests."""

import textwrap
from pathlib import Path

import pytest

from runtime_assembler.core import ir
from runtime_assembler.core.assembler import assemble_runtime
from runtime_assembler.core.parser import parse_runtime_file


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def node_runtime_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "node_runtime.rt"


@pytest.fixture
def node_runtime(node_runtime_path: Path) -> ir.RuntimeDeclaration:
    """Normalized declaration of the sample node runtime."""
    return parse_runtime_file(node_runtime_path)


@pytest.fixture
def assembled_node(node_runtime: ir.RuntimeDeclaration) -> ir.AssembledRuntime:
    return assemble_runtime(node_runtime)


@pytest.fixture
def project_dir(tmp_path: Path, node_runtime_path: Path) -> Path:
    """A project directory with assembly.toml and a runtime declaration."""
    (tmp_path / "runtime.rt").write_text(node_runtime_path.read_text(encoding="utf-8"))
    (tmp_path / "assembly.toml").write_text(
        textwrap.dedent("""\
            [runtime]
            source = "runtime.rt"

            [output]
            format = "yaml"
        """)
    )
    return tmp_path
