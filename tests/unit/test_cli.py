"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from runtime_assembler.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "runtime-assembler version" in result.stdout


def test_validate_command_success(cli_runner: CliRunner, node_runtime_path: Path):
    result = cli_runner.invoke(app, ["validate", str(node_runtime_path)])

    assert result.exit_code == 0
    assert "OK: runtime Runtime is valid (10 modules, 8 call variants)." in result.stdout


def test_validate_command_grammar_error(cli_runner: CliRunner, fixtures_dir: Path):
    result = cli_runner.invoke(app, ["validate", str(fixtures_dir / "unknown_capability.rt")])

    assert result.exit_code == 1
    assert "Parse error:" in result.output
    assert "Unknown capability 'Calls'" in result.output


def test_validate_command_vscode_format(cli_runner: CliRunner, fixtures_dir: Path):
    result = cli_runner.invoke(
        app,
        ["validate", str(fixtures_dir / "unknown_capability.rt"), "--format", "vscode"],
    )

    assert result.exit_code == 1
    assert "unknown_capability.rt:7:34: error: Unknown capability 'Calls'" in result.output


def test_validate_command_missing_system(cli_runner: CliRunner, fixtures_dir: Path):
    result = cli_runner.invoke(app, ["validate", str(fixtures_dir / "missing_system.rt")])

    assert result.exit_code == 1
    assert "Error: No 'System' module declared" in result.output


def test_validate_command_non_utf8_file(cli_runner: CliRunner, tmp_path: Path):
    source = tmp_path / "runtime.rt"
    source.write_bytes(b"\xff\xfe construct_runtime!")

    result = cli_runner.invoke(app, ["validate", str(source)])

    assert result.exit_code == 1
    assert "Parse error:" in result.output
    assert "not valid UTF-8" in result.output


def test_validate_command_missing_file(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["validate", str(tmp_path / "nope.rt")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_validate_uses_manifest(cli_runner: CliRunner, project_dir: Path):
    result = cli_runner.invoke(
        app, ["validate", "--manifest", str(project_dir / "assembly.toml")]
    )
    assert result.exit_code == 0


def test_validate_missing_manifest(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["validate", "--manifest", str(tmp_path / "assembly.toml")])

    assert result.exit_code == 1
    assert "Manifest not found" in result.output


def test_normalize_command(cli_runner: CliRunner, node_runtime_path: Path):
    result = cli_runner.invoke(app, ["normalize", str(node_runtime_path)])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "System: system::{Module, Call, Storage, Config, Event}"
    assert "Balances: balances::{Module, Call, Storage, Event<T>, Config<T>, Event}" in lines
    assert "Unused: unused::{}" in lines


def test_build_command_json_to_stdout(cli_runner: CliRunner, node_runtime_path: Path):
    result = cli_runner.invoke(app, ["build", str(node_runtime_path)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [v["name"] for v in data["call"]["variants"]][:2] == ["System", "Timestamp"]
    assert data["runtime"]["node_block"] == "opaque::Block"


def test_build_command_yaml_to_file(cli_runner: CliRunner, node_runtime_path: Path, tmp_path: Path):
    output = tmp_path / "out" / "runtime.yaml"
    result = cli_runner.invoke(
        app,
        ["build", str(node_runtime_path), "--format", "yaml", "--output", str(output)],
    )

    assert result.exit_code == 0
    assert "Wrote yaml artifacts" in result.stdout
    data = yaml.safe_load(output.read_text())
    assert data["validate_unsigned"]["modules"] == ["OffchainWorker"]


def test_build_command_uses_manifest_format(cli_runner: CliRunner, project_dir: Path):
    result = cli_runner.invoke(app, ["build", "--manifest", str(project_dir / "assembly.toml")])

    assert result.exit_code == 0
    data = yaml.safe_load(result.stdout)
    assert data["genesis"]["name"] == "GenesisConfig"


def test_build_command_rejects_unknown_format(cli_runner: CliRunner, node_runtime_path: Path):
    result = cli_runner.invoke(app, ["build", str(node_runtime_path), "--format", "xml"])

    assert result.exit_code == 1
    assert "Unsupported format 'xml'" in result.output


def test_inspect_command(cli_runner: CliRunner, node_runtime_path: Path):
    result = cli_runner.invoke(app, ["inspect", str(node_runtime_path)])

    assert result.exit_code == 0
    assert "Test3_Instance1" in result.stdout
    assert "Instance1" in result.stdout
    assert "Inherents: 2" in result.stdout
