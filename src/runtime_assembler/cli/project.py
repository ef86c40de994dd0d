"""
Project commands for the runtime-assembler CLI.

Commands operating on a runtime declaration:
- validate: Parse, normalize and run every generator
- normalize: Print the canonical form of each module
- build: Write the assembled artifacts as JSON or YAML
- inspect: Show modules, instances and capabilities as a table
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
import yaml
from rich.console import Console
from rich.table import Table

from runtime_assembler.cli.utils import DEFAULT_MANIFEST, print_vscode_error, resolve_source
from runtime_assembler.core import ir
from runtime_assembler.core.assembler import assemble_runtime
from runtime_assembler.core.errors import AssemblyError, GrammarError
from runtime_assembler.core.manifest import OUTPUT_FORMATS
from runtime_assembler.core.parser import parse_runtime_file

console = Console()

FILE_ARGUMENT_HELP = "Runtime declaration file (defaults to [runtime] source in the manifest)"


def _load(file: str | None, manifest: str) -> ir.RuntimeDeclaration:
    source, _ = resolve_source(file, manifest)
    if not source.exists():
        typer.echo(f"Error: File not found: {source}", err=True)
        raise typer.Exit(code=1)
    return parse_runtime_file(source)


def _fail(error: AssemblyError) -> NoReturn:
    if isinstance(error, GrammarError):
        typer.echo(f"Parse error: {error}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def serialize(assembled: ir.AssembledRuntime, output_format: str) -> str:
    """Render assembled artifacts as JSON or YAML text."""
    data = assembled.model_dump(mode="json")
    if output_format == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return json.dumps(data, indent=2) + "\n"


def validate_command(
    file: str | None = typer.Argument(None, help=FILE_ARGUMENT_HELP),
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to assembly.toml"),
    format: str = typer.Option(
        "human", "--format", "-f", help="Output format: 'human' or 'vscode'"
    ),
) -> None:
    """
    Parse and normalize the declaration, then run every generator.
    """
    try:
        declaration = _load(file, manifest)
        assembled = assemble_runtime(declaration)
    except AssemblyError as e:
        if format == "vscode":
            print_vscode_error(e, Path.cwd())
            raise typer.Exit(code=1)
        _fail(e)

    if format == "vscode":
        typer.echo("::notice: Validation successful")
        return

    typer.echo(
        f"OK: runtime {assembled.runtime.name} is valid "
        f"({len(assembled.modules)} modules, {len(assembled.call.variants)} call variants)."
    )


def normalize_command(
    file: str | None = typer.Argument(None, help=FILE_ARGUMENT_HELP),
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to assembly.toml"),
) -> None:
    """
    Print every module entry in its canonical (explicit) form.
    """
    try:
        declaration = _load(file, manifest)
    except AssemblyError as e:
        _fail(e)

    for module in declaration.modules.modules:
        typer.echo(module.render())


def build_command(
    file: str | None = typer.Argument(None, help=FILE_ARGUMENT_HELP),
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to assembly.toml"),
    format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'json' or 'yaml'"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output file (stdout when omitted)"
    ),
) -> None:
    """
    Assemble the runtime and write every generated artifact.
    """
    try:
        source, mf = resolve_source(file, manifest)
        if not source.exists():
            typer.echo(f"Error: File not found: {source}", err=True)
            raise typer.Exit(code=1)
        assembled = assemble_runtime(parse_runtime_file(source))
    except AssemblyError as e:
        _fail(e)

    output_format = format or (mf.output.format if mf else "json")
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unsupported format '{output_format}' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})",
            err=True,
        )
        raise typer.Exit(code=1)

    text = serialize(assembled, output_format)

    output_path = Path(output) if output else (mf.output_path if mf else None)
    if output_path is None:
        typer.echo(text, nl=False)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {output_format} artifacts to {output_path}")


def inspect_command(
    file: str | None = typer.Argument(None, help=FILE_ARGUMENT_HELP),
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to assembly.toml"),
) -> None:
    """
    Show the module table: instances, capabilities and call indices.
    """
    try:
        declaration = _load(file, manifest)
        assembled = assemble_runtime(declaration)
    except AssemblyError as e:
        _fail(e)

    call_indices = {variant.name: variant.index for variant in assembled.call.variants}

    table = Table(title=f"Runtime {declaration.name}")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Path")
    table.add_column("Instance", style="dim", no_wrap=True)
    table.add_column("Capabilities")
    table.add_column("Call", justify="right")

    for module in declaration.modules.modules:
        index = call_indices.get(module.name)
        table.add_row(
            module.name,
            module.module_path,
            module.instance or "-",
            ", ".join(cap.render() for cap in module.capabilities) or "-",
            str(index) if index is not None else "-",
        )

    console.print(table)
    console.print(
        f"Inherents: {len(assembled.inherents.participants)}  "
        f"ValidateUnsigned: {len(assembled.validate_unsigned.modules)}  "
        f"Genesis fields: {len(assembled.genesis.config_fields)}"
    )
