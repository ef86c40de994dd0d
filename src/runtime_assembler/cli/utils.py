"""
runtime-assembler CLI utilities.

Shared helpers used by the CLI commands.
"""

import logging
import platform
from pathlib import Path

import typer

from runtime_assembler.core.errors import AssemblyError
from runtime_assembler.core.manifest import AssemblyManifest, load_manifest

__version__ = "0.3.0"

DEFAULT_MANIFEST = "assembly.toml"


def get_version() -> str:
    """Get runtime-assembler version from package metadata."""
    try:
        from importlib.metadata import version

        return version("runtime-assembler")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        assembler_version = get_version()

        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import runtime_assembler

            install_location = Path(runtime_assembler.__file__).parent.parent.parent
        except Exception:
            install_location = Path.cwd()

        install_method = "unknown"
        try:
            from importlib.metadata import distribution

            dist = distribution("runtime-assembler")
            if dist.read_text("direct_url.json"):
                install_method = "pip (editable)"
            else:
                install_method = "pip"
        except Exception:
            if (install_location / "pyproject.toml").exists():
                install_method = "development"

        typer.echo(f"runtime-assembler version {assembler_version}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo("")
        typer.echo("Installation:")
        typer.echo(f"  Method:        {install_method}")
        typer.echo(f"  Location:      {install_location}")

        raise typer.Exit()


def configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_source(file: str | None, manifest: str) -> tuple[Path, AssemblyManifest | None]:
    """
    Work out which declaration file a command operates on.

    An explicit FILE argument wins. Otherwise the manifest's
    `[runtime] source` is used.

    Raises:
        ManifestError: If no FILE is given and the manifest cannot be loaded
    """
    if file:
        return Path(file), None

    mf = load_manifest(Path(manifest))
    if mf.logging.level_number < logging.WARNING:
        configure_logging(mf.logging.level_number)
    return mf.source_path, mf


def print_vscode_error(error: AssemblyError, root: Path) -> None:
    """Print an error in VS Code format: file:line:col: error: message"""
    if error.context:
        file_path = error.context.file
        try:
            rel_path = Path(file_path).relative_to(root)
        except ValueError:
            rel_path = Path(file_path)

        line = error.context.line or 1
        col = error.context.column or 1
        typer.echo(f"{rel_path}:{line}:{col}: error: {error.message}", err=True)
    else:
        typer.echo(f"::error: {error.message}", err=True)
