"""
runtime-assembler CLI package.

- project.py: validate, normalize, build and inspect commands
- utils.py: Shared utilities
"""

import logging
import sys

import typer

from runtime_assembler.cli.project import (
    build_command,
    inspect_command,
    normalize_command,
    validate_command,
)
from runtime_assembler.cli.utils import configure_logging, get_version, version_callback

app = typer.Typer(
    help="""runtime-assembler – declarative runtime assembly compiler

Commands operate on a runtime declaration file, given as an argument or
taken from the [runtime] source of assembly.toml in the current directory.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """runtime-assembler main callback for global options."""
    if verbose:
        configure_logging(logging.DEBUG)


app.command(name="validate")(validate_command)
app.command(name="normalize")(normalize_command)
app.command(name="build")(build_command)
app.command(name="inspect")(inspect_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]


if __name__ == "__main__":
    main(sys.argv[1:])
