"""
Error types for runtime declaration parsing, normalization, and assembly.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class AssemblyError(Exception):
    """Base exception for all runtime assembly errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class GrammarError(AssemblyError):
    """
    Raised when a runtime declaration does not match the grammar.

    Examples:
    - Unexpected character or token
    - Module entry matching none of the three surface forms
    - Unknown capability name
    - Generic parameters or arguments on a capability that takes none
    """

    pass


class SystemModuleError(AssemblyError):
    """Raised when the distinguished `System` module cannot be bound."""

    pass


class DuplicateSystemError(SystemModuleError):
    """Raised when more than one module is named `System`."""

    pass


class MissingSystemError(SystemModuleError):
    """Raised when a generator needs the `System` binding and none is declared."""

    pass


class DuplicateModuleError(AssemblyError):
    """Raised when two module entries share the same binding name."""

    pass


class UnresolvedModuleError(AssemblyError):
    """
    Raised when a dispatcher cannot find the implementation for a module.

    Module implementations are supplied by the host; this is raised when
    the host's mapping lacks an entry the generated dispatcher needs.
    """

    pass


class ManifestError(AssemblyError):
    """Raised when assembly.toml cannot be read or holds invalid values."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source snippet around the error location
        module: Optional module binding name where error occurred
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None
    module: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "runtime.rt:10:5 in module Balances"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.module:
            location += f" in module {self.module}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending source line with a column marker."""
        if not self.snippet:
            return ""

        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^^^"
        return f"{prefix}{self.snippet}\n{marker}"


def make_grammar_error(
    message: str,
    file: Path,
    line: int,
    column: int,
    snippet: str | None = None,
    module: str | None = None,
) -> GrammarError:
    """
    Helper to create a GrammarError with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line
        module: Optional module binding name

    Returns:
        GrammarError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet, module=module)
    return GrammarError(message, context)


def source_line(text: str, line: int) -> str | None:
    """Return the 1-indexed source line, or None when out of range."""
    lines = text.splitlines()
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return None
