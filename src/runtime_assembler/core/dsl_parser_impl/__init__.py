"""
Runtime declaration parser package.

The parser is built from mixins, one per grammar area:
- RuntimeHeaderParserMixin: outer `pub enum Runtime where ...` declaration
- ModuleEntryParserMixin: module entries and their capability lists

Usage:
    from runtime_assembler.core.dsl_parser_impl import parse_runtime_text

    syntax = parse_runtime_text(text, file)
"""

from pathlib import Path

from .. import ir
from ..lexer import tokenize
from .base import BaseParser
from .header import RuntimeHeaderParserMixin
from .modules import ModuleEntryParserMixin


class Parser(
    BaseParser,
    RuntimeHeaderParserMixin,
    ModuleEntryParserMixin,
):
    """Complete runtime declaration parser."""

    def parse(self) -> ir.RuntimeSyntax:
        """
        Parse the whole token stream.

        Returns:
            RuntimeSyntax describing the declaration as written
        """
        return self.parse_runtime()


def parse_runtime_text(text: str, file: Path) -> ir.RuntimeSyntax:
    """
    Parse a runtime declaration.

    Args:
        text: Declaration source
        file: Source file path (used in error locations)

    Returns:
        RuntimeSyntax (surface form, not yet normalized)

    Raises:
        GrammarError: If the text does not match the grammar
    """
    tokens = tokenize(text, file)
    parser = Parser(tokens, file, text)
    return parser.parse()


def parse_module_entry_text(text: str, file: Path) -> ir.ModuleEntrySyntax:
    """
    Parse a single module entry such as `Balances: balances::{default}`.

    Raises:
        GrammarError: If the text is not exactly one module entry
    """
    from ..lexer import TokenType

    tokens = tokenize(text, file)
    parser = Parser(tokens, file, text)
    entry = parser.parse_module_entry()
    if parser.match(TokenType.COMMA):
        parser.advance()
    if not parser.match(TokenType.EOF):
        raise parser.error("Unexpected input after module entry")
    return entry


__all__ = ["Parser", "parse_module_entry_text", "parse_runtime_text"]
