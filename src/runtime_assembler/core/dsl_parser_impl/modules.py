"""
Module entry parsing.

Recognizes the three surface forms of a module entry:

    System: system                                   # bare
    Balances: balances::{default, Event}             # default + extras
    Kitty: kitties::<Instance1>::{Module, Call}      # explicit

and records which one was used. Expansion to the canonical form is the
normalizer's job.
"""

from typing import TYPE_CHECKING

from ..lexer import TokenType
from .base import ParserProtocol

if TYPE_CHECKING:
    from .. import ir


class ModuleEntryParserMixin:
    """Parser mixin for the module list inside the runtime body."""

    def parse_module_entries(self: ParserProtocol) -> list["ir.ModuleEntrySyntax"]:
        """Parse `{ entry, entry, ... }` with an optional trailing comma."""
        self.expect(TokenType.LBRACE)

        entries = []
        while not self.match(TokenType.RBRACE):
            entries.append(self.parse_module_entry())
            if self.match(TokenType.COMMA):
                self.advance()
            elif not self.match(TokenType.RBRACE):
                raise self.error("Expected ',' or '}' after module entry")

        self.expect(TokenType.RBRACE)
        return entries

    def parse_module_entry(self: ParserProtocol) -> "ir.ModuleEntrySyntax":
        """Parse a single module entry in any of the three surface forms."""
        from .. import ir

        name_token = self.expect_identifier("a module name")
        self.expect(TokenType.COLON)
        module_path = self.expect_identifier("a module path").value

        location = {"line": name_token.line, "column": name_token.column}

        # Form A: `Name: module_path`
        if not self.match(TokenType.DOUBLE_COLON):
            return ir.ModuleEntrySyntax(
                name=name_token.value,
                module_path=module_path,
                form=ir.DeclarationForm.BARE,
                **location,
            )

        self.advance()

        instance = None
        if self.match(TokenType.LESS_THAN):
            self.advance()
            instance = self.expect_identifier("an instance").value
            self.expect(TokenType.GREATER_THAN)
            self.expect(TokenType.DOUBLE_COLON)

        if not self.match(TokenType.LBRACE):
            expected = "'{'" if instance else "'{' or '<'"
            raise self.error(f"Expected {expected} after '{module_path}::'")
        self.advance()

        # Form B: `Name: module_path::{default, ...}`
        form = ir.DeclarationForm.EXPLICIT
        if self.match(TokenType.DEFAULT):
            default_token = self.advance()
            if instance is not None:
                raise self.error(
                    "'default' cannot be combined with an instance; "
                    "list the capabilities explicitly",
                    default_token,
                )
            form = ir.DeclarationForm.DEFAULT
            if self.match(TokenType.COMMA):
                self.advance()
            elif not self.match(TokenType.RBRACE):
                raise self.error("Expected ',' or '}' after 'default'")

        capabilities = self.parse_capability_list()
        self.expect(TokenType.RBRACE)

        return ir.ModuleEntrySyntax(
            name=name_token.value,
            module_path=module_path,
            instance=instance,
            form=form,
            capabilities=tuple(capabilities),
            **location,
        )

    def parse_capability_list(self: ParserProtocol) -> list["ir.CapabilitySyntax"]:
        """Parse comma separated capabilities up to (not including) '}'."""
        capabilities = []
        while not self.match(TokenType.RBRACE):
            if self.match(TokenType.DEFAULT):
                raise self.error("'default' must be the first entry of a capability list")

            capabilities.append(self.parse_capability())
            if self.match(TokenType.COMMA):
                self.advance()
            elif not self.match(TokenType.RBRACE):
                raise self.error("Expected ',' or '}' after capability")
        return capabilities

    def parse_capability(self: ParserProtocol) -> "ir.CapabilitySyntax":
        """Parse `Name[<G, ...>][(Arg, ...)]`."""
        from .. import ir

        token = self.expect_identifier("a capability")

        generics: list[str] = []
        if self.match(TokenType.LESS_THAN):
            self.advance()
            generics.append(self.expect_identifier("a generic parameter").value)
            while self.match(TokenType.COMMA):
                self.advance()
                generics.append(self.expect_identifier("a generic parameter").value)
            self.expect(TokenType.GREATER_THAN)

        args = None
        if self.match(TokenType.LPAREN):
            self.advance()
            parsed_args: list[str] = []
            while not self.match(TokenType.RPAREN):
                parsed_args.append(self.expect_identifier("an argument").value)
                if self.match(TokenType.COMMA):
                    self.advance()
                elif not self.match(TokenType.RPAREN):
                    raise self.error("Expected ',' or ')' in capability arguments")
            self.expect(TokenType.RPAREN)
            args = tuple(parsed_args)

        return ir.CapabilitySyntax(
            name=token.value,
            generics=tuple(generics),
            args=args,
            line=token.line,
            column=token.column,
        )
