"""
Runtime header parsing.

Handles the outer declaration:

    construct_runtime!(
        pub enum Runtime where
            Block = Block,
            NodeBlock = opaque::Block,
            UncheckedExtrinsic = UncheckedExtrinsic
        {
            ...module entries...
        }
    );

The `construct_runtime!( ... );` wrapper is optional.
"""

from typing import TYPE_CHECKING

from ..lexer import TokenType
from .base import ParserProtocol

if TYPE_CHECKING:
    from .. import ir

WRAPPER_NAME = "construct_runtime"

_CLOSING = {
    TokenType.LPAREN: TokenType.RPAREN,
    TokenType.LBRACE: TokenType.RBRACE,
}


class RuntimeHeaderParserMixin:
    """Parser mixin for the outer runtime declaration."""

    def parse_runtime(self: ParserProtocol) -> "ir.RuntimeSyntax":
        """
        Parse a complete runtime declaration.

        Returns:
            RuntimeSyntax with header types and module entries as written
        """
        from .. import ir

        closing = None
        if self.current_token().type == TokenType.IDENTIFIER and (
            self.current_token().value == WRAPPER_NAME
        ):
            self.advance()
            self.expect(TokenType.BANG)
            opening = self.current_token()
            if opening.type not in _CLOSING:
                raise self.error(f"Expected '(' or '{{' after '{WRAPPER_NAME}!'", opening)
            self.advance()
            closing = _CLOSING[opening.type]

        self.expect(TokenType.PUB)
        self.expect(TokenType.ENUM)
        name = self.expect_identifier("a runtime name").value
        self.expect(TokenType.WHERE)

        self.expect_word("Block")
        self.expect(TokenType.EQUALS)
        block = self.expect_identifier("a block type").value
        self.expect(TokenType.COMMA)

        self.expect_word("NodeBlock")
        self.expect(TokenType.EQUALS)
        node_block = self.parse_type_path()
        self.expect(TokenType.COMMA)

        self.expect_word("UncheckedExtrinsic")
        self.expect(TokenType.EQUALS)
        unchecked_extrinsic = self.expect_identifier("an unchecked extrinsic type").value
        if self.match(TokenType.COMMA):
            self.advance()

        entries = self.parse_module_entries()

        if closing is not None:
            self.expect(closing)
            if self.match(TokenType.SEMICOLON):
                self.advance()

        if not self.match(TokenType.EOF):
            raise self.error("Unexpected input after runtime declaration")

        return ir.RuntimeSyntax(
            name=name,
            block=block,
            node_block=node_block,
            unchecked_extrinsic=unchecked_extrinsic,
            entries=tuple(entries),
            file=self.file,
        )

    def parse_type_path(self: ParserProtocol) -> str:
        """
        Parse a type path such as `opaque::Block` or `generic::Block<Header, Xt>`.

        Returns:
            The path re-rendered as text with normalized spacing
        """
        parts = [self.expect_identifier("a type").value]
        while self.match(TokenType.DOUBLE_COLON):
            self.advance()
            parts.append(self.expect_identifier("a type path segment").value)

        text = "::".join(parts)
        if self.match(TokenType.LESS_THAN):
            self.advance()
            args = [self.parse_type_path()]
            while self.match(TokenType.COMMA):
                self.advance()
                args.append(self.parse_type_path())
            self.expect(TokenType.GREATER_THAN)
            text += "<" + ", ".join(args) + ">"
        return text
