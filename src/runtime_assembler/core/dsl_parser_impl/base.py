"""
Base parser class for runtime declarations.

Provides common token manipulation and utility methods used by the parser mixins.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..errors import GrammarError, make_grammar_error, source_line
from ..lexer import Token, TokenType

if TYPE_CHECKING:
    from .. import ir


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol defining the interface available to parser mixins.

    This allows mypy to understand that mixins will have access to
    BaseParser methods when combined in the final Parser class.
    """

    tokens: list[Token]
    file: Path
    pos: int

    def current_token(self) -> Token: ...
    def peek_token(self, offset: int = 1) -> Token: ...
    def advance(self) -> Token: ...
    def expect(self, token_type: TokenType) -> Token: ...
    def expect_identifier(self, what: str = "identifier") -> Token: ...
    def expect_word(self, word: str) -> Token: ...
    def match(self, *token_types: TokenType) -> bool: ...
    def error(self, message: str, token: Token | None = None) -> GrammarError: ...

    # Methods from other mixins that may be called cross-mixin
    def parse_type_path(self) -> str: ...
    def parse_module_entries(self) -> list["ir.ModuleEntrySyntax"]: ...
    def parse_module_entry(self) -> "ir.ModuleEntrySyntax": ...
    def parse_capability_list(self) -> list["ir.CapabilitySyntax"]: ...
    def parse_capability(self) -> "ir.CapabilitySyntax": ...


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    This class provides the foundation for recursive descent parsing,
    including token navigation, matching, and error generation.
    """

    def __init__(self, tokens: list[Token], file: Path, text: str = ""):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer
            file: Source file path (for error reporting)
            text: Source text (for error snippets)
        """
        self.tokens = tokens
        self.file = file
        self.text = text
        self.pos = 0

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def error(self, message: str, token: Token | None = None) -> GrammarError:
        """Build a GrammarError located at the given (or current) token."""
        token = token or self.current_token()
        return make_grammar_error(
            message,
            self.file,
            token.line,
            token.column,
            snippet=source_line(self.text, token.line) if self.text else None,
        )

    def expect(self, token_type: TokenType) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            GrammarError: If token doesn't match
        """
        token = self.current_token()
        if token.type != token_type:
            raise self.error(f"Expected '{token_type.value}', got {_describe(token)}", token)
        return self.advance()

    def expect_identifier(self, what: str = "identifier") -> Token:
        """
        Expect an identifier and consume it.

        `default` is a keyword only inside capability lists; everywhere an
        identifier is expected it is rejected with a targeted message.
        """
        token = self.current_token()
        if token.type == TokenType.IDENTIFIER:
            return self.advance()

        if token.type in (TokenType.PUB, TokenType.ENUM, TokenType.WHERE, TokenType.DEFAULT):
            raise self.error(
                f"'{token.value}' is a reserved keyword and cannot be used as {what}",
                token,
            )
        raise self.error(f"Expected {what}, got {_describe(token)}", token)

    def expect_word(self, word: str) -> Token:
        """Expect an identifier with an exact spelling (e.g. `Block`)."""
        token = self.current_token()
        if token.type != TokenType.IDENTIFIER or token.value != word:
            raise self.error(f"Expected '{word}', got {_describe(token)}", token)
        return self.advance()

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types


def _describe(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type == TokenType.IDENTIFIER:
        return f"identifier '{token.value}'"
    return f"'{token.value}'"
