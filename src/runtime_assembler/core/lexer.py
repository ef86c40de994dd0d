"""
Lexer/Tokenizer for runtime declarations.

Converts raw declaration text into a stream of tokens with source location
tracking. Whitespace and newlines are insignificant; `//` line comments and
`/* */` block comments are skipped.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import make_grammar_error, source_line


class TokenType(Enum):
    """Token types in the runtime declaration grammar."""

    # Literals
    IDENTIFIER = "IDENTIFIER"

    # Keywords
    PUB = "pub"
    ENUM = "enum"
    WHERE = "where"
    DEFAULT = "default"

    # Operators
    COLON = ":"
    DOUBLE_COLON = "::"
    COMMA = ","
    SEMICOLON = ";"
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    EQUALS = "="
    BANG = "!"

    # Special
    EOF = "EOF"


KEYWORDS = {
    "pub",
    "enum",
    "where",
    "default",
}

# Single-character operators; ':' is handled separately because of '::'
PUNCTUATION = {
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    "=": TokenType.EQUALS,
    "!": TokenType.BANG,
}


@dataclass(frozen=True)
class Token:
    """A token with type, value, and source location."""

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Tokenizer for runtime declarations.

    Tracks line and column for every token so grammar errors can point at
    the offending source position.
    """

    def __init__(self, text: str, file: Path):
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character without advancing."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while self.current_char() in (" ", "\t", "\r", "\n"):
            self.advance()

    def skip_line_comment(self) -> None:
        """Skip comment (from // to end of line)."""
        while self.current_char() and self.current_char() != "\n":
            self.advance()

    def skip_block_comment(self) -> None:
        """Skip a /* ... */ comment."""
        start_line = self.line
        start_col = self.column
        self.advance()
        self.advance()
        while self.current_char() is not None:
            if self.current_char() == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()

        raise self._error("Unterminated block comment", start_line, start_col)

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        chars = []
        current = self.current_char()
        while current and (current.isalnum() or current == "_"):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def _error(self, message: str, line: int, column: int) -> Exception:
        return make_grammar_error(
            message,
            self.file,
            line,
            column,
            snippet=source_line(self.text, line),
        )

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens terminated by EOF

        Raises:
            GrammarError: If an unexpected character is encountered
        """
        while True:
            self.skip_whitespace()

            ch = self.current_char()
            if ch is None:
                break

            token_line = self.line
            token_col = self.column

            # Comments
            if ch == "/" and self.peek_char() == "/":
                self.skip_line_comment()

            elif ch == "/" and self.peek_char() == "*":
                self.skip_block_comment()

            # Identifiers and keywords
            elif ch.isalpha() or ch == "_":
                value = self.read_identifier()
                if value in KEYWORDS:
                    token_type = TokenType(value)
                else:
                    token_type = TokenType.IDENTIFIER
                self.tokens.append(Token(token_type, value, token_line, token_col))

            elif ch == ":":
                if self.peek_char() == ":":
                    self.advance()
                    self.advance()
                    self.tokens.append(Token(TokenType.DOUBLE_COLON, "::", token_line, token_col))
                else:
                    self.advance()
                    self.tokens.append(Token(TokenType.COLON, ":", token_line, token_col))

            elif ch in PUNCTUATION:
                self.advance()
                self.tokens.append(Token(PUNCTUATION[ch], ch, token_line, token_col))

            else:
                raise self._error(f"Unexpected character: {ch!r}", token_line, token_col)

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column))

        return self.tokens


def tokenize(text: str, file: Path) -> list[Token]:
    """
    Convenience function to tokenize declaration text.

    Args:
        text: Source text
        file: Source file path

    Returns:
        List of tokens
    """
    lexer = Lexer(text, file)
    return lexer.tokenize()
