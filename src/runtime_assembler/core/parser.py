from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_module_entry_text, parse_runtime_text
from .errors import make_grammar_error
from .normalizer import Normalizer

DEFAULT_SOURCE_NAME = Path("<runtime>")


def parse_runtime_source(text: str, file: Path | None = None) -> ir.RuntimeDeclaration:
    """
    Parse and normalize a runtime declaration.

    Args:
        text: Declaration source
        file: Source file path used in error locations

    Returns:
        RuntimeDeclaration with a canonical, immutable module table

    Raises:
        GrammarError: If the text does not match any accepted form
    """
    file = file or DEFAULT_SOURCE_NAME
    syntax = parse_runtime_text(text, file)
    return Normalizer(file, text).normalize(syntax)


def parse_runtime_file(path: Path) -> ir.RuntimeDeclaration:
    """Read, parse and normalize a runtime declaration file."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise make_grammar_error(f"File is not valid UTF-8: {e.reason}", path, 1, 1) from e
    return parse_runtime_source(text, path)


def parse_module_decl(text: str, file: Path | None = None) -> ir.ModuleDecl:
    """
    Parse and normalize a single module entry.

    Useful for checking that a canonical declaration re-normalizes to itself:

        decl = parse_module_decl("Balances: balances")
        assert parse_module_decl(decl.render()) == decl
    """
    file = file or DEFAULT_SOURCE_NAME
    entry = parse_module_entry_text(text, file)
    return Normalizer(file, text).normalize_entry(entry)
