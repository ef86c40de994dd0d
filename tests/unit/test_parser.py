"""Tests for the runtime declaration parser (surface syntax)."""

from pathlib import Path

import pytest

from runtime_assembler.core import ir
from runtime_assembler.core.dsl_parser_impl import parse_module_entry_text, parse_runtime_text
from runtime_assembler.core.errors import GrammarError

from tests.helpers import runtime_source

SOURCE = Path("test.rt")


def _entry(text: str) -> ir.ModuleEntrySyntax:
    return parse_module_entry_text(text, SOURCE)


class TestRuntimeHeader:
    def test_bare_header(self):
        syntax = parse_runtime_text(runtime_source("System: system"), SOURCE)

        assert syntax.name == "Runtime"
        assert syntax.block == "Block"
        assert syntax.node_block == "opaque::Block"
        assert syntax.unchecked_extrinsic == "UncheckedExtrinsic"
        assert [e.name for e in syntax.entries] == ["System"]

    def test_wrapped_header(self, fixtures_dir: Path):
        path = fixtures_dir / "node_runtime.rt"
        syntax = parse_runtime_text(path.read_text(), path)

        assert syntax.name == "Runtime"
        assert len(syntax.entries) == 10
        assert syntax.file == path

    def test_generic_node_block(self, fixtures_dir: Path):
        path = fixtures_dir / "minimal_runtime.rt"
        syntax = parse_runtime_text(path.read_text(), path)
        assert syntax.node_block == "generic::Block<Header, OpaqueExtrinsic>"

    def test_wrapper_with_braces(self):
        text = "construct_runtime! {\n" + runtime_source("System: system") + "}"
        syntax = parse_runtime_text(text, SOURCE)
        assert syntax.entries[0].name == "System"

    def test_empty_module_list(self):
        syntax = parse_runtime_text(runtime_source(), SOURCE)
        assert syntax.entries == ()

    def test_missing_where_clause_field(self):
        text = "pub enum Runtime where Block = Block, UncheckedExtrinsic = X { }"
        with pytest.raises(GrammarError, match="Expected 'NodeBlock'"):
            parse_runtime_text(text, SOURCE)

    def test_trailing_input_rejected(self):
        text = runtime_source("System: system") + "System: system"
        with pytest.raises(GrammarError, match="Unexpected input after runtime declaration"):
            parse_runtime_text(text, SOURCE)

    def test_unclosed_wrapper(self):
        text = "construct_runtime!(\n" + runtime_source("System: system")
        with pytest.raises(GrammarError, match="Expected '\\)'"):
            parse_runtime_text(text, SOURCE)


class TestModuleEntryForms:
    def test_bare_form(self):
        entry = _entry("System: system")

        assert entry.form == ir.DeclarationForm.BARE
        assert entry.module_path == "system"
        assert entry.capabilities == ()

    def test_default_form_with_extras(self):
        entry = _entry("Balances: balances::{default, Event}")

        assert entry.form == ir.DeclarationForm.DEFAULT
        assert [c.name for c in entry.capabilities] == ["Event"]

    def test_default_form_alone(self):
        entry = _entry("Indices: indices::{default}")
        assert entry.form == ir.DeclarationForm.DEFAULT
        assert entry.capabilities == ()

    def test_explicit_form_with_instance(self):
        entry = _entry("Test3_Instance1: test3::<Instance1>::{Module, Call, Event<T, I>}")

        assert entry.form == ir.DeclarationForm.EXPLICIT
        assert entry.instance == "Instance1"
        event = entry.capabilities[2]
        assert event.name == "Event"
        assert event.generics == ("T", "I")

    def test_empty_capability_list(self):
        entry = _entry("Unused: unused::{}")
        assert entry.form == ir.DeclarationForm.EXPLICIT
        assert entry.capabilities == ()

    def test_capability_arguments(self):
        entry = _entry("Aura: aura::{Module, Inherent(Timestamp)}")
        inherent = entry.capabilities[1]
        assert inherent.args == ("Timestamp",)
        assert entry.capabilities[0].args is None

    def test_entry_location(self):
        syntax = parse_runtime_text(runtime_source("System: system", "Sudo: sudo"), SOURCE)
        sudo = syntax.entries[1]
        assert (sudo.line, sudo.column) == (7, 5)


class TestModuleEntryErrors:
    def test_default_not_first(self):
        with pytest.raises(GrammarError, match="'default' must be the first entry"):
            _entry("Balances: balances::{Event, default}")

    def test_default_with_instance(self):
        with pytest.raises(GrammarError, match="cannot be combined with an instance"):
            _entry("Kitty: kitties::<Instance1>::{default}")

    def test_missing_brace_after_path(self):
        with pytest.raises(GrammarError, match="Expected '\\{' or '<' after 'balances::'"):
            _entry("Balances: balances::Event")

    def test_keyword_as_module_name(self):
        with pytest.raises(GrammarError, match="'enum' is a reserved keyword"):
            _entry("enum: balances")

    def test_missing_separator_between_capabilities(self):
        with pytest.raises(GrammarError, match="Expected ',' or '\\}' after capability"):
            _entry("Balances: balances::{Module Call}")

    def test_default_requires_separator(self):
        with pytest.raises(GrammarError, match="Expected ',' or '\\}' after 'default'"):
            _entry("Balances: balances::{default Event}")

    def test_error_reports_location(self):
        with pytest.raises(GrammarError) as exc_info:
            parse_runtime_text(runtime_source("System: system", "Sudo sudo"), SOURCE)

        context = exc_info.value.context
        assert context is not None
        assert context.file == SOURCE
        assert (context.line, context.column) == (7, 10)
        assert context.snippet == "    Sudo sudo,"
