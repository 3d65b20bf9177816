"""
Unit tests for core/transformer.py - SpellTransformer class.
"""

import pytest
from lark import Lark

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from core.grammar import nekonomicon_grammar
from core.nodes import (
    ContainerData,
    ElapsedSignature,
    LiteralNode,
    ModuleNode,
    OnSignature,
    RecordData,
    SilentSignature,
    TextData,
    TimeoutSignature,
    TraceSignature,
    VariableNode,
)
from core.transformer import SpellTransformer, parse_timeout_value


class TestSpellTransformerModules:
    """Tests for module and data transformation."""

    @pytest.fixture
    def parser(self):
        """Create a Lark parser for testing."""
        return Lark(nekonomicon_grammar, parser='earley', start=['spell', 'script'])

    @pytest.fixture
    def transformer(self):
        return SpellTransformer()

    def transform(self, parser, transformer, source):
        return transformer.transform(parser.parse(source, start='spell'))

    def test_text_argument(self, parser, transformer):
        """Quoted text becomes TextData without the quotes."""
        nodes = self.transform(parser, transformer, "text 'abc'.")
        assert nodes == [ModuleNode(name="text", args=[TextData(text="abc")])]

    def test_escaped_text(self, parser, transformer):
        """\\' and \\\\ are decoded inside text."""
        nodes = self.transform(parser, transformer, "say 'I\\'m a \\\\ cat'.")
        assert nodes[0].args == [TextData(text="I'm a \\ cat")]

    def test_record_argument(self, parser, transformer):
        nodes = self.transform(parser, transformer, "say @my_variable.")
        assert nodes[0].args == [RecordData(identifier="my_variable")]

    def test_container_argument(self, parser, transformer):
        nodes = self.transform(parser, transformer, "show ::inventory ::inventory:apples.")
        assert nodes[0].args == [
            ContainerData(identifier="inventory"),
            ContainerData(identifier="inventory:apples"),
        ]

    def test_hinted_variable_argument(self, parser, transformer):
        nodes = self.transform(parser, transformer, "ask @age{number}.")
        assert nodes[0].args == [VariableNode(name="age", hint="number")]

    def test_literal_fallback(self, parser, transformer):
        """Numbers and bare words fall back to LiteralNode."""
        nodes = self.transform(parser, transformer, "add 1, 2.5 twice.")
        assert nodes[0].args == [
            LiteralNode(value="1"),
            LiteralNode(value="2.5"),
            LiteralNode(value="twice"),
        ]

    def test_parenthesized_arguments(self, parser, transformer):
        nodes = self.transform(parser, transformer, "join('a', @b).")
        assert nodes == [ModuleNode(name="join", args=[TextData(text="a"), RecordData(identifier="b")])]

    def test_no_arguments(self, parser, transformer):
        nodes = self.transform(parser, transformer, "pause.")
        assert nodes == [ModuleNode(name="pause", args=[])]


class TestSpellTransformerSignatures:
    """Tests for signature transformation."""

    @pytest.fixture
    def parser(self):
        return Lark(nekonomicon_grammar, parser='earley', start=['spell', 'script'])

    @pytest.fixture
    def transformer(self):
        return SpellTransformer()

    def test_signatures_follow_module_in_order(self, parser, transformer):
        tree = parser.parse("say 'hi' trace elapsed silent timeout 5 sec on mac.", start='spell')
        nodes = transformer.transform(tree)
        assert nodes == [
            ModuleNode(name="say", args=[TextData(text="hi")]),
            TraceSignature(),
            ElapsedSignature(),
            SilentSignature(),
            TimeoutSignature(value=5.0, unit="sec"),
            OnSignature(platform="mac"),
        ]

    def test_on_expands_per_platform(self, parser, transformer):
        tree = parser.parse("on mac linux.", start='spell')
        assert transformer.transform(tree) == [
            OnSignature(platform="mac"),
            OnSignature(platform="linux"),
        ]

    def test_duplicates_are_kept(self, parser, transformer):
        tree = parser.parse("trace trace.", start='spell')
        assert transformer.transform(tree) == [TraceSignature(), TraceSignature()]

    def test_bad_timeout_defaults_to_zero(self, parser, transformer):
        tree = parser.parse("say 'hi' timeout x sec.", start='spell')
        assert transformer.transform(tree)[-1] == TimeoutSignature(value=0.0, unit="sec")

    def test_script_yields_one_list_per_command(self, parser, transformer):
        tree = parser.parse("say 'a'.\ntrace.\n", start='script')
        assert transformer.transform(tree) == [
            [ModuleNode(name="say", args=[TextData(text="a")])],
            [TraceSignature()],
        ]


class TestTimeoutValue:
    """Tests for the timeout amount fallback."""

    @pytest.mark.parametrize("raw,expected", [
        ("5", 5.0),
        ("1.5", 1.5),
        ("-2", 0.0),
        ("x", 0.0),
        ("nan", 0.0),
        ("5abc", 0.0),
    ])
    def test_parse_timeout_value(self, raw, expected):
        assert parse_timeout_value(raw) == expected
