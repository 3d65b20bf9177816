# Nekonomicon - Core Front-End Components
"""
Core modules for the Nekonomicon front end:
- tokens: Token kinds and reserved word sets
- lexer: Grammar-free tokenizer for spell text
- grammar: Lark grammar definition for spells
- nodes: AST node models
- transformer: Parse tree to AST node transformation
- parser: parse()/parse_script() entry points
- errors: ParseError and error hints
- config: neko CLI settings
- stdlib: text, arithmetic and list helpers
"""

__version__ = "0.1.0"

from .errors import ParseError
from .tokens import Token, TokenKind
from .lexer import tokenize
from .grammar import nekonomicon_grammar
from .nodes import AbstractTreeNode, Command
from .transformer import SpellTransformer
from .parser import parse, parse_script

__all__ = [
    'ParseError',
    'Token',
    'TokenKind',
    'tokenize',
    'nekonomicon_grammar',
    'AbstractTreeNode',
    'Command',
    'SpellTransformer',
    'parse',
    'parse_script',
]
