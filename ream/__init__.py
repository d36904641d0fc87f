"""
ream - Hoon expression parser

A from-scratch recursive descent parser that reads Hoon source into twigs:
uniform binary trees of literals, cells and rune markers.

Architecture:
    ream/
    ├── lexer/           # Whitespace, comments, identifiers, digit runs
    └── parser/          # Twigs, rune table, rune-form engine, dispatcher

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, ErrorKind, ParseError, LexerError, SourceLocation
from .parser import (
    Parser, ParserConfig, ParseResult, parse, parse_file, wing,
    Twig, Literal, Cell, RuneNode, Rune, Odor, RuneForm, RuneTable,
    SyntaxFailure, LiteralError, to_hoon,
)

__all__ = [
    # Entry points
    "parse",
    "parse_file",
    "wing",
    "Parser",
    "ParserConfig",
    "ParseResult",
    "Lexer",

    # Twigs
    "Twig",
    "Literal",
    "Cell",
    "RuneNode",
    "Rune",
    "Odor",
    "RuneForm",
    "RuneTable",
    "to_hoon",

    # Errors
    "ErrorKind",
    "ParseError",
    "LexerError",
    "SyntaxFailure",
    "LiteralError",
    "SourceLocation",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
