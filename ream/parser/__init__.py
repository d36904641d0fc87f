"""
ream Parser Package

Implements a recursive descent parser for Hoon expressions.
Produces uniform binary trees (twigs) with source span information.

Key Features:
- Generic rune-form engine: one algorithm for every rune's wide form
  glyph(a b c) and tall form (gap-separated arguments closed by '==')
- Rune table as plain data; new runes need no new parsing code
- Ordered choice with committed failures, no silent backtracking
- Standalone wing (a.b.c) parser

Author: xwest
"""

from .ast_nodes import *
from .runes import RuneForm, RuneTable, DEFAULT_RUNE_FORMS, EXPRESSION
from .parser import Parser, ParserConfig, ParseResult, parse, parse_file, wing
from .errors import SyntaxFailure, LiteralError
from ..lexer.errors import ParseError

__all__ = [
    # Core parser
    "Parser", "ParserConfig", "ParseResult",
    "parse", "parse_file", "wing",

    # Rune table
    "RuneForm", "RuneTable", "DEFAULT_RUNE_FORMS", "EXPRESSION",

    # Twigs
    "Twig", "Literal", "Cell", "RuneNode", "Rune", "Odor",
    "TwigVisitor", "NounPrinter", "WidePrinter",
    "apply_rune", "make_literal", "to_hoon",

    # Error handling
    "ParseError", "SyntaxFailure", "LiteralError",
]
