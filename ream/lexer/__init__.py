"""
ream Lexer Package

Implements the lexical primitives of Hoon's scannerless grammar.

Key Features:
- Weighted long-whitespace runs (two spaces or one newline)
- Physical tabs rejected outright
- '::' line comments and gaps mixing both
- ASCII identifiers and decimal digit runs
- Byte-offset error positions with line/column diagnostics

Author: xwest
"""

from .tokens import SourceLocation, SourceSpan
from .lexer import Lexer, long_space, comment, gap, ident, digits
from .errors import ParseError, LexerError, ErrorKind, Diagnostic

__all__ = [
    "Lexer",
    "long_space",
    "comment",
    "gap",
    "ident",
    "digits",
    "SourceLocation",
    "SourceSpan",
    "ParseError",
    "LexerError",
    "ErrorKind",
    "Diagnostic",
]
