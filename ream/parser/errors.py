"""
Error handling for the ream parser.

Structural errors (missing parenthesis, separator, glyph or end marker, no
matching expression form, nesting too deep) and literal-decoding errors. Both
derive from ParseError, so callers can catch every parse failure at once.

Author: xwest
"""

from typing import List, Sequence

from ..lexer.errors import ParseError, ErrorKind, describe_tag
from ..lexer.tokens import WIDE_CLOSE, WIDE_SEPARATOR, TALL_TERMINATOR


class SyntaxFailure(ParseError):
    """A required piece of surface syntax was not found."""
    pass


class LiteralError(ParseError):
    """A literal's text could not be decoded under its odor."""
    pass


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected literal not found",
    "P002": "Rune glyph expected",
    "P003": "No expression form matches",
    "P004": "Nesting too deep",
    "P005": "Invalid literal",
}

_LITERAL_SUGGESTIONS = {
    WIDE_CLOSE: ["Add a closing parenthesis ')'", "Check the rune's argument count"],
    WIDE_SEPARATOR: ["Separate wide-form arguments with exactly one space"],
    TALL_TERMINATOR: ["End the tall form with '==' on its own line"],
}


# Helper functions for creating common parser errors

def create_missing_literal_error(tag: bytes, source: bytes, offset: int,
                                 filename: str) -> SyntaxFailure:
    """Create an error for a missing parenthesis, separator or end marker."""
    name = describe_tag(tag)
    return SyntaxFailure(
        message=f"Expected {name}",
        kind=ErrorKind.LITERAL_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        expected=tag,
        code="P001",
        help_text=f"The parser expected to see {name} at this position.",
        suggestions=_LITERAL_SUGGESTIONS.get(tag),
    )


def create_missing_glyph_error(glyph: bytes, source: bytes, offset: int,
                               filename: str) -> SyntaxFailure:
    """Create an error for a rune glyph that is not present."""
    text = glyph.decode("ascii")
    return SyntaxFailure(
        message=f"Expected rune '{text}'",
        kind=ErrorKind.LITERAL_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        expected=glyph,
        code="P002",
    )


def create_no_alternative_error(candidates: Sequence[str], source: bytes, offset: int,
                                filename: str) -> SyntaxFailure:
    """Create an error when no rune form and no literal starts at offset."""
    return SyntaxFailure(
        message="Expected an expression",
        kind=ErrorKind.EXPRESSION_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        code="P003",
        help_text="An expression starts with a rune glyph or a decimal literal.",
        suggestions=[f"Did you mean '{candidate}'?" for candidate in candidates[:3]],
    )


def create_nesting_error(limit: int, source: bytes, offset: int,
                         filename: str) -> SyntaxFailure:
    """Create an error for expressions nested beyond the configured depth."""
    return SyntaxFailure(
        message=f"Expression nested deeper than {limit} levels",
        kind=ErrorKind.NESTING_TOO_DEEP,
        source=source,
        offset=offset,
        filename=filename,
        code="P004",
        help_text="Raise ParserConfig.max_depth to accept deeper nesting.",
        committed=True,
    )


def create_recursion_limit_error(limit: int, source: bytes, offset: int,
                                 filename: str) -> SyntaxFailure:
    """Create an error for nesting the interpreter's stack cannot hold."""
    return SyntaxFailure(
        message=f"Expression nesting exceeds the interpreter's recursion limit "
                f"before reaching max_depth={limit}",
        kind=ErrorKind.NESTING_TOO_DEEP,
        source=source,
        offset=offset,
        filename=filename,
        code="P004",
        help_text="Lower ParserConfig.max_depth or raise sys.setrecursionlimit().",
        committed=True,
    )


# Longest literal text quoted verbatim in a diagnostic
MAX_QUOTED_LITERAL = 40


def abbreviate(text: str, limit: int = MAX_QUOTED_LITERAL) -> str:
    """Shorten text for a diagnostic message, noting its full length."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} characters)"


def create_invalid_literal_error(odor_name: str, text: bytes, reason: str, source: bytes,
                                 offset: int, filename: str) -> LiteralError:
    """Create an error for literal text its odor cannot decode."""
    quoted = abbreviate(text.decode('ascii', 'replace'))
    return LiteralError(
        message=f"Invalid @{odor_name} literal: {quoted!r}",
        kind=ErrorKind.INVALID_LITERAL,
        source=source,
        offset=offset,
        filename=filename,
        code="P005",
        help_text=abbreviate(reason, 2 * MAX_QUOTED_LITERAL),
        committed=True,
    )


def suggest_glyphs(found: bytes, glyphs: List[str]) -> List[str]:
    """Suggest known glyphs sharing a character with what was found."""
    if not found:
        return []
    first = chr(found[0])
    return [glyph for glyph in glyphs if first in glyph]
