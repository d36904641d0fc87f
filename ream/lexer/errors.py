"""
Error handling for the ream lexical layer.

Defines the root of the parser's error hierarchy together with the lexical
errors (bad whitespace, tabs, identifiers, digit runs, comments). Every error
carries the exact byte offset and remaining input at the point of failure,
plus a diagnostic with a rendered source location.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, TAG_NAMES


class ErrorKind(Enum):
    """Kinds of parse failure."""
    WHITESPACE_EXPECTED = "whitespace expected"
    ALPHA_EXPECTED = "alphabetic character expected"
    DIGIT_EXPECTED = "digit expected"
    LITERAL_EXPECTED = "literal expected"
    EXPRESSION_EXPECTED = "expression expected"
    INVALID_LITERAL = "invalid literal"
    NESTING_TOO_DEEP = "nesting too deep"


@dataclass
class Diagnostic:
    """Base class for parser diagnostics."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ParseError(Exception):
    """
    Exception raised when a parse attempt fails.

    Root of the error hierarchy. Carries the error kind, the byte offset of
    the failure, the remaining input at that offset, and a diagnostic for
    rendering.

    A *committed* error was raised after an alternative consumed its
    distinguishing prefix; ordered choice must not retry later alternatives
    when it sees one.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        source: bytes,
        offset: int,
        filename: str = "<unknown>",
        expected: Optional[bytes] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        committed: bool = False,
    ):
        super().__init__(message)
        self.kind = kind
        self.offset = offset
        self.remaining = source[offset:]
        self.expected = expected
        self.committed = committed
        self.diagnostic = Diagnostic(
            message=message,
            location=SourceLocation.from_offset(source, offset, filename),
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def commit(self) -> "ParseError":
        """Mark this error as fatal to any enclosing alternation."""
        self.committed = True
        return self

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(ParseError):
    """Lexical failure: whitespace, tabs, identifiers, digits, comments."""
    pass


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Whitespace expected",
    "L002": "Tab character in whitespace",
    "L003": "Alphabetic character expected",
    "L004": "Digit expected",
    "L005": "Unterminated comment",
    "L006": "Lexical tag expected",
}


def describe_tag(tag: bytes) -> str:
    return TAG_NAMES.get(tag, repr(tag.decode("ascii", "replace")))


# Helper functions for creating common errors

def create_whitespace_error(source: bytes, offset: int, filename: str) -> LexerError:
    """Create an error for a missing or too-short whitespace run."""
    return LexerError(
        message="Expected whitespace",
        kind=ErrorKind.WHITESPACE_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        code="L001",
        help_text="Separators between elements must be at least two spaces or a newline.",
        suggestions=["Use two spaces instead of one", "Start a new line"],
    )


def create_tab_error(source: bytes, offset: int, filename: str) -> LexerError:
    """Create an error for a physical tab inside a whitespace run."""
    return LexerError(
        message="Tab characters are not allowed as whitespace",
        kind=ErrorKind.WHITESPACE_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        code="L002",
        help_text="Physical tabs are banned; indent with spaces.",
        suggestions=["Replace the tab with spaces"],
        committed=True,
    )


def create_alpha_error(source: bytes, offset: int, filename: str) -> LexerError:
    """Create an error for an identifier that does not start with a letter."""
    return LexerError(
        message="Expected an identifier starting with a letter",
        kind=ErrorKind.ALPHA_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        code="L003",
        help_text="Identifiers start with an ASCII letter, followed by letters, digits or '-'.",
    )


def create_digit_error(source: bytes, offset: int, filename: str) -> LexerError:
    """Create an error for a missing digit run."""
    return LexerError(
        message="Expected a decimal digit",
        kind=ErrorKind.DIGIT_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        code="L004",
    )


def create_unterminated_comment_error(source: bytes, offset: int, filename: str) -> LexerError:
    """Create an error for a comment that runs off the end of the input."""
    return LexerError(
        message="Unterminated comment",
        kind=ErrorKind.LITERAL_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        expected=b"\n",
        code="L005",
        help_text="A comment runs through the next newline, but none was found.",
        suggestions=["End the comment with a newline"],
    )



def create_expected_tag_error(tag: bytes, source: bytes, offset: int, filename: str) -> LexerError:
    """Create an error for a missing lexical tag, such as the comment marker."""
    return LexerError(
        message=f"Expected {describe_tag(tag)}",
        kind=ErrorKind.LITERAL_EXPECTED,
        source=source,
        offset=offset,
        filename=filename,
        expected=tag,
        code="L006",
    )
