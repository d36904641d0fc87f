"""
Character classes and literal tags for the Hoon surface syntax.

Hoon is scannerless: there is no token stream, the parser works directly on
bytes. This module holds the byte-level vocabulary the lexical layer and the
parser share:
- Whitespace bytes and their weights for long whitespace runs
- Fixed literal tags (comment marker, wide-form brackets, tall terminator)
- Source locations for diagnostics

Author: xwest
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union


# ============================================================================
# Whitespace
# ============================================================================

SPACE = 0x20            # ' '
NEWLINE = 0x0A          # '\n'
CARRIAGE_RETURN = 0x0D  # '\r'
TAB = 0x09              # '\t' (never valid whitespace)

# Weight of each whitespace byte in a long whitespace run.
# A run is "long" once its weight reaches LONG_SPACE_WEIGHT.
WHITESPACE_WEIGHTS: Dict[int, int] = {
    SPACE: 1,
    NEWLINE: 2,
    CARRIAGE_RETURN: 0,
}

LONG_SPACE_WEIGHT = 2


# ============================================================================
# Literal tags
# ============================================================================

COMMENT_MARKER = b"::"
WIDE_OPEN = b"("
WIDE_CLOSE = b")"
WIDE_SEPARATOR = b" "
TALL_TERMINATOR = b"=="
WING_SEPARATOR = b"."
HYPHEN = 0x2D           # '-'

# Human-readable names used in diagnostics
TAG_NAMES: Dict[bytes, str] = {
    COMMENT_MARKER: "comment marker '::'",
    WIDE_OPEN: "opening parenthesis '('",
    WIDE_CLOSE: "closing parenthesis ')'",
    WIDE_SEPARATOR: "single space separator",
    TALL_TERMINATOR: "end-of-form marker '=='",
    WING_SEPARATOR: "wing separator '.'",
    b"\n": "newline",
}


def is_alpha(byte: int) -> bool:
    """ASCII letters only."""
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def is_ident_continue(byte: int) -> bool:
    return is_alpha(byte) or is_digit(byte) or byte == HYPHEN


def to_bytes(source: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """Normalize parser input to an immutable byte string."""
    if isinstance(source, str):
        return source.encode("utf-8")
    return bytes(source)


def find_line_starts(source: bytes) -> List[int]:
    """Byte offsets at which each line of source begins."""
    starts = [0]
    starts.extend(i + 1 for i, byte in enumerate(source) if byte == NEWLINE)
    return starts


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for the spans attached to tree nodes.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"

    @classmethod
    def from_offset(cls, source: bytes, offset: int, filename: str = "<unknown>",
                    line_starts: Optional[Sequence[int]] = None) -> "SourceLocation":
        """
        Compute line and column (both 1-based) for a byte offset.

        Callers locating many offsets in one buffer pass line_starts (see
        find_line_starts) so the buffer is scanned once.
        """
        if line_starts is None:
            line_starts = find_line_starts(source)
        offset = max(0, min(offset, len(source)))
        line = bisect_right(line_starts, offset)
        return cls(filename, line, offset - line_starts[line - 1] + 1, offset)


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"
