"""
ream lexical layer - whitespace, comments, identifiers and digit runs

Hoon has no separate tokenizer pass. Whitespace is significant (single
spaces separate wide-form arguments, long runs separate tall-form ones), so
the parser calls these primitives directly at each position.

Every primitive takes a byte offset and returns the offset just past what it
matched; nothing is stored on the Lexer between calls, so a parse is a pure
function of the input.

xwest
"""

from typing import Optional, Tuple, Union

from .tokens import (
    TAB, WHITESPACE_WEIGHTS, LONG_SPACE_WEIGHT, COMMENT_MARKER,
    is_alpha, is_digit, is_ident_continue, to_bytes
)
from .errors import (
    create_whitespace_error, create_tab_error, create_alpha_error,
    create_digit_error, create_unterminated_comment_error,
    create_expected_tag_error, LexerError
)

Source = Union[bytes, bytearray, memoryview, str]


class Lexer:
    """
    Byte-level recognizer for Hoon's lexical primitives.

    Holds the immutable input and the filename used in diagnostics. Failures
    raise LexerError with the offset at which the primitive gave up.
    """

    def __init__(self, source: Source, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source bytes (str input is encoded as UTF-8)
            filename: Name of source file for error reporting
        """
        self.source = to_bytes(source)
        self.filename = filename

    def long_space(self, pos: int) -> int:
        """Match at least two spaces or one newline."""
        end = pos
        weight = 0
        length = len(self.source)

        while end < length:
            byte = self.source[end]
            if byte == TAB:
                # Physical tabs are banned.
                raise create_tab_error(self.source, end, self.filename)
            if byte not in WHITESPACE_WEIGHTS:
                break
            weight += WHITESPACE_WEIGHTS[byte]
            end += 1

        if weight < LONG_SPACE_WEIGHT:
            raise create_whitespace_error(self.source, pos, self.filename)
        return end

    def comment(self, pos: int) -> Tuple[bytes, int]:
        """
        Match a '::' line comment.

        Returns the comment text (without marker or newline) and the offset
        just past the newline.
        """
        if not self.match(COMMENT_MARKER, pos):
            raise create_expected_tag_error(COMMENT_MARKER, self.source, pos, self.filename)

        body_start = pos + len(COMMENT_MARKER)
        newline = self.source.find(b"\n", body_start)
        if newline < 0:
            raise create_unterminated_comment_error(self.source, pos, self.filename).commit()
        return self.source[body_start:newline], newline + 1

    def gap(self, pos: int) -> int:
        """Match one or more long whitespace runs and comments."""
        end = self._gap_piece(pos)
        while True:
            try:
                end = self._gap_piece(end)
            except LexerError as e:
                if e.committed:
                    raise
                return end

    def _gap_piece(self, pos: int) -> int:
        if self.match(COMMENT_MARKER, pos):
            return self.comment(pos)[1]
        return self.long_space(pos)

    def ident(self, pos: int) -> Tuple[str, int]:
        """Parse an identifier: a letter, then letters, digits or hyphens."""
        first = self.peek(pos)
        if first is None or not is_alpha(first):
            raise create_alpha_error(self.source, pos, self.filename)

        end = pos + 1
        length = len(self.source)
        while end < length and is_ident_continue(self.source[end]):
            end += 1
        return self.source[pos:end].decode("ascii"), end

    def digits(self, pos: int) -> Tuple[bytes, int]:
        """Parse a maximal non-empty run of decimal digits."""
        end = pos
        length = len(self.source)
        while end < length and is_digit(self.source[end]):
            end += 1

        if end == pos:
            raise create_digit_error(self.source, pos, self.filename)
        return self.source[pos:end], end

    def match(self, tag: bytes, pos: int) -> bool:
        """Check for an exact literal at pos without consuming it."""
        return self.source.startswith(tag, pos)

    def peek(self, pos: int) -> Optional[int]:
        """Byte at pos, or None at end of input."""
        if pos < len(self.source):
            return self.source[pos]
        return None


# Convenience functions working on a bare buffer. Each returns the matched
# part and the remaining input, mirroring the parser's result shape.

def long_space(source: Source) -> Tuple[bytes, bytes]:
    lexer = Lexer(source, "<string>")
    end = lexer.long_space(0)
    return lexer.source[:end], lexer.source[end:]


def comment(source: Source) -> Tuple[bytes, bytes]:
    lexer = Lexer(source, "<string>")
    text, end = lexer.comment(0)
    return text, lexer.source[end:]


def gap(source: Source) -> Tuple[bytes, bytes]:
    lexer = Lexer(source, "<string>")
    end = lexer.gap(0)
    return lexer.source[:end], lexer.source[end:]


def ident(source: Source) -> Tuple[str, bytes]:
    lexer = Lexer(source, "<string>")
    name, end = lexer.ident(0)
    return name, lexer.source[end:]


def digits(source: Source) -> Tuple[bytes, bytes]:
    lexer = Lexer(source, "<string>")
    run, end = lexer.digits(0)
    return run, lexer.source[end:]
