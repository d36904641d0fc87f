"""
ream Parser Implementation

Recursive descent parser turning Hoon source into twigs. Handles the atom
layer (decimal literals), the generic rune-form engine (wide and tall
spellings of every registered rune), the top-level expression dispatcher,
and the standalone wing (dotted path) grammar.

Author: xwest
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from ..lexer.lexer import Lexer, Source
from ..lexer.tokens import (
    SourceLocation, SourceSpan, WIDE_OPEN, WIDE_CLOSE, WIDE_SEPARATOR,
    TALL_TERMINATOR, WING_SEPARATOR, find_line_starts, is_alpha, is_digit
)
from ..lexer.errors import ParseError
from .ast_nodes import Twig, Cell, Odor, apply_rune, make_literal
from .runes import RuneForm, RuneTable, EXPRESSION
from .errors import (
    create_missing_literal_error, create_missing_glyph_error,
    create_no_alternative_error, create_nesting_error, create_recursion_limit_error,
    create_invalid_literal_error, suggest_glyphs
)

logger = logging.getLogger(__name__)

# (position, depth) -> (node, new position)
SubParser = Callable[[int, int], Tuple[Twig, int]]


@dataclass
class ParserConfig:
    """Configuration parameters for the parser"""

    # Name reported in diagnostics
    filename: str = "<unknown>"

    # Rune nesting deeper than this fails instead of exhausting the stack
    max_depth: int = 200


@dataclass(frozen=True)
class ParseResult:
    """A parsed twig and the input left over after it."""
    tree: Twig
    remaining: bytes
    offset: int  # Byte offset where remaining starts


class Parser:
    """
    Hoon expression parser.

    Positions are passed in and returned rather than stored, so a Parser can
    be reused and shared; it only holds the input, configuration and the
    rune table.
    """

    def __init__(self, source: Source, filename: Optional[str] = None,
                 config: Optional[ParserConfig] = None, runes: Optional[RuneTable] = None):
        """
        Initialize parser with source input.

        Args:
            source: Source bytes (str input is encoded as UTF-8)
            filename: Name for diagnostics; overrides config.filename
            config: Parser configuration
            runes: Rune table; defaults to the built-in runes. The parser
                keeps its own copy, so register_rune leaves it unchanged.
        """
        self.config = config or ParserConfig()
        self.filename = filename if filename is not None else self.config.filename
        self.lexer = Lexer(source, self.filename)
        self.source = self.lexer.source
        self.runes = runes.copy() if runes is not None else RuneTable()

        self._line_starts = find_line_starts(self.source)

        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Initialize argument grammars and the dispatcher's ordered alternatives."""

        # Argument grammar name -> sub-parser
        self.argument_parsers: Dict[str, SubParser] = {
            EXPRESSION: self.parse_expression,
        }

        # Ordered choice: (name, lookahead, parser). The first alternative whose
        # lookahead matches commits.
        self.alternatives: List[Tuple[str, Callable[[int], bool], SubParser]] = []
        for form in self.runes:
            self.alternatives.append((
                form.rune.glyph_text,
                partial(self.lexer.match, form.glyph),
                partial(self.parse_rune, form),
            ))
        self.alternatives.append(("ud", self._starts_digit, self.parse_ud))

    def register_rune(self, form: RuneForm):
        """Register an extra rune form; it is tried after the existing ones."""
        self.runes.register(form)
        self._init_parsing_tables()

    def parse(self) -> ParseResult:
        """
        Parse one expression from the start of the input.

        Returns:
            ParseResult with the twig and the unconsumed remainder

        Raises:
            ParseError: If no expression can be parsed
        """
        logger.debug("Parsing %d bytes from %s", len(self.source), self.filename)
        try:
            tree, end = self.parse_expression(0)
        except RecursionError as e:
            # max_depth is larger than the interpreter stack allows
            raise create_recursion_limit_error(
                self.config.max_depth, self.source, 0, self.filename
            ) from e
        logger.debug("Parsed %s, %d bytes remaining", self.filename, len(self.source) - end)
        return ParseResult(tree, self.source[end:], end)

    def parse_expression(self, pos: int, depth: int = 0) -> Tuple[Twig, int]:
        """Try each rune form in table order, then a decimal literal."""
        if depth > self.config.max_depth:
            raise create_nesting_error(self.config.max_depth, self.source, pos, self.filename)

        for _name, lookahead, parser in self.alternatives:
            if lookahead(pos):
                try:
                    return parser(pos, depth)
                except ParseError as e:
                    raise e.commit()

        found = self.source[pos:pos + 2]
        raise create_no_alternative_error(
            suggest_glyphs(found, self.runes.glyphs()), self.source, pos, self.filename
        )

    # ------------------------------------------------------------------------
    # Rune forms
    # ------------------------------------------------------------------------

    def parse_rune(self, form: RuneForm, pos: int, depth: int = 0) -> Tuple[Twig, int]:
        """
        Parse a rune application in wide or tall form.

        The byte after the glyph chooses the form: '(' is wide, anything else
        must be a gap starting the tall form. Failures after the glyph are
        committed.
        """
        if not self.lexer.match(form.glyph, pos):
            raise create_missing_glyph_error(form.glyph, self.source, pos, self.filename)

        start = pos
        pos += len(form.glyph)
        parsers = [self.argument_parsers[grammar] for grammar in form.arguments]

        try:
            if self.lexer.match(WIDE_OPEN, pos):
                args, pos = self._parse_wide_args(parsers, pos + len(WIDE_OPEN), depth + 1)
            else:
                pos = self.lexer.gap(pos)
                args, pos = self._parse_tall_args(parsers, pos, depth + 1)
        except ParseError as e:
            logger.debug("Rune %s at offset %d failed: %s", form.rune.glyph_text, start, e.args[0])
            raise e.commit()

        return apply_rune(form.rune, Cell.fold(args), self._span(start, pos)), pos

    def _parse_wide_args(self, parsers: List[SubParser], pos: int,
                         depth: int) -> Tuple[List[Twig], int]:
        """Arguments separated by single spaces, closed by ')'."""
        args = []
        last = len(parsers) - 1
        for index, parser in enumerate(parsers):
            arg, pos = parser(pos, depth)
            args.append(arg)
            pos = self._expect(WIDE_SEPARATOR if index < last else WIDE_CLOSE, pos)
        return args, pos

    def _parse_tall_args(self, parsers: List[SubParser], pos: int,
                         depth: int) -> Tuple[List[Twig], int]:
        """Arguments each followed by a gap, closed by '=='."""
        args = []
        for parser in parsers:
            arg, pos = parser(pos, depth)
            args.append(arg)
            pos = self.lexer.gap(pos)
        return args, self._expect(TALL_TERMINATOR, pos)

    def _expect(self, tag: bytes, pos: int) -> int:
        if not self.lexer.match(tag, pos):
            raise create_missing_literal_error(tag, self.source, pos, self.filename)
        return pos + len(tag)

    # ------------------------------------------------------------------------
    # Atoms
    # ------------------------------------------------------------------------

    def parse_ud(self, pos: int, depth: int = 0) -> Tuple[Twig, int]:
        """Parse an unsigned decimal literal."""
        # TODO: Handle separator dots (1.000.000) once the digit grammar is settled
        text, end = self.lexer.digits(pos)
        try:
            value = Odor.UD.decode(text)
        except ValueError as e:
            raise create_invalid_literal_error(
                Odor.UD.value, text, str(e), self.source, pos, self.filename
            ) from e
        return make_literal(Odor.UD, value, self._span(pos, end)), end

    def _starts_digit(self, pos: int) -> bool:
        byte = self.lexer.peek(pos)
        return byte is not None and is_digit(byte)

    # ------------------------------------------------------------------------
    # Wings
    # ------------------------------------------------------------------------

    def parse_wing(self, pos: int = 0) -> Tuple[List[str], int]:
        """
        Parse a dotted identifier path such as a.b.c.

        A dot not followed by an identifier is left unconsumed.
        """
        name, pos = self.lexer.ident(pos)
        names = [name]
        while self.lexer.match(WING_SEPARATOR, pos):
            following = self.lexer.peek(pos + len(WING_SEPARATOR))
            if following is None or not is_alpha(following):
                break
            name, pos = self.lexer.ident(pos + len(WING_SEPARATOR))
            names.append(name)
        return names, pos

    # ------------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------------

    def location(self, offset: int) -> SourceLocation:
        """Source location of a byte offset."""
        return SourceLocation.from_offset(self.source, offset, self.filename, self._line_starts)

    def _span(self, start: int, end: int) -> SourceSpan:
        return SourceSpan(self.location(start), self.location(end))


def parse(source: Source, filename: Optional[str] = None,
          config: Optional[ParserConfig] = None) -> ParseResult:
    """
    Convenience function to parse one expression from a buffer.

    Args:
        source: Source bytes or string
        filename: Filename for error reporting; defaults to config.filename,
            or "<string>" without a config
        config: Parser configuration

    Returns:
        ParseResult with the twig and the unconsumed remainder

    Raises:
        ParseError: If parsing fails
    """
    return Parser(source, filename, config or ParserConfig(filename="<string>")).parse()


def parse_file(filepath: str, config: Optional[ParserConfig] = None) -> ParseResult:
    """
    Convenience function to parse a source file.

    Raises:
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'rb') as f:
        source = f.read()

    return Parser(source, filepath, config).parse()


def wing(source: Source, filename: str = "<string>") -> Tuple[List[str], bytes]:
    """Parse a wing from the start of a buffer; returns the path and the remainder."""
    parser = Parser(source, filename)
    names, end = parser.parse_wing(0)
    return names, parser.source[end:]
