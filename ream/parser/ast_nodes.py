"""
Abstract syntax tree ("twig") definitions for Hoon.

Every parsed construct is one of three shapes:
- Literal: an atom tagged with its odor (literal type)
- Cell: an ordered pair (head, tail) of twigs
- RuneNode: a rune identifier, always found as the head of a Cell whose tail
  holds the rune's arguments

N-ary argument lists are right-leaning chains of cells. Nodes are frozen
dataclasses; source spans are carried along but ignored by equality, so trees
parsed from different spellings of the same expression compare equal.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence

from ..lexer.tokens import SourceSpan


class Rune(Enum):
    """
    Known runes: name, two-character glyph, fixed arity.

    DTZY has no surface glyph; the atom parser produces it to mark a literal.
    """

    BRHP = ("brhp", "|-", 1)     # trap, a loop point
    DTLS = ("dtls", ".+", 1)     # increment
    DTTS = ("dtts", ".=", 2)     # equality test
    KTTS = ("ktts", "^=", 2)     # face (name) a value
    TSGR = ("tsgr", "=>", 2)     # compose
    TSLS = ("tsls", "=+", 2)     # push onto subject
    WTCL = ("wtcl", "?:", 3)     # if-then-else
    DTZY = ("dtzy", None, 1)     # literal atom

    def __init__(self, tag: str, glyph_text: Optional[str], arity: int):
        self.tag = tag
        self.glyph_text = glyph_text
        self.arity = arity

    @property
    def glyph(self) -> Optional[bytes]:
        if self.glyph_text is None:
            return None
        return self.glyph_text.encode("ascii")

    @classmethod
    def from_glyph(cls, glyph: str) -> "Rune":
        for rune in cls:
            if rune.glyph_text == glyph:
                return rune
        raise KeyError(glyph)

    def __str__(self) -> str:
        return f"%{self.tag}"


# Digits per int()/str() call; stays under CPython's integer string
# conversion limit (4300 digits by default since 3.11).
DECIMAL_CHUNK = 4000
_CHUNK_BASE = 10 ** DECIMAL_CHUNK


def decimal_to_int(text: bytes) -> int:
    """Convert a run of ASCII digits of any length to an int."""
    value = 0
    for start in range(0, len(text), DECIMAL_CHUNK):
        chunk = text[start:start + DECIMAL_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_decimal(value: int) -> str:
    """Render a non-negative int of any size as decimal digits."""
    if value < _CHUNK_BASE:
        return str(value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(str(low).zfill(DECIMAL_CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))


class Odor(Enum):
    """Literal type tags. Only unsigned decimal is supported so far."""

    UD = "ud"

    def decode(self, text: bytes) -> Any:
        """Decode the literal's source text into a value."""
        if self is Odor.UD:
            if not text or not text.isdigit():
                raise ValueError(f"not an unsigned decimal: {text!r}")
            return decimal_to_int(text)
        raise NotImplementedError(f"no decoder for odor {self.value}")

    def encode(self, value: Any) -> str:
        """Render a value back to literal text."""
        if self is Odor.UD:
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"not an unsigned integer: {value!r}")
            return int_to_decimal(value)
        raise NotImplementedError(f"no encoder for odor {self.value}")

    def __str__(self) -> str:
        return f"@{self.value}"


class TwigVisitor(ABC):
    """Visitor interface for traversing twigs."""

    @abstractmethod
    def visit_literal(self, node: "Literal") -> Any:
        pass

    @abstractmethod
    def visit_cell(self, node: "Cell") -> Any:
        pass

    @abstractmethod
    def visit_rune(self, node: "RuneNode") -> Any:
        pass


class Twig(ABC):
    """Base class for all tree nodes."""

    @abstractmethod
    def accept(self, visitor: TwigVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List["Twig"]:
        """Get all child nodes."""
        pass

    def __str__(self) -> str:
        return self.accept(NounPrinter())


@dataclass(frozen=True)
class Literal(Twig):
    """An atom with its odor."""
    odor: Odor
    value: Any
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: TwigVisitor) -> Any:
        return visitor.visit_literal(self)

    def children(self) -> List[Twig]:
        return []


@dataclass(frozen=True)
class Cell(Twig):
    """An ordered pair of twigs."""
    head: Twig
    tail: Twig
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: TwigVisitor) -> Any:
        return visitor.visit_cell(self)

    def children(self) -> List[Twig]:
        return [self.head, self.tail]

    @property
    def rune(self) -> Optional[Rune]:
        """The applied rune, if this cell is a rune application."""
        if isinstance(self.head, RuneNode):
            return self.head.rune
        return None

    @staticmethod
    def fold(items: Sequence[Twig]) -> Twig:
        """Fold a non-empty argument list right-associatively: [a, b, c] -> Cell(a, Cell(b, c))."""
        if not items:
            raise ValueError("cannot fold an empty argument list")
        result = items[-1]
        for item in reversed(items[:-1]):
            result = Cell(item, result)
        return result

    @staticmethod
    def unfold(args: Twig, arity: int) -> List[Twig]:
        """Inverse of fold for a known arity."""
        items = []
        while arity > 1:
            if not isinstance(args, Cell):
                raise ValueError(f"expected {arity} more arguments, found a {type(args).__name__}")
            items.append(args.head)
            args = args.tail
            arity -= 1
        items.append(args)
        return items


@dataclass(frozen=True)
class RuneNode(Twig):
    """Marker naming the rune applied by the enclosing cell."""
    rune: Rune
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: TwigVisitor) -> Any:
        return visitor.visit_rune(self)

    def children(self) -> List[Twig]:
        return []


def apply_rune(rune: Rune, args: Twig, span: Optional[SourceSpan] = None) -> Cell:
    """Build the Cell(RuneNode(rune), args) shape for a rune application."""
    return Cell(RuneNode(rune), args, span)


def make_literal(odor: Odor, value: Any, span: Optional[SourceSpan] = None) -> Cell:
    """Build a literal atom wrapped in the literal-making rune."""
    return apply_rune(Rune.DTZY, Literal(odor, value, span), span)


# ============================================================================
# Printers
# ============================================================================

class NounPrinter(TwigVisitor):
    """Renders a twig as a bracketed noun, e.g. [%brhp [%dtzy @ud 123]]."""

    def visit_literal(self, node: Literal) -> str:
        return f"{node.odor} {node.odor.encode(node.value)}"

    def visit_cell(self, node: Cell) -> str:
        return f"[{node.head.accept(self)} {node.tail.accept(self)}]"

    def visit_rune(self, node: RuneNode) -> str:
        return str(node.rune)


class WidePrinter(TwigVisitor):
    """
    Renders a twig back to wide-form Hoon source.

    Rune applications print as glyph(arg arg ...); literals print as their
    odor's text. Bare cells that are not rune applications have no wide
    spelling in this grammar and print as [head tail].
    """

    def visit_literal(self, node: Literal) -> str:
        return node.odor.encode(node.value)

    def visit_cell(self, node: Cell) -> str:
        rune = node.rune
        if rune is None:
            return f"[{node.head.accept(self)} {node.tail.accept(self)}]"
        if rune is Rune.DTZY:
            return node.tail.accept(self)
        args = Cell.unfold(node.tail, rune.arity)
        return f"{rune.glyph_text}({' '.join(arg.accept(self) for arg in args)})"

    def visit_rune(self, node: RuneNode) -> str:
        return f"%{node.rune.tag}"


def to_hoon(twig: Twig) -> str:
    """Render a twig as wide-form source text."""
    return twig.accept(WidePrinter())
