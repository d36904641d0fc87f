"""
Tests for twig construction, equality, odors, runes and printers.

Author: xwest
"""

import unittest
import dataclasses
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from ream.lexer.tokens import SourceLocation, SourceSpan
from ream.parser.ast_nodes import (
    Cell, Literal, RuneNode, Rune, Odor, TwigVisitor,
    apply_rune, make_literal, to_hoon
)


def ud(value):
    return make_literal(Odor.UD, value)


class LiteralCounter(TwigVisitor):
    """Counts literal atoms in a twig."""

    def visit_literal(self, node):
        return 1

    def visit_cell(self, node):
        return node.head.accept(self) + node.tail.accept(self)

    def visit_rune(self, node):
        return 0


class TestCells(unittest.TestCase):
    """Test cell folding and structural equality."""

    def test_fold_single(self):
        item = ud(1)
        self.assertIs(Cell.fold([item]), item)

    def test_fold_right(self):
        a, b, c = ud(1), ud(2), ud(3)
        self.assertEqual(Cell.fold([a, b, c]), Cell(a, Cell(b, c)))

    def test_fold_empty(self):
        with self.assertRaises(ValueError):
            Cell.fold([])

    def test_unfold(self):
        items = [ud(1), ud(2), ud(3)]
        self.assertEqual(Cell.unfold(Cell.fold(items), 3), items)
        with self.assertRaises(ValueError):
            Cell.unfold(ud(1).tail, 2)

    def test_equality_ignores_span(self):
        location = SourceLocation("a.hoon", 1, 1, 0)
        span = SourceSpan(location, location)
        self.assertEqual(Literal(Odor.UD, 1, span), Literal(Odor.UD, 1))
        self.assertEqual(hash(Literal(Odor.UD, 1, span)), hash(Literal(Odor.UD, 1)))

    def test_nodes_are_frozen(self):
        node = Cell(ud(1), ud(2))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            node.head = ud(3)

    def test_rune_property(self):
        self.assertIs(apply_rune(Rune.BRHP, ud(1)).rune, Rune.BRHP)
        self.assertIsNone(Cell(ud(1), ud(2)).rune)

    def test_children(self):
        node = Cell(ud(1), ud(2))
        self.assertEqual(node.children(), [ud(1), ud(2)])
        self.assertEqual(Literal(Odor.UD, 1).children(), [])
        self.assertEqual(RuneNode(Rune.BRHP).children(), [])


class TestRunesAndOdors(unittest.TestCase):
    """Test rune metadata and odor decoding."""

    def test_rune_metadata(self):
        self.assertEqual(Rune.WTCL.glyph, b"?:")
        self.assertEqual(Rune.WTCL.arity, 3)
        self.assertIsNone(Rune.DTZY.glyph)
        self.assertIs(Rune.from_glyph("=>"), Rune.TSGR)
        with self.assertRaises(KeyError):
            Rune.from_glyph("%=")

    def test_ud_decode(self):
        self.assertEqual(Odor.UD.decode(b"12"), 12)
        for text in (b"", b"1a", b"-1"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    Odor.UD.decode(text)

    def test_ud_encode(self):
        self.assertEqual(Odor.UD.encode(1000), "1000")
        for value in (-1, True, "1"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    Odor.UD.encode(value)

    def test_ud_beyond_conversion_limit(self):
        """Values spanning several conversion chunks keep their inner zeros."""
        text = "1" + "0" * 7999 + "7"
        self.assertEqual(Odor.UD.encode(10 ** 8000 + 7), text)
        self.assertEqual(Odor.UD.decode(text.encode()), 10 ** 8000 + 7)
        self.assertEqual(Odor.UD.decode(b"0" * 4500 + b"5"), 5)


class TestPrinters(unittest.TestCase):
    """Test noun and wide-form rendering."""

    def test_noun_form(self):
        self.assertEqual(str(apply_rune(Rune.BRHP, ud(1))), "[%brhp [%dtzy @ud 1]]")

    def test_wide_form(self):
        tree = apply_rune(Rune.DTTS, Cell(ud(1), apply_rune(Rune.DTLS, ud(2))))
        self.assertEqual(to_hoon(tree), ".=(1 .+(2))")

    def test_bare_cell(self):
        self.assertEqual(to_hoon(Cell(ud(1), ud(2))), "[1 2]")

    def test_visitor(self):
        tree = apply_rune(Rune.WTCL, Cell.fold([ud(1), ud(2), ud(3)]))
        self.assertEqual(tree.accept(LiteralCounter()), 3)


if __name__ == '__main__':
    unittest.main()
