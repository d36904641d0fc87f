"""
Tests for the wing (dotted path) parser.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from ream.parser import Parser, wing
from ream.lexer.errors import LexerError, ErrorKind


class TestWing(unittest.TestCase):
    """Test cases for wing parsing."""

    def test_dotted_path(self):
        self.assertEqual(wing(b"a.b.c"), (["a", "b", "c"], b""))

    def test_single_identifier(self):
        self.assertEqual(wing(b"a"), (["a"], b""))

    def test_hyphens_and_digits(self):
        self.assertEqual(wing(b"foo-bar.baz2 x"), (["foo-bar", "baz2"], b" x"))

    def test_digit_start_fails(self):
        with self.assertRaises(LexerError) as ctx:
            wing(b"1a.b")
        self.assertEqual(ctx.exception.kind, ErrorKind.ALPHA_EXPECTED)

    def test_trailing_dot_left_unconsumed(self):
        self.assertEqual(wing(b"a."), (["a"], b"."))
        self.assertEqual(wing(b"a.1"), (["a"], b".1"))

    def test_offset_api(self):
        parser = Parser(b"x  a.b")
        self.assertEqual(parser.parse_wing(3), (["a", "b"], 6))


if __name__ == '__main__':
    unittest.main()
