"""
Tests for the package's public exports.

Author: xwest
"""

import unittest
import importlib
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)


class TestPublicExports(unittest.TestCase):
    """Every name a package lists in __all__ must exist."""

    def test_star_import(self):
        for package in ("ream", "ream.lexer", "ream.parser"):
            with self.subTest(package=package):
                namespace = {}
                exec(f"from {package} import *", namespace)
                module = importlib.import_module(package)
                for name in module.__all__:
                    self.assertIn(name, namespace)

    def test_version_info(self):
        import ream
        self.assertEqual(ream.__version__, "0.1.0-alpha")
        self.assertEqual(ream.__license__, "MIT")


if __name__ == '__main__':
    unittest.main()
