# -*- coding: utf-8 -*-
"""Test cases for the class registry."""
import unittest

from sudokugen.core.fill import FillStrategy, RecursiveFill
from sudokugen.utils.registry import Registry


class ColumnFirstFill(FillStrategy):
    def fill(self, grid):
        return False


class TestRegistry(unittest.TestCase):
    def setUp(self):
        self.registry = Registry(
            "test_fill_strategies",
            default_mapping={"recursive": "sudokugen.core.fill.RecursiveFill"},
        )

    def test_default_mapping_is_imported_lazily(self):
        self.assertNotIn("recursive", self.registry.modules)
        self.assertIs(self.registry.get("recursive"), RecursiveFill)
        self.assertIn("recursive", self.registry.modules)

    def test_register_with_decorator(self):
        @self.registry.register_module("column_first")
        class DecoratedFill(ColumnFirstFill):
            pass

        self.assertIs(self.registry.get("column_first"), DecoratedFill)
        self.assertEqual(self.registry.names(), ["column_first", "recursive"])

    def test_register_twice_needs_force(self):
        self.registry.register_module("column_first", ColumnFirstFill)
        with self.assertRaises(KeyError):
            self.registry.register_module("column_first", ColumnFirstFill)
        self.registry.register_module("column_first", ColumnFirstFill, force=True)

    def test_dotted_path(self):
        cls = self.registry.get("tests.utils.registry_test.ColumnFirstFill")
        self.assertIs(cls, ColumnFirstFill)

    def test_unknown_names(self):
        with self.assertRaises(KeyError):
            self.registry.get("breadth_first")
        with self.assertRaises(ImportError):
            self.registry.get("sudokugen.core.fill.NoSuchFill")

    def test_module_name_must_be_a_string(self):
        with self.assertRaises(TypeError):
            self.registry.register_module(42, ColumnFirstFill)
