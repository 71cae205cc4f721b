import os
import unittest
from unittest import mock

from sudokugen.cli.launcher import main

EXAMPLE_CONFIG = os.path.join(
    os.path.dirname(__file__), "..", "..", "examples", "mini_4x4", "sudoku.yaml"
)


class TestLauncher(unittest.TestCase):
    @mock.patch("builtins.print")
    def test_generate_prints_puzzle_and_solution(self, mock_print):
        code = main(["generate", "--seed", "5", "--removal-count", "20", "--no-color"])
        self.assertEqual(code, 0)
        printed = [call.args[0] for call in mock_print.call_args_list]
        self.assertEqual(printed[0], "Puzzle:")
        self.assertEqual(printed[2], "Solution:")
        self.assertTrue(printed[1].startswith("  | 1 2 3 | 4 5 6 | 7 8 9 "))

    @mock.patch("builtins.print")
    def test_generate_is_reproducible(self, mock_print):
        main(["generate", "--seed", "9", "--no-color"])
        first = [call.args[0] for call in mock_print.call_args_list]
        mock_print.reset_mock()
        main(["generate", "--seed", "9", "--no-color"])
        second = [call.args[0] for call in mock_print.call_args_list]
        self.assertEqual(first, second)

    @mock.patch("builtins.print")
    def test_generate_from_config_file(self, mock_print):
        code = main(["generate", "--config", EXAMPLE_CONFIG, "--no-color"])
        self.assertEqual(code, 0)
        self.assertTrue(mock_print.call_args_list[1].args[0].startswith("  | 1 2 | 3 4 "))

    @mock.patch("builtins.print")
    def test_invalid_removal_count_exits_with_error(self, mock_print):
        self.assertEqual(main(["generate", "--removal-count", "100"]), 1)
        mock_print.assert_not_called()

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", side_effect=EOFError)
    def test_play_until_end_of_input(self, mock_input, mock_print):
        self.assertEqual(main(["play", "--seed", "1", "--no-color"]), 0)
        printed = [call.args[0] for call in mock_print.call_args_list]
        self.assertEqual(printed[0], "Welcome to Sudoku!")
        self.assertEqual(printed[-1], "Goodbye!")

    @mock.patch("builtins.print")
    def test_unimportable_fill_strategy_exits_with_error(self, mock_print):
        with self.assertLogs("sudokugen", "ERROR") as logs:
            code = main(["generate", "--fill-strategy", "no_such_pkg.MissingFill"])
        self.assertEqual(code, 1)
        self.assertTrue(any("Invalid fill strategy" in line for line in logs.output))
        mock_print.assert_not_called()

    @mock.patch("builtins.print")
    def test_missing_config_file_exits_with_error(self, mock_print):
        missing = os.path.join(os.path.dirname(__file__), "no_such_config.yaml")
        with self.assertLogs("sudokugen", "ERROR") as logs:
            code = main(["generate", "--config", missing])
        self.assertEqual(code, 1)
        self.assertTrue(any("Invalid configuration" in line for line in logs.output))
        mock_print.assert_not_called()
