# -*- coding: utf-8 -*-
"""Tests for the text puzzle layout."""
import os
import tempfile
import unittest

from parameterized import parameterized

from sudokit.common.exceptions import PuzzleFormatError
from sudokit.filer import SudokuFiler, SymbolTable
from sudokit.puzzle import Puzzle
from sudokit.solver import Solver
from tests.tools import EASY_9X9, EASY_9X9_TEXT, parse_grid


class TestSymbolTable(unittest.TestCase):
    def test_default_digits(self):
        table = SymbolTable.default(9)
        self.assertEqual(table.symbols, list("123456789"))
        self.assertEqual(table.to_value("7"), 7)
        self.assertEqual(table.to_value("-"), 0)
        self.assertEqual(table.to_symbol(0), "-")

    def test_default_letters(self):
        table = SymbolTable.default(16)
        self.assertEqual(table.to_symbol(10), "A")
        self.assertEqual(table.to_symbol(11), "B")
        self.assertEqual(table.to_symbol(16), "G")
        self.assertEqual(table.to_value("G"), 16)

    @parameterized.expand(
        [
            ("blank_symbol", ["1", "-", "3", "4"]),
            ("duplicate", ["1", "2", "2", "4"]),
            ("long_symbol", ["1", "2", "3", "10"]),
        ]
    )
    def test_invalid_table(self, name, symbols):
        with self.assertRaises(PuzzleFormatError):
            SymbolTable(symbols)

    def test_unknown_symbol(self):
        with self.assertRaises(PuzzleFormatError):
            SymbolTable.default(4).to_value("9")


class TestSudokuFiler(unittest.TestCase):
    def test_parse(self):
        filer = SudokuFiler.from_text(EASY_9X9_TEXT)
        self.assertEqual(filer.dimension, 3)
        self.assertEqual(filer.values, parse_grid(EASY_9X9))
        puzzle = filer.create_puzzle()
        self.assertEqual(puzzle.values(), parse_grid(EASY_9X9))

    def test_format_matches_input(self):
        filer = SudokuFiler.from_text(EASY_9X9_TEXT)
        self.assertEqual(filer.to_text(), EASY_9X9_TEXT)
        self.assertEqual(filer.to_lines(filer.create_puzzle()), EASY_9X9_TEXT.splitlines())

    def test_custom_symbols(self):
        text = "4\na b c d\na - - d\n- d a -\n- a d -\nd - - a\n"
        filer = SudokuFiler.from_text(text)
        self.assertEqual(filer.values[:4], [1, 0, 0, 4])
        solutions = Solver().solve(filer.create_puzzle())
        self.assertEqual(len(solutions), 2)
        lines = filer.to_lines(solutions[0])
        self.assertEqual(lines[1], "a b c d")
        for line in lines[2:]:
            self.assertEqual(sorted(line.split()), ["a", "b", "c", "d"])

    def test_unsolved_cells_render_blank(self):
        puzzle = Puzzle(2, [0] * 16)
        puzzle.cell(0, 0).restrict_to(3)
        puzzle.cell(0, 1).remove(1)
        lines = SudokuFiler.for_puzzle(puzzle).to_lines(puzzle)
        self.assertEqual(lines, ["4", "1 2 3 4", "3 - - -", "- - - -", "- - - -", "- - - -"])

    def test_sixteen_by_sixteen(self):
        values = [0] * 256
        values[0] = 16
        values[17] = 10
        filer = SudokuFiler.for_puzzle(Puzzle(4, values))
        lines = filer.to_lines()
        self.assertEqual(lines[0], "16")
        self.assertTrue(lines[2].startswith("G -"))
        self.assertTrue(lines[3].startswith("- A"))
        self.assertEqual(SudokuFiler.from_text("\n".join(lines)).values, values)

    def test_trailing_blank_lines(self):
        filer = SudokuFiler.from_text(EASY_9X9_TEXT + "\n\n")
        self.assertEqual(len(filer.values), 81)

    @parameterized.expand(
        [
            ("empty", ""),
            ("no_symbols", "4\n"),
            ("bad_size", "four\n1 2 3 4\n"),
            ("not_square", "5\n1 2 3 4 5\n"),
            ("symbol_count", "4\n1 2 3\n- - - -\n- - - -\n- - - -\n- - - -\n"),
            ("missing_row", "4\n1 2 3 4\n- - - -\n- - - -\n- - - -\n"),
            ("short_row", "4\n1 2 3 4\n- - -\n- - - -\n- - - -\n- - - -\n"),
            ("unknown_symbol", "4\n1 2 3 4\n- - - 5\n- - - -\n- - - -\n- - - -\n"),
        ]
    )
    def test_malformed(self, name, text):
        with self.assertRaises(PuzzleFormatError):
            SudokuFiler.from_text(text)

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "puzzle.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write(EASY_9X9_TEXT)
            filer = SudokuFiler.from_file(path)
        self.assertEqual(filer.values, parse_grid(EASY_9X9))
