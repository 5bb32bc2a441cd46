# -*- coding: utf-8 -*-
"""Tests for the backtracking solver."""
import unittest

from parameterized import parameterized

from sudokit.common.config import SolverConfig
from sudokit.common.constants import SolveStatus
from sudokit.puzzle import Puzzle
from sudokit.solver import Solver
from tests.tools import (
    DEAD_END_4X4,
    EASY_9X9,
    EASY_9X9_SOLUTION,
    HARD_9X9,
    UNIQUE_4X4,
    UNIQUE_4X4_SOLUTION,
    make_puzzle,
    parse_grid,
)


class TestSolver(unittest.TestCase):
    def setUp(self):
        self.solver = Solver()

    @parameterized.expand(
        [
            ("4x4", UNIQUE_4X4, UNIQUE_4X4_SOLUTION),
            ("9x9", EASY_9X9, EASY_9X9_SOLUTION),
        ]
    )
    def test_unique_solution(self, name, rows, expected):
        puzzle = make_puzzle(rows)
        solutions = self.solver.solve(puzzle)
        self.assertEqual(len(solutions), 1)
        solution = solutions[0]
        self.assertTrue(solution.is_solved())
        self.assertTrue(solution.is_valid())
        self.assertEqual(solution.values(), parse_grid(expected))

    def test_does_not_mutate_input(self):
        puzzle = make_puzzle(EASY_9X9)
        before = puzzle.clone()
        self.solver.solve(puzzle)
        self.assertEqual(puzzle, before)

    def test_hard_puzzle_needs_branching(self):
        puzzle = make_puzzle(HARD_9X9)
        result = self.solver.run(puzzle)
        self.assertEqual(result.status, SolveStatus.SOLVED)
        self.assertGreater(result.stats.branches, 1)
        solution = result.solution
        self.assertTrue(solution.is_solved())
        self.assertTrue(solution.is_valid())
        for given, value in zip(puzzle.values(), solution.values()):
            if given:
                self.assertEqual(given, value)

    def test_contradictory_givens(self):
        values = [0] * 81
        values[0] = 5
        values[4] = 5
        puzzle = Puzzle(3, values)
        self.assertFalse(puzzle.is_valid())
        result = self.solver.run(puzzle)
        self.assertEqual(result.solutions, [])
        self.assertEqual(result.status, SolveStatus.UNSOLVABLE)
        self.assertIsNone(result.solution)

    def test_dead_end(self):
        puzzle = make_puzzle(DEAD_END_4X4)
        self.assertTrue(puzzle.is_valid())
        result = self.solver.run(puzzle)
        self.assertEqual(result.status, SolveStatus.UNSOLVABLE)
        self.assertEqual(result.stats.contradictions, 1)

    @parameterized.expand([("dfs",), ("bfs",)])
    def test_underconstrained(self, search_order):
        solver = Solver(SolverConfig(search_order=search_order))
        result = solver.run(Puzzle(2, [0] * 16))
        self.assertEqual(result.status, SolveStatus.MULTIPLE)
        self.assertEqual(len(result.solutions), 2)
        first, second = result.solutions
        self.assertNotEqual(first, second)
        for solution in result.solutions:
            self.assertTrue(solution.is_solved())
            self.assertTrue(solution.is_valid())

    def test_already_solved(self):
        puzzle = make_puzzle(UNIQUE_4X4_SOLUTION)
        result = self.solver.run(puzzle)
        self.assertEqual(result.status, SolveStatus.SOLVED)
        self.assertEqual(result.stats.branches, 1)
        self.assertEqual(result.solution, puzzle)
        self.assertIsNot(result.solution, puzzle)

    def test_deterministic(self):
        first = Solver().run(Puzzle(3, [0] * 81))
        second = Solver().run(Puzzle(3, [0] * 81))
        self.assertEqual(first.solutions, second.solutions)
        self.assertEqual(first.stats, second.stats)

    def test_dfs_tries_smallest_candidate_first(self):
        result = Solver().run(Puzzle(2, [0] * 16))
        self.assertEqual(result.solutions[0].cell(0, 0).resolved_value(), 1)

    def test_strategy_uses(self):
        result = self.solver.run(make_puzzle(EASY_9X9))
        self.assertEqual(
            set(result.stats.strategy_uses), {"basic", "single_cell", "shared_subgroup"}
        )
        self.assertGreater(result.stats.strategy_uses["basic"], 0)

    @parameterized.expand(
        [
            ("basic_only", ["basic"], True),
            ("without_locked_candidates", ["basic", "single_cell"], False),
        ]
    )
    def test_strategy_subsets(self, name, strategies, warm_start):
        solver = Solver(SolverConfig(strategies=strategies, warm_start=warm_start))
        solutions = solver.solve(make_puzzle(EASY_9X9))
        self.assertEqual(len(solutions), 1)
        self.assertEqual(solutions[0].values(), parse_grid(EASY_9X9_SOLUTION))


class TestPropagation(unittest.TestCase):
    def test_propagate_to_fixed_point(self):
        solver = Solver()
        puzzle = make_puzzle(EASY_9X9)
        self.assertTrue(solver.propagate(puzzle))
        self.assertFalse(solver.propagate(puzzle))
        # this puzzle falls to propagation alone
        self.assertTrue(puzzle.is_solved())

    def test_select_branch_cell(self):
        puzzle = Puzzle(2, [0] * 16)
        self.assertIs(Solver.select_branch_cell(puzzle), puzzle.cell(0, 0))
        puzzle.cell(2, 1).remove(1)
        puzzle.cell(3, 3).remove(1)
        puzzle.cell(3, 3).remove(2)
        self.assertIs(Solver.select_branch_cell(puzzle), puzzle.cell(3, 3))
        solved = make_puzzle(UNIQUE_4X4_SOLUTION)
        self.assertIsNone(Solver.select_branch_cell(solved))
