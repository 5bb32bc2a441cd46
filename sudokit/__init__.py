# -*- coding: utf-8 -*-
"""sudokit: a constraint-propagation and backtracking solver for N*N sudoku."""

__version__ = "0.1.0"
