"""Batch sudoku solving with a most-constrained-cell backtracking solver."""

__version__ = "0.1.0"