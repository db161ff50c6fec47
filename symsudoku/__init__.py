"""Symmetric Sudoku puzzle generation toolkit."""

__version__ = "0.1.0"
