"""Puzzle generation toolkit."""

__all__ = [
    "AbstractPuzzleGenerator",
    "SudokuGenerator",
    "SudokuPuzzleRecord",
    "generate_puzzle",
]

from .base import AbstractPuzzleGenerator
from .sudoku import SudokuGenerator, SudokuPuzzleRecord, generate_puzzle
