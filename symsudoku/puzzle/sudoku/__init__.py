"""Sudoku puzzle toolkit."""

__all__ = [
    "CarveResult",
    "GenerationError",
    "Grid",
    "InvalidDigit",
    "OutOfRange",
    "RemovalLog",
    "RemovalPolicy",
    "SudokuError",
    "SudokuGenerator",
    "SudokuPuzzleRecord",
    "candidates",
    "carve",
    "count_solutions",
    "fill_grid",
    "format_compact",
    "format_grid",
    "generate_puzzle",
    "has_unique_solution",
    "iter_solutions",
    "solve",
]

from .grid import GenerationError, Grid, InvalidDigit, OutOfRange, SudokuError
from .candidates import candidates
from .filler import fill_grid
from .solver import count_solutions, has_unique_solution, iter_solutions, solve
from .removal import CarveResult, RemovalLog, RemovalPolicy, carve
from .render import format_compact, format_grid
from .generator import SudokuGenerator, SudokuPuzzleRecord, generate_puzzle
