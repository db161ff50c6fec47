"""Sudoku puzzle generator implementation (9x9 grid, symmetric clues)."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import uuid
from dataclasses import dataclass
from typing import List, Optional

from tqdm import tqdm

from symsudoku.puzzle.base import AbstractPuzzleGenerator

from .filler import DEFAULT_MAX_DEAD_ENDS, DEFAULT_MAX_RESTARTS, fill_grid
from .grid import Grid
from .removal import SYMMETRY_AXES, SYMMETRY_MODES, RemovalPolicy, carve
from .render import format_compact, format_grid


@dataclass
class SudokuPuzzleRecord:
    """Generated Sudoku puzzle metadata."""

    id: str
    puzzle_grid: List[List[int]]
    solution_grid: List[List[int]]
    clue_count: int
    retries: int
    symmetry: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "puzzle_grid": self.puzzle_grid,
            "solution_grid": self.solution_grid,
            "clue_count": self.clue_count,
            "retries": self.retries,
            "symmetry": self.symmetry,
        }

    @property
    def puzzle(self) -> Grid:
        return Grid.from_rows(self.puzzle_grid)

    @property
    def solution(self) -> Grid:
        return Grid.from_rows(self.solution_grid)


def generate_puzzle(
    rng: Optional[random.Random] = None,
    *,
    policy: Optional[RemovalPolicy] = None,
    max_dead_ends: int = DEFAULT_MAX_DEAD_ENDS,
    max_restarts: int = DEFAULT_MAX_RESTARTS,
) -> Grid:
    """Fill a board, then carve it down to a uniquely solvable puzzle."""
    rng = rng if rng is not None else random.Random()
    grid = fill_grid(Grid(), rng, max_dead_ends=max_dead_ends, max_restarts=max_restarts)
    carve(grid, rng, policy)
    return grid


class SudokuGenerator(AbstractPuzzleGenerator[SudokuPuzzleRecord]):
    """Generate 9x9 Sudoku puzzles with symmetric clue layouts."""

    def __init__(
        self,
        *,
        min_clues: int = 20,
        max_retries: int = 20,
        symmetry: str = SYMMETRY_AXES,
        max_dead_ends: int = DEFAULT_MAX_DEAD_ENDS,
        max_restarts: int = DEFAULT_MAX_RESTARTS,
        seed: Optional[int] = None,
        policy: Optional[RemovalPolicy] = None,
    ) -> None:
        super().__init__(seed=seed)
        # An explicit policy overrides min_clues, max_retries and symmetry.
        self.policy = policy or RemovalPolicy(min_clues=min_clues, max_retries=max_retries, symmetry=symmetry)
        if max_dead_ends < 1:
            raise ValueError("max_dead_ends must be at least 1")
        if max_restarts < 0:
            raise ValueError("max_restarts must be non-negative")
        self.max_dead_ends = max_dead_ends
        self.max_restarts = max_restarts

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> SudokuPuzzleRecord:
        puzzle_uuid = puzzle_id or str(uuid.UUID(int=self._rng.getrandbits(128), version=4))
        solution = fill_grid(
            Grid(),
            self._rng,
            max_dead_ends=self.max_dead_ends,
            max_restarts=self.max_restarts,
        )
        puzzle = solution.copy()
        result = carve(puzzle, self._rng, self.policy)

        return SudokuPuzzleRecord(
            id=puzzle_uuid,
            puzzle_grid=puzzle.to_rows(),
            solution_grid=solution.to_rows(),
            clue_count=result.clue_count,
            retries=result.retries,
            symmetry=self.policy.symmetry,
        )


__all__ = ["SudokuGenerator", "SudokuPuzzleRecord", "generate_puzzle"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate uniquely solvable 9x9 Sudoku puzzles")
    parser.add_argument("count", type=int, nargs="?", default=1, help="Number of puzzles to generate")
    parser.add_argument("--min-clues", type=int, default=20, help="Clue count floor for the removal loop")
    parser.add_argument("--max-retries", type=int, default=20, help="Restorations allowed before the removal loop stops")
    parser.add_argument("--symmetry", choices=SYMMETRY_MODES, default=SYMMETRY_AXES, help="Shape of each removal batch")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--compact", action="store_true", help="Print each grid as a single 81-character line")
    parser.add_argument("--show-solution", action="store_true", help="Print the solved grid after each puzzle")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("count must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(asctime)s - %(levelname)s - %(message)s')

    generator = SudokuGenerator(
        min_clues=args.min_clues,
        max_retries=args.max_retries,
        symmetry=args.symmetry,
        seed=args.seed,
    )
    render = format_compact if args.compact else format_grid
    progress = tqdm(range(args.count), desc="Sudoku", disable=args.count == 1, file=sys.stderr)
    for _ in progress:
        record = generator.create_random_puzzle()
        logging.info(f"Generated puzzle {record.id} with {record.clue_count} clues")
        print(render(record.puzzle))
        if args.show_solution:
            print(render(record.solution))
        if not args.compact:
            print()


if __name__ == "__main__":
    main()
