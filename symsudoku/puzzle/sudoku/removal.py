"""Symmetric clue removal that preserves a unique solution."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .grid import EMPTY, GRID_SIZE, Cell, Grid
from .solver import UNIQUE, count_solutions

SYMMETRY_AXES = "axes"
SYMMETRY_NONE = "none"
SYMMETRY_MODES = (SYMMETRY_AXES, SYMMETRY_NONE)


@dataclass(frozen=True)
class RemovalPolicy:
    """Stopping rules and batch shape for the removal loop."""

    min_clues: int = 20
    max_retries: int = 20
    symmetry: str = SYMMETRY_AXES

    def __post_init__(self) -> None:
        if not (0 <= self.min_clues <= GRID_SIZE * GRID_SIZE):
            raise ValueError("min_clues must lie in [0, 81]")
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.symmetry not in SYMMETRY_MODES:
            raise ValueError(f"symmetry must be one of {SYMMETRY_MODES}, got {self.symmetry!r}")


@dataclass(frozen=True)
class RemovalEntry:
    cell: Cell
    value: int


class RemovalLog:
    """LIFO undo log of emptied cells and the digits they held."""

    def __init__(self) -> None:
        self._entries: List[RemovalEntry] = []

    def remove(self, grid: Grid, cells: List[Cell]) -> int:
        """Empty ``cells`` in order, logging each one; return how many were cleared."""
        cleared = 0
        for row, col in cells:
            value = grid.get(row, col)
            if value == EMPTY:
                continue
            self._entries.append(RemovalEntry((row, col), value))
            grid.clear(row, col)
            cleared += 1
        return cleared

    def restore_last(self, grid: Grid) -> RemovalEntry:
        if not self._entries:
            raise IndexError("restore from an empty removal log")
        entry = self._entries.pop()
        grid.set(entry.cell[0], entry.cell[1], entry.value)
        return entry

    def restore_all(self, grid: Grid) -> int:
        restored = 0
        while self._entries:
            self.restore_last(grid)
            restored += 1
        return restored

    @property
    def entries(self) -> Tuple[RemovalEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[RemovalEntry]:
        return iter(self._entries)


def reflections(row: int, col: int) -> List[Cell]:
    """Reflect a cell across the middle row and middle column.

    Coincident images are dropped, so the centre cell yields one cell and cells
    on the middle row or column yield two.
    """
    last = GRID_SIZE - 1
    quartet = [(row, col), (row, last - col), (last - row, col), (last - row, last - col)]
    unique: List[Cell] = []
    for cell in quartet:
        if cell not in unique:
            unique.append(cell)
    return unique


def pick_batch(grid: Grid, rng: random.Random, symmetry: str = SYMMETRY_AXES) -> List[Cell]:
    """Choose the next group of clue cells to empty together."""
    clues = grid.filled_cells()
    if not clues:
        return []
    anchor = rng.choice(clues)
    if symmetry == SYMMETRY_NONE:
        return [anchor]
    return [cell for cell in reflections(*anchor) if grid.get(*cell) != EMPTY]


@dataclass
class CarveResult:
    clue_count: int
    retries: int
    log: RemovalLog = field(repr=False)


def carve(grid: Grid, rng: random.Random, policy: Optional[RemovalPolicy] = None) -> CarveResult:
    """Empty cells of a solved ``grid`` in place while its solution stays unique.

    Batches are removed whole, then the solution count over all empty cells is
    rechecked. A batch that breaks uniqueness is unwound one cell at a time in
    LIFO order, recounting after every restored cell. Each restored cell and
    each batch rejected for crossing the clue floor uses one retry.
    """
    policy = policy or RemovalPolicy()
    log = RemovalLog()
    clues = grid.clue_count()
    retries = 0

    while clues >= policy.min_clues and retries < policy.max_retries:
        batch = pick_batch(grid, rng, policy.symmetry)
        if not batch:
            break
        if clues - len(batch) < policy.min_clues:
            retries += 1
            logging.debug(f"Batch {batch} would leave fewer than {policy.min_clues} clues, skipping")
            continue

        clues -= log.remove(grid, batch)
        solutions = count_solutions(grid, grid.empty_cells())
        while solutions != UNIQUE and log:
            entry = log.restore_last(grid)
            clues += 1
            retries += 1
            logging.debug(f"Restored {entry.value} at {entry.cell}, {clues} clues")
            solutions = count_solutions(grid, grid.empty_cells())

    logging.info(f"Carved puzzle down to {clues} clues using {retries} retries")
    return CarveResult(clue_count=clues, retries=retries, log=log)


__all__ = [
    "CarveResult",
    "RemovalEntry",
    "RemovalLog",
    "RemovalPolicy",
    "SYMMETRY_AXES",
    "SYMMETRY_MODES",
    "SYMMETRY_NONE",
    "carve",
    "pick_batch",
    "reflections",
]
