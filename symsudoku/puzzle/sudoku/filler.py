"""Randomized construction of a fully solved Sudoku grid."""

from __future__ import annotations

import logging
import random

from .candidates import candidates
from .grid import GRID_SIZE, TOTAL_CELLS, GenerationError, Grid

DEFAULT_MAX_DEAD_ENDS = 5
DEFAULT_MAX_RESTARTS = 10_000


def fill_grid(
    grid: Grid,
    rng: random.Random,
    *,
    max_dead_ends: int = DEFAULT_MAX_DEAD_ENDS,
    max_restarts: int = DEFAULT_MAX_RESTARTS,
) -> Grid:
    """Populate ``grid`` in place with a complete, rule-valid solution.

    Cells are visited row-major and each receives the first entry of a shuffled
    candidate list. A cell without candidates means its row cannot be finished,
    so the row is cleared and refilled from its first cell. After
    ``max_dead_ends`` consecutive dead ends the whole board is cleared and the
    construction starts over. ``GenerationError`` is raised only when more than
    ``max_restarts`` whole-board restarts were needed.
    """
    if max_dead_ends < 1:
        raise ValueError("max_dead_ends must be at least 1")
    if max_restarts < 0:
        raise ValueError("max_restarts must be non-negative")

    grid.clear_all()
    dead_ends = 0
    restarts = 0
    index = 0
    while index < TOTAL_CELLS:
        row, col = divmod(index, GRID_SIZE)
        options = sorted(candidates(grid, row, col))
        if not options:
            grid.clear_row(row)
            dead_ends += 1
            if dead_ends < max_dead_ends:
                index = row * GRID_SIZE
                continue
            restarts += 1
            if restarts > max_restarts:
                raise GenerationError(f"could not fill the grid after {max_restarts} restarts")
            logging.debug(f"Dead end on row {row} repeated {dead_ends} times, restarting the grid")
            grid.clear_all()
            dead_ends = 0
            index = 0
            continue
        rng.shuffle(options)
        grid.set(row, col, options[0])
        index += 1
        if col == GRID_SIZE - 1:
            dead_ends = 0

    logging.debug(f"Filled grid after {restarts} full restarts")
    return grid


__all__ = [
    "DEFAULT_MAX_DEAD_ENDS",
    "DEFAULT_MAX_RESTARTS",
    "fill_grid",
]
