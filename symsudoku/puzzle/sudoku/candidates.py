"""Candidate evaluation for a single Sudoku cell."""

from __future__ import annotations

from typing import Set

from .grid import PEERS, Grid


def candidates(grid: Grid, row: int, col: int) -> Set[int]:
    """Return the digits that may legally be placed at ``(row, col)``.

    The cell's own value is ignored. An empty result means the current
    partial assignment cannot be completed through this cell.
    """
    return grid.candidates(row, col)


__all__ = ["PEERS", "candidates"]
