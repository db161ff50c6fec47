"""Exhaustive backtracking solver and solution counter.

The search walks the empty cells in row-major order and keeps one frame per
position on an explicit stack. A frame remembers the cell, the candidates it
has not tried yet and the value currently committed to the board. Both a dead
end and a found solution unwind through the same ``_step_back`` primitive.

Uniqueness is the only question the generator asks, so counting stops at a
small limit (2 by default) instead of enumerating every completion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator, List, Optional

from .candidates import candidates
from .grid import EMPTY, Cell, Grid

UNIQUE = 1
MULTIPLE = 2


@dataclass
class _Frame:
    cell: Cell
    remaining: List[int]
    chosen: int = field(default=EMPTY)


def _prepare(grid: Grid, empty_cells: Optional[Iterable[Cell]]) -> List[Cell]:
    if empty_cells is None:
        return grid.empty_cells()
    cells = sorted(set((r, c) for r, c in empty_cells))
    for row, col in cells:
        if grid.get(row, col) != EMPTY:
            raise ValueError(f"cell ({row}, {col}) is listed as empty but holds {grid.get(row, col)}")
    return cells


def _push(board: Grid, stack: List[_Frame], cell: Cell) -> None:
    # Descending order so that list.pop() tries the smallest digit first.
    options = sorted(candidates(board, *cell), reverse=True)
    stack.append(_Frame(cell=cell, remaining=options))


def _step_back(board: Grid, stack: List[_Frame]) -> None:
    frame = stack.pop()
    board.clear(*frame.cell)


def iter_solutions(grid: Grid, empty_cells: Optional[Iterable[Cell]] = None) -> Iterator[Grid]:
    """Lazily yield every completion of ``grid`` as an independent copy.

    ``empty_cells`` defaults to every cell currently holding 0; all other cells
    are treated as fixed clues. The caller's grid is never modified. Stop
    iterating to end the search early.
    """
    cells = _prepare(grid, empty_cells)
    if not grid.is_consistent():
        return
    if not cells:
        yield grid.copy()
        return

    board = grid.copy()
    stack: List[_Frame] = []
    _push(board, stack, cells[0])
    while stack:
        frame = stack[-1]
        if not frame.remaining:
            _step_back(board, stack)
            continue
        frame.chosen = frame.remaining.pop()
        board.set(frame.cell[0], frame.cell[1], frame.chosen)
        if len(stack) < len(cells):
            _push(board, stack, cells[len(stack)])
            continue
        yield board.copy()
        # The last cell had every other cell fixed, so no alternative is left in its frame.
        _step_back(board, stack)


def count_solutions(grid: Grid, empty_cells: Optional[Iterable[Cell]] = None, *, limit: int = MULTIPLE) -> int:
    """Count completions of ``grid``, stopping once ``limit`` are found.

    With the default limit the answer is 0 (unsolvable), 1 (unique) or 2
    (two or more). The result does not depend on the order of ``empty_cells``.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return sum(1 for _ in islice(iter_solutions(grid, empty_cells), limit))


def solve(grid: Grid) -> Optional[Grid]:
    """Return the first completion of ``grid`` in row-major search order, or None."""
    return next(iter_solutions(grid), None)


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions(grid, grid.empty_cells()) == UNIQUE


__all__ = [
    "MULTIPLE",
    "UNIQUE",
    "count_solutions",
    "has_unique_solution",
    "iter_solutions",
    "solve",
]
