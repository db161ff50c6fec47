"""Textual grid dumps."""

from __future__ import annotations

from typing import List

from .grid import EMPTY, GRID_SIZE, Grid

_RULE = "-" * (GRID_SIZE * 4 + 1)


def format_grid(grid: Grid) -> str:
    """Render the board as a ruled table; empty cells are left blank."""
    lines: List[str] = [_RULE]
    for row in grid.to_rows():
        cells = "".join(f"| {value} " if value != EMPTY else "|   " for value in row)
        lines.append(cells + "|")
        lines.append(_RULE)
    return "\n".join(lines)


def format_compact(grid: Grid) -> str:
    """Single 81-character line, ``.`` marking empty cells."""
    return "".join(str(value) if value != EMPTY else "." for value in grid)


__all__ = ["format_compact", "format_grid"]
