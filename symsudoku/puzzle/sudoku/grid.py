"""Fixed 9x9 cell storage for Sudoku boards."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Set, Tuple

GRID_SIZE = 9
SUBGRID_SIZE = 3
TOTAL_CELLS = GRID_SIZE * GRID_SIZE
EMPTY = 0
DIGITS = tuple(range(1, GRID_SIZE + 1))

Cell = Tuple[int, int]


class SudokuError(Exception):
    """Base class for every error raised by the Sudoku package."""


class OutOfRange(SudokuError, IndexError):
    """A coordinate fell outside [0, 9) or a linear index outside [0, 81)."""


class InvalidDigit(SudokuError, ValueError):
    """A write supplied a value outside {0..9}."""


class GenerationError(SudokuError, RuntimeError):
    """Grid construction gave up after exhausting its restart budget."""


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_coordinate(row: int, col: int) -> None:
    if not (_is_index(row) and _is_index(col) and 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise OutOfRange(f"cell ({row}, {col}) is outside the board, expected [0-{GRID_SIZE})")


def _check_digit(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not (EMPTY <= value <= GRID_SIZE):
        raise InvalidDigit(f"cell value must be an int in [0-{GRID_SIZE}], got {value!r}")


def block_origin(row: int, col: int) -> Cell:
    return row // SUBGRID_SIZE * SUBGRID_SIZE, col // SUBGRID_SIZE * SUBGRID_SIZE


def _build_peers() -> Tuple[Tuple[int, ...], ...]:
    peers: List[Tuple[int, ...]] = []
    for index in range(TOTAL_CELLS):
        row, col = divmod(index, GRID_SIZE)
        br, bc = block_origin(row, col)
        linked = set()
        for k in range(GRID_SIZE):
            linked.add(row * GRID_SIZE + k)
            linked.add(k * GRID_SIZE + col)
        for r in range(br, br + SUBGRID_SIZE):
            for c in range(bc, bc + SUBGRID_SIZE):
                linked.add(r * GRID_SIZE + c)
        linked.discard(index)
        peers.append(tuple(sorted(linked)))
    return tuple(peers)


# Row, column and block neighbours of every cell, each listed once (20 per cell).
PEERS: Tuple[Tuple[int, ...], ...] = _build_peers()

_ALL_DIGITS = frozenset(DIGITS)


class Grid:
    """A dumb 81-cell digit store with range and digit validation.

    ``set`` performs no Sudoku legality check; callers only write legal
    values. Zero marks an empty cell.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: List[int] = [EMPTY] * TOTAL_CELLS

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise OutOfRange(f"expected a {GRID_SIZE}x{GRID_SIZE} grid")
        grid = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                grid.set(r, c, value)
        return grid

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Parse 81 cells written row-major; ``0`` or ``.`` mark blanks.

        Whitespace is ignored so multi-line layouts are accepted.
        """
        chars = [ch for ch in text if not ch.isspace()]
        if len(chars) != TOTAL_CELLS:
            raise OutOfRange(f"expected {TOTAL_CELLS} cells, got {len(chars)}")
        grid = cls()
        for index, ch in enumerate(chars):
            if ch == ".":
                continue
            if ch not in "0123456789":
                raise InvalidDigit(f"unexpected character {ch!r} at index {index}")
            grid.set(index // GRID_SIZE, index % GRID_SIZE, int(ch))
        return grid

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone._cells = self._cells[:]
        return clone

    def to_rows(self) -> List[List[int]]:
        return [self._cells[r * GRID_SIZE : (r + 1) * GRID_SIZE] for r in range(GRID_SIZE)]

    # --- cell access -----------------------------------------------------------------

    def get(self, row: int, col: int) -> int:
        _check_coordinate(row, col)
        return self._cells[row * GRID_SIZE + col]

    def set(self, row: int, col: int, value: int) -> None:
        _check_coordinate(row, col)
        _check_digit(value)
        self._cells[row * GRID_SIZE + col] = value

    def clear(self, row: int, col: int) -> None:
        _check_coordinate(row, col)
        index = row * GRID_SIZE + col
        if self._cells[index] != EMPTY:
            self._cells[index] = EMPTY

    def clear_row(self, row: int) -> None:
        for col in range(GRID_SIZE):
            self.clear(row, col)

    def clear_all(self) -> None:
        for row in range(GRID_SIZE):
            self.clear_row(row)

    def at(self, index: int) -> int:
        """Row-major linear read."""
        if not (_is_index(index) and 0 <= index < TOTAL_CELLS):
            raise OutOfRange(f"the range of the board is [0-{TOTAL_CELLS}), got {index!r}")
        return self._cells[index]

    # --- queries ---------------------------------------------------------------------

    def candidates(self, row: int, col: int) -> Set[int]:
        _check_coordinate(row, col)
        cells = self._cells
        seen = {cells[p] for p in PEERS[row * GRID_SIZE + col]}
        seen.discard(EMPTY)
        return set(_ALL_DIGITS - seen)

    def clue_count(self) -> int:
        return sum(1 for value in self._cells if value != EMPTY)

    def empty_cells(self) -> List[Cell]:
        return [divmod(i, GRID_SIZE) for i, value in enumerate(self._cells) if value == EMPTY]

    def filled_cells(self) -> List[Cell]:
        return [divmod(i, GRID_SIZE) for i, value in enumerate(self._cells) if value != EMPTY]

    def is_complete(self) -> bool:
        return EMPTY not in self._cells

    def is_consistent(self) -> bool:
        """Return True when no digit repeats inside any row, column or block."""
        for unit in iter_units():
            seen = set()
            for r, c in unit:
                value = self._cells[r * GRID_SIZE + c]
                if value == EMPTY:
                    continue
                if value in seen:
                    return False
                seen.add(value)
        return True

    def is_solved(self) -> bool:
        return self.is_complete() and self.is_consistent()

    # --- dunder helpers --------------------------------------------------------------

    def __iter__(self) -> Iterator[int]:
        return iter(self._cells)

    def __len__(self) -> int:
        return TOTAL_CELLS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        body = "".join(str(v) if v else "." for v in self._cells)
        return f"Grid({body!r})"


def iter_units() -> Iterable[List[Cell]]:
    """Yield the 27 rows, columns and blocks as coordinate lists."""
    for r in range(GRID_SIZE):
        yield [(r, c) for c in range(GRID_SIZE)]
    for c in range(GRID_SIZE):
        yield [(r, c) for r in range(GRID_SIZE)]
    for br in range(0, GRID_SIZE, SUBGRID_SIZE):
        for bc in range(0, GRID_SIZE, SUBGRID_SIZE):
            yield [(br + dr, bc + dc) for dr in range(SUBGRID_SIZE) for dc in range(SUBGRID_SIZE)]


__all__ = [
    "Cell",
    "DIGITS",
    "EMPTY",
    "GRID_SIZE",
    "GenerationError",
    "Grid",
    "InvalidDigit",
    "OutOfRange",
    "PEERS",
    "SUBGRID_SIZE",
    "SudokuError",
    "TOTAL_CELLS",
    "block_origin",
    "iter_units",
]
