import random
import unittest

from symsudoku.puzzle.sudoku import candidates, fill_grid
from symsudoku.puzzle.sudoku.candidates import PEERS
from symsudoku.puzzle.sudoku.grid import (
    GenerationError,
    Grid,
    InvalidDigit,
    OutOfRange,
    SudokuError,
    iter_units,
)
from symsudoku.puzzle.sudoku.render import format_compact, format_grid

SOLVED = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class GridTests(unittest.TestCase):
    def test_new_grid_is_empty(self) -> None:
        grid = Grid()
        self.assertEqual(len(grid), 81)
        self.assertEqual(grid.clue_count(), 0)
        self.assertEqual(len(grid.empty_cells()), 81)
        self.assertFalse(grid.is_complete())

    def test_set_get_and_clear(self) -> None:
        grid = Grid()
        grid.set(4, 7, 6)
        self.assertEqual(grid.get(4, 7), 6)
        self.assertEqual(grid.at(4 * 9 + 7), 6)
        grid.clear(4, 7)
        self.assertEqual(grid.get(4, 7), 0)
        grid.clear(4, 7)
        self.assertEqual(grid.get(4, 7), 0)

    def test_clear_row_only_touches_that_row(self) -> None:
        grid = Grid.from_string(SOLVED)
        grid.clear_row(3)
        self.assertEqual(grid.empty_cells(), [(3, c) for c in range(9)])
        self.assertEqual(grid.get(2, 0), 1)

    def test_out_of_range_coordinates(self) -> None:
        grid = Grid()
        for row, col in [(-1, 0), (0, 9), (9, 9)]:
            with self.assertRaises(OutOfRange):
                grid.get(row, col)
            with self.assertRaises(OutOfRange):
                grid.set(row, col, 1)
            with self.assertRaises(OutOfRange):
                grid.clear(row, col)
        with self.assertRaises(OutOfRange):
            grid.clear_row(9)
        for index in (-1, 81):
            with self.assertRaises(OutOfRange):
                grid.at(index)

    def test_non_integer_coordinates_are_rejected(self) -> None:
        grid = Grid()
        with self.assertRaises(OutOfRange):
            grid.get(1.5, 0)
        with self.assertRaises(OutOfRange):
            grid.set(True, 0, 1)
        with self.assertRaises(OutOfRange):
            grid.clear(0, 2.0)
        with self.assertRaises(OutOfRange):
            grid.candidates(0, False)
        self.assertEqual(grid.clue_count(), 0)

    def test_from_string_rejects_non_ascii_digits(self) -> None:
        for ch in ("²", "٣", "x"):
            with self.assertRaises(InvalidDigit):
                Grid.from_string(ch + SOLVED[1:])

    def test_invalid_digits(self) -> None:
        grid = Grid()
        for value in (-1, 10, 2.0, "3", True):
            with self.assertRaises(InvalidDigit):
                grid.set(0, 0, value)
        self.assertEqual(grid.get(0, 0), 0)

    def test_error_hierarchy(self) -> None:
        self.assertTrue(issubclass(OutOfRange, IndexError))
        self.assertTrue(issubclass(InvalidDigit, ValueError))
        self.assertTrue(issubclass(GenerationError, SudokuError))

    def test_copy_is_independent(self) -> None:
        grid = Grid.from_string(SOLVED)
        clone = grid.copy()
        clone.clear(0, 0)
        self.assertEqual(grid.get(0, 0), 5)
        self.assertNotEqual(grid, clone)

    def test_round_trip_and_consistency(self) -> None:
        grid = Grid.from_string(SOLVED)
        self.assertEqual(Grid.from_rows(grid.to_rows()), grid)
        self.assertTrue(grid.is_solved())
        grid.set(0, 1, 5)
        self.assertFalse(grid.is_consistent())

    def test_from_string_accepts_dots_and_whitespace(self) -> None:
        text = "\n".join(SOLVED[i : i + 9] for i in range(0, 81, 9)).replace("5", ".")
        grid = Grid.from_string(text)
        self.assertEqual(grid.get(0, 0), 0)
        self.assertEqual(grid.get(0, 1), 3)
        with self.assertRaises(OutOfRange):
            Grid.from_string("123")


class CandidateTests(unittest.TestCase):
    def test_each_cell_has_twenty_distinct_peers(self) -> None:
        for index, peers in enumerate(PEERS):
            self.assertEqual(len(peers), 20)
            self.assertEqual(len(set(peers)), 20)
            self.assertNotIn(index, peers)

    def test_module_function_matches_grid_method(self) -> None:
        grid = Grid.from_string(SOLVED)
        for row, col in [(0, 0), (4, 4), (8, 2)]:
            grid.clear(row, col)
        for row in range(9):
            for col in range(9):
                self.assertEqual(candidates(grid, row, col), grid.candidates(row, col))
        self.assertEqual(grid.candidates(4, 4), {5})

    def test_empty_board_allows_every_digit(self) -> None:
        self.assertEqual(candidates(Grid(), 4, 4), set(range(1, 10)))

    def test_excludes_row_column_and_block(self) -> None:
        grid = Grid()
        grid.set(0, 8, 1)  # row
        grid.set(8, 0, 2)  # column
        grid.set(1, 1, 3)  # block
        grid.set(0, 4, 4)  # row only
        grid.set(2, 2, 5)  # block only
        grid.set(5, 5, 6)  # unrelated
        self.assertEqual(candidates(grid, 0, 0), {6, 7, 8, 9})
        self.assertEqual(grid.candidates(0, 0), {6, 7, 8, 9})

    def test_never_offers_a_peer_digit(self) -> None:
        rng = random.Random(3)
        grid = Grid.from_string(SOLVED)
        for r, c in rng.sample([(r, c) for r in range(9) for c in range(9)], 40):
            grid.clear(r, c)
        for r, c in grid.empty_cells():
            found = candidates(grid, r, c)
            for peer in PEERS[r * 9 + c]:
                self.assertNotIn(grid.at(peer), found)

    def test_fully_excluded_cell_has_no_candidates(self) -> None:
        grid = Grid()
        for col, digit in enumerate(range(1, 9), start=1):
            grid.set(0, col, digit)
        grid.set(4, 0, 9)
        self.assertEqual(candidates(grid, 0, 0), set())

    def test_single_missing_digit(self) -> None:
        grid = Grid.from_string(SOLVED)
        grid.clear(0, 0)
        self.assertEqual(candidates(grid, 0, 0), {5})


class FillerTests(unittest.TestCase):
    def test_filled_grids_are_valid(self) -> None:
        for seed in range(5):
            grid = fill_grid(Grid(), random.Random(seed))
            self.assertTrue(grid.is_complete())
            for unit in iter_units():
                self.assertEqual(sorted(grid.get(r, c) for r, c in unit), list(range(1, 10)))

    def test_fill_overwrites_existing_content(self) -> None:
        grid = Grid()
        grid.set(0, 0, 9)
        grid.set(0, 1, 9)
        fill_grid(grid, random.Random(1))
        self.assertTrue(grid.is_solved())

    def test_seeded_fill_is_deterministic(self) -> None:
        first = fill_grid(Grid(), random.Random(42))
        second = fill_grid(Grid(), random.Random(42))
        self.assertEqual(first, second)

    def test_exhausted_restart_budget_raises(self) -> None:
        class ReverseRandom(random.Random):
            # Always commits the largest candidate; this fill dead-ends on row 1.
            def shuffle(self, x):
                x.reverse()

        with self.assertRaises(GenerationError):
            fill_grid(Grid(), ReverseRandom(0), max_dead_ends=1, max_restarts=3)

    def test_fifth_consecutive_dead_end_clears_whole_grid(self) -> None:
        class ReverseRandom(random.Random):
            def shuffle(self, x):
                x.reverse()

        class RecordingGrid(Grid):
            def __init__(self) -> None:
                super().__init__()
                self.events = []
                self.in_clear_all = False

            def clear_row(self, row: int) -> None:
                if not self.in_clear_all:
                    self.events.append(f"row{row}")
                super().clear_row(row)

            def clear_all(self) -> None:
                self.events.append("all")
                self.in_clear_all = True
                try:
                    super().clear_all()
                finally:
                    self.in_clear_all = False

        grid = RecordingGrid()
        with self.assertRaises(GenerationError):
            fill_grid(grid, ReverseRandom(0), max_dead_ends=5, max_restarts=1)
        # Initial wipe, four row-only retries, then the fifth dead end escalates.
        expected = ["all"] + ["row1"] * 5 + ["all"] + ["row1"] * 5
        self.assertEqual(grid.events, expected)

    def test_invalid_bounds(self) -> None:
        with self.assertRaises(ValueError):
            fill_grid(Grid(), random.Random(0), max_dead_ends=0)


class RenderTests(unittest.TestCase):
    def test_format_grid_layout(self) -> None:
        grid = Grid.from_string(SOLVED)
        grid.clear(0, 0)
        lines = format_grid(grid).splitlines()
        self.assertEqual(len(lines), 19)
        self.assertEqual(lines[0], "-" * 37)
        self.assertEqual(lines[1], "|   | 3 | 4 | 6 | 7 | 8 | 9 | 1 | 2 |")

    def test_format_compact(self) -> None:
        grid = Grid.from_string(SOLVED)
        grid.clear(8, 8)
        self.assertEqual(format_compact(grid), SOLVED[:-1] + ".")


if __name__ == "__main__":
    unittest.main()
