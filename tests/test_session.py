"""Tests for gridcalc selection, clipboard copy and paste."""

from __future__ import annotations

import pytest

from gridcalc import CellFormat, CellPosition, CellRange, ClipboardSelection, EditSession, Grid
from gridcalc._errors import OutOfBoundsError
from gridcalc._session import copy_block, paste_block


def _make_block_grid() -> Grid:
    """4x4 grid with A1=1, B1=2, A2=3, B2=4 and A1 bold."""
    grid = Grid(4, 4)
    grid["A1"] = "1"
    grid["B1"] = "2"
    grid["A2"] = "3"
    grid["B2"] = "=SUM(A1:B1)"
    grid.set_format(0, 0, bold=True)
    return grid


class TestCopyBlock:
    def test_copies_values_formulas_formats(self) -> None:
        clip = copy_block(_make_block_grid(), CellRange(0, 0, 1, 1))
        assert clip.shape == (2, 2)
        assert clip.values() == [["1", "2"], ["3", "=SUM(A1:B1)"]]
        cells = {(dr, dc): cell for dr, dc, cell in clip.iter_cells()}
        assert cells[(1, 1)].formula == "=SUM(A1:B1)"
        assert cells[(0, 0)].format.bold is True

    def test_snapshot_is_detached(self) -> None:
        grid = _make_block_grid()
        clip = copy_block(grid, CellRange(0, 0, 1, 1))
        grid["A1"] = "changed"
        grid.set_format(0, 0, bold=False)
        cells = {(dr, dc): cell for dr, dc, cell in clip.iter_cells()}
        assert cells[(0, 0)].value == "1"
        assert cells[(0, 0)].format.bold is True

    def test_reversed_range_is_empty(self) -> None:
        clip = copy_block(_make_block_grid(), CellRange(1, 1, 0, 0))
        assert clip.is_empty

    def test_out_of_bounds_range_raises(self) -> None:
        with pytest.raises(OutOfBoundsError):
            copy_block(Grid(2, 2), CellRange(0, 0, 2, 2))


class TestPasteBlock:
    def test_paste_inside(self) -> None:
        grid = _make_block_grid()
        clip = copy_block(grid, CellRange(0, 0, 1, 1))
        written = paste_block(grid, clip, 2, 2)
        assert written == 4
        assert grid["C3"].value == "1"
        assert grid["C3"].format.bold is True
        assert grid["D4"].value == "=SUM(A1:B1)"
        assert grid["D4"].formula == "=SUM(A1:B1)"

    def test_paste_replaces_destination_wholesale(self) -> None:
        grid = _make_block_grid()
        grid.set_format(3, 3, background_color="red")
        grid["D4"] = "old"
        clip = copy_block(grid, CellRange(0, 1, 0, 1))  # B1: plain "2"
        paste_block(grid, clip, 3, 3)
        assert grid["D4"].value == "2"
        assert grid["D4"].formula == ""
        assert grid["D4"].format == CellFormat()

    def test_paste_clipped_at_edge(self) -> None:
        grid = _make_block_grid()
        clip = copy_block(grid, CellRange(0, 0, 1, 1))
        written = paste_block(grid, clip, 3, 3)
        assert written == 1
        assert grid["D4"].value == "1"
        assert grid.dimensions == (4, 4)

    def test_pasted_cells_are_independent(self) -> None:
        grid = _make_block_grid()
        clip = copy_block(grid, CellRange(0, 0, 0, 0))
        paste_block(grid, clip, 2, 0)
        paste_block(grid, clip, 3, 0)
        grid["A3"] = "edited"
        assert grid["A4"].value == "1"
        assert grid.get(2, 0) is not grid.get(3, 0)

    def test_noop_cases(self) -> None:
        grid = _make_block_grid()
        clip = copy_block(grid, CellRange(0, 0, 0, 0))
        assert paste_block(grid, None, 0, 0) == 0
        assert paste_block(grid, clip, None, 0) == 0
        assert paste_block(grid, clip, 0, None) == 0
        assert paste_block(grid, ClipboardSelection([]), 0, 0) == 0
        assert grid["A1"].value == "1"


class TestEditSession:
    def test_starts_empty(self) -> None:
        session = EditSession(Grid())
        assert session.active_cell is None
        assert session.selection is None
        assert session.clipboard is None

    def test_begin_and_extend_selection(self) -> None:
        session = EditSession(Grid())
        session.begin_selection(1, 1)
        assert session.selection == CellRange(1, 1, 1, 1)
        session.extend_selection(3, 2)
        assert session.selection == CellRange(1, 1, 3, 2)

    def test_extend_without_selection_is_ignored(self) -> None:
        session = EditSession(Grid())
        session.extend_selection(3, 2)
        assert session.selection is None

    def test_selection_not_normalized(self) -> None:
        session = EditSession(Grid())
        session.begin_selection(3, 3)
        session.extend_selection(1, 1)
        assert session.selection == CellRange(3, 3, 1, 1)

    def test_copy_prefers_selection(self) -> None:
        session = EditSession(_make_block_grid())
        session.activate(3, 3)
        session.begin_selection(0, 0)
        session.extend_selection(1, 1)
        clip = session.copy()
        assert clip is not None
        assert clip.shape == (2, 2)

    def test_copy_active_cell_only(self) -> None:
        session = EditSession(_make_block_grid())
        session.activate(0, 1)
        clip = session.copy()
        assert clip is not None
        assert clip.values() == [["2"]]

    def test_copy_with_nothing_keeps_clipboard(self) -> None:
        session = EditSession(_make_block_grid())
        session.activate(0, 0)
        first = session.copy()
        session.clear_active()
        assert session.copy() is first
        assert session.clipboard is first

    def test_copy_with_nothing_at_all(self) -> None:
        session = EditSession(_make_block_grid())
        assert session.copy() is None

    def test_reversed_selection_copies_nothing(self) -> None:
        session = EditSession(_make_block_grid())
        session.begin_selection(1, 1)
        session.extend_selection(0, 0)
        clip = session.copy()
        assert clip is not None and clip.is_empty
        assert session.paste(2, 2) == 0

    def test_paste_defaults_to_active_cell(self) -> None:
        grid = _make_block_grid()
        session = EditSession(grid)
        session.activate(0, 0)
        session.copy()
        session.activate(2, 3)
        assert session.paste() == 1
        assert grid["D3"].value == "1"

    def test_paste_without_target_is_noop(self) -> None:
        session = EditSession(_make_block_grid())
        session.begin_selection(0, 0)
        session.copy()
        assert session.paste() == 0

    def test_copy_paste_two_by_two_clipped(self) -> None:
        grid = _make_block_grid()
        session = EditSession(grid)
        session.begin_selection(0, 0)
        session.extend_selection(1, 1)
        session.copy()
        assert session.paste(2, 3) == 2
        assert grid["D3"].value == "1"
        assert grid["D4"].value == "3"
        assert grid.dimensions == (4, 4)

    def test_toggle_bold(self) -> None:
        grid = _make_block_grid()
        session = EditSession(grid)
        session.activate(0, 0)
        session.toggle_bold()
        assert grid["A1"].format.bold is False
        session.toggle_bold()
        assert grid["A1"].format.bold is True

    def test_set_background_color(self) -> None:
        grid = _make_block_grid()
        session = EditSession(grid)
        session.activate(1, 0)
        session.set_background_color("#ffcc00")
        assert grid["A2"].format == CellFormat(bold=False, background_color="#ffcc00")

    def test_formatting_without_active_cell_is_noop(self) -> None:
        grid = _make_block_grid()
        session = EditSession(grid)
        session.toggle_bold()
        session.set_background_color("red")
        assert all(
            cell.format == CellFormat()
            for row in grid.iter_rows()
            for cell in row
            if cell is not grid.get(0, 0)
        )

    def test_active_cell_position(self) -> None:
        session = EditSession(Grid())
        session.activate(2, 5)
        assert session.active_cell == CellPosition(2, 5)
