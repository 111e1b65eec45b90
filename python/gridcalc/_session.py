"""Editing session state: active cell, selection rectangle and clipboard.

One :class:`EditSession` per editor session.  Nothing here is persisted with
the grid.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from gridcalc._cell import Cell
from gridcalc._grid import Grid
from gridcalc.calc._parser import CellRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellPosition:
    """Zero-based (row, column) of a single cell."""

    row: int
    column: int


class ClipboardSelection:
    """Detached copy of a rectangular block of cells.

    Holds its own :class:`Cell` copies, so editing the grid after a copy
    never changes what gets pasted.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: list[list[Cell]]) -> None:
        self._rows = [[cell.copy() for cell in row] for row in rows]

    @property
    def is_empty(self) -> bool:
        return not any(self._rows)

    @property
    def shape(self) -> tuple[int, int]:
        """(n_rows, widest row)."""
        return len(self._rows), max((len(row) for row in self._rows), default=0)

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """(row offset, column offset, cell) for every copied cell."""
        for dr, row in enumerate(self._rows):
            for dc, cell in enumerate(row):
                yield dr, dc, cell

    def values(self) -> list[list[str]]:
        return [[cell.value for cell in row] for row in self._rows]

    def __repr__(self) -> str:
        n_rows, n_cols = self.shape
        return f"<ClipboardSelection {n_rows}x{n_cols}>"


# ---------------------------------------------------------------------------
# Block copy / paste
# ---------------------------------------------------------------------------


def copy_block(grid: Grid, cell_range: CellRange) -> ClipboardSelection:
    """Snapshot *cell_range* row by row.

    The range is walked exactly as written, so reversed corners give an
    empty (or ragged-empty) block.  Raises OutOfBoundsError if the range
    reaches past the grid.
    """
    rows = [[grid.get(r, c) for r, c in row] for row in cell_range.iter_rows()]
    return ClipboardSelection(rows)


def paste_block(
    grid: Grid,
    clipboard: ClipboardSelection | None,
    target_row: int | None,
    target_column: int | None,
) -> int:
    """Overwrite cells anchored at the target with copies from *clipboard*.

    Value, formula and format all replace the destination.  Cells that
    would land outside the grid are dropped; the grid never grows.
    Returns the number of cells written.
    """
    if clipboard is None or target_row is None or target_column is None:
        return 0

    written = 0
    dropped = 0
    for dr, dc, cell in clipboard.iter_cells():
        row, column = target_row + dr, target_column + dc
        if grid.in_bounds(row, column):
            grid.replace_cell(row, column, cell.copy())
            written += 1
        else:
            dropped += 1
    if dropped:
        logger.debug("Paste at (%d, %d): %d cell(s) clipped", target_row, target_column, dropped)
    return written


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class EditSession:
    """Ephemeral editing state bound to one grid.

    The active cell and the selection rectangle are independent.  Selection
    corners are kept exactly as touched: :meth:`begin_selection` sets both
    corners, :meth:`extend_selection` moves only the end corner.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.active_cell: CellPosition | None = None
        self.selection: CellRange | None = None
        self.clipboard: ClipboardSelection | None = None

    # -- active cell ---------------------------------------------------

    def activate(self, row: int, column: int) -> None:
        self.active_cell = CellPosition(row, column)

    def clear_active(self) -> None:
        self.active_cell = None

    # -- selection -----------------------------------------------------

    def begin_selection(self, row: int, column: int) -> None:
        """Pointer down: start a 1x1 selection at (row, column)."""
        self.selection = CellRange(row, column, row, column)

    def extend_selection(self, row: int, column: int) -> None:
        """Pointer up: move the end corner.  Ignored without a selection."""
        if self.selection is None:
            return
        self.selection = CellRange(
            self.selection.start_row, self.selection.start_col, row, column
        )

    def clear_selection(self) -> None:
        self.selection = None

    # -- clipboard -----------------------------------------------------

    def copy(self) -> ClipboardSelection | None:
        """Copy the selection, else the active cell, into the clipboard.

        With neither present the clipboard is left as it was.
        """
        if self.selection is not None:
            self.clipboard = copy_block(self.grid, self.selection)
        elif self.active_cell is not None:
            pos = self.active_cell
            self.clipboard = copy_block(
                self.grid, CellRange(pos.row, pos.column, pos.row, pos.column)
            )
        return self.clipboard

    def paste(self, row: int | None = None, column: int | None = None) -> int:
        """Paste the clipboard at (row, column), defaulting to the active cell."""
        if row is None and column is None and self.active_cell is not None:
            row, column = self.active_cell.row, self.active_cell.column
        return paste_block(self.grid, self.clipboard, row, column)

    # -- formatting of the active cell ----------------------------------

    def toggle_bold(self) -> None:
        if self.active_cell is None:
            return
        pos = self.active_cell
        cell = self.grid.get(pos.row, pos.column)
        self.grid.set_format(pos.row, pos.column, bold=not cell.format.bold)

    def set_background_color(self, color: str) -> None:
        if self.active_cell is None:
            return
        pos = self.active_cell
        self.grid.set_format(pos.row, pos.column, background_color=color)
