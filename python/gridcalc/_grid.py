"""Grid: rectangular cell store with ``grid['A1']`` access."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from gridcalc._cell import Cell
from gridcalc._errors import InvariantViolationError, OutOfBoundsError
from gridcalc._utils import a1_to_rowcol, column_letter
from gridcalc.calc._evaluator import evaluate

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 10


class Grid:
    """Owns a ``rows x columns`` array of cells.

    Every row always holds exactly ``columns`` cells.  The grid only grows:
    rows and columns can be appended, never removed.  All indices are
    zero-based.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> None:
        if rows < 1 or columns < 1:
            raise InvariantViolationError(
                f"Grid needs at least one row and one column, got {rows}x{columns}"
            )
        self._rows: list[list[Cell]] = [
            [Cell() for _ in range(columns)] for _ in range(rows)
        ]

    @classmethod
    def _from_cells(cls, rows: list[list[Cell]]) -> Grid:
        """Adopt an already validated rectangular array of cells."""
        grid = object.__new__(cls)
        grid._rows = rows
        return grid

    # ------------------------------------------------------------------
    # Extent
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def dimensions(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self.row_count, self.column_count

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.row_count and 0 <= column < self.column_count

    def column_labels(self) -> list[str]:
        """Header letters for every column: ``["A", "B", ...]``."""
        return [column_letter(c) for c in range(self.column_count)]

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get(self, row: int, column: int) -> Cell:
        """The cell at (row, column). Raises OutOfBoundsError outside the grid."""
        if not self.in_bounds(row, column):
            raise OutOfBoundsError(row, column, self.row_count, self.column_count)
        return self._rows[row][column]

    def __getitem__(self, key: str) -> Cell:
        """``grid['B3']`` -> Cell."""
        row, column = a1_to_rowcol(key)
        return self.get(row, column)

    def __setitem__(self, key: str, value: str) -> None:
        """``grid['B3'] = '42'``: shorthand for :meth:`set_value`."""
        row, column = a1_to_rowcol(key)
        self.set_value(row, column, value)

    def display_text(self, row: int, column: int) -> str:
        return self.get(row, column).display_text

    def set_value(self, row: int, column: int, text: str) -> None:
        """User edit: store *text* as the value; keep it as the formula too if it starts with ``=``.

        Does not evaluate anything.
        """
        cell = self.get(row, column)
        cell.value = text
        cell.formula = text if text.startswith("=") else ""

    def apply_evaluated_formula(self, row: int, column: int) -> None:
        """Evaluate the cell's formula and write the result back with :meth:`set_value`.

        A numeric result is not a formula, so the cell's ``formula`` is
        cleared.  No-op when the cell holds no formula.  Evaluation errors
        propagate and leave the cell untouched.
        """
        cell = self.get(row, column)
        if not cell.formula:
            return
        result = evaluate(cell.formula, self)
        self.set_value(row, column, result)

    def replace_cell(self, row: int, column: int, cell: Cell) -> None:
        """Put *cell* at (row, column), replacing value, formula and format at once."""
        if not self.in_bounds(row, column):
            raise OutOfBoundsError(row, column, self.row_count, self.column_count)
        self._rows[row][column] = cell

    def set_format(
        self,
        row: int,
        column: int,
        bold: bool | None = None,
        background_color: str | None = None,
    ) -> None:
        """Merge the given format fields into the cell; ``None`` leaves a field alone."""
        cell = self.get(row, column)
        cell.format = cell.format.merged(bold=bold, background_color=background_color)

    # ------------------------------------------------------------------
    # Structural growth
    # ------------------------------------------------------------------

    def append_row(self) -> None:
        """Append one row of empty cells, as wide as the grid."""
        columns = self.column_count
        if columns == 0:
            raise InvariantViolationError("Cannot append a row to a grid with no columns")
        self._rows.append([Cell() for _ in range(columns)])
        logger.debug("Appended row %d", self.row_count)

    def append_column(self) -> None:
        """Append one empty cell to every row."""
        for row in self._rows:
            row.append(Cell())
        logger.debug("Appended column %s", column_letter(self.column_count - 1))

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def iter_rows(self, values_only: bool = False) -> Iterator[tuple[Any, ...]]:
        """Yield each row as a tuple of cells, or of their values with ``values_only``."""
        for row in self._rows:
            if values_only:
                yield tuple(cell.value for cell in row)
            else:
                yield tuple(row)

    def __repr__(self) -> str:
        return f"<Grid {self.row_count}x{self.column_count}>"
