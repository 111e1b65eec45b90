"""gridcalc: the cell store, formula engine and clipboard behind a spreadsheet editor.

Usage::

    from gridcalc import Grid, EditSession, evaluate

    grid = Grid()                      # 10 x 10, all cells empty
    grid["A1"] = "3"
    grid["A2"] = "4"
    grid["A3"] = "=SUM(A1:A2)"
    evaluate("=SUM(A1:A2)", grid)      # -> "7"
    grid.apply_evaluated_formula(2, 0) # A3 now holds "7"

    session = EditSession(grid)
    session.begin_selection(0, 0)
    session.extend_selection(2, 0)
    session.copy()
    session.paste(0, 1)                # column B now mirrors column A
"""

from gridcalc._cell import Cell
from gridcalc._errors import (
    FormulaSyntaxError,
    GridError,
    InvalidAddressError,
    InvalidSnapshotError,
    InvariantViolationError,
    OutOfBoundsError,
)
from gridcalc._grid import DEFAULT_COLUMNS, DEFAULT_ROWS, Grid
from gridcalc._session import CellPosition, ClipboardSelection, EditSession, copy_block, paste_block
from gridcalc._snapshot import dumps, from_snapshot, load, loads, save, to_snapshot
from gridcalc._styles import DEFAULT_BACKGROUND, CellFormat
from gridcalc._utils import a1_to_rowcol, column_index, column_letter, row_index, rowcol_to_a1
from gridcalc.calc import CellRange, FormulaEvaluator, evaluate

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Cell",
    "CellFormat",
    "CellPosition",
    "CellRange",
    "ClipboardSelection",
    "DEFAULT_BACKGROUND",
    "DEFAULT_COLUMNS",
    "DEFAULT_ROWS",
    "EditSession",
    "FormulaEvaluator",
    "FormulaSyntaxError",
    "Grid",
    "GridError",
    "InvalidAddressError",
    "InvalidSnapshotError",
    "InvariantViolationError",
    "OutOfBoundsError",
    "a1_to_rowcol",
    "column_index",
    "column_letter",
    "copy_block",
    "dumps",
    "evaluate",
    "from_snapshot",
    "load",
    "loads",
    "paste_block",
    "row_index",
    "rowcol_to_a1",
    "save",
    "to_snapshot",
]
