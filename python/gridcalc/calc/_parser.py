"""Formula parser for the ``=FUNC(A1:B5)`` grammar and literal range expansion."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from gridcalc._errors import FormulaSyntaxError
from gridcalc._utils import column_index, row_index, rowcol_to_a1

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

# Column letters then row digits, nothing else: A1, AZ23
_CELL_REF_RE = re.compile(r"^([A-Z]+)([0-9]+)$")


# ---------------------------------------------------------------------------
# Range: two corners, iterated exactly as written
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CellRange:
    """Inclusive rectangle between two zero-based corners.

    Corners are NOT normalized. ``start`` is treated as top-left and ``end``
    as bottom-right as literally given, so a range whose start lies below or
    right of its end covers no cells at all.
    """

    start_row: int
    start_col: int
    end_row: int
    end_col: int

    @property
    def shape(self) -> tuple[int, int]:
        """(n_rows, n_cols); zero on any reversed axis."""
        return (
            max(self.end_row - self.start_row + 1, 0),
            max(self.end_col - self.start_col + 1, 0),
        )

    @property
    def is_empty(self) -> bool:
        n_rows, n_cols = self.shape
        return n_rows == 0 or n_cols == 0

    def iter_rows(self) -> Iterator[list[tuple[int, int]]]:
        """Yield one list of (row, col) per row, top to bottom."""
        for r in range(self.start_row, self.end_row + 1):
            yield [(r, c) for c in range(self.start_col, self.end_col + 1)]

    def iter_cells(self) -> Iterator[tuple[int, int]]:
        """Row-major (row, col) pairs."""
        for row in self.iter_rows():
            yield from row

    @property
    def label(self) -> str:
        start = rowcol_to_a1(self.start_row, self.start_col)
        end = rowcol_to_a1(self.end_row, self.end_col)
        return f"{start}:{end}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class FormulaCall:
    """A parsed ``=NAME(START:END)`` formula."""

    name: str  # as written; matching is case-insensitive
    cell_range: CellRange


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_cell_ref(ref: str) -> tuple[int, int]:
    """Split a ref like ``"AZ23"`` into zero-based (row, col).

    Missing letters or digits is a FormulaSyntaxError.  A row of ``0`` is an
    InvalidAddressError raised by the address codec.
    """
    m = _CELL_REF_RE.match(ref.strip())
    if not m:
        raise FormulaSyntaxError(f"Invalid cell reference: {ref!r}")
    return row_index(m.group(2)), column_index(m.group(1))


def parse_range(range_ref: str) -> CellRange:
    """Parse ``"A1:B5"`` (split on the first colon) into a :class:`CellRange`."""
    start_ref, sep, end_ref = range_ref.partition(":")
    if not sep:
        raise FormulaSyntaxError(f"Range is missing ':': {range_ref!r}")
    start_row, start_col = parse_cell_ref(start_ref)
    end_row, end_col = parse_cell_ref(end_ref)
    return CellRange(start_row, start_col, end_row, end_col)


def parse_formula(formula: str) -> FormulaCall:
    """Parse ``=NAME(A1:B5)``.

    ``NAME`` is everything between ``=`` and the first ``(``; the range is
    everything between the first ``(`` and the first ``)``.  Nested
    parentheses are not supported.
    """
    if not formula.startswith("="):
        raise FormulaSyntaxError(f"Formula must start with '=': {formula!r}")
    open_idx = formula.find("(")
    if open_idx < 0:
        raise FormulaSyntaxError(f"Formula is missing '(': {formula!r}")
    close_idx = formula.find(")")
    if close_idx < 0:
        raise FormulaSyntaxError(f"Formula is missing ')': {formula!r}")
    if close_idx < open_idx:
        raise FormulaSyntaxError(f"')' before '(' in formula: {formula!r}")
    name = formula[1:open_idx]
    return FormulaCall(name=name, cell_range=parse_range(formula[open_idx + 1 : close_idx]))
