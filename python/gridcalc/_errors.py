"""Exception hierarchy for grid, formula and snapshot failures.

Every error also derives from the closest builtin so callers that catch
``ValueError`` or ``IndexError`` keep working.
"""

from __future__ import annotations


class GridError(Exception):
    """Base class for all gridcalc errors."""


class OutOfBoundsError(GridError, IndexError):
    """Cell access outside the current grid extent."""

    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Cell ({row}, {column}) is outside the {rows}x{columns} grid"
        )
        self.row = row
        self.column = column


class InvalidAddressError(GridError, ValueError):
    """Malformed column letters, row number or A1 label."""


class FormulaSyntaxError(GridError, ValueError):
    """Formula text that does not follow ``=FUNC(A1:B2)``."""


class InvalidSnapshotError(GridError, ValueError):
    """Serialized grid that is ragged, empty or has mistyped fields."""


class InvariantViolationError(GridError, RuntimeError):
    """Structural operation that would break grid rectangularity."""
