"""Cell: the unit of storage owned by a Grid."""

from __future__ import annotations

from gridcalc._errors import InvariantViolationError
from gridcalc._styles import CellFormat


class Cell:
    """Literal or computed ``value``, the ``formula`` that produced it, and a format.

    ``formula`` is either empty or starts with ``=``.  ``value`` may be stale
    with respect to ``formula``; evaluation only happens on request.
    """

    __slots__ = ("value", "formula", "format")

    def __init__(
        self,
        value: str = "",
        formula: str = "",
        format: CellFormat | None = None,  # noqa: A002
    ) -> None:
        if formula and not formula.startswith("="):
            raise InvariantViolationError(f"Formula must be empty or start with '=': {formula!r}")
        self.value = value
        self.formula = formula
        self.format = format if format is not None else CellFormat()

    @property
    def is_formula(self) -> bool:
        return bool(self.formula)

    @property
    def display_text(self) -> str:
        """What an editor shows in the cell: the formula if any, else the value."""
        return self.formula or self.value

    def copy(self) -> Cell:
        # CellFormat is frozen, so sharing it keeps the copy independent.
        return Cell(self.value, self.formula, self.format)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self.value == other.value
            and self.formula == other.formula
            and self.format == other.format
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Cell value={self.value!r} formula={self.formula!r}>"
