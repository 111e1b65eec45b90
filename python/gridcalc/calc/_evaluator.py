"""FormulaEvaluator: on-demand evaluation of ``=FUNC(A1:B5)`` formulas.

Evaluation is pull-based.  Nothing is cached and nothing is recalculated
when a referenced cell changes; the caller decides when to evaluate and
whether to write the result back into the grid.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridcalc.calc._functions import FunctionRegistry, format_number
from gridcalc.calc._parser import CellRange, parse_formula

if TYPE_CHECKING:
    from gridcalc._grid import Grid

logger = logging.getLogger(__name__)


class FormulaEvaluator:
    """Evaluates formula text against a Grid.

    Usage::

        evaluator = FormulaEvaluator()
        evaluator.evaluate("=SUM(A1:A3)", grid)   # -> "12"
    """

    def __init__(self, functions: FunctionRegistry | None = None) -> None:
        self._functions = functions if functions is not None else FunctionRegistry()

    @property
    def functions(self) -> FunctionRegistry:
        return self._functions

    def evaluate(self, formula: str, grid: Grid) -> str:
        """Evaluate *formula* and return the result as text.

        Text that does not start with ``=`` is returned unchanged, as is a
        formula naming a function the registry doesn't know.  Malformed
        formulas raise FormulaSyntaxError (or InvalidAddressError for a row
        of 0); the grid is never modified.
        """
        if not formula.startswith("="):
            return formula

        call = parse_formula(formula)
        func = self._functions.get(call.name)
        if func is None:
            logger.debug("Unsupported function %r, leaving formula as-is", call.name)
            return formula

        values = self.resolve_range(call.cell_range, grid)
        return format_number(func(values))

    @staticmethod
    def resolve_range(cell_range: CellRange, grid: Grid) -> list[str]:
        """Row-major raw values of the cells of *cell_range* that exist in *grid*.

        Positions past the grid's extent are skipped, and a reversed range
        resolves to nothing.
        """
        n_rows, n_cols = grid.dimensions
        # Clamp to the grid so huge ranges stay bounded by grid size.
        row_stop = min(cell_range.end_row, n_rows - 1) + 1
        col_stop = min(cell_range.end_col, n_cols - 1) + 1
        if row_stop <= cell_range.end_row or col_stop <= cell_range.end_col:
            logger.debug("Range %s extends past the %dx%d grid", cell_range, n_rows, n_cols)
        return [
            grid.get(r, c).value
            for r in range(cell_range.start_row, row_stop)
            for c in range(cell_range.start_col, col_stop)
        ]


_default_evaluator = FormulaEvaluator()


def evaluate(formula: str, grid: Grid) -> str:
    """Evaluate *formula* against *grid* with the builtin functions."""
    return _default_evaluator.evaluate(formula, grid)
