"""gridcalc.calc - Formula evaluation engine for gridcalc grids."""

from gridcalc.calc._evaluator import FormulaEvaluator, evaluate
from gridcalc.calc._functions import FunctionRegistry, format_number, parse_number
from gridcalc.calc._parser import CellRange, FormulaCall, parse_cell_ref, parse_formula, parse_range

__all__ = [
    "CellRange",
    "FormulaCall",
    "FormulaEvaluator",
    "FunctionRegistry",
    "evaluate",
    "format_number",
    "parse_cell_ref",
    "parse_formula",
    "parse_number",
    "parse_range",
]
