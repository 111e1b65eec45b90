"""Aggregate builtins, numeric coercion and number-to-text formatting."""

from __future__ import annotations

import math
import re
from typing import Callable

# ---------------------------------------------------------------------------
# Numeric coercion
# ---------------------------------------------------------------------------

# Longest numeric prefix: "12abc" -> 12, "  3.5e2 kg" -> 350, "abc" -> None
_NUMERIC_PREFIX_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_number(text: str) -> float | None:
    """Read the leading number of a cell value, or None if there isn't one.

    Empty and non-numeric text yields None so the cell drops out of
    aggregates instead of raising.
    """
    m = _NUMERIC_PREFIX_RE.match(text)
    if not m:
        return None
    value = float(m.group(1))
    return None if math.isnan(value) else value


def _coerce_numeric(values: list[str]) -> list[float]:
    """Keep the values that read as numbers, in order."""
    result: list[float] = []
    for v in values:
        num = parse_number(v)
        if num is not None:
            result.append(num)
    return result


# ---------------------------------------------------------------------------
# Number -> text
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Shortest round-trip decimal text for *value*.

    Integral values print without a fraction (``12.0`` -> ``"12"``), plain
    notation is used for magnitudes in [1e-6, 1e21) and exponent notation
    outside it (``"1e-7"``, ``"1e+21"``).  NaN prints as ``"NaN"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    text = repr(abs(value))
    mantissa, _, exp_text = text.partition("e")
    exponent = int(exp_text) if exp_text else 0
    int_part, _, frac_part = mantissa.partition(".")

    digits = int_part + frac_part
    # n: position of the decimal point relative to the first digit
    n = len(int_part) + exponent
    stripped = digits.lstrip("0")
    n -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= n <= 21:
        out = digits + "0" * (n - k)
    elif 0 < n <= 21:
        out = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        out = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        e_text = f"e+{e}" if e >= 0 else f"e-{-e}"
        out = digits + e_text if k == 1 else f"{digits[0]}.{digits[1:]}{e_text}"
    return sign + out


# ---------------------------------------------------------------------------
# Builtins.  Each takes the raw text values of the resolved range.
# ---------------------------------------------------------------------------


def _builtin_sum(values: list[str]) -> float:
    total = 0.0
    for num in _coerce_numeric(values):
        total += num
    return total


def _builtin_average(values: list[str]) -> float:
    """Arithmetic mean; NaN when nothing in the range is numeric."""
    nums = _coerce_numeric(values)
    if not nums:
        return math.nan
    total = 0.0
    for num in nums:
        total += num
    return total / len(nums)


_BUILTINS: dict[str, Callable[[list[str]], float]] = {
    "SUM": _builtin_sum,
    "AVERAGE": _builtin_average,
}


class FunctionRegistry:
    """Registry of range aggregate implementations.

    Starts with the builtins and can be extended with custom functions.
    Lookups are case-insensitive.
    """

    def __init__(self) -> None:
        self._functions: dict[str, Callable[[list[str]], float]] = dict(_BUILTINS)

    def register(self, name: str, func: Callable[[list[str]], float]) -> None:
        self._functions[name.upper()] = func

    def get(self, name: str) -> Callable[[list[str]], float] | None:
        return self._functions.get(name.upper())

    def has(self, name: str) -> bool:
        return name.upper() in self._functions

    @property
    def supported_functions(self) -> frozenset[str]:
        return frozenset(self._functions.keys())
