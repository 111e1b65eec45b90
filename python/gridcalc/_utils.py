"""Coordinate helpers: zero-based (row, column) <-> ``A1`` labels."""

from __future__ import annotations

import re

from gridcalc._errors import InvalidAddressError

_A1_RE = re.compile(r"^([A-Z]+)([0-9]+)$")


def column_letter(index: int) -> str:
    """Zero-based column index -> bijective base-26 letters (0 -> "A", 26 -> "AA")."""
    if index < 0:
        raise InvalidAddressError(f"Column index must be non-negative: {index!r}")
    letters = ""
    while index >= 0:
        index, rem = divmod(index, 26)
        letters = chr(rem + 65) + letters
        index -= 1
    return letters


def column_index(letters: str) -> int:
    """Column letters -> zero-based index. Inverse of :func:`column_letter`."""
    if not letters or not all("A" <= ch <= "Z" for ch in letters):
        raise InvalidAddressError(f"Invalid column label: {letters!r}")
    index = 0
    for ch in letters:
        index = index * 26 + ord(ch) - 64
    return index - 1


def row_index(text: str) -> int:
    """1-based decimal row label -> zero-based row index."""
    if not text.isdigit() or not text.isascii():
        raise InvalidAddressError(f"Invalid row label: {text!r}")
    try:
        number = int(text)
    except ValueError as e:
        raise InvalidAddressError(f"Row label is too long: {text[:20]!r}...") from e
    if number < 1:
        raise InvalidAddressError(f"Row label must be 1 or greater: {text!r}")
    return number - 1


def rowcol_to_a1(row: int, column: int) -> str:
    """Zero-based (row, column) -> ``"A1"`` style label."""
    if row < 0:
        raise InvalidAddressError(f"Row index must be non-negative: {row!r}")
    return f"{column_letter(column)}{row + 1}"


def a1_to_rowcol(label: str) -> tuple[int, int]:
    """``"B3"`` -> (2, 1). Raises InvalidAddressError on anything else."""
    m = _A1_RE.match(label.strip())
    if not m:
        raise InvalidAddressError(f"Invalid A1 reference: {label!r}")
    return row_index(m.group(2)), column_index(m.group(1))
