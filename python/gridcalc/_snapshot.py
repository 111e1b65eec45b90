"""Snapshot codec: whole-grid (de)serialization to JSON-shaped data.

Wire shape, one record per cell, rows in order::

    [[{"value": "3", "formula": "", "format": {"bold": false, "backgroundColor": "white"}}, ...], ...]

Loading validates every record and rejects ragged or empty input, so a
:class:`Grid` is never built in a broken state.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter, ValidationError, field_validator

from gridcalc._cell import Cell
from gridcalc._errors import InvalidSnapshotError
from gridcalc._grid import Grid
from gridcalc._styles import CellFormat

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "spreadsheet.json"


class FormatRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bold: StrictBool
    background_color: StrictStr = Field(alias="backgroundColor")


class CellRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: StrictStr
    formula: StrictStr
    format: FormatRecord  # noqa: A003

    @field_validator("formula")
    @classmethod
    def _formula_starts_with_equals(cls, v: str) -> str:
        if v and not v.startswith("="):
            raise ValueError("formula must be empty or start with '='")
        return v

    @classmethod
    def from_cell(cls, cell: Cell) -> CellRecord:
        return cls(
            value=cell.value,
            formula=cell.formula,
            format=FormatRecord(
                bold=cell.format.bold,
                background_color=cell.format.background_color,
            ),
        )

    def to_cell(self) -> Cell:
        return Cell(
            self.value,
            self.formula,
            CellFormat(bold=self.format.bold, background_color=self.format.background_color),
        )


_SNAPSHOT_ADAPTER: TypeAdapter[list[list[CellRecord]]] = TypeAdapter(list[list[CellRecord]])


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------


def _records(grid: Grid) -> list[list[CellRecord]]:
    try:
        return [[CellRecord.from_cell(cell) for cell in row] for row in grid.iter_rows()]
    except ValidationError as e:
        raise InvalidSnapshotError(f"Grid cannot be encoded: {e}") from e


def to_snapshot(grid: Grid) -> list[list[dict[str, Any]]]:
    """Grid -> list of rows of plain cell dicts (camelCase ``backgroundColor``)."""
    return [[rec.model_dump(by_alias=True) for rec in row] for row in _records(grid)]


def dumps(grid: Grid, indent: int | None = None) -> str:
    """Grid -> JSON text.  Raises InvalidSnapshotError for a cell that breaks the record rules."""
    records = _records(grid)
    return _SNAPSHOT_ADAPTER.dump_json(records, by_alias=True, indent=indent).decode("utf-8")


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


def _build_grid(records: list[list[CellRecord]]) -> Grid:
    if not records:
        raise InvalidSnapshotError("Snapshot has no rows")
    width = len(records[0])
    if width == 0:
        raise InvalidSnapshotError("Snapshot row 1 has no cells")
    for i, row in enumerate(records, start=1):
        if len(row) != width:
            raise InvalidSnapshotError(
                f"Snapshot is not rectangular: row {i} has {len(row)} cells, expected {width}"
            )
    logger.debug("Loaded %dx%d snapshot", len(records), width)
    return Grid._from_cells([[rec.to_cell() for rec in row] for row in records])  # noqa: SLF001


def from_snapshot(data: Any) -> Grid:
    """Plain rows of cell dicts -> Grid.  Raises InvalidSnapshotError."""
    try:
        records = _SNAPSHOT_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise InvalidSnapshotError(f"Invalid snapshot: {e}") from e
    return _build_grid(records)


def loads(text: str | bytes) -> Grid:
    """JSON text -> Grid.  Malformed JSON is also an InvalidSnapshotError."""
    try:
        records = _SNAPSHOT_ADAPTER.validate_json(text)
    except ValidationError as e:
        raise InvalidSnapshotError(f"Invalid snapshot: {e}") from e
    return _build_grid(records)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def save(grid: Grid, filename: str | os.PathLike[str] = DEFAULT_FILENAME) -> None:
    """Write the grid as a UTF-8 JSON snapshot."""
    Path(filename).write_text(dumps(grid), encoding="utf-8")


def load(filename: str | os.PathLike[str] = DEFAULT_FILENAME) -> Grid:
    """Read a JSON snapshot written by :func:`save`."""
    return loads(Path(filename).read_bytes())
