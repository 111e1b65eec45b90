"""Typer CLI: edit and evaluate a grid stored as a JSON snapshot file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from gridcalc import _snapshot
from gridcalc._errors import GridError
from gridcalc._grid import DEFAULT_COLUMNS, DEFAULT_ROWS, Grid
from gridcalc._session import copy_block, paste_block
from gridcalc._utils import a1_to_rowcol
from gridcalc.calc import evaluate, parse_range

app = typer.Typer(
    help="Edit and evaluate a spreadsheet grid stored as a JSON snapshot.",
    no_args_is_help=True,
)

SnapshotFile = Annotated[Path, typer.Argument(help="Path to the grid snapshot (.json)")]
Label = Annotated[str, typer.Argument(help="Cell label, e.g. 'B3'")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _fail(err: GridError) -> typer.Exit:
    typer.echo(f"Error: {err}", err=True)
    return typer.Exit(1)


def _load(path: Path) -> Grid:
    try:
        return _snapshot.load(path)
    except FileNotFoundError:
        typer.echo(f"Error: {path} does not exist", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        typer.echo(f"Error: cannot read {path}: {e.strerror or e}", err=True)
        raise typer.Exit(1) from e
    except GridError as e:
        raise _fail(e) from e


def _save(grid: Grid, path: Path) -> None:
    try:
        _snapshot.save(grid, path)
    except OSError as e:
        typer.echo(f"Error: cannot write {path}: {e.strerror or e}", err=True)
        raise typer.Exit(1) from e
    except GridError as e:
        raise _fail(e) from e


# ---------------------------------------------------------------------------
# gridcalc new / show
# ---------------------------------------------------------------------------


@app.command("new")
def new(
    file: SnapshotFile,
    rows: Annotated[int, typer.Option("--rows", min=1, help="Number of rows")] = DEFAULT_ROWS,
    columns: Annotated[int, typer.Option("--columns", min=1, help="Number of columns")] = DEFAULT_COLUMNS,
    force: Annotated[bool, typer.Option("--force", help="Overwrite the file if it already exists")] = False,
) -> None:
    """Create an empty grid snapshot."""
    if file.exists() and not force:
        typer.echo(f"Error: {file} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(1)
    _save(Grid(rows, columns), file)
    typer.echo(f"Created {rows}x{columns} grid in {file}")


@app.command("show")
def show(file: SnapshotFile) -> None:
    """Print the grid: a header of column letters, then one numbered line per row."""
    grid = _load(file)
    typer.echo("\t".join(["", *grid.column_labels()]))
    for i, row in enumerate(grid.iter_rows(), start=1):
        typer.echo("\t".join([str(i), *(cell.display_text for cell in row)]))


# ---------------------------------------------------------------------------
# gridcalc set / eval / format
# ---------------------------------------------------------------------------


@app.command("set")
def set_cell(file: SnapshotFile, label: Label, text: Annotated[str, typer.Argument(help="New cell text")]) -> None:
    """Enter TEXT into a cell. Text starting with '=' is stored as a formula."""
    grid = _load(file)
    try:
        grid[label] = text
    except GridError as e:
        raise _fail(e) from e
    _save(grid, file)


@app.command("eval")
def eval_cell(
    file: SnapshotFile,
    label: Label,
    write: Annotated[bool, typer.Option("--write", help="Store the result in the cell")] = False,
) -> None:
    """Evaluate the formula in a cell and print the result."""
    grid = _load(file)
    try:
        row, column = a1_to_rowcol(label)
        cell = grid.get(row, column)
        result = evaluate(cell.formula or cell.value, grid)
        if write:
            grid.apply_evaluated_formula(row, column)
    except GridError as e:
        raise _fail(e) from e
    if write:
        _save(grid, file)
    typer.echo(result)


@app.command("format")
def format_cell(
    file: SnapshotFile,
    label: Label,
    bold: Annotated[Optional[bool], typer.Option("--bold/--no-bold", help="Set or clear bold")] = None,
    background: Annotated[Optional[str], typer.Option("--background", help="Background color, e.g. '#ffcc00'")] = None,
) -> None:
    """Change a cell's format; unspecified fields are left as they are."""
    grid = _load(file)
    try:
        row, column = a1_to_rowcol(label)
        grid.set_format(row, column, bold=bold, background_color=background)
    except GridError as e:
        raise _fail(e) from e
    _save(grid, file)


# ---------------------------------------------------------------------------
# gridcalc grow / copy
# ---------------------------------------------------------------------------


@app.command("grow")
def grow(
    file: SnapshotFile,
    rows: Annotated[int, typer.Option("--rows", min=0, help="Rows to append")] = 0,
    columns: Annotated[int, typer.Option("--columns", min=0, help="Columns to append")] = 0,
) -> None:
    """Append empty rows and/or columns."""
    grid = _load(file)
    for _ in range(rows):
        grid.append_row()
    for _ in range(columns):
        grid.append_column()
    _save(grid, file)
    n_rows, n_cols = grid.dimensions
    typer.echo(f"Grid is now {n_rows}x{n_cols}")


@app.command("copy")
def copy_cells(
    file: SnapshotFile,
    source: Annotated[str, typer.Argument(help="Range to copy, e.g. 'A1:B2' or 'C4'")],
    target: Annotated[str, typer.Argument(help="Top-left cell to paste at, e.g. 'D1'")],
) -> None:
    """Copy a block of cells and paste it at TARGET, clipped to the grid."""
    grid = _load(file)
    try:
        cell_range = parse_range(source if ":" in source else f"{source}:{source}")
        clipboard = copy_block(grid, cell_range)
        row, column = a1_to_rowcol(target)
        written = paste_block(grid, clipboard, row, column)
    except GridError as e:
        raise _fail(e) from e
    _save(grid, file)
    typer.echo(f"Pasted {written} cell(s) at {target}")


if __name__ == "__main__":
    app()
