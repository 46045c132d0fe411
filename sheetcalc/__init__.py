"""Evaluate comma-separated grids of integers and cell references."""

from .driver import evaluate_grid, process_csv
from .evaluator import evaluate_cell
from .exceptions import (
    GridError,
    InconsistentColumns,
    InvalidDimensions,
    SourceDecodeError,
    SourceEmpty,
    SourceNotFound,
)
from .grid import Grid, build_grid, initialize_cells
from .reference import resolve
from .results import ERROR, CellError, CellValue

__all__ = [
    "ERROR",
    "CellError",
    "CellValue",
    "Grid",
    "GridError",
    "InconsistentColumns",
    "InvalidDimensions",
    "SourceDecodeError",
    "SourceEmpty",
    "SourceNotFound",
    "build_grid",
    "evaluate_cell",
    "evaluate_grid",
    "initialize_cells",
    "process_csv",
    "resolve",
]
