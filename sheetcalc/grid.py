# grid.py
"""
Grid Builder: raw row strings -> rectangular table of normalized cell text.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from .exceptions import InconsistentColumns, InvalidDimensions

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return _WHITESPACE_RE.sub(" ", text.strip())


@dataclass
class Grid:
    rows: list[list[str]]

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_rows, self.num_cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def __getitem__(self, pos: tuple[int, int]) -> str:
        row, col = pos
        return self.rows[row][col]

    def __setitem__(self, pos: tuple[int, int], text: str) -> None:
        row, col = pos
        self.rows[row][col] = text

    def positions(self) -> Iterable[tuple[int, int]]:
        """Every (row, col), row-major."""
        for row in range(self.num_rows):
            for col in range(self.num_cols):
                yield row, col


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def initialize_cells(num_rows, num_cols) -> Grid:
    """Empty num_rows x num_cols grid; both counts must be positive ints."""
    if not (_is_count(num_rows) and _is_count(num_cols)):
        raise InvalidDimensions(num_rows, num_cols)
    return Grid([["" for _ in range(num_cols)] for _ in range(num_rows)])


def split_rows(text: str, row_delimiter: str = "\r\n") -> list[str]:
    return text.strip().split(row_delimiter)


def check_row(row_index: int, fields: Sequence[str], num_cols: int) -> None:
    if len(fields) != num_cols:
        logger.error(
            "Fix the csv before proceeding. Inconsistent number of columns in row %d",
            row_index + 1,
        )
        raise InconsistentColumns(row_index + 1, num_cols, len(fields))


def build_grid(rows: Sequence[str], delimiter: str = ",") -> Grid:
    """
    Split every row on `delimiter` and store the normalized fields.
    The first row fixes the column count; any row that disagrees aborts
    the build with InconsistentColumns (1-based row number).
    """
    num_rows = len(rows)
    num_cols = len(rows[0].split(delimiter)) if rows else 0
    grid = initialize_cells(num_rows, num_cols)

    for r, raw in enumerate(rows):
        fields = raw.split(delimiter)
        check_row(r, fields, num_cols)
        for c, field in enumerate(fields):
            grid[r, c] = normalize(field)

    logger.debug("Built %dx%d grid", num_rows, num_cols)
    return grid
