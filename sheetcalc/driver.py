# driver.py
"""
Grid Evaluation Driver: evaluate every cell of a built grid and render the
result with the input's delimiters.
"""

import logging

from .config import Settings
from .evaluator import evaluate_cell
from .grid import Grid, build_grid, check_row, split_rows
from .reference import coordinate
from .results import CellResult, CellValue, format_result

logger = logging.getLogger(__name__)


def evaluate_grid(grid: Grid, marker: str = "#ERR") -> list[list[CellResult]]:
    """
    Same-shape grid of results, row by row then column by column.
    Each top-level cell gets its own visited set; resolved cells are shared
    through a memo so nothing is evaluated twice in one pass.
    """
    memo: dict = {}
    results = []
    for r, row in enumerate(grid.rows):
        check_row(r, row, grid.num_cols)
        evaluated = []
        for c, text in enumerate(row):
            pos = (r, c)
            if pos in memo:
                result = memo[pos]
            else:
                result = evaluate_cell(text, grid, visited=set(), memo=memo, marker=marker)
                memo[pos] = result
            if not isinstance(result, CellValue):
                logger.warning(
                    "Cell %s (row %d) evaluated to %s", coordinate(r, c), r + 1, marker
                )
            evaluated.append(result)
        results.append(evaluated)
    return results


def render(results: list[list[CellResult]], settings: Settings | None = None) -> str:
    settings = settings or Settings()
    return settings.ROW_DELIMITER.join(
        settings.FIELD_DELIMITER.join(format_result(v, settings.ERROR_MARKER) for v in row)
        for row in results
    )


def process_csv(text: str, settings: Settings | None = None) -> str:
    """Raw CSV text -> evaluated CSV text. Fatal input errors propagate."""
    settings = settings or Settings()
    rows = split_rows(text, settings.ROW_DELIMITER)
    grid = build_grid(rows, settings.FIELD_DELIMITER)
    return render(evaluate_grid(grid, settings.ERROR_MARKER), settings)
