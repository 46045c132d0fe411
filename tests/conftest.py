import pytest

from sheetcalc.grid import build_grid


@pytest.fixture
def make_grid():
    """Build a grid from a list of comma-separated row strings."""
    def _make(*rows):
        return build_grid(list(rows))
    return _make
