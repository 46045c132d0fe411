# reference.py

import re

from openpyxl.utils import column_index_from_string, get_column_letter

# Matches a whole token such as A1, D5, Z99. Row part is one or two ASCII
# digits; anything else (lowercase, $A$1, A100) is not a reference.
REFERENCE_RE = re.compile(r"[A-Z]+[0-9]{1,2}")

_PARTS_RE = re.compile(r"(?P<col>[A-Z]+)(?P<row>[0-9]+)")

# openpyxl only knows columns A..ZZZ
_OPENPYXL_MAX_LETTERS = 3
_OPENPYXL_MAX_COLUMN = 18278


def column_index(letters: str) -> int:
    """Zero-based column index, bijective base 26: A -> 0, Z -> 25, AA -> 26."""
    if len(letters) == 1:
        return ord(letters) - ord("A")
    if len(letters) <= _OPENPYXL_MAX_LETTERS:
        return column_index_from_string(letters) - 1
    index = 0
    for ch in letters:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


def column_letters(col: int) -> str:
    """Inverse of column_index for col >= 0."""
    if col < _OPENPYXL_MAX_COLUMN:
        return get_column_letter(col + 1)
    letters = ""
    n = col + 1
    while n:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def is_reference(token: str) -> bool:
    return REFERENCE_RE.fullmatch(token) is not None


def resolve(token: str) -> tuple[int, int]:
    """
    Convert a reference token into a zero-based (row, col) pair.
    "A12" -> (11, 0), "D5" -> (4, 3). Bounds are not checked here; "A0"
    gives row -1 and the caller rejects it against the grid.
    """
    m = _PARTS_RE.fullmatch(token)
    if m is None:
        raise ValueError(f"Not a cell reference: {token!r}")
    col = column_index(m.group("col"))
    row = int(m.group("row")) - 1
    return row, col


def coordinate(row: int, col: int) -> str:
    """Inverse of resolve: (4, 3) -> "D5"."""
    if col < 0:
        return f"?{row + 1}"
    return f"{column_letters(col)}{row + 1}"
