# evaluator.py
"""
Cell Evaluator.

A cell's text is a space-separated list of integer literals and cell
references; its value is their sum. Any bad token (empty, malformed, out of
bounds, or closing a reference cycle) turns the whole cell into the error
marker, and that marker propagates to every cell depending on it.

Cycle detection tracks the *positions* on the active resolution path: a
position is added just before its text is descended into and removed once it
has resolved. Two unrelated cells with identical text therefore never clash.

Resolution walks an explicit stack of frames rather than recursing, so a long
acyclic chain (A1 -> A2 -> ... -> A99 -> B1 ...) cannot exhaust Python's
recursion limit.
"""

import logging
import re
from dataclasses import dataclass

from .grid import Grid
from .reference import is_reference, resolve
from .results import ERROR, CellResult, CellValue

logger = logging.getLogger(__name__)

# ASCII digits only; int() would also take other scripts' digits
INTEGER_RE = re.compile(r"[+-]?[0-9]+")

Position = tuple[int, int]


@dataclass
class _Frame:
    position: Position | None       # None for the top-level text
    tokens: list[str]
    index: int = 0
    total: int = 0


def _fail(stack: list[_Frame], visited: set, memo: dict | None) -> CellResult:
    # every cell still on the path depends on the failed one
    for frame in stack:
        if frame.position is not None:
            visited.discard(frame.position)
            if memo is not None:
                memo[frame.position] = ERROR
    return ERROR


def evaluate_cell(
    text: str | None,
    grid: Grid,
    visited: set | None = None,
    memo: dict | None = None,
    marker: str = "#ERR",
) -> CellResult:
    """
    Resolve `text` against `grid` to a CellValue or ERROR.

    `visited` holds the positions currently being resolved; pass a fresh set
    per top-level cell. `memo` may be shared across a whole grid pass: a
    referenced cell's result does not depend on the path that reaches it.
    `marker` only names the error marker in diagnostics.
    """
    if text is None:
        logger.warning("Empty cell value found. Defaulting to %s", marker)
        return ERROR
    if visited is None:
        visited = set()

    stack = [_Frame(position=None, tokens=text.split(" "))]

    while True:
        frame = stack[-1]

        if frame.index == len(frame.tokens):
            stack.pop()
            result = CellValue(frame.total)
            if frame.position is not None:
                visited.discard(frame.position)
                if memo is not None:
                    memo[frame.position] = result
            if not stack:
                return result
            parent = stack[-1]
            parent.total += result.value
            parent.index += 1
            continue

        token = frame.tokens[frame.index]

        if token.strip() == "":
            logger.warning("Empty token found. Defaulting to %s", marker)
            return _fail(stack, visited, memo)

        if is_reference(token):
            row, col = resolve(token)
            if not grid.contains(row, col):
                logger.warning(
                    "Cell references an out of bounds cell -> '%s'. "
                    "Defaulting cell value to %s",
                    token,
                    marker,
                )
                return _fail(stack, visited, memo)

            pos = (row, col)
            if pos in visited:
                logger.warning(
                    "Circular dependence detected in cell '%s'. Defaulting them to %s",
                    token,
                    marker,
                )
                return _fail(stack, visited, memo)

            if memo is not None and pos in memo:
                cached = memo[pos]
                if not isinstance(cached, CellValue):
                    logger.debug("Reference %s already resolved to %s", token, marker)
                    return _fail(stack, visited, memo)
                frame.total += cached.value
                frame.index += 1
                continue

            visited.add(pos)
            stack.append(_Frame(position=pos, tokens=grid[pos].split(" ")))
            continue

        if INTEGER_RE.fullmatch(token):
            frame.total += int(token)
            frame.index += 1
            continue

        logger.warning(
            "Invalid cell value format -> '%s'. Verify. Defaulting to %s.", token, marker
        )
        return _fail(stack, visited, memo)
