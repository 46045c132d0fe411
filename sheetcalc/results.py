# results.py

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CellValue:
    value: int


@dataclass(frozen=True)
class CellError:
    """Marker for a cell that could not be resolved. Carries no message."""


ERROR = CellError()

CellResult = Union[CellValue, CellError]


def format_result(result: CellResult, marker: str = "#ERR") -> str:
    if isinstance(result, CellValue):
        return str(result.value)
    return marker
