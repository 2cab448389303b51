"""Common type aliases, cell sentinels and enumerations.

Cell values stored in a :class:`drunken_bishop.grid.Grid` are plain ``int``.
Non-negative values are visit counters; the two negative sentinels mark the
walk's start and end cells and always take precedence over a counter when the
grid is rendered.
"""

import sys
from enum import StrEnum, auto
from typing import Tuple

CellValue = int
Size = Tuple[int, int]

VALUE_MAX: CellValue = sys.maxsize
VALUE_S: CellValue = -1
VALUE_E: CellValue = -2

# Field size limits (width, height)
GEOMETRY_LIMITS_MIN: Size = (5, 5)
GEOMETRY_LIMITS_MAX: Size = (500, 500)
DEFAULT_SIZE_WH: Size = (17, 9)


class InputType(StrEnum):
    """How an external byte stream is turned into walker input.

    Members:
        BIN: Feed the stream as-is.
        HEX: Decode the stream as hexadecimal text first.
        HASH: Feed the sha256 digest of the stream (use for large inputs).
    """

    BIN = auto()
    HEX = auto()
    HASH = auto()
