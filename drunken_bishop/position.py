"""Position value.

Immutable integer grid coordinates used for the bishop's cursor and for
addressing cells of a :class:`drunken_bishop.grid.Grid`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
