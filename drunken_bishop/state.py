"""Immutable walk snapshot.

A :class:`WalkState` captures everything the drunken bishop knows at one point
of its walk: the visit counters accumulated so far and where it currently
stands. Reducers in :mod:`drunken_bishop.step` take a ``WalkState`` plus input
and return a *new* one; nothing is mutated in place, which makes the walk
trivially deterministic and independent of how the input was chunked.
"""

from dataclasses import dataclass

from drunken_bishop.grid import Grid
from drunken_bishop.position import Position


@dataclass(frozen=True)
class WalkState:
    """Walk in progress.

    Attributes:
        grid (Grid): Visit counters; the start cell holds ``VALUE_S``.
        position (Position): Current bishop position, always inside ``grid``.
        consumed (int): Number of input bytes walked so far.
    """

    grid: Grid
    position: Position
    consumed: int = 0

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height
