"""Dense persistent 2D cell storage.

``Grid`` keeps ``width * height`` integer cells in a single
``pyrsistent.PVector`` indexed by ``y * width + x``. Updates return a new
``Grid`` sharing structure with the old one, so a grid handed to the renderer
can never change underneath it.

Addressing is done through one accessor pair (:meth:`Grid.get` /
:meth:`Grid.set`) taking a :class:`drunken_bishop.position.Position`. Bounds
are the caller's responsibility; violating them raises ``IndexError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from drunken_bishop.position import Position
from drunken_bishop.types import CellValue


@dataclass(frozen=True)
class Grid:
    """Immutable ``width`` x ``height`` field of cell values.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        cells (PVector[CellValue]): Row-major cell values, ``len == width * height``.
    """

    width: int
    height: int
    cells: PVector[CellValue]

    @classmethod
    def filled(cls, width: int, height: int, init: CellValue = 0) -> Grid:
        """Return a grid with every cell set to ``init``.

        Raises:
            ValueError: If ``width`` or ``height`` is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        return cls(width, height, pvector([init] * (width * height)))

    def get(self, pos: Position) -> CellValue:
        return self.cells[self.index(pos)]

    def set(self, pos: Position, value: CellValue) -> Grid:
        """Return a copy of this grid with the cell at ``pos`` replaced."""
        return Grid(self.width, self.height, self.cells.set(self.index(pos), value))

    def rows(self) -> Iterator[Tuple[CellValue, ...]]:
        """Yield rows top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield tuple(self.cells[start : start + self.width])

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def index(self, pos: Position) -> int:
        """Offset of ``pos`` in :attr:`cells`, for batch updates via an evolver."""
        if not self.contains(pos):
            raise IndexError(
                f"Out of bounds: {(pos.x, pos.y)} for grid {self.width}x{self.height}"
            )
        return pos.y * self.width + pos.x
